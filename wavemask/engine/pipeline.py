"""Pipeline orchestrator — runs path steps in dependency order.

A recipe is a step tag: ``invert``, ``flip``, ``mirror`` or ``enclose``.
Step failures never escape ``run``; they land in ``ctx.errors`` and the
context keeps the last good text.
"""

from __future__ import annotations

import logging
import time

from wavemask.engine import steps  # noqa: F401  (registers the steps)
from wavemask.engine.config import PipelineConfig
from wavemask.engine.context import PathContext
from wavemask.engine.registry import TransformRegistry, TransformSpec, get_registry

logger = logging.getLogger(__name__)

RECIPES = ("invert", "flip", "mirror", "enclose")


class Pipeline:
    """Orchestrates the step pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def plan(self, recipe: str) -> list[TransformSpec]:
        return self.registry.plan(recipe)

    def run(self, ctx: PathContext, recipe: str = "invert") -> PathContext:
        """Run every step tagged ``recipe`` on the given context."""
        start = time.perf_counter()
        if ctx.precision is None:
            ctx.precision = self.config.precision

        ordered = self.plan(recipe)
        logger.info("Pipeline[%s]: %d steps queued", recipe, len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_transforms.append(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline[%s] complete: %d/%d steps in %.1fms",
            recipe,
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)


def run_recipe(
    path_data: str,
    recipe: str = "invert",
    width: float = 1000.0,
    height: float = 100.0,
    config: PipelineConfig | None = None,
) -> PathContext:
    ctx = PathContext(source=path_data, width=width, height=height)
    return create_pipeline(config).run(ctx, recipe)

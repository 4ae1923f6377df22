"""Step registry — path steps register themselves with ``@transform``.

A step lists two kinds of edges:

- ``dependencies``: steps that must run first and are pulled into any plan
  that includes this one (everything needs the parse step).
- ``after``: ordering only. If both steps are in a plan, the listed ones run
  first; they are never pulled in on their own. This is how serialize waits
  for flip and mirror without forcing both into every recipe.

Recipes are tags; ``plan(tag)`` returns the tagged steps plus their
dependencies in a valid run order.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from wavemask.engine.context import PathContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    TEXT_REWRITE = 0
    PARSING = 1
    GEOMETRY = 2
    SERIALIZATION = 3


StepFn = Callable[["PathContext"], None]


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: StepFn
    dependencies: list[str] = field(default_factory=list)
    after: list[str] = field(default_factory=list)
    tags: set[str] = field(default_factory=set)
    description: str = ""


class TransformRegistry:
    def __init__(self) -> None:
        self._steps: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._steps:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._steps[spec.id] = spec
        logger.debug("Registered step %s (%s)", spec.id, spec.layer.name)

    @property
    def count(self) -> int:
        return len(self._steps)

    def tagged(self, tag: str) -> set[str]:
        return {sid for sid, s in self._steps.items() if tag in s.tags}

    def _with_dependencies(self, ids: set[str]) -> set[str]:
        unknown = ids - self._steps.keys()
        if unknown:
            raise KeyError(f"Unknown transform IDs: {sorted(unknown)}")
        closed: set[str] = set()
        stack = list(ids)
        while stack:
            sid = stack.pop()
            if sid not in closed:
                closed.add(sid)
                stack.extend(self._steps[sid].dependencies)
        return closed

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[TransformSpec]:
        """Run order for ``requested_ids`` (all steps if None) plus their dependencies.

        Both ``dependencies`` and ``after`` edges constrain the order; among
        steps that are free to run, the lower (layer, id) goes first.
        """
        ids = set(self._steps) if requested_ids is None else self._with_dependencies(requested_ids)

        preds: dict[str, set[str]] = {
            sid: {p for p in (*self._steps[sid].dependencies, *self._steps[sid].after) if p in ids}
            for sid in ids
        }

        ordered: list[TransformSpec] = []
        while preds:
            ready = [sid for sid, p in preds.items() if not p]
            if not ready:
                raise ValueError(f"Circular dependency detected among: {set(preds)}")
            nxt = min(ready, key=lambda sid: (self._steps[sid].layer, sid))
            ordered.append(self._steps[nxt])
            del preds[nxt]
            for p in preds.values():
                p.discard(nxt)
        return ordered

    def plan(self, tag: str) -> list[TransformSpec]:
        requested = self.tagged(tag)
        if not requested:
            raise ValueError(f"Unknown recipe: {tag!r}")
        return self.resolve_order(requested)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    after: list[str] | None = None,
    tags: set[str] | None = None,
    description: str = "",
):
    """Register the decorated function as a pipeline step."""

    def decorator(fn: StepFn) -> StepFn:
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                after=after or [],
                tags=tags or set(),
                description=description,
            )
        )
        return fn

    return decorator

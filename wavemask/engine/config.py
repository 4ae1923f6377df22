"""Pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Tuning knobs for a single pipeline run."""

    # Decimal places used when serializing; None = shortest repr
    precision: int | None = None

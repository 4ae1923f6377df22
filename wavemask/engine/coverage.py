"""Mask coverage — how much of the viewBox a path fills."""

from __future__ import annotations

import logging

from wavemask.svg.parser import sample_path_points
from wavemask.utils.geometry import covered_fraction

logger = logging.getLogger(__name__)


def mask_coverage(
    path_data: str,
    width: float,
    height: float,
    samples_per_segment: int = 24,
) -> float:
    """Fraction of the width × height frame covered by the closed path.

    Returns 0.0 for paths that cannot be sampled into a region.
    """
    points = sample_path_points(path_data, samples_per_segment)
    if len(points) < 3:
        logger.warning("Coverage: path yields %d sample points, treating as empty", len(points))
        return 0.0
    frac = covered_fraction(points, width, height)
    logger.debug("Coverage %.4f for %d points in %sx%s", frac, len(points), width, height)
    return frac

"""SVG document helpers — viewBox and top-level path lookup, path sampling.

Only the first ``<path d="...">`` of a document is ever looked at; this is
not a general SVG parser.
"""

from __future__ import annotations

import logging
import re

import numpy as np
from numpy.typing import NDArray
from svgpathtools import parse_path

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*"([^"]+)"')
_PATH_D_RE = re.compile(r'(<path\s+d=")([^"]+)(")')


def extract_viewbox(svg_text: str) -> tuple[float, float] | None:
    """(width, height) from the viewBox attribute, or None if absent/invalid."""
    vb_match = _VIEWBOX_RE.search(svg_text)
    if not vb_match:
        return None
    parts = vb_match.group(1).replace(",", " ").split()
    if len(parts) < 4:
        return None
    try:
        width, height = float(parts[2]), float(parts[3])
    except ValueError:
        return None
    if width <= 0 or height <= 0:
        return None
    return width, height


def extract_path_d(svg_text: str) -> str | None:
    """The ``d`` value of the first path element, if any."""
    match = _PATH_D_RE.search(svg_text)
    if not match:
        return None
    return match.group(2)


def replace_path_d(svg_text: str, path_data: str) -> str:
    """Swap the ``d`` attribute of the first path element for ``path_data``."""
    return _PATH_D_RE.sub(lambda m: f"{m.group(1)}{path_data}{m.group(3)}", svg_text, count=1)


def sample_path_points(path_data: str, samples_per_segment: int = 24) -> NDArray[np.float64]:
    """Sample a path ``d`` string into an Nx2 point array via svgpathtools.

    Returns an empty array when the path cannot be parsed.
    """
    try:
        path = parse_path(path_data)
    except Exception as e:
        logger.warning("Failed to parse path: %s", e)
        return np.empty((0, 2))

    points: list[tuple[float, float]] = []
    for seg in path:
        for t in np.linspace(0, 1, samples_per_segment):
            try:
                pt = seg.point(t)
            except Exception:
                continue
            points.append((pt.real, pt.imag))

    if not points:
        return np.empty((0, 2))
    return np.array(points, dtype=np.float64)

"""Mask inversion entry points — path strings and whole SVG documents."""

from __future__ import annotations

import logging

from wavemask.config import settings
from wavemask.engine.transforms import invert
from wavemask.svg.parser import extract_path_d, extract_viewbox, replace_path_d
from wavemask.svg.serializer import serialize_path
from wavemask.svg.tokenizer import parse_path_data

logger = logging.getLogger(__name__)


def invert_path(
    path_data: str,
    width: float = 1000.0,
    height: float = 100.0,
    precision: int | None = None,
) -> str:
    """Parse, flip vertically, mirror + reverse, serialize.

    Input with no recognisable commands comes back as an empty string.
    """
    commands = parse_path_data(path_data)
    if not len(commands):
        logger.debug("invert_path: no commands in %r", path_data[:40])
        return ""
    return serialize_path(invert(commands, width, height), precision)


def invert_svg_mask(
    svg_text: str,
    width: float | None = None,
    height: float | None = None,
    precision: int | None = None,
) -> str:
    """Invert the first path of an SVG document, leaving the rest untouched.

    Width and height default to the document viewBox, then to settings.
    A document without a path is returned unchanged.
    """
    path_data = extract_path_d(svg_text)
    if not path_data:
        logger.warning("No path found in SVG")
        return svg_text

    viewbox = extract_viewbox(svg_text)
    if width is None:
        width = viewbox[0] if viewbox else settings.default_width
    if height is None:
        height = viewbox[1] if viewbox else settings.default_height

    inverted = invert_path(path_data, width, height, precision)
    return replace_path_d(svg_text, inverted)

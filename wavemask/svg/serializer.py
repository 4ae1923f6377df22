"""Write path data and minimal mask documents back out as text."""

from __future__ import annotations

import logging
import math

from wavemask.svg.commands import PathCommand, PathData

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


def format_number(value: float, precision: int | None = None) -> str:
    """Shortest text that reads back as ``value``.

    Integral values drop the fractional part and negative zero prints as ``0``.
    """
    value = float(value)
    if precision is not None:
        value = round(value, precision)
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def serialize_command(cmd: PathCommand, precision: int | None = None) -> str:
    """Letter plus comma-separated numbers. Non-finite values are left out."""
    finite = [n for n in cmd.args if math.isfinite(n)]
    if len(finite) != len(cmd.args):
        logger.warning("Dropped %d non-finite arguments from %s", len(cmd.args) - len(finite), cmd.letter)
    return cmd.letter + ",".join(format_number(n, precision) for n in finite)


def serialize_path(path: PathData, precision: int | None = None) -> str:
    """``M0,0 L10,5 Z`` style output: one space between commands."""
    return " ".join(serialize_command(cmd, precision) for cmd in path)


def path_to_svg(path_data: str, width: float, height: float) -> str:
    """Wrap a single path into a standalone SVG document sized to its viewBox."""
    w = format_number(width)
    h = format_number(height)
    return f'<svg xmlns="{SVG_NS}" viewBox="0 0 {w} {h}"><path d="{path_data}"/></svg>'

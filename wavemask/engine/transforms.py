"""Geometric path transforms — vertical flip and horizontal mirror + reverse.

Both are pure functions over PathData. Which argument slots move is read from
the per-letter role table, never inferred from index parity:

- absolute commands reflect against the edge: ``new = extent - old``
- relative commands only flip the sign of the delta: ``new = -old``

Relative arcs (``a``) are passed through untouched, and the arc sweep flag is
not toggled by either transform. A true mirror of an arc would need the sweep
bit inverted.
"""

from __future__ import annotations

import logging

import numpy as np

from wavemask.svg.commands import ArgRole, PathCommand, PathData

logger = logging.getLogger(__name__)


def _role_mask(cmd: PathCommand, role: ArgRole) -> np.ndarray:
    spec = cmd.spec
    return np.array([spec.role_at(i) is role for i in range(len(cmd.args))], dtype=bool)


def reflect_command(cmd: PathCommand, role: ArgRole, extent: float) -> PathCommand:
    """Reflect every ``role`` slot of one command across ``extent``.

    Operates element-wise over whatever arguments are present, so short
    argument lists come back short rather than failing.
    """
    if not cmd.args or cmd.is_closepath or cmd.letter == "a":
        return cmd

    mask = _role_mask(cmd, role)
    if not mask.any():
        return cmd

    args = np.asarray(cmd.args, dtype=np.float64)
    moved = extent - args if cmd.is_absolute else -args
    out = np.where(mask, moved, args)
    return cmd.with_args(tuple(float(v) for v in out))


def vertical_flip(path: PathData, height: float) -> PathData:
    """Flip a path across the horizontal line y = height / 2."""
    return PathData(tuple(reflect_command(cmd, ArgRole.Y, height) for cmd in path))


def mirror_reverse(path: PathData, width: float) -> PathData:
    """Reverse command order and mirror X across x = width / 2."""
    return PathData(tuple(reflect_command(cmd, ArgRole.X, width) for cmd in path.reversed()))


def invert(path: PathData, width: float, height: float) -> PathData:
    """Full inversion: vertical flip followed by mirror + reverse."""
    if not len(path):
        logger.debug("invert: empty path, nothing to do")
        return path
    return mirror_reverse(vertical_flip(path, height), width)

"""Baseline-wave enclosure rewrite.

A "bottom" wave is authored as a closed shape that starts at the bottom-left
corner ``M0,H``, traces the curve and closes along the bottom edge with
``L W,H L0,H Z``. Rewriting the start to ``M0,0 L0,H`` and the end to
``L W,0 Z`` turns the same curve into the lower boundary of the region that
fills everything above it.

Inputs that do not follow the convention are still rewritten, best effort:
the prefix is prepended and the closing suffix appended. The result says
which happened via ``EnclosureOutcome``.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field

from wavemask.svg.serializer import format_number

logger = logging.getLogger(__name__)


class EnclosureOutcome(str, enum.Enum):
    MATCHED = "matched"
    FALLBACK_APPLIED = "fallback_applied"


@dataclass
class EnclosureResult:
    path: str
    outcome: EnclosureOutcome = EnclosureOutcome.MATCHED
    diagnostics: list[str] = field(default_factory=list)

    @property
    def matched(self) -> bool:
        return self.outcome is EnclosureOutcome.MATCHED


def _num(value: float) -> str:
    return re.escape(format_number(value))


def enclose_path_above(
    path_data: str,
    width: float = 1000.0,
    height: float = 100.0,
) -> EnclosureResult:
    """Rewrite a baseline-closed wave so it encloses the area above the curve. Never raises."""
    trimmed = path_data.strip()
    if not trimmed:
        return EnclosureResult(
            path=path_data,
            outcome=EnclosureOutcome.FALLBACK_APPLIED,
            diagnostics=["empty path data; nothing to enclose"],
        )

    w, h = format_number(width), format_number(height)
    diagnostics: list[str] = []

    # M0,H not followed by more digits, so M0,1000 is not mistaken for M0,100
    start_re = re.compile(rf"^M0,{_num(height)}(?![\d.])(\s?)")
    if start_re.search(trimmed):
        result = start_re.sub(lambda m: f"M0,0 L0,{h}{m.group(1)}", trimmed, count=1)
    else:
        logger.warning("Path start does not match expected bottom baseline; prefixing manually.")
        diagnostics.append(f"start is not M0,{h}; prefix prepended")
        result = f"M0,0 L0,{h} {trimmed}"

    end_re = re.compile(rf"L{_num(width)},{_num(height)}\s*L0,{_num(height)}\s*Z$")
    closed_re = re.compile(rf"L\s*{_num(width)},0\s*Z$", re.IGNORECASE)

    if end_re.search(result):
        result = end_re.sub(f"L{w},0 Z", result, count=1)
    elif not closed_re.search(result):
        logger.warning("Path end does not close along the bottom edge; appending top closure.")
        diagnostics.append(f"end is not L{w},{h} L0,{h} Z; closure appended")
        result = f"{result} L{w},0 Z"

    outcome = EnclosureOutcome.FALLBACK_APPLIED if diagnostics else EnclosureOutcome.MATCHED
    return EnclosureResult(path=result, outcome=outcome, diagnostics=diagnostics)


def enclose_path(path_data: str, width: float = 1000.0, height: float = 100.0) -> str:
    return enclose_path_above(path_data, width, height).path

"""PathContext — the single mutable state object flowing through a pipeline run.

Text-level steps read and write ``text``; geometry steps work on ``commands``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wavemask.engine.enclosure import EnclosureOutcome
from wavemask.svg.commands import PathData


@dataclass
class PathContext:
    """Shared state for one path going through the pipeline."""

    # Path data as received
    source: str = ""
    # Current textual form; starts as source, rewritten by text and serialize steps
    text: str = ""
    # Parsed commands (populated by the parse step)
    commands: PathData = field(default_factory=PathData)
    # viewBox dimensions
    width: float = 1000.0
    height: float = 100.0
    # Decimal places for serialized numbers; None = shortest repr
    precision: int | None = None
    # Set by the enclosure step
    enclosure: EnclosureOutcome | None = None
    # Non-fatal findings (arity problems, fallbacks)
    diagnostics: list[str] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_transforms: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.text:
            self.text = self.source

    @property
    def num_commands(self) -> int:
        return len(self.commands)

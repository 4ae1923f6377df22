"""Path command model — typed drawing commands and the per-letter grammar table.

Each letter maps to a fixed arity and a role for every argument slot, so the
transforms can ask "which slots are X?" instead of guessing from index parity.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field


class ArgRole(enum.Enum):
    X = "x"
    Y = "y"
    RADIUS = "radius"
    ROTATION = "rotation"
    FLAG = "flag"


@dataclass(frozen=True)
class CommandSpec:
    letter: str
    name: str
    roles: tuple[ArgRole, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.roles)

    def role_at(self, index: int) -> ArgRole | None:
        """Role of argument ``index``; repeated groups reuse the table."""
        if not self.roles:
            return None
        return self.roles[index % self.arity]


_XY = (ArgRole.X, ArgRole.Y)

COMMAND_SPECS: dict[str, CommandSpec] = {
    "M": CommandSpec("M", "moveto", _XY),
    "L": CommandSpec("L", "lineto", _XY),
    "H": CommandSpec("H", "horizontal lineto", (ArgRole.X,)),
    "V": CommandSpec("V", "vertical lineto", (ArgRole.Y,)),
    "C": CommandSpec("C", "curveto", _XY * 3),
    "S": CommandSpec("S", "smooth curveto", _XY * 2),
    "Q": CommandSpec("Q", "quadratic curveto", _XY * 2),
    "T": CommandSpec("T", "smooth quadratic curveto", _XY),
    "A": CommandSpec(
        "A",
        "elliptical arc",
        (
            ArgRole.RADIUS,
            ArgRole.RADIUS,
            ArgRole.ROTATION,
            ArgRole.FLAG,
            ArgRole.FLAG,
            ArgRole.X,
            ArgRole.Y,
        ),
    ),
    "Z": CommandSpec("Z", "closepath"),
}

COMMAND_LETTERS = frozenset(COMMAND_SPECS) | frozenset(k.lower() for k in COMMAND_SPECS)


@dataclass(frozen=True)
class PathCommand:
    """One drawing command: its letter plus whatever numbers followed it."""

    letter: str
    args: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if self.letter not in COMMAND_LETTERS:
            raise ValueError(f"Unknown path command: {self.letter!r}")

    @property
    def spec(self) -> CommandSpec:
        return COMMAND_SPECS[self.letter.upper()]

    @property
    def is_absolute(self) -> bool:
        # Closepath has no coordinates, so its case carries no meaning
        return self.letter.isupper() or self.letter == "z"

    @property
    def is_closepath(self) -> bool:
        return self.letter in ("Z", "z")

    def with_args(self, args: tuple[float, ...]) -> PathCommand:
        return PathCommand(self.letter, tuple(args))


@dataclass(frozen=True)
class PathData:
    """Ordered sequence of commands making up one ``d`` attribute."""

    commands: tuple[PathCommand, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __getitem__(self, index: int) -> PathCommand:
        return self.commands[index]

    @property
    def letters(self) -> str:
        return "".join(cmd.letter for cmd in self.commands)

    def reversed(self) -> PathData:
        return PathData(tuple(reversed(self.commands)))


def validate_path_data(path: PathData) -> list[str]:
    """Report commands whose argument count does not fit the grammar.

    Never raises; an empty list means every command is well formed.
    """
    problems: list[str] = []
    for i, cmd in enumerate(path):
        arity = cmd.spec.arity
        n = len(cmd.args)
        if arity == 0:
            if n:
                problems.append(f"command {i} ({cmd.letter}) takes no arguments, got {n}")
        elif n == 0 or n % arity:
            problems.append(
                f"command {i} ({cmd.letter}) expects a multiple of {arity} arguments, got {n}"
            )
    return problems

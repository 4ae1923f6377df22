"""Path-data tokenizer — raw ``d`` string → PathData.

Scans the string once, opening a new command at every command letter and
collecting the text in between as that command's arguments. Numbers are then
pulled from the argument text; commas and whitespace are plain separators.
"""

from __future__ import annotations

import logging
import math
import re

from wavemask.svg.commands import COMMAND_LETTERS, PathCommand, PathData

logger = logging.getLogger(__name__)

# Float literal: sign, digits with optional fraction (or a bare fraction), exponent
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def tokenize(path_data: str) -> list[tuple[str, str]]:
    """Split ``path_data`` into (letter, argument text) pairs.

    Anything before the first command letter has no command to belong to
    and is dropped.
    """
    tokens: list[tuple[str, str]] = []
    letter: str | None = None
    buf: list[str] = []
    skipped = 0

    for ch in path_data:
        if ch in COMMAND_LETTERS:
            if letter is not None:
                tokens.append((letter, "".join(buf)))
            letter = ch
            buf = []
        elif letter is None:
            if not ch.isspace():
                skipped += 1
        else:
            buf.append(ch)

    if letter is not None:
        tokens.append((letter, "".join(buf)))

    if skipped:
        logger.debug("Dropped %d characters before the first path command", skipped)
    return tokens


def extract_numbers(text: str) -> tuple[float, ...]:
    """Numbers in ``text``; literals that overflow to inf are dropped."""
    values = [float(m) for m in _NUMBER_RE.findall(text)]
    finite = tuple(v for v in values if math.isfinite(v))
    if len(finite) != len(values):
        logger.warning("Dropped %d non-finite numbers from %r", len(values) - len(finite), text[:40])
    return finite


def parse_path_data(path_data: str) -> PathData:
    """Parse a path ``d`` attribute. Empty or unrecognisable input → empty PathData."""
    if not path_data:
        return PathData()

    commands = [
        PathCommand(letter, extract_numbers(arg_text))
        for letter, arg_text in tokenize(path_data)
    ]
    return PathData(tuple(commands))

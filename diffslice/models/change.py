from dataclasses import dataclass
from typing import Optional, Tuple

ANCHOR_TOKEN = "diff --git"  # starts a new Change at line start
HUNK_MARKER = "@@"           # starts a new Hunk at line start
LINE_SEPARATOR = "\n"


@dataclass(frozen=True)
class Hunk:
    """One contiguous edited region: the '@@' range line plus its content lines."""

    range: str
    lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Change:
    """
    One diff section, normally one file.

    `header` holds every line before the first hunk marker (all lines when the
    section has no hunks). Lines are kept verbatim, including the empty string
    left by a trailing newline.
    """

    header: Tuple[str, ...]
    hunks: Optional[Tuple[Hunk, ...]] = ()

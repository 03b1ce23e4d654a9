# diffslice/parser.py
from __future__ import annotations

import logging
import re
from typing import List

from ._logging import resolve_logger
from .models.change import ANCHOR_TOKEN, HUNK_MARKER, LINE_SEPARATOR, Change, Hunk

__all__ = ["parse"]

_ANCHOR_RE = re.compile(r"^" + re.escape(ANCHOR_TOKEN), flags=re.MULTILINE)


def _split_sections(text: str) -> tuple[str, list[str]]:
    """
    Cut `text` at every line-start anchor token.
    Returns (preamble, sections); each section keeps its anchor and runs up to
    the next anchor or end of input.
    """
    starts = [m.start() for m in _ANCHOR_RE.finditer(text)]
    if not starts:
        return text, []
    bounds = starts + [len(text)]
    sections = [text[bounds[i]:bounds[i + 1]] for i in range(len(starts))]
    return text[:starts[0]], sections


def _tokenize_section(section: str) -> Change:
    header: list[str] = []
    hunks: list[Hunk] = []
    cur_range: str | None = None
    cur_lines: list[str] = []

    for line in section.split(LINE_SEPARATOR):
        if line.startswith(HUNK_MARKER):
            if cur_range is not None:
                hunks.append(Hunk(range=cur_range, lines=tuple(cur_lines)))
            cur_range = line
            cur_lines = []
        elif cur_range is None:
            header.append(line)
        else:
            cur_lines.append(line)

    if cur_range is not None:
        hunks.append(Hunk(range=cur_range, lines=tuple(cur_lines)))

    return Change(header=tuple(header), hunks=tuple(hunks))


def parse(
    text: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[Change]:
    """
    Split unified diff text into an ordered list of Change records.

    This is a classifying tokenizer, not a validator: every line is placed by
    its literal prefix alone and nothing is ever rejected. Text before the
    first 'diff --git' line is discarded, so input without one yields [].
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    preamble, sections = _split_sections(text)
    if preamble and sections:
        lg.debug("discarding %d chars before first %r line", len(preamble), ANCHOR_TOKEN)

    changes = [_tokenize_section(s) for s in sections]
    lg.debug(
        "parsed %d change(s) with %d hunk(s)",
        len(changes),
        sum(len(ch.hunks) for ch in changes),
    )
    return changes

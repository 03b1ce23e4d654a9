# diffslice/serializer.py
from __future__ import annotations

from typing import Iterable

from .models.change import LINE_SEPARATOR, Change

__all__ = ["unparse"]


def _unparse_change(change: Change) -> str:
    lines = list(change.header)
    for hunk in change.hunks or ():
        lines.append(hunk.range)
        lines.extend(hunk.lines)
    return LINE_SEPARATOR.join(lines)


def unparse(changes: Iterable[Change]) -> str:
    """
    Inverse of `parse`: render Change records back to diff text.

    Parsed sections already end with the empty line their trailing newline
    produced, so they are concatenated as-is. A section that lost its final
    hunk to `partition` does not; a separator is added before the next
    section in that case only. The end of the output is left as is, so a
    side whose last change lost its final hunk ends without a newline.
    """
    parts: list[str] = []
    for change in changes:
        if parts and not parts[-1].endswith(LINE_SEPARATOR):
            parts.append(LINE_SEPARATOR)
        parts.append(_unparse_change(change))
    return "".join(parts)

"""
Ready-made predicates for `partition`.

    from diffslice import parse, partition
    from diffslice.predicates import hunk_contains, matches_paths

    matched, rest = partition(
        parse(text),
        change_predicate=matches_paths(["docs/**"]),
        hunk_predicate=hunk_contains("PricebookEntry"),
    )
"""
from __future__ import annotations

from typing import Callable, Iterable, TypeVar

import pathspec

from .metadata import change_paths
from .models.change import Change, Hunk

__all__ = ["hunk_contains", "change_contains", "matches_paths", "negate"]

T = TypeVar("T")


def hunk_contains(text: str) -> Callable[[Hunk], bool]:
    """True for a hunk with any content line containing `text` (the range line is not searched)."""

    def _pred(hunk: Hunk) -> bool:
        return any(text in line for line in hunk.lines)

    return _pred


def change_contains(text: str) -> Callable[[Change], bool]:
    """True for a change whose header or any hunk line contains `text`."""
    in_hunk = hunk_contains(text)

    def _pred(change: Change) -> bool:
        if any(text in line for line in change.header):
            return True
        return any(in_hunk(h) for h in change.hunks or ())

    return _pred


def matches_paths(patterns: Iterable[str]) -> Callable[[Change], bool]:
    """
    True for a change whose old or new path matches any of the
    gitwildmatch `patterns` (same syntax as .gitignore).
    """
    spec = pathspec.PathSpec.from_lines("gitwildmatch", list(patterns))

    def _pred(change: Change) -> bool:
        return any(p is not None and spec.match_file(p) for p in change_paths(change))

    return _pred


def negate(predicate: Callable[[T], bool]) -> Callable[[T], bool]:
    def _pred(item: T) -> bool:
        return not predicate(item)

    return _pred

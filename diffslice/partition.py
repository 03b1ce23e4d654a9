# diffslice/partition.py
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional

from ._logging import resolve_logger
from .models.change import Change, Hunk

__all__ = ["PartitionResult", "partition"]

ChangePredicate = Callable[[Change], bool]
HunkPredicate = Callable[[Hunk], bool]


@dataclass
class PartitionResult:
    """Outcome of `partition`. Unpacks as `matched, rest`."""

    matched: List[Change] = field(default_factory=list)
    rest: List[Change] = field(default_factory=list)

    def __iter__(self) -> Iterator[List[Change]]:
        return iter((self.matched, self.rest))


def partition(
    changes: Iterable[Change],
    change_predicate: Optional[ChangePredicate] = None,
    hunk_predicate: Optional[HunkPredicate] = None,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> PartitionResult:
    """
    Separate changes into `matched` and `rest`, whole or hunk by hunk.

    Args:
        changes: Parsed Change records, in source order.
        change_predicate: If it returns True for a Change, the whole Change
            goes to `matched` untouched.
        hunk_predicate: Otherwise, each hunk is tested on its own; hunks that
            match and hunks that don't are regrouped under copies of the
            original header, so a single Change may land on both sides.
            Changes with no hunks always go to `rest` whole.
        logger/log: Opt-in debug logging.

    Hunks are shared by reference and never altered. Predicate exceptions
    propagate unchanged; nothing is returned in that case.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    matched: List[Change] = []
    rest: List[Change] = []
    split_count = 0

    for change in changes:
        if change_predicate is not None and change_predicate(change):
            matched.append(change)
            continue

        if not change.hunks or hunk_predicate is None:
            rest.append(change)
            continue

        matched_hunks: List[Hunk] = []
        rest_hunks: List[Hunk] = []
        for hunk in change.hunks:
            if hunk_predicate(hunk):
                matched_hunks.append(hunk)
            else:
                rest_hunks.append(hunk)

        if matched_hunks and rest_hunks:
            split_count += 1
        # Keep the original header on both halves.
        if rest_hunks:
            rest.append(dataclasses.replace(change, hunks=tuple(rest_hunks)))
        if matched_hunks:
            matched.append(dataclasses.replace(change, hunks=tuple(matched_hunks)))

    lg.debug(
        "partitioned into %d matched / %d rest change(s), %d split by hunk",
        len(matched),
        len(rest),
        split_count,
    )
    return PartitionResult(matched=matched, rest=rest)

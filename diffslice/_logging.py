"""
Opt-in logging for diffslice.

Public operations take `logger=` and `log=` keywords and pass them to
`resolve_logger`. With neither given they get a NoopLogger, so parsing and
partitioning stay silent unless the caller asks otherwise.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger that propagates
      to the root (so pytest's caplog sees it).
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "diffslice")
        lg.setLevel(level)
        lg.propagate = True
        return lg
    return NoopLogger()

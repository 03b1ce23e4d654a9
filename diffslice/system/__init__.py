"""
File helpers around the in-memory core.

Public API:
  - read_diff(path: str, *, encoding: str = "utf-8") -> str
  - write_diff(path: str, text: str, *, encoding: str = "utf-8") -> str

Files are opened with newline="" so CRLF line endings reach the parser
untouched, and with errors="surrogateescape" so bytes that are not valid in
`encoding` (Latin-1 payloads, binary noise) survive a read/write cycle.
"""
from __future__ import annotations

import contextlib
import os
import tempfile

from ..errors import DiffIOError

__all__ = ["read_diff", "write_diff"]

_ERRORS = "surrogateescape"


def read_diff(path: str, *, encoding: str = "utf-8") -> str:
    """Read a diff file verbatim."""
    try:
        with open(path, "r", encoding=encoding, errors=_ERRORS, newline="") as f:
            return f.read()
    except (OSError, UnicodeError) as e:
        raise DiffIOError(f"Failed to read diff '{path}': {e}") from e


def write_diff(path: str, text: str, *, encoding: str = "utf-8") -> str:
    """
    Write `text` to `path` verbatim, creating parent directories as needed.

    The text is staged in a temp file next to `path` and promoted with
    os.replace(), so a failed write leaves any existing file untouched.
    Returns the real path of the written file.
    """
    dest = os.path.abspath(path)
    tmp: str | None = None
    try:
        dirpath = os.path.dirname(dest)
        os.makedirs(dirpath, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=".diffslice-", suffix=".tmp", dir=dirpath)
        with os.fdopen(fd, "w", encoding=encoding, errors=_ERRORS, newline="") as f:
            f.write(text)
        os.replace(tmp, dest)
    except Exception as e:
        if tmp is not None:
            with contextlib.suppress(OSError):
                os.remove(tmp)
        if isinstance(e, (OSError, UnicodeError)):
            raise DiffIOError(f"Failed to write diff '{path}': {e}") from e
        raise
    return os.path.realpath(dest)

# diffslice/metadata.py
import re
from typing import Dict, Optional, Tuple

from .models.change import Change

__all__ = [
    "change_paths",
    "change_path",
    "detect_rename",
    "is_new_file",
    "is_deleted_file",
]

_DIFF_GIT_RE = re.compile(r"^diff --git a/(.+?) b/(.+)$")
_OLD_RE = re.compile(r"^--- (?:a/)?(.+)$")
_NEW_RE = re.compile(r"^\+\+\+ (?:b/)?(.+)$")
_DEV_NULL = "/dev/null"


def _clean_path(raw: str) -> Optional[str]:
    # '--- a/path/to/file\t2024-01-01 00:00' -> 'path/to/file'
    path = raw.strip().split("\t")[0].replace("\\", "/")
    if not path or path == _DEV_NULL:
        return None
    return path


def _header_text(change: Change) -> str:
    return "\n".join(change.header)


def change_paths(change: Change) -> Tuple[Optional[str], Optional[str]]:
    """
    Return (old_path, new_path) for a Change.
    '---'/'+++' lines win; '/dev/null' becomes None. When they are missing
    (renames, mode changes, binary stubs) the 'diff --git' line is used.
    """
    old_path: Optional[str] = None
    new_path: Optional[str] = None
    saw_old = saw_new = False
    git_old: Optional[str] = None
    git_new: Optional[str] = None

    for line in change.header:
        line = line.rstrip("\r")
        m = _DIFF_GIT_RE.match(line)
        if m and git_old is None:
            git_old, git_new = _clean_path(m.group(1)), _clean_path(m.group(2))
            continue
        m = _OLD_RE.match(line)
        if m and not saw_old:
            saw_old = True
            old_path = _clean_path(m.group(1))
            continue
        m = _NEW_RE.match(line)
        if m and not saw_new:
            saw_new = True
            new_path = _clean_path(m.group(1))

    if not saw_old:
        old_path = git_old
    if not saw_new:
        new_path = git_new
    return old_path, new_path


def change_path(change: Change) -> Optional[str]:
    """The path a Change is about: the new path, or the old one for deletions."""
    old_path, new_path = change_paths(change)
    return new_path or old_path


def detect_rename(change: Change) -> Optional[Dict[str, str]]:
    """Detects 'rename from'/'rename to' in a Change header."""
    code = _header_text(change)
    rename_from_match = re.search(r"^rename from (.+?)\r?$", code, re.MULTILINE)
    rename_to_match = re.search(r"^rename to (.+?)\r?$", code, re.MULTILINE)
    if rename_from_match and rename_to_match:
        return {
            "from_path": rename_from_match.group(1).strip(),
            "to_path": rename_to_match.group(1).strip(),
        }
    return None


def is_new_file(change: Change) -> bool:
    if re.search(r"^new file mode \d+", _header_text(change), re.MULTILINE):
        return True
    old_path, new_path = change_paths(change)
    return old_path is None and new_path is not None and _has_side(change, "--- ")


def is_deleted_file(change: Change) -> bool:
    if re.search(r"^deleted file mode \d+", _header_text(change), re.MULTILINE):
        return True
    old_path, new_path = change_paths(change)
    return new_path is None and old_path is not None and _has_side(change, "+++ ")


def _has_side(change: Change, prefix: str) -> bool:
    return any(line.startswith(prefix) for line in change.header)

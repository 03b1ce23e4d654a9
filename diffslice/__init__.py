from .errors import DiffIOError, DiffSliceError
from .metadata import change_path, change_paths, detect_rename, is_deleted_file, is_new_file
from .models import ANCHOR_TOKEN, HUNK_MARKER, LINE_SEPARATOR, Change, Hunk
from .parser import parse
from .partition import PartitionResult, partition
from .serializer import unparse
from .system import read_diff, write_diff

__all__ = [
    "Change",
    "Hunk",
    "ANCHOR_TOKEN",
    "HUNK_MARKER",
    "LINE_SEPARATOR",
    "parse",
    "unparse",
    "partition",
    "PartitionResult",
    "change_paths",
    "change_path",
    "detect_rename",
    "is_new_file",
    "is_deleted_file",
    "read_diff",
    "write_diff",
    "DiffSliceError",
    "DiffIOError",
]

from .base import DiffSliceError


class DiffIOError(DiffSliceError):
    """Reading or writing diff text on disk failed."""

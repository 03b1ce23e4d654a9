from .base import DiffSliceError
from .io import DiffIOError

__all__ = ["DiffSliceError", "DiffIOError"]

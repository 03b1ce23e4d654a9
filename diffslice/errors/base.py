class DiffSliceError(Exception):
    """Base class for errors raised by diffslice."""

"""Exception types raised by gesturemap."""


class GestureMapError(Exception):
    """Base class for all gesturemap errors."""


class MalformedInputError(GestureMapError, ValueError):
    """A record could not be parsed (bad number, missing column, unequal axes)."""


class EmptySequenceError(GestureMapError, ValueError):
    """A zero-length sequence was passed where DTW needs at least one point."""


class NoTemplatesError(GestureMapError, RuntimeError):
    """Classification was attempted before any template was trained."""


class EmptyDatasetError(GestureMapError, ValueError):
    """An operation needed at least one record and got none."""

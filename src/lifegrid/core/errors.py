"""Exceptions raised by the lifegrid core."""


class LifeGridError(Exception):
    """Base class for lifegrid errors."""


class MalformedGridError(LifeGridError, ValueError):
    """Raised when a grid is not a rectangular two-dimensional structure."""


class GridDecodeError(LifeGridError, ValueError):
    """Raised when an encoded grid or settings token cannot be decoded."""

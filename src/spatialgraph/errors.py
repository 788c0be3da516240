"""
Exceptions raised by the layout engine and its collaborators.
"""


class SpatialGraphError(Exception):
    """Base class for all errors raised by spatialgraph."""


class DimensionMismatchError(SpatialGraphError, ValueError):
    """Vector operands do not have the same number of components."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Vector dimensions do not match: {left} != {right}")
        self.left = left
        self.right = right


class MissingForceModelError(SpatialGraphError, TypeError):
    """The relaxation loop was used without a concrete force model."""


class EmptyGraphError(SpatialGraphError, ValueError):
    """A layout was requested for a graph without nodes."""


class RecordFormatError(SpatialGraphError, ValueError):
    """An input record does not have the expected shape."""

"""
Elementwise vector arithmetic.

Vectors are 1-D float64 numpy arrays of any length. Every operation returns a
new array and refuses operands of different lengths instead of broadcasting.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

import numpy as np

from spatialgraph.errors import DimensionMismatchError

if TYPE_CHECKING:
    import numpy.typing as npt

VectorLike = Union[Sequence[float], "npt.NDArray[np.float64]"]


def as_vector(values: VectorLike) -> npt.NDArray[np.float64]:
    """Convert a sequence of numbers to a 1-D float64 vector (always a copy)."""
    vector = np.array(values, dtype=np.float64)
    if vector.ndim != 1:
        raise ValueError(f"Expected a 1-D vector, got shape {vector.shape}")
    return vector


def zeros(dimension: int = 3) -> npt.NDArray[np.float64]:
    """Zero vector of the given dimension."""
    return np.zeros(dimension, dtype=np.float64)


def _checked(
    a: VectorLike,
    b: VectorLike
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape != vb.shape:
        raise DimensionMismatchError(va.size, vb.size)
    return va, vb


def add(a: VectorLike, b: VectorLike) -> npt.NDArray[np.float64]:
    va, vb = _checked(a, b)
    return va + vb


def subtract(a: VectorLike, b: VectorLike) -> npt.NDArray[np.float64]:
    va, vb = _checked(a, b)
    return va - vb


def multiply(a: VectorLike, b: VectorLike) -> npt.NDArray[np.float64]:
    va, vb = _checked(a, b)
    return va * vb


def divide(a: VectorLike, b: VectorLike) -> npt.NDArray[np.float64]:
    """
    Elementwise division.

    Zero components in ``b`` follow numpy semantics (inf/nan), it is up to the
    caller to avoid them.
    """
    va, vb = _checked(a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        return va / vb


def scalar_multiply(a: VectorLike, scalar: float) -> npt.NDArray[np.float64]:
    return np.asarray(a, dtype=np.float64) * scalar


def scalar_divide(a: VectorLike, scalar: float) -> npt.NDArray[np.float64]:
    if scalar == 0.0: raise ZeroDivisionError("Cannot divide a vector by zero.")
    return np.asarray(a, dtype=np.float64) / scalar


def norm(a: VectorLike) -> float:
    """Euclidean length of a vector."""
    return float(np.sqrt(np.sum(np.square(np.asarray(a, dtype=np.float64)))))


def normalize(a: VectorLike) -> npt.NDArray[np.float64]:
    """Unit vector in the direction of ``a``; the zero vector is returned unchanged."""
    vector = np.asarray(a, dtype=np.float64)
    length = norm(vector)
    if length == 0.0:
        return vector.copy()
    return vector / length

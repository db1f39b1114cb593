"""Shared types definitions for the market model evolution package."""

import numpy as np
import numpy.typing as npt

# Type aliases for cleaner signatures
ArrayLike = npt.ArrayLike
FloatArray = npt.NDArray[np.float64]
IntArray = npt.NDArray[np.int64]

# (first, last) rate indices relevant at a step
RelevanceRange = tuple[int, int]


def as_1d(x: ArrayLike) -> FloatArray:
    """Convert scalar or array-like to 1D float array.

    Scalars become arrays of shape (1,).
    """
    a = np.asarray(x, dtype=np.float64)
    return a if a.ndim > 0 else a[None]


def as_index_array(x: ArrayLike) -> IntArray:
    """Convert a sequence of indices to a 1D int64 array."""
    a = np.asarray(x)
    if a.ndim > 1:
        raise ValueError(f"Indices must be one-dimensional, got shape {a.shape}")
    if a.size == 0:
        return np.empty(0, dtype=np.int64)
    if not np.issubdtype(a.dtype, np.integer):
        raise TypeError(f"Indices must be integers, got dtype {a.dtype}")
    return a.astype(np.int64).reshape(-1)


def frozen(a: np.ndarray) -> np.ndarray:
    """Return an array that cannot be written to."""
    a.flags.writeable = False
    return a

"""Vector norms of arrays, treated as elements of a metric linear space."""

from __future__ import annotations

from enum import Enum

import numpy as np


def norm(a) -> float:
    """Alias of :func:`norm_l2`."""
    return norm_l2(a)


def norm_l1(a) -> float:
    """Sum of absolute values of all elements."""
    return float(np.sum(np.abs(np.asarray(a))))


def norm_l2(a) -> float:
    """Square root of the sum of squared magnitudes of all elements."""
    magnitudes = np.abs(np.asarray(a))
    return float(np.sqrt(np.sum(magnitudes * magnitudes)))


def norm_max(a) -> float:
    """Largest absolute value of any element, zero for an empty array."""
    return float(np.max(np.abs(np.asarray(a)), initial=0.0))


class NormalizeAxis(Enum):
    """Which slices of a matrix :func:`normalize` scales to unit length."""

    ROW = 0
    COLUMN = 1


def normalize(m, axis: NormalizeAxis) -> tuple[np.ndarray, list[float]]:
    """Scale every row or column to unit L2 norm.

    Returns the normalized matrix and the norms the slices had before.
    """
    arr = np.asarray(m)
    result = arr.astype(np.result_type(arr.dtype, np.float64), copy=True)
    slices = result if axis is NormalizeAxis.ROW else result.T
    norms = []
    for vector in slices:
        n = norm(vector)
        norms.append(n)
        vector /= n
    return result, norms
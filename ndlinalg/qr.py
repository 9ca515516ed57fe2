"""QR decomposition."""

from __future__ import annotations

from enum import Enum

import numpy as np

from .errors import IncompatibleShapeError
from .layout import ensure_square


class UPLO(Enum):
    """Which triangle of a matrix is referenced."""

    UPPER = "U"
    LOWER = "L"


def qr(a) -> tuple[np.ndarray, np.ndarray]:
    """Reduced QR decomposition.

    For an ``n x m`` matrix with ``k = min(n, m)``, returns ``Q`` of shape
    ``n x k`` with orthonormal columns and upper-triangular ``R`` of shape
    ``k x m``.
    """
    arr = np.asarray(a)
    if arr.ndim != 2:
        raise IncompatibleShapeError(
            f"expected a 2-dimensional array, got {arr.ndim} dimensions"
        )
    q, r = np.linalg.qr(arr, mode="reduced")
    return q, np.triu(r)


def qr_square(a) -> tuple[np.ndarray, np.ndarray]:
    """QR decomposition of a square matrix; raises NotSquareError otherwise."""
    ensure_square(a)
    q, r = np.linalg.qr(np.asarray(a), mode="complete")
    return q, np.triu(r)
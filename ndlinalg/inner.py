"""Inner product of vectors."""

import numpy as np

from .errors import IncompatibleShapeError


def inner(a, b):
    """Return ``sum(conj(a) * b)``; the first argument is conjugated."""
    x = np.asarray(a)
    y = np.asarray(b)
    if x.ndim != 1 or y.ndim != 1:
        raise IncompatibleShapeError("inner product needs two 1-dimensional arrays")
    if x.shape != y.shape:
        raise IncompatibleShapeError(
            f"vector lengths differ: {x.shape[0]} != {y.shape[0]}"
        )
    return np.vdot(x, y)
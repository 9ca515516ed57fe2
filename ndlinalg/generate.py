"""Generators of matrices, mostly random ones for testing."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .errors import IncompatibleShapeError
from .qr import qr

_rng = np.random.default_rng()


def conjugate(a) -> np.ndarray:
    """Hermitian conjugate (conjugate transpose) as a new array."""
    return np.array(np.asarray(a).T.conj())


def random(shape, dtype=np.float64) -> np.ndarray:
    """Array with entries uniform in [-1, 1); complex entries in both parts."""
    dtype = np.dtype(dtype)
    if dtype.kind == "c":
        values = _rng.uniform(-1.0, 1.0, shape) + 1j * _rng.uniform(-1.0, 1.0, shape)
    elif dtype.kind == "f":
        values = _rng.uniform(-1.0, 1.0, shape)
    else:
        raise TypeError(f"unsupported element type: {dtype}")
    return values.astype(dtype)


def random_unitary(n: int, dtype=np.float64) -> np.ndarray:
    """Random unitary matrix from a QR decomposition (not uniformly distributed)."""
    q, _ = qr(random((n, n), dtype))
    return q.astype(dtype)


def random_regular(n: int, dtype=np.float64) -> np.ndarray:
    """Random non-singular matrix (not uniformly distributed)."""
    q, r = qr(random((n, n), dtype))
    np.fill_diagonal(r, 1 + np.abs(np.diagonal(r)))
    return (q @ r).astype(dtype)


def random_hermite(n: int, dtype=np.float64) -> np.ndarray:
    """Random Hermitian matrix."""
    a = random((n, n), dtype)
    lower = np.tril(a, -1)
    diag = np.diagonal(a)
    h = lower + lower.conj().T
    np.fill_diagonal(h, diag + diag.conj())
    return h


def random_hpd(n: int, dtype=np.float64) -> np.ndarray:
    """Random Hermitian positive-definite matrix with eigenvalues of at least 1."""
    a = random((n, n), dtype)
    return np.eye(n, dtype=dtype) + conjugate(a) @ a


def from_diag(d) -> np.ndarray:
    """Square matrix with ``d`` on its diagonal."""
    return np.diag(np.asarray(d))


def _stack(xs: Sequence, axis: int) -> np.ndarray:
    arrays = [np.asarray(x) for x in xs]
    if not arrays:
        raise IncompatibleShapeError("cannot stack an empty sequence of vectors")
    if any(x.ndim != 1 for x in arrays):
        raise IncompatibleShapeError("only 1-dimensional vectors can be stacked")
    if len({x.shape for x in arrays}) != 1:
        raise IncompatibleShapeError("vectors to stack differ in length")
    return np.stack(arrays, axis=axis)


def hstack(xs: Sequence) -> np.ndarray:
    """Stack vectors as the columns of a matrix."""
    return _stack(xs, axis=1)


def vstack(xs: Sequence) -> np.ndarray:
    """Stack vectors as the rows of a matrix."""
    return _stack(xs, axis=0)
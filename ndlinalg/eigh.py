"""Eigendecomposition of Hermitian (real symmetric) matrices.

For a Hermitian matrix ``A`` this solves ``A V = V D``, where ``D`` holds the
eigenvalues in ascending order and ``V`` is unitary. For a Hermitian ``A`` and
a Hermitian positive-definite ``B`` it solves the generalized problem
``A V = B V D`` with ``V`` normalized so that ``V^H B V = I``.
"""

from __future__ import annotations

import numpy as np
import scipy.linalg

from .errors import IncompatibleShapeError, LapackError
from .layout import ensure_square
from .qr import UPLO


def _hermitian_input(a) -> np.ndarray:
    arr = np.asarray(a)
    ensure_square(arr)
    if not np.issubdtype(arr.dtype, np.inexact):
        arr = arr.astype(np.float64)
    return arr


def _is_lower(uplo: UPLO) -> bool:
    if not isinstance(uplo, UPLO):
        raise TypeError(f"uplo must be a UPLO member, got {uplo!r}")
    return uplo is UPLO.LOWER


def eigh(a, uplo: UPLO) -> tuple[np.ndarray, np.ndarray]:
    """Eigenvalues (ascending) and orthonormal eigenvectors of a Hermitian matrix.

    Only the triangle selected by ``uplo`` is read.
    """
    arr = _hermitian_input(a)
    try:
        values, vectors = scipy.linalg.eigh(arr, lower=_is_lower(uplo))
    except scipy.linalg.LinAlgError as err:
        raise LapackError(1, str(err)) from err
    return values, vectors


def eigh_generalized(a, b, uplo: UPLO) -> tuple[np.ndarray, np.ndarray]:
    """Solve ``A V = B V D`` for Hermitian ``A`` and Hermitian positive-definite ``B``.

    Returns the eigenvalues in ascending order and eigenvectors normalized
    so that ``V^H B V = I``. Raises LapackError if ``B`` is not positive definite.
    """
    arr_a = np.asarray(a)
    arr_b = np.asarray(b)
    if arr_a.shape != arr_b.shape:
        raise IncompatibleShapeError(
            f"The shapes of the matrices must be identical: {arr_a.shape} != {arr_b.shape}"
        )
    arr_a = _hermitian_input(arr_a)
    arr_b = _hermitian_input(arr_b)
    dtype = np.result_type(arr_a.dtype, arr_b.dtype)
    try:
        values, vectors = scipy.linalg.eigh(
            arr_a.astype(dtype), arr_b.astype(dtype), lower=_is_lower(uplo)
        )
    except scipy.linalg.LinAlgError as err:
        raise LapackError(1, str(err)) from err
    return values, vectors


def eigvalsh(a, uplo: UPLO) -> np.ndarray:
    """Eigenvalues of a Hermitian matrix in ascending order."""
    arr = _hermitian_input(a)
    try:
        return scipy.linalg.eigh(arr, lower=_is_lower(uplo), eigvals_only=True)
    except scipy.linalg.LinAlgError as err:
        raise LapackError(1, str(err)) from err


def ssqrt(a, uplo: UPLO) -> np.ndarray:
    """Symmetric square root ``V sqrt(D) V^H`` computed from :func:`eigh`.

    Negative eigenvalues have no real root and give NaN entries.
    """
    values, vectors = eigh(a, uplo)
    with np.errstate(invalid="ignore"):
        roots = np.sqrt(values)
    return (vectors * roots) @ vectors.conj().T
"""Arnoldi iteration building an orthonormal basis of a Krylov subspace."""

from __future__ import annotations

import numpy as np

from ..errors import IncompatibleShapeError
from ..norm import norm_l2
from ..operator import LinearOperator, MatrixOperator, as_operator
from .householder import Householder
from .mgs import MGS
from .orthogonalizer import Orthogonalizer


class Arnoldi:
    """Arnoldi iteration as a Python iterator.

    Each step applies the operator to the current vector and orthogonalizes
    the result, yielding the coefficients that form one column of the
    Hessenberg matrix. Iteration stops once a linearly dependent vector
    appears.
    """

    def __init__(self, a, v, ortho: Orthogonalizer) -> None:
        if len(ortho) != 0:
            raise ValueError("the orthogonalizer must start with an empty basis")
        if not ortho.tolerance() < 1:
            raise ValueError(
                f"tolerance must be smaller than one, got {ortho.tolerance()}"
            )
        self._a: LinearOperator = as_operator(a)

        vec = np.asarray(v)
        dtype = np.result_type(vec.dtype, np.float64)
        if isinstance(self._a, MatrixOperator):
            dtype = np.result_type(dtype, self._a.matrix.dtype)
        vec = np.array(vec, dtype=dtype)
        if vec.ndim != 1:
            raise IncompatibleShapeError("the starting vector must be 1-dimensional")
        length = norm_l2(vec)
        if length == 0:
            raise ValueError("the starting vector must not be zero")
        # normalize first: |v| may be smaller than the tolerance
        vec /= length
        ortho.append(vec)

        self._v = vec
        self._ortho = ortho
        self._h: list[np.ndarray] = []
        self._done = False

    def dim(self) -> int:
        """Dimension of the Krylov subspace built so far."""
        return len(self._ortho)

    def __iter__(self) -> Arnoldi:
        return self

    def __next__(self) -> np.ndarray:
        if self._done:
            raise StopIteration
        self._a.apply_mut(self._v)
        result = self._ortho.div_append(self._v)
        with np.errstate(divide="ignore", invalid="ignore"):
            self._v /= norm_l2(self._v)
        self._h.append(np.array(result.coeff))
        if result.is_dependent:
            self._done = True
            raise StopIteration
        return result.coeff

    def complete(self) -> tuple[np.ndarray, np.ndarray]:
        """Iterate until convergence and return the basis ``Q`` and Hessenberg ``H``."""
        for _ in self:
            pass
        q = self._ortho.get_q()
        n = len(self._h)
        dtype = np.result_type(q.dtype, *(c.dtype for c in self._h))
        h = np.zeros((n, n), dtype=dtype, order="F")
        for i, column in enumerate(self._h):
            rows = min(n, i + 2)
            h[:rows, i] = column[:rows]
        return q, h


def arnoldi_householder(a, v, tol: float) -> tuple[np.ndarray, np.ndarray]:
    """Arnoldi iteration orthogonalized with Householder reflections."""
    return Arnoldi(a, v, Householder(len(v), tol)).complete()


def arnoldi_mgs(a, v, tol: float) -> tuple[np.ndarray, np.ndarray]:
    """Arnoldi iteration orthogonalized with modified Gram-Schmidt."""
    return Arnoldi(a, v, MGS(len(v), tol)).complete()
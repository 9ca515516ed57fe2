"""Orthogonalizer built from Householder reflections."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from ..errors import IncompatibleShapeError
from ..inner import inner
from ..norm import norm_l2
from .orthogonalizer import AppendResult, Orthogonalizer, Strategy, qr


def calc_reflector(x: np.ndarray) -> None:
    """Overwrite ``x`` with the unit reflector that maps it onto its first axis."""
    if x.size == 0:
        raise ValueError("cannot build a reflector from an empty vector")
    with np.errstate(divide="ignore", invalid="ignore"):
        norm = norm_l2(x)
        alpha = -x[0] * (norm / abs(x[0]))
        x[0] -= alpha
        x *= 1.0 / norm_l2(x)


def reflect(w, a: np.ndarray) -> None:
    """Apply the reflection ``I - 2 w w^H`` to ``a`` in place."""
    w = np.asarray(w)
    if w.shape != a.shape:
        raise IncompatibleShapeError(
            f"reflector and vector sizes differ: {w.shape} != {a.shape}"
        )
    c = 2 * inner(w, a)
    a -= c * w


class Householder(Orthogonalizer):
    """Orthogonalizer that stores one Householder reflector per basis vector."""

    def __init__(self, dim: int, tol: float) -> None:
        super().__init__(dim, tol)
        self._v: list[np.ndarray] = []

    def __len__(self) -> int:
        return len(self._v)

    def _fundamental_reflection(self, k: int, a: np.ndarray) -> None:
        reflect(self._v[k][k:], a[k:])

    def forward_reflection(self, a: np.ndarray) -> None:
        """Apply ``P_l ... P_1`` to ``a`` in place."""
        self._check_dim(a)
        for k in range(len(self._v)):
            self._fundamental_reflection(k, a)

    def backward_reflection(self, a: np.ndarray) -> None:
        """Apply ``P_1 ... P_l`` to ``a`` in place."""
        self._check_dim(a)
        for k in reversed(range(len(self._v))):
            self._fundamental_reflection(k, a)

    def _compose_coefficients(self, a: np.ndarray) -> np.ndarray:
        k = len(self._v)
        residual = norm_l2(a[k:])
        c = np.zeros(k + 1, dtype=a.dtype)
        c[:k] = a[:k]
        if k < a.shape[0]:
            ak = a[k]
            with np.errstate(divide="ignore", invalid="ignore"):
                c[k] = -ak * (residual / abs(ak))
        else:
            c[k] = residual
        return c

    def _construct_residual(self, a: np.ndarray) -> None:
        a[: len(self._v)] = 0
        self.backward_reflection(a)

    def decompose(self, a: np.ndarray) -> np.ndarray:
        self.forward_reflection(a)
        coef = self._compose_coefficients(a)
        self._construct_residual(a)
        return coef

    def coeff(self, a) -> np.ndarray:
        work = self._working_copy(a)
        self.forward_reflection(work)
        return self._compose_coefficients(work)

    def _reflect_and_test(self, a: np.ndarray) -> tuple[np.ndarray, bool]:
        self.forward_reflection(a)
        coef = self._compose_coefficients(a)
        return coef, bool(abs(coef[len(self._v)]) < self._tol)

    def div_append(self, a: np.ndarray) -> AppendResult:
        self._check_dim(a)
        k = len(self._v)
        coef, dependent = self._reflect_and_test(a)
        if dependent:
            return AppendResult.dependent(coef)
        calc_reflector(a[k:])
        self._v.append(a.copy())
        self._construct_residual(a)
        return AppendResult.added(coef)

    def append(self, a) -> AppendResult:
        work = self._working_copy(a)
        k = len(self._v)
        coef, dependent = self._reflect_and_test(work)
        if dependent:
            return AppendResult.dependent(coef)
        calc_reflector(work[k:])
        self._v.append(work)
        return AppendResult.added(coef)

    def get_q(self) -> np.ndarray:
        if not self._v:
            raise ValueError("the basis is empty")
        q = np.zeros((self._dim, len(self._v)), dtype=self._v[0].dtype)
        for i, column in enumerate(q.T):
            column[i] = 1
            self.backward_reflection(column)
        return q


def householder(
    vectors: Iterable, dim: int, rtol: float, strategy: Strategy
) -> tuple[np.ndarray, np.ndarray]:
    """Online QR decomposition with Householder reflections."""
    return qr(vectors, Householder(dim, rtol), strategy)
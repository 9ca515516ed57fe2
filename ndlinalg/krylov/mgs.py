"""Modified Gram-Schmidt orthogonalizer."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from ..generate import hstack
from ..inner import inner
from ..norm import norm_l2
from .orthogonalizer import AppendResult, Orthogonalizer, Strategy, qr


class MGS(Orthogonalizer):
    """Orthogonalizer using the modified Gram-Schmidt procedure."""

    def __init__(self, dim: int, tol: float) -> None:
        super().__init__(dim, tol)
        self._q: list[np.ndarray] = []

    def __len__(self) -> int:
        return len(self._q)

    def decompose(self, a: np.ndarray) -> np.ndarray:
        self._check_dim(a)
        coef = np.zeros(len(self._q) + 1, dtype=a.dtype)
        for i, q in enumerate(self._q):
            c = inner(q, a)
            a -= c * q
            coef[i] = c
        coef[-1] = norm_l2(a)
        return coef

    def coeff(self, a) -> np.ndarray:
        return self.decompose(self._working_copy(a))

    def append(self, a) -> AppendResult:
        return self.div_append(self._working_copy(a))

    def div_append(self, a: np.ndarray) -> AppendResult:
        coef = self.decompose(a)
        residual = coef[-1].real
        if residual < self._tol:
            return AppendResult.dependent(coef)
        a /= residual
        self._q.append(a.copy())
        return AppendResult.added(coef)

    def get_q(self) -> np.ndarray:
        return hstack(self._q)


def mgs(
    vectors: Iterable, dim: int, rtol: float, strategy: Strategy
) -> tuple[np.ndarray, np.ndarray]:
    """Online QR decomposition with modified Gram-Schmidt."""
    return qr(vectors, MGS(dim, rtol), strategy)
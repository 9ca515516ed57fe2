"""Truncated singular value decomposition built on LOBPCG.

The few largest or smallest singular values of a dense matrix are found as
square roots of eigenvalues of ``A^T A`` or ``A A^T``, whichever is smaller.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .. import generate
from .solver import Order, lobpcg


def _magnitude_correction(dtype: np.dtype) -> float:
    if dtype == np.float32:
        return 1.0e3
    if dtype == np.float64:
        return 1.0e6
    raise TypeError(f"unsupported element type: {dtype}")


@dataclass
class TruncatedSvdResult:
    """Eigenpairs of the squared problem, not yet turned into singular values."""

    eigvals: np.ndarray
    eigvecs: np.ndarray
    problem: np.ndarray
    ngm: bool

    def _singular_values_with_indices(self) -> tuple[np.ndarray, list[int]]:
        vals = np.asarray(self.eigvals)
        order = sorted(range(len(vals)), key=lambda i: vals[i], reverse=True)
        # cut-off below which eigenvalues count as zero
        cutoff = (
            np.finfo(vals.dtype).eps
            * _magnitude_correction(vals.dtype)
            * vals[order[0]]
        )
        indices = [i for i in order if vals[i] > cutoff]
        values = np.sqrt(vals[indices])
        return values, indices

    def values(self) -> np.ndarray:
        """Singular values in descending order."""
        values, _ = self._singular_values_with_indices()
        return values

    def values_vectors(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(U, sigma, V^T)`` for the retained singular values."""
        values, indices = self._singular_values_with_indices()
        if self.ngm:
            v = self.eigvecs[:, indices]
            u = (self.problem @ v) / values
        else:
            u = self.eigvecs[:, indices]
            v = (self.problem.T @ u) / values
        return u, values, v.T.copy()


class TruncatedSvd:
    """Solver for a few extreme singular values, configured builder-style."""

    def __init__(self, problem, order: Order) -> None:
        arr = np.asarray(problem)
        if arr.ndim != 2:
            raise ValueError("the problem must be a 2-dimensional matrix")
        if not np.issubdtype(arr.dtype, np.floating):
            arr = arr.astype(np.float64)
        self._problem = arr
        self._order = order
        self._precision = 1e-5
        self._maxiter = arr.shape[0] * 2

    def precision(self, precision: float) -> TruncatedSvd:
        self._precision = precision
        return self

    def maxiter(self, maxiter: int) -> TruncatedSvd:
        self._maxiter = maxiter
        return self

    def decompose(self, num: int) -> TruncatedSvdResult:
        """Approximate ``num`` singular values; raises the solver's error on failure."""
        if num < 1:
            raise ValueError(
                "The number of singular values to compute should be larger than zero!"
            )
        problem = self._problem
        n, m = problem.shape
        x = generate.random((min(n, m), num), np.float32).astype(problem.dtype)
        # the eigenvalues are squared singular values, so is the precision
        precision = self._precision * self._precision

        if n > m:

            def operator(block: np.ndarray) -> np.ndarray:
                return problem.T @ (problem @ block)

        else:

            def operator(block: np.ndarray) -> np.ndarray:
                return problem @ (problem.T @ block)

        res = lobpcg(operator, x, None, None, precision, self._maxiter, self._order)
        if not res.has_result:
            raise res.error
        return TruncatedSvdResult(
            eigvals=res.eigvals, eigvecs=res.eigvecs, problem=problem, ngm=n > m
        )
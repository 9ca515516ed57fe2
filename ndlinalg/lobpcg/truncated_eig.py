"""Truncated eigenvalue decomposition built on LOBPCG."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from .. import generate
from .solver import LobpcgResult, Order, lobpcg

_CONVERGENCE_LIMIT = 0.1


def _as_problem(problem) -> np.ndarray:
    arr = np.asarray(problem)
    if arr.ndim != 2:
        raise ValueError("the problem must be a 2-dimensional matrix")
    if not np.issubdtype(arr.dtype, np.inexact):
        arr = arr.astype(np.float64)
    return arr


class TruncatedEig:
    """Solver for a few extreme eigenpairs of a symmetric matrix.

    Settings are chained builder-style. Iterating over the solver yields one
    ``(eigenvalues, eigenvectors)`` pair at a time, each found orthogonal to
    those before it.
    """

    def __init__(self, problem, order: Order) -> None:
        self._problem = _as_problem(problem)
        self._order = order
        self._precision = 1e-5
        self._maxiter = self._problem.shape[0] * 2
        self.constraints: np.ndarray | None = None
        self._preconditioner: np.ndarray | None = None

    def precision(self, precision: float) -> TruncatedEig:
        self._precision = precision
        return self

    def maxiter(self, maxiter: int) -> TruncatedEig:
        self._maxiter = maxiter
        return self

    def orthogonal_to(self, constraints) -> TruncatedEig:
        self.constraints = np.asarray(constraints)
        return self

    def precondition_with(self, preconditioner) -> TruncatedEig:
        self._preconditioner = np.asarray(preconditioner)
        return self

    def _solve(self, num: int, constraints: np.ndarray | None) -> LobpcgResult:
        x = generate.random((self._problem.shape[0], num)).astype(self._problem.dtype)
        problem = self._problem
        preconditioner = self._preconditioner

        def operator(block: np.ndarray) -> np.ndarray:
            return problem @ block

        precondition = None
        if preconditioner is not None:

            def precondition(block: np.ndarray) -> None:
                block[...] = preconditioner @ block

        return lobpcg(
            operator,
            x,
            precondition,
            None if constraints is None else np.array(constraints),
            self._precision,
            self._maxiter,
            self._order,
        )

    def decompose(self, num: int) -> LobpcgResult:
        """Approximate ``num`` eigenpairs."""
        return self._solve(num, self.constraints)

    def __iter__(self) -> Iterator[tuple[np.ndarray, np.ndarray]]:
        step_size = 1
        remaining = self._problem.shape[0]
        constraints = self.constraints
        while remaining > 0:
            step = min(step_size, remaining)
            res = self._solve(step, constraints)
            if not res.has_result:
                return
            if any(r > _CONVERGENCE_LIMIT for r in res.rnorm):
                return
            if constraints is None:
                constraints = res.eigvecs.copy()
            else:
                constraints = np.hstack([constraints, res.eigvecs])
            remaining -= step
            yield res.eigvals, res.eigvecs
"""Least-squares solutions of ``A x = b`` via the singular value decomposition.

The solution ``x`` minimises the 2-norm ``|b - A x|``. The right-hand side
may be a vector or a matrix whose columns are solved for independently.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import IncompatibleShapeError, MemoryNotContiguousError
from .layout import layout


@dataclass
class LeastSquaresResult:
    """Outcome of a least-squares computation.

    ``residual_sum_of_squares`` is only available when ``A`` has at least as
    many rows as columns and full column rank. It is a 0-dimensional array for
    a vector right-hand side and a vector with one entry per column for a
    matrix right-hand side; otherwise it is ``None``.
    """

    singular_values: np.ndarray
    solution: np.ndarray
    rank: int
    residual_sum_of_squares: np.ndarray | None


def _validate(a: np.ndarray, rhs: np.ndarray) -> None:
    if a.ndim != 2:
        raise IncompatibleShapeError(
            f"expected a 2-dimensional matrix, got {a.ndim} dimensions"
        )
    if rhs.ndim not in (1, 2):
        raise IncompatibleShapeError(
            f"right-hand side must be a vector or a matrix, got {rhs.ndim} dimensions"
        )
    if a.shape[0] != rhs.shape[0]:
        raise IncompatibleShapeError(
            f"matrix has {a.shape[0]} rows but right-hand side has {rhs.shape[0]}"
        )


def _working_dtype(a: np.ndarray, rhs: np.ndarray) -> np.dtype:
    dtype = np.result_type(a.dtype, rhs.dtype)
    if not np.issubdtype(dtype, np.inexact):
        dtype = np.dtype(np.float64)
    return dtype


def _solve(a: np.ndarray, rhs: np.ndarray) -> LeastSquaresResult:
    dtype = _working_dtype(a, rhs)
    a_work = a.astype(dtype)
    b_work = rhs.astype(dtype)
    m, n = a_work.shape

    solution, _, rank, singular_values = np.linalg.lstsq(a_work, b_work, rcond=-1)
    rank = int(rank)

    residual = None
    if m >= n and rank == n:
        real_dtype = np.abs(np.zeros(1, dtype=dtype)).dtype
        if m == n:
            residual = np.zeros(b_work.shape[1:], dtype=real_dtype)
        else:
            magnitudes = np.abs(b_work - a_work @ solution)
            residual = np.asarray(
                np.sum(magnitudes * magnitudes, axis=0), dtype=real_dtype
            )

    return LeastSquaresResult(
        singular_values=np.asarray(singular_values),
        solution=solution,
        rank=rank,
        residual_sum_of_squares=residual,
    )


def least_squares(a, rhs) -> LeastSquaresResult:
    """Solve ``A x = rhs`` in the least-squares sense; the inputs are unchanged."""
    a_arr = np.asarray(a)
    rhs_arr = np.asarray(rhs)
    _validate(a_arr, rhs_arr)
    return _solve(a_arr, rhs_arr)


def least_squares_in_place(a: np.ndarray, rhs: np.ndarray) -> LeastSquaresResult:
    """Solve ``A x = rhs`` using ``rhs`` as storage for the solution.

    Both arrays must be densely stored. When ``A`` has at least as many rows
    as columns, the leading ``n`` rows of ``rhs`` are overwritten with the
    solution; otherwise ``rhs`` is left as it was, since it cannot hold it.
    """
    if not isinstance(a, np.ndarray) or not isinstance(rhs, np.ndarray):
        raise TypeError("in-place solving needs numpy arrays")
    _validate(a, rhs)
    layout(a)
    if rhs.ndim == 2:
        layout(rhs)
    elif not (rhs.flags.c_contiguous or rhs.flags.f_contiguous):
        raise MemoryNotContiguousError()

    result = _solve(a, rhs)
    m, n = a.shape
    if n <= m:
        rhs[:n] = result.solution
    return result
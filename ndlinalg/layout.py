"""Describe numpy matrices in terms of dense column- or row-major storage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .errors import (
    IncompatibleShapeError,
    InvalidStrideError,
    MemoryNotContiguousError,
    NotSquareError,
)


class LayoutOrder(Enum):
    """Storage order of a dense matrix."""

    C = "C"
    F = "F"


@dataclass(frozen=True)
class MatrixLayout:
    """Dense storage of a matrix.

    ``length`` is the number of rows for row-major (C) storage and the number
    of columns for column-major (F) storage; ``lda`` is the leading dimension.
    """

    order: LayoutOrder
    length: int
    lda: int

    @classmethod
    def c(cls, row: int, lda: int) -> MatrixLayout:
        return cls(LayoutOrder.C, row, lda)

    @classmethod
    def f(cls, col: int, lda: int) -> MatrixLayout:
        return cls(LayoutOrder.F, col, lda)

    @property
    def is_c(self) -> bool:
        return self.order is LayoutOrder.C

    @property
    def is_f(self) -> bool:
        return self.order is LayoutOrder.F

    def size(self) -> tuple[int, int]:
        """Return ``(rows, cols)`` of the matrix."""
        if self.is_c:
            return self.length, self.lda
        return self.lda, self.length


def _as_matrix(a) -> np.ndarray:
    arr = np.asarray(a)
    if arr.ndim != 2:
        raise IncompatibleShapeError(
            f"expected a 2-dimensional array, got {arr.ndim} dimensions"
        )
    return arr


def layout(a) -> MatrixLayout:
    """Return the dense layout of a 2-D array, or raise InvalidStrideError."""
    arr = _as_matrix(a)
    rows, cols = arr.shape
    s0, s1 = (stride // arr.itemsize for stride in arr.strides)
    if rows == s1:
        return MatrixLayout.f(col=cols, lda=rows)
    if cols == s0:
        return MatrixLayout.c(row=rows, lda=cols)
    raise InvalidStrideError(s0, s1)


def square_layout(a) -> MatrixLayout:
    """Return the layout of a square matrix, or raise NotSquareError."""
    lay = layout(a)
    rows, cols = lay.size()
    if rows != cols:
        raise NotSquareError(rows, cols)
    return lay


def ensure_square(a) -> None:
    """Raise NotSquareError unless the matrix is square."""
    rows, cols = _as_matrix(a).shape
    if rows != cols:
        raise NotSquareError(rows, cols)


def as_allocated(a) -> np.ndarray:
    """Return a flat view of the matrix elements in memory order."""
    arr = _as_matrix(a)
    if arr.flags.c_contiguous:
        return arr.ravel(order="C")
    if arr.flags.f_contiguous:
        return arr.ravel(order="F")
    raise MemoryNotContiguousError()
"""Linear operators acting on vectors and matrices."""

from __future__ import annotations

import numpy as np

from .generate import hstack


class LinearOperator:
    """An action on vectors, extended to matrices column by column.

    Subclasses override :meth:`apply`, :meth:`apply_mut`, or both; each
    default is written in terms of the other.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if (
            cls.apply is LinearOperator.apply
            and cls.apply_mut is LinearOperator.apply_mut
        ):
            raise TypeError(f"{cls.__name__} must override apply or apply_mut")

    def apply(self, a) -> np.ndarray:
        """Return the operator applied to a vector, leaving ``a`` unchanged."""
        result = np.array(a)
        self.apply_mut(result)
        return result

    def apply_mut(self, a: np.ndarray) -> None:
        """Apply the operator to a vector in place."""
        a[...] = self.apply(a)

    def apply_into(self, a: np.ndarray) -> np.ndarray:
        """Apply in place and return the same array."""
        self.apply_mut(a)
        return a

    def apply2(self, a) -> np.ndarray:
        """Return the operator applied to every column of a matrix."""
        return hstack([self.apply(column) for column in np.asarray(a).T])

    def apply2_mut(self, a: np.ndarray) -> None:
        """Apply the operator to every column of a matrix in place."""
        for column in a.T:
            self.apply_mut(column)

    def apply2_into(self, a: np.ndarray) -> np.ndarray:
        """Apply to every column in place and return the same array."""
        self.apply2_mut(a)
        return a


class MatrixOperator(LinearOperator):
    """A dense matrix acting by multiplication."""

    def __init__(self, matrix) -> None:
        self.matrix = np.asarray(matrix)

    def apply(self, a) -> np.ndarray:
        return self.matrix @ np.asarray(a)


def as_operator(a) -> LinearOperator:
    """Return ``a`` if it is an operator, else wrap it as a matrix operator."""
    if isinstance(a, LinearOperator):
        return a
    return MatrixOperator(a)
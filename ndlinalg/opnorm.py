"""Operator norms of matrices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .errors import IncompatibleShapeError
from .layout import layout


class NormType(Enum):
    """Kind of matrix norm."""

    ONE = "O"
    INFINITY = "I"
    FROBENIUS = "F"


@dataclass
class Tridiagonal:
    """Tridiagonal matrix given by its sub-, main and super-diagonals."""

    dl: np.ndarray
    d: np.ndarray
    du: np.ndarray

    def __post_init__(self) -> None:
        self.dl = np.asarray(self.dl)
        self.d = np.asarray(self.d)
        self.du = np.asarray(self.du)
        n = self.d.shape[0] if self.d.ndim == 1 else 0
        if (
            self.d.ndim != 1
            or n == 0
            or self.dl.shape != (n - 1,)
            or self.du.shape != (n - 1,)
        ):
            raise IncompatibleShapeError(
                "tridiagonal needs a non-empty diagonal and off-diagonals one shorter"
            )

    def _norm_matrix(self, t: NormType) -> np.ndarray:
        dtype = np.result_type(self.dl, self.d, self.du)
        zero = np.zeros(1, dtype=dtype)
        if t is NormType.ONE:
            # columns aligned: (0, u1..), (d0..), (l1.., 0)
            upper = np.concatenate([zero, self.du])
            lower = np.concatenate([self.dl, zero])
            return np.stack([upper, self.d, lower], axis=0)
        if t is NormType.INFINITY:
            # rows aligned: (0, l1..), (d0..), (u1.., 0)
            lower = np.concatenate([zero, self.dl])
            upper = np.concatenate([self.du, zero])
            return np.stack([lower, self.d, upper], axis=1)
        return np.concatenate([self.dl, self.d, self.du])[np.newaxis, :]


def _dense_norm(arr: np.ndarray, t: NormType) -> float:
    magnitudes = np.abs(arr)
    if t is NormType.ONE:
        return float(np.max(magnitudes.sum(axis=0), initial=0.0))
    if t is NormType.INFINITY:
        return float(np.max(magnitudes.sum(axis=1), initial=0.0))
    return float(np.sqrt(np.sum(magnitudes * magnitudes)))


def opnorm(a, t: NormType) -> float:
    """Norm of a dense matrix or a :class:`Tridiagonal`."""
    if isinstance(a, Tridiagonal):
        return _dense_norm(a._norm_matrix(t), t)
    arr = np.asarray(a)
    layout(arr)
    return _dense_norm(arr, t)


def opnorm_one(a) -> float:
    """Maximum column sum of absolute values."""
    return opnorm(a, NormType.ONE)


def opnorm_inf(a) -> float:
    """Maximum row sum of absolute values."""
    return opnorm(a, NormType.INFINITY)


def opnorm_fro(a) -> float:
    """Square root of the sum of squared magnitudes."""
    return opnorm(a, NormType.FROBENIUS)
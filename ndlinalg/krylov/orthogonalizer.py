"""Iterative construction of orthonormal bases and online QR decomposition."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

import numpy as np

from ..errors import IncompatibleShapeError


@dataclass(frozen=True, eq=False)
class AppendResult:
    """Outcome of appending a vector to an orthogonalizer.

    ``coeff`` holds the coefficients against the basis as it was before the
    append; its last entry is the residual norm.
    """

    coeff: np.ndarray
    is_dependent: bool = False

    @classmethod
    def added(cls, coeff: np.ndarray) -> AppendResult:
        return cls(coeff, False)

    @classmethod
    def dependent(cls, coeff: np.ndarray) -> AppendResult:
        return cls(coeff, True)

    def into_coeff(self) -> np.ndarray:
        """The coefficient array."""
        return self.coeff

    def residual_norm(self) -> float:
        """Magnitude of the last coefficient."""
        return float(abs(self.coeff[-1]))


class Strategy(Enum):
    """What online QR does with a linearly dependent vector."""

    TERMINATE = "terminate"
    SKIP = "skip"
    FULL = "full"


class Orthogonalizer(ABC):
    """Builds an orthonormal basis of vectors of length ``dim``, one at a time.

    A vector whose residual norm falls below the tolerance is reported as
    linearly dependent and not added.
    """

    def __init__(self, dim: int, tol: float) -> None:
        if dim < 0:
            raise ValueError(f"dimension must not be negative, got {dim}")
        self._dim = dim
        self._tol = tol

    def dim(self) -> int:
        """Length of the input vectors."""
        return self._dim

    @abstractmethod
    def __len__(self) -> int:
        """Number of basis vectors held."""

    def is_full(self) -> bool:
        """Whether the basis spans the whole space."""
        return len(self) == self._dim

    def is_empty(self) -> bool:
        return len(self) == 0

    def tolerance(self) -> float:
        return self._tol

    @abstractmethod
    def decompose(self, a: np.ndarray) -> np.ndarray:
        """Turn ``a`` into its component orthogonal to the basis, in place.

        Returns the coefficients against the current basis followed by the
        residual norm.
        """

    @abstractmethod
    def coeff(self, a) -> np.ndarray:
        """Coefficients of ``a`` against the current basis; ``a`` is unchanged."""

    @abstractmethod
    def append(self, a) -> AppendResult:
        """Add ``a`` to the basis unless it is linearly dependent."""

    @abstractmethod
    def div_append(self, a: np.ndarray) -> AppendResult:
        """Like :meth:`append`, leaving the normalized residual in ``a``."""

    @abstractmethod
    def get_q(self) -> np.ndarray:
        """Matrix whose columns are the basis vectors."""

    def _check_dim(self, a: np.ndarray) -> None:
        if a.shape != (self._dim,):
            raise IncompatibleShapeError(
                f"Input array size {a.shape} mismatches the dimension {self._dim}"
            )

    def _working_copy(self, a) -> np.ndarray:
        arr = np.asarray(a)
        copy = np.array(arr, dtype=np.result_type(arr.dtype, np.float64))
        self._check_dim(copy)
        return copy


def qr(
    vectors: Iterable, ortho: Orthogonalizer, strategy: Strategy
) -> tuple[np.ndarray, np.ndarray]:
    """Online QR decomposition of a stream of vectors with an empty orthogonalizer."""
    if len(ortho) != 0:
        raise ValueError("the orthogonalizer must start with an empty basis")

    coefs: list[np.ndarray] = []
    for a in vectors:
        result = ortho.append(a)
        if not result.is_dependent:
            coefs.append(result.coeff)
        elif strategy is Strategy.TERMINATE:
            break
        elif strategy is Strategy.SKIP:
            continue
        else:
            coefs.append(result.coeff)

    q = ortho.get_q()
    n = len(ortho)
    dtype = np.result_type(q.dtype, *(c.dtype for c in coefs))
    r = np.zeros((n, len(coefs)), dtype=dtype, order="F")
    for j, c in enumerate(coefs):
        k = min(n, len(c))
        r[:k, j] = c[:k]
    return q, r
"""Locally Optimal Block Preconditioned Conjugate Gradient (LOBPCG).

Finds a few of the largest or smallest eigenvalues of a large symmetric
positive-definite problem, optionally restricted to the orthogonal
complement of a set of constraint vectors.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import numpy as np
import scipy.linalg

from ..eigh import eigh, eigh_generalized
from ..errors import LapackError, LinalgError
from ..qr import UPLO


class Order(Enum):
    """Whether the largest or the smallest eigenvalues are sought."""

    LARGEST = "largest"
    SMALLEST = "smallest"


TruncatedOrder = Order


@dataclass(frozen=True)
class LobpcgResult:
    """Outcome of :func:`lobpcg`.

    When the solver converged, ``error`` is ``None``. When it failed part way,
    the best approximation found is still given together with ``error``. When
    it failed before producing any approximation, only ``error`` is set.
    """

    eigvals: np.ndarray | None
    eigvecs: np.ndarray | None
    rnorm: list[float] | None
    error: LinalgError | None = None

    @classmethod
    def ok(cls, eigvals, eigvecs, rnorm) -> LobpcgResult:
        return cls(eigvals, eigvecs, rnorm, None)

    @classmethod
    def err(cls, eigvals, eigvecs, rnorm, error: LinalgError) -> LobpcgResult:
        return cls(eigvals, eigvecs, rnorm, error)

    @classmethod
    def no_result(cls, error: LinalgError) -> LobpcgResult:
        return cls(None, None, None, error)

    @property
    def converged(self) -> bool:
        """True when no error occurred."""
        return self.error is None

    @property
    def has_result(self) -> bool:
        """True when an approximation of the eigenpairs is available."""
        return self.eigvals is not None


def _lapack_error(err: Exception) -> LapackError:
    return LapackError(1, str(err))


def _cholesky_lower(m: np.ndarray) -> np.ndarray:
    try:
        return scipy.linalg.cholesky(m, lower=True)
    except (scipy.linalg.LinAlgError, ValueError) as err:
        raise _lapack_error(err) from err


def _solve_lower(l: np.ndarray, b: np.ndarray) -> np.ndarray:
    try:
        return scipy.linalg.solve_triangular(l, b, lower=True)
    except (scipy.linalg.LinAlgError, ValueError) as err:
        raise _lapack_error(err) from err


def _sorted_eig(
    a: np.ndarray, b: np.ndarray | None, size: int, order: Order
) -> tuple[np.ndarray, np.ndarray]:
    """Solve the full (generalized) eigenproblem, sort by ``order`` and keep ``size``."""
    n = a.shape[0]
    try:
        if b is None:
            vals, vecs = eigh(a, UPLO.UPPER)
        else:
            vals, vecs = eigh_generalized(a, b, UPLO.UPPER)
    except LinalgError:
        raise
    except ValueError as err:
        raise _lapack_error(err) from err

    if order is Order.LARGEST:
        return vals[n - size :][::-1].copy(), vecs[:, n - size :][:, ::-1].copy()
    return vals[:size].copy(), vecs[:, :size].copy()


def _ndarray_mask(matrix: np.ndarray, mask) -> np.ndarray:
    """Select the columns of ``matrix`` where ``mask`` is true."""
    mask = np.asarray(mask, dtype=bool)
    if mask.shape != (matrix.shape[1],):
        raise ValueError(
            f"mask length {mask.shape[0]} differs from column count {matrix.shape[1]}"
        )
    return matrix[:, mask].copy()


def _apply_constraints(
    v: np.ndarray, cholesky_yy: np.ndarray, y: np.ndarray
) -> None:
    """Make the columns of ``v`` orthogonal to the column space of ``y``, in place."""
    gram_yv = y.T @ v
    u = scipy.linalg.cho_solve((cholesky_yy, True), gram_yv)
    v -= y @ u


def _orthonormalize(v: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Orthonormalize the columns of ``v`` by a Cholesky factorization.

    Returns the orthonormal matrix and the lower-triangular factor ``L`` of
    the Gram matrix, whose transpose is the ``R`` of the QR problem.
    """
    gram_vv = v.T @ v
    factor = _cholesky_lower(gram_vv)
    u = _solve_lower(factor, v.T).T
    return u, factor


def lobpcg(
    a: Callable[[np.ndarray], np.ndarray],
    x,
    m: Callable[[np.ndarray], None] | None,
    y,
    tol: float,
    maxiter: int,
    order: Order,
) -> LobpcgResult:
    """Approximate ``k`` extreme eigenpairs of a symmetric positive-definite problem.

    ``a`` maps an ``n x j`` block to the operator applied to it; ``x`` is the
    ``n x k`` initial guess; ``m`` is a preconditioner modifying a block in
    place (``None`` for none); ``y`` is an optional ``n x s`` full-rank
    constraint matrix. Iteration stops once every residual norm is at most
    ``tol`` or after ``min(10 n, maxiter)`` steps. The best approximation
    seen over all iterations is returned.
    """
    x = np.array(x)
    if x.ndim != 2:
        raise ValueError("the initial approximation must be a 2-dimensional array")
    if np.issubdtype(x.dtype, np.complexfloating):
        raise TypeError("only real-valued problems are supported")
    if x.dtype != np.float32:
        x = x.astype(np.float64)
    n, size_x = x.shape
    if size_x > n:
        raise ValueError(
            f"cannot seek {size_x} eigenpairs of a problem of dimension {n}"
        )

    iterations_left = min(n * 10, maxiter)

    cholesky_yy = None
    if y is not None:
        y = np.asarray(y, dtype=x.dtype)
        cholesky_yy = _cholesky_lower(y.T @ y)
        _apply_constraints(x, cholesky_yy, y)

    try:
        x, _ = _orthonormalize(x)
    except LinalgError as err:
        return LobpcgResult.no_result(err)

    ax = a(x)
    xax = x.T @ ax

    try:
        lam, eig_block = _sorted_eig(xax, None, size_x, order)
    except LinalgError as err:
        return LobpcgResult.no_result(err)

    x = x @ eig_block
    ax = ax @ eig_block

    activemask = np.ones(size_x, dtype=bool)
    best: tuple[np.ndarray, np.ndarray, list[float]] | None = None
    previous_block_size = size_x
    ident = np.eye(size_x)
    ident0 = np.eye(size_x)
    previous_p_ap: tuple[np.ndarray, np.ndarray] | None = None
    explicit_gram_flag = True
    max_rnorm_float = 1.0 if np.finfo(x.dtype).eps > 1e-8 else 1.0e-8
    final_error: LinalgError | None = None

    while True:
        lambda_diag = np.diag(lam)
        r = ax - x @ lambda_diag

        residual_norms = [float(v) for v in np.linalg.norm(r, axis=0)]
        sum_rnorm = sum(residual_norms)
        if best is None or sum(best[2]) > sum_rnorm:
            best = (lam.copy(), x.copy(), list(residual_norms))

        activemask = np.array(
            [norm > tol and active for norm, active in zip(residual_norms, activemask)],
            dtype=bool,
        )

        current_block_size = int(activemask.sum())
        if current_block_size != previous_block_size:
            previous_block_size = current_block_size
            ident = np.eye(current_block_size)

        if current_block_size == 0 or iterations_left == 0:
            break

        active_block_r = _ndarray_mask(r, activemask)
        if m is not None:
            m(active_block_r)
        if y is not None and cholesky_yy is not None:
            _apply_constraints(active_block_r, cholesky_yy, y)
        active_block_r -= x @ (x.T @ active_block_r)

        try:
            r, _ = _orthonormalize(active_block_r)
        except LinalgError as err:
            final_error = err
            break

        ar = a(r)

        max_norm = max(residual_norms, default=float("-inf"))
        explicit_gram_flag = max_norm <= max_rnorm_float or explicit_gram_flag

        xar = x.T @ ar
        rar = r.T @ ar

        if explicit_gram_flag:
            rar = (rar + rar.T) / 2
            xax = x.T @ ax
            xax = (xax + xax.T) / 2
            xx = x.T @ x
            rr = r.T @ r
            xr = x.T @ r
        else:
            xax = lambda_diag
            xx = ident0.copy()
            rr = ident.copy()
            xr = np.zeros((size_x, current_block_size))

        p_ap: tuple[np.ndarray, np.ndarray] | None = None
        if previous_p_ap is not None:
            p_prev, ap_prev = previous_p_ap
            active_p = _ndarray_mask(p_prev, activemask)
            active_ap = _ndarray_mask(ap_prev, activemask)
            try:
                active_p, p_r = _orthonormalize(active_p)
                active_ap = _solve_lower(p_r, active_ap.T).T
                p_ap = (active_p, active_ap)
            except LinalgError:
                p_ap = None

        result = None
        if p_ap is not None:
            active_p, active_ap = p_ap
            xap = x.T @ active_ap
            rap = r.T @ active_ap
            pap = active_p.T @ active_ap
            xp = x.T @ active_p
            rp = r.T @ active_p
            if explicit_gram_flag:
                pap = (pap + pap.T) / 2
                pp = active_p.T @ active_p
            else:
                pp = ident.copy()
            try:
                result = _sorted_eig(
                    np.block([[xax, xar, xap], [xar.T, rar, rap], [xap.T, rap.T, pap]]),
                    np.block([[xx, xr, xp], [xr.T, rr, rp], [xp.T, rp.T, pp]]),
                    size_x,
                    order,
                )
            except LinalgError:
                result = None

        if result is None:
            p_ap = None
            try:
                result = _sorted_eig(
                    np.block([[xax, xar], [xar.T, rar]]),
                    np.block([[xx, xr], [xr.T, rr]]),
                    size_x,
                    order,
                )
            except LinalgError as err:
                final_error = err
                break

        lam, eig_vecs = result

        tau = eig_vecs[:size_x, :]
        if p_ap is not None:
            active_p, active_ap = p_ap
            alpha = eig_vecs[size_x : size_x + current_block_size, :]
            gamma = eig_vecs[size_x + current_block_size :, :]
            p = r @ alpha + active_p @ gamma
            ap = ar @ alpha + active_ap @ gamma
        else:
            alpha = eig_vecs[size_x:, :]
            p = r @ alpha
            ap = ar @ alpha

        x = x @ tau + p
        ax = ax @ tau + ap
        previous_p_ap = (p, ap)
        iterations_left -= 1

    vals, vecs, rnorm = best
    if final_error is None:
        return LobpcgResult.ok(vals, vecs, rnorm)
    return LobpcgResult.err(vals, vecs, rnorm, final_error)
import numpy as np
import pytest

from ndlinalg.errors import IncompatibleShapeError, InvalidStrideError
from ndlinalg.opnorm import (
    NormType,
    Tridiagonal,
    opnorm,
    opnorm_fro,
    opnorm_inf,
    opnorm_one,
)

A = np.array([[1.0, -2.0, 3.0], [4.0, 5.0, -6.0]])
REFERENCE = {NormType.ONE: 1, NormType.INFINITY: np.inf, NormType.FROBENIUS: "fro"}


@pytest.mark.parametrize("order", ["C", "F"])
@pytest.mark.parametrize("t", list(NormType))
def test_dense_norms(order, t):
    a = np.array(A, order=order)
    assert np.isclose(opnorm(a, t), np.linalg.norm(a, REFERENCE[t]))


def test_complex_dense_norm():
    a = np.array([[1 + 1j, 2j], [-3.0, 1 - 2j]])
    assert np.isclose(opnorm_fro(a), np.linalg.norm(a, "fro"))


def test_shortcuts_match_opnorm():
    assert opnorm_one(A) == opnorm(A, NormType.ONE)
    assert opnorm_inf(A) == opnorm(A, NormType.INFINITY)
    assert opnorm_fro(A) == opnorm(A, NormType.FROBENIUS)


def test_strided_input_rejected():
    a = np.arange(24.0).reshape(4, 6)[:, ::2]
    with pytest.raises(InvalidStrideError):
        opnorm_one(a)


@pytest.mark.parametrize("t", list(NormType))
def test_tridiagonal_matches_dense(t):
    dl = np.array([1.0, -2.0, 3.0])
    d = np.array([4.0, 5.0, -6.0, 7.0])
    du = np.array([-8.0, 9.0, 10.0])
    dense = np.diag(d) + np.diag(dl, -1) + np.diag(du, 1)
    tri = Tridiagonal(dl=dl, d=d, du=du)
    assert np.isclose(opnorm(tri, t), np.linalg.norm(dense, REFERENCE[t]))


def test_tridiagonal_shape_check():
    with pytest.raises(IncompatibleShapeError):
        Tridiagonal(dl=np.ones(3), d=np.ones(3), du=np.ones(2))
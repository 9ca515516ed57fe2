import numpy as np
import pytest

from ndlinalg.errors import IncompatibleShapeError
from ndlinalg.generate import (
    conjugate,
    from_diag,
    hstack,
    random,
    random_hermite,
    random_hpd,
    random_regular,
    random_unitary,
    vstack,
)


def test_conjugate():
    a = np.array([[1 + 2j, 3j, 1.0], [4.0, -1j, 2 - 2j]])
    c = conjugate(a)
    assert c.shape == (3, 2)
    assert np.array_equal(c, np.conj(a).T)
    assert np.array_equal(conjugate(c), a)


@pytest.mark.parametrize("dtype", [np.float32, np.float64, np.complex64, np.complex128])
def test_random_shape_dtype_range(dtype):
    a = random((4, 3), dtype)
    assert a.shape == (4, 3)
    assert a.dtype == np.dtype(dtype)
    assert np.all(np.abs(a.real) <= 1) and np.all(np.abs(a.imag) <= 1)


def test_random_rejects_integers():
    with pytest.raises(TypeError):
        random((2, 2), np.int64)


@pytest.mark.parametrize("dtype", [np.float64, np.complex128])
def test_random_unitary(dtype):
    q = random_unitary(5, dtype)
    assert np.allclose(q.conj().T @ q, np.eye(5))


@pytest.mark.parametrize("dtype", [np.float64, np.complex128])
def test_random_regular_is_invertible(dtype):
    a = random_regular(5, dtype)
    assert np.allclose(a @ np.linalg.inv(a), np.eye(5))
    assert np.min(np.linalg.svd(a, compute_uv=False)) > 0


@pytest.mark.parametrize("dtype", [np.float64, np.complex128])
def test_random_hermite(dtype):
    h = random_hermite(6, dtype)
    assert np.allclose(h, conjugate(h))


@pytest.mark.parametrize("dtype", [np.float64, np.complex128])
def test_random_hpd(dtype):
    h = random_hpd(6, dtype)
    assert np.allclose(h, conjugate(h))
    assert np.min(np.linalg.eigvalsh(h)) >= 1 - 1e-10


def test_from_diag():
    d = [1.0, 2.0, 3.0]
    m = from_diag(d)
    assert np.array_equal(np.diagonal(m), d)
    assert np.count_nonzero(m - np.diag(np.diagonal(m))) == 0


def test_hstack_and_vstack():
    xs = [np.array([1.0, 2.0, 3.0]), np.array([4.0, 5.0, 6.0])]
    h = hstack(xs)
    v = vstack(xs)
    assert h.shape == (3, 2)
    assert np.array_equal(h[:, 1], xs[1])
    assert np.array_equal(v, h.T)


def test_stack_errors():
    with pytest.raises(IncompatibleShapeError):
        hstack([np.ones(3), np.ones(2)])
    with pytest.raises(IncompatibleShapeError):
        vstack([])
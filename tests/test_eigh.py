import numpy as np
import pytest

from ndlinalg.eigh import eigh, eigh_generalized, eigvalsh, ssqrt
from ndlinalg.errors import IncompatibleShapeError, LapackError, NotSquareError
from ndlinalg.qr import UPLO


def _random_hpd(rng, n, complex_=False):
    a = rng.uniform(-1, 1, (n, n))
    if complex_:
        a = a + 1j * rng.uniform(-1, 1, (n, n))
    return np.eye(n) + a.conj().T @ a


def test_documented_example():
    a = np.array([[2.0, 1.0], [1.0, 2.0]])
    values, vectors = eigh(a, UPLO.LOWER)
    np.testing.assert_allclose(values, [1.0, 3.0], atol=1e-12)
    np.testing.assert_allclose(a @ vectors, vectors @ np.diag(values), atol=1e-12)


@pytest.mark.parametrize("uplo", [UPLO.LOWER, UPLO.UPPER])
def test_decomposition_invariants(uplo):
    rng = np.random.default_rng(1)
    a = _random_hpd(rng, 6, complex_=True)
    values, vectors = eigh(a, uplo)
    assert np.all(np.diff(values) >= 0)
    np.testing.assert_allclose(vectors.conj().T @ vectors, np.eye(6), atol=1e-10)
    np.testing.assert_allclose(a @ vectors, vectors * values, atol=1e-10)


def test_only_selected_triangle_is_read():
    rng = np.random.default_rng(2)
    a = _random_hpd(rng, 5)
    lower_only = np.tril(a) + np.triu(np.full((5, 5), 99.0), 1)
    upper_only = np.triu(a) + np.tril(np.full((5, 5), -99.0), -1)
    expected = eigvalsh(a, UPLO.LOWER)
    np.testing.assert_allclose(eigvalsh(lower_only, UPLO.LOWER), expected, atol=1e-10)
    np.testing.assert_allclose(eigvalsh(upper_only, UPLO.UPPER), expected, atol=1e-10)


def test_eigvalsh_matches_eigh():
    rng = np.random.default_rng(3)
    a = _random_hpd(rng, 4)
    values, _ = eigh(a, UPLO.UPPER)
    np.testing.assert_allclose(eigvalsh(a, UPLO.UPPER), values, atol=1e-12)


def test_input_is_not_modified():
    a = np.array([[2.0, 1.0], [1.0, 2.0]])
    copy = a.copy()
    eigh(a, UPLO.LOWER)
    np.testing.assert_array_equal(a, copy)


def test_not_square_raises():
    with pytest.raises(NotSquareError):
        eigh(np.zeros((2, 3)), UPLO.LOWER)
    with pytest.raises(NotSquareError):
        eigvalsh(np.zeros((3, 2)), UPLO.UPPER)


def test_generalized_invariants():
    rng = np.random.default_rng(4)
    a = rng.uniform(-1, 1, (5, 5))
    a = a + a.T
    b = _random_hpd(rng, 5)
    values, vectors = eigh_generalized(a, b, UPLO.UPPER)
    assert np.all(np.diff(values) >= 0)
    np.testing.assert_allclose(a @ vectors, b @ vectors * values, atol=1e-9)
    np.testing.assert_allclose(vectors.T @ b @ vectors, np.eye(5), atol=1e-9)


def test_generalized_shape_mismatch():
    with pytest.raises(IncompatibleShapeError):
        eigh_generalized(np.eye(2), np.eye(3), UPLO.LOWER)


def test_generalized_not_positive_definite():
    with pytest.raises(LapackError):
        eigh_generalized(np.eye(2), -np.eye(2), UPLO.LOWER)


@pytest.mark.parametrize("complex_", [False, True])
def test_ssqrt_squares_back(complex_):
    rng = np.random.default_rng(5)
    a = _random_hpd(rng, 5, complex_=complex_)
    root = ssqrt(a, UPLO.LOWER)
    np.testing.assert_allclose(root @ root, a, atol=1e-9)
    np.testing.assert_allclose(root, root.conj().T, atol=1e-10)


def test_ssqrt_of_negative_eigenvalue_is_nan():
    root = ssqrt(np.diag([-1.0, 4.0]), UPLO.LOWER)
    assert np.isnan(root).any()
import numpy as np
import pytest

from ndlinalg.lobpcg.solver import Order
from ndlinalg.lobpcg.truncated_svd import TruncatedSvd


def close_l2(test, truth, rtol):
    test = np.asarray(test)
    truth = np.asarray(truth)
    assert np.linalg.norm(test - truth) <= rtol * np.linalg.norm(truth)


def test_truncated_svd():
    a = np.array([[3.0, 2.0, 2.0], [2.0, 3.0, -2.0]])
    res = TruncatedSvd(a, Order.LARGEST).precision(1e-5).maxiter(10).decompose(2)
    _, sigma, _ = res.values_vectors()
    close_l2(sigma, [5.0, 3.0], 1e-5)


def test_truncated_svd_random():
    a = np.random.default_rng(7).uniform(-1, 1, (50, 10))
    res = TruncatedSvd(a, Order.LARGEST).precision(1e-5).maxiter(10).decompose(10)
    u, sigma, v_t = res.values_vectors()
    reconstructed = u @ np.diag(sigma) @ v_t
    close_l2(reconstructed, a, 1e-5)


def test_truncated_svd_random_wide():
    a = np.random.default_rng(11).uniform(-1, 1, (10, 50))
    res = TruncatedSvd(a, Order.LARGEST).precision(1e-5).maxiter(10).decompose(10)
    u, sigma, v_t = res.values_vectors()
    assert u.shape == (10, 10)
    assert v_t.shape == (10, 50)
    close_l2(u @ np.diag(sigma) @ v_t, a, 1e-5)


def test_values_match_values_vectors():
    a = np.array([[3.0, 2.0, 2.0], [2.0, 3.0, -2.0]])
    res = TruncatedSvd(a, Order.LARGEST).maxiter(10).decompose(2)
    np.testing.assert_allclose(res.values(), res.values_vectors()[1])
    assert res.values()[0] >= res.values()[1]


def test_smallest_singular_value():
    a = np.array([[3.0, 2.0, 2.0], [2.0, 3.0, -2.0]])
    res = TruncatedSvd(a, Order.SMALLEST).maxiter(10).decompose(1)
    close_l2(res.values(), [3.0], 1e-4)


def test_decompose_zero_raises():
    a = np.array([[3.0, 2.0, 2.0], [2.0, 3.0, -2.0]])
    with pytest.raises(ValueError):
        TruncatedSvd(a, Order.LARGEST).decompose(0)
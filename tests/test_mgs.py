import numpy as np
import pytest

from ndlinalg.errors import IncompatibleShapeError
from ndlinalg.krylov.mgs import MGS, mgs
from ndlinalg.krylov.orthogonalizer import Strategy


def test_documented_example():
    ortho = MGS(3, 1e-9)
    coef = ortho.append(np.array([0.0, 1.0, 0.0])).into_coeff()
    np.testing.assert_allclose(coef, [1.0], atol=1e-9)

    coef = ortho.append(np.array([1.0, 1.0, 0.0])).into_coeff()
    np.testing.assert_allclose(coef, [1.0, 1.0], atol=1e-9)

    assert ortho.append(np.array([1.0, 2.0, 0.0])).is_dependent

    result = ortho.append(np.array([1.0, 2.0, 0.0]))
    assert result.is_dependent
    np.testing.assert_allclose(result.into_coeff(), [2.0, 1.0, 0.0], atol=1e-9)
    assert len(ortho) == 2


def test_decompose_leaves_orthogonal_residual():
    rng = np.random.default_rng(11)
    ortho = MGS(5, 1e-9)
    for v in rng.uniform(-1, 1, (2, 5)):
        ortho.append(v)
    original = rng.uniform(-1, 1, 5)
    a = original.copy()
    coef = ortho.decompose(a)
    q = ortho.get_q()
    np.testing.assert_allclose(q.T @ a, 0.0, atol=1e-12)
    np.testing.assert_allclose(q @ coef[:-1] + a, original, atol=1e-12)
    assert coef[-1] == pytest.approx(np.linalg.norm(a))


def test_coeff_does_not_modify_input():
    ortho = MGS(3, 1e-9)
    ortho.append([1.0, 0.0, 0.0])
    a = np.array([2.0, 3.0, 0.0])
    coef = ortho.coeff(a)
    np.testing.assert_array_equal(a, [2.0, 3.0, 0.0])
    assert coef[0] == pytest.approx(2.0)
    assert len(ortho) == 1


def test_div_append_normalizes_in_place():
    ortho = MGS(3, 1e-9)
    a = np.array([0.0, 3.0, 4.0])
    result = ortho.div_append(a)
    assert not result.is_dependent
    assert np.linalg.norm(a) == pytest.approx(1.0)
    np.testing.assert_allclose(ortho.get_q()[:, 0], a)


def test_dimension_mismatch_raises():
    ortho = MGS(3, 1e-9)
    with pytest.raises(IncompatibleShapeError):
        ortho.append([1.0, 2.0])


def test_mgs_complex_vectors_are_unitary():
    rng = np.random.default_rng(12)
    vectors = list(rng.uniform(-1, 1, (3, 4)) + 1j * rng.uniform(-1, 1, (3, 4)))
    q, r = mgs(vectors, 4, 1e-9, Strategy.TERMINATE)
    np.testing.assert_allclose(q.conj().T @ q, np.eye(3), atol=1e-10)
    np.testing.assert_allclose(q @ r, np.column_stack(vectors), atol=1e-10)


def test_get_q_of_empty_basis_raises():
    with pytest.raises(IncompatibleShapeError):
        MGS(3, 1e-9).get_q()
from ndlinalg.errors import (
    IncompatibleShapeError,
    InvalidStrideError,
    LapackError,
    LinalgError,
    MemoryNotContiguousError,
    NotSquareError,
    NotStandardShapeError,
)


def test_not_square_message_and_fields():
    err = NotSquareError(3, 4)
    assert str(err) == "Not square: rows(3) != cols(4)"
    assert (err.rows, err.cols) == (3, 4)


def test_invalid_stride_message():
    err = InvalidStrideError(2, 5)
    assert str(err) == "invalid stride: s0=2, s1=5"
    assert (err.s0, err.s1) == (2, 5)


def test_not_standard_shape_message():
    err = NotStandardShapeError("Q", 2, 3)
    assert str(err) == "Q cannot be made from a (2, 3) matrix"


def test_memory_not_contiguous_is_linalg_error():
    err = MemoryNotContiguousError()
    assert isinstance(err, LinalgError)
    assert "Memory is not contiguous" in str(err)


def test_incompatible_shape_is_value_error():
    err = IncompatibleShapeError("rows differ")
    assert isinstance(err, ValueError)
    assert "rows differ" in str(err)


def test_lapack_error_keeps_return_code():
    err = LapackError(7)
    assert err.return_code == 7
    assert "7" in str(err)
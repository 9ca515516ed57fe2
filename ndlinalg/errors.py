"""Exception hierarchy for linear algebra routines."""


class LinalgError(Exception):
    """Base class of every error raised by this package."""


class NotSquareError(LinalgError, ValueError):
    """The matrix is not square."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(f"Not square: rows({rows}) != cols({cols})")
        self.rows = rows
        self.cols = cols


class InvalidStrideError(LinalgError, ValueError):
    """The strides of the array cannot be handled as a dense matrix."""

    def __init__(self, s0: int, s1: int) -> None:
        super().__init__(f"invalid stride: s0={s0}, s1={s1}")
        self.s0 = s0
        self.s1 = s1


class MemoryNotContiguousError(LinalgError, ValueError):
    """The array memory is not laid out contiguously."""

    def __init__(self) -> None:
        super().__init__("Memory is not contiguous")


class NotStandardShapeError(LinalgError, ValueError):
    """An object cannot be built from a matrix of the given shape."""

    def __init__(self, obj: str, rows: int, cols: int) -> None:
        super().__init__(f"{obj} cannot be made from a ({rows}, {cols}) matrix")
        self.obj = obj
        self.rows = rows
        self.cols = cols


class IncompatibleShapeError(LinalgError, ValueError):
    """Array shapes do not fit together."""

    def __init__(self, message: str = "incompatible shapes") -> None:
        super().__init__(message)


class LapackError(LinalgError, ArithmeticError):
    """A numerical routine reported a non-zero return code."""

    def __init__(self, return_code: int, message: str | None = None) -> None:
        if message is None:
            message = f"computational routine failed with return code {return_code}"
        super().__init__(message)
        self.return_code = return_code
# ndlinalg

Linear algebra routines for NumPy arrays, built on NumPy and SciPy.

## Modules

- `ndlinalg.errors`: the `LinalgError` base exception and its subclasses
  `NotSquareError`, `InvalidStrideError`, `MemoryNotContiguousError`,
  `NotStandardShapeError`, `IncompatibleShapeError` and `LapackError`.
- `ndlinalg.layout`: `layout`, `square_layout`, `ensure_square` and
  `as_allocated` describe how a 2-D array is stored (`MatrixLayout`). They raise
  `InvalidStrideError`, `NotSquareError` or `MemoryNotContiguousError` when the
  array does not fit.
- `ndlinalg.inner`: `inner(a, b)` returns the inner product and conjugates
  its first argument.
- `ndlinalg.norm`: the vector norms `norm`, `norm_l1`, `norm_l2` and `norm_max`.
  `normalize(m, NormalizeAxis.ROW | NormalizeAxis.COLUMN)` returns the
  normalized matrix together with the norms the slices had before.
- `ndlinalg.opnorm`: the operator norms `opnorm(a, NormType...)`,
  `opnorm_one`, `opnorm_inf` and `opnorm_fro`. They work on dense matrices and
  on `Tridiagonal(dl, d, du)`.
- `ndlinalg.qr`: `qr` gives the reduced QR decomposition and `qr_square` the
  decomposition of a square matrix. The module also defines the `UPLO` enum
  (`UPLO.UPPER`, `UPLO.LOWER`).
- `ndlinalg.generate`: `random`, `random_unitary`, `random_regular`,
  `random_hermite` and `random_hpd` build test matrices. It also has
  `conjugate`, `from_diag`, `hstack` and `vstack`.
- `ndlinalg.operator`: `LinearOperator` is a base class for actions on
  vectors. Its methods `apply`, `apply_mut`, `apply_into`, `apply2`,
  `apply2_mut` and `apply2_into` extend the action column by column.
  `MatrixOperator` wraps a dense matrix, and `as_operator` wraps one when
  needed.
- `ndlinalg.least_squares`: `least_squares` and `least_squares_in_place`
  solve `A x = b` through the SVD. They accept a vector or a matrix
  right-hand side and return a `LeastSquaresResult` with `solution`,
  `singular_values`, `rank` and `residual_sum_of_squares`.
- `ndlinalg.eigh`: Hermitian eigenproblems.
  - `eigh` returns the eigenvalues in ascending order and orthonormal
    eigenvectors.
  - `eigh_generalized` solves `A V = B V D` with `V^H B V = I`.
  - `eigvalsh` returns the eigenvalues only.
  - `ssqrt` returns the symmetric square root.
- `ndlinalg.krylov.orthogonalizer`: the `Orthogonalizer` base class,
  `AppendResult`, `Strategy` (`TERMINATE`, `SKIP`, `FULL`), and online QR
  through `qr(vectors, ortho, strategy)`.
- `ndlinalg.krylov.mgs`: the `MGS` orthogonalizer (modified Gram–Schmidt) and
  `mgs(vectors, dim, rtol, strategy)`.
- `ndlinalg.krylov.householder`: the `Householder` orthogonalizer,
  `calc_reflector`, `reflect`, and `householder(vectors, dim, rtol, strategy)`.
- `ndlinalg.krylov.arnoldi`: the `Arnoldi` iterator, `arnoldi_mgs` and
  `arnoldi_householder`. Each returns the basis `Q` and the Hessenberg
  matrix `H`.
- `ndlinalg.lobpcg.solver`: `lobpcg(a, x, m, y, tol, maxiter, order)` finds a
  few extreme eigenpairs of a real symmetric positive-definite problem. `order`
  is `Order.LARGEST` or `Order.SMALLEST`. The result is a `LobpcgResult` with
  `eigvals`, `eigvecs`, `rnorm` and `error`, plus the `converged` and
  `has_result` properties.
- `ndlinalg.lobpcg.truncated_eig`: `TruncatedEig` is a builder with
  `precision`, `maxiter`, `orthogonal_to`, `precondition_with` and
  `decompose`. Iterating over it yields one eigenpair at a time.
- `ndlinalg.lobpcg.truncated_svd`: `TruncatedSvd` is a builder with
  `precision`, `maxiter` and `decompose`. `decompose` returns a
  `TruncatedSvdResult`, which offers `values()` and `values_vectors()`.

## Installation

```
pip install ndlinalg
```

## Examples

Eigendecomposition of a real symmetric matrix:

```python
import numpy as np
from ndlinalg.eigh import eigh
from ndlinalg.qr import UPLO

a = np.array([[2.0, 1.0], [1.0, 2.0]])
vals, vecs = eigh(a, UPLO.LOWER)
# vals is close to [1.0, 3.0]
# a @ vecs is close to vecs @ np.diag(vals)
```

Least squares:

```python
import numpy as np
from ndlinalg.least_squares import least_squares

a = np.array([[1.0, 1.0, 1.0], [2.0, 3.0, 4.0], [3.0, 5.0, 2.0],
              [4.0, 2.0, 5.0], [5.0, 4.0, 3.0]])
b = np.array([-10.0, 12.0, 14.0, 16.0, 18.0])
result = least_squares(a, b)
# result.solution is close to [2.0, 1.0, 1.0]; result.rank == 3
```

Orthogonalizing vectors one at a time:

```python
import numpy as np
from ndlinalg.krylov.mgs import MGS

ortho = MGS(3, 1e-9)
ortho.append(np.array([0.0, 1.0, 0.0])).into_coeff()   # [1.0]
ortho.append(np.array([1.0, 1.0, 0.0])).into_coeff()   # [1.0, 1.0]
ortho.append(np.array([1.0, 2.0, 0.0])).is_dependent   # True
```

The largest eigenvalues of a matrix, found one at a time:

```python
import numpy as np
from itertools import islice
from ndlinalg.lobpcg.solver import Order
from ndlinalg.lobpcg.truncated_eig import TruncatedEig

a = np.diag(np.arange(1.0, 21.0))
teig = TruncatedEig(a, Order.LARGEST).precision(1e-5).maxiter(500)
top = [vals[0] for vals, _ in islice(iter(teig), 3)]   # about [20, 19, 18]
```

A truncated SVD:

```python
import numpy as np
from ndlinalg.lobpcg.solver import Order
from ndlinalg.lobpcg.truncated_svd import TruncatedSvd

a = np.array([[3.0, 2.0, 2.0], [2.0, 3.0, -2.0]])
res = TruncatedSvd(a, Order.LARGEST).precision(1e-5).maxiter(10).decompose(2)
u, sigma, vt = res.values_vectors()   # sigma is close to [5.0, 3.0]
```

## What the package does not do

The package has no Cholesky or LU factorization and no general
(non-Hermitian) eigenvalue decomposition. It has no full singular value
decomposition; `TruncatedSvd` is the only SVD it offers. It does not solve
general, triangular or tridiagonal linear systems, and it does not compute
inverse matrices. `Tridiagonal` is used only for operator norms. `lobpcg` and
its wrappers handle real-valued problems only. There is no command-line tool.

## Errors

Every failure specific to this package raises a subclass of
`ndlinalg.errors.LinalgError`. Examples are `NotSquareError`,
`IncompatibleShapeError` and `LapackError`.

## Running the tests

```
pip install "ndlinalg[test]"
pytest
```
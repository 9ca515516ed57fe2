"""Linear algebra routines for NumPy arrays: norms, QR, least squares, Hermitian eigenproblems, Krylov methods and LOBPCG."""

__version__ = "0.1.0"
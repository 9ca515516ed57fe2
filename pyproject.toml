[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ndlinalg"
version = "0.1.0"
description = "Linear algebra routines on NumPy arrays: QR, least squares, Hermitian eigenproblems, Krylov orthogonalizers and LOBPCG."
requires-python = ">=3.10"
keywords = ["linear algebra", "eigenvalues", "qr", "least squares", "krylov", "arnoldi", "lobpcg", "svd"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ndlinalg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true

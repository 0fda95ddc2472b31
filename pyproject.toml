[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hmatrices"
version = "0.1.0"
description = "Hierarchical matrices for Laplace and Helmholtz Green's function kernels"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "scipy",
]
keywords = [
    "hierarchical matrix",
    "h-matrix",
    "cluster tree",
    "block tree",
    "green's function",
    "helmholtz",
    "laplace",
    "low-rank",
    "adaptive cross approximation",
]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hmatrices = "hmatrices.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hmatrices"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

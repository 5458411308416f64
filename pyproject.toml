[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "numethods"
version = "0.1.0"
description = "Classical numerical methods: linear systems, eigenvalues, root finding, interpolation, approximation, differentiation and quadrature"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "linear-algebra",
    "eigenvalues",
    "root-finding",
    "interpolation",
    "spline",
    "least-squares",
    "quadrature",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["numethods*"]

[tool.pytest.ini_options]
addopts = "-ra"

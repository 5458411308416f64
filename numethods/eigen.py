"""Eigenvalue problems: Jacobi rotations and power iteration."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .errors import NumericalError

Matrix = list[list[float]]


@dataclass(frozen=True)
class EigenDecomposition:
    """Eigenvalues and eigenvectors (as columns of ``vectors``)."""

    values: list[float]
    vectors: Matrix
    iterations: int


@dataclass(frozen=True)
class DominantEigenpair:
    """Eigenvalue of largest modulus with its eigenvector."""

    value: float
    vector: list[float]
    iterations: int


def _square(a: Sequence[Sequence[float]]) -> Matrix:
    matrix = [[float(v) for v in row] for row in a]
    n = len(matrix)
    if n == 0 or any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square and non-empty")
    return matrix


def _identity(n: int) -> Matrix:
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def _matmul(left: Matrix, right: Matrix) -> Matrix:
    columns = list(zip(*right))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in left]


def _transpose(m: Matrix) -> Matrix:
    return [list(col) for col in zip(*m)]


def _off_diagonal_norm(a: Matrix) -> float:
    n = len(a)
    return math.sqrt(sum(a[i][j] ** 2 for i in range(n) for j in range(i + 1, n)))


def jacobi_eigen(a: Sequence[Sequence[float]], eps: float) -> EigenDecomposition:
    """Find all eigenpairs of a symmetric matrix by Jacobi rotations.

    Iterates until the norm of the upper off-diagonal part is at most ``eps``.
    """
    m = _square(a)
    n = len(m)
    if any(m[i][j] != m[j][i] for i in range(n) for j in range(i + 1, n)):
        raise ValueError("matrix must be symmetric")

    v = _identity(n)
    f = _off_diagonal_norm(m)
    iterations = 0

    while f > eps:
        l, k = max(
            ((i, j) for i in range(n) for j in range(i + 1, n)),
            key=lambda ij: abs(m[ij[0]][ij[1]]),
        )
        if m[l][l] == m[k][k]:
            angle = math.pi / 4
        else:
            angle = math.atan(2 * m[l][k] / (m[l][l] - m[k][k])) / 2.0

        u = _identity(n)
        cos, sin = math.cos(angle), math.sin(angle)
        u[l][l] = cos
        u[l][k] = -sin
        u[k][l] = sin
        u[k][k] = cos

        m = _matmul(_matmul(_transpose(u), m), u)
        v = _matmul(v, u)
        f = _off_diagonal_norm(m)
        iterations += 1

    return EigenDecomposition(
        values=[m[i][i] for i in range(n)], vectors=v, iterations=iterations
    )


def power_iteration(a: Sequence[Sequence[float]], eps: float) -> DominantEigenpair:
    """Find the eigenvalue of largest modulus and its eigenvector.

    The vector is normalised so that its largest component has modulus one.
    """
    m = _square(a)
    y = [1.0] * len(m)
    f = 2 * eps
    w = 0.0
    iterations = 0

    while f > eps:
        z = [sum(aij * yj for aij, yj in zip(row, y)) for row in m]
        r = max(abs(value) for value in z)
        if r == 0 or y[0] == 0:
            raise NumericalError("power iteration broke down on a zero component")
        previous = w if iterations > 0 else 2 * eps + z[0] / y[0]
        w = z[0] / y[0]
        y = [value / r for value in z]
        f = abs(w - previous)
        iterations += 1

    return DominantEigenpair(value=w, vector=y, iterations=iterations)
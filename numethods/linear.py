"""Direct and iterative solvers for systems of linear algebraic equations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import ConvergenceError, NumericalError, SingularMatrixError

Matrix = list[list[float]]


@dataclass(frozen=True)
class TridiagonalSolution:
    """Solution of a tridiagonal system and the matrix determinant."""

    x: list[float]
    determinant: float


@dataclass(frozen=True)
class GaussSolution:
    """Solution, determinant and inverse obtained by Gaussian elimination."""

    x: list[float]
    determinant: float
    inverse: Matrix


@dataclass(frozen=True)
class IterativeSolution:
    """Solution of an iterative method and the number of iterations used."""

    x: list[float]
    iterations: int


def _square(a: Sequence[Sequence[float]]) -> Matrix:
    matrix = [[float(v) for v in row] for row in a]
    n = len(matrix)
    if n == 0 or any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square and non-empty")
    return matrix


def _vector(v: Sequence[float], n: int) -> list[float]:
    vector = [float(value) for value in v]
    if len(vector) != n:
        raise ValueError(f"vector must have {n} elements, got {len(vector)}")
    return vector


def solve_tridiagonal(
    a: Sequence[float], b: Sequence[float], c: Sequence[float], d: Sequence[float]
) -> TridiagonalSolution:
    """Solve a tridiagonal system with the sweep (Thomas) method.

    ``a`` is the sub-diagonal (``a[0]`` unused), ``b`` the main diagonal,
    ``c`` the super-diagonal (``c[-1]`` unused) and ``d`` the right-hand side.
    """
    n = len(b)
    if n == 0:
        raise ValueError("system must not be empty")
    sub, diag, sup, rhs = (_vector(v, n) for v in (a, b, c, d))

    if diag[0] == 0:
        raise SingularMatrixError("zero pivot in the sweep method")
    p = [-sup[0] / diag[0]]
    q = [rhs[0] / diag[0]]
    determinant = diag[0]

    for i in range(1, n):
        denominator = diag[i] + sub[i] * p[-1]
        if denominator == 0:
            raise SingularMatrixError("zero pivot in the sweep method")
        p_prev, q_prev = p[-1], q[-1]
        p.append(-sup[i] / denominator)
        q.append((rhs[i] - sub[i] * q_prev) / denominator)
        determinant *= denominator

    x = [0.0] * n
    x[-1] = q[-1]
    for i in reversed(range(n - 1)):
        x[i] = p[i] * x[i + 1] + q[i]

    return TridiagonalSolution(x=x, determinant=determinant)


def solve_gauss(a: Sequence[Sequence[float]], b: Sequence[float]) -> GaussSolution:
    """Solve ``a x = b`` by Gaussian elimination with partial pivoting.

    Also returns the determinant and the inverse of ``a``. The inputs are
    left unchanged.
    """
    m = _square(a)
    n = len(m)
    rhs = _vector(b, n)
    z = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
    swaps = 0

    for k in range(n - 1):
        pivot = max(range(k, n), key=lambda i: abs(m[i][k]))
        if m[pivot][k] == 0:
            raise SingularMatrixError("Solution is not unique or not available")
        if pivot != k:
            m[k], m[pivot] = m[pivot], m[k]
            rhs[k], rhs[pivot] = rhs[pivot], rhs[k]
            z[k], z[pivot] = z[pivot], z[k]
            swaps += 1

        for i in range(k + 1, n):
            h = -m[i][k] / m[k][k]
            m[i] = [mij + h * mkj for mij, mkj in zip(m[i], m[k])]
            rhs[i] += h * rhs[k]
            z[i] = [zij + h * zkj for zij, zkj in zip(z[i], z[k])]

    if m[n - 1][n - 1] == 0:
        raise SingularMatrixError("Solution is not unique or not available")

    determinant = -1.0 if swaps % 2 else 1.0
    x = [0.0] * n
    for k in reversed(range(n)):
        pivot = m[k][k]
        determinant *= pivot
        h = sum(m[k][i] * x[i] for i in range(k + 1, n))
        x[k] = (rhs[k] - h) / pivot
        z[k] = [
            (z[k][j] - sum(m[k][i] * z[i][j] for i in range(k + 1, n))) / pivot
            for j in range(n)
        ]

    return GaussSolution(x=x, determinant=determinant, inverse=z)


def _iterate(
    c: Sequence[Sequence[float]], d: Sequence[float], eps: float, seidel: bool
) -> IterativeSolution:
    matrix = _square(c)
    n = len(matrix)
    rhs = _vector(d, n)

    if any(matrix[i][i] == 0 for i in range(n)):
        raise NumericalError("zero on the diagonal; cannot reduce to iteration form")

    a = [
        [0.0 if i == j else -matrix[i][j] / matrix[i][i] for j in range(n)]
        for i in range(n)
    ]
    b = [rhs[i] / matrix[i][i] for i in range(n)]

    norm = max(sum(abs(v) for v in row) for row in a)
    if norm >= 1:
        raise ConvergenceError("The convergence condition is not fulfilled")

    factor = norm / (1 - norm)
    x = list(b)
    estimate = max((abs(v) for v in x), default=0.0) * factor
    iterations = 0

    while estimate > eps:
        previous = list(x)
        source = x if seidel else previous
        for i, row in enumerate(a):
            x[i] = sum((aij * sj for aij, sj in zip(row, source)), b[i])
        estimate = max(abs(new - old) for new, old in zip(x, previous)) * factor
        iterations += 1

    return IterativeSolution(x=x, iterations=iterations)


def solve_jacobi(
    c: Sequence[Sequence[float]], d: Sequence[float], eps: float
) -> IterativeSolution:
    """Solve ``c x = d`` with the fixed-point (Jacobi) iteration method."""
    return _iterate(c, d, eps, seidel=False)


def solve_seidel(
    c: Sequence[Sequence[float]], d: Sequence[float], eps: float
) -> IterativeSolution:
    """Solve ``c x = d`` with the Gauss-Seidel method."""
    return _iterate(c, d, eps, seidel=True)


def residual(
    a: Sequence[Sequence[float]], x: Sequence[float], b: Sequence[float]
) -> list[float]:
    """Return ``a x - b``."""
    return [
        sum(aij * xj for aij, xj in zip(row, x)) - bi for row, bi in zip(a, b)
    ]
"""Lagrange and Newton interpolation polynomials."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import combinations
from typing import Sequence


@dataclass(frozen=True)
class Interpolant:
    """Polynomial coefficients and the polynomial's value at the query point.

    For Lagrange the coefficients are ``y_j / prod(x_j - x_i)``; for Newton
    they are the divided differences ``f[x_0, ..., x_j]``.
    """

    coefficients: list[float]
    value: float


def _nodes(x: Sequence[float], y: Sequence[float]) -> tuple[list[float], list[float]]:
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    if not xs or len(xs) != len(ys):
        raise ValueError("x and y must be non-empty and of equal length")
    if len(set(xs)) != len(xs):
        raise ValueError("interpolation nodes must be distinct")
    return xs, ys


def divided_differences(x: Sequence[float], y: Sequence[float]) -> list[list[float]]:
    """Return the table of divided differences; row ``i``, column ``j``
    holds ``f[x_i, ..., x_{i+j}]`` and unused cells are zero."""
    xs, ys = _nodes(x, y)
    n = len(xs)
    table = [[0.0] * n for _ in range(n)]
    for i, value in enumerate(ys):
        table[i][0] = value
    for j in range(1, n):
        for i in range(n - j):
            table[i][j] = (table[i][j - 1] - table[i + 1][j - 1]) / (xs[i] - xs[i + j])
    return table


def lagrange(x: Sequence[float], y: Sequence[float], u: float) -> Interpolant:
    """Evaluate the Lagrange interpolation polynomial at ``u``."""
    xs, ys = _nodes(x, y)
    coefficients = []
    value = 0.0
    for j, (xj, yj) in enumerate(zip(xs, ys)):
        others = [xi for i, xi in enumerate(xs) if i != j]
        coefficients.append(yj / math.prod(xj - xi for xi in others))
        value += yj * math.prod((u - xi) / (xj - xi) for xi in others)
    return Interpolant(coefficients=coefficients, value=value)


def newton_polynomial(x: Sequence[float], y: Sequence[float], u: float) -> Interpolant:
    """Evaluate the Newton interpolation polynomial at ``u``."""
    xs, _ = _nodes(x, y)
    coefficients = divided_differences(x, y)[0]
    value = sum(
        coefficient * math.prod(u - xi for xi in xs[:j])
        for j, coefficient in enumerate(coefficients)
    )
    return Interpolant(coefficients=list(coefficients), value=value)


def vandermonde_determinant(x: Sequence[float]) -> float:
    """Return ``prod_{i<j} (x_j - x_i)``, non-zero exactly for distinct nodes."""
    return math.prod(xj - xi for xi, xj in combinations([float(v) for v in x], 2))
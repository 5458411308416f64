"""Numerical integration on equally spaced nodes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

Function = Callable[[float], float]


@dataclass(frozen=True)
class QuadratureResult:
    """Values of the integral given by the basic quadrature rules."""

    left: float
    right: float
    midpoint: float
    trapezoid: float
    simpson: float


def _nodes(x: Sequence[float]) -> list[float]:
    xs = [float(v) for v in x]
    if len(xs) < 2:
        raise ValueError("at least two nodes are needed")
    return xs


def _uniform_step(xs: list[float]) -> float:
    h = xs[1] - xs[0]
    if h <= 0:
        raise ValueError("nodes must be strictly increasing")
    for left, right in zip(xs, xs[1:]):
        if not math.isclose(right - left, h, rel_tol=1e-9, abs_tol=1e-12):
            raise ValueError("nodes must be equally spaced")
    return h


def quadrature(f: Function, x: Sequence[float]) -> QuadratureResult:
    """Integrate ``f`` over ``[x[0], x[-1]]`` on the equally spaced nodes ``x``.

    Uses the left-point and right-point rectangle rules, the midpoint rule,
    the trapezoid rule and Simpson's rule.
    """
    xs = _nodes(x)
    h = _uniform_step(xs)
    ys = [f(xi) for xi in xs]
    mids = [f(xi + h / 2) for xi in xs[:-1]]

    left = sum(ys[:-1]) * h
    right = sum(ys[1:]) * h
    midpoint = sum(mids) * h
    trapezoid = sum(a + b for a, b in zip(ys, ys[1:])) * h / 2
    simpson = sum(a + 4 * m + b for a, m, b in zip(ys, mids, ys[1:])) * h / 6
    return QuadratureResult(
        left=left, right=right, midpoint=midpoint, trapezoid=trapezoid, simpson=simpson
    )


def refinement_pyramid(f: Function, x: Sequence[float]) -> list[list[float]]:
    """Refine trapezoid sums by the Runge-Romberg-Richardson rule.

    Row ``j`` of the first column is the trapezoid sum with every
    ``2**j``-th node; column ``j`` refines column ``j - 1`` with the factor
    ``2**(2 + j - 1) - 1``. Cells below the pyramid are zero.
    """
    xs = _nodes(x)
    ys = [f(xi) for xi in xs]
    intervals = len(xs) - 1
    size = intervals.bit_length()
    order = 2
    ratio = 2

    table = [[0.0] * size for _ in range(size)]
    for row in range(size):
        step = ratio**row
        table[row][0] = sum(
            (ys[step * i] + ys[step * (i - 1)]) / 2 * (xs[step * i] - xs[step * (i - 1)])
            for i in range(1, intervals // step + 1)
        )

    for col in range(1, size):
        factor = ratio ** (order + col - 1) - 1
        for row in range(size - col):
            previous = table[row][col - 1]
            table[row][col] = previous + (previous - table[row + 1][col - 1]) / factor
    return table
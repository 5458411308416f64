"""Numerical differentiation with a Newton interpolation polynomial."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import permutations
from typing import Sequence

from .interpolation import divided_differences


@dataclass(frozen=True)
class Derivatives:
    """First and second derivatives of the interpolant at a point."""

    first: float
    second: float


def newton_derivatives(x: Sequence[float], y: Sequence[float], u: float) -> Derivatives:
    """Differentiate the Newton polynomial through ``(x_i, y_i)`` at ``u``.

    Term ``j`` of the polynomial is ``f[x_0..x_j] * prod_{i<j} (u - x_i)``.
    Its first derivative drops one factor and its second drops an ordered
    pair of distinct factors.
    """
    table = divided_differences(x, y)
    coefficients = table[0]
    factors = [u - float(xi) for xi in x]

    first = 0.0
    second = 0.0
    for j, coefficient in enumerate(coefficients):
        terms = factors[:j]
        first += sum(
            coefficient * math.prod(t for i, t in enumerate(terms) if i != k)
            for k in range(j)
        )
        second += sum(
            coefficient
            * math.prod(t for i, t in enumerate(terms) if i not in (k, l))
            for k, l in permutations(range(j), 2)
        )
    return Derivatives(first=first, second=second)
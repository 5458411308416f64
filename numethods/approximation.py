"""Natural cubic splines and polynomial least-squares fits."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Sequence

from .errors import SingularMatrixError


class CubicSpline:
    """Natural cubic spline through the points ``(x_i, y_i)``.

    On ``[x_i, x_{i+1}]`` the spline is
    ``a_i + b_i t + c_i t^2 + d_i t^3`` with ``t = u - x_i``.
    """

    def __init__(self, x: Sequence[float], y: Sequence[float]) -> None:
        xs = [float(v) for v in x]
        ys = [float(v) for v in y]
        if len(xs) != len(ys):
            raise ValueError("x and y must have equal length")
        if len(xs) < 3:
            raise ValueError("a cubic spline needs at least three points")
        if any(right <= left for left, right in zip(xs, xs[1:])):
            raise ValueError("x must be strictly increasing")

        n = len(xs)
        h = [right - left for left, right in zip(xs, xs[1:])]
        slope = [(ys[i + 1] - ys[i]) / h[i] for i in range(n - 1)]

        # Sweep for the second-order coefficients c_1 .. c_{n-2}.
        p: list[float] = []
        q: list[float] = []
        for i in range(n - 2):
            rhs = 3 * (slope[i + 1] - slope[i])
            denominator = 2 * (xs[i + 2] - xs[i])
            if p:
                denominator += h[i] * p[-1]
                rhs -= h[i] * q[-1]
            p.append(-h[i + 1] / denominator)
            q.append(rhs / denominator)

        c = [0.0] * (n - 1)
        c[n - 2] = q[n - 3]
        for i in range(n - 3, 0, -1):
            c[i] = p[i - 1] * c[i + 1] + q[i - 1]

        b = [slope[i] - h[i] * (c[i + 1] + 2 * c[i]) / 3 for i in range(n - 2)]
        d = [(c[i + 1] - c[i]) / h[i] / 3 for i in range(n - 2)]
        b.append(slope[n - 2] - h[n - 2] * 2 * c[n - 2] / 3)
        d.append(-c[n - 2] / h[n - 2] / 3)

        self.x = tuple(xs)
        self.a = tuple(ys[:-1])
        self.b = tuple(b)
        self.c = tuple(c)
        self.d = tuple(d)

    def __call__(self, u: float) -> float:
        """Evaluate the spline at ``u``, which must lie within the nodes."""
        if not self.x[0] <= u <= self.x[-1]:
            raise ValueError(f"{u} lies outside [{self.x[0]}, {self.x[-1]}]")
        j = min(bisect.bisect_right(self.x, u) - 1, len(self.a) - 1)
        t = u - self.x[j]
        return self.a[j] + self.b[j] * t + self.c[j] * t * t + self.d[j] * t * t * t


@dataclass(frozen=True)
class LeastSquaresFit:
    """Normal system, polynomial coefficients and quality of a fit."""

    normal_matrix: list[list[float]]
    rhs: list[float]
    coefficients: list[float]
    sse: float
    fitted: list[float]


def _det(m: list[list[float]]) -> float:
    if len(m) == 1:
        return m[0][0]
    if len(m) == 2:
        return m[0][0] * m[1][1] - m[1][0] * m[0][1]
    return (
        m[0][0] * m[1][1] * m[2][2]
        + m[1][0] * m[2][1] * m[0][2]
        + m[2][0] * m[0][1] * m[1][2]
        - m[2][0] * m[1][1] * m[0][2]
        - m[0][0] * m[2][1] * m[1][2]
        - m[1][0] * m[0][1] * m[2][2]
    )


def least_squares(x: Sequence[float], y: Sequence[float], m: int) -> LeastSquaresFit:
    """Fit a polynomial with ``m`` coefficients (degree ``m - 1``, ``m`` from
    1 to 3) by solving the normal system with Cramer's rule."""
    if m not in (1, 2, 3):
        raise ValueError("m must be 1, 2 or 3")
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    if not xs or len(xs) != len(ys):
        raise ValueError("x and y must be non-empty and of equal length")

    matrix = [[sum(xk ** (i + j) for xk in xs) for j in range(m)] for i in range(m)]
    rhs = [sum(yk * xk**i for xk, yk in zip(xs, ys)) for i in range(m)]

    determinant = _det(matrix)
    if determinant == 0:
        raise SingularMatrixError("normal system is singular")
    coefficients = [
        _det([row[:col] + [bi] + row[col + 1:] for row, bi in zip(matrix, rhs)])
        / determinant
        for col in range(m)
    ]

    fitted = [sum(z * xk**i for i, z in enumerate(coefficients)) for xk in xs]
    sse = sum((g - yk) ** 2 for g, yk in zip(fitted, ys))
    return LeastSquaresFit(
        normal_matrix=matrix,
        rhs=rhs,
        coefficients=coefficients,
        sse=sse,
        fitted=fitted,
    )
"""Solving a system of two nonlinear equations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .errors import ConvergenceError, SingularMatrixError

Function2 = Callable[[float, float], float]
Jacobian = Callable[[float, float], tuple[tuple[float, float], tuple[float, float]]]


@dataclass(frozen=True)
class SystemRoot:
    """Approximate solution ``(x, y)`` and the number of iterations."""

    x: float
    y: float
    iterations: int


def fixed_point_system(
    phi1: Function2,
    phi2: Function2,
    a: float,
    b: float,
    c: float,
    d: float,
    eps: float,
    seidel: bool = False,
    q: float = 0.99,
) -> SystemRoot:
    """Iterate ``x = phi1(x, y)``, ``y = phi2(x, y)`` in ``[a, b] x [c, d]``.

    With ``seidel`` the new ``x`` is used at once when updating ``y``.
    ``q`` is the assumed contraction factor.
    """
    if q >= 1 or q <= 0:
        raise ConvergenceError("The convergence condition is not fulfilled")

    x = (a + b) / 2
    y = (c + d) / 2
    r = 2 * eps
    iterations = 0
    while r > eps:
        u, v = x, y
        x = phi1(u, v)
        y = phi2(x if seidel else u, v)
        if x < a or x > b or y < c or y > d:
            raise ConvergenceError("iteration left the region")
        r = max(abs(x - u), abs(y - v)) * q * q
        iterations += 1
    return SystemRoot(x=x, y=y, iterations=iterations)


def newton_system(
    f: Function2,
    g: Function2,
    jacobian: Jacobian,
    a: float,
    b: float,
    c: float,
    d: float,
    eps: float,
) -> SystemRoot:
    """Solve ``f = 0, g = 0`` with Newton's method from the region's centre.

    ``jacobian(x, y)`` returns ``((df/dx, df/dy), (dg/dx, dg/dy))``.
    """
    x = (a + b) / 2
    y = (c + d) / 2
    r = 2 * eps
    iterations = 0
    while r > eps:
        u, v = x, y
        (f1, f2), (g1, g2) = jacobian(u, v)
        det = f1 * g2 - f2 * g1
        if det == 0:
            raise SingularMatrixError("singular Jacobian in Newton's method")
        fu, gu = f(u, v), g(u, v)
        x = u - (fu * g2 - gu * f2) / det
        y = v - (f1 * gu - fu * g1) / det
        r = max(abs(x - u), abs(y - v))
        iterations += 1
    return SystemRoot(x=x, y=y, iterations=iterations)
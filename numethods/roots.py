"""Refining a root of a scalar nonlinear equation."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Callable

from .errors import ConvergenceError, NumericalError

Function = Callable[[float], float]

_STEP = math.sqrt(sys.float_info.epsilon)


@dataclass(frozen=True)
class RootResult:
    """Approximate root and the number of iterations used to reach it."""

    x: float
    iterations: int


def central_difference(f: Function, x: float) -> float:
    """Approximate ``f'(x)`` with a central difference."""
    return (f(x + _STEP) - f(x - _STEP)) / (2.0 * _STEP)


def bisection(f: Function, a: float, b: float, eps: float) -> RootResult:
    """Find a root of ``f`` in ``[a, b]`` by halving the interval."""
    if f(a) * f(b) >= 0:
        raise ValueError("f(a) and f(b) must have opposite signs")

    x = (a + b) / 2
    iterations = 0
    while (b - a) / 2 > eps:
        fx = f(x)
        if fx == 0:
            break
        if f(a) * fx < 0:
            b = x
        if fx * f(b) < 0:
            a = x
        x = (a + b) / 2
        iterations += 1
    return RootResult(x=x, iterations=iterations)


def fixed_point(phi: Function, a: float, b: float, eps: float) -> RootResult:
    """Find a fixed point ``x = phi(x)`` in ``[a, b]`` by simple iteration.

    The contraction factor is estimated as ``|phi'(b)|``.
    """
    q = abs(central_difference(phi, b))
    if q >= 1 or q <= 0:
        raise ConvergenceError("The convergence condition is not fulfilled")

    x = (a + b) / 2
    r = 2 * eps
    iterations = 0
    while r > eps:
        previous = x
        x = phi(previous)
        if x < a or x > b:
            raise ConvergenceError("iteration left the interval")
        r = abs(x - previous) * q / (1 - q)
        iterations += 1
    return RootResult(x=x, iterations=iterations)


def newton(
    f: Function, df: Function, d2f: Function, a: float, b: float, eps: float
) -> RootResult:
    """Find a root of ``f`` with Newton's method.

    The start is the end of ``[a, b]`` where ``f * f''`` is positive.
    """
    if f(a) * d2f(a) > 0:
        x = a
    elif f(b) * d2f(b) > 0:
        x = b
    else:
        raise ConvergenceError("no end of the interval where f * f'' > 0")

    r = 2 * eps
    iterations = 0
    while r > eps:
        previous = x
        slope = df(previous)
        if slope == 0:
            raise NumericalError("zero derivative in Newton's method")
        x = previous - f(previous) / slope
        r = abs(x - previous)
        iterations += 1
    return RootResult(x=x, iterations=iterations)


def secant(f: Function, x0: float, x1: float, eps: float) -> RootResult:
    """Find a root of ``f`` with the secant method from ``x0`` and ``x1``.

    The iteration count includes the second starting point.
    """
    y = x0
    x = x1
    r = 2 * eps
    iterations = 1
    while r > eps:
        z, y = y, x
        fy, fz = f(y), f(z)
        if fy == fz:
            raise NumericalError("equal function values in the secant method")
        x = y - fy * (y - z) / (fy - fz)
        r = abs(x - y)
        iterations += 1
    return RootResult(x=x, iterations=iterations)
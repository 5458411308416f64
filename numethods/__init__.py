"""Classical numerical methods: linear systems, eigenproblems, roots, interpolation, approximation, differentiation and quadrature."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "linear",
    "eigen",
    "roots",
    "systems",
    "interpolation",
    "approximation",
    "differentiation",
    "integration",
]
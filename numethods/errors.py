"""Exceptions raised by the numerical routines."""


class NumericalError(ArithmeticError):
    """Base class for failures of a numerical method."""


class SingularMatrixError(NumericalError):
    """The matrix has no unique solution or no inverse."""


class ConvergenceError(NumericalError):
    """The convergence condition of an iterative method does not hold."""
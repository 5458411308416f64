# numethods

Classical numerical methods in plain Python, with no third-party
dependencies. Every routine takes plain lists of numbers, or callables, and
returns a small frozen dataclass or a list. Nothing is printed.

## Modules

### `numethods.linear`

- `solve_tridiagonal(a, b, c, d)`: the sweep (Thomas) method. `a` is the
  sub-diagonal (`a[0]` is ignored), `b` the main diagonal, `c` the
  super-diagonal (`c[-1]` is ignored) and `d` the right-hand side. It returns a
  `TridiagonalSolution` with `x` and `determinant`.
- `solve_gauss(a, b)`: Gaussian elimination with partial pivoting. It returns
  a `GaussSolution` with `x`, `determinant` and `inverse`. The inputs are not
  modified.
- `solve_jacobi(c, d, eps)` and `solve_seidel(c, d, eps)`: fixed-point
  (Jacobi) and Gauss–Seidel iteration. The system is reduced to the form
  `x = a x + b`. The solvers raise `ConvergenceError` when the row-sum norm of
  `a` is 1 or more. They stop when the a-posteriori error estimate is at most
  `eps`, and return an `IterativeSolution` with `x` and `iterations`.
- `residual(a, x, b)`: returns `a x - b`.

### `numethods.eigen`

- `jacobi_eigen(a, eps)`: Jacobi rotations for a symmetric matrix. Each step
  rotates away the largest off-diagonal element, and the method runs until the
  norm of the upper off-diagonal part is at most `eps`. It returns an
  `EigenDecomposition` with `values`, `vectors` (eigenvectors as columns) and
  `iterations`. A non-symmetric matrix raises `ValueError`.
- `power_iteration(a, eps)`: finds the eigenvalue of largest modulus. It
  returns a `DominantEigenpair` with `value`, `vector` and `iterations`. The
  vector is scaled so that its largest component has modulus one.

### `numethods.roots`

Each solver returns a `RootResult` with `x` and `iterations`.

- `bisection(f, a, b, eps)`: interval halving. `f(a)` and `f(b)` must have
  opposite signs.
- `fixed_point(phi, a, b, eps)`: simple iteration `x = phi(x)` started at the
  midpoint of `[a, b]`. The contraction factor is estimated as `|phi'(b)|`.
- `newton(f, df, d2f, a, b, eps)`: Newton's method, started at the end of
  `[a, b]` where `f * f''` is positive.
- `secant(f, x0, x1, eps)`: the secant method. The iteration count includes
  the second starting point.
- `central_difference(f, x)`: a central-difference estimate of `f'(x)`.

### `numethods.systems`

Systems of two nonlinear equations. Both functions start from the centre of
the region `[a, b] x [c, d]` and return a `SystemRoot` with `x`, `y` and
`iterations`.

- `fixed_point_system(phi1, phi2, a, b, c, d, eps, seidel=False, q=0.99)`:
  simple iteration. With `seidel=True` it uses Seidel iteration instead. `q`
  is the assumed contraction factor. If an iterate leaves the region,
  `ConvergenceError` is raised.
- `newton_system(f, g, jacobian, a, b, c, d, eps)`: Newton's method.
  `jacobian(x, y)` must return `((df/dx, df/dy), (dg/dx, dg/dy))`.

### `numethods.interpolation`

- `lagrange(x, y, u)` and `newton_polynomial(x, y, u)`: evaluate the
  interpolation polynomial at `u`. Each returns an `Interpolant` with
  `coefficients` and `value`.
- `divided_differences(x, y)`: the full table of divided differences.
- `vandermonde_determinant(x)`: `prod_{i<j} (x_j - x_i)`.

### `numethods.approximation`

- `CubicSpline(x, y)`: a cubic spline with zero second derivative at the first
  node. It needs at least three strictly increasing nodes. The instance is
  callable for points inside `[x[0], x[-1]]`, and its per-interval coefficients
  are available as `a`, `b`, `c` and `d`.
- `least_squares(x, y, m)`: fits a polynomial with `m` coefficients
  (`m` = 1, 2 or 3) by solving the normal system with Cramer's rule. It returns
  a `LeastSquaresFit` with `normal_matrix`, `rhs`, `coefficients`, `sse`
  (sum of squared errors) and `fitted`.

### `numethods.differentiation`

- `newton_derivatives(x, y, u)`: the first and second derivatives at `u` of
  the Newton polynomial through the points, returned as a `Derivatives` with
  `first` and `second`.

### `numethods.integration`

- `quadrature(f, x)`: integrates `f` over equally spaced nodes with the
  left-point and right-point rectangle rules, the midpoint rule, the trapezoid
  rule and Simpson's rule. It returns a `QuadratureResult`.
- `refinement_pyramid(f, x)`: the Runge–Romberg–Richardson refinement table.
  Its first column holds trapezoid sums for steps `h`, `2h`, `4h` and so on.

## Errors

Failures of a method raise subclasses of `numethods.errors.NumericalError`:

- `SingularMatrixError` when a system has no unique solution.
- `ConvergenceError` when a convergence condition fails.

`NumericalError` itself is raised for other breakdowns, such as a zero
derivative. Malformed input (wrong shapes, unequal lengths, a point outside
the spline's range) raises `ValueError`.

## What it does not do

There is no command-line program. The package only provides functions to
call from Python, and it formats no output.

## Installation

```
pip install .
```

## Example

```python
from numethods.linear import solve_tridiagonal, solve_gauss
from numethods.roots import bisection

sol = solve_tridiagonal(
    [0, -1, -9, -1, 9],
    [-6, 13, -15, -7, -18],
    [5, 6, -4, 1, 0],
    [51, 100, -12, 47, -90],
)
print(sol.x, sol.determinant)

g = solve_gauss(
    [[8, 8, -5, -8], [8, -5, 9, -8], [5, -4, -6, -2], [8, 3, 6, 6]],
    [13, 38, 14, -95],
)
print(g.x, g.determinant)

root = bisection(lambda x: 4 ** x - 5 * x - 2, 0.0, 2.0, 1e-3)
print(root.x, root.iterations)
```

## Running the tests

```
pip install .[test]
pytest
```
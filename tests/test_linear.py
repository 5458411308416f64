import pytest

from numethods.errors import ConvergenceError, NumericalError, SingularMatrixError
from numethods.linear import (
    residual,
    solve_gauss,
    solve_jacobi,
    solve_seidel,
    solve_tridiagonal,
)

SUB = [0, -1, -9, -1, 9]
DIAG = [-6, 13, -15, -7, -18]
SUP = [5, 6, -4, 1, 0]
RHS = [51, 100, -12, 47, -90]

GAUSS_A = [
    [8, 8, -5, -8],
    [8, -5, 9, -8],
    [5, -4, -6, -2],
    [8, 3, 6, 6],
]
GAUSS_B = [13, 38, 14, -95]

ITER_C = [
    [-19, 2, -1, -8],
    [2, 14, 0, -4],
    [6, -5, -20, -6],
    [-6, 4, -2, 15],
]
ITER_D = [38, 20, 52, 43]


def full_matrix(sub, diag, sup):
    n = len(diag)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = diag[i]
        if i > 0:
            matrix[i][i - 1] = sub[i]
        if i < n - 1:
            matrix[i][i + 1] = sup[i]
    return matrix


def test_tridiagonal_solution_satisfies_system():
    result = solve_tridiagonal(SUB, DIAG, SUP, RHS)
    matrix = full_matrix(SUB, DIAG, SUP)
    assert all(abs(r) < 1e-9 for r in residual(matrix, result.x, RHS))


def test_tridiagonal_determinant_matches_gauss():
    result = solve_tridiagonal(SUB, DIAG, SUP, RHS)
    gauss = solve_gauss(full_matrix(SUB, DIAG, SUP), RHS)
    assert result.determinant == pytest.approx(gauss.determinant)
    assert result.x == pytest.approx(gauss.x)


def test_tridiagonal_zero_pivot_raises():
    with pytest.raises(SingularMatrixError):
        solve_tridiagonal([0, 1], [0, 1], [1, 0], [1, 1])


def test_tridiagonal_length_mismatch():
    with pytest.raises(ValueError):
        solve_tridiagonal([0, 1], [1, 2, 3], [1, 1, 0], [1, 1, 1])


def test_gauss_solution_satisfies_system():
    result = solve_gauss(GAUSS_A, GAUSS_B)
    assert all(abs(r) < 1e-9 for r in residual(GAUSS_A, result.x, GAUSS_B))


def test_gauss_inverse_is_inverse():
    result = solve_gauss(GAUSS_A, GAUSS_B)
    n = len(GAUSS_A)
    for i in range(n):
        for j in range(n):
            product = sum(GAUSS_A[i][k] * result.inverse[k][j] for k in range(n))
            assert product == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)


def test_gauss_determinant_of_small_matrix():
    assert solve_gauss([[2, 1], [1, 3]], [1, 1]).determinant == pytest.approx(5.0)


def test_gauss_determinant_sign_flips_with_row_swap():
    first = solve_gauss(GAUSS_A, GAUSS_B).determinant
    swapped = [GAUSS_A[1], GAUSS_A[0], GAUSS_A[2], GAUSS_A[3]]
    second = solve_gauss(swapped, GAUSS_B).determinant
    assert second == pytest.approx(-first)


def test_gauss_does_not_mutate_inputs():
    a = [row[:] for row in GAUSS_A]
    b = GAUSS_B[:]
    solve_gauss(a, b)
    assert a == GAUSS_A
    assert b == GAUSS_B


def test_gauss_singular_raises():
    with pytest.raises(SingularMatrixError):
        solve_gauss([[1, 2], [2, 4]], [1, 2])


def test_gauss_non_square_raises():
    with pytest.raises(ValueError):
        solve_gauss([[1, 2, 3], [4, 5, 6]], [1, 2])


@pytest.mark.parametrize("solver", [solve_jacobi, solve_seidel])
def test_iterative_close_to_direct_solution(solver):
    exact = solve_gauss(ITER_C, ITER_D).x
    result = solver(ITER_C, ITER_D, 0.01)
    assert result.iterations > 0
    assert all(abs(a - b) < 0.01 for a, b in zip(result.x, exact))


@pytest.mark.parametrize("solver", [solve_jacobi, solve_seidel])
def test_tighter_tolerance_needs_more_iterations(solver):
    loose = solver(ITER_C, ITER_D, 0.01)
    tight = solver(ITER_C, ITER_D, 1e-8)
    assert tight.iterations > loose.iterations
    exact = solve_gauss(ITER_C, ITER_D).x
    assert tight.x == pytest.approx(exact, abs=1e-7)


@pytest.mark.parametrize("solver", [solve_jacobi, solve_seidel])
def test_diagonal_system_needs_no_iterations(solver):
    result = solver([[2, 0], [0, 4]], [6, 8], 0.001)
    assert result.iterations == 0
    assert result.x == pytest.approx([3.0, 2.0])


@pytest.mark.parametrize("solver", [solve_jacobi, solve_seidel])
def test_not_diagonally_dominant_raises(solver):
    with pytest.raises(ConvergenceError):
        solver([[1, 2], [3, 1]], [1, 1], 0.01)


@pytest.mark.parametrize("solver", [solve_jacobi, solve_seidel])
def test_zero_diagonal_raises(solver):
    with pytest.raises(NumericalError):
        solver([[0, 1], [1, 2]], [1, 1], 0.01)


def test_residual_of_exact_solution():
    assert residual([[1, 2], [3, 4]], [1, 1], [3, 7]) == [0.0, 0.0]
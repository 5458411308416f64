import math

import pytest

from numethods.integration import QuadratureResult, quadrature, refinement_pyramid


NODES = [-2.0, -1.0, 0.0, 1.0, 2.0]


def test_constant_is_exact_for_every_rule():
    result = quadrature(lambda t: 3.0, NODES)
    assert result == QuadratureResult(
        left=12.0, right=12.0, midpoint=12.0, trapezoid=12.0, simpson=12.0
    )


def test_linear_exact_for_midpoint_and_trapezoid():
    result = quadrature(lambda t: 2 * t + 1, [0.0, 0.5, 1.0, 1.5, 2.0])
    exact = 2.0**2 + 2.0
    assert result.midpoint == pytest.approx(exact)
    assert result.trapezoid == pytest.approx(exact)
    assert result.simpson == pytest.approx(exact)


def test_simpson_exact_for_cubic():
    result = quadrature(lambda t: t**3 - t**2 + 4, [0.0, 0.5, 1.0, 1.5, 2.0])
    exact = 2.0**4 / 4 - 2.0**3 / 3 + 4 * 2.0
    assert result.simpson == pytest.approx(exact, abs=1e-12)


def test_right_minus_left_is_step_times_end_difference():
    f = math.exp
    result = quadrature(f, NODES)
    assert result.right - result.left == pytest.approx(1.0 * (f(2.0) - f(-2.0)))


def test_trapezoid_is_mean_of_rectangle_rules():
    result = quadrature(lambda t: math.exp(t) + t, NODES)
    assert result.trapezoid == pytest.approx((result.left + result.right) / 2)


def test_simpson_close_to_exact_for_exponential():
    result = quadrature(lambda t: math.exp(t) + t, NODES)
    exact = math.exp(2) - math.exp(-2)
    assert result.simpson == pytest.approx(exact, abs=0.01)
    assert abs(result.simpson - exact) < abs(result.trapezoid - exact)


def test_too_few_nodes_rejected():
    with pytest.raises(ValueError):
        quadrature(math.exp, [1.0])


def test_unequal_spacing_rejected():
    with pytest.raises(ValueError):
        quadrature(math.exp, [0.0, 1.0, 3.0])


def test_pyramid_shape_and_zero_cells():
    table = refinement_pyramid(lambda t: math.exp(t) + t, NODES)
    assert len(table) == 3
    assert all(len(row) == 3 for row in table)
    assert table[1][2] == 0.0
    assert table[2][1] == 0.0
    assert table[2][2] == 0.0


def test_pyramid_first_entry_is_trapezoid():
    f = lambda t: math.exp(t) + t  # noqa: E731
    table = refinement_pyramid(f, NODES)
    assert table[0][0] == pytest.approx(quadrature(f, NODES).trapezoid)
    assert table[1][0] == pytest.approx(quadrature(f, [-2.0, 0.0, 2.0]).trapezoid)
    assert table[2][0] == pytest.approx(quadrature(f, [-2.0, 2.0]).trapezoid)


def test_pyramid_exact_for_cubic():
    f = lambda t: t**3 + 2 * t**2 - t + 1  # noqa: E731
    table = refinement_pyramid(f, [0.0, 0.5, 1.0, 1.5, 2.0])
    exact = 2.0**4 / 4 + 2 * 2.0**3 / 3 - 2.0**2 / 2 + 2.0
    assert table[0][1] == pytest.approx(exact, abs=1e-12)
    assert table[1][1] == pytest.approx(exact, abs=1e-12)
    assert table[0][2] == pytest.approx(exact, abs=1e-12)


def test_pyramid_refinement_improves_estimate():
    f = lambda t: math.exp(t) + t  # noqa: E731
    table = refinement_pyramid(f, NODES)
    exact = math.exp(2) - math.exp(-2)
    assert abs(table[0][1] - exact) < abs(table[0][0] - exact)


def test_pyramid_two_nodes():
    table = refinement_pyramid(lambda t: 2 * t, [0.0, 3.0])
    assert table == [[9.0]]


def test_pyramid_too_few_nodes_rejected():
    with pytest.raises(ValueError):
        refinement_pyramid(math.exp, [])
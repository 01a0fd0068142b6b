import math

import numpy as np
import pytest

from spine_vec.domain.errors import CurveFitError, InsufficientPointsError
from spine_vec.domain.points import SpinePoint, sort_points
from spine_vec.engine.curve import fit_curve


def _pts(coords):
    return [SpinePoint(x=x, y=y) for x, y in coords]


def test_one_angle_per_point_in_sorted_order():
    pts = sort_points(_pts([(310, 420), (300, 100), (305, 260), (302, 140), (312, 460)]))
    curve = fit_curve(pts)
    angles = curve.tangent_angles(pts)
    assert len(angles) == len(pts)
    assert [p.y for p in pts] == [100, 140, 260, 420, 460]


def test_vertical_spine_has_zero_angles():
    pts = _pts([(200, 0), (200, 50), (200, 120)])
    angles = fit_curve(pts).tangent_angles()
    assert np.allclose(angles, 0.0)


def test_straight_line_angle_matches_slope():
    # x = 2y + 1 -> dx/dy = 2 en todos los nodos (la spline natural reproduce rectas)
    pts = _pts([(2 * y + 1, y) for y in (0.0, 10.0, 25.0, 40.0)])
    angles = fit_curve(pts).tangent_angles()
    expected = math.degrees(math.atan2(2.0, 1.0))
    assert np.allclose(angles, expected)


def test_leaning_left_gives_negative_angles():
    pts = _pts([(-y, y) for y in (0.0, 5.0, 10.0)])
    angles = fit_curve(pts).tangent_angles()
    assert np.all(angles < 0)
    assert np.allclose(angles, -45.0)


def test_natural_boundary_conditions():
    pts = _pts([(0, 0), (3, 1), (1, 2), (4, 3), (2, 4)])
    curve = fit_curve(pts)
    d2 = curve.derivative(2)
    assert d2(0.0) == pytest.approx(0.0, abs=1e-9)
    assert d2(4.0) == pytest.approx(0.0, abs=1e-9)


def test_curve_interpolates_points():
    pts = _pts([(0, 0), (3, 1), (1, 2), (4, 3)])
    curve = fit_curve(pts)
    for p in pts:
        assert curve.evaluate(p.y) == pytest.approx(p.x)


def test_two_points_are_enough():
    curve = fit_curve(_pts([(0, 0), (1, 1)]))
    assert np.allclose(curve.tangent_angles(), [45.0, 45.0])


def test_sample_spans_y_range():
    curve = fit_curve(_pts([(0, 10), (1, 20), (0, 30)]))
    xs, ys = curve.sample(50)
    assert len(xs) == len(ys) == 50
    assert ys[0] == pytest.approx(10) and ys[-1] == pytest.approx(30)


def test_fewer_than_two_points_fails():
    with pytest.raises(InsufficientPointsError):
        fit_curve(_pts([(0, 0)]))
    with pytest.raises(InsufficientPointsError):
        fit_curve([])


def test_unsorted_points_fail():
    with pytest.raises(CurveFitError):
        fit_curve(_pts([(0, 10), (0, 5)]))


def test_duplicate_y_fails():
    with pytest.raises(CurveFitError):
        fit_curve(_pts([(0, 0), (1, 5), (2, 5)]))

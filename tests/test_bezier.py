"""
Tests for the numpy ``BezierCurve`` wrapper in ``casteljau/bezier.py``.
"""

import numpy as np
import pytest

from casteljau import BezierCurve, InvalidArgument, constants

CONTROL_POINTS = np.array([[0.0, 0.0], [1.0, 2.0], [3.0, 2.0], [4.0, 0.0]])


def test_construction() -> None:
    curve = BezierCurve(CONTROL_POINTS)
    assert curve.get_degree() == 3
    assert curve.get_dimension() == 2
    assert len(curve) == 4
    assert "degree=3" in repr(curve)


def test_control_points_are_copied() -> None:
    points = CONTROL_POINTS.copy()
    curve = BezierCurve(points)
    points[0, 0] = 99.0
    assert curve.control_points[0, 0] == 0.0
    cp = curve.get_control_points()
    cp[1, 1] = -5.0
    assert curve.control_points[1, 1] == 2.0


def test_one_dimensional_input_becomes_column() -> None:
    curve = BezierCurve([0.0, 1.0, 0.0])
    assert curve.control_points.shape == (3, 1)
    assert curve.point(0.5)[0] == pytest.approx(0.5)


@pytest.mark.parametrize("bad", [[], np.zeros((2, 2, 2))])
def test_invalid_shapes_raise(bad) -> None:
    with pytest.raises(InvalidArgument):
        BezierCurve(bad)


def test_bernstein_and_de_casteljau_agree() -> None:
    curve = BezierCurve(CONTROL_POINTS)
    t = np.linspace(-0.5, 1.5, 21)
    sampled = curve.evaluate(t)
    assert sampled.shape == (21, 2)
    for tau, p in zip(t, sampled):
        np.testing.assert_allclose(curve.point(tau), p, atol=1e-10)


def test_evaluate_scalar() -> None:
    curve = BezierCurve(CONTROL_POINTS)
    np.testing.assert_allclose(curve.evaluate(0.5), [[2.0, 1.5]])


def test_basis_is_partition_of_unity() -> None:
    curve = BezierCurve(CONTROL_POINTS)
    basis = curve.evaluate_basis(np.linspace(0.0, 1.0, 7))
    assert basis.shape == (7, 4)
    np.testing.assert_allclose(basis.sum(axis=1), np.ones(7))


def test_blossom_and_subdivide_at() -> None:
    curve = BezierCurve(CONTROL_POINTS)
    np.testing.assert_allclose(curve.blossom([0.0, 0.0, 1.0]), CONTROL_POINTS[1])
    np.testing.assert_allclose(curve.subdivide_at(3, 0.0, 0.5), curve.point(0.5))


def test_subdivide_preserves_shape() -> None:
    curve = BezierCurve(CONTROL_POINTS)
    piece = curve.subdivide(0.2, 0.7)
    assert piece.get_degree() == 3
    s = np.linspace(0.0, 1.0, 9)
    np.testing.assert_allclose(piece.evaluate(s), curve.evaluate(0.2 + 0.5 * s), atol=1e-12)


def test_split_pieces_meet() -> None:
    curve = BezierCurve(CONTROL_POINTS)
    left, right = curve.split(0.3)
    np.testing.assert_allclose(left.control_points[-1], right.control_points[0])
    np.testing.assert_allclose(left.control_points[-1], curve.point(0.3))


def test_segments() -> None:
    curve = BezierCurve(CONTROL_POINTS)
    pieces = curve.segments(3)
    assert len(pieces) == 3
    np.testing.assert_allclose(pieces[0].control_points[0], CONTROL_POINTS[0])
    np.testing.assert_allclose(pieces[-1].control_points[-1], CONTROL_POINTS[-1], atol=1e-12)
    with pytest.raises(InvalidArgument):
        curve.segments(0)


def test_reversed() -> None:
    curve = BezierCurve(CONTROL_POINTS)
    assert curve.reversed().allclose(BezierCurve(CONTROL_POINTS[::-1]))
    assert curve.reversed().reversed().allclose(curve)


def test_allclose_tolerances() -> None:
    curve = BezierCurve(CONTROL_POINTS)
    nudged = BezierCurve(CONTROL_POINTS + 10 * constants.DEFAULT_ATOL)
    assert not curve.allclose(nudged, rtol=0.0)
    assert curve.allclose(nudged, atol=1e-9)
    assert not curve.allclose(BezierCurve(CONTROL_POINTS[:3]))

import numpy as np
import pytest

from pointorder import contour_order, nearest_neighbor_order, sort_points_by_contour
from pointorder.contour import axis_index, contour_bins


def test_three_points_two_slices():
    pts = [(0, 0, 0), (5, 0, 0), (10, 0, 0)]
    np.testing.assert_array_equal(contour_bins(pts, "x", 2), [0, 1, 2])
    out = sort_points_by_contour(pts, "x", 2)
    np.testing.assert_array_equal(out, pts)


def test_bins_are_visited_in_ascending_order():
    rng = np.random.default_rng(0)
    pts = rng.uniform(-3.0, 7.0, size=(300, 3))
    order = contour_order(pts, "z", 6)
    np.testing.assert_array_equal(np.sort(order), np.arange(len(pts)))
    bins = contour_bins(pts, "z", 6)[order]
    assert np.all(np.diff(bins) >= 0)
    assert bins.max() <= 6


def test_next_slice_starts_next_to_previous_end():
    pts = [(0, 0, 0), (0, 5, 0), (1, 0, 0), (1, 5, 0)]
    np.testing.assert_array_equal(contour_order(pts, "x", 1), [0, 1, 3, 2])


def test_zero_range_is_a_single_bin():
    rng = np.random.default_rng(4)
    pts = rng.uniform(0.0, 1.0, size=(25, 3))
    pts[:, 2] = 2.5
    np.testing.assert_array_equal(contour_bins(pts, "z", 3), np.zeros(25, dtype=int))
    np.testing.assert_array_equal(contour_order(pts, "z", 3), nearest_neighbor_order(pts))


def test_empty_and_singleton():
    assert sort_points_by_contour([], "y", 4).shape == (0, 3)
    np.testing.assert_array_equal(sort_points_by_contour([(1, 2, 3)], "y", 4), [(1, 2, 3)])


def test_axis_selection():
    assert axis_index("x") == 0
    assert axis_index("Y") == 1
    assert axis_index(2) == 2
    for bad in ("w", 3, -1, True):
        with pytest.raises(ValueError):
            axis_index(bad)


def test_slice_count_below_one_means_one_slice():
    pts = [(0, 0, 0), (10, 0, 0), (4, 0, 0)]
    for s in (0, -2):
        np.testing.assert_array_equal(contour_bins(pts, "x", s), [0, 1, 0])
        np.testing.assert_array_equal(contour_order(pts, "x", s), [0, 2, 1])


@pytest.mark.parametrize("s", [True, 2.0, None, float("nan"), "2"])
def test_slice_count_must_be_an_integer(s):
    with pytest.raises(ValueError):
        sort_points_by_contour([(0, 0, 0), (1, 1, 1)], "x", s)


def test_huge_span_does_not_overflow():
    pts = [(-1e308, 0, 0), (0, 0, 0), (1e308, 0, 0)]
    with np.errstate(all="raise"):
        bins = contour_bins(pts, "x", 2)
    np.testing.assert_array_equal(bins, [0, 1, 2])

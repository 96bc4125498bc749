"""Tests for converting points into drawable polylines."""

import numpy
import pytest

from splinefit.curve import line_style
from splinefit.curve.line_style import LineStyle


class TestPolyline:
    """Tests for polyline() in each style."""

    def test_plot_draws_nothing(self, square):
        assert line_style.polyline(square, LineStyle.PLOT).shape == (0, 2)

    def test_line(self, square):
        assert numpy.array_equal(line_style.polyline(square, LineStyle.LINE), square)

    def test_closed_line(self, square):
        vertices = line_style.polyline(square, 'line', closed=True)
        assert len(vertices) == 5
        assert numpy.array_equal(vertices[-1], square[0])

    def test_bezier(self):
        points = [(0, 0), (0, 1), (1, 1), (1, 0)]
        vertices = line_style.polyline(points, LineStyle.BEZIER, samples_per_segment=10)
        assert vertices.shape == (11, 2)
        assert vertices[0] == pytest.approx([0, 0])
        assert vertices[5] == pytest.approx([0.5, 0.75])
        assert vertices[-1] == pytest.approx([1, 0])

    def test_open_spline_passes_through_knots(self, square):
        vertices = line_style.polyline(square, LineStyle.SPLINE, samples_per_segment=8)
        assert vertices.shape == (25, 2)
        assert numpy.allclose(vertices[::8], square)

    def test_closed_spline(self, square):
        vertices = line_style.polyline(square, LineStyle.SPLINE, closed=True, samples_per_segment=8)
        assert vertices.shape == (33, 2)
        assert numpy.allclose(vertices[:-1:8], square)
        assert vertices[-1] == pytest.approx(square[0])

    @pytest.mark.parametrize("closed", [False, True])
    def test_short_spline_falls_back_to_open_line(self, closed):
        points = [(1, 1), (2, 2)]
        vertices = line_style.polyline(points, LineStyle.SPLINE, closed=closed)
        assert numpy.array_equal(vertices, points)

    @pytest.mark.parametrize("style", list(LineStyle))
    def test_rejects_points_that_are_not_2d(self, style):
        with pytest.raises(ValueError):
            line_style.polyline([(0, 0, 0), (1, 1, 1)], style)

    def test_empty_input(self):
        assert line_style.polyline([], LineStyle.LINE).shape == (0, 2)

    def test_single_point(self):
        assert line_style.polyline([(3, 4)], LineStyle.BEZIER).shape == (0, 2)

    def test_unknown_style(self, square):
        with pytest.raises(ValueError):
            line_style.polyline(square, 'dotted')


class TestBezierRuns:
    """Tests for grouping points into cubic segments."""

    def test_full_segments(self):
        runs = line_style.bezier_runs(numpy.arange(14, dtype=float).reshape(7, 2))
        assert runs.shape == (2, 4, 2)

    def test_quadratic_tail(self):
        points = [(0, 0), (1, 1), (2, 1), (3, 0), (4, 2), (6, 0)]
        runs = line_style.bezier_runs(points)
        assert runs.shape == (2, 4, 2)
        # quadratic (3,0) (4,2) (6,0) raised to a cubic
        assert runs[1] == pytest.approx(numpy.array([(3, 0), (11 / 3, 4 / 3), (14 / 3, 4 / 3), (6, 0)]))

    def test_line_tail(self):
        points = [(0, 0), (1, 1), (2, 1), (3, 0), (6, 3)]
        runs = line_style.bezier_runs(points)
        assert runs.shape == (2, 4, 2)
        assert runs[1] == pytest.approx(numpy.array([(3, 0), (4, 1), (5, 2), (6, 3)]))

    @pytest.mark.parametrize("count", [0, 1])
    def test_nothing_to_draw(self, count):
        assert line_style.bezier_runs(numpy.zeros((count, 2))).shape == (0, 4, 2)

    def test_rejects_points_that_are_not_2d(self):
        with pytest.raises(ValueError):
            line_style.bezier_runs([(0, 0, 0), (1, 1, 1), (2, 0, 2), (3, 1, 3)])

"""Conversion of a knot sequence into the polyline a renderer should stroke,
for each of the ways the points can be connected."""

import enum

import numpy

from . import bezier
from . import fit
from . import geometry

class LineStyle(enum.Enum):
    PLOT = 'plot' # bare points, nothing connects them
    LINE = 'line' # straight segments between consecutive points
    BEZIER = 'bezier' # points are already anchors and control points
    SPLINE = 'spline' # smooth curve fitted through the points


def polyline(points, style, closed=False, samples_per_segment=20):
    """Return the vertices of the polyline that draws the given points in a style.

    Parameters:
    points: array of n points x,y; shape=(n,2)
    style: a LineStyle member or its string value.
    closed: if True, connect the last point back to the first. Ignored for
        LineStyle.BEZIER, where the points spell out the path exactly. Also
        ignored for LineStyle.SPLINE with fewer than 3 points, which are too
        few to fit and are drawn as an open line.
    samples_per_segment: number of straight pieces used to draw each cubic
        segment of the BEZIER and SPLINE styles.

    Returns an array of shape (v,2); for LineStyle.PLOT it is empty."""
    style = LineStyle(style)
    points = geometry.as_points(points)
    if style is LineStyle.PLOT:
        return numpy.empty((0, 2))
    elif style is LineStyle.LINE:
        return _line(points, closed)
    elif style is LineStyle.BEZIER:
        return _sample(bezier_runs(points), samples_per_segment)
    elif style is LineStyle.SPLINE:
        if len(points) < 3:
            return _line(points, closed=False)
        curve = fit.fit_curve(points, fit.CurveMode.CYCLIC if closed else fit.CurveMode.OPEN)
        return _sample(bezier.segments(curve), samples_per_segment)
    else:
        raise ValueError(f'Unsupported line style {style!r}')


def bezier_runs(points):
    """Group points laid out as [anchor, cp, cp, anchor, cp, cp, anchor, ...]
    into cubic Bezier segments.

    A trailing run that is too short for a full cubic segment is kept: three
    leftover points (anchor, cp, anchor) form a quadratic segment and two form
    a straight line. Both are raised to the equivalent cubic segment.

    Returns an array of shape (m,4,2)."""
    points = geometry.as_points(points)
    runs = []
    i = 0
    while len(points) - i >= 4:
        runs.append(points[i:i+4])
        i += 3
    left = len(points) - i
    if left == 3:
        start, control, end = points[i:]
        runs.append([start, start + 2/3 * (control - start), end + 2/3 * (control - end), end])
    elif left == 2:
        start, end = points[i:]
        step = (end - start) / 3
        runs.append([start, start + step, end - step, end])
    return numpy.array(runs, dtype=float).reshape(-1, 4, 2)


def _line(points, closed):
    if closed and len(points) > 1:
        return numpy.concatenate([points, points[:1]])
    return points


def _sample(segments, samples_per_segment):
    if len(segments) == 0:
        return numpy.empty((0, 2))
    poly = bezier.polynomial_from_segments(segments)
    positions = numpy.linspace(0, len(segments), samples_per_segment * len(segments) + 1)
    return poly(positions)

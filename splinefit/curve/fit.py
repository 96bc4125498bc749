import enum
import logging

import numpy

from . import geometry
from . import tridiagonal

logger = logging.getLogger(__name__)

class CurveMode(enum.Enum):
    OPEN = 'open'
    CYCLIC = 'cyclic'


def control_points(points, mode=CurveMode.OPEN):
    """Compute the Bezier control points of a smooth curve through the given knots.

    Parameters:
    points: array of n points x,y; shape=(n,2), n >= 3
    mode: CurveMode.OPEN (or 'open') for a chain from the first to the last
        point, CurveMode.CYCLIC (or 'cyclic') for a closed loop.

    Returns cp1, cp2: arrays of shape (m,2), where m = n-1 segments for an
    open chain and m = n for a closed loop. Segment i is the cubic Bezier curve
    (points[i], cp1[i], cp2[i], points[(i+1) % n]).

    Coordinates must be finite; NaN and inf values are not detected and will
    propagate into the control points."""
    mode = CurveMode(mode)
    points = geometry.as_points(points)
    if mode is CurveMode.OPEN:
        axes = [tridiagonal.open_control_points(knots) for knots in points.T]
    elif mode is CurveMode.CYCLIC:
        weights = geometry.chord_weights(points)
        axes = [tridiagonal.cyclic_control_points(knots, weights) for knots in points.T]
    else:
        raise ValueError(f'Unsupported curve mode {mode!r}')
    (x_cp1, x_cp2), (y_cp1, y_cp2) = axes
    return numpy.transpose([x_cp1, y_cp1]), numpy.transpose([x_cp2, y_cp2])


def fit_curve(points, mode=CurveMode.OPEN):
    """Fit a smooth piecewise-cubic Bezier curve that passes through each point.

    Parameters:
    points: array of n points x,y; shape=(n,2)
    mode: CurveMode.OPEN (or 'open') or CurveMode.CYCLIC (or 'cyclic').

    Returns the assembled curve: an array of shape (3*m+1, 2) laid out as
    [anchor_0, cp1_0, cp2_0, anchor_1, cp1_1, cp2_1, anchor_2, ...], so that
    each run of four points starting at a multiple of 3 is one cubic segment.
    An open chain has m = n-1 segments; a closed loop has m = n segments and
    ends where it began, at points[0].

    If fewer than 3 points are given, no fit is attempted and the points
    object is returned unchanged; callers should draw those as a straight line
    or as bare points."""
    mode = CurveMode(mode)
    if len(points) < 3:
        logger.debug(f'Not fitting {mode.value} curve through {len(points)} points')
        return points
    points = geometry.as_points(points)
    logger.debug(f'Fitting {mode.value} curve through {len(points)} points')
    cp1, cp2 = control_points(points, mode)
    m = len(cp1)
    anchors = numpy.concatenate([points, points[:1]]) if mode is CurveMode.CYCLIC else points
    curve = numpy.empty((3*m + 1, 2))
    curve[0::3] = anchors[:m+1]
    curve[1::3] = cp1
    curve[2::3] = cp2
    return curve

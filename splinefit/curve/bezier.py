import numpy
from scipy import interpolate

from . import geometry

def segments(curve):
    """Split an assembled curve into its cubic Bezier segments.

    Parameters:
    curve: array of shape (3*m+1, 2) laid out as
        [anchor_0, cp1_0, cp2_0, anchor_1, ...], as returned by fit.fit_curve()

    Returns an array of shape (m, 4, 2): segment i holds its start anchor,
    its two control points, and its end anchor."""
    curve = numpy.asarray(curve, dtype=float)
    if curve.ndim != 2 or len(curve) < 4 or (len(curve) - 1) % 3 != 0:
        raise ValueError(f'An assembled Bezier curve must have 3*m+1 points with m >= 1, got shape {curve.shape}.')
    return numpy.stack([curve[0:-1:3], curve[1::3], curve[2::3], curve[3::3]], axis=1)

def bezier_polynomial(curve):
    """Return a scipy.interpolate.BPoly representing an assembled curve.

    The curve is parameterized so that segment i spans parameter values
    [i, i+1]; evaluating at integer parameters returns the anchors."""
    return polynomial_from_segments(segments(curve))

def polynomial_from_segments(bezier_segments):
    """Return a scipy.interpolate.BPoly from an array of Bezier segments.

    Parameters:
    bezier_segments: array of shape (m, k+1, d): m Bezier curves of degree k
        in d dimensions."""
    bezier_segments = numpy.asarray(bezier_segments, dtype=float)
    # BPoly wants coefficients of shape (k+1, m, d)
    coefficients = bezier_segments.transpose(1, 0, 2)
    breakpoints = numpy.arange(len(bezier_segments) + 1, dtype=float)
    return interpolate.BPoly(coefficients, breakpoints)

def evaluate(curve, num_points, derivative=0):
    """Return num_points equally spaced in parameter along an assembled curve.

    If derivative=0, then the points themselves will be given; if derivative>0
    then the derivatives with respect to the parameter at those points will be
    returned."""
    poly = bezier_polynomial(curve)
    positions = numpy.linspace(0, poly.x[-1], num_points)
    if derivative:
        poly = poly.derivative(derivative)
    return poly(positions)

def arc_length(curve, num_points=None):
    """Approximate the arc-length of an assembled curve by evaluating it at
    num_points positions and calculating the length of the resulting polyline.
    If num_points is None, 100 points per segment are used."""
    if num_points is None:
        num_points = 100 * len(segments(curve)) + 1
    points = evaluate(curve, num_points)
    return geometry.cumulative_distances(points, unit=False)[-1]

r'''
# splinefit

Python modules for fitting smooth cubic Bezier curves through 2D points.

Curve
-----
Functions for fitting plane curves through a sequence of knots, and for
evaluating the resulting piecewise cubic Bezier curves.
 - curve.geometry: chord lengths and weights between knots.
 - curve.tridiagonal: per-axis control-point solvers for open chains (Thomas algorithm) and closed loops (periodic tridiagonal elimination).
 - curve.fit: fit an open or closed curve through 2D knots and assemble its anchors and control points.
 - curve.bezier: split an assembled curve into segments and evaluate it (using scipy.interpolate.BPoly).
 - curve.line\_style: turn points into a drawable polyline for the plot, line, bezier and spline styles.
'''

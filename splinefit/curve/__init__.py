r'''
Curve
-----
Functions for fitting plane curves through a sequence of knots, and for evaluating the resulting piecewise cubic Bezier curves.
 - curve.geometry: chord lengths and weights between knots.
 - curve.tridiagonal: per-axis control-point solvers for open chains and closed loops.
 - curve.fit: fit an open or closed curve through 2D knots (using curve.tridiagonal).
 - curve.bezier: split an assembled curve into segments and evaluate it (using scipy.interpolate.BPoly).
 - curve.line\_style: turn points into a drawable polyline for each line style.
 '''

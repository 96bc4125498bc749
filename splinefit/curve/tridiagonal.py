"""Linear solvers for the control points of smooth cubic Bezier chains.

Each function works on the values of a single coordinate axis; fitting a 2D
curve means calling them once for x and once for y. The construction follows
Lubos Brieda's derivation of C2-continuous Bezier splines (open chains) and
Jaco Stuifbergen's weighted variant for closed loops.
"""

import numpy

def solve_tridiagonal(a, b, c, r):
    """Solve a tridiagonal system with the Thomas algorithm.

    Row i of the system reads a[i]*x[i-1] + b[i]*x[i] + c[i]*x[i+1] = r[i];
    a[0] and c[-1] are ignored. The input arrays are not modified.

    Parameters:
    a, b, c: sub-, main- and super-diagonal coefficients; shape=(n,)
    r: right-hand side; shape=(n,) or (n,m) to solve m right-hand sides at once.

    Returns the solution x, with the same shape as r."""
    b = numpy.array(b, dtype=float)
    r = numpy.array(r, dtype=float)
    n = len(b)
    for i in range(1, n):
        m = a[i] / b[i-1]
        b[i] -= m * c[i-1]
        r[i] -= m * r[i-1]

    x = numpy.empty_like(r)
    x[n-1] = r[n-1] / b[n-1]
    for i in range(n-2, -1, -1):
        x[i] = (r[i] - c[i] * x[i+1]) / b[i]
    return x

def solve_cyclic_tridiagonal(a, b, c, r):
    """Solve a periodic tridiagonal system.

    Row i of the system reads a[i]*x[i-1] + b[i]*x[i] + c[i]*x[i+1] = r[i]
    with indices taken modulo n, so that a[0] couples the first row to the
    last unknown and c[-1] couples the last row to the first unknown. The input
    arrays are not modified.

    Gaussian elimination without pivoting keeps the band structure except for
    the last row and the last column, which fill in as the sweep proceeds.
    The fill-in of the last column is kept in its own array, and the single
    nonzero entry of the last row left of the band is carried along as a
    scalar and eliminated against each row in turn.

    Parameters:
    a, b, c: sub-, main- and super-diagonal coefficients; shape=(n,), n >= 3
    r: right-hand side; shape=(n,) or (n,m).

    Returns the solution x, with the same shape as r."""
    a = numpy.array(a, dtype=float)
    b = numpy.array(b, dtype=float)
    c = numpy.array(c, dtype=float)
    r = numpy.array(r, dtype=float)
    n = len(b)
    if n < 3:
        raise ValueError('A periodic system needs at least 3 rows.')

    last_column = numpy.zeros(n)
    last_column[0] = a[0]
    last_row = c[n-1] # entry of the last row in the column being eliminated

    for i in range(n-3):
        m = a[i+1] / b[i]
        b[i+1] -= m * c[i]
        r[i+1] -= m * r[i]
        last_column[i+1] = -m * last_column[i]

        m = last_row / b[i]
        b[n-1] -= m * last_column[i]
        last_row = -m * c[i]
        r[n-1] -= m * r[i]

    # row n-2: its super-diagonal entry is also the last column
    i = n - 3
    m = a[i+1] / b[i]
    b[i+1] -= m * c[i]
    r[i+1] -= m * r[i]
    c[i+1] -= m * last_column[i]
    # row n-1: the carried entry now sits on the sub-diagonal
    m = last_row / b[i]
    b[n-1] -= m * last_column[i]
    a[n-1] -= m * c[i]
    r[n-1] -= m * r[i]

    i = n - 2
    m = a[i+1] / b[i]
    b[i+1] -= m * c[i]
    r[i+1] -= m * r[i]

    x = numpy.empty_like(r)
    x[n-1] = r[n-1] / b[n-1]
    last_column[n-2] = 0 # already folded into c[n-2]
    for i in range(n-2, -1, -1):
        x[i] = (r[i] - c[i] * x[i+1] - last_column[i] * x[n-1]) / b[i]
    return x

def open_control_points(knots):
    """Compute the Bezier control points of a smooth open chain along one axis.

    The resulting cubic segments (knots[i], cp1[i], cp2[i], knots[i+1]) join
    with continuous first and second derivatives, and have zero curvature at
    the two ends of the chain.

    Parameters:
    knots: array of n+1 knot coordinates along one axis, n+1 >= 3.

    Returns cp1, cp2: arrays of shape (n,), one entry per segment."""
    k = numpy.asarray(knots, dtype=float)
    if len(k) < 3:
        raise ValueError('At least 3 knots are required to fit an open chain.')
    n = len(k) - 1

    a = numpy.ones(n)
    b = numpy.full(n, 4.0)
    c = numpy.ones(n)
    r = 4 * k[:-1] + 2 * k[1:]
    # first segment
    a[0] = 0
    b[0] = 2
    r[0] = k[0] + 2 * k[1]
    # last segment
    a[n-1] = 2
    b[n-1] = 7
    c[n-1] = 0
    r[n-1] = 8 * k[n-1] + k[n]

    cp1 = solve_tridiagonal(a, b, c, r)
    cp2 = numpy.empty(n)
    cp2[:-1] = 2 * k[1:-1] - cp1[1:]
    cp2[n-1] = 0.5 * (k[n] + cp1[n-1])
    return cp1, cp2

def cyclic_control_points(knots, weights):
    """Compute the Bezier control points of a smooth closed loop along one axis.

    The loop consists of the n segments (knots[i], cp1[i], cp2[i], knots[i+1]),
    the last of which returns to knots[0]. Where two segments meet, the
    tangents are collinear, with lengths proportional to the chord weights of
    the two segments.

    Parameters:
    knots: array of n knot coordinates along one axis, n >= 3.
    weights: array of n strictly positive chord weights, where weights[i]
        belongs to the segment from knots[i] to knots[(i+1) % n]. See
        geometry.chord_weights().

    Returns cp1, cp2: arrays of shape (n,), one entry per segment."""
    K = numpy.asarray(knots, dtype=float)
    W = numpy.asarray(weights, dtype=float)
    n = len(K)
    if n < 3:
        raise ValueError('At least 3 knots are required to fit a closed loop.')
    if W.shape != (n,):
        raise ValueError(f'Expected {n} weights, got array of shape {W.shape}.')

    W_prev = numpy.roll(W, 1)
    W_next = numpy.roll(W, -1)
    K_next = numpy.roll(K, -1)
    frac = W / W_next

    a = W**2
    b = 2 * W_prev * (W_prev + W)
    c = W_prev**2 * frac
    r = (W_prev + W)**2 * K + W_prev**2 * (1 + frac) * K_next

    cp1 = solve_cyclic_tridiagonal(a, b, c, r)
    cp2 = K_next * (1 + frac) - numpy.roll(cp1, -1) * frac
    return cp1, cp2

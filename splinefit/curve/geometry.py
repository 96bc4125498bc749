import numpy

# floor applied to chord lengths so that weight ratios stay finite
MIN_WEIGHT = 1e-5

def as_points(points):
    """Return points as a float array of shape (n,2), raising ValueError for
    any other shape. An empty sequence gives an array of shape (0,2)."""
    points = numpy.asarray(points, dtype=float)
    if points.size == 0:
        return points.reshape(0, 2)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f'Expected an array of x,y points with shape (n, 2), got shape {points.shape}.')
    return points

def distance(p1, p2):
    """Return the Euclidean distance between two points."""
    dx, dy = numpy.asarray(p2, dtype=float) - p1
    return float(numpy.hypot(dx, dy))

def chord_weight(p1, p2, min_weight=MIN_WEIGHT):
    """Return the length of the chord between two knots, floored at min_weight.

    Coincident or near-coincident knots would otherwise produce a zero weight,
    and the cyclic fit divides by ratios of neighboring weights. The result is
    strictly positive and finite for any finite input points."""
    dist = distance(p1, p2)
    return min_weight if dist < min_weight else dist

def chord_weights(points, min_weight=MIN_WEIGHT):
    """Return the chord weights for the segments of a closed loop of knots.

    Parameters:
    points: array of n points x,y; shape=(n,2)
    min_weight: floor applied to each chord length.

    Returns an array of shape (n,): entry i is the weight of the chord from
    points[i] to points[i+1], and the last entry is the weight of the chord
    closing the loop from points[-1] back to points[0]."""
    points = as_points(points)
    dx, dy = (numpy.roll(points, -1, axis=0) - points).T
    return numpy.maximum(numpy.hypot(dx, dy), min_weight)

def cumulative_distances(points, unit=True):
    """Return cumulative distances along a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths."""
    points = numpy.asarray(points, dtype=float)
    distances = numpy.concatenate([[0], numpy.add.accumulate(numpy.linalg.norm(points[1:] - points[:-1], axis=1))])
    if unit:
        distances /= distances[-1]
    return distances

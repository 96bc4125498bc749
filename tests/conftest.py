"""Shared fixtures for splinefit tests."""

import numpy
import pytest


@pytest.fixture
def square():
    """Corners of a 10x10 square, counter-clockwise from the origin."""
    return numpy.array([(0, 0), (10, 0), (10, 10), (0, 10)], dtype=float)


@pytest.fixture
def rng():
    return numpy.random.default_rng(8454)


@pytest.fixture
def wobbly_loop(rng):
    """Factory for n knots scattered in order around a circle, so that
    neighboring chords stay comparable in length."""
    def make(n, radius=10.0):
        angles = numpy.linspace(0, 2 * numpy.pi, n, endpoint=False)
        angles += rng.uniform(-0.2, 0.2, n) * (2 * numpy.pi / n)
        radii = radius * rng.uniform(0.8, 1.2, n)
        return numpy.transpose([radii * numpy.cos(angles), radii * numpy.sin(angles)])
    return make


@pytest.fixture
def periodic_matrix():
    """Factory for the dense matrix of the periodic system
    a[i]*x[i-1] + b[i]*x[i] + c[i]*x[i+1] (indices modulo n)."""
    def make(a, b, c):
        n = len(b)
        matrix = numpy.zeros((n, n))
        for i in range(n):
            matrix[i, (i - 1) % n] += a[i]
            matrix[i, i] += b[i]
            matrix[i, (i + 1) % n] += c[i]
        return matrix
    return make

"""
Pytest configuration and fixtures for scalar_aad tests
"""

import pytest

from scalar_aad import leaf


NEURON_BIAS = 6.8813735870195432


@pytest.fixture
def diamond():
    """f = (a*b) * (a+b) with a=-2, b=3: both leaves fan out to d and e."""
    a = leaf(-2.0, name="a")
    b = leaf(3.0, name="b")
    d = a * b
    e = a + b
    f = d * e
    return {"a": a, "b": b, "d": d, "e": e, "f": f}


@pytest.fixture
def neuron():
    """o = tanh(x1*w1 + x2*w2 + b), bias chosen so that o = 1/sqrt(2)."""
    x1 = leaf(2.0, name="x1")
    x2 = leaf(0.0, name="x2")
    w1 = leaf(-3.0, name="w1")
    w2 = leaf(1.0, name="w2")
    b = leaf(NEURON_BIAS, name="b")
    n = (x1 * w1 + x2 * w2) + b
    o = n.tanh()
    return {"x1": x1, "x2": x2, "w1": w1, "w2": w2, "b": b, "n": n, "o": o}

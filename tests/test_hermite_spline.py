"""Tests for the Hermite spline evaluator."""

import pytest
import numpy as np
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pathinterp.numerics.hermite_spline import HermiteSpline


def cubic(p):
    return p ** 3 - 2.0 * p + 1.0


def cubic_derivatives(p):
    return [cubic(p), 3.0 * p ** 2 - 2.0, 6.0 * p, 6.0]


def test_cubic_boundary_exactness():
    """Degree 3 spline matches value and slope at both ends."""
    spline = HermiteSpline([1.0, 2.0], [3.0, -1.0], 0.5, 2.0)
    
    assert spline.degree == 3
    assert (spline.start, spline.end) == (0.5, 2.0)
    assert spline.evaluate(0, 0.5) == pytest.approx(1.0)
    assert spline.evaluate(1, 0.5) == pytest.approx(2.0)
    assert spline.evaluate(0, 2.0) == pytest.approx(3.0)
    assert spline.evaluate(1, 2.0) == pytest.approx(-1.0)


def test_quintic_boundary_exactness():
    """Degree 5 spline also matches the second derivative."""
    x0 = [0.0, 0.1, -0.02]
    x1 = [0.5, -0.05, 0.03]
    spline = HermiteSpline(x0, x1, 10.0, 25.0, degree=5)
    
    assert spline.degree == 5
    for order in range(3):
        assert spline.evaluate(order, 10.0) == pytest.approx(x0[order], abs=1e-10)
        assert spline.evaluate(order, 25.0) == pytest.approx(x1[order], abs=1e-10)


def test_reproduces_cubic_polynomial():
    """A cubic spline fitted to a cubic recovers it and all its derivatives."""
    d1 = cubic_derivatives(1.0)
    d3 = cubic_derivatives(3.0)
    spline = HermiteSpline(d1[:2], d3[:2], 1.0, 3.0)
    
    expected = cubic_derivatives(2.2)
    for order in range(4):
        assert spline.evaluate(order, 2.2) == pytest.approx(expected[order], abs=1e-9)
    assert spline.evaluate(4, 2.2) == 0.0


def test_extrapolation():
    """Evaluation outside the domain extends the same polynomial."""
    spline = HermiteSpline(cubic_derivatives(1.0)[:2], cubic_derivatives(3.0)[:2], 1.0, 3.0)
    
    assert spline.evaluate(0, 4.0) == pytest.approx(cubic(4.0))
    assert spline.evaluate(0, -1.0) == pytest.approx(cubic(-1.0))


def test_array_evaluation():
    """Array input gives array output."""
    spline = HermiteSpline([0.0, 1.0], [1.0, 1.0], 0.0, 1.0)
    p = np.linspace(0.0, 1.0, 5)
    
    result = spline.evaluate(0, p)
    assert isinstance(result, np.ndarray)
    np.testing.assert_allclose(result, p, atol=1e-12)
    np.testing.assert_allclose(spline(p), p, atol=1e-12)


def test_reversed_domain():
    """p1 < p0 is still a valid, non-degenerate domain."""
    spline = HermiteSpline([2.0, 1.0], [0.0, 1.0], 2.0, 0.0)
    
    assert spline.evaluate(0, 1.0) == pytest.approx(1.0)
    assert spline.evaluate(1, 1.0) == pytest.approx(1.0)


class TestInvalidConstruction:
    """Construction errors."""
    
    def test_zero_span(self):
        with pytest.raises(ValueError):
            HermiteSpline([0.0, 1.0], [1.0, 1.0], 2.0, 2.0)
    
    def test_mismatched_lengths(self):
        with pytest.raises(ValueError):
            HermiteSpline([0.0, 1.0], [1.0, 1.0, 0.0], 0.0, 1.0)
    
    def test_empty_vectors(self):
        with pytest.raises(ValueError):
            HermiteSpline([], [], 0.0, 1.0)
    
    def test_degree_mismatch(self):
        with pytest.raises(ValueError):
            HermiteSpline([0.0, 1.0], [1.0, 1.0], 0.0, 1.0, degree=5)
    
    def test_negative_order(self):
        spline = HermiteSpline([0.0, 1.0], [1.0, 1.0], 0.0, 1.0)
        with pytest.raises(ValueError):
            spline.evaluate(-1, 0.5)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

"""Tests for numerical integration."""

import math

import pytest
import numpy as np
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pathinterp.numerics.integral import (
    gauss_legendre_nodes,
    integrate_by_gauss_legendre,
    integrate_by_simpson,
    integrate_by_trapezoidal,
)


class TestGaussLegendre:
    """Fixed-order Gauss-Legendre quadrature."""
    
    def test_exact_for_degree_nine(self):
        """The 5-point rule integrates x^9 exactly."""
        result = integrate_by_gauss_legendre(lambda x: x ** 9, 0.0, 2.0)
        assert result == pytest.approx(2.0 ** 10 / 10.0, rel=1e-12)
    
    def test_lower_order_rule(self):
        """A 2-point rule is exact for cubics but not for x^4."""
        assert integrate_by_gauss_legendre(lambda x: x ** 3, 0.0, 1.0, order=2) == pytest.approx(0.25)
        assert integrate_by_gauss_legendre(lambda x: x ** 4, 0.0, 1.0, order=2) != pytest.approx(0.2, rel=1e-6)
    
    def test_smooth_function(self):
        result = integrate_by_gauss_legendre(math.cos, 0.0, math.pi / 2.0)
        assert result == pytest.approx(1.0, abs=1e-9)
    
    def test_reversed_bounds(self):
        forward = integrate_by_gauss_legendre(math.exp, 0.0, 1.0)
        backward = integrate_by_gauss_legendre(math.exp, 1.0, 0.0)
        assert backward == pytest.approx(-forward)
        assert forward == pytest.approx(math.e - 1.0, abs=1e-9)
    
    def test_empty_interval(self):
        assert integrate_by_gauss_legendre(math.exp, 3.0, 3.0) == 0.0
    
    def test_invalid_order(self):
        with pytest.raises(ValueError):
            integrate_by_gauss_legendre(math.exp, 0.0, 1.0, order=0)
    
    def test_nodes_weights(self):
        nodes, weights = gauss_legendre_nodes(5)
        assert len(nodes) == len(weights) == 5
        assert weights.sum() == pytest.approx(2.0)
        np.testing.assert_allclose(np.sort(nodes), -np.sort(nodes)[::-1], atol=1e-12)


class TestSampledRules:
    """Simpson and trapezoidal rules on sampled data."""
    
    def test_simpson_exact_for_quadratic(self):
        x = np.linspace(0.0, 2.0, 5)
        assert integrate_by_simpson(x ** 2, 0.5) == pytest.approx(8.0 / 3.0)
    
    def test_simpson_smooth_function(self):
        x = np.linspace(0.0, math.pi, 101)
        assert integrate_by_simpson(np.sin(x), x[1] - x[0]) == pytest.approx(2.0, abs=1e-7)
    
    def test_simpson_even_samples(self):
        with pytest.raises(ValueError):
            integrate_by_simpson([0.0, 1.0, 2.0, 3.0], 1.0)
    
    def test_trapezoidal_exact_for_linear(self):
        x = np.linspace(0.0, 1.0, 3)
        assert integrate_by_trapezoidal(2.0 * x + 1.0, 0.5) == pytest.approx(2.0)
    
    def test_trapezoidal_too_few_samples(self):
        with pytest.raises(ValueError):
            integrate_by_trapezoidal([1.0], 0.1)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

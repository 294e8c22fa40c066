"""Numerical building blocks: Hermite splines, quadrature, linear interpolation."""

from .hermite_spline import HermiteSpline
from .integral import (
    gauss_legendre_nodes,
    integrate_by_gauss_legendre,
    integrate_by_simpson,
    integrate_by_trapezoidal,
)
from .linear_interpolation import lerp, slerp, weighted_average

__all__ = [
    'HermiteSpline',
    'gauss_legendre_nodes',
    'integrate_by_gauss_legendre',
    'integrate_by_simpson',
    'integrate_by_trapezoidal',
    'lerp',
    'slerp',
    'weighted_average',
]

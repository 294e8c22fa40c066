"""Numerical integration routines.

Gauss-Legendre quadrature is used by the interpolators to turn a heading
profile into displacement and a speed profile into arc length. Simpson and
trapezoidal rules integrate uniformly sampled data.
"""

from functools import lru_cache
from typing import Callable, Sequence, Tuple

import numpy as np
from scipy.integrate import simpson, trapezoid
from scipy.special import roots_legendre


@lru_cache(maxsize=None)
def gauss_legendre_nodes(order: int) -> Tuple[np.ndarray, np.ndarray]:
    """Nodes and weights of the order-point rule on [-1, 1].
    
    Args:
        order: Number of quadrature points
        
    Returns:
        nodes: (order,) abscissas
        weights: (order,) weights
    """
    if order < 1:
        raise ValueError(f"Quadrature order must be positive, got {order}")
    nodes, weights = roots_legendre(order)
    nodes.setflags(write=False)
    weights.setflags(write=False)
    return nodes, weights


def integrate_by_gauss_legendre(
    func: Callable[[float], float],
    lower: float,
    upper: float,
    order: int = 5
) -> float:
    """Integrate func over [lower, upper] with a fixed-order Gauss-Legendre rule.
    
    An n-point rule is exact for polynomials up to degree 2n - 1, so the
    default 5-point rule is exact up to degree 9.
    
    Args:
        func: Scalar integrand
        lower: Lower bound
        upper: Upper bound
        order: Number of quadrature points
        
    Returns:
        Integral approximation
    """
    nodes, weights = gauss_legendre_nodes(order)
    half_length = 0.5 * (upper - lower)
    if half_length == 0.0:
        return 0.0
    
    mid = 0.5 * (upper + lower)
    total = 0.0
    for node, weight in zip(nodes, weights):
        total += weight * func(half_length * node + mid)
    return float(total * half_length)


def integrate_by_simpson(samples: Sequence[float], dx: float) -> float:
    """Composite Simpson rule over uniformly spaced samples.
    
    Args:
        samples: Function values at equally spaced points (odd count)
        dx: Spacing between samples
        
    Returns:
        Integral approximation
    """
    y = np.asarray(samples, dtype=float)
    if y.size < 3 or y.size % 2 == 0:
        raise ValueError(
            f"Simpson rule needs an odd number (>= 3) of samples, got {y.size}"
        )
    return float(simpson(y, dx=dx))


def integrate_by_trapezoidal(samples: Sequence[float], dx: float) -> float:
    """Composite trapezoidal rule over uniformly spaced samples.
    
    Args:
        samples: Function values at equally spaced points
        dx: Spacing between samples
        
    Returns:
        Integral approximation
    """
    y = np.asarray(samples, dtype=float)
    if y.size < 2:
        raise ValueError(f"Trapezoidal rule needs at least 2 samples, got {y.size}")
    return float(trapezoid(y, dx=dx))

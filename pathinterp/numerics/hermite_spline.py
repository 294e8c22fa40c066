"""Hermite spline fitted to value/derivative constraints at two boundaries.

The spline is the unique polynomial of degree 2k-1 that matches the value and
the first k-1 derivatives at both ends of the interval [p0, p1]:

    f^(j)(p0) = x0[j],  f^(j)(p1) = x1[j],  j = 0..k-1

The polynomial is solved in the normalized parameter tau = (p - p0) / (p1 - p0)
which keeps the linear system well conditioned for long spans.
"""

from math import factorial
from typing import Optional, Sequence, Union

import numpy as np
from numpy.polynomial import Polynomial


class HermiteSpline:
    """Polynomial matching boundary values and derivatives on [p0, p1].
    
    Degree 3 takes [value, first derivative] per side, degree 5 takes
    [value, first derivative, second derivative] per side.
    
    Args:
        x0: Boundary vector at p0 (value, first derivative, ...)
        x1: Boundary vector at p1, same length as x0
        p0: Start parameter
        p1: End parameter
        degree: Optional expected degree, must equal 2 * len(x0) - 1
        
    Raises:
        ValueError: If the boundary vectors are empty or mismatched, the
            degree disagrees with them, or p0 == p1
    """
    
    def __init__(
        self,
        x0: Sequence[float],
        x1: Sequence[float],
        p0: float,
        p1: float,
        degree: Optional[int] = None
    ):
        x0 = np.asarray(x0, dtype=float)
        x1 = np.asarray(x1, dtype=float)
        if x0.ndim != 1 or x0.size == 0 or x0.shape != x1.shape:
            raise ValueError(
                f"Boundary vectors must be non-empty and of equal length, "
                f"got {x0.shape} and {x1.shape}"
            )
        
        k = x0.size
        if degree is not None and degree != 2 * k - 1:
            raise ValueError(
                f"Degree {degree} needs {(degree + 1) // 2} constraints per side, got {k}"
            )
        
        span = float(p1) - float(p0)
        if span == 0.0 or not np.isfinite(span):
            raise ValueError(f"Spline domain [{p0}, {p1}] has no extent")
        
        self._p0 = float(p0)
        self._p1 = float(p1)
        self._span = span
        self._degree = 2 * k - 1
        
        # d^j/dp^j = h^-j d^j/dtau^j, so constraints are scaled by h^j
        scale = span ** np.arange(k)
        b = np.concatenate([x0 * scale, x1 * scale])
        
        n = 2 * k
        A = np.zeros((n, n))
        for j in range(k):
            # j-th derivative of tau^i at tau = 0 and tau = 1
            A[j, j] = factorial(j)
            for i in range(j, n):
                A[k + j, i] = factorial(i) / factorial(i - j)
        
        self._poly = Polynomial(np.linalg.solve(A, b))
    
    @property
    def degree(self) -> int:
        """Polynomial degree (2k - 1)."""
        return self._degree
    
    @property
    def start(self) -> float:
        return self._p0
    
    @property
    def end(self) -> float:
        return self._p1
    
    def evaluate(
        self,
        order: int,
        p: Union[float, np.ndarray]
    ) -> Union[float, np.ndarray]:
        """Evaluate the order-th derivative at parameter p.
        
        Points outside [p0, p1] are extrapolated. Orders above the degree
        evaluate to zero.
        
        Args:
            order: Derivative order (0 for the value itself)
            p: Parameter value(s)
            
        Returns:
            Derivative value(s) at p
        """
        if order < 0:
            raise ValueError(f"Derivative order must be non-negative, got {order}")
        
        tau = (np.asarray(p, dtype=float) - self._p0) / self._span
        poly = self._poly.deriv(order) if order > 0 else self._poly
        result = poly(tau) / self._span ** order
        
        if np.ndim(result) == 0:
            return float(result)
        return result
    
    def __call__(self, p: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        return self.evaluate(0, p)
    
    def __repr__(self) -> str:
        return (f"HermiteSpline(degree={self._degree}, "
                f"domain=[{self._p0}, {self._p1}])")

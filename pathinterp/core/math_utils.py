"""Angle utilities shared by the interpolators."""

from typing import Union

import numpy as np


def normalize_angle(angle: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Normalize angle to (-pi, pi] range.
    
    Args:
        angle: Input angle in radians
        
    Returns:
        Normalized angle in (-pi, pi]
    """
    two_pi = 2.0 * np.pi
    
    # x - n*2pi with n the nearest integer, like math.remainder
    n = np.round(np.asarray(angle) / two_pi)
    a = angle - n * two_pi
    
    if np.isscalar(a):
        a = float(a)
        if a <= -np.pi:
            return a + two_pi
        return a
    
    a = np.array(a, dtype=float)
    a[a <= -np.pi] += two_pi
    return a


def angle_diff(from_angle: float, to_angle: float) -> float:
    """Shortest signed rotation taking ``from_angle`` to ``to_angle`` [rad]."""
    return normalize_angle(to_angle - from_angle)

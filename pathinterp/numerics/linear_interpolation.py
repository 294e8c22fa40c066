"""Linear interpolation helpers."""

from ..core.math_utils import normalize_angle

_MIN_SPAN = 1.0e-10


def lerp(x0: float, t0: float, x1: float, t1: float, t: float) -> float:
    """Linearly interpolate between (t0, x0) and (t1, x1) at t.
    
    Returns x0 when the two parameters coincide. t outside [t0, t1]
    extrapolates.
    """
    if abs(t1 - t0) <= _MIN_SPAN:
        return x0
    r = (t - t0) / (t1 - t0)
    return x0 + r * (x1 - x0)


def slerp(a0: float, t0: float, a1: float, t1: float, t: float) -> float:
    """Interpolate angles along the shorter arc between a0 and a1.
    
    Returns:
        Interpolated angle, normalized to (-pi, pi]
    """
    if abs(t1 - t0) <= _MIN_SPAN:
        return normalize_angle(a0)
    a0_n = normalize_angle(a0)
    d = normalize_angle(normalize_angle(a1) - a0_n)
    r = (t - t0) / (t1 - t0)
    return normalize_angle(a0_n + d * r)


def weighted_average(x0: float, x1: float, weight: float) -> float:
    """x0 * (1 - weight) + x1 * weight, no range check on weight."""
    return x0 * (1.0 - weight) + x1 * weight

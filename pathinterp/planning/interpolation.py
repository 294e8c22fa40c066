"""Interpolation between path, trajectory and SL points.

Path and trajectory points are interpolated with Hermite splines over the
heading profile so that heading and curvature stay continuous through the
boundary points. Positions follow from integrating cos/sin of that exact
heading profile with Gauss-Legendre quadrature.
"""

import bisect
import math
from typing import Sequence

from loguru import logger

from ..core.data_structures import PathPoint, SLPoint, TrajectoryPoint
from ..core.math_utils import angle_diff, normalize_angle
from ..numerics.hermite_spline import HermiteSpline
from ..numerics.integral import integrate_by_gauss_legendre
from ..numerics.linear_interpolation import weighted_average

DEFAULT_ARC_LENGTH_EPSILON = 1.0e-4
DEFAULT_QUADRATURE_ORDER = 5


class ArcLengthMismatchError(ValueError):
    """Raised in strict mode when integrated speed disagrees with path arc length."""
    pass


def interpolate_path_point(
    p0: PathPoint,
    p1: PathPoint,
    s: float,
    quadrature_order: int = DEFAULT_QUADRATURE_ORDER
) -> PathPoint:
    """Interpolate a path point at arc length s between p0 and p1.
    
    A quintic Hermite spline is fitted to the heading relative to p0, with
    [0, kappa0, dkappa0] and [theta_diff, kappa1, dkappa1] as boundary
    conditions over [p0.s, p1.s]. Heading derivatives give kappa, dkappa
    and ddkappa; x and y are integrated from the heading profile.
    
    Args:
        p0: Start point
        p1: End point, p1.s >= p0.s
        s: Query arc length, must satisfy p0.s <= s <= p1.s
        quadrature_order: Number of Gauss-Legendre points
        
    Returns:
        Interpolated path point with its s set to the query value
    """
    s0 = p0.s
    s1 = p1.s
    assert s0 <= s <= s1, f"s={s} is outside the interpolation range [{s0}, {s1}]"
    
    if s1 == s0:
        return p0.with_s(float(s))
    
    theta_diff = angle_diff(p0.theta, p1.theta)
    geometry_spline = HermiteSpline(
        [0.0, p0.kappa, p0.dkappa],
        [theta_diff, p1.kappa, p1.dkappa],
        s0, s1,
        degree=5
    )
    
    def func_cos_theta(u: float) -> float:
        return math.cos(geometry_spline.evaluate(0, u) + p0.theta)
    
    def func_sin_theta(u: float) -> float:
        return math.sin(geometry_spline.evaluate(0, u) + p0.theta)
    
    x = p0.x + integrate_by_gauss_legendre(func_cos_theta, s0, s, quadrature_order)
    y = p0.y + integrate_by_gauss_legendre(func_sin_theta, s0, s, quadrature_order)
    
    return PathPoint(
        x=x,
        y=y,
        theta=normalize_angle(geometry_spline.evaluate(0, s) + p0.theta),
        kappa=geometry_spline.evaluate(1, s),
        dkappa=geometry_spline.evaluate(2, s),
        ddkappa=geometry_spline.evaluate(3, s),
        s=float(s)
    )


def interpolate_trajectory_point(
    tp0: TrajectoryPoint,
    tp1: TrajectoryPoint,
    t: float,
    arc_length_epsilon: float = DEFAULT_ARC_LENGTH_EPSILON,
    quadrature_order: int = DEFAULT_QUADRATURE_ORDER,
    strict: bool = False
) -> TrajectoryPoint:
    """Interpolate a trajectory point at relative time t between tp0 and tp1.
    
    A cubic "dynamics" spline over [v, a] in time gives speed and
    acceleration; its integral gives the travelled arc length. A cubic
    "geometry" spline over [theta, kappa] parameterized by that arc length
    gives heading, curvature and position.
    
    When the two points have (numerically) the same arc length, tp1 is
    returned unchanged.
    
    Args:
        tp0: Start point
        tp1: End point
        t: Query relative time
        arc_length_epsilon: Tolerance for equal arc lengths
        quadrature_order: Number of Gauss-Legendre points
        strict: Raise ArcLengthMismatchError instead of warning when the
            integrated speed does not cover tp1.s - tp0.s
        
    Returns:
        Interpolated trajectory point. Its path_point.s is the arc length
        travelled from tp0, relative_time is t and theta is normalized
        to (-pi, pi].
    """
    pp0 = tp0.path_point
    pp1 = tp1.path_point
    if abs(pp1.s - pp0.s) < arc_length_epsilon:
        logger.debug(f"Degenerate arc span at s={pp0.s:.4f}, returning end point")
        return tp1
    
    t0 = tp0.relative_time
    t1 = tp1.relative_time
    
    dynamic_spline = HermiteSpline([tp0.v, tp0.a], [tp1.v, tp1.a], t0, t1, degree=3)
    
    def func_v(tau: float) -> float:
        return dynamic_spline.evaluate(0, tau)
    
    s0 = 0.0
    s1 = integrate_by_gauss_legendre(func_v, t0, t1, quadrature_order)
    s = integrate_by_gauss_legendre(func_v, t0, t, quadrature_order)
    
    expected_span = pp1.s - pp0.s
    if abs(expected_span - s1) >= arc_length_epsilon:
        message = (f"Integrated arc length {s1:.6f} differs from path arc length "
                   f"{expected_span:.6f} between t={t0} and t={t1}")
        if strict:
            raise ArcLengthMismatchError(message)
        logger.warning(message)
    
    v = dynamic_spline.evaluate(0, t)
    a = dynamic_spline.evaluate(1, t)
    
    geometry_spline = HermiteSpline(
        [pp0.theta, pp0.kappa],
        [pp1.theta, pp1.kappa],
        s0, s1,
        degree=3
    )
    
    def func_cos_theta(u: float) -> float:
        return math.cos(geometry_spline.evaluate(0, u))
    
    def func_sin_theta(u: float) -> float:
        return math.sin(geometry_spline.evaluate(0, u))
    
    x = pp0.x + integrate_by_gauss_legendre(func_cos_theta, s0, s, quadrature_order)
    y = pp0.y + integrate_by_gauss_legendre(func_sin_theta, s0, s, quadrature_order)
    
    path_point = PathPoint(
        x=x,
        y=y,
        theta=normalize_angle(geometry_spline.evaluate(0, s)),
        kappa=geometry_spline.evaluate(1, s),
        dkappa=geometry_spline.evaluate(2, s),
        ddkappa=geometry_spline.evaluate(3, s),
        s=float(s)
    )
    return TrajectoryPoint(path_point=path_point, v=v, a=a, relative_time=float(t))


def interpolate_sl_point(start: SLPoint, end: SLPoint, weight: float) -> SLPoint:
    """Weighted average of two SL points.
    
    The weight is not range checked: values outside [0, 1] extrapolate.
    """
    return SLPoint(
        s=weighted_average(start.s, end.s, weight),
        l=weighted_average(start.l, end.l, weight)
    )


def interpolate_path(points: Sequence[PathPoint], s: float, **kwargs) -> PathPoint:
    """Interpolate a path given as points ordered by non-decreasing s.
    
    Queries before the first or after the last point are clamped to the
    end points.
    
    Args:
        points: Path points, at least one
        s: Query arc length
        **kwargs: Forwarded to interpolate_path_point
        
    Returns:
        Interpolated path point
    """
    if len(points) == 0:
        raise ValueError("Cannot interpolate an empty path")
    if s <= points[0].s:
        return points[0]
    if s >= points[-1].s:
        return points[-1]
    
    i = bisect.bisect_right([p.s for p in points], s) - 1
    return interpolate_path_point(points[i], points[i + 1], s, **kwargs)


def interpolate_trajectory(
    points: Sequence[TrajectoryPoint],
    t: float,
    **kwargs
) -> TrajectoryPoint:
    """Interpolate a trajectory given as points ordered by relative_time.
    
    Queries outside the covered time range are clamped to the end points.
    The returned path_point.s is rebased onto the trajectory's own arc
    length, so it is comparable with the s of the input points.
    
    Args:
        points: Trajectory points, at least one
        t: Query relative time
        **kwargs: Forwarded to interpolate_trajectory_point
        
    Returns:
        Interpolated trajectory point
    """
    if len(points) == 0:
        raise ValueError("Cannot interpolate an empty trajectory")
    if t <= points[0].relative_time:
        return points[0]
    if t >= points[-1].relative_time:
        return points[-1]
    
    i = bisect.bisect_right([p.relative_time for p in points], t) - 1
    tp0 = points[i]
    tp = interpolate_trajectory_point(tp0, points[i + 1], t, **kwargs)
    if tp is points[i + 1]:
        return tp
    return TrajectoryPoint(
        path_point=tp.path_point.with_s(tp0.path_point.s + tp.path_point.s),
        v=tp.v,
        a=tp.a,
        relative_time=tp.relative_time
    )

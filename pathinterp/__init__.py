"""pathinterp - smooth interpolation of planned paths and trajectories.

Hermite splines over heading and speed profiles, integrated with
Gauss-Legendre quadrature, reconstruct intermediate path and trajectory
points with continuous heading and curvature.
"""

from .core import PathPoint, SLPoint, TrajectoryPoint, normalize_angle
from .numerics import HermiteSpline, integrate_by_gauss_legendre
from .planning import (
    PlanningContext,
    interpolate_path_point,
    interpolate_sl_point,
    interpolate_trajectory_point,
)

__version__ = "0.1.0"
__all__ = [
    'PathPoint',
    'SLPoint',
    'TrajectoryPoint',
    'normalize_angle',
    'HermiteSpline',
    'integrate_by_gauss_legendre',
    'PlanningContext',
    'interpolate_path_point',
    'interpolate_sl_point',
    'interpolate_trajectory_point',
]

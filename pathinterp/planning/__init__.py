"""Path and trajectory interpolation."""

from .interpolation import (
    ArcLengthMismatchError,
    interpolate_path,
    interpolate_path_point,
    interpolate_sl_point,
    interpolate_trajectory,
    interpolate_trajectory_point,
)
from .planning_context import PlanningContext, PlanningState, get_planning_state

__all__ = [
    'ArcLengthMismatchError',
    'interpolate_path',
    'interpolate_path_point',
    'interpolate_sl_point',
    'interpolate_trajectory',
    'interpolate_trajectory_point',
    'PlanningContext',
    'PlanningState',
    'get_planning_state',
]

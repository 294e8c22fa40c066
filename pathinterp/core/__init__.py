"""Core module for point records, angle math and diagnostics."""

from .data_structures import PathPoint, TrajectoryPoint, SLPoint
from .math_utils import normalize_angle, angle_diff
from .diagnostics import (
    DataFeed,
    LatestMessageFeed,
    PlanningFeeds,
    dump_planning_context,
)

__all__ = [
    'PathPoint',
    'TrajectoryPoint',
    'SLPoint',
    'normalize_angle',
    'angle_diff',
    'DataFeed',
    'LatestMessageFeed',
    'PlanningFeeds',
    'dump_planning_context',
]

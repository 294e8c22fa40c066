"""Application context owning the planning state.

The planning state has a single instance per context, created on first
access. Components that need it receive the context explicitly instead of
reaching for a process global.
"""

import threading
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from loguru import logger

from ..config import InterpolationConfig
from ..core.data_structures import PathPoint, SLPoint, TrajectoryPoint
from ..core.diagnostics import PlanningFeeds, dump_planning_context
from .interpolation import (
    interpolate_path_point,
    interpolate_sl_point,
    interpolate_trajectory_point,
)


@dataclass
class PlanningState:
    """State carried across planning cycles.
    
    Attributes:
        last_trajectory: Trajectory published in the previous cycle
        sequence_num: Number of trajectories published so far
    """
    last_trajectory: List[TrajectoryPoint] = field(default_factory=list)
    sequence_num: int = 0
    
    def update_trajectory(self, points: Sequence[TrajectoryPoint]) -> None:
        """Store the newly published trajectory."""
        self.last_trajectory = list(points)
        self.sequence_num += 1


class PlanningContext:
    """Holds configuration, input feeds and the lazily created planning state.
    
    Args:
        config: Interpolation configuration, defaults to InterpolationConfig()
        feeds: Input feeds to dump, defaults to in-memory feeds writing to
            config.dump_dir
    """
    
    def __init__(
        self,
        config: Optional[InterpolationConfig] = None,
        feeds: Optional[PlanningFeeds] = None
    ):
        self.config = config if config is not None else InterpolationConfig()
        self.feeds = feeds if feeds is not None else PlanningFeeds.create(self.config.dump_dir)
        self._state: Optional[PlanningState] = None
        self._state_lock = threading.Lock()
    
    @property
    def planning_state(self) -> PlanningState:
        """The single PlanningState of this context, created on first access."""
        if self._state is None:
            with self._state_lock:
                if self._state is None:
                    logger.debug("Creating planning state")
                    self._state = PlanningState()
        return self._state
    
    def interpolate_path_point(self, p0: PathPoint, p1: PathPoint, s: float) -> PathPoint:
        return interpolate_path_point(
            p0, p1, s, quadrature_order=self.config.quadrature_order
        )
    
    def interpolate_trajectory_point(
        self,
        tp0: TrajectoryPoint,
        tp1: TrajectoryPoint,
        t: float
    ) -> TrajectoryPoint:
        return interpolate_trajectory_point(
            tp0, tp1, t,
            arc_length_epsilon=self.config.arc_length_epsilon,
            quadrature_order=self.config.quadrature_order,
            strict=self.config.strict_arc_length
        )
    
    def interpolate_sl_point(self, start: SLPoint, end: SLPoint, weight: float) -> SLPoint:
        return interpolate_sl_point(start, end, weight)
    
    def dump_context(self) -> None:
        """Dump the latest input messages, prediction only if enabled."""
        dump_planning_context(self.feeds, self.config.enable_prediction)


def get_planning_state(context: PlanningContext) -> PlanningState:
    """Accessor for the context's single planning state."""
    return context.planning_state

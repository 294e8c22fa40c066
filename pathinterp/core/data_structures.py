"""Core data structures for path and trajectory interpolation.

This module defines the point records exchanged between the interpolators
and their callers. All records are immutable once constructed; interpolation
always produces new instances.
"""

from dataclasses import dataclass, field, replace

import numpy as np
from dataclasses_json import DataClassJsonMixin


@dataclass(frozen=True)
class PathPoint(DataClassJsonMixin):
    """Point on a planned path.
    
    Attributes:
        x: X coordinate in global frame [m]
        y: Y coordinate in global frame [m]
        theta: Heading angle, normalized to (-pi, pi] [rad]
        kappa: Curvature [1/m]
        dkappa: Curvature rate with respect to s [1/m²]
        ddkappa: Second derivative of curvature with respect to s [1/m³]
        s: Arc length from the start of the path [m]
    """
    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0
    kappa: float = 0.0
    dkappa: float = 0.0
    ddkappa: float = 0.0
    s: float = 0.0
    
    def to_array(self) -> np.ndarray:
        """Convert to numpy array [x, y, theta, kappa, dkappa, ddkappa, s]."""
        return np.array([self.x, self.y, self.theta, self.kappa,
                         self.dkappa, self.ddkappa, self.s])
    
    @classmethod
    def from_array(cls, arr: np.ndarray) -> 'PathPoint':
        """Create from numpy array [x, y, theta, kappa, dkappa, ddkappa, s]."""
        return cls(x=float(arr[0]), y=float(arr[1]), theta=float(arr[2]),
                   kappa=float(arr[3]), dkappa=float(arr[4]),
                   ddkappa=float(arr[5]), s=float(arr[6]))
    
    def with_s(self, s: float) -> 'PathPoint':
        """Return a copy with a different arc length."""
        return replace(self, s=s)


@dataclass(frozen=True)
class TrajectoryPoint(DataClassJsonMixin):
    """Point on a planned trajectory: a path point plus its dynamics.
    
    Attributes:
        path_point: Geometric part of the sample
        v: Speed [m/s]
        a: Acceleration [m/s²]
        relative_time: Time relative to the trajectory start [s]
    """
    path_point: PathPoint = field(default_factory=PathPoint)
    v: float = 0.0
    a: float = 0.0
    relative_time: float = 0.0
    
    @property
    def s(self) -> float:
        """Arc length of the underlying path point."""
        return self.path_point.s
    
    def to_array(self) -> np.ndarray:
        """Convert to numpy array [x, y, theta, kappa, dkappa, ddkappa, s, v, a, t]."""
        return np.concatenate([
            self.path_point.to_array(),
            [self.v, self.a, self.relative_time],
        ])
    
    @classmethod
    def from_array(cls, arr: np.ndarray) -> 'TrajectoryPoint':
        """Create from numpy array [x, y, theta, kappa, dkappa, ddkappa, s, v, a, t]."""
        return cls(path_point=PathPoint.from_array(arr[:7]), v=float(arr[7]),
                   a=float(arr[8]), relative_time=float(arr[9]))


@dataclass(frozen=True)
class SLPoint(DataClassJsonMixin):
    """Point in a curve-relative frame.
    
    Attributes:
        s: Arc length along the reference curve [m]
        l: Lateral offset from the reference curve, left positive [m]
    """
    s: float = 0.0
    l: float = 0.0
    
    def to_array(self) -> np.ndarray:
        """Convert to numpy array [s, l]."""
        return np.array([self.s, self.l])


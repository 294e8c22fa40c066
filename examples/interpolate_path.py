#!/usr/bin/env python3
"""Densify a coarsely sampled circular arc and report the position error.

This script demonstrates path and trajectory interpolation through a
PlanningContext.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from loguru import logger

from pathinterp.config import InterpolationConfig, load_config
from pathinterp.core.data_structures import PathPoint, TrajectoryPoint
from pathinterp.planning import PlanningContext, interpolate_path, interpolate_trajectory


def sample_arc(radius: float, length: float, n_points: int):
    """Sample points on a counter-clockwise arc starting at the origin heading +x."""
    points = []
    for s in np.linspace(0.0, length, n_points):
        theta = s / radius
        points.append(PathPoint(
            x=float(radius * np.sin(theta)),
            y=float(radius * (1.0 - np.cos(theta))),
            theta=float(theta),
            kappa=1.0 / radius,
            s=float(s)
        ))
    return points


def main():
    """Main function."""
    parser = argparse.ArgumentParser(
        description='Interpolate a sampled arc with Hermite splines'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to interpolation configuration file'
    )
    parser.add_argument(
        '--radius',
        type=float,
        default=20.0,
        help='Arc radius [m]'
    )
    parser.add_argument(
        '--length',
        type=float,
        default=30.0,
        help='Arc length [m]'
    )
    parser.add_argument(
        '--samples',
        type=int,
        default=4,
        help='Number of coarse samples on the arc'
    )
    parser.add_argument(
        '--step',
        type=float,
        default=0.5,
        help='Output spacing [m]'
    )
    parser.add_argument(
        '--speed',
        type=float,
        default=5.0,
        help='Constant speed used for the trajectory demo [m/s]'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level'
    )
    
    args = parser.parse_args()
    
    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=args.log_level
    )
    
    config = load_config(args.config) if args.config else InterpolationConfig()
    context = PlanningContext(config)
    
    coarse = sample_arc(args.radius, args.length, args.samples)
    logger.info(f"Densifying {len(coarse)} samples over {args.length} m")
    
    kwargs = {'quadrature_order': config.quadrature_order}
    max_error = 0.0
    for s in np.arange(0.0, args.length, args.step):
        p = interpolate_path(coarse, float(s), **kwargs)
        exact_x = args.radius * np.sin(s / args.radius)
        exact_y = args.radius * (1.0 - np.cos(s / args.radius))
        max_error = max(max_error, float(np.hypot(p.x - exact_x, p.y - exact_y)))
    logger.info(f"Max path position error: {max_error:.3e} m")
    
    trajectory = [
        TrajectoryPoint(path_point=p, v=args.speed, a=0.0, relative_time=p.s / args.speed)
        for p in coarse
    ]
    t_end = trajectory[-1].relative_time
    tp = interpolate_trajectory(
        trajectory, 0.5 * t_end,
        arc_length_epsilon=config.arc_length_epsilon,
        quadrature_order=config.quadrature_order,
        strict=config.strict_arc_length
    )
    logger.info(f"Trajectory midpoint: x={tp.path_point.x:.3f}, y={tp.path_point.y:.3f}, "
                f"theta={tp.path_point.theta:.4f}, v={tp.v:.2f}")
    
    context.planning_state.update_trajectory(trajectory)
    context.feeds.localization.publish(tp)
    context.feeds.chassis.publish({'speed_mps': tp.v})
    context.feeds.routing_response.publish({'length_m': args.length})
    context.dump_context()
    
    logger.info("Done")


if __name__ == '__main__':
    main()

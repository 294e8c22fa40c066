"""Configuration management module."""

import yaml
from pathlib import Path
from typing import List, Optional
import dataclasses
from dataclasses import dataclass
from loguru import logger


@dataclass
class InterpolationConfig:
    """Configuration for the interpolation utilities.
    
    Attributes:
        quadrature_order: Number of Gauss-Legendre points
        arc_length_epsilon: Tolerance for equal/consistent arc lengths [m]
        strict_arc_length: Raise instead of warn on arc length mismatch
        enable_prediction: Include the prediction feed in context dumps
        dump_dir: Directory for diagnostic message dumps
    """
    quadrature_order: int = 5
    arc_length_epsilon: float = 1.0e-4
    strict_arc_length: bool = False
    
    # Diagnostics
    enable_prediction: bool = False
    dump_dir: str = 'output/dumps'
    
    # Internal: loaded from
    config_path: Optional[str] = None


class ConfigValidationError(ValueError):
    """Raised when configuration validation fails."""
    pass


def validate_config(config: InterpolationConfig) -> None:
    """Validate configuration values for consistency and correctness.
    
    Args:
        config: Configuration to validate
        
    Raises:
        ConfigValidationError: If validation fails
    """
    errors: List[str] = []
    
    if not isinstance(config.quadrature_order, int) or isinstance(config.quadrature_order, bool):
        errors.append(f"quadrature_order must be an integer, got {config.quadrature_order!r}")
    elif config.quadrature_order < 1:
        errors.append(f"quadrature_order must be positive, got {config.quadrature_order}")
    
    if config.arc_length_epsilon <= 0:
        errors.append(f"arc_length_epsilon must be positive, got {config.arc_length_epsilon}")
    
    if not isinstance(config.strict_arc_length, bool):
        errors.append(f"strict_arc_length must be a boolean, got {config.strict_arc_length!r}")
    if not isinstance(config.enable_prediction, bool):
        errors.append(f"enable_prediction must be a boolean, got {config.enable_prediction!r}")
    
    if not config.dump_dir:
        errors.append("dump_dir must be a non-empty path")
    
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigValidationError(error_msg)


def load_config(config_path: str) -> InterpolationConfig:
    """Load configuration from YAML file.
    
    Args:
        config_path: Path to YAML configuration file
        
    Returns:
        Loaded configuration
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    try:
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {config_path}: {e}") from e
    
    if config_dict is None:
        raise ValueError(f"YAML file {config_path} is empty or contains no valid content")
    
    try:
        config = InterpolationConfig(**config_dict)
    except TypeError as e:
        raise ValueError(f"Invalid configuration structure in {config_path}: {e}") from e
    
    config.config_path = str(config_path)
    
    try:
        validate_config(config)
    except ConfigValidationError:
        logger.error(f"Configuration validation failed for {config_path}")
        raise
    
    logger.info(f"Configuration loaded and validated from {config_path}")
    
    return config


def save_config(config: InterpolationConfig, config_path: str):
    """Save configuration to YAML file.
    
    Args:
        config: Configuration to save
        config_path: Path to save YAML file
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    
    config_dict = dataclasses.asdict(config)
    config_dict.pop('config_path')
    
    with open(config_path, 'w') as f:
        yaml.safe_dump(config_dict, f, default_flow_style=False, indent=2)
    
    logger.info(f"Configuration saved to {config_path}")


__all__ = [
    'InterpolationConfig',
    'ConfigValidationError',
    'validate_config',
    'load_config',
    'save_config',
]

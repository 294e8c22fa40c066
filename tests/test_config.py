"""Tests for configuration loading and validation."""

import pytest
import yaml
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pathinterp.config import (
    ConfigValidationError,
    InterpolationConfig,
    load_config,
    save_config,
    validate_config,
)


def test_default_config_is_valid():
    config = InterpolationConfig()
    validate_config(config)
    assert config.quadrature_order == 5
    assert config.arc_length_epsilon == 1.0e-4
    assert config.enable_prediction is False


def test_save_and_load(tmp_path):
    config = InterpolationConfig(quadrature_order=7, strict_arc_length=True, enable_prediction=True)
    path = tmp_path / 'nested' / 'config.yaml'
    
    save_config(config, str(path))
    loaded = load_config(str(path))
    
    assert loaded.quadrature_order == 7
    assert loaded.strict_arc_length is True
    assert loaded.enable_prediction is True
    assert loaded.config_path == str(path)
    assert 'config_path' not in yaml.safe_load(path.read_text())


def test_repository_default_config():
    path = Path(__file__).parent.parent / 'configs' / 'default.yaml'
    config = load_config(str(path))
    assert config.quadrature_order == 5


@pytest.mark.parametrize('overrides', [
    {'quadrature_order': 0},
    {'quadrature_order': 2.5},
    {'arc_length_epsilon': 0.0},
    {'strict_arc_length': 'yes'},
    {'dump_dir': ''},
])
def test_invalid_values(overrides):
    with pytest.raises(ConfigValidationError):
        validate_config(InterpolationConfig(**overrides))


def test_errors_are_collected():
    config = InterpolationConfig(quadrature_order=-1, arc_length_epsilon=-1.0)
    with pytest.raises(ConfigValidationError) as exc_info:
        validate_config(config)
    assert 'quadrature_order' in str(exc_info.value)
    assert 'arc_length_epsilon' in str(exc_info.value)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / 'missing.yaml'))


def test_empty_file(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('')
    with pytest.raises(ValueError):
        load_config(str(path))


def test_unknown_key(tmp_path):
    path = tmp_path / 'bad.yaml'
    path.write_text(yaml.safe_dump({'quadrature_order': 5, 'spline_degree': 7}))
    with pytest.raises(ValueError):
        load_config(str(path))


def test_invalid_file_values(tmp_path):
    path = tmp_path / 'invalid.yaml'
    path.write_text(yaml.safe_dump({'quadrature_order': 0}))
    with pytest.raises(ConfigValidationError):
        load_config(str(path))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

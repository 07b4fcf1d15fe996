"""Tests for configuration loading."""

import numpy as np
import pytest
from omegaconf import OmegaConf
from omegaconf.errors import ValidationError

from view2camera import (
    InvalidArgument,
    TransformConfig,
    load_transform_config,
    make_camera_from_config,
)

CONFIG_YAML = """
camera:
  projection: orthographic
  left: 0.0
  right: 4.0
  bottom: 0.0
  top: 2.0

transform:
  debug: true
  vectorized: false
"""


def test_defaults_give_identity_perspective():
    camera = make_camera_from_config({})
    assert camera.perspective
    np.testing.assert_allclose(camera.normalize_matrix, np.eye(4))


def test_perspective_from_dict():
    camera = make_camera_from_config({
        "left": -2.0, "right": 2.0, "bottom": -1.0, "top": 1.0, "near": 2.0,
    })
    assert (camera.left, camera.right, camera.bottom, camera.top, camera.near) == (-2.0, 2.0, -1.0, 1.0, 2.0)


def test_fovy_overrides_bounds():
    camera = make_camera_from_config({"fovy": 90.0, "aspect": 2.0, "left": 100.0})
    assert camera.left == pytest.approx(-2.0)
    assert camera.top == pytest.approx(1.0)


def test_orthographic_from_dict_config():
    camera = make_camera_from_config(OmegaConf.create({"camera": {"projection": "Orthographic"}}))
    assert not camera.perspective


def test_from_yaml_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)
    
    camera = make_camera_from_config(str(path))
    assert not camera.perspective
    assert (camera.left, camera.right) == (0.0, 4.0)
    
    config = load_transform_config(path)
    assert config == TransformConfig(debug=True, vectorized=False)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        make_camera_from_config(str(tmp_path / "missing.yaml"))


def test_unknown_projection():
    with pytest.raises(ValueError, match="projection"):
        make_camera_from_config({"projection": "fisheye"})


def test_bad_bound_in_config():
    with pytest.raises(InvalidArgument):
        make_camera_from_config({"left": "a"})


def test_transform_config_defaults():
    assert load_transform_config() == TransformConfig()
    assert load_transform_config({"camera": {"near": 2.0}}) == TransformConfig()


def test_transform_config_top_level_keys():
    assert load_transform_config({"vectorized": False}) == TransformConfig(vectorized=False)


def test_transform_config_type_checked():
    with pytest.raises(ValidationError):
        load_transform_config({"transform": {"debug": "maybe"}})

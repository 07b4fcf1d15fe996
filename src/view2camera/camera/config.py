"""Camera configuration parser."""

from __future__ import annotations
from typing import Any, Dict, Union
from pathlib import Path
from omegaconf import DictConfig, OmegaConf

from ..utils.logger import debug_print
from .camera import Camera


DEFAULT_CAMERA_CONFIG: Dict[str, Any] = {
    "projection": "perspective",
    "left": -1.0,
    "right": 1.0,
    "bottom": -1.0,
    "top": 1.0,
    "near": 1.0,
    "fovy": None,
    "aspect": 1.0,
}


def to_dict_config(cfg: Union[str, Path, Dict[str, Any], DictConfig]) -> DictConfig:
    """
    Load a configuration from a YAML path, a dict, or an existing DictConfig.
    
    Raises:
        FileNotFoundError: If a path is given and does not exist
    """
    if isinstance(cfg, DictConfig):
        return cfg
    if isinstance(cfg, (str, Path)):
        if not Path(cfg).exists():
            raise FileNotFoundError(f"Config file not found: {cfg}")
        return OmegaConf.load(cfg)
    return OmegaConf.create(dict(cfg))


def make_camera_from_config(
    camera_cfg: Union[str, Path, Dict[str, Any], DictConfig]
) -> Camera:
    """
    Build a camera from configuration.
    
    Args:
        camera_cfg: Camera configuration (dict, DictConfig or YAML path) with keys:
            Optional:
                - projection: 'perspective' or 'orthographic' (default: perspective)
                - left, right, bottom, top: View rectangle (default: -1, 1, -1, 1)
                - near: View plane distance, perspective only (default: 1.0)
                - fovy: Vertical FOV in degrees; if set, the view rectangle
                  is derived from fovy, aspect and near and left/right/bottom/top
                  are ignored
                - aspect: Width / height for fovy (default: 1.0)
            A top-level 'camera' section is used if present.
    
    Returns:
        Camera
    
    Raises:
        ValueError: If the projection name is unknown
        InvalidArgument: If a bound is not a finite number
    
    Example:
        >>> camera = make_camera_from_config({
        ...     "projection": "perspective",
        ...     "left": -2.0, "right": 2.0,
        ...     "bottom": -1.0, "top": 1.0,
        ...     "near": 2.0,
        ... })
    """
    cfg = to_dict_config(camera_cfg)
    if "camera" in cfg:
        cfg = cfg.camera
    cfg = OmegaConf.merge(OmegaConf.create(DEFAULT_CAMERA_CONFIG), cfg)
    
    projection = str(cfg.projection).lower().strip()
    
    if projection == "perspective":
        if cfg.fovy is not None:
            camera = Camera.perspective_fov(cfg.fovy, cfg.aspect, cfg.near)
        else:
            camera = Camera.perspective_camera(cfg.left, cfg.right, cfg.bottom, cfg.top, cfg.near)
    elif projection == "orthographic":
        camera = Camera.orthographic_camera(cfg.left, cfg.right, cfg.bottom, cfg.top)
    else:
        raise ValueError(
            f"projection must be 'perspective' or 'orthographic', got {cfg.projection!r}"
        )
    
    debug_print(f"[Config] Camera: {camera}")
    return camera

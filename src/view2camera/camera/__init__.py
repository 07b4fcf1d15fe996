"""Camera system: view volumes and normalization matrices."""

from .projection import (
    Perspective,
    Orthographic,
    Projection,
    build_perspective_normalize_matrix,
    build_orthographic_normalize_matrix,
    build_normalize_matrix,
)
from .camera import Camera
from .config import make_camera_from_config, to_dict_config

__all__ = [
    # Projection variants
    "Perspective",
    "Orthographic",
    "Projection",
    
    # Normalization matrices
    "build_perspective_normalize_matrix",
    "build_orthographic_normalize_matrix",
    "build_normalize_matrix",
    
    # Camera
    "Camera",
    "make_camera_from_config",
    "to_dict_config",
]

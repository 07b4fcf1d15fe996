"""View-to-camera transformation stage."""

from .config import TransformConfig, load_transform_config
from .vertex import view2camera_vertex, view2camera_vertices
from .model import view2camera_model, view2camera_nested_model
from .position import view2camera_position

__all__ = [
    "TransformConfig",
    "load_transform_config",
    "view2camera_vertex",
    "view2camera_vertices",
    "view2camera_model",
    "view2camera_nested_model",
    "view2camera_position",
]

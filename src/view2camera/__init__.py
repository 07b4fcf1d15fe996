"""
view2camera - View-to-normalized-camera stage of a 3D rendering pipeline

Transforms a scene tree of positions and models from the camera's view
coordinate system, whose view volume is a user defined frustum or slab,
into the normalized camera coordinate system used by the clipping stage.

Components:
    - Scene: Vertex, Matrix helpers, Model, Position
    - Camera: Projection variants, normalization matrices, Camera
    - Core: Vertex, model tree and position tree transforms
    - Utils: Validation, debug output, diagnostic logger

Example:
    >>> from view2camera import Camera, Model, Position, Vertex, view2camera_position
    >>> 
    >>> camera = Camera.perspective_camera(left=0.0, right=2.0, bottom=0.0, top=2.0)
    >>> model = Model(vertex_list=[Vertex(1.0, 1.0, -1.0)], name="point")
    >>> scene = Position.build_from_model_name(model, "root")
    >>> 
    >>> out = view2camera_position(scene, camera)
    >>> out.model.vertex_list
    (Vertex(x=0.0, y=0.0, z=-1.0),)
"""

__version__ = "1.0.0"

# Scene
from .scene import (
    Vertex,
    Matrix,
    Model,
    Position,
    build_from_columns,
    identity_matrix,
    times_matrix,
    times_vertex,
)

# Camera
from .camera import (
    Camera,
    Perspective,
    Orthographic,
    build_perspective_normalize_matrix,
    build_orthographic_normalize_matrix,
    build_normalize_matrix,
    make_camera_from_config,
)

# Core
from .core import (
    TransformConfig,
    load_transform_config,
    view2camera_vertex,
    view2camera_vertices,
    view2camera_model,
    view2camera_nested_model,
    view2camera_position,
)

# Utils
from .utils import (
    InvalidArgument,
    PipelineLogger,
    NullLogger,
    PrintLogger,
    get_logger,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",
    
    # Scene
    "Vertex",
    "Matrix",
    "Model",
    "Position",
    "build_from_columns",
    "identity_matrix",
    "times_matrix",
    "times_vertex",
    
    # Camera
    "Camera",
    "Perspective",
    "Orthographic",
    "build_perspective_normalize_matrix",
    "build_orthographic_normalize_matrix",
    "build_normalize_matrix",
    "make_camera_from_config",
    
    # Core
    "TransformConfig",
    "load_transform_config",
    "view2camera_vertex",
    "view2camera_vertices",
    "view2camera_model",
    "view2camera_nested_model",
    "view2camera_position",
    
    # Utils
    "InvalidArgument",
    "PipelineLogger",
    "NullLogger",
    "PrintLogger",
    "get_logger",
    "debug_print",
    "is_debug_enabled",
]

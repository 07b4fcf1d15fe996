"""Scene data model: vertices, matrices, models and positions."""

from .vertex import Vertex
from .matrix import (
    Matrix,
    ensure_4x4_matrix,
    build_from_columns,
    identity_matrix,
    times_matrix,
    times_vertex,
    times_vertices,
)
from .model import Model
from .position import Position

__all__ = [
    "Vertex",
    
    # Matrix
    "Matrix",
    "ensure_4x4_matrix",
    "build_from_columns",
    "identity_matrix",
    "times_matrix",
    "times_vertex",
    "times_vertices",
    
    # Trees
    "Model",
    "Position",
]

"""Vertex transform from view coordinates to normalized camera coordinates."""

from __future__ import annotations
from typing import List, Sequence

from ..scene.vertex import Vertex
from ..scene.matrix import Matrix, times_vertex, times_vertices


def view2camera_vertex(vertex: Vertex, normalize_matrix: Matrix) -> Vertex:
    """Return normalize_matrix * (x, y, z, 1) with w dropped."""
    return times_vertex(normalize_matrix, vertex)


def view2camera_vertices(
    vertex_list: Sequence[Vertex],
    normalize_matrix: Matrix,
    vectorized: bool = True
) -> List[Vertex]:
    """
    Transform every vertex of a list, keeping the order.
    
    Args:
        vertex_list: Vertices in view coordinates
        normalize_matrix: The camera's normalization matrix
        vectorized: Use one numpy product for the whole list
    
    Returns:
        New list with output[i] the transform of vertex_list[i]
    """
    if vectorized:
        return times_vertices(normalize_matrix, vertex_list)
    return [view2camera_vertex(v, normalize_matrix) for v in vertex_list]

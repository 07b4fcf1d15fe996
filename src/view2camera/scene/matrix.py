"""4x4 homogeneous matrix helpers."""

from __future__ import annotations
from typing import Sequence
import numpy as np

from .vertex import Vertex

# A matrix is a read-only (4, 4) float64 array.
Matrix = np.ndarray


def _freeze(m: np.ndarray) -> np.ndarray:
    m.setflags(write=False)
    return m


def ensure_4x4_matrix(m) -> np.ndarray:
    """
    Convert input to 4x4 numpy array.
    
    Args:
        m: Input matrix (4x4 array or flat list of 16 floats)
    
    Returns:
        4x4 float64 numpy array
    
    Raises:
        ValueError: If input cannot be reshaped to 4x4
    """
    M = np.asarray(m, dtype=np.float64)
    
    if M.shape == (16,):
        M = M.reshape(4, 4)
    
    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )
    
    return M


def build_from_columns(c0, c1, c2, c3) -> Matrix:
    """
    Build a matrix from four column vectors.
    
    Args:
        c0, c1, c2, c3: Length-4 column vectors, left to right
    
    Returns:
        Read-only 4x4 matrix whose j-th column is cj
    """
    columns = [np.asarray(c, dtype=np.float64) for c in (c0, c1, c2, c3)]
    for j, c in enumerate(columns):
        if c.shape != (4,):
            raise ValueError(f"Column {j} must have 4 components, got shape {c.shape}")
    return _freeze(np.column_stack(columns))


def identity_matrix() -> Matrix:
    """Return a read-only 4x4 identity matrix."""
    return _freeze(np.eye(4, dtype=np.float64))


def times_matrix(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a * b.
    
    The product applies b first, then a, when used on column vectors.
    """
    with np.errstate(invalid="ignore", over="ignore"):
        return _freeze(ensure_4x4_matrix(a) @ ensure_4x4_matrix(b))


def times_vertex(m: Matrix, v: Vertex) -> Vertex:
    """
    Multiply the homogeneous vertex (x, y, z, 1) by m.
    
    The w component of the product is discarded; no perspective
    division is done here.
    """
    with np.errstate(invalid="ignore", over="ignore"):
        return Vertex.from_array(ensure_4x4_matrix(m) @ v.as_homogeneous())


def times_vertices(m: Matrix, vertices: Sequence[Vertex]) -> list:
    """
    Multiply every vertex of a list by m in one product.
    
    Equivalent to ``[times_vertex(m, v) for v in vertices]``.
    
    Args:
        m: 4x4 matrix
        vertices: Sequence of N vertices
    
    Returns:
        List of N new vertices, in input order
    """
    M = ensure_4x4_matrix(m)
    P = np.array([v.as_homogeneous() for v in vertices], dtype=np.float64).reshape(-1, 4)
    
    # Row vectors: (M @ p^T)^T = p @ M^T
    with np.errstate(invalid="ignore", over="ignore"):
        out = P @ M.T
    
    return [Vertex.from_array(row) for row in out]

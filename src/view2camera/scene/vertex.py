"""Vertex value type."""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class Vertex:
    """
    A point in 3-space.
    
    Vertices are immutable. Matrix multiplication treats them as the
    homogeneous column vector (x, y, z, 1).
    """
    x: float
    y: float
    z: float
    
    def as_homogeneous(self) -> np.ndarray:
        """Return (x, y, z, 1) as a float64 array."""
        return np.array([self.x, self.y, self.z, 1.0], dtype=np.float64)
    
    @classmethod
    def from_array(cls, a) -> 'Vertex':
        """Build a vertex from the first three components of a vector (w is dropped)."""
        return cls(float(a[0]), float(a[1]), float(a[2]))

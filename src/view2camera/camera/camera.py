"""Camera holding the view-volume data."""

from __future__ import annotations
from typing import Optional
import math

from ..scene.matrix import Matrix
from ..utils.validation import validate_bounds
from .projection import Perspective, Orthographic, Projection, build_normalize_matrix


class Camera:
    """
    A camera defined by its view volume.
    
    The normalization matrix depends only on the projection variant. It is
    built on first use and then reused for every vertex of every model.
    
    Attributes:
        projection: Perspective or Orthographic view volume
    """
    
    def __init__(self, projection: Projection):
        if isinstance(projection, Perspective):
            validate_bounds(
                left=projection.left, right=projection.right,
                bottom=projection.bottom, top=projection.top,
                near=projection.near,
            )
        elif isinstance(projection, Orthographic):
            validate_bounds(
                left=projection.left, right=projection.right,
                bottom=projection.bottom, top=projection.top,
            )
        else:
            raise TypeError(f"Unknown projection type: {type(projection).__name__}")
        
        self._projection = projection
        self._normalize_matrix: Optional[Matrix] = None
    
    @classmethod
    def perspective_camera(
        cls,
        left: float = -1.0,
        right: float = 1.0,
        bottom: float = -1.0,
        top: float = 1.0,
        near: float = 1.0
    ) -> 'Camera':
        """Camera whose view rectangle lies in the plane z = -near."""
        return cls(Perspective(left, right, bottom, top, near))
    
    @classmethod
    def orthographic_camera(
        cls,
        left: float = -1.0,
        right: float = 1.0,
        bottom: float = -1.0,
        top: float = 1.0
    ) -> 'Camera':
        """Camera with a parallel view volume."""
        return cls(Orthographic(left, right, bottom, top))
    
    @classmethod
    def perspective_fov(cls, fovy: float, aspect: float, near: float = 1.0) -> 'Camera':
        """
        Symmetric perspective camera from a vertical field of view.
        
        Args:
            fovy: Vertical field of view in degrees
            aspect: Width / height of the view rectangle
            near: Distance to the view plane
        """
        validate_bounds(fovy=fovy, aspect=aspect, near=near)
        top = near * math.tan(math.radians(fovy) / 2.0)
        right = top * aspect
        return cls(Perspective(-right, right, -top, top, near))
    
    @property
    def projection(self) -> Projection:
        return self._projection
    
    @property
    def perspective(self) -> bool:
        return isinstance(self._projection, Perspective)
    
    @property
    def left(self) -> float:
        return self._projection.left
    
    @property
    def right(self) -> float:
        return self._projection.right
    
    @property
    def bottom(self) -> float:
        return self._projection.bottom
    
    @property
    def top(self) -> float:
        return self._projection.top
    
    @property
    def near(self) -> Optional[float]:
        """Near distance, None for an orthographic camera."""
        return self._projection.near if self.perspective else None
    
    @property
    def normalize_matrix(self) -> Matrix:
        """View-to-normalized-camera matrix (read-only, cached)."""
        if self._normalize_matrix is None:
            self._normalize_matrix = build_normalize_matrix(self._projection)
        return self._normalize_matrix
    
    def __repr__(self) -> str:
        return f"Camera({self._projection!r})"

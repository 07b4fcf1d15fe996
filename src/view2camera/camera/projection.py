"""
Normalization matrix construction.

We use two steps to transform the camera's perspective view volume into
the standard perspective view volume. The first step skews the view
volume so that its center line is the negative z-axis. The second step
scales the skewed volume so that it intersects the plane z = -1 at the
corners (-1, -1, -1) and (+1, +1, -1).

For an asymmetric field-of-view in the yz-plane bounded by (t, -near)
and (b, -near), the center line passes through ((t+b)/2, -near). The skew
factor s that moves that point onto the z-axis solves

    (t+b)/2 + s * (-near) = 0   =>   s = (t+b) / (2*near)

and the scale factor that maps the half-height (t-b)/2 to near solves

    s * (t-b)/2 = near          =>   s = 2*near / (t-b)

The xz-plane is handled the same way. Skew and scale give

    [ 1  0  (r+l)/(2*near)  0 ]        [ 2*near/(r-l)       0       0  0 ]
    [ 0  1  (t+b)/(2*near)  0 ]        [       0      2*near/(t-b)  0  0 ]
    [ 0  0        1         0 ]        [       0            0       1  0 ]
    [ 0  0        0         1 ]        [       0            0       0  1 ]

and the normalization matrix is scale * skew (skew applied first).
The builders below take bounds measured in the plane z = -1, i.e. with
near already divided out; :func:`build_normalize_matrix` does that division.

The orthographic volume is a slab parallel to the z-axis. It is
translated so its center line is the z-axis and then scaled so that it
meets the xy-plane at (-1, -1, 0) and (+1, +1, 0).
"""

from __future__ import annotations
from typing import Union
from dataclasses import dataclass
import numpy as np

from ..scene.matrix import Matrix, build_from_columns, times_matrix
from ..utils.validation import validate_bounds


@dataclass(frozen=True)
class Perspective:
    """Frustum with apex at the origin, cut by z = -near at (l, b) and (r, t)."""
    left: float
    right: float
    bottom: float
    top: float
    near: float = 1.0


@dataclass(frozen=True)
class Orthographic:
    """Slab parallel to the z-axis, cut by z = 0 at (l, b) and (r, t)."""
    left: float
    right: float
    bottom: float
    top: float


Projection = Union[Perspective, Orthographic]


def _scale_matrix(l, r, b, t) -> Matrix:
    return build_from_columns(
        [2.0 / (r - l),           0.0, 0.0, 0.0],
        [          0.0, 2.0 / (t - b), 0.0, 0.0],
        [          0.0,           0.0, 1.0, 0.0],
        [          0.0,           0.0, 0.0, 1.0])


def _perspective_product(l, r, b, t) -> Matrix:
    l, r, b, t = (np.float64(x) for x in (l, r, b, t))
    
    # Degenerate bounds produce inf/nan entries that propagate downstream
    with np.errstate(divide="ignore", invalid="ignore"):
        skew = build_from_columns(
            [          1.0,           0.0, 0.0, 0.0],
            [          0.0,           1.0, 0.0, 0.0],
            [(r + l) / 2.0, (t + b) / 2.0, 1.0, 0.0],
            [          0.0,           0.0, 0.0, 1.0])
        scale = _scale_matrix(l, r, b, t)
    
    # Order matters: skew first, then scale
    return times_matrix(scale, skew)


def _orthographic_product(l, r, b, t) -> Matrix:
    l, r, b, t = (np.float64(x) for x in (l, r, b, t))
    
    with np.errstate(divide="ignore", invalid="ignore"):
        translate = build_from_columns(
            [           1.0,            0.0, 0.0, 0.0],
            [           0.0,            1.0, 0.0, 0.0],
            [           0.0,            0.0, 1.0, 0.0],
            [-(r + l) / 2.0, -(t + b) / 2.0, 0.0, 1.0])
        scale = _scale_matrix(l, r, b, t)
    
    return times_matrix(scale, translate)


def build_perspective_normalize_matrix(l, r, b, t) -> Matrix:
    """
    Build the matrix taking the perspective view volume to the normalized one.
    
    Args:
        l: Left edge of the view rectangle in the plane z = -1
        r: Right edge of the view rectangle in the plane z = -1
        b: Bottom edge of the view rectangle in the plane z = -1
        t: Top edge of the view rectangle in the plane z = -1
    
    Returns:
        Read-only 4x4 normalization matrix
    
    Raises:
        InvalidArgument: If a bound is not a finite number
    
    Notes:
        - r == l or t == b gives non-finite entries; callers must reject
          degenerate bounds beforehand
    """
    validate_bounds(l=l, r=r, b=b, t=t)
    return _perspective_product(l, r, b, t)


def build_orthographic_normalize_matrix(l, r, b, t) -> Matrix:
    """
    Build the matrix taking the orthographic view volume to the normalized one.
    
    Args:
        l, r, b, t: Edges of the view rectangle in the xy-plane
    
    Returns:
        Read-only 4x4 normalization matrix
    
    Raises:
        InvalidArgument: If a bound is not a finite number
    """
    validate_bounds(l=l, r=r, b=b, t=t)
    return _orthographic_product(l, r, b, t)


def build_normalize_matrix(projection: Projection) -> Matrix:
    """
    Build the normalization matrix for a projection variant.
    
    A Perspective variant has its bounds divided by ``near`` first, so
    the result has skew (r+l)/(2*near) and scale 2*near/(r-l).
    
    Raises:
        InvalidArgument: If a bound is not a finite number
        TypeError: If ``projection`` is not a known variant
    """
    if isinstance(projection, Perspective):
        p = projection
        validate_bounds(left=p.left, right=p.right, bottom=p.bottom, top=p.top, near=p.near)
        near = np.float64(p.near)
        with np.errstate(divide="ignore", invalid="ignore"):
            folded = [np.float64(x) / near for x in (p.left, p.right, p.bottom, p.top)]
        return _perspective_product(*folded)
    
    if isinstance(projection, Orthographic):
        p = projection
        return build_orthographic_normalize_matrix(p.left, p.right, p.bottom, p.top)
    
    raise TypeError(f"Unknown projection type: {type(projection).__name__}")

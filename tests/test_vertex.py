"""Tests for the vertex transform and matrix helpers."""

import numpy as np
import pytest

from view2camera import (
    Vertex,
    build_from_columns,
    build_perspective_normalize_matrix,
    identity_matrix,
    times_matrix,
    view2camera_vertex,
    view2camera_vertices,
)


def test_build_from_columns_places_columns():
    M = build_from_columns([1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16])
    np.testing.assert_array_equal(M[:, 0], [1, 2, 3, 4])
    np.testing.assert_array_equal(M[0, :], [1, 5, 9, 13])


def test_build_from_columns_rejects_short_column():
    with pytest.raises(ValueError):
        build_from_columns([1, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1])


def test_times_matrix_is_not_commutative():
    shear = build_from_columns([1, 0, 0, 0], [0, 1, 0, 0], [1, 0, 1, 0], [0, 0, 0, 1])
    scale = build_from_columns([2, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1])
    assert times_matrix(scale, shear)[0, 2] == 2.0
    assert times_matrix(shear, scale)[0, 2] == 1.0


def test_identity_application():
    v = view2camera_vertex(Vertex(1.0, 1.0, -1.0), identity_matrix())
    assert v == Vertex(1.0, 1.0, -1.0)


def test_translation_uses_w_one_and_drops_w():
    M = build_from_columns([1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [3, -2, 1, 7])
    v = view2camera_vertex(Vertex(1.0, 1.0, 1.0), M)
    assert (v.x, v.y, v.z) == (4.0, -1.0, 2.0)


def test_vertices_keep_order_and_length():
    M = build_perspective_normalize_matrix(0, 2, 0, 2)
    vertices = [Vertex(float(i), 2.0 * i, -1.0 - i) for i in range(10)]
    
    out = view2camera_vertices(vertices, M)
    
    assert len(out) == len(vertices)
    for v_in, v_out in zip(vertices, out):
        expected = view2camera_vertex(v_in, M)
        assert (v_out.x, v_out.y, v_out.z) == pytest.approx((expected.x, expected.y, expected.z))


def test_vectorized_and_per_vertex_agree():
    M = build_perspective_normalize_matrix(-0.3, 1.7, -0.9, 0.4)
    vertices = [Vertex(0.1 * i, -0.2 * i, -1.0 - 0.5 * i) for i in range(7)]
    
    fast = view2camera_vertices(vertices, M, vectorized=True)
    slow = view2camera_vertices(vertices, M, vectorized=False)
    
    np.testing.assert_allclose(
        [(v.x, v.y, v.z) for v in fast],
        [(v.x, v.y, v.z) for v in slow],
    )


def test_empty_vertex_list():
    assert view2camera_vertices([], identity_matrix()) == []
    assert view2camera_vertices((), identity_matrix(), vectorized=False) == []

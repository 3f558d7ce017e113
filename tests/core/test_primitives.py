"""core.primitives の頂点・インデックス配列のテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from landscape.core.primitives import PrimitiveKind, primitive_mesh


def test_square_is_two_triangles() -> None:
    mesh = primitive_mesh(PrimitiveKind.SQUARE)
    assert mesh.vertices.shape == (4, 2)
    assert mesh.indices.tolist() == [0, 1, 2, 0, 2, 3]
    np.testing.assert_array_equal(np.abs(mesh.vertices), 0.5)


def test_triangle_points_up() -> None:
    mesh = primitive_mesh(PrimitiveKind.TRIANGLE)
    assert mesh.vertices.tolist() == [[0.0, 0.5], [-0.5, -0.5], [0.5, -0.5]]
    assert mesh.indices.tolist() == [0, 1, 2]


def test_circle_has_center_and_50_segments() -> None:
    mesh = primitive_mesh(PrimitiveKind.CIRCLE)
    assert mesh.vertices.shape == (51, 2)
    assert mesh.index_count == 3 + 3 * 50
    assert mesh.indices[:3].tolist() == [0, 1, 50]
    radii = np.linalg.norm(mesh.vertices[1:], axis=1)
    np.testing.assert_allclose(radii, 1.0, atol=1e-6)


def test_ray_fan_pairs_center_with_each_ray() -> None:
    mesh = primitive_mesh(PrimitiveKind.RAY_FAN)
    assert mesh.vertices.shape == (9, 2)
    assert mesh.indices.tolist() == [0, 1, 0, 2, 0, 3, 0, 4, 0, 5, 0, 6, 0, 7, 0, 8]


def test_blade_fan_has_four_blades() -> None:
    mesh = primitive_mesh(PrimitiveKind.BLADE_FAN)
    assert mesh.vertices.shape == (17, 2)
    assert mesh.indices.tolist() == [0, 1, 2, 0, 5, 6, 0, 9, 10, 0, 13, 14]


def test_meshes_are_cached_and_read_only() -> None:
    mesh = primitive_mesh(PrimitiveKind.CIRCLE)
    assert primitive_mesh(PrimitiveKind.CIRCLE) is mesh
    assert mesh.vertices.dtype == np.float32
    assert mesh.indices.dtype == np.uint32
    with pytest.raises(ValueError):
        mesh.vertices[0, 0] = 1.0

# -*- coding: utf-8 -*-
"""
Касательный базис (tangent / bitangent) для normal mapping.

Для угла треугольника строятся две матрицы:
    T = [ duv1 | duv2 | (0,0,1) ]   – рёбра в UV‑пространстве,
    W = [ e1   | e2   | normal  ]   – те же рёбра в пространстве модели.
Переход из касательного пространства в модельное: M = W · T⁻¹,
tangent = M·(1,0,0), bitangent = M·(0,1,0).

Касательные считаются отдельно для каждого угла каждого треугольника и
не усредняются между гранями, разделяющими вершину.
"""

import math
from typing import Tuple

from wavemesh.errors import TangentBasisDegenerate
from wavemesh.geometry.vertex import ModelVertex, Vertex
from wavemesh.math.mat3 import Mat3
from wavemesh.math.vec2 import Vec2
from wavemesh.math.vec3 import Vec3

# UV‑рёбра вырождены, если |du1·dv2 - du2·dv1| <= epsilon·|duv1|·|duv2|
# (синус угла между ними не больше epsilon)
DEFAULT_EPSILON = 1e-6

_UNIT_Z = (0.0, 0.0, 1.0)
_UNIT_U = (1.0, 0.0, 0.0)
_UNIT_V = (0.0, 1.0, 0.0)


def _uv_collinear(uv_edge_1: Vec2, uv_edge_2: Vec2, epsilon: float) -> bool:
    du1, dv1 = uv_edge_1.u, uv_edge_1.v
    du2, dv2 = uv_edge_2.u, uv_edge_2.v
    scale = math.hypot(du1, dv1) * math.hypot(du2, dv2)
    if scale == 0.0:
        return True
    return abs(du1 * dv2 - du2 * dv1) <= epsilon * scale


def compute_vertex_tangents(normal: Vec3,
                            edge_1: Vec3, uv_edge_1: Vec2,
                            edge_2: Vec3, uv_edge_2: Vec2,
                            epsilon: float = DEFAULT_EPSILON) -> Tuple[Vec3, Vec3]:
    tangent_basis = Mat3.from_cols(uv_edge_1.extend(0.0), uv_edge_2.extend(0.0), _UNIT_Z)
    inverse = None if _uv_collinear(uv_edge_1, uv_edge_2, epsilon) else tangent_basis.invert()
    if inverse is None:
        raise TangentBasisDegenerate(
            f"UV edges {uv_edge_1!r} and {uv_edge_2!r} are collinear or zero-area"
        )
    world_basis = Mat3.from_cols(edge_1.as_np(), edge_2.as_np(), normal.as_np())
    from_tangent_space = world_basis @ inverse
    tangent_u = Vec3.from_np(from_tangent_space.transform(_UNIT_U))
    tangent_v = Vec3.from_np(from_tangent_space.transform(_UNIT_V))
    return tangent_u, tangent_v


def _corner_tangents(corner: ModelVertex, a: ModelVertex, b: ModelVertex,
                     epsilon: float) -> Tuple[Vec3, Vec3]:
    return compute_vertex_tangents(
        corner.normal,
        a.position - corner.position,
        a.uv - corner.uv,
        b.position - corner.position,
        b.uv - corner.uv,
        epsilon,
    )


def _to_vertex(corner: ModelVertex, tangents: Tuple[Vec3, Vec3]) -> Vertex:
    tangent_u, tangent_v = tangents
    return Vertex(
        position=corner.position.to_tuple(),
        normal=corner.normal.to_tuple(),
        uv=corner.uv.to_tuple(),
        tangent_u=tangent_u.to_tuple(),
        tangent_v=tangent_v.to_tuple(),
    )


def compute_triangle(v0: ModelVertex, v1: ModelVertex, v2: ModelVertex,
                     epsilon: float = DEFAULT_EPSILON) -> Tuple[Vertex, Vertex, Vertex]:
    """Три готовые вершины треугольника; каждый угол – опорная точка своих рёбер."""
    return (
        _to_vertex(v0, _corner_tangents(v0, v1, v2, epsilon)),
        _to_vertex(v1, _corner_tangents(v1, v0, v2, epsilon)),
        _to_vertex(v2, _corner_tangents(v2, v0, v1, epsilon)),
    )

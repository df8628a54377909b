# wavemesh/geometry/resolver.py
"""Разрешение индексов угла грани в таблицы атрибутов модели."""

from typing import Sequence

from wavemesh.errors import IndexOutOfRange
from wavemesh.geometry.vertex import ModelVertex
from wavemesh.math.vec2 import Vec2
from wavemesh.math.vec3 import Vec3
from wavemesh.obj.model import ObjModel, VertexIndices


def _lookup(table: Sequence, index: int, what: str):
    # 1‑based -> 0‑based; 0 и отрицательные значения не должны «заворачиваться»
    if not 1 <= index <= len(table):
        raise IndexOutOfRange(
            f"{what} index {index} is out of range (1..{len(table)})"
        )
    return table[index - 1]


def resolve_corner(model: ObjModel, corner: VertexIndices) -> ModelVertex:
    x, y, z, _w = _lookup(model.v, corner.v, "position")
    normal = _lookup(model.vn, corner.vn, "normal")
    if corner.vt is None:
        uv = Vec2(0.0, 0.0)
    else:
        uv = Vec2(*_lookup(model.vt, corner.vt, "uv"))
    return ModelVertex(position=Vec3(x, y, z), normal=Vec3(*normal), uv=uv)

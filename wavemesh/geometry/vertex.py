# wavemesh/geometry/vertex.py
"""
Вершины конвейера:
    ModelVertex – угол грани после разрешения индексов (позиция, нормаль, UV);
    Vertex      – готовая вершина для вершинного буфера (+ касательные).
"""

from typing import NamedTuple, Tuple

from wavemesh.math.vec2 import Vec2
from wavemesh.math.vec3 import Vec3

# (имя атрибута, число float32‑компонент) – порядок в вершинном буфере
VERTEX_LAYOUT: Tuple[Tuple[str, int], ...] = (
    ("position", 3),
    ("normal", 3),
    ("uv", 2),
    ("tangent_u", 3),
    ("tangent_v", 3),
)
VERTEX_COMPONENTS = sum(size for _, size in VERTEX_LAYOUT)
VERTEX_STRIDE = VERTEX_COMPONENTS * 4


class ModelVertex(NamedTuple):
    position: Vec3
    normal: Vec3
    uv: Vec2


class Vertex(NamedTuple):
    position: Tuple[float, float, float]
    normal: Tuple[float, float, float]
    uv: Tuple[float, float]
    tangent_u: Tuple[float, float, float]
    tangent_v: Tuple[float, float, float]

    def flatten(self) -> Tuple[float, ...]:
        """Все компоненты подряд в порядке VERTEX_LAYOUT."""
        return (*self.position, *self.normal, *self.uv,
                *self.tangent_u, *self.tangent_v)

"""
Пакет geometry – разрешение индексов, триангуляция, касательные и сборка
вершинного списка.
"""

from wavemesh.geometry.vertex import (
    ModelVertex, Vertex, VERTEX_LAYOUT, VERTEX_COMPONENTS, VERTEX_STRIDE
)
from wavemesh.geometry.resolver import resolve_corner
from wavemesh.geometry.triangulate import triangulate
from wavemesh.geometry.tangents import compute_triangle, compute_vertex_tangents
from wavemesh.geometry.assembler import build, build_face

__all__ = [
    "ModelVertex", "Vertex", "VERTEX_LAYOUT", "VERTEX_COMPONENTS", "VERTEX_STRIDE",
    "resolve_corner", "triangulate", "compute_triangle", "compute_vertex_tangents",
    "build", "build_face",
]

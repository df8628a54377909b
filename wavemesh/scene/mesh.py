"""
Меш из готовых вершин – создаёт вершинный буфер в бекенде при первом draw().
"""

from typing import Sequence

import numpy as np

from wavemesh.geometry.vertex import VERTEX_COMPONENTS, VERTEX_LAYOUT, Vertex
from wavemesh.utils.logger import logger


def pack_vertices(vertices: Sequence[Vertex]) -> np.ndarray:
    """Interleaved‑массив (N, 14) float32 в порядке VERTEX_LAYOUT."""
    if not vertices:
        return np.zeros((0, VERTEX_COMPONENTS), dtype=np.float32)
    return np.array([v.flatten() for v in vertices], dtype=np.float32)


class Mesh:
    """Triangle list без индексного буфера; порядок вершин не меняется."""
    layout = VERTEX_LAYOUT

    def __init__(self, vertices: Sequence[Vertex], name="Mesh"):
        self.name = name
        self.vertices = list(vertices)
        self.data = pack_vertices(self.vertices)
        self.vb = None

        # bounding sphere (в координатах модели)
        positions = self.data[:, 0:3]
        if len(positions):
            self._bounding_center = positions.mean(axis=0).astype(np.float32)
            self._bounding_radius = float(
                np.linalg.norm(positions - self._bounding_center, axis=1).max())
        else:
            self._bounding_center = np.zeros(3, dtype=np.float32)
            self._bounding_radius = 0.0

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return self.vertex_count // 3

    def attribute(self, name: str) -> np.ndarray:
        """Срез одного атрибута (например "tangent_u") из interleaved‑массива."""
        offset = 0
        for attr, size in self.layout:
            if attr == name:
                return self.data[:, offset:offset + size]
            offset += size
        raise KeyError(f"Unknown vertex attribute: {name}")

    def upload(self, backend):
        """Выгрузить вершины в бекенд (однократно)."""
        if self.vb is None:
            self.vb = backend.create_buffer(self.data.tobytes(), usage="vertex")
            logger.debug(f"[Mesh] Uploaded '{self.name}' ({self.vertex_count} vertices)")
        return self.vb

    def draw(self, backend):
        """Отрисовать меш, создавая буфер «лениво»."""
        self.upload(backend)
        backend.set_vertex_buffers(self.vb, None)
        backend.draw(self.vertex_count)

    def release(self, backend):
        if self.vb is not None:
            backend.release_resource(self.vb)
            self.vb = None

    @property
    def bounding_sphere(self):
        """(центр, радиус) в координатах модели."""
        return self._bounding_center.copy(), self._bounding_radius

    def __repr__(self):
        return f"Mesh({self.name!r}, vertices={self.vertex_count})"

# wavemesh/geometry/assembler.py
"""
Сборка итогового списка вершин (triangle list) из разобранной модели.

Для каждой грани по порядку:
    индексы -> ModelVertex -> триангуляция -> касательные -> Vertex.

Политика ошибок:
    "abort" – первая ошибка пробрасывается, частичный меш не возвращается;
    "skip"  – сломанная грань пропускается с предупреждением в лог.
"""

from typing import List, Optional

from wavemesh.errors import ModelLoadError
from wavemesh.geometry.resolver import resolve_corner
from wavemesh.geometry.tangents import DEFAULT_EPSILON, compute_triangle
from wavemesh.geometry.triangulate import triangulate
from wavemesh.geometry.vertex import Vertex
from wavemesh.multithread.task_pool import TaskPool
from wavemesh.obj.model import Face, ObjModel
from wavemesh.utils.config import ERROR_POLICIES
from wavemesh.utils.logger import logger


def build_face(model: ObjModel, face: Face, index: Optional[int] = None,
               epsilon: float = DEFAULT_EPSILON) -> List[Vertex]:
    """Вершины одной грани (3 для треугольника, 6 для квада)."""
    try:
        resolved = [resolve_corner(model, corner) for corner in face.corners]
        ordered = triangulate(resolved)
        vertices: List[Vertex] = []
        for i in range(0, len(ordered), 3):
            vertices.extend(compute_triangle(*ordered[i:i + 3], epsilon=epsilon))
        return vertices
    except ModelLoadError as exc:
        raise exc.with_context(line=face.line, face=index)


def build(model: ObjModel,
          on_error: str = "abort",
          pool: Optional[TaskPool] = None,
          epsilon: float = DEFAULT_EPSILON) -> List[Vertex]:
    if on_error not in ERROR_POLICIES:
        raise ValueError(f"Unknown on_error policy {on_error!r}, "
                         f"expected one of {ERROR_POLICIES}")
    skip = on_error == "skip"

    def process(item):
        index, face = item
        try:
            return build_face(model, face, index, epsilon)
        except ModelLoadError as exc:
            if not skip:
                raise
            return exc

    items = list(enumerate(model.f))
    if pool is None:
        results = [process(item) for item in items]
    else:
        results = pool.map(process, items)

    vertices: List[Vertex] = []
    skipped = 0
    for result in results:
        if isinstance(result, ModelLoadError):
            skipped += 1
            logger.warning(f"[Assembler] Skipping face: {result}")
            continue
        vertices.extend(result)

    logger.debug(f"[Assembler] {len(vertices)} vertices from {len(items) - skipped} "
                 f"faces ({skipped} skipped)")
    return vertices

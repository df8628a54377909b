# wavemesh/geometry/triangulate.py
from typing import List, Sequence, TypeVar

from wavemesh.errors import InvalidFaceArity

T = TypeVar("T")

# порядок углов для треугольника и для квада (диагональ 0–2)
_TRIANGLE_ORDER = (0, 1, 2)
_QUAD_ORDER = (0, 1, 2, 2, 3, 0)


def triangulate(corners: Sequence[T]) -> List[T]:
    """Развернуть грань (3 или 4 угла) в список треугольников; обход сохраняется."""
    if len(corners) == 3:
        order = _TRIANGLE_ORDER
    elif len(corners) == 4:
        order = _QUAD_ORDER
    else:
        raise InvalidFaceArity(
            f"face has {len(corners)} corners, only triangles and quads are supported"
        )
    return [corners[i] for i in order]

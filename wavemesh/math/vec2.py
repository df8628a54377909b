# wavemesh/math/vec2.py
"""
2‑мерный вектор (float32) – текстурные координаты и их разности.
"""

import numpy as np
from typing import Tuple


class Vec2:
    """Короткий вектор‑2 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, u: float = 0.0, v: float = 0.0):
        self._v = np.array([u, v], dtype=np.float32)

    @property
    def u(self) -> float:
        return float(self._v[0])

    @property
    def v(self) -> float:
        return float(self._v[1])

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(*(self._v - other._v))

    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def extend(self, z: float) -> np.ndarray:
        """(u, v, z) как ndarray float32 – столбец матрицы UV‑базиса."""
        return np.append(self._v, np.float32(z))

    def to_tuple(self) -> Tuple[float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Vec2({self.u:.3f}, {self.v:.3f})"

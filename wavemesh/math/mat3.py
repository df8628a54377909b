# wavemesh/math/mat3.py
import numpy as np


class Mat3:
    """Матрица 3×3 (float32), хранится построчно: m[row, col]."""
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray):
        self.m = np.array(array, dtype=np.float32).reshape((3, 3))

    @staticmethod
    def from_cols(c0, c1, c2) -> "Mat3":
        return Mat3(np.column_stack([c0, c1, c2]))

    def determinant(self) -> float:
        return float(np.linalg.det(self.m.astype(np.float64)))

    def invert(self):
        """Обратная матрица или None, если det == 0 (или результат содержит inf/nan)."""
        if self.determinant() == 0.0:
            return None
        try:
            inv = np.linalg.inv(self.m)
        except np.linalg.LinAlgError:
            return None
        if not np.all(np.isfinite(inv)):
            return None
        return Mat3(inv)

    def transform(self, vec) -> np.ndarray:
        """M · v для 3‑компонентного вектора."""
        return self.m @ np.asarray(vec, dtype=np.float32)

    def __matmul__(self, other: "Mat3") -> "Mat3":
        return Mat3(np.dot(self.m, other.m))

    def __repr__(self):
        return f"Mat3({self.m})"

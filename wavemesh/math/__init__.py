"""
Математический суб‑пакет: Vec2, Vec3, Mat3.
"""

from wavemesh.math.vec2 import Vec2
from wavemesh.math.vec3 import Vec3
from wavemesh.math.mat3 import Mat3

__all__ = ["Vec2", "Vec3", "Mat3"]

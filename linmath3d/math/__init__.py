"""
Математический суб‑пакет: Vec, Mat3, Mat, Quat.
"""

from linmath3d.math.scalar import clamp
from linmath3d.math.vec import Vec, calculate_surface_normal, X, Y, Z, W
from linmath3d.math.mat3 import Mat3, SingularMatrixError
from linmath3d.math.mat4 import Mat
from linmath3d.math.quat import Quat

__all__ = [
    "Vec", "Mat3", "Mat", "Quat",
    "SingularMatrixError",
    "calculate_surface_normal",
    "clamp",
    "X", "Y", "Z", "W",
]

"""
linmath3d – компактное 3‑D ядро линейной алгебры для Python:
однородные векторы, матрицы 4×4 и 3×3, кватернионы.
"""

from linmath3d.utils import logger, Config
from linmath3d.math import (
    Vec, Mat3, Mat, Quat, SingularMatrixError, calculate_surface_normal, clamp
)

__version__ = "1.0.0"

__all__ = [
    "Vec",
    "Mat3",
    "Mat",
    "Quat",
    "SingularMatrixError",
    "calculate_surface_normal",
    "clamp",
    "Config",
    "logger",
]

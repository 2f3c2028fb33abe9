# linmath3d/math/mat3.py
"""
Матрица 3×3 – левый верхний блок Mat (поворот/масштаб без переноса).
Нужна прежде всего для матрицы нормалей (обратная + транспонированная).
"""

import numpy as np

from linmath3d.utils.config import default_epsilon
from linmath3d.utils.logger import logger


class SingularMatrixError(ValueError):
    """Определитель равен 0 – обратной матрицы не существует."""


class Mat3:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(3, dtype=np.float64)
        else:
            self.m = np.array(array, dtype=np.float64).reshape((3, 3))
        self.m.flags.writeable = False

    @staticmethod
    def identity() -> "Mat3":
        return Mat3()

    def det(self) -> float:
        """Определитель разложением по первой строке."""
        (a, b, c), (d, e, f), (g, h, i) = self.m.tolist()
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def transpose(self) -> "Mat3":
        return Mat3(self.m.T)

    def inverse(self) -> "Mat3":
        """
        Обратная матрица через присоединённую.
        Проверка на ноль точная (без допуска): почти вырожденные матрицы
        обращаются, но результат численно неустойчив.
        """
        det = self.det()
        if det == 0.0:
            logger.debug(f"[Mat3] Singular matrix, inverse skipped:\n{self.m}")
            raise SingularMatrixError(
                "Cannot invert a matrix with a determinant equal to 0.")
        return self.adjoint(1.0 / det)

    def adjoint(self, scale: float = 1.0) -> "Mat3":
        """Присоединённая матрица (транспонированная матрица алгебраических дополнений) × scale."""
        (a, b, c), (d, e, f), (g, h, i) = self.m.tolist()
        adj = [
            [e * i - f * h, c * h - b * i, b * f - c * e],
            [f * g - d * i, a * i - c * g, c * d - a * f],
            [d * h - e * g, b * g - a * h, a * e - b * d],
        ]
        return Mat3(np.array(adj, dtype=np.float64) * scale)

    def __matmul__(self, other: "Mat3") -> "Mat3":
        return Mat3(np.dot(self.m, other.m))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None

    def almost_equal(self, other: "Mat3", eps: float = None) -> bool:
        if eps is None:
            eps = default_epsilon()
        return bool(np.allclose(self.m, other.m, rtol=0.0, atol=eps))

    def to_np(self) -> np.ndarray:
        return self.m.copy()

    def __repr__(self):
        return f"Mat3({np.array2string(self.m, precision=3)})"

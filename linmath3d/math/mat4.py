# linmath3d/math/mat4.py
"""
Матрица 4×4 однородного преобразования (float64).

Внутри – ndarray с индексацией [строка, столбец], матрица действует на
вектор‑столбец. Плоский порядок элементов – по столбцам:
X1, Y1, Z1, T1 – первый столбец, …, X4, Y4, Z4, T4 – столбец переноса.
"""

import numpy as np
from typing import List, Sequence, Tuple

from linmath3d.math.mat3 import Mat3
from linmath3d.math.vec import Vec
from linmath3d.utils.config import default_epsilon

# индексы элементов в порядке «по столбцам»
(X1, Y1, Z1, T1,
 X2, Y2, Z2, T2,
 X3, Y3, Z3, T3,
 X4, Y4, Z4, T4) = range(16)


class Mat:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float64)
        else:
            self.m = np.array(array, dtype=np.float64).reshape((4, 4))
        self.m.flags.writeable = False

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @staticmethod
    def identity() -> "Mat":
        return Mat(np.identity(4, dtype=np.float64))

    @staticmethod
    def create_matrix_from_vec(a: Vec, b: Vec, c: Vec) -> "Mat":
        """Базисные векторы a, b, c – первые три столбца; четвёртые строка и столбец нулевые."""
        m = np.zeros((4, 4), dtype=np.float64)
        m[:3, 0] = a.as_np()[:3]
        m[:3, 1] = b.as_np()[:3]
        m[:3, 2] = c.as_np()[:3]
        return Mat(m)

    @staticmethod
    def from_column_major(values: Sequence[float]) -> "Mat":
        return Mat(np.array(values, dtype=np.float64).reshape((4, 4)).T)

    # -----------------------------------------------------------------
    # операции
    # -----------------------------------------------------------------
    def multiply(self, other: "Mat") -> "Mat":
        """self * other (не коммутативно)."""
        return Mat(np.dot(self.m, other.m))

    __matmul__ = multiply

    def translate(self, v: Vec) -> "Mat":
        """
        Перенос на `v` в базисе самой матрицы:
        столбец переноса = линейная часть · v.xyz + старый перенос · v.w,
        элемент T4 становится 1.
        """
        m = self.m.copy()
        xyzw = v.as_np()
        m[:3, 3] = np.dot(self.m[:3, :3], xyzw[:3]) + self.m[:3, 3] * xyzw[3]
        m[3, 3] = 1.0
        return Mat(m)

    def mat3(self) -> Mat3:
        """Левый верхний блок 3×3."""
        return Mat3(self.m[:3, :3])

    def calculate_normal_matrix(self) -> Mat3:
        """
        Матрица нормалей – (M3)^-1 транспонированная.
        Бросает SingularMatrixError, если линейная часть вырождена.
        """
        return self.mat3().inverse().transpose()

    # -----------------------------------------------------------------
    # доступ к элементам
    # -----------------------------------------------------------------
    def __getitem__(self, index) -> float:
        """`m[i]` – плоский индекс по столбцам (X1 … T4), `m[row, col]` – двумерный."""
        if isinstance(index, tuple):
            return float(self.m[index])
        col, row = divmod(index, 4)
        return float(self.m[row, col])

    def array(self) -> List[List[float]]:
        """Двумерный список [строка][столбец]."""
        return self.m.tolist()

    def column_major(self) -> Tuple[float, ...]:
        return tuple(self.m.T.ravel().tolist())

    def to_np(self) -> np.ndarray:
        return self.m.copy()

    # -----------------------------------------------------------------
    # сравнение и представление
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None

    def almost_equal(self, other: "Mat", eps: float = None) -> bool:
        if eps is None:
            eps = default_epsilon()
        return bool(np.allclose(self.m, other.m, rtol=0.0, atol=eps))

    def __str__(self):
        return "".join("| %-10f %-10f %-10f %-10f |\n" % tuple(row)
                       for row in self.m.tolist())

    def __repr__(self):
        return f"Mat({np.array2string(self.m, precision=3)})"

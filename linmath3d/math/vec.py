# linmath3d/math/vec.py
"""
Однородный 3‑D вектор (x, y, z, w) на базе NumPy (float64).

`w` – однородная метка: 0 для направлений, 1 для точек. Тип её не
проверяет, все операции ниже работают только с x/y/z, а `w` берут
из левого операнда.
"""

import numpy as np
from typing import Tuple

from linmath3d.utils.config import default_epsilon

# индексы компонентов
X, Y, Z, W = 0, 1, 2, 3


class Vec:
    """Неизменяемый вектор‑4 (float64)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float64)
        self._v.flags.writeable = False

    @classmethod
    def _from_xyz(cls, xyz: np.ndarray, w: float) -> "Vec":
        return cls(xyz[0], xyz[1], xyz[2], w)

    # -----------------------------------------------------------------
    # свойства (только чтение)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[X])

    @property
    def y(self) -> float:
        return float(self._v[Y])

    @property
    def z(self) -> float:
        return float(self._v[Z])

    @property
    def w(self) -> float:
        return float(self._v[W])

    def __getitem__(self, index: int) -> float:
        return float(self._v[index])

    def __len__(self) -> int:
        return 4

    # -----------------------------------------------------------------
    # операции (возвращают новый объект, `w` переносится без изменений)
    # -----------------------------------------------------------------
    def scale(self, scalar: float) -> "Vec":
        return Vec._from_xyz(self._v[:3] * scalar, self.w)

    def translate(self, dx: float, dy: float, dz: float) -> "Vec":
        return Vec(self.x + dx, self.y + dy, self.z + dz, self.w)

    def add(self, other: "Vec") -> "Vec":
        return Vec._from_xyz(self._v[:3] + other._v[:3], self.w)

    def subtract(self, other: "Vec") -> "Vec":
        return Vec._from_xyz(self._v[:3] - other._v[:3], self.w)

    def cross_product(self, other: "Vec") -> "Vec":
        """Векторное произведение (правило правой руки), `w` – от `self`."""
        return Vec._from_xyz(np.cross(self._v[:3], other._v[:3]), self.w)

    def dot_product(self, other: "Vec") -> float:
        return float(np.dot(self._v[:3], other._v[:3]))

    def length(self) -> float:
        """Евклидова длина по x/y/z."""
        return float(np.linalg.norm(self._v[:3]))

    def normalize(self) -> "Vec":
        """Единичный вектор того же направления; нулевой вектор возвращается как есть."""
        n = self.length()
        if n == 0.0:
            return self
        return Vec._from_xyz(self._v[:3] / n, self.w)

    def distance(self, other: "Vec") -> float:
        return float(np.linalg.norm(self._v[:3] - other._v[:3]))

    def lerp(self, other: "Vec", t: float) -> "Vec":
        """Линейная интерполяция a + (b - a) * t; `t` не ограничивается."""
        return self.add(other.subtract(self).scale(t))

    # операторы
    __add__ = add
    __sub__ = subtract
    __mul__ = scale
    __rmul__ = scale

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def almost_equal(self, other: "Vec", eps: float = None) -> bool:
        if eps is None:
            eps = default_epsilon()
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=eps))

    # -----------------------------------------------------------------
    # приведение и представление
    # -----------------------------------------------------------------
    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float64)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())

    def __str__(self) -> str:
        return "[ %-10f %-10f %-10f %-10f ]" % self.to_tuple()

    def __repr__(self) -> str:
        return f"Vec({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"


def calculate_surface_normal(v1: Vec, v2: Vec, v3: Vec) -> Vec:
    """
    Нормаль треугольника (v2 - v1) × (v3 - v1), без нормализации.
    Результат – направление, поэтому w = 0.
    """
    u = v2.subtract(v1)
    v = v3.subtract(v1)
    return Vec._from_xyz(np.cross(u._v[:3], v._v[:3]), 0.0)

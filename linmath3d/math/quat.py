# linmath3d/math/quat.py
# ---------------------------------------------------------------
# Кватернионы (w, x, y, z) для поворотов:
# - создание из угла/оси и из матрицы поворота,
# - умножение (Гамильтон), сопряжение, нормализация,
# - преобразование в 4×4 матрицу,
# - вращение вектора,
# - интерполяция (slerp / nlerp).
# Все методы возвращают новый кватернион, исходный не меняется.
# ---------------------------------------------------------------

from math import acos, cos, sin, sqrt

import numpy as np

from linmath3d.math.mat4 import Mat
from linmath3d.math.scalar import clamp
from linmath3d.math.vec import Vec
from linmath3d.utils.config import default_epsilon

# циклический порядок осей для ветки с отрицательным следом
_NEXT = (1, 2, 0)


class Quat:
    __slots__ = ("_w", "_x", "_y", "_z")

    def __init__(self, w=1.0, x=0.0, y=0.0, z=0.0):
        self._w = float(w)
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    # свойства (только чтение)
    @property
    def w(self) -> float:
        return self._w

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    # -----------------------------------------------------------
    #  Конструкторы
    # -----------------------------------------------------------
    @staticmethod
    def from_axis_angle(angle: float, axis) -> "Quat":
        """
        angle – в радианах, axis – Vec или 3‑элементный iterable.
        Ось заранее не нормализуется: нормализуется сам результат.
        """
        if isinstance(axis, Vec):
            ax, ay, az = axis.x, axis.y, axis.z
        else:
            ax, ay, az = axis
        s = sin(angle / 2.0)
        return Quat(cos(angle / 2.0), ax * s, ay * s, az * s).normalize()

    @staticmethod
    def from_mat(mat: Mat) -> "Quat":
        """
        Кватернион из блока поворота 3×3.
        Ветка выбирается по следу: при следе <= 0 опорой служит
        наибольший диагональный элемент, чтобы не делить на малое число.
        """
        m = mat.array()
        tr = m[0][0] + m[1][1] + m[2][2]

        if tr > 0.0:
            s = sqrt(tr + 1.0)
            w = s / 2.0
            s = 0.5 / s
            return Quat(w,
                        (m[2][1] - m[1][2]) * s,
                        (m[0][2] - m[2][0]) * s,
                        (m[1][0] - m[0][1]) * s)

        i = 0
        if m[1][1] > m[0][0]:
            i = 1
        if m[2][2] > m[i][i]:
            i = 2
        j = _NEXT[i]
        k = _NEXT[j]

        q = [0.0, 0.0, 0.0, 0.0]
        s = sqrt(max(m[i][i] - (m[j][j] + m[k][k]) + 1.0, 0.0))
        q[i] = s * 0.5
        if s != 0.0:
            s = 0.5 / s
        q[3] = (m[k][j] - m[j][k]) * s
        q[j] = (m[j][i] + m[i][j]) * s
        q[k] = (m[k][i] + m[i][k]) * s
        return Quat(q[3], q[0], q[1], q[2])

    # -----------------------------------------------------------
    #  Базовые операции
    # -----------------------------------------------------------
    def length(self) -> float:
        return sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> "Quat":
        """Единичный кватернион; нулевой возвращается без изменений."""
        n = self.length()
        if n == 0:
            return Quat(self.w, self.x, self.y, self.z)
        inv = 1.0 / n
        return Quat(self.w*inv, self.x*inv, self.y*inv, self.z*inv)

    def multiply(self, other: "Quat") -> "Quat":
        """Произведение Гамильтона self ⊗ other (не коммутативно)."""
        w = self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z
        x = self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y
        y = self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x
        z = self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w
        return Quat(w, x, y, z)

    def conjugate(self) -> "Quat":
        return Quat(self.w, -self.x, -self.y, -self.z)

    def dot_product(self, other: "Quat") -> float:
        return self.w*other.w + self.x*other.x + self.y*other.y + self.z*other.z

    def add(self, other: "Quat") -> "Quat":
        return Quat(self.w + other.w, self.x + other.x,
                    self.y + other.y, self.z + other.z)

    def subtract(self, other: "Quat") -> "Quat":
        return Quat(self.w - other.w, self.x - other.x,
                    self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> "Quat":
        """Умножение всех четырёх компонент на скаляр."""
        return Quat(self.w * scalar, self.x * scalar,
                    self.y * scalar, self.z * scalar)

    __mul__ = multiply
    __add__ = add
    __sub__ = subtract

    # -----------------------------------------------------------
    #  Преобразования
    # -----------------------------------------------------------
    def rot_mat(self) -> Mat:
        """Матрица поворота 4×4 (перенос нулевой, T4 = 1)."""
        w, x, y, z = self.w, self.x, self.y, self.z
        xx, yy, zz = x*x, y*y, z*z
        xy, xz, yz = x*y, x*z, y*z
        wx, wy, wz = w*x, w*y, w*z

        m = np.zeros((4, 4), dtype=np.float64)
        m[0, 0] = 1 - 2*(yy + zz)
        m[0, 1] = 2*(xy - wz)
        m[0, 2] = 2*(xz + wy)

        m[1, 0] = 2*(xy + wz)
        m[1, 1] = 1 - 2*(xx + zz)
        m[1, 2] = 2*(yz - wx)

        m[2, 0] = 2*(xz - wy)
        m[2, 1] = 2*(yz + wx)
        m[2, 2] = 1 - 2*(xx + yy)

        m[3, 3] = 1.0
        return Mat(m)

    def rotate_vector(self, v: Vec) -> Vec:
        """
        Поворот направления `v`: q * (0, v) * q*.
        `v` предварительно нормализуется, у результата w = 0.
        """
        v = v.normalize()
        res = self * Quat(0.0, v.x, v.y, v.z) * self.conjugate()
        return Vec(res.x, res.y, res.z, 0.0)

    def rotate(self, other: "Quat") -> "Quat":
        """
        Покомпонентное произведение векторных частей, нормализованное.
        Это НЕ композиция поворотов – для неё есть multiply().
        """
        return Quat(0.0, self.x * other.x, self.y * other.y,
                    self.z * other.z).normalize()

    # -----------------------------------------------------------
    #  Интерполяция
    # -----------------------------------------------------------
    def slerp(self, other: "Quat", t: float) -> "Quat":
        """
        Сферическая линейная интерполяция по кратчайшей дуге
        с постоянной угловой скоростью. Не коммутативна, дорогая.
        """
        a = self.normalize()
        b = other.normalize()

        dot = a.dot_product(b)
        if dot < 0.0:
            b = b.scale(-1.0)
            dot = -dot
        dp = clamp(dot, -1.0, 1.0)
        theta = acos(dp) * t
        rel = b.subtract(a.scale(dp)).normalize()
        return a.scale(cos(theta)).add(rel.scale(sin(theta))).normalize()

    def nlerp(self, other: "Quat", t: float) -> "Quat":
        """
        Нормализованная линейная интерполяция. Дешевле slerp, угловая
        скорость не постоянна (незаметно при частоте обновления > 10 Гц).
        """
        a = self.normalize()
        b = other.normalize()

        p = 1.0 - t
        if a.dot_product(b) < 0.0:
            ret = a.scale(p).add(b.scale(-t))
        else:
            ret = a.scale(p).add(b.scale(t))
        return ret.normalize()

    # -----------------------------------------------------------
    #  Сравнение и представление
    # -----------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return (self.w, self.x, self.y, self.z) == (other.w, other.x, other.y, other.z)

    __hash__ = None

    def almost_equal(self, other: "Quat", eps: float = None) -> bool:
        if eps is None:
            eps = default_epsilon()
        return all(abs(p - q) <= eps for p, q in zip(self.to_tuple(), other.to_tuple()))

    def to_tuple(self):
        return (self.w, self.x, self.y, self.z)

    def __repr__(self):
        return f"Quat({self.w:.3f}, {self.x:.3f}, {self.y:.3f}, {self.z:.3f})"

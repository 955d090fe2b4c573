# -*- coding: utf-8 -*-
"""
Трёхмерный вектор float32 – числовое ядро трассировщика.

Вся арифметика строится на четырёх комбинаторах:
    map, zip_map, zip_map_assign, reduce
Операторы (+, -, *, /, унарный минус) генерируются из таблицы
функций модуля `operator`, поэтому скаляр слева и скаляр справа
обрабатываются строго одинаково (с учётом порядка аргументов).
"""

import operator
from functools import reduce as _fold
from numbers import Real

import numpy as np

# Допуск approx_eq: 8 × машинный эпсилон float32 (≈ 9.54e‑7).
# Значение подобрано эмпирически, сравнивается L1‑сумма разностей.
APPROX_EPSILON = np.float32(8) * np.finfo(np.float32).eps


def _check_index(index) -> int:
    i = operator.index(index)
    if not 0 <= i < 3:
        raise IndexError(f"Vec3 index out of range: {index!r}")
    return i


def _is_scalar(value) -> bool:
    return isinstance(value, (Real, np.integer, np.floating)) and not isinstance(value, bool)


class Vec3:
    """Вектор‑3 на базе NumPy (float32) с семантикой значения."""

    __slots__ = ("_v",)

    # numpy‑скаляр слева (np.float32(2) - v) отдаёт управление нашим __r*__
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @classmethod
    def splat(cls, scalar: float) -> "Vec3":
        """Все три компоненты равны `scalar`."""
        return cls(scalar, scalar, scalar)

    @classmethod
    def from_array(cls, array) -> "Vec3":
        """Из любого 3‑элементного iterable / ndarray (копия, float32)."""
        data = np.array(array, dtype=np.float32)
        if data.shape != (3,):
            raise ValueError(f"Vec3 needs exactly 3 components, got shape {data.shape}")
        v = cls.__new__(cls)
        v._v = data
        return v

    def to_array(self) -> np.ndarray:
        """Копия 3‑элементного ndarray (float32)."""
        return self._v.copy()

    def to_tuple(self):
        return tuple(self._v.tolist())

    def copy(self) -> "Vec3":
        return Vec3.from_array(self._v)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    # -----------------------------------------------------------------
    # доступ к компонентам
    # -----------------------------------------------------------------
    def __getitem__(self, index) -> float:
        return float(self._v[_check_index(index)])

    def __setitem__(self, index, value: float) -> None:
        self._v[_check_index(index)] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self):
        return iter(self._v.tolist())

    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = value

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = value

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = value

    # -----------------------------------------------------------------
    # поэлементные комбинаторы
    # -----------------------------------------------------------------
    def map(self, f) -> "Vec3":
        """f(c) для каждой компоненты, по порядку; исходный вектор не меняется."""
        with np.errstate(all="ignore"):
            return Vec3(*(f(c) for c in self._v))

    def zip_map(self, other: "Vec3", f) -> "Vec3":
        """f(self[i], other[i]) для i = 0, 1, 2."""
        with np.errstate(all="ignore"):
            return Vec3(*(f(a, b) for a, b in zip(self._v, other._v)))

    def zip_map_assign(self, other: "Vec3", f) -> "Vec3":
        """То же, что self = self.zip_map(other, f), но на месте."""
        self._v[:] = self.zip_map(other, f)._v
        return self

    def splat_map(self, scalar: float, f) -> "Vec3":
        """f(компонента, scalar)."""
        return self.zip_map(Vec3.splat(scalar), f)

    def splat_map_left(self, scalar: float, f) -> "Vec3":
        """f(scalar, компонента) – важно для некоммутативных f."""
        return Vec3.splat(scalar).zip_map(self, f)

    def splat_map_assign(self, scalar: float, f) -> "Vec3":
        return self.zip_map_assign(Vec3.splat(scalar), f)

    def reduce(self, f):
        """Левая свёртка: f(f(c0, c1), c2)."""
        with np.errstate(all="ignore"):
            return _fold(f, self._v)

    def sum(self) -> float:
        return float(self.reduce(operator.add))

    # -----------------------------------------------------------------
    # геометрия
    # -----------------------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        """Скалярное произведение."""
        return (self * other).sum()

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        """Евклидова длина (sqrt во float32)."""
        with np.errstate(all="ignore"):
            return float(np.sqrt(np.float32(self.length_squared())))

    def normalized(self) -> "Vec3":
        """
        self * (1 / length). Нулевой вектор даёт NaN‑компоненты –
        это ожидаемое поведение, проверки нет.
        """
        with np.errstate(all="ignore"):
            inv = np.float32(1) / np.float32(self.length())
        return self * inv

    def cross(self, other: "Vec3") -> "Vec3":
        """Правое векторное произведение: X × Y = Z."""
        a, b = self._v, other._v
        with np.errstate(all="ignore"):
            return Vec3(
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            )

    def approx_eq(self, other: "Vec3") -> bool:
        """L1‑расстояние строго меньше APPROX_EPSILON."""
        diff = (self - other).map(abs).reduce(operator.add)
        return bool(diff < APPROX_EPSILON)

    # -----------------------------------------------------------------
    # сравнение / представление
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __neg__(self) -> "Vec3":
        return self.map(operator.neg)


# ---------------------------------------------------------------------
# Генерация операторов: одна таблица → __op__, __rop__, __iop__
# ---------------------------------------------------------------------
def _binary(f):
    def method(self, other):
        if isinstance(other, Vec3):
            return self.zip_map(other, f)
        if _is_scalar(other):
            return self.splat_map(other, f)
        return NotImplemented
    return method


def _reflected(f):
    def method(self, other):
        if _is_scalar(other):
            return self.splat_map_left(other, f)
        return NotImplemented
    return method


def _inplace(f):
    def method(self, other):
        if isinstance(other, Vec3):
            return self.zip_map_assign(other, f)
        if _is_scalar(other):
            return self.splat_map_assign(other, f)
        return NotImplemented
    return method


for _name, _f in (("add", operator.add), ("sub", operator.sub),
                  ("mul", operator.mul), ("truediv", operator.truediv)):
    setattr(Vec3, f"__{_name}__", _binary(_f))
    setattr(Vec3, f"__r{_name}__", _reflected(_f))
    setattr(Vec3, f"__i{_name}__", _inplace(_f))

del _name, _f


def _frozen(x: float, y: float, z: float) -> Vec3:
    v = Vec3(x, y, z)
    v._v.flags.writeable = False
    return v


# Базисные векторы (только для чтения)
BASIS_X = _frozen(1.0, 0.0, 0.0)
BASIS_Y = _frozen(0.0, 1.0, 0.0)
BASIS_Z = _frozen(0.0, 0.0, 1.0)

# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Homogeneous-coordinate points and vectors.

Both carry x, y, z; the w component is fixed by the concrete type
(1.0 for a Point, 0.0 for a Vector) and is never stored.

    Point  + Vector -> Point        Vector + Vector -> Vector
    Vector + Point  -> Point        Point  - Point  -> Vector
    Point  - Vector -> Point        Vector - Vector -> Vector

Any other combination raises TypeError.
"""

import math
import numbers
from abc import ABC, abstractmethod

import numpy as np

from .utils import EPS, abs_diff_eq


class Tuple(ABC):
    __slots__ = ("_x", "_y", "_z")

    def __init__(self, x: float, y: float, z: float):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    @classmethod
    def new(cls, x: float, y: float, z: float) -> "Tuple":
        return cls(x, y, z)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    @abstractmethod
    def w(self) -> float:
        """Homogeneous component, constant per concrete type."""

    def as_array(self) -> np.ndarray:
        """Return (x, y, z, w) as a float64 array."""
        return np.array([self._x, self._y, self._z, self.w], dtype=float)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._x}, {self._y}, {self._z})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return abs_diff_eq(
            (self._x, self._y, self._z), (other.x, other.y, other.z), EPS
        )

    __hash__ = None

    def __neg__(self):
        return type(self)(-self._x, -self._y, -self._z)

    def __mul__(self, s):
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return type(self)(self._x * s, self._y * s, self._z * s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        if not isinstance(s, numbers.Real):
            return NotImplemented
        return type(self)(self._x / s, self._y / s, self._z / s)


class Point(Tuple):
    __slots__ = ()

    @property
    def w(self) -> float:
        return 1.0

    def __add__(self, other):
        if isinstance(other, Vector):
            return Point(self._x + other.x, self._y + other.y, self._z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(self._x - other.x, self._y - other.y, self._z - other.z)
        if isinstance(other, Vector):
            return Point(self._x - other.x, self._y - other.y, self._z - other.z)
        return NotImplemented


class Vector(Tuple):
    __slots__ = ()

    @property
    def w(self) -> float:
        return 0.0

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self._x + other.x, self._y + other.y, self._z + other.z)
        if isinstance(other, Point):
            return Point(self._x + other.x, self._y + other.y, self._z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self._x - other.x, self._y - other.y, self._z - other.z)
        return NotImplemented

    def magnitude(self) -> float:
        return math.sqrt(self._x**2 + self._y**2 + self._z**2)

    def normalize(self) -> "Vector":
        """
        Return the unit vector in the direction of self.

        The zero vector is not guarded against: the float division
        raises ZeroDivisionError.
        """
        return self / self.magnitude()

    def dot(self, other: "Vector") -> float:
        """
        Scalar product, including the w term so the formula holds for
        any homogeneous tuple (it is 0 for two vectors).
        """
        return (
            self._x * other.x
            + self._y * other.y
            + self._z * other.z
            + self.w * other.w
        )

    def cross(self, other: "Vector") -> "Vector":
        """
        Right-handed cross product in R^3, w is ignored.
        """
        return Vector(
            self._y * other.z - self._z * other.y,
            self._z * other.x - self._x * other.z,
            self._x * other.y - self._y * other.x,
        )

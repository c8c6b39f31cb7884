# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers

import numpy as np

from .utils import EPS, abs_diff_eq


class Color:
    """
    RGB triple with component-wise arithmetic.

    Channels are not clamped; values outside [0, 1] survive until the
    canvas encodes them.
    """

    __slots__ = ("_r", "_g", "_b")

    def __init__(self, r: float, g: float, b: float):
        self._r = float(r)
        self._g = float(g)
        self._b = float(b)

    @classmethod
    def black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> "Color":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def red(cls) -> "Color":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> "Color":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> "Color":
        return cls(0.0, 0.0, 1.0)

    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    def as_array(self) -> np.ndarray:
        return np.array([self._r, self._g, self._b], dtype=float)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._r}, {self._g}, {self._b})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return abs_diff_eq(
            (self._r, self._g, self._b), (other.r, other.g, other.b), EPS
        )

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self._r + other.r, self._g + other.g, self._b + other.b)

    def __sub__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self._r - other.r, self._g - other.g, self._b - other.b)

    def __mul__(self, other):
        # Color * Color is the Hadamard product (tinting)
        if isinstance(other, Color):
            return Color(self._r * other.r, self._g * other.g, self._b * other.b)
        if isinstance(other, numbers.Real):
            return Color(self._r * other, self._g * other, self._b * other)
        return NotImplemented

    __rmul__ = __mul__

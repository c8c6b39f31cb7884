# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense matrices for transforming points and vectors.

Storage is a flat row-major float64 array; cell (row, col) lives at
``row * width + col``. Determinants use recursive cofactor expansion
along row 0, which is O(n!) and only meant for the small (n <= 4)
matrices used by transforms.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .tuples import Tuple
from .utils import MATRIX_EPS, abs_diff_eq

logger = logging.getLogger(__name__)


class Matrix:
    __slots__ = ("_width", "_height", "_data")

    def __init__(self, width: int, height: int, fill: float = 0.0):
        self._width = width
        self._height = height
        self._data = np.full(width * height, fill, dtype=float)

    @classmethod
    def new2(cls) -> "Matrix":
        return cls(2, 2)

    @classmethod
    def new3(cls) -> "Matrix":
        return cls(3, 3)

    @classmethod
    def new4(cls) -> "Matrix":
        return cls(4, 4)

    @classmethod
    def identity(cls, size: int = 4) -> "Matrix":
        m = cls(size, size)
        m._data = np.eye(size, dtype=float).ravel()
        return m

    def init(self, values: Sequence[float]) -> "Matrix":
        """
        Replace the backing store with `values`, read row-major.

        The caller must supply exactly width * height values; the
        length is not checked.
        """
        self._data = np.array(values, dtype=float).ravel()
        return self

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(
                f"cell ({row}, {col}) outside {self._height}x{self._width} matrix"
            )

    def get(self, row: int, col: int) -> float:
        self._check_cell(row, col)
        return float(self._data[row * self._width + col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check_cell(row, col)
        self._data[row * self._width + col] = value

    def __getitem__(self, idx):
        row, col = idx
        return self.get(row, col)

    def __setitem__(self, idx, value):
        row, col = idx
        self.set(row, col, value)

    def _grid(self) -> np.ndarray:
        return self._data.reshape(self._height, self._width)

    def to_numpy(self) -> np.ndarray:
        """Return a (height, width) copy of the cells."""
        return self._grid().copy()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._grid().tolist()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if (self._width, self._height) != (other.width, other.height):
            return False
        return abs_diff_eq(self._data, other._data, MATRIX_EPS)

    __hash__ = None

    def _require_square(self, op: str) -> int:
        if self._width != self._height:
            raise ValueError(
                f"{op} is undefined for a non-square "
                f"{self._height}x{self._width} matrix."
            )
        return self._width

    def transpose(self) -> "Matrix":
        result = Matrix(self._height, self._width)
        result._data = self._grid().T.ravel()
        return result

    def determinant(self) -> float:
        n = self._require_square("The determinant")
        if n == 0:
            # empty product
            return 1.0
        if n == 1:
            return float(self._data[0])
        if n == 2:
            a, b, c, d = self._data
            return float(a * d - b * c)

        det = 0.0
        for col in range(n):
            det += self.get(0, col) * self.cofactor(0, col)
        return det

    def sub_matrix(self, row: int, col: int) -> "Matrix":
        """Copy of self with `row` and `col` removed."""
        self._check_cell(row, col)
        A = self._grid()
        keep_rows = np.arange(self._height) != row
        keep_cols = np.arange(self._width) != col
        result = Matrix(self._width - 1, self._height - 1)
        result._data = A[keep_rows][:, keep_cols].ravel()
        return result

    def minor(self, row: int, col: int) -> float:
        return self.sub_matrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        m = self.minor(row, col)
        return -m if (row + col) % 2 else m

    def is_invertible(self) -> bool:
        """
        Exact test: any nonzero determinant, however small, counts
        as invertible.
        """
        return self.determinant() != 0.0

    def inverse(self) -> Optional["Matrix"]:
        """
        Adjugate over determinant, or None when the determinant is
        exactly zero.
        """
        n = self._require_square("The inverse")
        det = self.determinant()
        if det == 0.0:
            logger.debug("inverse(): determinant is zero, matrix is singular")
            return None

        result = Matrix(n, n)
        for row in range(n):
            for col in range(n):
                # writing to (col, row) transposes the cofactor matrix
                result.set(col, row, self.cofactor(row, col) / det)
        return result

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            if self._width != other.height:
                raise ValueError(
                    f"cannot multiply {self._height}x{self._width} "
                    f"by {other.height}x{other.width}"
                )
            result = Matrix(other.width, self._height)
            result._data = (self._grid() @ other._grid()).ravel()
            return result
        if isinstance(other, Tuple):
            if self._width != 4 or self._height < 3:
                raise ValueError(
                    f"a {self._height}x{self._width} matrix cannot transform "
                    "a homogeneous tuple"
                )
            x, y, z = self._grid()[:3] @ other.as_array()
            return type(other)(x, y, z)
        return NotImplemented

    __mul__ = __matmul__

# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Raster canvas and its plain-text PPM (P3) encoding.
"""

import logging
from typing import List, Optional

import numpy as np

from .color import Color

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
PPM_MAX_VALUE = 255
PPM_LINE_WIDTH = 70


class Canvas:
    """
    width x height grid of Colors addressed by (x, y).

    Pixels are stored column-major: column x occupies the slice
    ``[x * height, (x + 1) * height)``.
    """

    def __init__(self, width: int, height: int, color: Optional[Color] = None):
        if width <= 0 or height <= 0:
            raise ValueError(
                f"canvas dimensions must be nonzero, got {width}x{height}"
            )
        if color is None:
            color = Color.black()
        self._width = width
        self._height = height
        self._pixels: List[Color] = [color] * (width * height)

    @classmethod
    def with_bgcolor(cls, width: int, height: int, color: Color) -> "Canvas":
        return cls(width, height, color)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self._width}x{self._height} canvas"
            )
        return x * self._height + y

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self._pixels[self._index(x, y)] = color

    def pixel_at(self, x: int, y: int) -> Color:
        return self._pixels[self._index(x, y)]

    def to_bytes_array(self) -> np.ndarray:
        """
        Return a (height, width, 3) uint8 array of the clamped, scaled
        channels.

        Rounding is half away from zero (0.5 * 255 -> 128), not numpy's
        round-half-to-even.
        """
        rgb = np.array([c.as_array() for c in self._pixels], dtype=float)
        # column-major store -> (width, height, 3) -> (height, width, 3)
        rgb = rgb.reshape(self._width, self._height, 3).transpose(1, 0, 2)
        # NaN channels encode as 0
        rgb = np.nan_to_num(rgb, nan=0.0)
        scaled = np.clip(rgb, 0.0, 1.0) * PPM_MAX_VALUE
        return np.floor(scaled + 0.5).astype(np.uint8)

    def to_ppm(self) -> str:
        """
        Encode the canvas as plain PPM text.

        Each raster row starts a new line and long rows are wrapped so no
        line exceeds 70 characters. The result always ends with a newline.
        """
        out = [f"{PPM_MAGIC}\n{self._width} {self._height}\n{PPM_MAX_VALUE}\n"]
        for row in self.to_bytes_array():
            line = ""
            for value in row.ravel():
                token = f"{value} "
                if len(line) + len(token) > PPM_LINE_WIDTH:
                    out.append(line.rstrip() + "\n")
                    line = ""
                line += token
            out.append(line.rstrip() + "\n")

        ppm = "".join(out)
        logger.debug(
            f"to_ppm(): encoded {self._width}x{self._height} canvas, "
            f"{len(ppm)} characters"
        )
        return ppm

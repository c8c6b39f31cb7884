# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
raytracer
=========

The numeric foundation of a small ray tracer: homogeneous points and
vectors, square matrices with cofactor inversion, and an RGB canvas
that encodes to plain-text PPM.

Public API
~~~~~~~~~~
- Tuples
    - `Tuple`, `Point`, `Vector`
- Colors and raster output
    - `Color`, `Canvas`
- Transforms
    - `Matrix`
- Tolerances
    - `EPS`, `MATRIX_EPS`

Example
-------
>>> from raytracer import Canvas, Color, Matrix, Point
>>> Matrix.identity() * Point(1, 2, 3) == Point(1, 2, 3)
True
>>> c = Canvas(5, 3)
>>> c.write_pixel(0, 0, Color(1.5, 0, 0))
>>> c.to_ppm().splitlines()[3][:7]
'255 0 0'
"""

from importlib.metadata import version as _pkg_version

from .canvas import Canvas
from .color import Color
from .matrix import Matrix
from .tuples import Point, Tuple, Vector
from .utils import EPS, MATRIX_EPS, abs_diff_eq

__all__ = [
    "Tuple",
    "Point",
    "Vector",
    "Color",
    "Canvas",
    "Matrix",
    "EPS",
    "MATRIX_EPS",
    "abs_diff_eq",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show raytracer”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

# Tuples and colors compare at machine precision.
EPS: float = float(np.finfo(np.float64).eps)

# Matrices compare coarser: inverse/determinant round-off compounds
# across the recursive cofactor steps.
MATRIX_EPS: float = 1e-3


def abs_diff_eq(a, b, eps: float = EPS) -> bool:
    """Return True when every |a_i - b_i| <= eps."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        return False
    return bool(np.all(np.abs(a - b) <= eps))

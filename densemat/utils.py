# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import operator

import numpy as np

from .exceptions import IndexOutOfRangeError

# Double precision machine epsilon, used as an absolute tolerance.
EPS: float = float(np.finfo(float).eps)

# Laplace expansion is O(n!), warn once it gets expensive.
LAPLACE_WARN_ORDER: int = 10


def check_index(index, size: int, axis: str) -> int:
    """Return `index` as an int, raising if it is outside [0, size)."""
    i = operator.index(index)
    if i < 0 or i >= size:
        raise IndexOutOfRangeError(axis, i, size)
    return i


def in_range(index, size: int) -> bool:
    """True if `index` is an integer inside [0, size)."""
    try:
        i = operator.index(index)
    except TypeError:
        return False
    return 0 <= i < size


def cofactor_sign(i: int, j: int) -> float:
    """Return +1 or –1 depending on the parity of i + j."""
    return 1.0 if (i + j) % 2 == 0 else -1.0

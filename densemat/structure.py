# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Structural transforms: transpose, diagonal, row/column extraction,
deletion and swapping.
"""

import numpy as np

from .matrix import Matrix
from .utils import check_index, in_range


def transpose(A: Matrix) -> Matrix:
    """Return the n-by-m matrix T with T[i, j] = A[j, i]."""
    return Matrix._wrap(A._data.T.copy())


def diagonal(A: Matrix) -> Matrix:
    """Return the 1-by-min(m, n) row vector of A[i, i]."""
    dim = min(A.m, A.n)
    return Matrix._wrap(np.diagonal(A._data).copy().reshape(1, dim))


def row(A: Matrix, r: int) -> Matrix:
    """
    Extract row r as a 1-by-n matrix.

    Raises
    ------
    IndexOutOfRangeError : if r is not in [0, A.m).
    """
    r = check_index(r, A.m, "row")
    return Matrix._wrap(A._data[r : r + 1, :].copy())


def col(A: Matrix, c: int) -> Matrix:
    """
    Extract column c as an m-by-1 matrix.

    Raises
    ------
    IndexOutOfRangeError : if c is not in [0, A.n).
    """
    c = check_index(c, A.n, "column")
    return Matrix._wrap(A._data[:, c : c + 1].copy())


def delete_row(A: Matrix, r: int) -> Matrix:
    """Return A without row r; the other rows keep their order."""
    r = check_index(r, A.m, "row")
    return Matrix._wrap(np.delete(A._data, r, axis=0))


def delete_col(A: Matrix, c: int) -> Matrix:
    """Return A without column c; the other columns keep their order."""
    c = check_index(c, A.n, "column")
    return Matrix._wrap(np.delete(A._data, c, axis=1))


def swap_row_inplace(A: Matrix, r1: int, r2: int) -> None:
    """
    Exchange rows r1 and r2 of A.

    Silently does nothing if either index is out of range or they are
    equal.
    """
    if not (in_range(r1, A.m) and in_range(r2, A.m)) or r1 == r2:
        return
    data = A._data
    data[[r1, r2]] = data[[r2, r1]]


def swap_col_inplace(A: Matrix, c1: int, c2: int) -> None:
    """
    Exchange columns c1 and c2 of A.

    Silently does nothing if either index is out of range or they are
    equal.
    """
    if not (in_range(c1, A.n) and in_range(c2, A.n)) or c1 == c2:
        return
    data = A._data
    data[:, [c1, c2]] = data[:, [c2, c1]]

# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Determinant engine.

Orders 1-3 use closed forms. Larger orders use Laplace expansion down
the first column, recursing through `cofactor` and `minor`. There is no
pivoting and no memoisation, so the cost is O(n!): fine for the small
matrices this library is meant for, hopeless beyond a dozen or so rows.
"""

import logging

from .exceptions import ShapeMismatchError
from .matrix import Matrix, create_empty, is_square
from .structure import delete_col, delete_row, transpose
from .utils import EPS, LAPLACE_WARN_ORDER, cofactor_sign, in_range

logger = logging.getLogger(__name__)


def _det_1(A: Matrix) -> float:
    return float(A._data[0, 0])


def _det_2(A: Matrix) -> float:
    (a, b), (c, d) = A._data.tolist()
    return a * d - b * c


def _det_3(A: Matrix) -> float:
    (a, b, c), (d, e, f), (g, h, i) = A._data.tolist()
    return a * e * i + b * f * g + c * d * h - c * e * g - b * d * i - a * f * h


def _det_laplace(A: Matrix) -> float:
    # Expand along column 0; zero entries contribute nothing.
    acc = 0.0
    for i, v in enumerate(A._data[:, 0].tolist()):
        if v == 0:
            continue
        acc += v * cofactor(A, i, 0)
    return acc


def _det_square(A: Matrix) -> float:
    order = A.n
    if order == 0:
        return 1.0
    if order == 1:
        return _det_1(A)
    if order == 2:
        return _det_2(A)
    if order == 3:
        return _det_3(A)
    return _det_laplace(A)


def determinant(A: Matrix) -> float:
    """
    Determinant of a square matrix.

    Non-square matrices give 0.0 rather than an error. The empty 0-by-0
    matrix gives 1.0 (empty product).
    """
    if not is_square(A):
        return 0.0
    if A.n >= LAPLACE_WARN_ORDER:
        logger.warning(
            "determinant(): Laplace expansion of order %d is O(n!)", A.n
        )
    elif A.n > 3:
        logger.debug("determinant(): Laplace expansion of order %d", A.n)
    return _det_square(A)


def minor(A: Matrix, i: int, j: int) -> float:
    """
    Determinant of A with row i and column j removed.

    Returns 0.0 when A is not square, has order <= 1, or either index is
    out of range.
    """
    if (
        not is_square(A)
        or A.n <= 1
        or not in_range(i, A.m)
        or not in_range(j, A.n)
    ):
        return 0.0
    sub = delete_col(delete_row(A, i), j)
    return _det_square(sub)


def cofactor(A: Matrix, i: int, j: int) -> float:
    """Signed minor: (-1)^(i+j) * minor(A, i, j)."""
    return cofactor_sign(i, j) * minor(A, i, j)


def is_singular(A: Matrix) -> bool:
    return abs(determinant(A)) <= EPS


def adjugate(A: Matrix) -> Matrix:
    """
    Adjugate (classical adjoint): transpose of the cofactor matrix.

    Raises
    ------
    ShapeMismatchError : if A is not square.
    """
    if not is_square(A):
        raise ShapeMismatchError("adjugate", A.shape)
    n = A.n
    C = create_empty(n, n)
    if n == 1:
        # minor() is zero for order 1, the adjugate is [[1]]
        C[0, 0] = 1.0
        return C
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor(A, i, j)
    return transpose(C)

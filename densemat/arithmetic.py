# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Elementwise and linear arithmetic.

Every operation comes in two forms: the allocating one returns a new
Matrix and leaves its inputs alone, the `_inplace` one overwrites its
first argument and returns None. Allocating forms are a copy followed by
the in-place form.
"""

import numpy as np

from .exceptions import ShapeMismatchError
from .matrix import Matrix, can_multiply, copy, create_zeros, same_order


def _require_same_order(operation: str, A: Matrix, B: Matrix):
    if not same_order(A, B):
        raise ShapeMismatchError(operation, A.shape, B.shape)


def scalar_multiply_inplace(A: Matrix, k: float) -> None:
    A._data *= float(k)


def scalar_multiply(A: Matrix, k: float) -> Matrix:
    B = copy(A)
    scalar_multiply_inplace(B, k)
    return B


def add_inplace(A: Matrix, B: Matrix) -> None:
    """
    A += B.

    Raises
    ------
    ShapeMismatchError : if A and B differ in shape. A is left untouched.
    """
    _require_same_order("add", A, B)
    A._data += B._data


def subtract_inplace(A: Matrix, B: Matrix) -> None:
    """
    A -= B.

    Raises
    ------
    ShapeMismatchError : if A and B differ in shape. A is left untouched.
    """
    _require_same_order("subtract", A, B)
    A._data -= B._data


def add(A: Matrix, B: Matrix) -> Matrix:
    _require_same_order("add", A, B)
    C = copy(A)
    add_inplace(C, B)
    return C


def subtract(A: Matrix, B: Matrix) -> Matrix:
    _require_same_order("subtract", A, B)
    C = copy(A)
    subtract_inplace(C, B)
    return C


def multiply(A: Matrix, B: Matrix) -> Matrix:
    """
    Matrix product C = A B.

    Parameters
    ----------
    A : (m, p) Matrix
    B : (p, n) Matrix

    Returns
    -------
    C : (m, n) Matrix
        C[i, j] = sum_k A[i, k] * B[k, j], summed from zero in ascending k.

    Raises
    ------
    ShapeMismatchError : if A.n != B.m.
    """
    if not can_multiply(A, B):
        raise ShapeMismatchError("multiply", A.shape, B.shape)

    C = create_zeros(A.m, B.n)
    a, b, c = A._data, B._data, C._data
    # One rank-1 update per k: every entry sees the same accumulation
    # order as the textbook i, j, k triple loop.
    for k in range(A.n):
        c += np.outer(a[:, k], b[k, :])
    return C

# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from densemat.exceptions import IndexOutOfRangeError
from densemat.matrix import Matrix, create_from_values, create_zeros, equals
from densemat.structure import (
    col,
    delete_col,
    delete_row,
    diagonal,
    row,
    swap_col_inplace,
    swap_row_inplace,
    transpose,
)


@pytest.mark.parametrize("m,n", [(1, 1), (3, 5), (6, 2), (0, 4)])
def test_transpose_involution(m, n):
    rng = np.random.default_rng(seed=m * 10 + n)
    A = Matrix(rng.standard_normal((m, n)))
    T = transpose(A)
    assert T.shape == (n, m)
    np.testing.assert_array_equal(T.to_numpy(), A.to_numpy().T)
    assert equals(transpose(T), A)


def test_transpose_has_own_storage():
    R = create_from_values(1, 3, [1, 2, 3])
    T = transpose(R)
    T[0, 0] = 42.0
    assert R[0, 0] == 1.0


def test_diagonal():
    A = create_from_values(2, 3, [1, 2, 3, 4, 5, 6])
    d = diagonal(A)
    assert d.shape == (1, 2)
    assert d.tolist() == [[1.0, 5.0]]
    assert diagonal(transpose(A)).tolist() == [[1.0, 5.0]]
    assert diagonal(create_zeros(0, 3)).shape == (1, 0)


def test_row_and_col():
    A = create_from_values(3, 2, [1, 2, 3, 4, 5, 6])
    r = row(A, 1)
    c = col(A, 1)
    assert r.shape == (1, 2) and r.tolist() == [[3.0, 4.0]]
    assert c.shape == (3, 1) and c.tolist() == [[2.0], [4.0], [6.0]]

    r[0, 0] = -1.0
    assert A[1, 0] == 3.0


@pytest.mark.parametrize("index", [3, 10, -1])
def test_row_out_of_range(index):
    A = create_zeros(3, 2)
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        row(A, index)
    assert excinfo.value.axis == "row"
    assert excinfo.value.size == 3


def test_col_out_of_range():
    with pytest.raises(IndexOutOfRangeError):
        col(create_zeros(3, 2), 2)


def test_delete_row():
    A = create_from_values(3, 2, [1, 2, 3, 4, 5, 6])
    B = delete_row(A, 1)
    assert B.tolist() == [[1.0, 2.0], [5.0, 6.0]]
    assert A.shape == (3, 2)
    assert delete_row(A, 0).tolist() == [[3.0, 4.0], [5.0, 6.0]]
    assert delete_row(A, 2).tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_delete_col():
    A = create_from_values(2, 3, [1, 2, 3, 4, 5, 6])
    assert delete_col(A, 0).tolist() == [[2.0, 3.0], [5.0, 6.0]]
    assert delete_col(A, 1).tolist() == [[1.0, 3.0], [4.0, 6.0]]
    assert delete_col(A, 2).tolist() == [[1.0, 2.0], [4.0, 5.0]]


def test_delete_down_to_empty():
    A = create_from_values(1, 2, [1, 2])
    assert delete_row(A, 0).shape == (0, 2)


def test_delete_out_of_range():
    A = create_zeros(2, 3)
    with pytest.raises(IndexOutOfRangeError):
        delete_row(A, 2)
    with pytest.raises(IndexOutOfRangeError):
        delete_col(A, 3)


def test_swap_rows():
    A = create_from_values(3, 2, [1, 2, 3, 4, 5, 6])
    swap_row_inplace(A, 0, 2)
    assert A.tolist() == [[5.0, 6.0], [3.0, 4.0], [1.0, 2.0]]


def test_swap_cols_non_square():
    A = create_from_values(3, 2, [1, 2, 3, 4, 5, 6])
    swap_col_inplace(A, 0, 1)
    assert A.tolist() == [[2.0, 1.0], [4.0, 3.0], [6.0, 5.0]]


@pytest.mark.parametrize(
    "i,j",
    [(0, 0), (0, 3), (3, 0), (-1, 1), (1, 7)],
)
def test_swap_ignores_bad_indices(i, j):
    A = create_from_values(3, 3, range(9))
    before = A.tolist()
    swap_row_inplace(A, i, j)
    swap_col_inplace(A, i, j)
    assert A.tolist() == before

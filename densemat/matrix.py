# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix storage and construction
"""

import numbers
import operator
from collections.abc import Iterator
from typing import Callable, List, Sequence, Tuple

import numpy as np

from .utils import EPS, check_index


class Matrix:
    """
    Dense m-by-n matrix of float64 values.

    A Matrix owns its buffer: the constructor copies whatever it is given
    and nothing in the public API hands out a view into it. `m` and `n`
    are fixed for the lifetime of the object.
    """

    __slots__ = ("_data",)
    __hash__ = None  # mutable
    __array_ufunc__ = None  # let numpy scalars defer to __rmul__

    def __init__(self, data):
        if isinstance(data, Matrix):
            data = data._data
        arr = np.array(data, dtype=float, copy=True)
        if arr.ndim != 2:
            raise ValueError(f"Matrix data must be 2-D, got {arr.ndim}-D")
        self._data = arr

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Matrix":
        # Takes ownership of a freshly allocated 2-D float array, no copy.
        M = cls.__new__(cls)
        M._data = arr
        return M

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from a list of equal-length rows."""
        rows = list(rows)
        if not rows:
            return cls._wrap(np.empty((0, 0), dtype=float))
        return cls(rows)

    @property
    def m(self) -> int:
        return self._data.shape[0]

    @property
    def n(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    def __len__(self) -> int:
        return self.m

    def _cell(self, key) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair")
        i = check_index(key[0], self.m, "row")
        j = check_index(key[1], self.n, "column")
        return i, j

    def __getitem__(self, key) -> float:
        return float(self._data[self._cell(key)])

    def __setitem__(self, key, value: float):
        self._data[self._cell(key)] = float(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.m}x{self.n}, {self.tolist()})"

    def __str__(self) -> str:
        return format_matrix(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return equals(self, other)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        from .arithmetic import add

        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        from .arithmetic import subtract

        return subtract(self, other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        from .arithmetic import multiply

        return multiply(self, other)

    def __mul__(self, k):
        if not isinstance(k, numbers.Real):
            return NotImplemented
        from .arithmetic import scalar_multiply

        return scalar_multiply(self, k)

    __rmul__ = __mul__

    def __neg__(self):
        from .arithmetic import scalar_multiply

        return scalar_multiply(self, -1.0)

    def copy(self) -> "Matrix":
        return copy(self)

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the contents as an (m, n) ndarray."""
        return self._data.copy()

    def tolist(self) -> List[List[float]]:
        return self._data.tolist()


def _dims(m, n) -> Tuple[int, int]:
    m, n = operator.index(m), operator.index(n)
    if m < 0 or n < 0:
        raise ValueError(f"Matrix dimensions must be non-negative, got {m}x{n}")
    return m, n


def create_empty(m: int, n: int) -> Matrix:
    """
    Allocate an m-by-n matrix with unspecified contents.

    Allocation failure propagates as MemoryError.
    """
    m, n = _dims(m, n)
    return Matrix._wrap(np.empty((m, n), dtype=float))


def create_from_values(m: int, n: int, values) -> Matrix:
    """
    Build an m-by-n matrix from exactly m*n values in row-major order.

    Parameters
    ----------
    m, n : int
        Matrix dimensions.
    values : sequence or iterable of float, or (m, n) nested sequence / ndarray
        Entries, read row by row.

    Raises
    ------
    ValueError : if the number of values is not m*n.
    """
    m, n = _dims(m, n)
    if isinstance(values, Iterator):
        values = list(values)
    arr = np.array(values, dtype=float, copy=True)
    if arr.size != m * n:
        raise ValueError(
            f"Expected {m * n} values for a {m}x{n} matrix, got {arr.size}"
        )
    if arr.ndim > 1 and arr.shape != (m, n):
        raise ValueError(f"Expected values of shape {(m, n)}, got {arr.shape}")
    return Matrix._wrap(arr.reshape(m, n))


def create_zeros(m: int, n: int) -> Matrix:
    m, n = _dims(m, n)
    return Matrix._wrap(np.zeros((m, n), dtype=float))


def create_ones(m: int, n: int) -> Matrix:
    m, n = _dims(m, n)
    return Matrix._wrap(np.ones((m, n), dtype=float))


def create_identity(n: int) -> Matrix:
    n, _ = _dims(n, n)
    return Matrix._wrap(np.eye(n, dtype=float))


def copy(A: Matrix) -> Matrix:
    """Deep copy: same shape and values, independent storage."""
    return Matrix._wrap(A._data.copy())


def same_order(A: Matrix, B: Matrix) -> bool:
    return A.m == B.m and A.n == B.n


def can_multiply(A: Matrix, B: Matrix) -> bool:
    return A.n == B.m


def is_square(A: Matrix) -> bool:
    return A.m == A.n


def equals(A: Matrix, B: Matrix) -> bool:
    """
    Absolute-tolerance equality.

    True when A and B are the same object, or have the same shape and no
    pair of entries differs by more than EPS. The tolerance is absolute,
    so entries of large magnitude can compare unequal after rounding.
    """
    if A is B:
        return True
    if not same_order(A, B):
        return False
    with np.errstate(invalid="ignore"):
        diff = np.abs(A._data - B._data)
    # NaN differences never exceed EPS, so they do not break equality
    return not bool(np.any(diff > EPS))


def map_inplace(A: Matrix, f: Callable[[float], float]) -> None:
    """Replace every entry x of A with f(x)."""
    data = A._data
    for i in range(A.m):
        for j in range(A.n):
            data[i, j] = f(float(data[i, j]))


def fill(A: Matrix, v: float) -> None:
    A._data.fill(float(v))


def format_matrix(A: Matrix) -> str:
    """Rows of tab-terminated fixed-point values, one row per line."""
    return "".join(
        "".join(f"{v:f}\t" for v in row) + "\n" for row in A._data.tolist()
    )


def print_matrix(A: Matrix, file=None) -> None:
    """Dump A to `file` (stdout by default). Debug aid only."""
    print(format_matrix(A), end="", file=file)

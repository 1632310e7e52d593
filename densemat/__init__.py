# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densemat
========

Dense real-valued matrices for small-to-medium numerical work:
construction, arithmetic, structural transforms, cofactor-expansion
determinants and the 1- / infinity-norms.

Public API
~~~~~~~~~~
- Construction
    - `Matrix`, `create_empty`, `create_from_values`, `create_zeros`,
      `create_ones`, `create_identity`, `copy`
- Arithmetic (allocating and `_inplace`)
    - `scalar_multiply`, `add`, `subtract`, `multiply`
- Queries
    - `same_order`, `can_multiply`, `is_square`, `equals`, `is_singular`
- Transforms
    - `transpose`, `diagonal`, `row`, `col`, `delete_row`, `delete_col`,
      `swap_row_inplace`, `swap_col_inplace`, `map_inplace`, `fill`
- Determinants
    - `determinant`, `minor`, `cofactor`, `adjugate`
- Norms
    - `norm_1`, `norm_inf`

Errors derive from `DenseMatError`; see `densemat.exceptions`.

Example
-------
>>> import densemat as dm
>>> A = dm.create_from_values(2, 2, [1, 2, 3, 4])
>>> dm.determinant(A)
-2.0
"""

from importlib.metadata import version as _pkg_version

from .arithmetic import (
    add,
    add_inplace,
    multiply,
    scalar_multiply,
    scalar_multiply_inplace,
    subtract,
    subtract_inplace,
)
from .determinant import adjugate, cofactor, determinant, is_singular, minor
from .exceptions import DenseMatError, IndexOutOfRangeError, ShapeMismatchError
from .matrix import (
    Matrix,
    can_multiply,
    copy,
    create_empty,
    create_from_values,
    create_identity,
    create_ones,
    create_zeros,
    equals,
    fill,
    format_matrix,
    is_square,
    map_inplace,
    print_matrix,
    same_order,
)
from .norms import norm_1, norm_inf
from .structure import (
    col,
    delete_col,
    delete_row,
    diagonal,
    row,
    swap_col_inplace,
    swap_row_inplace,
    transpose,
)
from .utils import EPS

__all__ = [
    "Matrix",
    "create_empty",
    "create_from_values",
    "create_zeros",
    "create_ones",
    "create_identity",
    "copy",
    "scalar_multiply",
    "scalar_multiply_inplace",
    "add",
    "add_inplace",
    "subtract",
    "subtract_inplace",
    "multiply",
    "same_order",
    "can_multiply",
    "is_square",
    "equals",
    "is_singular",
    "transpose",
    "diagonal",
    "row",
    "col",
    "delete_row",
    "delete_col",
    "swap_row_inplace",
    "swap_col_inplace",
    "map_inplace",
    "fill",
    "determinant",
    "minor",
    "cofactor",
    "adjugate",
    "norm_1",
    "norm_inf",
    "format_matrix",
    "print_matrix",
    "DenseMatError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "EPS",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densemat”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Lightweight default logging config so users see warnings only if
# they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

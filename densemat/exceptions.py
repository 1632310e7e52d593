# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for densemat.

Every error raised on purpose by the library derives from `DenseMatError`.
The concrete classes also derive from the matching builtin (`ValueError`,
`IndexError`) so callers that only know the builtins still catch them.
"""

from typing import Optional, Tuple


class DenseMatError(Exception):
    """Base exception for all densemat errors."""

    pass


class ShapeMismatchError(DenseMatError, ValueError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes
    ----------
    operation : str
        Name of the operation that rejected its operands.
    left_shape, right_shape : tuple[int, int] | None
        Shapes of the offending operands (right is None for unary checks).
    """

    def __init__(
        self,
        operation: str,
        left_shape: Tuple[int, int],
        right_shape: Optional[Tuple[int, int]] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            if right_shape is None:
                message = f"{operation}: unsupported shape {left_shape}"
            else:
                message = (
                    f"{operation}: incompatible shapes {left_shape} "
                    f"and {right_shape}"
                )
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(DenseMatError, IndexError):
    """
    A row or column index falls outside the matrix.

    Attributes
    ----------
    axis : str
        "row" or "column".
    index : int
        The rejected index.
    size : int
        Number of rows/columns actually available.
    """

    def __init__(self, axis: str, index: int, size: int):
        super().__init__(f"{axis} index {index} out of range for size {size}")
        self.axis = axis
        self.index = index
        self.size = size

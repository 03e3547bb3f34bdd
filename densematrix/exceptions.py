# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for densematrix.

Every error raised by the package derives from `MatrixError`, so callers
can catch the whole family at once. Each subclass also derives from the
builtin exception a caller would reach for first (`ValueError`,
`IndexError`), and carries the offending values as attributes.
"""

from typing import Optional, Tuple


class MatrixError(Exception):
    """Base exception for all densematrix errors."""

    pass


class InvalidDimensionsError(MatrixError, ValueError):
    """
    A matrix was built or resized with a non-positive row or column
    count, or a dimension-dependent operation hit a moved-from matrix.
    """

    def __init__(self, message: str, rows=None, cols=None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class IndexOutOfBoundsError(MatrixError, IndexError):
    """Element access outside ``[0, rows) x [0, cols)``."""

    def __init__(
        self,
        message: str,
        index: Optional[Tuple[int, int]] = None,
        shape: Optional[Tuple[int, int]] = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class DimensionMismatchError(MatrixError, ValueError):
    """
    Operand shapes are incompatible.

    Raised by addition and subtraction when the shapes differ, and by
    multiplication when the left column count is not the right row count.
    """

    def __init__(
        self,
        message: str,
        left: Optional[Tuple[int, int]] = None,
        right: Optional[Tuple[int, int]] = None,
    ):
        super().__init__(message)
        self.left = left
        self.right = right


class NotSquareError(MatrixError, ValueError):
    """Determinant, cofactors or inverse requested on a non-square matrix."""

    def __init__(self, message: str, shape: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.shape = shape


class SingularMatrixError(MatrixError, ValueError):
    """
    Inverse requested on a matrix whose determinant is within `EPS`
    of zero.

    Attributes:
        determinant: the determinant that failed the check
    """

    def __init__(self, message: str, determinant: Optional[float] = None):
        super().__init__(message)
        self.determinant = determinant

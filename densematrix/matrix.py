# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense, resizable matrix of float64 values.
"""

import logging
import numbers
from typing import List, Tuple

import numpy as np

from . import cofactor
from .exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionsError,
    NotSquareError,
    SingularMatrixError,
)
from .utils import DEFAULT_COLS, DEFAULT_ROWS, EPS, check_dimensions, within_tol

logger = logging.getLogger(__name__)


def _empty_grid() -> np.ndarray:
    return np.zeros((0, 0), dtype=float)


class Matrix:
    """
    A rows-by-cols grid of floats that owns its storage.

    The named methods (`eq_matrix`, `sum_matrix`, `sub_matrix`,
    `mul_number`, `mul_matrix`, `transpose`, `calc_complements`,
    `determinant`, `inverse_matrix`) are the interface; the arithmetic
    operators are thin wrappers around them. ``+``, ``-``, ``*`` and ``@``
    return new matrices, the augmented forms mutate the left operand.

    Cells are read and written with ``m[row, col]``.

    Example
    -------
    >>> m = Matrix.from_rows([[1, 2], [4, 5]])
    >>> m.determinant()
    -3.0
    """

    _grid: np.ndarray

    # make NumPy scalars and arrays defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        rows, cols = check_dimensions(rows, cols)
        self._grid = np.zeros((rows, cols), dtype=float)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def _adopt(cls, grid: np.ndarray) -> "Matrix":
        """Wrap `grid` without copying it."""
        m = cls.__new__(cls)
        m._grid = grid
        return m

    @classmethod
    def from_rows(cls, data) -> "Matrix":
        """
        Build a matrix from a nested sequence (or 2-D array) of numbers.
        The data is always copied.
        """
        if isinstance(data, Matrix):
            return data.copy()
        try:
            grid = np.array(data, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidDimensionsError(
                f"Cannot build a matrix from {type(data).__name__}: {e}"
            ) from e
        if grid.ndim != 2:
            raise InvalidDimensionsError(
                f"Expected 2-D data, got {grid.ndim}-D with shape {grid.shape}"
            )
        check_dimensions(*grid.shape)
        return cls._adopt(grid)

    @classmethod
    def from_matrix(cls, other: "Matrix") -> "Matrix":
        return other.copy()

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        n, _ = check_dimensions(n, n)
        return cls._adopt(np.eye(n, dtype=float))

    @classmethod
    def take(cls, source: "Matrix") -> "Matrix":
        """
        Move construction: the new matrix adopts `source`'s storage and
        `source` is left empty (0x0).
        """
        m = cls._adopt(source._grid)
        source._grid = _empty_grid()
        logger.debug(f"take(): moved {m.rows}x{m.cols} grid")
        return m

    # ------------------------------------------------------------------
    # Copy / move assignment
    # ------------------------------------------------------------------
    def copy(self) -> "Matrix":
        return self._adopt(self._grid.copy())

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return self.copy()

    def copy_from(self, other: "Matrix") -> "Matrix":
        """Replace this matrix's contents with a copy of `other`."""
        if other is not self:
            self._grid = other._grid.copy()
        return self

    def move_from(self, other: "Matrix") -> "Matrix":
        """Adopt `other`'s storage, leaving `other` empty (0x0)."""
        if other is not self:
            self._grid = other._grid
            other._grid = _empty_grid()
            logger.debug(f"move_from(): moved {self.rows}x{self.cols} grid")
        return self

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._grid.shape[0]

    @property
    def cols(self) -> int:
        return self._grid.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._grid.shape

    def is_empty(self) -> bool:
        """True for a moved-from matrix."""
        return self._grid.size == 0

    def resize(self, rows: int, cols: int) -> None:
        """
        Change both dimensions at once. The overlapping top-left block of
        old values is kept, new cells are zero. On invalid dimensions the
        matrix is left untouched.
        """
        rows, cols = check_dimensions(rows, cols)
        grid = np.zeros((rows, cols), dtype=float)
        r = min(rows, self.rows)
        c = min(cols, self.cols)
        grid[:r, :c] = self._grid[:r, :c]
        logger.debug(f"resize(): {self.rows}x{self.cols} -> {rows}x{cols}")
        self._grid = grid

    set_size = resize

    def set_rows(self, rows: int) -> None:
        self.resize(rows, self.cols)

    def set_cols(self, cols: int) -> None:
        self.resize(self.rows, cols)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def _check_index(self, key) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, col) pair")
        row, col = key
        for value in key:
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"Matrix indices must be integers, got {key!r}")
        self._require_live("element access")
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexOutOfBoundsError(
                f"Index ({row}, {col}) is outside a {self.rows}x{self.cols} matrix",
                index=(row, col),
                shape=self.shape,
            )
        return int(row), int(col)

    def __getitem__(self, key) -> float:
        row, col = self._check_index(key)
        return float(self._grid[row, col])

    def __setitem__(self, key, value: float) -> None:
        row, col = self._check_index(key)
        self._grid[row, col] = float(value)

    def tolist(self) -> List[List[float]]:
        return self._grid.tolist()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the underlying grid."""
        return self._grid.copy()

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------
    def _require_live(self, op: str) -> None:
        if self.is_empty():
            raise InvalidDimensionsError(
                f"{op} is undefined for an empty (moved-from) matrix",
                rows=self.rows,
                cols=self.cols,
            )

    def _require_same_shape(self, other: "Matrix", op: str) -> None:
        self._require_live(op)
        other._require_live(op)
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"{op} needs equal shapes, got {self.rows}x{self.cols} "
                f"and {other.rows}x{other.cols}",
                left=self.shape,
                right=other.shape,
            )

    def _require_square(self, op: str) -> None:
        self._require_live(op)
        if self.rows != self.cols:
            raise NotSquareError(
                f"The {op} is undefined for a non-square "
                f"{self.rows}x{self.cols} matrix",
                shape=self.shape,
            )

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------
    def eq_matrix(self, other: "Matrix") -> bool:
        """
        Equal shapes and every pair of cells within `EPS` of each other.
        """
        self._require_live("comparison")
        other._require_live("comparison")
        if self.shape != other.shape:
            return False
        return within_tol(self._grid, other._grid)

    def sum_matrix(self, other: "Matrix") -> None:
        self._require_same_shape(other, "addition")
        self._grid += other._grid

    def sub_matrix(self, other: "Matrix") -> None:
        self._require_same_shape(other, "subtraction")
        self._grid -= other._grid

    def mul_number(self, k: float) -> None:
        if not isinstance(k, numbers.Real):
            raise TypeError(f"Scalar must be a real number, got {type(k).__name__}")
        self._require_live("scalar multiplication")
        self._grid *= k

    def mul_matrix(self, other: "Matrix") -> None:
        """
        self <- self x other. The product is built in a fresh buffer and
        only then adopted, so ``m.mul_matrix(m)`` is safe.
        """
        self._require_live("matrix multiplication")
        other._require_live("matrix multiplication")
        if self.cols != other.rows:
            raise DimensionMismatchError(
                f"Cannot multiply {self.rows}x{self.cols} by "
                f"{other.rows}x{other.cols}: left columns != right rows",
                left=self.shape,
                right=other.shape,
            )
        result = np.zeros((self.rows, other.cols), dtype=float)
        for i in range(self.rows):
            for j in range(other.cols):
                result[i, j] = self._grid[i, :] @ other._grid[:, j]
        self._grid = result

    def transpose(self) -> "Matrix":
        self._require_live("transpose")
        return self._adopt(self._grid.T.copy())

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.
        Exponential in the order of the matrix; see `densematrix.cofactor`.
        """
        self._require_square("determinant")
        return cofactor.determinant(self._grid)

    def calc_complements(self) -> "Matrix":
        """Matrix of cofactors, (-1)^(i+j) times the (i, j) minor."""
        self._require_square("cofactor matrix")
        return self._adopt(cofactor.cofactors(self._grid))

    def inverse_matrix(self) -> "Matrix":
        """
        Classical adjugate inverse: transpose(cofactors) / det.

        Raises
        ------
        NotSquareError : if the matrix is not square.
        SingularMatrixError : if |det| <= EPS.
        """
        d = self.determinant()
        if abs(d) <= EPS:
            raise SingularMatrixError(
                f"Matrix is singular (|det| = {abs(d):g} <= {EPS:g})",
                determinant=d,
            )
        result = self.calc_complements().transpose()
        result.mul_number(1.0 / d)
        return result

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.eq_matrix(other)

    # mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.sum_matrix(other)
        return result

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.sub_matrix(other)
        return result

    def __mul__(self, other) -> "Matrix":
        result = self.copy()
        if isinstance(other, Matrix):
            result.mul_matrix(other)
        elif isinstance(other, numbers.Real):
            result.mul_number(other)
        else:
            return NotImplemented
        return result

    def __rmul__(self, other) -> "Matrix":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        result = self.copy()
        result.mul_number(other)
        return result

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.mul_matrix(other)
        return result

    def __iadd__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sum_matrix(other)
        return self

    def __isub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sub_matrix(other)
        return self

    def __imul__(self, other) -> "Matrix":
        if isinstance(other, Matrix):
            self.mul_matrix(other)
        elif isinstance(other, numbers.Real):
            self.mul_number(other)
        else:
            return NotImplemented
        return self

    def __imatmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self.mul_matrix(other)
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.from_rows({self.tolist()})"

    def __str__(self) -> str:
        return str(self._grid)

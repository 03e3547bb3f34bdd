# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densematrix
===========

A small dense matrix type with the classical linear-algebra operations,
computed the textbook way (cofactor expansion, adjugate inverse).

Public API
~~~~~~~~~~
- Type
    - `Matrix`
- Pure operations
    - `equals`, `add`, `subtract`, `scale`, `multiply`, `transpose`
    - `determinant`, `cofactors`, `adjugate`, `inverse`, `identity`
- Errors
    - `MatrixError` and its subclasses `InvalidDimensionsError`,
      `IndexOutOfBoundsError`, `DimensionMismatchError`,
      `NotSquareError`, `SingularMatrixError`
- Constants
    - `EPS` (absolute tolerance for comparisons and singularity)

Determinants are computed by recursive expansion, which is O(n!): this
package is meant for small matrices only.

Example
-------
>>> import densematrix as dm
>>> A = dm.Matrix.from_rows([[2, 5, 7], [6, 3, 4], [5, -2, -3]])
>>> dm.multiply(A, dm.inverse(A)) == dm.identity(3)
True
"""

from importlib.metadata import version as _pkg_version

from .exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionsError,
    MatrixError,
    NotSquareError,
    SingularMatrixError,
)
from .matrix import Matrix
from .operations import (
    add,
    adjugate,
    cofactors,
    determinant,
    equals,
    identity,
    inverse,
    multiply,
    scale,
    subtract,
    transpose,
)
from .utils import EPS

__all__ = [
    "Matrix",
    "equals",
    "add",
    "subtract",
    "scale",
    "multiply",
    "transpose",
    "determinant",
    "cofactors",
    "adjugate",
    "inverse",
    "identity",
    "MatrixError",
    "InvalidDimensionsError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    "NotSquareError",
    "SingularMatrixError",
    "EPS",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densematrix”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

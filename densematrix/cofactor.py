# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Cofactor expansion on raw float grids.

These routines take square ``numpy`` arrays and do no shape checking of
their own; `Matrix` validates its operands before calling in here.

Known limitation: `determinant` expands recursively along the first row
and therefore costs O(n!). There is no pivoting or LU fallback, so it is
only meant for small matrices.
"""

import logging

import numpy as np

from .utils import COFACTOR_WARN_ORDER, cofactor_sign

logger = logging.getLogger(__name__)


def minor(A: np.ndarray, row: int, col: int) -> np.ndarray:
    """
    Return the (n-1)-by-(n-1) submatrix of A with `row` and `col`
    removed. Remaining rows and columns keep their relative order.
    """
    m, n = A.shape
    return A[np.arange(m) != row][:, np.arange(n) != col]


def _expand(A: np.ndarray) -> float:
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])

    result = 0.0
    for i in range(n):
        result += cofactor_sign(i) * A[0, i] * _expand(minor(A, 0, i))
    return result


def determinant(A: np.ndarray) -> float:
    """
    Determinant of a square grid by Laplace expansion along row 0:

        det(A) = sum_i (-1)^i * A[0, i] * det(minor(A, 0, i))
    """
    n = A.shape[0]
    if n >= COFACTOR_WARN_ORDER:
        logger.warning(
            f"determinant(): cofactor expansion of a {n}x{n} matrix is O(n!)"
        )
    return _expand(A)


def cofactors(A: np.ndarray) -> np.ndarray:
    """
    Matrix of cofactors C[i, j] = (-1)^(i+j) * det(minor(A, i, j)).

    A 1x1 grid has no minors; its cofactor matrix is [[1.0]] by convention.
    """
    n = A.shape[0]
    C = np.zeros((n, n), dtype=float)
    if n == 1:
        C[0, 0] = 1.0
        return C

    if n >= COFACTOR_WARN_ORDER:
        logger.warning(f"cofactors(): {n * n} expansions of order {n - 1}")
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor_sign(i, j) * _expand(minor(A, i, j))
    return C

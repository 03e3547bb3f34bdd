# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Pure counterparts of the mutating `Matrix` methods.

Every function here leaves its arguments untouched and returns a new
matrix (or a number). Each one copies the left operand and runs the same
method the in-place form uses.
"""

from .matrix import Matrix


def _check_matrix(*args) -> None:
    for a in args:
        if not isinstance(a, Matrix):
            raise TypeError(f"Expected a Matrix, got {type(a).__name__}")


def equals(a: Matrix, b: Matrix) -> bool:
    _check_matrix(a, b)
    return a.eq_matrix(b)


def add(a: Matrix, b: Matrix) -> Matrix:
    _check_matrix(a, b)
    result = a.copy()
    result.sum_matrix(b)
    return result


def subtract(a: Matrix, b: Matrix) -> Matrix:
    _check_matrix(a, b)
    result = a.copy()
    result.sub_matrix(b)
    return result


def scale(a: Matrix, k: float) -> Matrix:
    _check_matrix(a)
    result = a.copy()
    result.mul_number(k)
    return result


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Matrix product a x b; needs a.cols == b.rows."""
    _check_matrix(a, b)
    result = a.copy()
    result.mul_matrix(b)
    return result


def transpose(a: Matrix) -> Matrix:
    _check_matrix(a)
    return a.transpose()


def determinant(a: Matrix) -> float:
    _check_matrix(a)
    return a.determinant()


def cofactors(a: Matrix) -> Matrix:
    _check_matrix(a)
    return a.calc_complements()


def adjugate(a: Matrix) -> Matrix:
    """Classical adjoint: the transpose of the cofactor matrix."""
    _check_matrix(a)
    return a.calc_complements().transpose()


def inverse(a: Matrix) -> Matrix:
    _check_matrix(a)
    return a.inverse_matrix()


def identity(n: int) -> Matrix:
    return Matrix.identity(n)

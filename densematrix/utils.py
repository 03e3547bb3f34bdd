# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers
from typing import Tuple

import numpy as np

from .exceptions import InvalidDimensionsError

# Absolute tolerance for cell equality and the singularity check.
EPS: float = 1e-6

DEFAULT_ROWS: int = 3
DEFAULT_COLS: int = 3

# Cofactor expansion is O(n!); warn from this order upwards.
COFACTOR_WARN_ORDER: int = 9


def check_dimensions(rows, cols) -> Tuple[int, int]:
    """Validate a requested shape and return it as plain ints."""
    for value in (rows, cols):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidDimensionsError(
                f"Matrix dimensions must be integers, got ({rows!r}, {cols!r})",
                rows=rows,
                cols=cols,
            )
    if rows <= 0 or cols <= 0:
        raise InvalidDimensionsError(
            f"Matrix dimensions must be positive, got {rows}x{cols}",
            rows=rows,
            cols=cols,
        )
    return int(rows), int(cols)


def cofactor_sign(i: int, j: int = 0) -> float:
    """Return (-1)^(i+j)."""
    return -1.0 if (i + j) & 1 else 1.0


def within_tol(a: np.ndarray, b: np.ndarray, tol: float = EPS) -> bool:
    """True when every pair of cells differs by at most `tol`."""
    return bool(np.all(np.abs(a - b) <= tol))


def random_nonsingular(n, low=-10, high=10, seed=None) -> np.ndarray:
    """
    Build an n-by-n matrix with random entries and a dominant diagonal,
    which guarantees it is non-singular and reasonably conditioned.

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    A = rng.uniform(low, high, size=(n, n))
    # strict diagonal dominance: |a_ii| > sum_{j != i} |a_ij|
    bound = np.abs(A).sum(axis=1)
    signs = np.where(rng.random(n) < 0.5, -1.0, 1.0)
    A[np.diag_indices(n)] = signs * (bound + 1.0)
    return np.asarray(A, dtype=float)


def random_integer_matrix(rows, cols, low=-9, high=10, seed=None) -> np.ndarray:
    """Random matrix of small integers stored as float64."""
    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=(rows, cols)).astype(float)

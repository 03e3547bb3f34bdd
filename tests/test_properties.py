# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

import densematrix as dm
from densematrix import Matrix
from densematrix.utils import random_integer_matrix, random_nonsingular

TEST_ITERATIONS = 25
logger = logging.getLogger(__name__)


def random_matrix(rng, rows, cols):
    return Matrix.from_rows(rng.uniform(-100, 100, size=(rows, cols)))


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 5), (4, 4), (7, 3)])
def test_copy_equals_original(rows, cols):
    rng = np.random.default_rng(seed=rows * 10 + cols)
    m = random_matrix(rng, rows, cols)
    c = m.copy()
    assert dm.equals(m, c)
    c[rows - 1, cols - 1] += 1.0
    assert not dm.equals(m, c)


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 5), (4, 4), (7, 3)])
def test_double_transpose_is_identity(rows, cols):
    rng = np.random.default_rng(seed=rows + cols)
    for _ in range(TEST_ITERATIONS):
        m = random_matrix(rng, rows, cols)
        assert dm.equals(dm.transpose(dm.transpose(m)), m)


def test_addition_is_associative():
    rng = np.random.default_rng(seed=1)
    for _ in range(TEST_ITERATIONS):
        a, b, c = (random_matrix(rng, 3, 4) for _ in range(3))
        assert dm.equals(dm.add(dm.add(a, b), c), dm.add(a, dm.add(b, c)))


def test_scale_distributes_over_addition():
    rng = np.random.default_rng(seed=2)
    for _ in range(TEST_ITERATIONS):
        a = random_matrix(rng, 5, 2)
        b = random_matrix(rng, 5, 2)
        k = float(rng.uniform(-10, 10))
        lhs = dm.scale(dm.add(a, b), k)
        rhs = dm.add(dm.scale(a, k), dm.scale(b, k))
        assert dm.equals(lhs, rhs)


def test_subtract_undoes_add():
    rng = np.random.default_rng(seed=3)
    a = random_matrix(rng, 3, 3)
    b = random_matrix(rng, 3, 3)
    assert (a + b) - b == a


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_product_with_inverse_is_identity(n):
    for seed in range(TEST_ITERATIONS):
        a = Matrix.from_rows(random_nonsingular(n, seed=seed))
        logger.debug(f"\nRunning Test\n{a}\n")
        assert dm.equals(dm.multiply(a, dm.inverse(a)), dm.identity(n))
        assert dm.equals(dm.multiply(dm.inverse(a), a), dm.identity(n))


@pytest.mark.parametrize("n", [2, 3, 4])
def test_determinant_of_product(n):
    for seed in range(TEST_ITERATIONS):
        a = Matrix.from_rows(random_integer_matrix(n, n, seed=seed))
        b = Matrix.from_rows(random_integer_matrix(n, n, seed=seed + 1000))
        # integer entries keep every intermediate exact
        assert (a @ b).determinant() == a.determinant() * b.determinant()


@pytest.mark.parametrize("n", [2, 3, 4, 5])
def test_transpose_preserves_determinant(n):
    for seed in range(TEST_ITERATIONS):
        a = Matrix.from_rows(random_integer_matrix(n, n, seed=seed))
        assert a.transpose().determinant() == a.determinant()


def test_mutating_and_pure_forms_agree():
    rng = np.random.default_rng(seed=4)
    a = random_matrix(rng, 3, 3)
    b = random_matrix(rng, 3, 3)

    pure = dm.multiply(a, b)
    in_place = a.copy()
    in_place.mul_matrix(b)
    assert pure.tolist() == in_place.tolist()

    pure = dm.add(a, b)
    in_place = a.copy()
    in_place.sum_matrix(b)
    assert pure.tolist() == in_place.tolist()

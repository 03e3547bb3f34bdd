#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Time cofactor-expansion determinant and inverse against NumPy.

    python -m densematrix.benchmark_determinant
"""

import time

import numpy as np
import pandas as pd

from densematrix import Matrix
from densematrix.utils import random_nonsingular

REPEATS = 5  # best of 5 runs
SIZES = [2, 3, 4, 5, 6, 7]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def run(sizes=SIZES, repeats=REPEATS, seed=0) -> pd.DataFrame:
    records = []
    for n in sizes:
        A = random_nonsingular(n, seed=seed + n)
        M = Matrix.from_rows(A)

        # reference
        t_np = min(wall(np.linalg.det, A) for _ in range(repeats))
        d_ref = np.linalg.det(A)

        t_det = min(wall(M.determinant) for _ in range(repeats))
        d_err = abs(M.determinant() - d_ref) / max(1.0, abs(d_ref))
        records.append(("det", f"{n}x{n}", t_det, t_det / t_np, d_err))

        t_np_inv = min(wall(np.linalg.inv, A) for _ in range(repeats))
        t_inv = min(wall(M.inverse_matrix) for _ in range(repeats))
        inv_err = np.linalg.norm(
            M.inverse_matrix().to_numpy() - np.linalg.inv(A), np.inf
        )
        records.append(("inverse", f"{n}x{n}", t_inv, t_inv / t_np_inv, inv_err))

    return pd.DataFrame(
        records,
        columns=["kernel", "size", "sec", "sec/NumPy", "error"],
    )


if __name__ == "__main__":
    df = run()
    print(df.to_markdown(index=False))
    df.to_csv("bench_results.csv", index=False)

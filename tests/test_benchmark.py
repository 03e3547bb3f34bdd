# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from densematrix.benchmark_determinant import run


def test_benchmark_run():
    df = run(sizes=[2, 3], repeats=1)
    assert list(df.columns) == ["kernel", "size", "sec", "sec/NumPy", "error"]
    assert list(df["kernel"]) == ["det", "inverse", "det", "inverse"]
    assert (df["error"] < 1e-8).all()

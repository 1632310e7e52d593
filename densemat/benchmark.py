#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Time the Laplace-expansion determinant against numpy.linalg.det.

    python -m densemat.benchmark
"""

import time

import numpy as np
import pandas as pd

from .determinant import determinant
from .matrix import Matrix

REPEATS = 5  # best of 5 runs
ORDERS = (2, 3, 4, 5, 6, 7, 8)


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def run_benchmark(orders=ORDERS, repeats: int = REPEATS, seed=0) -> pd.DataFrame:
    """
    Returns
    -------
    DataFrame with one row per order and columns
    order, sec_laplace, sec_numpy, abs_diff.
    """
    rng = np.random.default_rng(seed)
    records = []
    for order in orders:
        a = rng.standard_normal((order, order))
        A = Matrix(a)

        t_ours = min(wall(determinant, A) for _ in range(repeats))
        t_np = min(wall(np.linalg.det, a) for _ in range(repeats))
        diff = abs(determinant(A) - float(np.linalg.det(a)))
        records.append((order, t_ours, t_np, diff))

    return pd.DataFrame(
        records,
        columns=["order", "sec_laplace", "sec_numpy", "abs_diff"],
    )


if __name__ == "__main__":
    df = run_benchmark()
    print(df.to_markdown(index=False))

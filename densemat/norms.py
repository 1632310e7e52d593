# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .matrix import Matrix


def _max_sum(sums: np.ndarray) -> float:
    # NaN sums are skipped; an empty reduction gives 0.0
    return float(np.fmax.reduce(sums, initial=0.0))


def norm_1(A: Matrix) -> float:
    """Maximum absolute column sum; 0.0 for an empty matrix."""
    return _max_sum(np.abs(A._data).sum(axis=0))


def norm_inf(A: Matrix) -> float:
    """Maximum absolute row sum; 0.0 for an empty matrix."""
    return _max_sum(np.abs(A._data).sum(axis=1))

# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest


@pytest.fixture
def nonsingular_upper():
    """
    Factory for n-by-n upper-triangular grids whose diagonal entries are
    at least 1 in magnitude, so the determinant is their product and never 0.
    """

    def build(n, scale=10.0, seed=None) -> np.ndarray:
        rng = np.random.default_rng(seed)
        U = np.triu(rng.uniform(-scale, scale, size=(n, n)))
        signs = rng.choice([-1.0, 1.0], size=n)
        U[np.diag_indices(n)] = signs * rng.uniform(1.0, scale, size=n)
        return U

    return build

# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math
import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np

EPS: float = 1e-12


def scale_tol(A: np.ndarray) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    return EPS * max(1.0, np.linalg.norm(np.atleast_2d(A), ord=np.inf))


def is_number(value: Any) -> bool:
    """
    True for finite real numbers.

    bool is an Integral subclass but is rejected, as are NaN and +/-inf.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:  # int too large for a float
        return False


def is_sequence(value: Any) -> bool:
    """True for lists, tuples, ndarrays and other non-string sequences."""
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Sequence)


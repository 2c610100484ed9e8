# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
mathtypes
=========

Three small, immutable-result mathematical value types.

Public API
~~~~~~~~~~
- `ExtendedSet`
    - `union`, `intersection`, `difference`,
      `is_subset_of`, `is_superset_of`
- `Vector`
    - `add`, `subtract`, `multiply_by_scalar`, `dot_product`,
      `magnitude`, `normalize`, `cross_product`, `angle_to`
- `Matrix`
    - structure: `get_type_of_matrix`, `get_row`, `get_column`, `get_trace`
    - arithmetic: `plus`, `minus`, `scalar_multiply_by`, `multiplied_by`,
      `get_transpose`
    - cofactor methods: `get_minor`, `get_cofactor`, `get_determinant`,
      `get_inverse`, `get_adjoint`
- Errors
    - `InvalidArgumentError`, `TypeMismatchError`,
      `DimensionMismatchError`, `IndexOutOfRangeError`, `ZeroVectorError`

Example
-------
>>> from mathtypes import Matrix
>>> Matrix([[4, 7], [2, 6]]).get_inverse().tolist()
[[0.6, -0.7], [-0.2, 0.4]]
"""

from importlib.metadata import version as _pkg_version

from .errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    MathTypesError,
    TypeMismatchError,
    ZeroVectorError,
)
from .extended_set import ExtendedSet
from .matrix import Matrix
from .vector import Vector

__all__ = [
    "ExtendedSet",
    "Vector",
    "Matrix",
    "MathTypesError",
    "InvalidArgumentError",
    "TypeMismatchError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "ZeroVectorError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show mathtypes”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

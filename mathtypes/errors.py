# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception types raised by the value types in this package.

Every class also derives from the built-in a caller would already catch
for that failure, so ``except ValueError`` keeps working.
"""


class MathTypesError(Exception):
    """Base class for all errors raised by mathtypes."""


class InvalidArgumentError(MathTypesError, ValueError):
    """Malformed construction input, bad scalar, singular inverse, ..."""


class TypeMismatchError(MathTypesError, TypeError):
    """Operand is not the expected value type."""


class DimensionMismatchError(MathTypesError, ValueError):
    """Operands are not conformal for the requested operation."""


class IndexOutOfRangeError(MathTypesError, IndexError):
    """Row/column accessor index outside the valid bounds."""


class ZeroVectorError(InvalidArgumentError, ZeroDivisionError):
    """Operation needs a non-zero magnitude, e.g. normalisation."""

# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vector operations in python
"""
import math
from typing import Iterator, List, Sequence

import numpy as np

from .errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    TypeMismatchError,
    ZeroVectorError,
)
from .utils import is_number, is_sequence


class Vector:
    """
    Fixed-length real vector. Every operation returns a new Vector.
    """

    def __init__(self, components: Sequence[float]):
        if not is_sequence(components) or len(components) == 0:
            raise InvalidArgumentError("Value must be a non-empty array")
        if not all(is_number(x) for x in components):
            raise InvalidArgumentError("All elements must be numbers")

        self._data = np.array(components, dtype=float)
        self._data.flags.writeable = False

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Vector":
        # Results of arithmetic on validated vectors skip re-validation.
        v = cls.__new__(cls)
        v._data = data
        v._data.flags.writeable = False
        return v

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.tolist()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self.tolist())

    def tolist(self) -> List[float]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def get_dimensions(self) -> int:
        return self._data.shape[0]

    def _check_operand(self, other) -> None:
        if not isinstance(other, Vector):
            raise TypeMismatchError(
                f"Value must be of type Vector, got: {type(other).__name__}"
            )
        if len(self) != len(other):
            raise DimensionMismatchError("Vectors must be of the same dimension")

    def add(self, other: "Vector") -> "Vector":
        self._check_operand(other)
        return Vector._wrap(self._data + other._data)

    def subtract(self, other: "Vector") -> "Vector":
        self._check_operand(other)
        return Vector._wrap(self._data - other._data)

    def multiply_by_scalar(self, scalar: float) -> "Vector":
        if not is_number(scalar):
            raise InvalidArgumentError("Value must be a number")
        return Vector._wrap(self._data * scalar)

    def dot_product(self, other: "Vector") -> float:
        """
        Implements the scalar (dot) product between two vectors.
        """
        self._check_operand(other)
        return float(self._data @ other._data)

    def magnitude(self) -> float:
        # no squared intermediates, so tiny and huge components survive
        return math.hypot(*self._data.tolist())

    def normalize(self) -> "Vector":
        length = self.magnitude()
        if length == 0:
            raise ZeroVectorError("Cannot normalize a zero vector")
        return Vector._wrap(self._data / length)

    def cross_product(self, other: "Vector") -> "Vector":
        """
        Implements classical cross product u x v in R^3
        Defines a vector orthogonal to u and v with magnitude
        equal to the parallelogram area.
        """
        self._check_operand(other)
        if len(self) != 3:
            raise DimensionMismatchError("Cross product is only defined in R^3")
        return Vector._wrap(np.cross(self._data, other._data))

    def cosine_similarity(self, other: "Vector") -> float:
        self._check_operand(other)
        u_len = self.magnitude()
        v_len = other.magnitude()
        if u_len == 0 or v_len == 0:
            raise ZeroVectorError("Angle undefined for zero-length vector")

        cos_theta = float((self._data / u_len) @ (other._data / v_len))
        # clamp between [-1, 1]
        return max(-1.0, min(1.0, cos_theta))

    def angle_to(self, other: "Vector") -> float:
        """Angle between the two vectors in radians, in [0, pi]."""
        return math.acos(self.cosine_similarity(other))

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if not is_number(scalar):
            return NotImplemented
        return self.multiply_by_scalar(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return Vector._wrap(-self._data)

    def __abs__(self) -> float:
        return self.magnitude()

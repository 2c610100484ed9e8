# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import numbers
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    TypeMismatchError,
)
from .utils import is_number, is_sequence, scale_tol

logger = logging.getLogger(__name__)

# Cofactor expansion is O(n!), warn before running it on anything bigger.
COFACTOR_WARN_SIZE: int = 8


def _minor(A: np.ndarray, r: int, c: int) -> np.ndarray:
    n = A.shape[0]
    if n == 1:
        return A.copy()
    keep = np.arange(n)
    return A[keep != r][:, keep != c]


def _cofactor(A: np.ndarray, r: int, c: int) -> float:
    return ((-1) ** (r + c)) * _det(_minor(A, r, c))


def _det(A: np.ndarray) -> float:
    """
    Determinant of a square ndarray by cofactor expansion along row 0.
    """
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    determinant = 0.0
    for i in range(n):
        determinant += A[0, i] * _cofactor(A, 0, i)
    return float(determinant)


def _adjugate(A: np.ndarray) -> np.ndarray:
    # adj[i, j] = cofactor(j, i)
    n = A.shape[0]
    adj = np.empty_like(A)
    for i in range(n):
        for j in range(n):
            adj[i, j] = _cofactor(A, j, i)
    return adj


class Matrix:
    """
    Dense real matrix with rows >= 1 and columns >= 1.

    The backing array is private and read-only; every transforming
    operation returns a new Matrix and accessors return copies.

    Parameters
    ----------
    grid : sequence of sequences of real numbers
        Lists, tuples and ndarrays are accepted. Validation runs in order:
        non-empty, 2-D, rectangular, numeric.

    Raises
    ------
    InvalidArgumentError : when any of the four checks fails.
    """

    def __init__(self, grid: Sequence[Sequence[float]]):
        if not is_sequence(grid) or len(grid) == 0:
            raise InvalidArgumentError("Value must be a non-empty array")

        if not all(is_sequence(row) for row in grid):
            raise InvalidArgumentError("Array must be a 2D array")

        row_length = len(grid[0])
        if any(len(row) != row_length for row in grid):
            raise InvalidArgumentError("All rows must have the same length")
        if row_length == 0:
            raise InvalidArgumentError("Value must be a non-empty array")

        if not all(is_number(x) for row in grid for x in row):
            raise InvalidArgumentError("All elements must be numbers")

        self._data = np.array(grid, dtype=float)
        self._data.flags.writeable = False

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        m = cls.__new__(cls)
        m._data = data
        m._data.flags.writeable = False
        return m

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        _check_size(n)
        return cls._wrap(np.eye(n))

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        _check_size(rows)
        _check_size(columns)
        return cls._wrap(np.zeros((rows, columns)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.tolist()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.is_equal_to(other)

    __hash__ = None

    @property
    def shape(self) -> Tuple[int, int]:
        return self.get_dimensions()

    def tolist(self) -> List[List[float]]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def get_dimensions(self) -> Tuple[int, int]:
        rows, columns = self._data.shape
        return rows, columns

    def is_square(self) -> bool:
        rows, columns = self.get_dimensions()
        return rows == columns

    def is_null_matrix(self) -> bool:
        return not np.any(self._data)

    def get_leading_diagonal(self) -> List[float]:
        if not self.is_square():
            return []
        return np.diag(self._data).tolist()

    def is_diagonal(self) -> bool:
        """
        True for a square matrix whose off-diagonal cells are all zero and
        whose leading diagonal has no zero entry. Non-square matrices are
        never diagonal.
        """
        if not self.is_square():
            return False
        if 0 in self.get_leading_diagonal():
            return False
        off_diagonal = ~np.eye(self._data.shape[0], dtype=bool)
        return not np.any(self._data[off_diagonal])

    def is_unit_matrix(self) -> bool:
        return self.is_diagonal() and all(
            x == 1 for x in self.get_leading_diagonal()
        )

    def get_type_of_matrix(self) -> str:
        """
        Classify the matrix, first match wins:
        row, column, zero, unit, diagonal, square, rectangular.
        """
        rows, columns = self.get_dimensions()

        if rows == 1 and columns > 1:
            return "row"
        if columns == 1 and rows > 1:
            return "column"
        if self.is_null_matrix():
            return "zero"
        if self.is_unit_matrix():
            return "unit"
        if self.is_diagonal():
            return "diagonal"
        if self.is_square():
            return "square"
        return "rectangular"

    def get_row(self, index: int) -> List[float]:
        rows, _ = self.get_dimensions()
        if not _valid_index(index, rows):
            raise IndexOutOfRangeError(f"Invalid row index {index!r}")
        return self._data[index].tolist()

    def get_column(self, index: int) -> List[float]:
        _, columns = self.get_dimensions()
        if not _valid_index(index, columns):
            raise IndexOutOfRangeError(f"Invalid column index {index!r}")
        return self._data[:, index].tolist()

    def get_trace(self) -> float:
        self._require_square()
        return float(np.trace(self._data))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def is_conformal_to(self, other: "Matrix") -> bool:
        _require_matrix(other)
        return self.get_dimensions() == other.get_dimensions()

    def is_equal_to(self, other: "Matrix") -> bool:
        _require_matrix(other)
        if not self.is_conformal_to(other):
            return False
        return bool(np.array_equal(self._data, other._data))

    def is_close_to(self, other: "Matrix", tol: Optional[float] = None) -> bool:
        """
        Approximate equality: conformal and every cell within ``tol``.
        The default tolerance is scaled to the magnitude of ``self``.
        """
        _require_matrix(other)
        if not self.is_conformal_to(other):
            return False
        if tol is None:
            tol = scale_tol(self._data)
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=tol))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _require_conformal(self, other) -> None:
        _require_matrix(other)
        if not self.is_conformal_to(other):
            raise DimensionMismatchError("Matrices must be conformal")

    def plus(self, other: "Matrix") -> "Matrix":
        self._require_conformal(other)
        return Matrix._wrap(self._data + other._data)

    def minus(self, other: "Matrix") -> "Matrix":
        self._require_conformal(other)
        return Matrix._wrap(self._data - other._data)

    def scalar_multiply_by(self, k: float) -> "Matrix":
        if not is_number(k):
            raise InvalidArgumentError("Value must be a number")
        return Matrix._wrap(self._data * k)

    def multiplied_by(self, other: "Matrix") -> "Matrix":
        """
        Matrix product self @ other.

        A unit-classified ``other`` returns a copy of ``self`` before the
        shape check runs.
        """
        _require_matrix(other)

        if other.get_type_of_matrix() == "unit":
            logger.debug("multiplied_by(): identity operand, returning copy")
            return Matrix._wrap(self._data.copy())

        _, col1 = self.get_dimensions()
        row2, _ = other.get_dimensions()
        if col1 != row2:
            raise DimensionMismatchError(
                "Matrices are not conformal for multiplication"
            )
        return Matrix._wrap(self._data @ other._data)

    def get_transpose(self) -> "Matrix":
        return Matrix._wrap(self._data.T.copy())

    # ------------------------------------------------------------------
    # Linear algebra
    # ------------------------------------------------------------------

    def _require_square(self) -> None:
        if not self.is_square():
            raise InvalidArgumentError("Matrix must be square")

    def _warn_if_large(self, op: str) -> None:
        n = self._data.shape[0]
        if n > COFACTOR_WARN_SIZE:
            logger.warning(
                f"{op}(): cofactor expansion on a {n}x{n} matrix – O(n!)"
            )

    def _require_cell(self, r: int, c: int) -> None:
        n = self._data.shape[0]
        if not (_valid_index(r, n) and _valid_index(c, n)):
            raise IndexOutOfRangeError(f"Invalid cell index ({r!r}, {c!r})")

    def get_minor(self, r: int, c: int) -> "Matrix":
        """
        The matrix without row ``r`` and column ``c``. A 1x1 matrix has
        nothing left to remove and returns a copy of itself.
        """
        self._require_square()
        self._require_cell(r, c)
        return Matrix._wrap(_minor(self._data, r, c))

    def get_cofactor(self, r: int, c: int) -> float:
        self._require_square()
        self._require_cell(r, c)
        self._warn_if_large("get_cofactor")
        return _cofactor(self._data, r, c)

    def get_determinant(self) -> float:
        self._require_square()
        self._warn_if_large("get_determinant")
        return _det(self._data)

    def get_inverse(self) -> "Matrix":
        """
        Inverse via the adjugate: A^{-1} = adj(A) / det(A).

        Raises
        ------
        InvalidArgumentError : if the matrix is not square, or if the
            determinant is exactly zero (no tolerance is applied).
        """
        self._require_square()
        self._warn_if_large("get_inverse")
        determinant = _det(self._data)
        if determinant == 0:
            logger.debug(f"get_inverse(): singular matrix {self.tolist()}")
            raise InvalidArgumentError("Matrix is singular")

        if self._data.shape[0] == 1:
            return Matrix._wrap(np.array([[1 / self._data[0, 0]]]))
        return Matrix._wrap(_adjugate(self._data) / determinant)

    def get_adjoint(self) -> "Matrix":
        """Transpose of the cofactor matrix; [[1]] for a 1x1 matrix."""
        self._require_square()
        self._warn_if_large("get_adjoint")
        if self._data.shape[0] == 1:
            return Matrix._wrap(np.ones((1, 1)))
        return Matrix._wrap(_adjugate(self._data))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, k):
        if not is_number(k):
            return NotImplemented
        return self.scalar_multiply_by(k)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiplied_by(other)


def _require_matrix(value) -> None:
    if not isinstance(value, Matrix):
        raise TypeMismatchError(
            f"Value must be of type Matrix, got: {type(value).__name__}"
        )


def _valid_index(index, size: int) -> bool:
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        return False
    return 0 <= index < size


def _check_size(n) -> None:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise InvalidArgumentError(f"Size must be a positive integer, got: {n!r}")

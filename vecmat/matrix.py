# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense rectangular matrix of real numbers.
"""

from numbers import Real
from typing import Callable, Optional, Tuple, Union

import numpy as np

from . import initializers
from .errors import DimensionMismatchError
from .matrix_functions import cofactor, cofactor_matrix, det, inverse, minor
from .utils import EQUALITY_TOL, as_float_array, check_index, initializer_arity
from .vector import Vector

Initializer = Callable[..., float]


class Matrix:
    """
    rows-by-columns grid of floats.

    Elements are indexed from 0, ``A[0, 0]`` is the top-left entry.
    Arithmetic returns new matrices; only ``A[r, c] = x`` and
    `set_values` mutate in place.

    Example
    -------
    >>> from vecmat import Matrix, increment
    >>> A = Matrix.from_function(2, 2, increment)
    >>> A.determinant()
    -2.0
    """

    # keep numpy scalars from broadcasting over us, so 2.0 * A hits __rmul__
    __array_ufunc__ = None

    def __init__(self, elements):
        """
        Parameters
        ----------
        elements : nested sequence | (m, n) ndarray | Matrix
            A float64 ndarray is adopted without copying. Passing another
            Matrix makes a deep copy.
        """
        if isinstance(elements, Matrix):
            elements = elements._elements.copy()
        arr = as_float_array(elements, ndim=2)
        if arr.shape[0] < 1 or arr.shape[1] < 1:
            raise ValueError(
                f"A matrix needs at least one row and one column, got {arr.shape}"
            )
        self._elements = arr

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        return cls(np.zeros((rows, columns)))

    @classmethod
    def from_function(
        cls, rows: int, columns: int, initializer: Initializer
    ) -> "Matrix":
        """
        Build a matrix by calling `initializer` for every cell.

        `initializer` is either ``f(row, col)`` or
        ``f(row, col, rows, columns)``; row and col start at 1.
        """
        A = cls.zeros(rows, columns)
        A.set_values(initializer)
        return A

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        return cls.from_function(n, n, initializers.identity)

    def copy(self) -> "Matrix":
        return Matrix(self)

    def set_values(self, initializer: Initializer) -> None:
        """Overwrite every cell with `initializer` (see `from_function`)."""
        arity = initializer_arity(initializer)
        rows, columns = self.shape
        for r in range(rows):
            for c in range(columns):
                args = (r + 1, c + 1) if arity == 2 else (r + 1, c + 1, rows, columns)
                self._elements[r, c] = initializer(*args)

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._elements.shape[0]

    @property
    def columns(self) -> int:
        return self._elements.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.columns

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    def same_dimensions(self, other: "Matrix") -> bool:
        return self.shape == other.shape

    def _cell(self, index: Tuple[int, int]) -> Tuple[int, int]:
        r, c = index
        return check_index(r, self.rows, "row"), check_index(c, self.columns, "column")

    def __getitem__(self, index: Tuple[int, int]) -> float:
        return float(self._elements[self._cell(index)])

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        self._elements[self._cell(index)] = value

    def row_vector(self, row: int) -> Vector:
        """Copy of row `row`; later writes to either side stay separate."""
        return Vector(self._elements[check_index(row, self.rows, "row"), :].copy())

    def column_vector(self, column: int) -> Vector:
        """Copy of column `column`."""
        return Vector(self._elements[:, check_index(column, self.columns, "column")].copy())

    def to_numpy(self) -> np.ndarray:
        return self._elements.copy()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add(self, other: "Matrix") -> "Matrix":
        if not self.same_dimensions(other):
            raise DimensionMismatchError(
                f"Cannot add a {self.rows}x{self.columns} matrix "
                f"and a {other.rows}x{other.columns} matrix"
            )
        return Matrix(self._elements + other._elements)

    def subtract(self, other: "Matrix") -> "Matrix":
        return self.add(other.scale(-1))

    def scale(self, c: float) -> "Matrix":
        if not isinstance(c, Real):
            raise TypeError(f"Can only scale by a real number, got {type(c).__name__}")
        return Matrix(c * self._elements)

    def multiply(self, other: Union["Matrix", Vector]) -> Union["Matrix", Vector]:
        """
        Matrix product, or matrix-vector product when `other` is a Vector.

        Cell [r, c] of the result is the dot product of row r of self
        with column c of `other`. Requires self.columns == other.rows
        (self.columns == other.dimensions for a vector).
        """
        if isinstance(other, Vector):
            if other.dimensions != self.columns:
                raise DimensionMismatchError(
                    f"Cannot multiply a {self.rows}x{self.columns} matrix "
                    f"by a {other.dimensions}-dimensional vector"
                )
            return Vector(self._elements @ other.to_numpy())
        if isinstance(other, Matrix):
            if self.columns != other.rows:
                raise DimensionMismatchError(
                    f"Cannot multiply {self.rows}x{self.columns} by "
                    f"{other.rows}x{other.columns}: columns of the first "
                    "matrix must equal rows of the second"
                )
            return Matrix(self._elements @ other._elements)
        raise TypeError(f"Cannot multiply a Matrix by {type(other).__name__}")

    def transpose(self) -> "Matrix":
        return Matrix(self._elements.T.copy())

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def minor(self, row: int, column: int) -> "Matrix":
        """This matrix without `row` and `column`."""
        return Matrix(minor(self._elements, row, column))

    def cofactor(self, row: int, column: int) -> float:
        return cofactor(self._elements, row, column)

    def cofactor_matrix(self) -> "Matrix":
        return Matrix(cofactor_matrix(self._elements))

    def determinant(self) -> float:
        """Determinant by first-row cofactor expansion (square only)."""
        return det(self._elements)

    def inverse(self) -> "Matrix":
        """Inverse of a 1x1 or 2x2 non-singular matrix."""
        return Matrix(inverse(self._elements))

    def equals(self, other: "Matrix", tol: Optional[float] = None) -> bool:
        """Same shape and every element within `tol` (EQUALITY_TOL)."""
        if not self.same_dimensions(other):
            return False
        tol = EQUALITY_TOL if tol is None else tol
        return bool(np.all(np.abs(self._elements - other._elements) <= tol))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Real):
            return self.scale(other)
        if isinstance(other, (Matrix, Vector)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return self.scale(other)

    def __matmul__(self, other):
        if not isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> "Matrix":
        return self.scale(-1)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._elements.tolist()})"

    def __str__(self) -> str:
        lines = [f"{self.rows}x{self.columns} Matrix:"]
        for row in self._elements:
            lines.append("|\t" + "".join(f"{x:g} \t" for x in row) + "|")
        return "\n".join(lines)

    def to_array_string(self) -> str:
        """Rows as ``{a,b,c,},`` literals, one per line."""
        return "\n".join(
            "{" + "".join(f"{x:g}," for x in row) + "}," for row in self._elements
        )

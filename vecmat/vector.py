# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vector operations in python
"""

import math
from numbers import Real
from typing import Iterator, Optional

import numpy as np

from .errors import DimensionMismatchError, LinearAlgebraError
from .utils import EQUALITY_TOL, as_float_array, check_index


class Vector:
    """
    Fixed-length vector of real numbers.

    Components are indexed from 0, ``v[0]`` is the first component.
    Every arithmetic operation returns a new Vector and leaves its
    operands untouched; only ``v[i] = x`` mutates.
    """

    # keep numpy scalars from broadcasting over us, so 2.0 * v hits __rmul__
    __array_ufunc__ = None

    def __init__(self, components):
        """
        Parameters
        ----------
        components : sequence of float | (n,) ndarray | Vector
            A float64 ndarray is adopted without copying. Passing another
            Vector makes a deep copy.
        """
        if isinstance(components, Vector):
            components = components._components.copy()
        self._components = as_float_array(components, ndim=1)

    @classmethod
    def zeros(cls, dimensions: int) -> "Vector":
        if dimensions < 0:
            raise ValueError(f"dimensions must be >= 0, got {dimensions}")
        return cls(np.zeros(dimensions))

    def copy(self) -> "Vector":
        return Vector(self)

    @property
    def dimensions(self) -> int:
        return self._components.shape[0]

    def __len__(self) -> int:
        return self.dimensions

    def __iter__(self) -> Iterator[float]:
        return iter(self._components.tolist())

    def __getitem__(self, index: int) -> float:
        return float(self._components[check_index(index, self.dimensions, "component")])

    def __setitem__(self, index: int, value: float) -> None:
        self._components[check_index(index, self.dimensions, "component")] = value

    def to_numpy(self) -> np.ndarray:
        return self._components.copy()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._components.tolist()})"

    def __str__(self) -> str:
        return "[ " + "".join(f"{x:g} " for x in self._components) + "]"

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def _require_same_dimensions(self, other: "Vector", op: str) -> None:
        if self.dimensions != other.dimensions:
            raise DimensionMismatchError(
                f"Cannot {op} vectors of dimensions "
                f"{self.dimensions} and {other.dimensions}"
            )

    def scale(self, c: float) -> "Vector":
        if not isinstance(c, Real):
            raise TypeError(f"Can only scale by a real number, got {type(c).__name__}")
        return Vector(c * self._components)

    def add(self, other: "Vector") -> "Vector":
        self._require_same_dimensions(other, "add")
        return Vector(self._components + other._components)

    def subtract(self, other: "Vector") -> "Vector":
        return self.add(other.scale(-1))

    def dot(self, other: "Vector") -> float:
        """
        Implements the scalar (dot) product between two vectors.
        """
        self._require_same_dimensions(other, "dot")
        return float(self._components @ other._components)

    @property
    def sqr_magnitude(self) -> float:
        """Squared length, skips the square root of `magnitude`."""
        return self.dot(self)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude)

    @property
    def normalized(self) -> "Vector":
        """Unit vector in the same direction."""
        mag = self.magnitude
        if mag == 0:
            raise LinearAlgebraError("Cannot normalize a zero-length vector")
        return Vector(self._components / mag)

    def angle(self, other: "Vector") -> float:
        """Angle to `other` in radians."""
        mags = self.magnitude * other.magnitude
        if mags == 0:
            raise LinearAlgebraError("Angle undefined for zero-length vector")
        cos_theta = self.dot(other) / mags
        # clamp angle radians between [-1, 1]
        cos_theta = max(-1.0, min(1.0, cos_theta))
        return math.acos(cos_theta)

    def cross(self, other: "Vector") -> "Vector":
        """
        Implements classical cross product u x v in R^3
        Defines a vector orthogonal to u and v with magnitude
        equal to the parallelogram area.
        """
        if self.dimensions != 3 or other.dimensions != 3:
            raise DimensionMismatchError(
                "Cross product needs two 3-dimensional vectors, got "
                f"{self.dimensions} and {other.dimensions}"
            )
        a1, a2, a3 = self._components
        b1, b2, b3 = other._components
        return Vector([a2 * b3 - a3 * b2, a3 * b1 - a1 * b3, a1 * b2 - a2 * b1])

    def equals(self, other: "Vector", tol: Optional[float] = None) -> bool:
        """Same dimensions and every component within `tol` (EQUALITY_TOL)."""
        if self.dimensions != other.dimensions:
            return False
        tol = EQUALITY_TOL if tol is None else tol
        return bool(np.all(np.abs(self._components - other._components) <= tol))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self) -> "Vector":
        return self.scale(-1)

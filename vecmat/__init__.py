# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
vecmat
======

Small fixed-size `Vector` and `Matrix` value types with the textbook
operations: arithmetic, dot/cross products, transpose, determinant by
cofactor expansion and the closed-form 1x1 / 2x2 inverse.

Public API
~~~~~~~~~~
- Value types
    - `Vector`, `Matrix`
- Matrix utilities
    - `det`, `minor`, `cofactor`, `cofactor_matrix`, `inverse`
- Initializers for `Matrix.from_function`
    - `checkerboard`, `increment`, `identity`, and `get_initializer` to
      look one up by name
- Errors
    - `LinearAlgebraError`, `DimensionMismatchError`, `NotSquareError`,
      `SingularMatrixError`, `UnsupportedOperationError`

Indexing is 0-based everywhere except the initializers, which receive
1-based row/column numbers.

Example
-------
>>> import vecmat as vm
>>> A = vm.Matrix([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
>>> A.determinant()
-306.0
>>> vm.Vector([1, 2, 0]).cross(vm.Vector([2, 1, 0]))
Vector([0.0, 0.0, -3.0])
"""

from importlib.metadata import version as _pkg_version

from .errors import (
    DimensionMismatchError,
    LinearAlgebraError,
    NotSquareError,
    SingularMatrixError,
    UnsupportedOperationError,
)
from .initializers import checkerboard, get_initializer, identity, increment
from .matrix import Matrix
from .matrix_functions import (
    cofactor,
    cofactor_matrix,
    det,
    inverse,
    minor,
)
from .utils import COFACTOR_WARN_SIZE, EQUALITY_TOL
from .vector import Vector

__all__ = [
    "Vector",
    "Matrix",
    "det",
    "minor",
    "cofactor",
    "cofactor_matrix",
    "inverse",
    "checkerboard",
    "increment",
    "identity",
    "get_initializer",
    "LinearAlgebraError",
    "DimensionMismatchError",
    "NotSquareError",
    "SingularMatrixError",
    "UnsupportedOperationError",
    "EQUALITY_TOL",
    "COFACTOR_WARN_SIZE",
]

# package version, from the installed distribution metadata
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# vecmat only logs; handlers are left to the application
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

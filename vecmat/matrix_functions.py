# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Determinant, cofactors and the small-matrix inverse.

These work on plain float ndarrays; `vecmat.Matrix` wraps them.
"""

import logging

import numpy as np

from .errors import NotSquareError, SingularMatrixError, UnsupportedOperationError
from .utils import COFACTOR_WARN_SIZE, check_index

logger = logging.getLogger(__name__)


def _require_square(A: np.ndarray, what: str) -> int:
    m, n = A.shape
    if m != n:
        raise NotSquareError(
            f"The {what} is undefined for non-square matrices ({m}x{n})."
        )
    return n


def _warn_if_large(n: int, caller: str) -> None:
    if n >= COFACTOR_WARN_SIZE:
        logger.warning(f"{caller}(): cofactor expansion on {n}x{n} – O(n!)")


def minor(A: np.ndarray, row: int, col: int) -> np.ndarray:
    """
    Return A with `row` and `col` deleted, as a new array (never a view).
    """
    A = np.asarray(A, dtype=float)
    m, n = A.shape
    row = check_index(row, m, "row")
    col = check_index(col, n, "column")
    return A[np.arange(m) != row][:, np.arange(n) != col]


def _expand(A: np.ndarray) -> float:
    """Cofactor expansion along the first row; A is square."""
    n = A.shape[0]
    if n == 0:
        return 1.0  # empty product
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    total = 0.0
    sign = 1.0
    for c in range(n):
        # first row and column c removed
        sub = A[1:, np.arange(n) != c]
        total += sign * (A[0, c] * _expand(sub))
        sign = -sign
    return total


def det(A: np.ndarray) -> float:
    """
    Calculate the determinant of n-by-n matrix A by cofactor expansion
    along the first row:

        det(A) = sum_c (-1)^c * A[0, c] * det(minor(A, 0, c))

    Terms are summed left to right starting with a + sign, so
    integer-valued input gives an exact result. Cost is O(n!).
    """
    A = np.asarray(A, dtype=float)
    n = _require_square(A, "determinant")
    _warn_if_large(n, "det")
    d = _expand(A)
    logger.debug(f"det(): {n}x{n} -> {d}")
    return d


def cofactor(A: np.ndarray, row: int, col: int) -> float:
    """(-1)^(row+col) times the determinant of the (row, col) minor."""
    A = np.asarray(A, dtype=float)
    n = _require_square(A, "cofactor")
    _warn_if_large(n - 1, "cofactor")
    return ((-1) ** (row + col)) * _expand(minor(A, row, col))


def cofactor_matrix(A: np.ndarray) -> np.ndarray:
    """Matrix C with C[i, j] = cofactor(A, i, j)."""
    A = np.asarray(A, dtype=float)
    n = _require_square(A, "cofactor matrix")
    _warn_if_large(n - 1, "cofactor_matrix")

    C = np.empty_like(A)
    for i in range(n):
        for j in range(n):
            C[i, j] = ((-1) ** (i + j)) * _expand(minor(A, i, j))
    return C


def inverse(A: np.ndarray) -> np.ndarray:
    """
    Closed-form inverse of a 1x1 or 2x2 matrix.

    Raises
    ------
    NotSquareError : A is not square.
    UnsupportedOperationError : A is 3x3 or larger.
    SingularMatrixError : det(A) is exactly 0.
    """
    A = np.asarray(A, dtype=float)
    n = _require_square(A, "inverse")
    if n > 2:
        raise UnsupportedOperationError(
            f"inverse() is only implemented for 1x1 and 2x2 matrices, got {n}x{n}"
        )

    logger.debug(f"inverse(): {n}x{n}")
    d = det(A)
    if d == 0:
        raise SingularMatrixError("Matrices with a determinant of 0 have no inverse")

    if n == 1:
        return np.array([[1.0 / A[0, 0]]])
    return np.array(
        [
            [A[1, 1], -A[0, 1]],
            [-A[1, 0], A[0, 0]],
        ]
    ) / d

# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Cell initializers for Matrix.from_function.

Initializers receive 1-based row/column numbers, the way the entries are
written on paper (a_11 is the top-left element).
"""


def checkerboard(row: int, column: int, rows: int, columns: int) -> float:
    """Alternating +1 / -1 pattern, as used for a matrix of cofactors."""
    if (row * columns + rows + column) % 2 == 1:
        return 1.0
    return -1.0


def increment(row: int, column: int, rows: int, columns: int) -> float:
    """Row-major count starting at 1, e.g. [[1, 2], [3, 4]]."""
    return float((row - 1) * columns + column)


def identity(row: int, column: int) -> float:
    return 1.0 if row == column else 0.0


INITIALIZERS = {
    "checkerboard": checkerboard,
    "increment": increment,
    "identity": identity,
}


def get_initializer(name: str):
    """
    Look up an initializer by name.

    Raises:
        KeyError: If the name is not one of INITIALIZERS.
    """
    if name not in INITIALIZERS:
        raise KeyError(
            f"Unknown initializer: {name}. Available: {list(INITIALIZERS.keys())}"
        )
    return INITIALIZERS[name]

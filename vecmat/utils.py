# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import inspect
import operator
from typing import Callable

import numpy as np

# Largest per-element difference at which two vectors/matrices compare equal
EQUALITY_TOL: float = 1e-5

# Cofactor expansion is O(n!); warn from this size upwards
COFACTOR_WARN_SIZE: int = 9


def as_float_array(data, ndim: int) -> np.ndarray:
    """
    Return `data` as a float64 ndarray of rank `ndim`.

    A float64 ndarray of the right rank is returned as-is (no copy), so the
    caller hands ownership of its storage to the new value.
    """
    try:
        arr = np.asarray(data, dtype=float)
    except ValueError as e:
        raise ValueError(f"Expected a rectangular {ndim}-D array of numbers") from e
    if arr.ndim != ndim:
        raise ValueError(f"Expected a {ndim}-D array, got shape {arr.shape}")
    return arr


def initializer_arity(fn: Callable[..., float]) -> int:
    """
    Return 2 for ``fn(row, col)`` initializers and 4 for
    ``fn(row, col, rows, cols)`` initializers.
    """
    try:
        params = list(inspect.signature(fn).parameters.values())
    except (TypeError, ValueError) as e:
        raise TypeError(f"Cannot inspect initializer {fn!r}") from e

    if any(p.kind is p.VAR_POSITIONAL for p in params):
        return 4
    positional = [
        p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]
    required = [p for p in positional if p.default is p.empty]
    for arity in (2, 4):
        if len(required) <= arity <= len(positional):
            return arity
    raise TypeError(
        f"Initializer must take (row, col) or (row, col, rows, cols), got {fn!r}"
    )


def check_index(index: int, size: int, what: str) -> int:
    """Return `index` if it lies in [0, size), else raise IndexError."""
    index = operator.index(index)
    if not 0 <= index < size:
        raise IndexError(f"{what} index {index} is outside [0, {size})")
    return index

# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np
import pytest

from vecmat.errors import DimensionMismatchError, LinearAlgebraError
from vecmat.vector import Vector

TEST_ITERATIONS = 50
logger = logging.getLogger(__name__)


def _random_pair(rng, n):
    return Vector(rng.normal(size=n)), Vector(rng.normal(size=n))


def test_vec_add():
    assert Vector([5, 5, 5]) == Vector([1, 1, 1]) + Vector([4, 4, 4])
    assert Vector([5, 5, 5]) == Vector([1, 1, 1]).add(Vector([4, 4, 4]))


def test_vec_subtract():
    assert Vector([-3, 0, 3]) == Vector([1, 2, 3]) - Vector([4, 2, 0])


def test_scalar_mul():
    assert Vector([10, 10, 10]) == 5 * Vector([2, 2, 2])
    assert Vector([10, 10, 10]) == Vector([2, 2, 2]) * 5
    assert Vector([10, 10, 10]) == np.float64(5.0) * Vector([2, 2, 2])
    assert Vector([-2, 0, 2]) == -Vector([2, 0, -2])


def test_dot_product():
    assert Vector([5, 5, 5]).dot(Vector([5, 5, 5])) == 75


def test_length():
    # Test with perfect square trinomials
    for v in (Vector([4, 0, 0]), Vector([0, 4, 0]), Vector([0, 0, 4])):
        assert v.magnitude == 4
        assert v.sqr_magnitude == 16
    assert Vector([1, 1, 1]).magnitude == pytest.approx(1.7320508076)


def test_cross_product():
    assert Vector([0, 0, -3]) == Vector([1, 2, 0]).cross(Vector([2, 1, 0]))
    assert Vector([-10, 4, 8]) == Vector([2, -1, 3]).cross(Vector([0, 4, -2]))

    # Canonical right-hand basis check, should result in vector along k hat
    assert Vector([0, 0, 1]) == Vector([1, 0, 0]).cross(Vector([0, 1, 0]))

    assert Vector([-15, -2, 39]) == Vector([3, -3, 1]).cross(Vector([4, 9, 2]))

    # Parallel vectors, result should be 0 vector
    assert Vector([0, 0, 0]) == Vector([2, 4, 6]).cross(Vector([1, 2, 3]))

    # Crossing with the zero vector gives the zero vector
    assert Vector([0, 0, 0]) == Vector([0, 0, 0]).cross(Vector([5, -7, 1]))


def test_normalized_cross_product():
    n = Vector([6, -4, 7]).cross(Vector([-3, -9, 8]))
    assert n == Vector([31, -69, -66])

    expected = np.array([31.0, -69.0, -66.0])
    expected /= np.linalg.norm(expected)
    np.testing.assert_allclose(n.normalized.to_numpy(), expected, atol=1e-12)


@pytest.mark.parametrize(
    "u_vals,v_vals,expected",
    [
        ((1, 0, 0), (0, 1, 0), math.pi / 2),
        ((1, 2, 3), (1, 2, 3), 0.0),
        ((1, 0, 0), (-1, 0, 0), math.pi),
        ((1, 0, 0), (1, 1, 0), math.pi / 4),
        ((2, -1, 3), (0, 4, -2), 2.21131864),
        ((123456, -98765, 50), (-23456, 8765, 100), 2.824433709487314),
        ((1e-8, 0, 0), (0, 1e-8, 0), math.pi / 2),
        ((3, -3, 1), (4, 9, 2), 1.8720947029995874),
    ],
)
def test_angle(u_vals, v_vals, expected):
    assert Vector(u_vals).angle(Vector(v_vals)) == pytest.approx(expected, abs=1e-7)


def test_vector_properties_random():
    rng = np.random.default_rng(0)
    for _ in range(TEST_ITERATIONS):
        n = int(rng.integers(1, 8))
        a, b = _random_pair(rng, n)
        logger.debug(f"\na = {a}\nb = {b}")

        assert a.dot(b) == pytest.approx(b.dot(a))
        assert a + b == b + a
        assert a - b == -1 * (b - a)
        assert a.normalized.magnitude == pytest.approx(1.0)


def test_cross_product_properties_random():
    rng = np.random.default_rng(1)
    for _ in range(TEST_ITERATIONS):
        a, b = _random_pair(rng, 3)
        c = a.cross(b)
        assert c == -1 * b.cross(a)
        assert a.dot(c) == pytest.approx(0.0, abs=1e-10)
        assert b.dot(c) == pytest.approx(0.0, abs=1e-10)


def test_dimension_mismatch_raises():
    a = Vector([1, 2, 3])
    b = Vector([1, 2])
    with pytest.raises(DimensionMismatchError):
        a + b
    with pytest.raises(DimensionMismatchError):
        a - b
    with pytest.raises(DimensionMismatchError):
        a.dot(b)
    # still a ValueError for callers that only know the builtin
    with pytest.raises(ValueError):
        a.dot(b)


def test_cross_product_needs_three_dimensions():
    with pytest.raises(DimensionMismatchError):
        Vector([1, 0]).cross(Vector([0, 1]))
    with pytest.raises(DimensionMismatchError):
        Vector([1, 0, 0, 0]).cross(Vector([0, 1, 0, 0]))


def test_zero_length_vector_raises():
    zero = Vector.zeros(3)
    with pytest.raises(LinearAlgebraError):
        zero.normalized
    with pytest.raises(LinearAlgebraError):
        zero.angle(Vector([1, 0, 0]))


def test_construction_and_copy():
    v = Vector.zeros(4)
    assert v.dimensions == 4 and len(v) == 4
    assert list(v) == [0.0, 0.0, 0.0, 0.0]
    assert Vector.zeros(0).dimensions == 0

    source = Vector([1, 2, 3])
    copy = Vector(source)
    copy[0] = 10
    assert source[0] == 1.0
    assert source.copy() == source

    # a float64 array is adopted, not copied
    storage = np.array([1.0, 2.0])
    adopted = Vector(storage)
    storage[0] = 5.0
    assert adopted[0] == 5.0

    with pytest.raises(ValueError):
        Vector([[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        Vector.zeros(-1)


def test_operations_leave_operands_untouched():
    a = Vector([1, 2, 3])
    b = Vector([4, 5, 6])
    a + b
    a - b
    3 * a
    a.cross(b)
    a.normalized
    assert a == Vector([1, 2, 3])
    assert b == Vector([4, 5, 6])


def test_equality_tolerance():
    assert Vector([1, 2]) == Vector([1 + 1e-6, 2])
    assert Vector([1, 2]) != Vector([1 + 1e-4, 2])
    assert Vector([1, 2]) != Vector([1, 2, 0])
    assert Vector([1, 2]).equals(Vector([1.1, 2]), tol=0.2)
    assert Vector([1, 2]) != [1, 2]


def test_foreign_operands_raise_type_error():
    with pytest.raises(TypeError):
        Vector([1, 2]) * "a"
    with pytest.raises(TypeError):
        Vector([1, 2]) + 1


def test_index_out_of_range_raises():
    v = Vector([1, 2, 3])
    assert v[2] == 3
    for i in (-1, 3):
        with pytest.raises(IndexError):
            v[i]
        with pytest.raises(IndexError):
            v[i] = 0.0
    # nothing was written through a wrapped index
    assert v == Vector([1, 2, 3])


def test_scale_rejects_non_real():
    v = Vector([1, 2])
    with pytest.raises(TypeError):
        v.scale(np.array([1, 2]))
    with pytest.raises(TypeError):
        v.scale(1j)
    assert v.scale(np.float64(2.0)) == Vector([2, 4])


def test_string_rendering():
    v = Vector([1, 2.5, -3])
    assert str(v) == "[ 1 2.5 -3 ]"
    assert repr(v) == "Vector([1.0, 2.5, -3.0])"
    assert str(Vector.zeros(0)) == "[ ]"

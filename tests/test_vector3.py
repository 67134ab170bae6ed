"""
===============================================================================
QUATKIT - Vector3 Test Suite
===============================================================================
Tests for the immutable 3-vector: construction, arithmetic, dot/cross
products, length and normalization.
===============================================================================
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from quatkit.core.errors import ZeroLengthError
from quatkit.core.vector3 import X_AXIS, Y_AXIS, Z_AXIS, ZERO, Vector3, as_vector3


class TestConstruction:
    """Tests for building vectors."""

    def test_components(self):
        v = Vector3(1.0, -2.0, 3.5)
        assert (v.x, v.y, v.z) == (1.0, -2.0, 3.5)

    def test_from_array(self):
        v = Vector3.from_array(np.array([4.0, 5.0, 6.0]))
        assert v == Vector3(4.0, 5.0, 6.0)

    def test_from_array_wrong_shape_raises(self):
        with pytest.raises(ValueError):
            Vector3.from_array([1.0, 2.0])

    def test_as_vector3_passthrough(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert as_vector3(v) is v

    def test_as_vector3_from_list(self):
        assert as_vector3([1, 2, 3]) == Vector3(1.0, 2.0, 3.0)

    def test_as_array_is_a_copy(self):
        v = Vector3(1.0, 2.0, 3.0)
        arr = v.as_array()
        arr[0] = 99.0
        assert v.x == 1.0

    def test_numpy_interop(self):
        assert_allclose(np.asarray(Vector3(1.0, 2.0, 3.0)), [1.0, 2.0, 3.0])

    def test_iteration(self):
        assert tuple(Vector3(1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)


class TestArithmetic:
    """Tests for vector arithmetic."""

    def test_add_sub(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(0.5, -1.0, 2.0)
        assert a + b == Vector3(1.5, 1.0, 5.0)
        assert a - b == Vector3(0.5, 3.0, 1.0)

    def test_scale_both_sides(self):
        v = Vector3(1.0, -2.0, 3.0)
        assert v * 2.0 == Vector3(2.0, -4.0, 6.0)
        assert 2.0 * v == v * 2.0
        assert v / 2.0 == Vector3(0.5, -1.0, 1.5)

    def test_negate(self):
        assert -Vector3(1.0, -2.0, 3.0) == Vector3(-1.0, 2.0, -3.0)

    def test_dot(self):
        assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, -5.0, 6.0)) == 12.0

    @pytest.mark.parametrize("a,b,expected", [
        (X_AXIS, Y_AXIS, Z_AXIS),
        (Y_AXIS, Z_AXIS, X_AXIS),
        (Z_AXIS, X_AXIS, Y_AXIS),
        (Y_AXIS, X_AXIS, -Z_AXIS),
    ])
    def test_cross_right_handed(self, a, b, expected):
        assert a.cross(b) == expected

    def test_cross_perpendicular(self, sampler):
        a = sampler.vector()
        b = sampler.vector()
        c = a.cross(b)
        assert_allclose(c.dot(a), 0.0, atol=1e-10)
        assert_allclose(c.dot(b), 0.0, atol=1e-10)


class TestLength:
    """Tests for length and normalization."""

    def test_length(self):
        v = Vector3(3.0, 4.0, 12.0)
        assert v.length() == 13.0
        assert v.length_squared() == 169.0

    def test_normalize(self):
        v = Vector3(0.0, 3.0, 4.0).normalize()
        assert_allclose(v.as_array(), [0.0, 0.6, 0.8], atol=1e-15)
        assert v.is_unit()

    def test_normalize_zero_raises(self):
        with pytest.raises(ZeroLengthError):
            ZERO.normalize()

    def test_zero_length_error_is_value_error(self):
        with pytest.raises(ValueError):
            ZERO.normalize()


class TestValueSemantics:

    def test_hashable(self):
        assert len({Vector3(1.0, 2.0, 3.0), Vector3(1.0, 2.0, 3.0)}) == 1

    def test_immutable_storage(self):
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(ValueError):
            v._v[0] = 5.0

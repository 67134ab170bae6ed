"""
===============================================================================
QUATKIT - Configuration Test Suite
===============================================================================
Tests for NumericConfig validation and YAML loading.
===============================================================================
"""

import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from quatkit.core.config import DEFAULT_CONFIG, NumericConfig, load_config
from quatkit.core.constants import ABS_TOLERANCE, GIMBAL_TOLERANCE
from quatkit.core.errors import ConfigError, ZeroLengthError
from quatkit.core.quaternion import (
    Quaternion,
    from_angle_axis,
    from_to,
    from_yaw_pitch_roll,
    to_yaw_pitch_roll,
    vrotate,
)
from quatkit.core.vector3 import X_AXIS, Z_AXIS, Vector3


class TestNumericConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.abs_tol == ABS_TOLERANCE
        assert DEFAULT_CONFIG.gimbal_tol == GIMBAL_TOLERANCE

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.abs_tol = 1.0

    @pytest.mark.parametrize("value", [0.0, -1e-9, "tiny", None, True])
    def test_invalid_values_raise(self, value):
        with pytest.raises(ConfigError):
            NumericConfig(abs_tol=value)

    def test_int_is_coerced_to_float(self):
        assert isinstance(NumericConfig(abs_tol=1).abs_tol, float)

    def test_with_overrides(self):
        config = DEFAULT_CONFIG.with_overrides({'angle_tol': 1e-6})
        assert config.angle_tol == 1e-6
        assert config.abs_tol == DEFAULT_CONFIG.abs_tol

    def test_unknown_override_raises(self):
        with pytest.raises(ConfigError, match="bogus"):
            DEFAULT_CONFIG.with_overrides({'bogus': 1.0})


class TestLoadConfig:
    """Tests for reading configuration from YAML files."""

    def test_none_returns_defaults(self):
        assert load_config(None) is DEFAULT_CONFIG

    def test_load_overrides(self, tmp_path, caplog):
        path = tmp_path / "numerics.yaml"
        path.write_text("numerics:\n  abs_tol: 1.0e-6\n  gimbal_tol: 1.0e-10\n")
        with caplog.at_level(logging.INFO, logger="quatkit.core.config"):
            config = load_config(path)
        assert config.abs_tol == 1e-6
        assert config.gimbal_tol == 1e-10
        assert config.zero_tol == DEFAULT_CONFIG.zero_tol
        assert "Loading numeric configuration" in caplog.text

    def test_empty_file_returns_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_file_without_numerics_section(self, tmp_path):
        path = tmp_path / "other.yaml"
        path.write_text("project: demo\n")
        assert load_config(path) == DEFAULT_CONFIG

    def test_non_mapping_root_raises(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_mapping_section_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("numerics: 3\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_unknown_key_raises(self, tmp_path):
        path = tmp_path / "unknown.yaml"
        path.write_text("numerics:\n  epsilon: 1.0e-3\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")


class TestConfiguredOperations:
    """A loaded configuration changes how degenerate inputs are detected."""

    @pytest.fixture
    def loose(self, tmp_path):
        path = tmp_path / "loose.yaml"
        path.write_text(
            "numerics:\n"
            "  zero_tol: 1.0e-3\n"
            "  antipodal_tol: 1.0e-3\n"
            "  gimbal_tol: 1.0e-3\n"
        )
        return load_config(path)

    def test_gimbal_tol_selects_lock_branch(self, loose, caplog):
        q = from_yaw_pitch_roll(0.3, np.pi / 2 - 0.01, 0.1)

        with caplog.at_level(logging.DEBUG, logger="quatkit.core.quaternion"):
            yaw, pitch, roll = to_yaw_pitch_roll(q)
        assert "Gimbal lock" not in caplog.text
        assert_allclose((yaw, pitch, roll), (0.3, np.pi / 2 - 0.01, 0.1), atol=1e-9)

        with caplog.at_level(logging.DEBUG, logger="quatkit.core.quaternion"):
            yaw, pitch, roll = to_yaw_pitch_roll(q, loose)
        assert "Gimbal lock" in caplog.text
        assert pitch == np.pi / 2
        assert roll == 0.0
        assert q.to_yaw_pitch_roll(loose) == (yaw, pitch, roll)

    def test_zero_tol_applies_to_normalize(self, loose):
        q = Quaternion(1e-4, 0.0, 0.0, 0.0)
        assert q.normalize() == Quaternion(1.0, 0.0, 0.0, 0.0)
        with pytest.raises(ZeroLengthError):
            q.normalize(loose)
        with pytest.raises(ZeroLengthError):
            Vector3(1e-4, 0.0, 0.0).normalize(loose)
        with pytest.raises(ZeroLengthError):
            from_angle_axis(0.5, Vector3(0.0, 1e-4, 0.0), loose)

    def test_zero_tol_applies_to_axis_fallback(self, loose):
        q = from_angle_axis(1e-4, X_AXIS)
        assert_allclose(q.axis().as_array(), X_AXIS.as_array(), atol=1e-12)
        assert q.axis(loose) == Z_AXIS

    def test_antipodal_tol_applies_to_from_to(self, loose, caplog):
        v = Vector3(-np.cos(1e-4), np.sin(1e-4), 0.0)
        assert_allclose(vrotate(from_to(X_AXIS, v), X_AXIS).as_array(), v.as_array(),
                        atol=1e-12)

        with caplog.at_level(logging.DEBUG, logger="quatkit.core.quaternion"):
            q = from_to(X_AXIS, v, loose)
        assert "Antipodal" in caplog.text
        assert_allclose(q.components, [0.0, 0.0, 0.0, 1.0], atol=1e-15)

"""
===============================================================================
QUATKIT - Numeric Configuration
===============================================================================
Tolerances used by the comparison utilities and by the degenerate-case
detection in the quaternion conversions.

Configuration is read from a YAML file whose optional ``numerics`` section
overrides the defaults:

    numerics:
      abs_tol: 1.0e-9
      angle_tol: 1.0e-9
      zero_tol: 1.0e-12
      antipodal_tol: 1.0e-12
      gimbal_tol: 1.0e-12

A loaded configuration is an immutable value. The operations that detect
degenerate input (normalize, from_angle_axis, axis, from_to,
to_yaw_pitch_roll and Vector3.normalize) take it as an optional ``config``
argument and fall back to DEFAULT_CONFIG. The comparison helpers take
abs_tol or angle_tol as an explicit tolerance.
===============================================================================
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from quatkit.core.constants import (
    ABS_TOLERANCE,
    ANGLE_TOLERANCE,
    ANTIPODAL_TOLERANCE,
    GIMBAL_TOLERANCE,
    ZERO_TOLERANCE,
)
from quatkit.core.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumericConfig:
    """
    Tolerance settings for approximate comparisons and degeneracy checks.

    Attributes
    ----------
    abs_tol : float
        Absolute tolerance for scalar, vector, and quaternion comparisons.
    angle_tol : float
        Absolute tolerance for angles compared modulo 2*pi.
    zero_tol : float
        Length below which a vector or quaternion is treated as zero.
    antipodal_tol : float
        Threshold on |u x v| below which from_to treats opposite-facing u
        and v as antipodal.
    gimbal_tol : float
        Threshold on 1 - |sin(pitch)| below which yaw-pitch-roll decoding
        takes the gimbal-lock branch.
    """

    abs_tol: float = ABS_TOLERANCE
    angle_tol: float = ANGLE_TOLERANCE
    zero_tol: float = ZERO_TOLERANCE
    antipodal_tol: float = ANTIPODAL_TOLERANCE
    gimbal_tol: float = GIMBAL_TOLERANCE

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(
                    f"Tolerance '{f.name}' must be a number, got {value!r}"
                )
            if not value > 0.0:
                raise ConfigError(
                    f"Tolerance '{f.name}' must be positive, got {value!r}"
                )
            object.__setattr__(self, f.name, float(value))

    def with_overrides(self, overrides: Dict[str, Any]) -> 'NumericConfig':
        """Return a copy with the given fields replaced."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(
                f"Unknown numeric setting(s): {', '.join(unknown)}. "
                f"Valid keys are: {', '.join(sorted(known))}"
            )
        return replace(self, **overrides)


DEFAULT_CONFIG = NumericConfig()


def load_config(config_path: Optional[Union[str, Path]] = None) -> NumericConfig:
    """
    Load numeric configuration from a YAML file.

    Args:
        config_path: Path to a YAML file. None returns the defaults.

    Returns:
        NumericConfig with the file's ``numerics`` overrides applied.

    Raises:
        FileNotFoundError: If the path does not exist.
        ConfigError: If the file is not a mapping or holds invalid values.
    """
    if config_path is None:
        return DEFAULT_CONFIG

    config_path = Path(config_path)
    logger.info("Loading numeric configuration from: %s", config_path)
    with open(config_path, 'r') as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return DEFAULT_CONFIG
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Configuration root must be a mapping, got {type(raw).__name__}"
        )

    numerics = raw.get('numerics') or {}
    if not isinstance(numerics, dict):
        raise ConfigError(
            f"'numerics' section must be a mapping, got {type(numerics).__name__}"
        )

    config = DEFAULT_CONFIG.with_overrides(numerics)
    logger.info("Numeric configuration: %s", config)
    return config

"""
Configuration loading for steptracker.

The body profile and log level can be given explicitly or through the
environment:

- ``STEPTRACKER_WEIGHT_KG``: body weight in kilograms
- ``STEPTRACKER_HEIGHT_M``: body height in metres
- ``STEPTRACKER_LOG_LEVEL``: logging level name
"""

import os
from typing import Mapping, Optional

from steptracker.constants import DEFAULT_HEIGHT_M, DEFAULT_LOG_LEVEL, DEFAULT_WEIGHT_KG
from steptracker.exceptions import ConfigurationError
from steptracker.metrics import BodyProfile

__all__ = ["load_profile", "get_log_level"]

WEIGHT_ENV = "STEPTRACKER_WEIGHT_KG"
HEIGHT_ENV = "STEPTRACKER_HEIGHT_M"
LOG_LEVEL_ENV = "STEPTRACKER_LOG_LEVEL"


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from e


def load_profile(
    weight_kg: Optional[float] = None,
    height_m: Optional[float] = None,
    env: Optional[Mapping[str, str]] = None,
) -> BodyProfile:
    """Resolve the body profile from arguments, environment and defaults.

    Explicit arguments win over environment variables, which win over
    DEFAULT_WEIGHT_KG / DEFAULT_HEIGHT_M.

    Args:
        weight_kg: Body weight in kilograms, or None to look it up
        height_m: Body height in metres, or None to look it up
        env: Environment mapping, os.environ when None

    Returns:
        BodyProfile with validated values

    Raises:
        ConfigurationError: If an environment value is not a number.
        ValidationError: If weight or height is not strictly positive.
    """
    env = os.environ if env is None else env
    if weight_kg is None:
        weight_kg = _env_float(env, WEIGHT_ENV, DEFAULT_WEIGHT_KG)
    if height_m is None:
        height_m = _env_float(env, HEIGHT_ENV, DEFAULT_HEIGHT_M)
    return BodyProfile(weight_kg=weight_kg, height_m=height_m)


def get_log_level(env: Optional[Mapping[str, str]] = None) -> str:
    """Log level name from STEPTRACKER_LOG_LEVEL, DEFAULT_LOG_LEVEL if unset."""
    env = os.environ if env is None else env
    return (env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()

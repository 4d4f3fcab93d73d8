"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, load_env_file, optional_env_var
from .errors import ConfigurationError, InvalidConfigurationError
from .orm import COERCE_ATTRIBUTES_ENV, KEY_CASE_ENV, OrmConfig, get_orm_config

__all__ = [
    "COERCE_ATTRIBUTES_ENV",
    "KEY_CASE_ENV",
    "ConfigurationError",
    "InvalidConfigurationError",
    "OrmConfig",
    "env_flag",
    "get_orm_config",
    "load_env_file",
    "optional_env_var",
]

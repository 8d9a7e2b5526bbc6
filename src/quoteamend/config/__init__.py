"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_float_env, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import LOG_LEVEL_ENV, configure_logging, resolve_log_level
from .record_service import RecordServiceConfig, get_record_service_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "LOG_LEVEL_ENV",
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "RecordServiceConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_record_service_config",
    "get_storage_config",
    "optional_float_env",
    "require_env_var",
    "require_env_vars",
    "resolve_log_level",
]

# gitease Configuration Module
# YAML-based configuration loading, validation, and defaults

from gitease.config.defaults import DEFAULT_CONFIG, generate_default_config
from gitease.config.loader import (
    CONFIG_ENV_VAR,
    ConfigError,
    dump_config,
    get_config_path,
    load_config,
    validate_config_file,
    write_default_config,
)
from gitease.config.schema import GitConfig, GiteaseConfig, OutputConfig

__all__ = [
    # Schema
    "GiteaseConfig",
    "GitConfig",
    "OutputConfig",
    # Loader
    "CONFIG_ENV_VAR",
    "ConfigError",
    "load_config",
    "get_config_path",
    "validate_config_file",
    "write_default_config",
    "dump_config",
    # Defaults
    "DEFAULT_CONFIG",
    "generate_default_config",
]

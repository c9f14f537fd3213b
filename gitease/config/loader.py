# gitease Configuration Loader
# Load and create YAML configuration files

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from gitease.config.defaults import DEFAULT_CONFIG, generate_default_config
from gitease.config.schema import GiteaseConfig

CONFIG_ENV_VAR = "GITEASE_CONFIG"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""

    def __init__(self, message: str, errors: Optional[list[str]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


def get_config_dir() -> Path:
    """Get the gitease configuration directory."""
    return Path.home() / ".config" / "gitease"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def _read_yaml(config_path: Path) -> dict:
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in {config_path}", [str(e)]) from e
    except (UnicodeDecodeError, OSError) as e:
        raise ConfigError(f"Cannot read {config_path}", [str(e)]) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid configuration in {config_path}", ["top level must be a mapping"])
    return data


def _format_validation_errors(e: ValidationError) -> list[str]:
    errors = []
    for error in e.errors():
        loc = " -> ".join(str(part) for part in error["loc"])
        errors.append(f"{loc}: {error['msg']}")
    return errors


def _merge_with_defaults(data: dict) -> dict:
    """Merge loaded data with default values for missing keys."""
    result = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}

    for section, values in data.items():
        if section in result and isinstance(values, dict):
            result[section] = {**result[section], **values}
        else:
            result[section] = values

    return result


def load_config(config_path: Optional[Path] = None) -> GiteaseConfig:
    """
    Load configuration from YAML file.

    A missing file is not an error: the defaults are returned.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        GiteaseConfig: Validated configuration object.

    Raises:
        ConfigError: If the file is not valid YAML or fails validation.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return GiteaseConfig()

    data = _read_yaml(config_path)

    try:
        return GiteaseConfig.model_validate(_merge_with_defaults(data))
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}", _format_validation_errors(e)) from e


def validate_config_file(config_path: Optional[Path] = None) -> tuple[bool, list[str]]:
    """
    Validate a configuration file.

    Args:
        config_path: Path to config file to validate.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return False, [f"Configuration file not found: {config_path}"]

    try:
        load_config(config_path)
    except ConfigError as e:
        return False, e.errors or [e.message]

    return True, []


def write_default_config(config_path: Optional[Path] = None, *, force: bool = False) -> tuple[Path, bool]:
    """
    Write the default configuration file.

    Args:
        config_path: Target path. Uses default if not provided.
        force: Overwrite an existing file.

    Returns:
        Tuple of (config_path, was_written).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists() and not force:
        return config_path, False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_default_config(), encoding="utf-8")
    return config_path, True


def dump_config(config: GiteaseConfig) -> str:
    """Render a configuration object as YAML."""
    data = config.model_dump(mode="json")
    return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)

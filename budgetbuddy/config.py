"""Configuration file management for budgetbuddy."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from loguru import logger

from budgetbuddy.domain.errors import ConfigError
from budgetbuddy.domain.models import DEFAULT_SETTINGS, BudgetSettings

SETTINGS_KEYS = ("overtime_threshold", "net_pay_fraction", "minimum_wage")


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "budgetbuddy" / "config.toml"


def default_config() -> dict[str, Any]:
    return {key: getattr(DEFAULT_SETTINGS, key) for key in SETTINGS_KEYS}


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary, empty if the file doesn't exist.

    Raises:
        ConfigError: If the file is unreadable or not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        logger.debug("No config file at {}, using defaults", config_path)
        return {}

    logger.debug("Loading config from {}", config_path)
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"{config_path} is not valid TOML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read {config_path}: {e.strerror or e}") from e


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def settings_from_config(config: dict[str, Any], **overrides: float | None) -> BudgetSettings:
    """Build settings from a config dictionary and per-invocation overrides.

    Args:
        config: Configuration dictionary.
        **overrides: Setting values that win over the config file; None means not given.

    Returns:
        BudgetSettings with defaults for anything unset.

    Raises:
        ConfigError: If a value is not a number or the net pay fraction is outside [0, 1].
    """
    values: dict[str, float] = {}
    for key in SETTINGS_KEYS:
        value = overrides.get(key)
        if value is None:
            value = config.get(key, getattr(DEFAULT_SETTINGS, key))
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{key} must be a number, got {value!r}")
        values[key] = float(value)

    if not 0 <= values["net_pay_fraction"] <= 1:
        raise ConfigError(f"net_pay_fraction must be between 0 and 1, got {values['net_pay_fraction']}")

    return BudgetSettings(**values)


def get_budget_dir(config: dict[str, Any], override: str | None = None) -> Path | None:
    """Get the directory holding budget files, or None for the current directory.

    Raises:
        ConfigError: If budget_dir in the config is not a string.
    """
    budget_dir = override if override is not None else config.get("budget_dir")
    if budget_dir is None:
        return None
    if not isinstance(budget_dir, str):
        raise ConfigError(f"budget_dir must be a path, got {budget_dir!r}")
    return Path(budget_dir).expanduser()

"""
Configuration Loader Module

Loads configuration from a YAML file and environment variables.
Environment variables (STRIKEPATH_*) take precedence over the file.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger

from strikepath.config.settings import StrikepathConfig
from strikepath.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path("config/strikepath.yaml")

# env var -> (section, key, type)
ENV_MAPPING = {
    "STRIKEPATH_VOLATILITY": ("pricing", "volatility", float),
    "STRIKEPATH_RISK_FREE_RATE": ("pricing", "risk_free_rate", float),
    "STRIKEPATH_DAYS_AHEAD": ("chart", "days_ahead", int),
    "STRIKEPATH_DATA_URL": ("market_data", "base_url", str),
    "STRIKEPATH_DEFAULT_SYMBOL": ("market_data", "default_symbol", str),
    "STRIKEPATH_DEFAULT_SPOT": ("market_data", "default_spot", float),
    "STRIKEPATH_SEED": ("market_data", "seed", int),
    "ALPACA_API_KEY": ("market_data", "api_key", str),
    "ALPACA_API_SECRET": ("market_data", "api_secret", str),
    "STRIKEPATH_LOG_LEVEL": ("logging", "level", str),
    "STRIKEPATH_LOG_FILE": ("logging", "log_file", str),
}


def merge_config_with_env(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge configuration with environment variables.

    Examples:
        STRIKEPATH_VOLATILITY=0.25
        STRIKEPATH_DEFAULT_SYMBOL=QQQ
        ALPACA_API_KEY=...

    Args:
        config_data: Configuration data from file

    Returns:
        Merged configuration with env vars applied

    Raises:
        ConfigError: If an env var cannot be converted to its type
    """
    for env_var, (section, key, cast) in ENV_MAPPING.items():
        env_value = os.environ.get(env_var)
        if env_value is None:
            continue

        try:
            value = cast(env_value)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {env_var}: {env_value!r}") from e

        config_data.setdefault(section, {})
        if config_data[section] is None:
            config_data[section] = {}
        config_data[section][key] = value
        logger.debug(f"Overriding {section}.{key} from env: {env_var}")

    return config_data


def load_config(path: Optional[Union[str, Path]] = None) -> StrikepathConfig:
    """
    Load configuration from YAML plus environment.

    Args:
        path: Config file (default: config/strikepath.yaml)

    Returns:
        StrikepathConfig; defaults (plus env) when the file is missing
    """
    config_file = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    if config_file.exists():
        with open(config_file, "r") as f:
            config_data = yaml.safe_load(f) or {}
        if not isinstance(config_data, dict):
            raise ConfigError(f"Config file {config_file} must contain a mapping")
        logger.info(f"Loaded config from {config_file}")
    else:
        logger.warning(f"Config file not found: {config_file}, using defaults")
        config_data = {}

    config_data = merge_config_with_env(config_data)
    return StrikepathConfig.from_dict(config_data)


def load_and_validate_config(path: Optional[Union[str, Path]] = None) -> StrikepathConfig:
    """
    Load and validate configuration in one step.

    Raises:
        ConfigError: If the configuration is invalid
    """
    config = load_config(path)
    errors = config.validate()

    if errors:
        error_msg = "Config validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        logger.error(error_msg)
        raise ConfigError(error_msg)

    logger.info("✓ Config validation passed")
    return config

"""Simple configuration management for the LangVoice SDK.

This module provides a lightweight configuration system that supports:
- TOML configuration file (~/.langvoice/config.toml, [langvoice] section)
- Environment variable overrides (LANGVOICE_<KEY>)
- Simple function-based access pattern

Usage:
    from .config import get_config_value
    timeout = get_config_value('timeout')  # Returns 60.0 or env override
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_SECTION = "langvoice"
ENV_PREFIX = "LANGVOICE_"

# All configuration defaults in one flat dictionary
CONFIG_DEFAULTS: Dict[str, Any] = {
    # Credentials & endpoint
    "api_key": "",
    "base_url": "https://www.langvoice.pro/api",
    # Timeouts (seconds)
    "timeout": 60.0,
    # Tool adapters
    "default_output_file": "output.mp3",
    "audio_preview_length": 100,
    # Logging
    "log_level": "info",
}

_config_cache: Optional[Dict[str, Any]] = None


def load_toml_config() -> Dict[str, Any]:
    """Load configuration from TOML file and environment variables."""
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    config = CONFIG_DEFAULTS.copy()

    for key, value in load_config().items():
        if key in config:
            config[key] = value

    # Environment variable overrides (highest precedence)
    for key in config:
        env_value = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
        if env_value is not None:
            config[key] = _parse_env_value(env_value, type(CONFIG_DEFAULTS[key]))
            if key != "api_key":
                logger.debug(f"Override from env: {key} = {config[key]}")

    _config_cache = config
    return config


def _parse_env_value(value: str, expected_type: type) -> Any:
    """Parse environment variable value to appropriate type."""
    if expected_type is bool:
        return value.lower() in ("true", "1", "yes", "on")
    elif expected_type is int:
        try:
            return int(value)
        except ValueError:
            return value
    elif expected_type is float:
        try:
            return float(value)
        except ValueError:
            return value
    return value


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a configuration value. Simple function - no classes needed."""
    config = load_toml_config()
    return config.get(key, default)


def reload_config() -> None:
    """Reload configuration from files (useful for testing)."""
    global _config_cache
    _config_cache = None


def get_config_path() -> Path:
    """Get the configuration file path, honouring LANGVOICE_CONFIG."""
    env_path = os.environ.get("LANGVOICE_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".langvoice" / "config.toml"


def load_config() -> Dict[str, Any]:
    """Load the [langvoice] section of the TOML file, or {} if unavailable."""
    config_path = get_config_path()

    if not config_path.exists():
        logger.debug(f"Config file not found at {config_path}, using defaults")
        return {}

    try:
        with open(config_path, "rb") as f:
            full_config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
        return {}

    section = full_config.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        logger.warning(f"Ignoring malformed [{CONFIG_SECTION}] section in {config_path}")
        return {}
    logger.debug(f"Loaded TOML config from {config_path}")
    return section


def save_config(config: Dict[str, Any]) -> bool:
    """Save the [langvoice] section to file atomically, keeping other sections."""
    config_path = get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.exists():
            with open(config_path, "rb") as f:
                full_config = tomllib.load(f)
        else:
            full_config = {}

        full_config[CONFIG_SECTION] = config
        temp_path = config_path.with_suffix(".tmp")
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(toml.dumps(full_config))

        temp_path.replace(config_path)
        logger.info(f"Configuration saved to {config_path}")
        return True

    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.error(f"Failed to save config to {config_path}: {e}")
        return False


def set_setting(key: str, value: Any) -> bool:
    """Set a single known setting in the configuration file."""
    if key not in CONFIG_DEFAULTS:
        raise KeyError(f"Unknown setting '{key}'. Known settings: {', '.join(sorted(CONFIG_DEFAULTS))}")

    expected_type = type(CONFIG_DEFAULTS[key])
    if isinstance(value, str) and expected_type is not str:
        value = _parse_env_value(value, expected_type)

    config = load_config()
    config[key] = value
    saved = save_config(config)
    reload_config()
    return saved


def get_api_key() -> Optional[str]:
    """Get the API key, checking the environment before the TOML configuration.

    Search order:
    1. Environment variable (LANGVOICE_API_KEY)
    2. TOML configuration (api_key in [langvoice])

    Returns:
        API key string if found, None otherwise
    """
    env_api_key = os.environ.get(f"{ENV_PREFIX}API_KEY")
    if env_api_key:
        return env_api_key

    file_api_key = load_config().get("api_key")
    if file_api_key:
        return str(file_api_key)

    return None

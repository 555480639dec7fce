"""
Configuration loading for the roster application.

Configuration is a plain dictionary: built-in defaults, then an optional JSON
file, then ``ROSTER_*`` environment variables. Values are checked once at
startup and a bad value stops the process with ``ConfigurationError``.
"""

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

from .core.exceptions import ConfigurationError

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "seed_sample_data": True,
    "rest_host": "127.0.0.1",
    "rest_port": 8000,
}

ENV_OVERRIDES = {
    "ROSTER_LOG_LEVEL": "log_level",
    "ROSTER_SEED": "seed_sample_data",
    "ROSTER_HOST": "rest_host",
    "ROSTER_PORT": "rest_port",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {value!r}", error_code="invalid_config")


def _to_port(key: str, value: Any) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}", error_code="invalid_config") from None
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"{key} must be between 1 and 65535", error_code="invalid_config")
    return port


def validate_config(config: Mapping[str, Any]) -> Dict[str, Any]:
    """Normalize a configuration mapping; unknown keys are rejected."""
    unknown = sorted(set(config) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}", error_code="invalid_config")

    result = dict(config)
    level = str(result["log_level"]).strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"log_level must be one of {', '.join(_LOG_LEVELS)}", error_code="invalid_config")
    result["log_level"] = level
    result["seed_sample_data"] = _to_bool("seed_sample_data", result["seed_sample_data"])
    result["rest_host"] = str(result["rest_host"]).strip() or DEFAULT_CONFIG["rest_host"]
    result["rest_port"] = _to_port("rest_port", result["rest_port"])
    return result


def load_config(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Build the effective configuration."""
    config = dict(DEFAULT_CONFIG)

    if path:
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}", error_code="invalid_config") from e
        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object", error_code="invalid_config")
        config.update(file_config)

    environ = os.environ if environ is None else environ
    for variable, key in ENV_OVERRIDES.items():
        if environ.get(variable):
            config[key] = environ[variable]

    return validate_config(config)


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

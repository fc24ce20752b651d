#
# config/loader.py
#
"""
Loads ReportPortal settings from a YAML file, applying environment overrides.
"""

import os
from pathlib import Path
from typing import Any

import structlog
import yaml

from rpbasic.config.models import ReportPortalConfig
from rpbasic.exceptions import ConfigurationError

log = structlog.get_logger("config.loader")

# YAML key -> model field
REQUIRED_KEYS = {
    "UUID": "uuid",
    "host": "host",
    "projectName": "project_name",
}
OPTIONAL_KEYS = {
    "timeZone": "time_zone",
    "endpointURL": "endpoint_url",
    "allowHTTPErrors": "allow_http_errors",
    "allowHTTPErrorStatus": "allow_http_errors",  # Alternate spelling; wins when both are set
    "verifySSL": "verify_ssl",
    "timeout": "timeout",
}
ENV_OVERRIDES = {
    "RPBASIC_UUID": "uuid",
    "RPBASIC_HOST": "host",
    "RPBASIC_PROJECT": "project_name",
    "RPBASIC_TIMEZONE": "time_zone",
}


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: '{config_path}'") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{config_path}': {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in '{config_path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration in '{config_path}' must be a mapping, got {type(data).__name__}"
        )
    return data


def load_config(config_path: Path | str) -> ReportPortalConfig:
    """
    Load, override, and validate the configuration file.

    Precedence: environment variables > config file > model defaults.
    """
    config_path = Path(config_path)
    log.debug("Loading configuration", path=str(config_path))
    data = _read_yaml(config_path)

    values: dict[str, Any] = {}
    for yaml_key, field_name in {**REQUIRED_KEYS, **OPTIONAL_KEYS}.items():
        if yaml_key in data and data[yaml_key] is not None:
            values[field_name] = data[yaml_key]

    for env_var, field_name in ENV_OVERRIDES.items():
        env_value = os.environ.get(env_var)
        if env_value:
            log.debug("Applying environment override", env_var=env_var, field=field_name)
            values[field_name] = env_value

    missing = [key for key, name in REQUIRED_KEYS.items() if name not in values]
    if missing:
        raise ConfigurationError(
            f"Missing required key(s) in '{config_path}': {', '.join(missing)}"
        )

    # YAML 1.1 reads an unquoted +3:00 as a base-60 integer
    if "time_zone" in values and not isinstance(values["time_zone"], str):
        raise ConfigurationError(
            f"timeZone in '{config_path}' must be a quoted string such as '+03:00', "
            f"got {values['time_zone']!r}"
        )

    try:
        config = ReportPortalConfig(**values)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration in '{config_path}': {e}") from e

    log.info(
        "Configuration loaded",
        path=str(config_path),
        host=config.host,
        project=config.project_name,
    )
    return config


# 🔼⚙️

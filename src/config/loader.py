from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from config.models import AppSettings

GLOBAL_CONFIG_PATH = Path.home() / ".sublang" / "config.yaml"

_ENV_OVERRIDES = {
    "SUBLANG_DISPLAY_LOCALE": "display_locale",
    "SUBLANG_DEFAULT_LANGUAGE": "default_language",
    "SUBLANG_LOG_LEVEL": "log_level",
}


def _parse_env_file(path: Path) -> dict[str, str]:
    """Parse .env file into dictionary."""
    data: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        data[key.strip()] = value.strip().strip("'").strip('"')
    return data


def _parse_yaml_file(path: Path) -> dict[str, Any]:
    """Parse YAML file into dictionary."""
    if not path.exists():
        return {}
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    loaded = yaml.safe_load(text)
    return loaded if isinstance(loaded, dict) else {}


def _known_keys(payload: dict[str, Any]) -> dict[str, Any]:
    # .env files may hold unrelated variables
    fields = AppSettings.model_fields
    return {key: value for key, value in payload.items() if key in fields}


def load_settings(config_path: Path | None = None) -> AppSettings:
    """Load configuration from multiple sources with proper precedence.

    Loading order (later overrides earlier):
    1. Global config: ~/.sublang/config.yaml
    2. Environment file: .env
    3. Project config: config.yaml
    4. Environment variables: SUBLANG_DISPLAY_LOCALE, SUBLANG_DEFAULT_LANGUAGE, SUBLANG_LOG_LEVEL
    5. Explicit config file: config_path parameter

    Args:
        config_path: Optional path to explicit config file (YAML or .env)

    Returns:
        AppSettings instance with merged configuration
    """
    payload: dict[str, Any] = {}

    payload.update(_parse_yaml_file(GLOBAL_CONFIG_PATH))

    default_env = Path(".env")
    if default_env.exists():
        payload.update(_known_keys(_parse_env_file(default_env)))

    payload.update(_parse_yaml_file(Path("config.yaml")))

    for env_name, key in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            payload[key] = value

    if config_path:
        config_path = config_path.expanduser()
        if config_path.suffix.lower() in {".yaml", ".yml"}:
            payload.update(_parse_yaml_file(config_path))
        else:
            payload.update(_known_keys(_parse_env_file(config_path)))

    for key in ("default_language", "display_locale", "default_encoding", "log_level"):
        if key in payload and payload[key] is not None:
            payload[key] = str(payload[key]).strip()

    return AppSettings(**payload)


def load_settings_from_cli(config_file: str | Path | None) -> AppSettings:
    """CLI entry point for loading settings."""
    return load_settings(Path(config_file).expanduser()) if config_file else load_settings()

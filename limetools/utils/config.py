"""
Configuration management for the Lime Tools console.

Settings come from three layers, later ones winning:
model defaults, an optional YAML file, and LIMETOOLS_* environment variables
(a .env file in the working directory is loaded first).
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError

DEFAULT_CONFIG_FILE = Path("config") / "settings.yaml"

# env var -> (section, field); section None means top level
ENV_OVERRIDES = {
    "LIMETOOLS_TITLE": (None, "app_title"),
    "LIMETOOLS_HOST": (None, "host"),
    "LIMETOOLS_PORT": (None, "port"),
    "LIMETOOLS_USERS_FILE": (None, "users_file"),
    "LIMETOOLS_ADMIN_EMAIL": (None, "seed_admin_email"),
    "LIMETOOLS_ADMIN_PASSWORD": (None, "seed_admin_password"),
    "LIMETOOLS_LOG_LEVEL": ("logging", "level"),
    "LIMETOOLS_LOG_FORMAT": ("logging", "format"),
}


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "console"
    file_path: Optional[str] = None
    max_bytes: int = 10485760
    backup_count: int = 5


class Settings(BaseModel):
    """Main configuration model"""
    app_title: str = "Lime Tools"
    host: str = "0.0.0.0"
    port: int = 3000
    users_file: Path = Path("data") / "users.json"
    session_cookie: str = "session"
    seed_admin_email: Optional[str] = None
    seed_admin_password: Optional[str] = None
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        raise ConfigError(f"Failed to read config file {path}: {str(e)}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    for var, (section, field) in ENV_OVERRIDES.items():
        value = os.getenv(var)
        if value is None or value == "":
            continue
        if section is None:
            data[field] = value
        else:
            data.setdefault(section, {})
            if not isinstance(data[section], dict):
                raise ConfigError(f"Config section '{section}' must be a mapping")
            data[section][field] = value
    return data


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings from .env, the YAML file and the environment"""
    load_dotenv()

    if config_path is None:
        config_path = os.getenv("LIMETOOLS_CONFIG") or DEFAULT_CONFIG_FILE
    data = _apply_env_overrides(_read_yaml(Path(config_path)))

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {str(e)}")

"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from mdblog.errors import ConfigError


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:  str = "mdblog"
    data_path: str = Field(default="",        description="Data root holding profile.json, articles/ and assets/")
    base_url:  str = Field(default="",        description="Public base URL for absolute avatar links; blank = root-relative")
    host:      str = Field(default="127.0.0.1", description="Interface the API server binds to")
    port:      int = Field(default=8080, ge=1, le=65535, description="Port the API server listens on")
    log_level: str = Field(default="INFO",    description="Log level name for the mdblog logger")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOG_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

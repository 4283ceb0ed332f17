"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "RSTLITE_"


class Settings(BaseModel):
    app_name:    str = "rstlite"
    encoding:    str = Field(default="utf-8", description="Text encoding of source files")
    output_dir:  str = Field(default="dist",  description="Directory for exported JSON documents")
    json_indent: int = Field(default=2, ge=0, description="Indent for exported JSON; 0 = compact")
    log_level:   str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping stored in a YAML config file; an empty file yields {}."""
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def load_config(overrides: Optional[dict[str, Any]] = None) -> Settings:
    """Load Settings from config.yaml, then RSTLITE_<FIELD> env vars, then non-None CLI overrides."""
    path = Path(CONFIG_FILE)
    data = _read_config_file(path) if path.exists() else {}

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

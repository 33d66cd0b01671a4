"""Application configuration: settings schema and netral.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "netral.yaml"


class Settings(BaseModel):
    app_name:        str = "netral"
    markdown_preset: str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    markdown_breaks: bool = Field(default=True, description="Render single newlines as <br>")
    output_dir:      str = Field(default="dist", description="Directory for parsed document JSON")
    json_indent:     int = Field(default=2, ge=0, description="Indentation of written JSON")
    log_level:       str = Field(
        default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root logging level for the CLI",
    )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from netral.yaml, then NETRAL_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"NETRAL_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

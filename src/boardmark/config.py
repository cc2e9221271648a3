"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "boardmark"
    output_dir:    str = Field(default="dist", description="Directory for extracted note files")
    output_format: str = Field(default="json", pattern="^(json|yaml)$", description="json or yaml")
    indent:        int = Field(default=2, ge=0, description="Indent width for written output")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    diagram_path_template: str = Field(
        default="/assets/diagrams/d{id}.png",
        description="Asset path for a diagram id",
    )
    diagram_fallback_template: str = Field(
        default="https://placehold.co/800x500/f1f5f9/475569?text=Diagram+D{id}",
        description="URL shown when the diagram asset is missing",
    )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then BOARDMARK_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"BOARDMARK_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

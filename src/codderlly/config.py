"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:         str  = "codderlly"
    content_dir:      str  = Field(default="content/blog", description="Directory holding the Markdown articles")
    site_file:        str  = Field(default="site.yaml",    description="YAML file with the site configuration record")
    public_dir:       str  = Field(default="public",       description="Static asset root for absolute image paths")
    output_dir:       str  = Field(default="dist",         description="Directory for exported MD + JSON files")
    parser_config:    str  = Field(default="gfm-like",     description="MarkdownIt parser preset name")
    words_per_minute: int  = Field(default=200, ge=1,      description="Reading speed used for reading time")
    check_assets:     bool = Field(default=True,           description="Resolve image paths during check")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then CODDERLLY_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"CODDERLLY_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

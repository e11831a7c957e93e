"""Application configuration: settings schema and docview.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "docview.yaml"


class Settings(BaseModel):
    app_name:        str  = "docview"
    root_dir:        str  = Field(default=".",          description="Directory tree exposed by the viewer")
    host:            str  = Field(default="127.0.0.1",  description="Interface the HTTP server binds to")
    port:            int  = Field(default=3000, ge=1, le=65535)
    max_file_size:   int  = Field(default=1024 * 1024, ge=1, description="Largest file (bytes) sent for preview")
    open_browser:    bool = Field(default=True,  description="Open the viewer in a browser on start")
    reclaim_port:    bool = Field(default=False, description="Stop processes already listening on the port")
    show_hidden:     bool = Field(default=False, description="Include hidden entries in CLI listings")
    max_quote_depth: int  = Field(default=32, ge=1, description="Deepest blockquote nesting parsed as blocks")
    access_log:      str  = Field(default="~/.docview/access.jsonl", description="JSON-lines log of opened files")
    log_level:       str  = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from docview.yaml, then DOCVIEW_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCVIEW_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

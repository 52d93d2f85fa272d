"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDXLIVE_"


class Settings(BaseModel):
    title:          str = Field(default="Documentation", description="Site title shown in the nav header")
    docs_dir:       str = Field(default="docs",  description="Directory of .md/.mdx documentation pages")
    output_dir:     str = Field(default="dist",  description="Directory the static site is written to")
    components_dir: Optional[str] = Field(default=None, description="Component source tree for the registry")
    base_url:       str = Field(default="/", description="URL prefix of the deployed site")
    styles:         list[str] = Field(default_factory=list, description="Stylesheets copied into assets/")
    parser_config:  str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    doc_extensions:       list[str] = Field(default=[".md", ".mdx"])
    component_extensions: list[str] = Field(default=[".tsx", ".jsx"])
    max_workers:    int = Field(default=4, ge=1, description="Parallel page builds")
    log_level:      str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")

    @field_validator("base_url")
    @classmethod
    def _slashed(cls, v: str) -> str:
        if not v.startswith("/"):
            v = "/" + v
        return v if v.endswith("/") else v + "/"

    @field_validator("styles", "doc_extensions", "component_extensions", mode="before")
    @classmethod
    def _split_csv(cls, v: Any) -> Any:
        # env vars arrive as "a,b,c"
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDXLIVE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

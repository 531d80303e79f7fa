"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from gbmigrate.core.models import SectionInfo


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "GBMIGRATE_"


class Conversion(BaseModel):
    """One GitBook tree converted into one top-level Hugo section."""
    source_dir: str
    target_dir: str
    worktree:   Optional[str] = Field(default=None, description="git worktree path refreshed before converting")
    ref:        Optional[str] = Field(default=None, description="git ref checked out into the worktree")


DEFAULT_CONVERSIONS = [
    Conversion(source_dir="gitbook/dcs/docs", target_dir="dcs",
               worktree="gitbook/dcs", ref="origin/gitbook-sync"),
    Conversion(source_dir="gitbook/node", target_dir="node",
               worktree="gitbook/node", ref="origin/gitbook-node-sync"),
]


class Settings(BaseModel):
    content_dir:  str  = Field(default="content",       description="Output tree; deleted and recreated per run")
    extra_dir:    str  = Field(default="content-extra", description="Hand-written files overlaid per section")
    summary_file: str  = Field(default="SUMMARY.md",    description="Table of contents inside each source tree")
    assets_dir:   str  = Field(default="_assets",       description="Flat per-section asset directory")
    weight_base:  int  = Field(default=-100, description="Weight of the first entry in a directory listing")
    weight_step:  int  = Field(default=10, ge=1, description="Weight gap between consecutive entries")
    skip_refresh: bool = Field(default=False, description="Skip git worktree refresh of the source trees")
    log_level:    str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")
    conversions:  list[Conversion] = Field(default_factory=lambda: list(DEFAULT_CONVERSIONS))
    sections:     dict[str, SectionInfo] = Field(default_factory=dict, description="Extra section menu entries")
    link_titles:  dict[str, str] = Field(default_factory=dict, description="Extra embed URL titles")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then GBMIGRATE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

from __future__ import annotations
"""Rendering options and their YAML loader.

Example YAML::

    separator: " <- "
    root_first: false
    show_types: true
    max_depth: 5

Usage:
    from errchain.config import load_options
    opts = load_options("render.yml")
"""
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

__all__ = ["RenderOptions", "load_options"]


class RenderOptions(BaseModel):
    """How a chain is turned into text or a Rich tree."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    separator: str = "\n"
    root_first: bool = True
    show_types: bool = False
    icons_on: bool = True
    max_depth: Optional[int] = Field(default=None, ge=1)


def load_options(path: str | Path) -> RenderOptions:  # noqa: D401
    """Load YAML file at *path* into :class:`RenderOptions`."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return RenderOptions.model_validate(data)

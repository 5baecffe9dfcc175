"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, zenn2qiita.toml only contains
overrides. An empty file (or no file) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ConvertConfig(BaseModel):
    """[convert] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"
    timespec: Literal["seconds", "milliseconds", "microseconds"] = "milliseconds"


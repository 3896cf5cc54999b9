"""Typed configuration schema and loader for the htmltext package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint

NEWLINE_ENV = "HTMLTEXT_NEWLINE"

NewlinePolicy = Literal["platform", "lf", "crlf"]

_TERMINATORS: dict[str, str] = {"lf": "\n", "crlf": "\r\n"}

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class OutputSettings(BaseModel):
    """Options controlling the converted text."""

    newline: NewlinePolicy
    decode_entities: bool

    model_config = ConfigDict(extra="forbid")

    @property
    def line_terminator(self) -> str:
        """Return the concrete line terminator for :attr:`newline`."""

        return _TERMINATORS.get(self.newline, os.linesep)


class IOSettings(BaseModel):
    """Encodings used by the file readers and writers."""

    encoding_in: str
    encoding_out: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    output: OutputSettings
    io: IOSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``HTMLTEXT_NEWLINE`` environment variable.
    """

    with (
        importlib_resources.files("htmltext.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    if NEWLINE_ENV in environ:
        merged = deep_merge_dicts(merged, {"output": {"newline": environ[NEWLINE_ENV]}})

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "IOSettings",
    "NEWLINE_ENV",
    "NewlinePolicy",
    "OutputSettings",
    "deep_merge_dicts",
    "load_config",
]

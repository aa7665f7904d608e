"""Typed configuration schema and loader for the namecombo package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

from namecombo.grammar.case import GrammaticalCase
from namecombo.grammar.locale import language_of
from namecombo.utils.errors import UnsupportedLocaleError

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Logging behaviour of the command line."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    locale: str
    locale_env: str = "NAMECOMBO_LOCALE"
    case: GrammaticalCase = GrammaticalCase.NOMINATIVE
    logging: LoggingSettings = LoggingSettings()

    model_config = ConfigDict(extra="forbid")

    @field_validator("locale")
    @classmethod
    def _supported_locale(cls, value: str) -> str:
        try:
            language_of(value)
        except UnsupportedLocaleError as exc:
            raise ValueError(str(exc)) from None
        return value

    @field_validator("case", mode="before")
    @classmethod
    def _parse_case(cls, value: Any) -> Any:
        if isinstance(value, str):
            return GrammaticalCase.parse(value)
        return value


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
    environment variable named by ``locale_env`` for the default locale.
    """

    with (
        importlib_resources.files("namecombo.config")
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

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    if environ.get(cfg.locale_env):
        merged = deep_merge_dicts(merged, {"locale": environ[cfg.locale_env]})
        cfg = ConfigModel.model_validate(merged)

    return cfg


__all__ = [
    "ConfigModel",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]

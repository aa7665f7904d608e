"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable referenced by ``locale_env`` (``NAMECOMBO_LOCALE``)
"""

from .schema import ConfigModel, LoggingSettings, deep_merge_dicts, load_config

__all__ = ["ConfigModel", "LoggingSettings", "deep_merge_dicts", "load_config"]

from __future__ import annotations

from .load import load_config
from .schema import ApiConfig, AppConfig, EnvOverrides, SourceConfig

__all__ = ["ApiConfig", "AppConfig", "EnvOverrides", "SourceConfig", "load_config"]

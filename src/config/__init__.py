"""App config store and config/input resolution."""

from src.config.app_config import AppConfig, ConfigReader
from src.config.resolver import EffectiveConfig, resolve

__all__ = [
    "AppConfig",
    "ConfigReader",
    "EffectiveConfig",
    "resolve",
]

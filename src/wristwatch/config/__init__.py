"""Configuration models and loading for WristWatch."""

from .manager import ConfigManager
from .schema import WristWatchConfig

__all__ = ["ConfigManager", "WristWatchConfig"]

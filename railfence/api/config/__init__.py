"""Configuration API."""

from .DisplayConfig import DisplayConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .RailFenceConfig import RailFenceConfig

__all__ = ["DisplayConfig", "LogConfig", "RailFenceConfig", "get_home_dir"]

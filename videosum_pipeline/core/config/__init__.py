"""
Configuration module for the runtime-sum pipeline
"""

from .app_config import AppConfig
from .config_loader import ConfigLoader

__all__ = ["AppConfig", "ConfigLoader"]

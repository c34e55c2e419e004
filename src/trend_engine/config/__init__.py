"""
Configuration management module.

Loads configuration from YAML files and provides easy access.
"""

from .settings import AppConfig, EngineConfig, FeedConfig, LogLevel, SystemConfig
from .loader import ConfigLoader, get_app_config, get_config_loader

__all__ = [
    'AppConfig',
    'EngineConfig',
    'FeedConfig',
    'LogLevel',
    'SystemConfig',
    'ConfigLoader',
    'get_app_config',
    'get_config_loader',
]

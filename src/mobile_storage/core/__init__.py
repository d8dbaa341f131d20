"""
Core utilities shared across Mobile Storage modules.
"""

from .config import AppConfig, StorageConfig, get_config, reload_config

__all__ = ["AppConfig", "StorageConfig", "get_config", "reload_config"]

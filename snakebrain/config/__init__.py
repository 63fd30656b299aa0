"""Configuration management for snakebrain."""

from snakebrain.config.loader import Config, ConfigManager, get_default_config, load_config

__all__ = ["Config", "ConfigManager", "get_default_config", "load_config"]

"""Configuration management."""

from routegate.config.settings import Settings, settings

__all__ = ["Settings", "settings"]

"""Runtime configuration loaded from the environment."""

from .settings import DatabaseConfig, Settings, settings

__all__ = ["DatabaseConfig", "Settings", "settings"]

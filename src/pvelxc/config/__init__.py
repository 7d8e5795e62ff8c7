"""Configuration management."""

from .settings import display_config, load_env_file, load_settings
from ..models.config import ENV_VARS, ConnectionConfig, DisplayConfig, Settings

__all__ = [
    "ENV_VARS",
    "ConnectionConfig",
    "DisplayConfig",
    "Settings",
    "display_config",
    "load_env_file",
    "load_settings",
]

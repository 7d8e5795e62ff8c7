"""Settings loading from the process environment."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from ..api.exceptions import ConfigError
from ..models.config import ENV_VARS, DisplayConfig, Settings

logger = logging.getLogger(__name__)


def load_env_file(env_file: Path | None = None) -> bool:
    """Load a ``.env`` file into ``os.environ`` without overriding it.

    Args:
        env_file: Explicit file (defaults to the nearest ``.env`` from the cwd)

    Returns:
        True if a file was loaded
    """
    path = str(env_file) if env_file else find_dotenv(usecwd=True)
    if not path:
        return False
    loaded = load_dotenv(path)
    if loaded:
        logger.debug("Loaded environment from %s", path)
    return loaded


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from environment variables.

    Blank values count as unset. Missing credentials are not an error
    here; the API client reports them when it is built.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Loaded settings

    Raises:
        ConfigError: If an optional setting has an invalid value
    """
    if environ is None:
        environ = os.environ

    data = {}
    for field, variable in ENV_VARS.items():
        value = environ.get(variable)
        if value is not None and value.strip():
            data[field] = value.strip()

    try:
        return Settings(**data)
    except ValidationError as e:
        fields = ", ".join(ENV_VARS[str(err["loc"][0])] for err in e.errors())
        raise ConfigError(f"Invalid value for {fields}") from e


def display_config(settings: Settings) -> DisplayConfig:
    """Snapshot host and node for display, ``unknown`` when unset."""
    return DisplayConfig(
        host=settings.host or "unknown",
        node=settings.node or "unknown",
    )

"""Build the command façade from the process environment."""

import logging
from pathlib import Path

import httpx

from .api.client import ProxmoxClient
from .api.exceptions import MissingCredentialError
from .commands import CommandFacade
from .config import display_config, load_env_file, load_settings

logger = logging.getLogger(__name__)


def create_facade(
    env_file: Path | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CommandFacade:
    """Load settings and build the façade.

    A missing credential is logged and leaves the façade without a client,
    so the application keeps running and commands report the problem.

    Args:
        env_file: Optional ``.env`` file to load first
        transport: Custom httpx transport for the client

    Returns:
        Command façade

    Raises:
        ConfigError: If an optional setting has an invalid value
    """
    load_env_file(env_file)
    settings = load_settings()

    client: ProxmoxClient | None
    try:
        client = ProxmoxClient.from_settings(settings, transport=transport)
    except MissingCredentialError as e:
        logger.error("Failed to initialize Proxmox client: %s", e)
        logger.error("Set PROXMOX_HOST, PROXMOX_NODE, PROXMOX_TOKEN_ID and PROXMOX_TOKEN_SECRET")
        client = None
    else:
        logger.info("Proxmox client initialized for %s (node %s)", settings.host, settings.node)

    return CommandFacade(client, display_config(settings))

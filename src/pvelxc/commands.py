"""Command façade between the user interface and the API client.

Every command returns a serializable :class:`CommandResult`. Failures are
reported as plain strings rather than raised.
"""

import logging
import threading
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from pydantic import BaseModel

from .api.client import ProxmoxClient
from .api.exceptions import NotInitializedError, PVELxcError
from .models.config import DisplayConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CommandResult(BaseModel):
    """Outcome of a command: either ``data`` or an ``error`` message."""

    ok: bool
    data: Any = None
    error: str | None = None

    @classmethod
    def success(cls, data: Any) -> "CommandResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "CommandResult":
        return cls(ok=False, error=error)


class CommandFacade:
    """Holds the process-wide client handle and dispatches commands.

    The client is optional: when it could not be built every command fails
    with a "not initialized" error without touching the network. The lock
    only guards reading the handle and is released before any request.
    """

    def __init__(self, client: ProxmoxClient | None, config: DisplayConfig) -> None:
        """Initialize the façade.

        Args:
            client: API client, or None if construction failed
            config: Host/node snapshot for display
        """
        self._lock = threading.Lock()
        self._client = client
        self._config = config

    @property
    def initialized(self) -> bool:
        return self._acquire_client() is not None

    def _acquire_client(self) -> ProxmoxClient | None:
        with self._lock:
            return self._client

    async def _run(
        self, name: str, call: Callable[[ProxmoxClient], Awaitable[T]]
    ) -> CommandResult:
        client = self._acquire_client()
        if client is None:
            return CommandResult.failure(str(NotInitializedError()))

        try:
            result = await call(client)
        except PVELxcError as e:
            logger.info("%s failed: %s", name, e)
            return CommandResult.failure(str(e))
        return CommandResult.success(result)

    def get_config(self) -> DisplayConfig:
        return self._config

    async def get_containers(self) -> CommandResult:
        return await self._run("get_containers", lambda c: c.list_containers())

    async def start_container(self, vmid: int) -> CommandResult:
        return await self._run("start_container", lambda c: c.start_container(vmid))

    async def stop_container(self, vmid: int) -> CommandResult:
        return await self._run("stop_container", lambda c: c.stop_container(vmid))

    async def delete_container(self, vmid: int) -> CommandResult:
        return await self._run("delete_container", lambda c: c.delete_container(vmid))

    async def get_host_status(self) -> CommandResult:
        return await self._run("get_host_status", lambda c: c.get_host_status())

    async def close(self) -> None:
        """Detach and close the client. Later commands report not initialized."""
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            await client.aclose()

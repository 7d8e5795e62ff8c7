"""Proxmox VE API client for node-scoped LXC containers."""

import asyncio
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .auth import TokenAuth
from .exceptions import (
    DecodeError,
    EnrichmentError,
    HttpStatusError,
    MissingCredentialError,
    PVELxcError,
    TransportError,
)
from ..models.config import ENV_VARS, ConnectionConfig, Settings
from ..models.container import (
    Container,
    NetworkInterface,
    ProxmoxResponse,
    RawContainer,
    first_usable_address,
)
from ..models.node import HostStatus, RawNodeStatus, RawNodeVersion

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# Order matters: the first missing value is the one reported.
_REQUIRED = tuple(
    (field, ENV_VARS[field]) for field in ("host", "node", "token_id", "token_secret")
)


class ProxmoxClient:
    """Async client for the LXC endpoints of a single Proxmox VE node.

    The client holds no per-call state, so one instance can serve any
    number of concurrent calls.
    """

    def __init__(
        self,
        host: str | None,
        node: str | None,
        token_id: str | None,
        token_secret: str | None,
        *,
        verify_ssl: bool = False,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Proxmox client.

        Args:
            host: Proxmox host, optionally with port
            node: Node whose containers are managed
            token_id: API token id
            token_secret: API token secret
            verify_ssl: Whether to verify TLS certificates
            timeout: Transport timeout in seconds
            transport: Custom httpx transport

        Raises:
            MissingCredentialError: If a required value is missing or empty
        """
        values = {
            "host": host,
            "node": node,
            "token_id": token_id,
            "token_secret": token_secret,
        }
        for field, variable in _REQUIRED:
            if not values[field]:
                raise MissingCredentialError(variable)

        self.config = ConnectionConfig(
            **values, verify_ssl=verify_ssl, timeout=timeout
        )
        self.base_url = self.config.base_url
        # Certificate verification is off unless PROXMOX_VERIFY_SSL is set:
        # nodes usually run on a private network with a self-signed cert.
        # Only point this client at hosts on a trusted network.
        self._client = httpx.AsyncClient(
            auth=TokenAuth(self.config.token_id, self.config.token_secret),
            verify=self.config.verify_ssl,
            timeout=self.config.timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> "ProxmoxClient":
        """Create a client from loaded settings.

        Args:
            settings: Settings read from the environment
            transport: Custom httpx transport

        Returns:
            Configured client
        """
        return cls(
            settings.host,
            settings.node,
            settings.token_id,
            settings.token_secret,
            verify_ssl=settings.verify_ssl,
            timeout=settings.timeout,
            transport=transport,
        )

    @property
    def node(self) -> str:
        return self.config.node

    async def __aenter__(self) -> "ProxmoxClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def _request(self, method: str, endpoint: str, action: str) -> httpx.Response:
        """Send a request and check its status.

        Args:
            method: HTTP method
            endpoint: API endpoint (without /api2/json prefix)
            action: Short description used in error messages

        Returns:
            Successful response

        Raises:
            TransportError: If the request could not be sent
            HttpStatusError: If the response status is not 2xx
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.debug("%s %s", method, url)

        try:
            response = await self._client.request(method, url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"Failed to {action}: {e}") from e

        if not response.is_success:
            raise HttpStatusError(
                f"Failed to {action}: HTTP {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
            )
        return response

    def _decode(self, response: httpx.Response, model: type[M], action: str) -> M:
        """Parse a response body into a model.

        Raises:
            DecodeError: If the body is not JSON or does not match the model
        """
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise DecodeError(f"Failed to {action}: invalid response: {e}") from e

    # Containers

    async def list_containers(self) -> list[Container]:
        """List containers on the configured node.

        Running containers are enriched with their IP address. A failed
        lookup leaves ``ip_address`` unset without failing the listing.

        Returns:
            Containers sorted by vmid
        """
        action = "fetch containers"
        response = await self._request("GET", f"/nodes/{self.node}/lxc", action)
        envelope = self._decode(response, ProxmoxResponse[list[RawContainer]], action)
        raw_containers = envelope.data

        addresses = await asyncio.gather(
            *(self._resolve_ip(ct.vmid) for ct in raw_containers if ct.status == "running")
        )
        running_ips = iter(addresses)

        containers = []
        for ct in raw_containers:
            ip_address = next(running_ips) if ct.status == "running" else None
            containers.append(Container.from_raw(ct, ip_address=ip_address))

        containers.sort(key=lambda c: c.vmid)
        return containers

    async def _resolve_ip(self, vmid: int) -> str | None:
        """Look up a container's IP, downgrading any failure to ``None``."""
        try:
            return await self._get_container_ip(vmid)
        except PVELxcError as e:
            logger.warning("Could not fetch IP for container %s: %s", vmid, e)
            return None

    async def _get_container_ip(self, vmid: int) -> str:
        """Get the first non-loopback IPv4 address of a container.

        Raises:
            EnrichmentError: If no interface carries an address
        """
        action = f"fetch interfaces of container {vmid}"
        response = await self._request(
            "GET", f"/nodes/{self.node}/lxc/{vmid}/interfaces", action
        )
        envelope = self._decode(
            response, ProxmoxResponse[list[NetworkInterface] | None], action
        )
        address = first_usable_address(envelope.data or [])
        if address is None:
            raise EnrichmentError(f"No IP found for container {vmid}")
        return address

    async def start_container(self, vmid: int) -> str:
        """Request a container start. Does not wait for the task."""
        await self._request(
            "POST", f"/nodes/{self.node}/lxc/{vmid}/status/start", "start container"
        )
        logger.info("Start requested for container %s", vmid)
        return f"Container {vmid} started successfully"

    async def stop_container(self, vmid: int) -> str:
        """Request a hard stop. Does not wait for the task."""
        await self._request(
            "POST", f"/nodes/{self.node}/lxc/{vmid}/status/stop", "stop container"
        )
        logger.info("Stop requested for container %s", vmid)
        return f"Container {vmid} stopped successfully"

    async def delete_container(self, vmid: int) -> str:
        """Request container deletion. Does not wait for the task."""
        await self._request(
            "DELETE", f"/nodes/{self.node}/lxc/{vmid}", "delete container"
        )
        logger.info("Delete requested for container %s", vmid)
        return f"Container {vmid} deleted successfully"

    # Node

    async def get_host_status(self) -> HostStatus:
        """Get resource usage and version of the configured node.

        Returns:
            Host status summary
        """
        action = "fetch host status"
        status_response = await self._request("GET", f"/nodes/{self.node}/status", action)
        status = self._decode(status_response, ProxmoxResponse[RawNodeStatus], action)

        version_response = await self._request("GET", f"/nodes/{self.node}/version", action)
        version = self._decode(version_response, ProxmoxResponse[RawNodeVersion], action)

        return HostStatus.from_raw(status.data, version.data)

"""Container (LXC) models."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

LOOPBACK_INTERFACE = "lo"


class ProxmoxResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful API response."""

    data: T


class RawContainer(BaseModel):
    """Container record as returned by ``GET /nodes/{node}/lxc``."""

    vmid: int = Field(..., ge=0)
    status: str
    name: str | None = None
    uptime: int | None = None
    mem: int | None = None
    maxmem: int | None = None
    maxdisk: int | None = None
    maxswap: int | None = None
    cpu: float | None = None
    cpus: int | None = None
    diskread: int | None = None
    diskwrite: int | None = None


class Container(BaseModel):
    """Normalized container returned to callers."""

    model_config = ConfigDict(frozen=True)

    vmid: int
    name: str
    status: str
    uptime: int = 0
    memory: int = 0
    max_memory: int = 0
    max_disk: int = 0
    max_swap: int = 0
    cpu: float = 0.0
    cpus: int = 1
    disk_read: int = 0
    disk_write: int = 0
    ip_address: str | None = None

    @property
    def is_running(self) -> bool:
        return self.status == "running"

    @classmethod
    def from_raw(cls, raw: RawContainer, ip_address: str | None = None) -> "Container":
        """Build a container from its wire record.

        Absent fields fall back to zero, one CPU, or a ``CT-<vmid>`` name.
        The IP address is dropped unless the container is running.

        Args:
            raw: Wire record
            ip_address: Address found during enrichment, if any

        Returns:
            Normalized container
        """
        return cls(
            vmid=raw.vmid,
            name=raw.name or f"CT-{raw.vmid}",
            status=raw.status,
            uptime=raw.uptime or 0,
            memory=raw.mem or 0,
            max_memory=raw.maxmem or 0,
            max_disk=raw.maxdisk or 0,
            max_swap=raw.maxswap or 0,
            cpu=raw.cpu or 0.0,
            cpus=raw.cpus if raw.cpus is not None else 1,
            disk_read=raw.diskread or 0,
            disk_write=raw.diskwrite or 0,
            ip_address=ip_address if raw.status == "running" else None,
        )


class NetworkInterface(BaseModel):
    """Interface entry from ``GET /nodes/{node}/lxc/{vmid}/interfaces``.

    Format: {"name": "eth0", "inet": "10.0.0.5/24", "inet6": "fe80::1/64"}
    """

    name: str
    inet: str | None = None

    @property
    def address(self) -> str | None:
        """IPv4 address with the prefix length stripped."""
        if not self.inet:
            return None
        return self.inet.split("/", 1)[0]


def first_usable_address(interfaces: list[NetworkInterface]) -> str | None:
    """Return the address of the first non-loopback interface that has one."""
    for iface in interfaces:
        if iface.name == LOOPBACK_INTERFACE:
            continue
        if iface.address:
            return iface.address
    return None

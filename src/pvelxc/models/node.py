"""Node (host) status models."""

from pydantic import BaseModel, ConfigDict


class RawUsage(BaseModel):
    used: int | None = None
    total: int | None = None


class RawCpuInfo(BaseModel):
    cpus: int | None = None
    model: str | None = None
    sockets: int | None = None


class RawNodeStatus(BaseModel):
    """Payload of ``GET /nodes/{node}/status``."""

    cpu: float | None = None
    cpuinfo: RawCpuInfo | None = None
    memory: RawUsage | None = None
    swap: RawUsage | None = None
    rootfs: RawUsage | None = None
    loadavg: list[float | None] | None = None
    wait: float | None = None
    uptime: int | None = None
    kversion: str | None = None


class RawNodeVersion(BaseModel):
    """Payload of ``GET /nodes/{node}/version``."""

    version: str | None = None


class UsageStat(BaseModel):
    """Used/total pair for memory, swap or disk."""

    model_config = ConfigDict(frozen=True)

    used: int = 0
    total: int = 0

    @classmethod
    def from_raw(cls, raw: RawUsage | None) -> "UsageStat":
        if raw is None:
            return cls()
        return cls(used=raw.used or 0, total=raw.total or 0)

    @property
    def percent(self) -> float:
        if not self.total:
            return 0.0
        return self.used / self.total * 100


class HostStatus(BaseModel):
    """Resource summary of the configured node."""

    model_config = ConfigDict(frozen=True)

    cpu: float = 0.0
    cpu_cores: int = 0
    cpu_model: str = "N/A"
    cpu_sockets: int = 0
    memory: UsageStat = UsageStat()
    swap: UsageStat = UsageStat()
    disk: UsageStat = UsageStat()
    load_average: tuple[float, float, float] = (0.0, 0.0, 0.0)
    io_delay: float = 0.0
    uptime: int = 0
    kernel: str = "N/A"
    pve_version: str = "N/A"

    @classmethod
    def from_raw(cls, status: RawNodeStatus, version: RawNodeVersion) -> "HostStatus":
        """Build a summary, treating absent or null wire fields as zero or "N/A"."""
        cpuinfo = status.cpuinfo or RawCpuInfo()
        load = [v or 0.0 for v in (status.loadavg or [])] + [0.0, 0.0, 0.0]
        return cls(
            cpu=status.cpu or 0.0,
            cpu_cores=cpuinfo.cpus or 0,
            cpu_model=cpuinfo.model or "N/A",
            cpu_sockets=cpuinfo.sockets or 0,
            memory=UsageStat.from_raw(status.memory),
            swap=UsageStat.from_raw(status.swap),
            disk=UsageStat.from_raw(status.rootfs),
            load_average=(load[0], load[1], load[2]),
            io_delay=status.wait or 0.0,
            uptime=status.uptime or 0,
            kernel=status.kversion or "N/A",
            pve_version=version.version or "N/A",
        )

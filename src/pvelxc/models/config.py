"""Configuration models."""

from pydantic import BaseModel, ConfigDict, Field

ENV_VARS = {
    "host": "PROXMOX_HOST",
    "node": "PROXMOX_NODE",
    "token_id": "PROXMOX_TOKEN_ID",
    "token_secret": "PROXMOX_TOKEN_SECRET",
    "verify_ssl": "PROXMOX_VERIFY_SSL",
    "timeout": "PROXMOX_TIMEOUT",
}


class Settings(BaseModel):
    """Settings as read from the environment.

    Credentials stay optional here; their absence is reported when the
    API client is built.
    """

    host: str | None = None
    node: str | None = None
    token_id: str | None = None
    token_secret: str | None = None
    verify_ssl: bool = False
    timeout: float = Field(default=30.0, gt=0)


class ConnectionConfig(BaseModel):
    """Validated connection parameters for one Proxmox node."""

    model_config = ConfigDict(frozen=True)

    host: str
    node: str
    token_id: str
    token_secret: str
    verify_ssl: bool = False
    timeout: float = 30.0

    @property
    def base_url(self) -> str:
        if "://" in self.host:
            return f"{self.host.rstrip('/')}/api2/json"
        return f"https://{self.host}/api2/json"


class DisplayConfig(BaseModel):
    """Host/node snapshot shown to the user. Not re-validated."""

    model_config = ConfigDict(frozen=True)

    host: str
    node: str

"""API client and authentication."""

from .auth import TokenAuth, token_header
from .client import ProxmoxClient
from .exceptions import (
    APIError,
    ConfigError,
    DecodeError,
    EnrichmentError,
    HttpStatusError,
    MissingCredentialError,
    NotInitializedError,
    PVELxcError,
    TransportError,
)

__all__ = [
    "APIError",
    "ConfigError",
    "DecodeError",
    "EnrichmentError",
    "HttpStatusError",
    "MissingCredentialError",
    "NotInitializedError",
    "ProxmoxClient",
    "PVELxcError",
    "TokenAuth",
    "TransportError",
    "token_header",
]

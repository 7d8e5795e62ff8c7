"""Custom exceptions for pvelxc API interactions."""


class PVELxcError(Exception):
    """Base exception for pvelxc."""

    pass


class ConfigError(PVELxcError):
    """Configuration related errors."""

    pass


class MissingCredentialError(ConfigError):
    """A required connection setting is absent."""

    def __init__(self, variable: str) -> None:
        """Initialize missing credential error.

        Args:
            variable: Name of the environment variable that was not set
        """
        super().__init__(f"{variable} not set")
        self.variable = variable


class TransportError(PVELxcError):
    """The request could not be sent or no response was received."""

    pass


class APIError(PVELxcError):
    """General API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize API error.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
        """
        super().__init__(message)
        self.status_code = status_code


class HttpStatusError(APIError):
    """The API answered with a non-success status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, status_code=status_code)


class DecodeError(APIError):
    """The response body did not have the expected shape."""

    pass


class NotInitializedError(PVELxcError):
    """No API client is available."""

    def __init__(self, message: str = "Proxmox client not initialized") -> None:
        super().__init__(message)


class EnrichmentError(PVELxcError):
    """Looking up a container's IP address failed."""

    pass

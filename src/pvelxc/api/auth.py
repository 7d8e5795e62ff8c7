"""API token authentication for Proxmox VE."""

from collections.abc import Generator

import httpx


def token_header(token_id: str, token_secret: str) -> str:
    """Build the Authorization header value for an API token.

    Args:
        token_id: Token identifier (``user@realm!name``)
        token_secret: Token secret/UUID

    Returns:
        Header value in ``PVEAPIToken=<id>=<secret>`` form
    """
    return f"PVEAPIToken={token_id}={token_secret}"


class TokenAuth(httpx.Auth):
    """Sign every request with a long-lived API token.

    Tokens are not refreshed and no session cookie is used.
    """

    def __init__(self, token_id: str, token_secret: str) -> None:
        self._header = token_header(token_id, token_secret)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self._header
        yield request

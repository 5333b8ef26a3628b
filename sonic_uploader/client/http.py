"""HTTP client construction for the Sonic API.

One httpx.Client is opened per upload invocation from a frozen
ClientConfig. The token is revealed only here, when the auth header is
built; everywhere else it travels as a SecretStr.
"""

from dataclasses import dataclass
from typing import Optional

import httpx
from pydantic import SecretStr

UPLOAD_PATH = "/server/api/folder/upload"
PACKAGE_PATH = "/server/api/controller/packages"
PROJECT_LIST_PATH = "/api/controller/projects/list"

TOKEN_HEADER = "SonicToken"

# Timeout for metadata and listing calls
API_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for one Sonic server.

    token may be empty for unauthenticated endpoints (project listing).
    """

    host: str
    token: SecretStr = SecretStr("")
    timeout: float = API_TIMEOUT


def auth_headers(token: SecretStr) -> dict[str, str]:
    value = token.get_secret_value()
    if not value:
        return {}
    return {TOKEN_HEADER: value}


def open_client(
    config: ClientConfig,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Build an httpx.Client bound to config.host.

    The caller owns the client and must close it (use it as a context
    manager). transport is injectable so tests can use httpx.MockTransport.
    """
    return httpx.Client(
        base_url=config.host,
        headers=auth_headers(config.token),
        timeout=config.timeout,
        transport=transport,
    )

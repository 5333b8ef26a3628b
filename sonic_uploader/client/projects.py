"""Project lister — fetches the projects known to the Sonic server.

Used to offer a project choice when configuring the upload step; it is
not part of the upload flow. The endpoint needs no token.
"""

import logging
from typing import Optional

import httpx

from sonic_uploader.client.envelope import HttpEnvelope, decode_envelope
from sonic_uploader.client.http import PROJECT_LIST_PATH, ClientConfig, open_client
from sonic_uploader.client.types import Project
from sonic_uploader.core.config import Settings
from sonic_uploader.errors import MissingConfiguration

logger = logging.getLogger(__name__)


def list_projects(
    settings: Settings,
    transport: Optional[httpx.BaseTransport] = None,
) -> HttpEnvelope[list[Project]]:
    """GET the full project list from settings.host.

    Raises:
        MissingConfiguration: settings.host is not set.
        httpx.HTTPStatusError: the server answered with a non-2xx status.
        httpx.HTTPError: transport failure.
        UploadFailed: the body is not a project-list envelope.
    """
    if not settings.host:
        raise MissingConfiguration(
            "Sonic Url is null! Please set SONIC_HOST in the global configuration."
        )

    config = ClientConfig(host=settings.host, timeout=settings.timeout_seconds)
    with open_client(config, transport=transport) as client:
        response = client.get(PROJECT_LIST_PATH)
        response.raise_for_status()
        envelope = decode_envelope(response, list[Project])

    logger.debug("Fetched %d projects from %s", len(envelope.data or []), settings.host)
    return envelope

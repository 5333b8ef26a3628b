"""Sonic server API client.

Public API:
    open_client(config) -> httpx.Client
    upload_package(client, path, outputs, on_event) -> Optional[str]
    save_package_info(client, metadata) -> bool
    list_projects(settings) -> HttpEnvelope[list[Project]]
"""

from sonic_uploader.client.envelope import HttpEnvelope, decode_envelope
from sonic_uploader.client.http import ClientConfig, open_client
from sonic_uploader.client.packages import platform_for, save_package_info
from sonic_uploader.client.projects import list_projects
from sonic_uploader.client.types import PackageMetadata, Platform, Project
from sonic_uploader.client.upload import upload_package

__all__ = [
    "ClientConfig",
    "HttpEnvelope",
    "PackageMetadata",
    "Platform",
    "Project",
    "decode_envelope",
    "list_projects",
    "open_client",
    "platform_for",
    "save_package_info",
    "upload_package",
]

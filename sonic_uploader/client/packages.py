"""Package metadata reporter.

After a successful upload the package is registered against a Sonic
project with a PUT of PackageMetadata. The outcome is logged in full but
never changes the result of the upload step: the file is already live.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from sonic_uploader.client.envelope import HttpEnvelope
from sonic_uploader.client.http import PACKAGE_PATH
from sonic_uploader.client.types import PackageMetadata, Platform
from sonic_uploader.core.logging import HEADER_RULE

logger = logging.getLogger(__name__)


def platform_for(file_name: str) -> Platform:
    """Derive the platform tag from a package file name.

    Only the text after the last "." is inspected, and it is checked for
    *containing* "ipa" rather than being equal to it: "foo.zipa" is tagged
    iOS while "whatsipa.apk" is Android.
    """
    dot = file_name.rfind(".")
    ext = file_name[dot:] if dot >= 0 else ""
    if not ext.strip():
        return Platform.UNKNOWN
    if "ipa" in ext:
        return Platform.IOS
    return Platform.ANDROID


def save_package_info(client: httpx.Client, metadata: PackageMetadata) -> bool:
    """PUT package metadata to the Sonic server.

    Returns True when the server acknowledged it. Transport errors are
    logged and reported as False.
    """
    try:
        response = client.put(PACKAGE_PATH, json=metadata.to_payload())
    except httpx.HTTPError as exc:
        logger.error(HEADER_RULE)
        logger.error("Send package info failed.")
        logger.error("%s: %s", type(exc).__name__, exc)
        logger.error(HEADER_RULE)
        return False

    ok = response.is_success and _envelope_ok(response)

    logger.info(HEADER_RULE)
    if ok:
        logger.info("Send package info successful!")
        logger.info("%s", response.text)
    else:
        logger.error("Send package info failed.")
        logger.error("HTTP %d: %s", response.status_code, response.text)
    logger.info(HEADER_RULE)
    return ok


def _envelope_ok(response: httpx.Response) -> bool:
    # An empty 2xx body is treated as acknowledgement.
    if not response.content:
        return True
    try:
        envelope = HttpEnvelope[Any].model_validate_json(response.content)
    except ValidationError:
        return False
    return envelope.is_success

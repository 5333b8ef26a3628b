"""Upload orchestrator — the build step itself.

Pipeline, each step short-circuiting the rest on failure:
  1. Expand build placeholders in host, api key and scan dir.
  2. Validate the project id (non-empty integer) and host.
  3. locate_artifact() — newest ipa/apk under the scan dir.
  4. upload_package() — multipart upload, publishes `appURL`.
  5. Resolve ${GIT_BRANCH} / ${BUILD_URL}, "unknown" when not expanded.
  6. save_package_info() — logged only; the upload already succeeded.

The result is a plain bool for the CI host. Nothing here raises for an
expected failure; each one is logged with its reason.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import httpx
import structlog
from pydantic import SecretStr

from sonic_uploader.build.environment import BuildEnvironment
from sonic_uploader.build.outputs import BuildOutputs
from sonic_uploader.client.http import API_TIMEOUT, ClientConfig, open_client
from sonic_uploader.client.packages import platform_for, save_package_info
from sonic_uploader.client.types import PackageMetadata
from sonic_uploader.client.upload import EventCallback, upload_package
from sonic_uploader.core.config import Settings
from sonic_uploader.core.logging import print_header, reset_build_tag, set_build_tag
from sonic_uploader.errors import (
    MissingArtifact,
    MissingProjectId,
    SonicUploadError,
    UploadFailed,
)
from sonic_uploader.locator.scanner import locate_artifact

logger = structlog.get_logger(__name__)

BRANCH_PLACEHOLDER = "${GIT_BRANCH}"
BUILD_URL_PLACEHOLDER = "${BUILD_URL}"


@dataclass
class UploadParameters:
    """Per-invocation inputs of the upload step.

    host, api_key and scan_dir may hold build placeholders; they are
    expanded by run_upload(), never stored expanded. project_id is used
    as given.
    """

    host: str = ""
    api_key: SecretStr = field(default_factory=lambda: SecretStr(""))
    scan_dir: str = ""
    project_id: str = ""


@dataclass(frozen=True)
class ResolvedParameters:
    host: str
    api_key: SecretStr
    scan_dir: str
    project_id: int


def resolve_parameters(
    params: UploadParameters,
    env: BuildEnvironment,
    settings: Optional[Settings] = None,
) -> ResolvedParameters:
    """Expand placeholders and validate the step inputs.

    Raises:
        MissingProjectId: project id is empty or not an integer.
        UploadFailed: no host given and none configured globally.
    """
    host = (env.expand(params.host) or "").strip().rstrip("/")
    if not host and settings is not None:
        host = settings.host or ""
    api_key = SecretStr(env.expand(params.api_key.get_secret_value()) or "")
    scan_dir = env.expand(params.scan_dir) or ""
    raw_project_id = (params.project_id or "").strip()

    if not raw_project_id:
        raise MissingProjectId("Project id is missing! Please choose a Sonic project.")
    try:
        project_id = int(raw_project_id)
    except ValueError:
        raise MissingProjectId(f"Project id must be an integer, got {raw_project_id!r}") from None

    if not host:
        raise UploadFailed("Sonic host is missing! Please set the upload host.")

    return ResolvedParameters(
        host=host,
        api_key=api_key,
        scan_dir=scan_dir,
        project_id=project_id,
    )


def run_upload(
    params: UploadParameters,
    env: BuildEnvironment,
    outputs: Optional[BuildOutputs] = None,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
    on_event: Optional[EventCallback] = None,
) -> bool:
    """Run the whole upload step. Returns True once the upload succeeded."""
    token = set_build_tag(env.get("BUILD_TAG") or "")
    try:
        return _run(params, env, outputs, settings, transport, on_event)
    finally:
        reset_build_tag(token)


def _run(
    params: UploadParameters,
    env: BuildEnvironment,
    outputs: Optional[BuildOutputs],
    settings: Optional[Settings],
    transport: Optional[httpx.BaseTransport],
    on_event: Optional[EventCallback],
) -> bool:
    try:
        resolved = resolve_parameters(params, env, settings)
        artifact = _resolve_artifact(resolved.scan_dir)
    except SonicUploadError as exc:
        logger.error(str(exc), error=type(exc).__name__)
        return False

    print_header(logger)
    logger.info("Uploading package", path=str(artifact), project_id=resolved.project_id)

    config = ClientConfig(
        host=resolved.host,
        token=resolved.api_key,
        timeout=settings.timeout_seconds if settings is not None else API_TIMEOUT,
    )
    upload_timeout = settings.upload_timeout_seconds if settings is not None else None

    try:
        client = open_client(config, transport=transport)
    except httpx.InvalidURL as exc:
        logger.error("Invalid Sonic host", host=resolved.host, error=str(exc))
        return False

    with client:
        url = upload_package(
            client,
            artifact,
            outputs=outputs,
            on_event=on_event,
            timeout=upload_timeout,
        )
        if not url:
            logger.error("Upload failed", error="UploadFailed")
            return False

        metadata = PackageMetadata(
            pkg_name=artifact.name,
            url=url,
            platform=platform_for(artifact.name),
            project_id=resolved.project_id,
            branch=env.expand_or_unknown(BRANCH_PLACEHOLDER),
            build_url=env.expand_or_unknown(BUILD_URL_PLACEHOLDER),
        )
        save_package_info(client, metadata)

    return True


def _resolve_artifact(scan_dir: str) -> Path:
    path = locate_artifact(scan_dir)
    if not path:
        raise MissingArtifact("Can't find the package file! Please check the scan dir.")
    artifact = Path(path)
    if not artifact.is_file():
        raise MissingArtifact(f"Package file is missing or not a regular file: {artifact}")
    return artifact

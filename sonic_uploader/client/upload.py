"""Package uploader — sends one package file to the Sonic server.

The upload flow:
1. POST the file as multipart (`file` + `type=packageFiles`) to
   UPLOAD_PATH with the SonicToken header already set on the client.
2. While the transport reads the file, emit a progress event every
   PROGRESS_STEP_PERCENT of the bytes.
3. Decode the response as HttpEnvelope[str]; its data is the download URL.
4. Publish the URL as the `appURL` build output for later steps. The
   file is already live by then, so a failed publish is only logged.

Failures never raise: transport errors, non-2xx statuses and malformed
bodies are logged and reported as None. There is no retry; re-posting
would create a duplicate file on the server.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Callable, Optional

import httpx

from sonic_uploader.build.outputs import BuildOutputs
from sonic_uploader.client.envelope import decode_envelope
from sonic_uploader.client.http import UPLOAD_PATH
from sonic_uploader.core.logging import HEADER_RULE
from sonic_uploader.errors import UploadFailed

logger = logging.getLogger(__name__)

UPLOAD_TYPE = "packageFiles"
APP_URL_OUTPUT = "appURL"

PROGRESS_STEP_PERCENT = 5

EventCallback = Callable[[str, dict], None]


class ProgressReader:
    """Binary file wrapper that reports how much of it has been read.

    httpx streams multipart file fields by calling read() in chunks, so
    bytes read are bytes handed to the transport. seek() moves the counter
    with the file position; httpx seeks to 0 before streaming and probes
    the length with seek/tell.
    """

    def __init__(
        self,
        fh: BinaryIO,
        total: int,
        on_progress: Callable[[int, int, int], None],
    ):
        self._fh = fh
        self._total = total
        self._on_progress = on_progress
        self._sent = 0
        self._last_reported = 0

    @property
    def mode(self) -> str:
        return "rb"

    def read(self, size: int = -1) -> bytes:
        chunk = self._fh.read(size)
        self._sent += len(chunk)
        self._report()
        return chunk

    def seek(self, offset: int, whence: int = 0) -> int:
        position = self._fh.seek(offset, whence)
        self._sent = position
        return position

    def tell(self) -> int:
        return self._fh.tell()

    def fileno(self) -> int:
        return self._fh.fileno()

    def _report(self) -> None:
        if self._total <= 0:
            percent = 100
        else:
            percent = min(100, self._sent * 100 // self._total)
        bucket = percent - percent % PROGRESS_STEP_PERCENT
        if bucket > self._last_reported:
            self._last_reported = bucket
            self._on_progress(bucket, self._sent, self._total)


def upload_package(
    client: httpx.Client,
    path: str | Path,
    outputs: Optional[BuildOutputs] = None,
    on_event: Optional[EventCallback] = None,
    timeout: Optional[float] = None,
) -> Optional[str]:
    """Upload a package file and return its download URL.

    Args:
        client: Client bound to the Sonic host with the token header set.
        path: Existing regular file; the caller checks this beforehand.
        outputs: Receives `appURL` on success. Nothing is published on failure.
        on_event: Optional observer invoked as on_event(event_type, data)
            with "upload.progress" ({"percent", "sent", "total"}) and
            "upload.error" ({"error"}) events. Progress is logged when no
            observer is given.
        timeout: Per-request timeout override for large files.

    Returns:
        The download URL, or None when the upload failed for any reason.
    """
    path = Path(path)

    def _emit(event_type: str, data: dict) -> None:
        if on_event is None:
            if event_type == "upload.progress":
                logger.info("upload progress: %d %%", data["percent"])
            return
        try:
            on_event(event_type, data)
        except Exception:
            logger.warning("Upload observer failed on %s", event_type, exc_info=True)

    def _on_progress(percent: int, sent: int, total: int) -> None:
        _emit("upload.progress", {"percent": percent, "sent": sent, "total": total})

    try:
        response = _post_file(client, path, _on_progress, timeout)
    except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
        logger.error("upload exception: ")
        logger.error("%s: %s", type(exc).__name__, exc)
        _emit("upload.error", {"error": str(exc)})
        return None

    try:
        url = _parse_upload_response(response)
    except UploadFailed as exc:
        _log_failure(exc)
        _emit("upload.error", {"error": str(exc)})
        return None

    logger.info("${%s}: %s", APP_URL_OUTPUT, url)
    if outputs is not None:
        _publish(outputs, url)
    return url


def _publish(outputs: BuildOutputs, url: str) -> None:
    try:
        outputs.publish(APP_URL_OUTPUT, url)
    except (OSError, ValueError) as exc:
        logger.error("Could not publish build output %s: %s", APP_URL_OUTPUT, exc)


def _post_file(
    client: httpx.Client,
    path: Path,
    on_progress: Callable[[int, int, int], None],
    timeout: Optional[float],
) -> httpx.Response:
    total = path.stat().st_size
    with path.open("rb") as fh:
        reader = ProgressReader(fh, total, on_progress)
        kwargs = {}
        if timeout is not None:
            kwargs["timeout"] = timeout
        return client.post(
            UPLOAD_PATH,
            files={"file": (path.name, reader, "application/octet-stream")},
            data={"type": UPLOAD_TYPE},
            **kwargs,
        )


def _parse_upload_response(response: httpx.Response) -> str:
    """Extract the download URL from an upload response.

    Raises:
        UploadFailed: non-2xx status, malformed body, failure envelope,
            or an envelope without a URL.
    """
    if not response.is_success:
        raise UploadFailed(
            f"Upload rejected with HTTP {response.status_code}",
            status_code=response.status_code,
            body=response.text,
        )

    envelope = decode_envelope(response, str)
    if not envelope.is_success or not envelope.data:
        raise UploadFailed(
            f"Upload envelope reported failure: {envelope.message or 'no data'}",
            status_code=response.status_code,
            body=response.text,
        )
    return envelope.data


def _log_failure(exc: UploadFailed) -> None:
    logger.error(HEADER_RULE)
    logger.error("Upload file failed.")
    logger.error("%s (status=%s)", exc, exc.status_code)
    logger.error("%s", exc.body)
    logger.error(HEADER_RULE)

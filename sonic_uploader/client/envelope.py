"""Generic response envelope and its decoder.

Every Sonic endpoint wraps its payload as::

    {"code": 2000, "message": "ok", "data": <payload>}

Some deployments add an explicit ``"success": true|false``. A response is
a success when ``success`` is not false and ``code``, if present, is the
server's success code.
"""

from typing import Generic, Optional, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from sonic_uploader.errors import UploadFailed

T = TypeVar("T")

SUCCESS_CODE = 2000


class HttpEnvelope(BaseModel, Generic[T]):
    model_config = ConfigDict(extra="ignore")

    code: Optional[int] = None
    message: Optional[str] = None
    success: Optional[bool] = None
    data: Optional[T] = None

    @property
    def is_success(self) -> bool:
        if self.success is False:
            return False
        return self.code is None or self.code == SUCCESS_CODE


def decode_envelope(response: httpx.Response, payload_type: type[T]) -> HttpEnvelope[T]:
    """Decode a response body as HttpEnvelope[payload_type].

    Raises:
        UploadFailed: the body is not JSON or does not match the envelope
            shape. The raw body is attached for logging.
    """
    try:
        return HttpEnvelope[payload_type].model_validate_json(response.content)
    except ValidationError as exc:
        raise UploadFailed(
            f"Malformed response body: {exc.error_count()} validation error(s)",
            status_code=response.status_code,
            body=response.text,
        ) from exc

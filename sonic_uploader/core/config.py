from typing import Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _normalise_host(url: Optional[str]) -> Optional[str]:
    """Strip whitespace and trailing slashes from a Sonic host URL.

    Endpoint paths are appended with a leading slash, so a host entered as
    ``https://sonic.example.com/`` would otherwise produce ``//server/...``.
    An empty string is treated as "not configured".
    """
    if url is None:
        return None
    url = url.strip().rstrip("/")
    return url or None


class Settings(BaseSettings):
    """Uploader settings loaded from SONIC_* environment variables.

    ``host`` is the global Sonic server URL. Project listing requires it;
    the upload step falls back to it when no per-invocation host is given.

    Per-invocation inputs (api_key, scan_dir, project_id) may contain
    build placeholders such as ``${WORKSPACE}``; they are expanded later
    against the build environment, not here.
    """

    model_config = SettingsConfigDict(
        env_prefix="SONIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Sonic server
    host: Optional[str] = None
    api_key: SecretStr = SecretStr("")

    @field_validator("host", mode="before")
    @classmethod
    def normalise_host(cls, v: Optional[str]) -> Optional[str]:
        return _normalise_host(v)

    # Upload step inputs
    scan_dir: str = "${WORKSPACE}"
    project_id: str = ""

    # HTTP timeouts in seconds. Uploads of large ipa files need the longer one.
    timeout_seconds: float = 30.0
    upload_timeout_seconds: float = 600.0

    # File that receives NAME=value lines for later build steps.
    output_file: Optional[str] = None

    # Logging
    debug: bool = False


def get_settings() -> Settings:
    return Settings()

"""Error taxonomy for the upload flow.

Leaf helpers raise these; the orchestrator converts them into a logged
message plus a boolean failure result. Only MissingConfiguration is
allowed to escape to callers (project listing).
"""


class SonicUploadError(Exception):
    """Base class for all upload-flow failures."""


class MissingProjectId(SonicUploadError):
    """Raised when the project id is empty or not an integer."""


class MissingArtifact(SonicUploadError):
    """Raised when no uploadable package file could be resolved."""


class NoArtifactFound(MissingArtifact):
    """Raised when the scan directory holds no ipa/apk file."""


class DirectoryNotFound(SonicUploadError):
    """Raised when the scan root is missing or not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Scan dir isn't exist or it's not a directory: {path}")


class UploadFailed(SonicUploadError):
    """Raised when the server rejects an upload or returns a bad body.

    Carries the HTTP status and raw body for the failure log.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class MissingConfiguration(SonicUploadError):
    """Raised when the global Sonic host has not been configured."""

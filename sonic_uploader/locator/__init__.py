"""Artifact locator: finds the package file a build produced.

Public API:
    find_artifact(scan_dir) -> ArtifactFile
    locate_artifact(scan_dir) -> Optional[str]
"""

from sonic_uploader.locator.scanner import find_artifact, locate_artifact
from sonic_uploader.locator.types import PACKAGE_EXTENSIONS, ArtifactFile

__all__ = ["ArtifactFile", "PACKAGE_EXTENSIONS", "find_artifact", "locate_artifact"]

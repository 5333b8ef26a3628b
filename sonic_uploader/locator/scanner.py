"""Artifact scanner — picks the package file to upload from a build tree.

Selection:
1. Walk scan_dir recursively, keeping regular files whose extension is in
   PACKAGE_EXTENSIONS. The walk is path-sorted so the result is stable for
   a given filesystem state.
2. A single match is returned as-is.
3. Several matches are ordered by modification time, newest first; ties
   keep walk order. The newest one wins.
"""

import logging
from pathlib import Path
from typing import Optional

from sonic_uploader.errors import DirectoryNotFound, NoArtifactFound, SonicUploadError
from sonic_uploader.locator.types import PACKAGE_EXTENSIONS, ArtifactFile

logger = logging.getLogger(__name__)


def find_artifact(scan_dir: str | Path) -> ArtifactFile:
    """Return the most recently modified ipa/apk under scan_dir.

    Raises:
        DirectoryNotFound: scan_dir is missing or not a directory.
        NoArtifactFound: no matching file exists below scan_dir.
    """
    # Path("") means the working directory; an unset scan dir must not scan it.
    if not str(scan_dir).strip():
        raise DirectoryNotFound(str(scan_dir))

    root = Path(scan_dir).absolute()
    if not root.is_dir():
        raise DirectoryNotFound(str(root))

    candidates = _scan(root)
    if not candidates:
        raise NoArtifactFound(f"No .ipa or .apk file found under {root}")

    if len(candidates) == 1:
        return candidates[0]

    candidates.sort(key=lambda c: c.mtime, reverse=True)
    chosen = candidates[0]
    logger.info(
        "Found %d files, the default choice of the latest modified file!",
        len(candidates),
    )
    logger.info("The latest modified file is %s", chosen.path)
    return chosen


def locate_artifact(scan_dir: str | Path) -> Optional[str]:
    """Failure-as-absent form of find_artifact, used by the orchestrator.

    Returns the absolute path of the chosen file, or None after logging
    why nothing could be selected.
    """
    try:
        return str(find_artifact(scan_dir).path)
    except DirectoryNotFound as exc:
        logger.error("Scan dir: %s", exc.path)
        logger.error("Scan dir isn't exist or it's not a directory!")
    except SonicUploadError as exc:
        logger.error("%s", exc)
    return None


def _scan(root: Path) -> list[ArtifactFile]:
    results: list[ArtifactFile] = []
    for path in sorted(root.rglob("*")):
        if path.suffix[1:] not in PACKAGE_EXTENSIONS:
            continue
        if not path.is_file():
            continue
        results.append(ArtifactFile(path=path, mtime=path.stat().st_mtime))
    return results

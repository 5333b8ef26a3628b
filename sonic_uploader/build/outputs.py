"""Build-output variables for downstream steps.

A successful upload publishes ``appURL`` so later steps can pass the
download link to test jobs. Values are kept in memory and, when a path is
configured, appended as ``NAME=value`` lines (the format GitHub Actions'
``$GITHUB_ENV`` and dotenv-style injectors read).
"""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class BuildOutputs:
    def __init__(self, path: Optional[str | Path] = None):
        self.path = Path(path) if path else None
        self.variables: dict[str, str] = {}

    def publish(self, name: str, value: str) -> None:
        if "\n" in value or "\r" in value:
            raise ValueError(f"Build output {name!r} must be a single line")

        self.variables[name] = value
        if self.path is not None:
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(f"{name}={value}\n")
        logger.debug("Published build output %s", name)

    def get(self, name: str) -> Optional[str]:
        return self.variables.get(name)

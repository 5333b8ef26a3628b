"""Sonic build-step uploader.

Finds the freshest mobile package produced by a CI build, uploads it to a
Sonic server and records the package metadata against a Sonic project.

Public API:
    run_upload(params, env, outputs) -> bool
    list_projects(settings) -> HttpEnvelope[list[Project]]
"""

__version__ = "0.1.0"

from sonic_uploader.client.projects import list_projects
from sonic_uploader.orchestrator import UploadParameters, run_upload

__all__ = ["UploadParameters", "__version__", "list_projects", "run_upload"]

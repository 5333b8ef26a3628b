"""Command-line entry point for CI jobs.

Usage:
    sonic-upload upload --project-id=3                  # host/key from SONIC_*
    sonic-upload upload --scan-dir='${WORKSPACE}/out'   # placeholders expand
    sonic-upload projects --host=https://sonic.example.com

Exit codes: 0 success, 1 upload/HTTP failure, 2 missing configuration.
"""

from typing import Annotated, Optional

import httpx
import structlog
import typer
from pydantic import SecretStr

from sonic_uploader import __version__
from sonic_uploader.build.environment import BuildEnvironment
from sonic_uploader.build.outputs import BuildOutputs
from sonic_uploader.client.projects import list_projects
from sonic_uploader.core.config import Settings, get_settings
from sonic_uploader.core.logging import configure_structlog
from sonic_uploader.errors import MissingConfiguration, SonicUploadError
from sonic_uploader.orchestrator import UploadParameters, run_upload

logger = structlog.get_logger(__name__)

app = typer.Typer(
    name="sonic-upload",
    help="Upload the newest ipa/apk of a build to a Sonic server.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sonic-upload {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
) -> None:
    """Sonic build-step uploader."""


@app.command()
def upload(
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Sonic server URL. Defaults to SONIC_HOST."),
    ] = None,
    api_key: Annotated[
        Optional[str],
        typer.Option("--api-key", help="Sonic API token. Defaults to SONIC_API_KEY."),
    ] = None,
    scan_dir: Annotated[
        Optional[str],
        typer.Option("--scan-dir", help="Directory searched for ipa/apk files."),
    ] = None,
    project_id: Annotated[
        Optional[str],
        typer.Option("--project-id", help="Numeric Sonic project id."),
    ] = None,
    output_file: Annotated[
        Optional[str],
        typer.Option("--output-file", help="File receiving appURL=<url> for later steps."),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Human-readable console logs."),
    ] = False,
) -> None:
    """Locate, upload and register a package."""
    settings = get_settings()
    configure_structlog(debug=debug or settings.debug)

    params = UploadParameters(
        host=host or settings.host or "",
        api_key=SecretStr(api_key) if api_key else settings.api_key,
        scan_dir=scan_dir or settings.scan_dir,
        project_id=project_id if project_id is not None else settings.project_id,
    )
    outputs = BuildOutputs(output_file or settings.output_file)

    ok = run_upload(params, BuildEnvironment.from_os(), outputs=outputs, settings=settings)
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def projects(
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Sonic server URL. Defaults to SONIC_HOST."),
    ] = None,
) -> None:
    """List the projects known to the Sonic server."""
    settings = Settings(host=host) if host else get_settings()
    configure_structlog(debug=settings.debug)

    try:
        envelope = list_projects(settings)
    except MissingConfiguration as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    except (httpx.HTTPError, SonicUploadError) as exc:
        logger.error("Project listing failed", error=str(exc))
        typer.echo(f"Project listing failed: {exc}", err=True)
        raise typer.Exit(code=1)

    for project in envelope.data or []:
        typer.echo(f"{project.id}\t{project.project_name}")


if __name__ == "__main__":
    app()

"""graphcool init CLI command.

Creates a new project from a schema (URL, path, or local project file)
or clones an existing one, then writes project.graphcool.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from graphcool.api.errors import ApiError, generate_error_output, parse_errors
from graphcool.cli.output import Output
from graphcool.commands.init import FailureKind, InitFailure, run_init
from graphcool.environment import debug_enabled, open_environment
from graphcool.models.config import load_config
from graphcool.models.project import Region
from graphcool.models.request import CloneRequest, CreateRequest, InitRequest

console = Console(stderr=True)


def init(
    copy_project_id: Optional[str] = typer.Option(
        None, "--copy-project-id", "-c", help="ID of an existing project to clone"
    ),
    project_file: Optional[str] = typer.Option(
        None, "--project-file", "-p", help="Project file of the project to clone"
    ),
    copy_options: Optional[str] = typer.Option(
        None,
        "--copy-options",
        help="What to clone: all, data or mutation-callbacks (default: all)",
    ),
    schema_url: Optional[str] = typer.Option(
        None, "--schema-url", "-s", help="URL or path of a GraphQL schema"
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Project name"),
    alias: Optional[str] = typer.Option(None, "--alias", "-a", help="Project alias"),
    region: Optional[Region] = typer.Option(None, "--region", "-r", help="Project region"),
    output_path: Optional[str] = typer.Option(
        None, "--output-path", "-o", help="Where to write the project file"
    ),
    debug: bool = typer.Option(False, "--debug", help="Log API requests to stderr"),
) -> None:
    """Initialize a new Graphcool project.

    Without --copy-project-id, creates a project from --schema-url or a
    local .graphcool file. With it, clones that project instead.
    """
    request = build_request(
        copy_project_id=copy_project_id,
        project_file=project_file,
        copy_options=copy_options,
        schema_url=schema_url,
        name=name,
        alias=alias,
        region=region,
        output_path=output_path,
    )
    asyncio.run(_init_async(request, debug=debug_enabled(debug)))


def build_request(
    *,
    copy_project_id: str | None,
    project_file: str | None,
    copy_options: str | None,
    schema_url: str | None,
    name: str | None,
    alias: str | None,
    region: Region | None,
    output_path: str | None,
) -> InitRequest:
    """Turn CLI flags into a CloneRequest or a CreateRequest.

    Raises:
        typer.BadParameter: If flags of both modes are mixed.
    """
    if copy_project_id:
        if schema_url or alias or region:
            raise typer.BadParameter(
                "--schema-url, --alias and --region cannot be combined with --copy-project-id"
            )
        return CloneRequest(
            copy_project_id=copy_project_id,
            project_file=project_file,
            copy_options=copy_options or "all",
            name=name,
            output_path=output_path,
        )

    if project_file or copy_options:
        raise typer.BadParameter(
            "--project-file and --copy-options require --copy-project-id"
        )
    return CreateRequest(
        schema_url=schema_url,
        name=name,
        alias=alias,
        region=region,
        output_path=output_path,
    )


async def _init_async(request: InitRequest, *, debug: bool) -> None:
    """Async implementation of the init command."""
    config = load_config()
    out = Output(err_console=console)

    async with open_environment("init", config, root=Path.cwd(), out=out, debug=debug) as env:
        try:
            outcome = await run_init(request, env)
        except ApiError as exc:
            # Clone failures arrive here unformatted
            out.write_error(generate_error_output(parse_errors(exc)))
            raise typer.Exit(code=1)

    if isinstance(outcome, InitFailure):
        if outcome.kind is FailureKind.PROJECT_ALREADY_EXISTS:
            console.print(f"[bold red]Error:[/bold red] {outcome.message}", highlight=False)
        raise typer.Exit(code=1)

"""Clone an existing project and write the clone's project file."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

from graphcool.environment import SystemEnvironment
from graphcool.messages import cloned_project_message, cloning_project_message
from graphcool.project_file import GRAPHCOOL_PROJECT_FILE_NAME, write_project_file


@dataclass(frozen=True)
class CloneProps:
    """Inputs of the clone command, derived from a CloneRequest."""

    source_project_id: str
    project_file: str | None = None
    output_path: str | None = None
    name: str | None = None
    include_data: bool = True
    include_mutation_callbacks: bool = True


def clone_output_path(props: CloneProps) -> str:
    """Where the clone's project file goes: --output-path, else clone-<project file>."""
    if props.output_path:
        return props.output_path
    project_file = props.project_file or GRAPHCOOL_PROJECT_FILE_NAME
    directory, filename = posixpath.split(project_file)
    return posixpath.join(directory, f"clone-{filename}")


async def clone(props: CloneProps, env: SystemEnvironment) -> None:
    """Clone props.source_project_id via the system API.

    Errors propagate to the caller; the spinner is always stopped.
    """
    name = props.name or f"Clone of {props.source_project_id}"
    env.log.debug(
        "cloning %s (data=%s, mutation callbacks=%s)",
        props.source_project_id,
        props.include_data,
        props.include_mutation_callbacks,
    )

    env.out.start_spinner(cloning_project_message(props.source_project_id, name))
    try:
        project_info = await env.api.clone_project(
            props.source_project_id,
            name,
            include_data=props.include_data,
            include_mutation_callbacks=props.include_mutation_callbacks,
        )
        path = write_project_file(project_info, env.resolver, clone_output_path(props))
    finally:
        env.out.stop_spinner()

    env.log.debug("wrote %s", path)
    env.out.write(
        cloned_project_message(name, props.source_project_id, project_info.project_id)
    )

"""`graphcool init`: clone an existing project or create a new one.

Create mode resolves a schema (URL, path, or a local .graphcool file),
submits it to the system API, and writes project.graphcool. Expected
failures come back as InitFailure; anything unexpected propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

import httpx

from graphcool.api.client import SystemApiClient
from graphcool.api.errors import (
    ApiError,
    GraphcoolError,
    generate_error_output,
    parse_errors,
)
from graphcool.commands.clone import CloneProps, clone
from graphcool.environment import SystemEnvironment
from graphcool.messages import (
    COULD_NOT_CREATE_PROJECT_MESSAGE,
    created_project_message,
    creating_project_message,
    invalid_schema_file_message,
    no_schema_found_message,
    project_already_exists_message,
)
from graphcool.models.project import ProjectInfo, Region, SchemaInfo
from graphcool.models.request import CloneRequest, CreateRequest, InitRequest
from graphcool.names import generate_name
from graphcool.project_file import (
    EXAMPLE_TYPE_HINT,
    GRAPHCOOL_PROJECT_FILE_NAME,
    PROJECT_FILE_SUFFIX,
    SAMPLE_SCHEMA_URL,
    is_schema_url,
    is_valid_schema_file_path,
    project_info_to_contents,
    write_blank_project_file_with_info,
    write_project_file,
)
from graphcool.resolver import Resolver


class FailureKind(str, Enum):
    """Expected ways for init to fail; each is reported, not raised."""

    PROJECT_ALREADY_EXISTS = "project_already_exists"
    INVALID_SCHEMA_PATH = "invalid_schema_path"
    NO_SCHEMA_FOUND = "no_schema_found"
    CREATION_API_ERROR = "creation_api_error"


@dataclass(frozen=True)
class InitSuccess:
    """Init finished. project_info is None for clone mode."""

    project_info: ProjectInfo | None = None
    project_file: str | None = None


@dataclass(frozen=True)
class InitFailure:
    """Init stopped on an expected failure.

    Failures raised after the spinner starts have already been written
    to the error stream; PROJECT_ALREADY_EXISTS is left to the caller.
    """

    kind: FailureKind
    message: str


InitOutcome = Union[InitSuccess, InitFailure]


class InvalidSchemaPathError(GraphcoolError):
    """Raised when --schema-url is neither a URL nor a schema file path."""

    def __init__(self, schema_url: str) -> None:
        self.schema_url = schema_url
        super().__init__(invalid_schema_file_message(schema_url))


class NoSchemaFoundError(GraphcoolError):
    """Raised when no schema was given and no .graphcool file exists locally."""

    def __init__(self) -> None:
        super().__init__(no_schema_found_message())


def derive_include_flags(copy_options: str | None) -> tuple[bool, bool]:
    """Map --copy-options to (include_data, include_mutation_callbacks).

    Absent or "all" enables both; "data" or "mutation-callbacks" enables
    only that one; anything else enables neither.
    """
    includes = copy_options or "all"
    include_data = includes in ("all", "data")
    include_mutation_callbacks = includes in ("all", "mutation-callbacks")
    return include_data, include_mutation_callbacks


async def run_init(request: InitRequest, env: SystemEnvironment) -> InitOutcome:
    """Dispatch to clone or create mode.

    Clone errors are not caught here; they propagate from clone().
    """
    if isinstance(request, CloneRequest):
        include_data, include_mutation_callbacks = derive_include_flags(request.copy_options)
        props = CloneProps(
            source_project_id=request.copy_project_id,
            project_file=request.project_file,
            output_path=request.output_path,
            name=request.name,
            include_data=include_data,
            include_mutation_callbacks=include_mutation_callbacks,
        )
        await clone(props, env)
        return InitSuccess()

    return await create_project(request, env)


async def create_project(request: CreateRequest, env: SystemEnvironment) -> InitOutcome:
    """Create a new project from a schema and write its project file."""
    resolver, out, log = env.resolver, env.out, env.log

    project_files = resolver.project_files(".")
    if project_files and not request.output_path:
        return InitFailure(
            FailureKind.PROJECT_ALREADY_EXISTS,
            project_already_exists_message(project_files),
        )

    name = request.name or generate_name()
    out.start_spinner(creating_project_message(name))

    try:
        schema_url = request.schema_url
        if not is_valid_schema_file_path(schema_url):
            raise InvalidSchemaPathError(schema_url or "")
        schema = await get_schema(schema_url, resolver, env.http)
        log.debug("resolved schema from %s (%d chars)", schema.source, len(schema.schema))

        project_info = await create_project_and_get_project_info(
            name, schema, env.api, request.alias, request.region
        )
        if is_blank_project(request):
            path = write_blank_project_file_with_info(project_info, resolver, request.output_path)
        else:
            path = write_project_file(project_info, resolver, request.output_path)
        log.debug("wrote %s", path)
    except Exception as exc:
        out.stop_spinner()
        out.write_error(COULD_NOT_CREATE_PROJECT_MESSAGE)

        if isinstance(exc, ApiError):
            output = generate_error_output(parse_errors(exc))
            out.write_error(output)
            return InitFailure(FailureKind.CREATION_API_ERROR, output)
        if isinstance(exc, InvalidSchemaPathError):
            out.write_error(str(exc))
            return InitFailure(FailureKind.INVALID_SCHEMA_PATH, str(exc))
        if isinstance(exc, NoSchemaFoundError):
            out.write_error(str(exc))
            return InitFailure(FailureKind.NO_SCHEMA_FOUND, str(exc))
        raise

    out.stop_spinner()
    out.write(
        created_project_message(
            name, project_info.project_id, project_info_to_contents(project_info)
        )
    )
    return InitSuccess(project_info=project_info, project_file=path)


def is_blank_project(request: CreateRequest) -> bool:
    return request.schema_url == SAMPLE_SCHEMA_URL


async def create_project_and_get_project_info(
    name: str,
    schema: SchemaInfo,
    api: SystemApiClient,
    alias: str | None = None,
    region: Region | None = None,
) -> ProjectInfo:
    """Create the project; sample-schema projects get a commented Tweet type appended."""
    project_info = await api.create_project(name, schema.schema, alias=alias, region=region)
    if schema.source == SAMPLE_SCHEMA_URL:
        project_info.schema = f"{project_info.schema}{EXAMPLE_TYPE_HINT}"
    return project_info


async def get_schema(
    schema_url: str | None,
    resolver: Resolver,
    http: httpx.AsyncClient,
) -> SchemaInfo:
    """Resolve the schema text and its source.

    An http:// or https:// URL is fetched once over HTTP, anything
    else is read through the resolver. Without either, the schema comes from a local .graphcool
    file, preferring project.graphcool over the first one listed.

    Raises:
        NoSchemaFoundError: No schema given and no local .graphcool file.
        httpx.HTTPError: The schema URL could not be fetched.
    """
    schema_url = schema_url.strip() if schema_url else schema_url
    if schema_url:
        if is_schema_url(schema_url):
            response = await http.get(schema_url)
            response.raise_for_status()
            return SchemaInfo(schema=response.text, source=schema_url)
        return SchemaInfo(schema=resolver.read(schema_url), source=schema_url)

    schema_files = [f for f in resolver.read_directory(".") if f.endswith(PROJECT_FILE_SUFFIX)]
    if not schema_files:
        raise NoSchemaFoundError()

    file = GRAPHCOOL_PROJECT_FILE_NAME if GRAPHCOOL_PROJECT_FILE_NAME in schema_files else schema_files[0]
    return SchemaInfo(schema=resolver.read(file), source=file)

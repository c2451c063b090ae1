"""Project file format: `project.graphcool`.

A project file is the project's schema preceded by a two-line header:

    # project: cj0f2ozr8cb1p0101f7ptkh5l
    # version: 1

    type User implements Node { ... }

Blank project files (written for the sample schema) carry the same
header, followed by a commented getting-started guide and the schema.
"""

from __future__ import annotations

import re

from graphcool.models.project import ProjectInfo
from graphcool.resolver import PROJECT_FILE_SUFFIX, Resolver

GRAPHCOOL_PROJECT_FILE_NAME = f"project{PROJECT_FILE_SUFFIX}"
SCHEMA_FILE_SUFFIX = ".graphql"
SAMPLE_SCHEMA_URL = "https://graphqlbin.com/empty.graphql"

EXAMPLE_TYPE_HINT = "\n\n# type Tweet {\n#   text: String!\n# }"

BLANK_PROJECT_GUIDE = """\
# This file contains the schema of your project.
# Add a new type by uncommenting the Tweet type at the bottom,
# then run `graphcool push` to apply it.
#
# Docs: https://www.graph.cool/docs/reference/platform/data-schema

"""

_HEADER_RE = re.compile(r"^#\s*(project|version):\s*(.*)$")


def is_schema_url(value: str) -> bool:
    """True if value begins with an http:// or https:// scheme prefix."""
    return value.startswith(("http://", "https://"))


def is_valid_schema_file_path(schema_file_path: str | None) -> bool:
    """Check a --schema-url value before resolving it.

    None is valid (the schema is then discovered locally). Otherwise the
    value must be non-blank and either an http(s) URL or a path ending in
    .graphql or .graphcool.
    """
    if schema_file_path is None:
        return True
    value = schema_file_path.strip()
    if not value:
        return False
    if is_schema_url(value):
        return True
    return value.endswith((SCHEMA_FILE_SUFFIX, PROJECT_FILE_SUFFIX))


def _header(project_info: ProjectInfo) -> str:
    return (
        f"# project: {project_info.project_id}\n"
        f"# version: {project_info.version or ''}\n\n"
    )


def project_info_to_contents(project_info: ProjectInfo) -> str:
    """Render the full project file contents for a project."""
    return f"{_header(project_info)}{project_info.schema}"


def blank_project_file_contents(project_info: ProjectInfo) -> str:
    """Render a blank project file: header, guide, then the schema."""
    return f"{_header(project_info)}{BLANK_PROJECT_GUIDE}{project_info.schema}"


def resolve_output_path(resolver: Resolver, output_path: str | None) -> str:
    """Return the file path to write the project file to.

    No override writes project.graphcool in the current directory. An
    override naming a directory (existing, or without the .graphcool
    suffix) gets project.graphcool appended.
    """
    if not output_path:
        return GRAPHCOOL_PROJECT_FILE_NAME
    if output_path.endswith(PROJECT_FILE_SUFFIX) and not resolver.is_dir(output_path):
        return output_path
    return f"{output_path.rstrip('/')}/{GRAPHCOOL_PROJECT_FILE_NAME}"


def write_project_file(
    project_info: ProjectInfo,
    resolver: Resolver,
    output_path: str | None = None,
) -> str:
    """Write the full project file. Returns the path written."""
    path = resolve_output_path(resolver, output_path)
    resolver.write(path, project_info_to_contents(project_info))
    return path


def write_blank_project_file_with_info(
    project_info: ProjectInfo,
    resolver: Resolver,
    output_path: str | None = None,
) -> str:
    """Write a blank project file for the sample-schema flow. Returns the path written."""
    path = resolve_output_path(resolver, output_path)
    resolver.write(path, blank_project_file_contents(project_info))
    return path


def read_project_file(contents: str) -> ProjectInfo:
    """Parse project file contents written by either writer.

    Returns:
        ProjectInfo with project_id, version and schema recovered. The
        name is not stored in the file and comes back empty.

    Raises:
        ValueError: If the `# project:` header line is missing.
    """
    values: dict[str, str] = {}
    lines = contents.splitlines(keepends=True)
    consumed = 0
    for line in lines:
        match = _HEADER_RE.match(line.strip())
        if not match or match.group(1) in values:
            break
        values[match.group(1)] = match.group(2).strip()
        consumed += 1

    if "project" not in values:
        raise ValueError("Project file is missing the '# project:' header")

    body = "".join(lines[consumed:])
    if body.startswith("\n"):
        body = body[1:]
    body = body.removeprefix(BLANK_PROJECT_GUIDE)

    return ProjectInfo(
        project_id=values["project"],
        name="",
        schema=body,
        version=values.get("version") or None,
    )

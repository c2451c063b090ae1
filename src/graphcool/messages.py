"""User-facing messages for the init and clone commands."""

from __future__ import annotations

from graphcool.project_file import GRAPHCOOL_PROJECT_FILE_NAME, PROJECT_FILE_SUFFIX

TICK = "✔"
CROSS = "✖"

COULD_NOT_CREATE_PROJECT_MESSAGE = (
    f"{CROSS} Whoops, something went wrong while creating the project."
)


def creating_project_message(name: str) -> str:
    return f"Creating project {name}..."


def cloning_project_message(source_project_id: str, name: str) -> str:
    return f"Cloning project {source_project_id} into {name}..."


def created_project_message(name: str, project_id: str, project_file_contents: str) -> str:
    """Success message for a created project, echoing the project file."""
    return (
        f"{TICK} Created project {name} (ID: {project_id}) successfully.\n\n"
        f"   Here is what's in your {GRAPHCOOL_PROJECT_FILE_NAME}:\n\n"
        f"{project_file_contents}\n"
    )


def cloned_project_message(name: str, source_project_id: str, project_id: str) -> str:
    return (
        f"{TICK} Cloned project {source_project_id} as {name} "
        f"(ID: {project_id}) successfully."
    )


def project_already_exists_message(project_files: list[str]) -> str:
    files = ", ".join(project_files)
    return (
        f"Found existing project file(s): {files}\n"
        "Use --output-path to write the new project file somewhere else."
    )


def invalid_schema_file_message(schema_file_path: str) -> str:
    return (
        f"Invalid schema path: '{schema_file_path}'. Pass a URL or a path "
        f"ending in .graphql or {PROJECT_FILE_SUFFIX}."
    )


def no_schema_found_message() -> str:
    return f"No {PROJECT_FILE_SUFFIX} file found or specified"

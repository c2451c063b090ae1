"""Tagged request variants for `graphcool init`.

The CLI layer builds exactly one of CloneRequest or CreateRequest per
invocation, so the dispatcher never has to guess the mode from which
optional flags happen to be set.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field, field_validator

from graphcool.models.project import Region

COPY_OPTIONS: tuple[str, ...] = ("all", "data", "mutation-callbacks")


class CloneRequest(BaseModel):
    """Clone an existing remote project into a new one."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["clone"] = "clone"
    copy_project_id: str = Field(min_length=1)
    project_file: str | None = None
    copy_options: str = "all"
    name: str | None = None
    output_path: str | None = None


class CreateRequest(BaseModel):
    """Create a new project from a schema URL, path, or local project file."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["create"] = "create"
    schema_url: str | None = None
    name: str | None = None
    alias: str | None = None
    region: Region | None = None
    output_path: str | None = None

    @field_validator("schema_url")
    @classmethod
    def _strip_schema_url(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None

    @field_validator("name", "alias", "output_path")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


InitRequest = Union[CloneRequest, CreateRequest]

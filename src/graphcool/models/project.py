"""Project and schema types that flow through `graphcool init`.

SchemaInfo is frozen once the schema source has been resolved.
ProjectInfo comes back from the system API and is written to the
project file; its schema may be amended before writing.

These are plain dataclasses (not Pydantic): both carry a `schema`
field, which would shadow BaseModel.schema.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class Region(str, Enum):
    """Regions a project can be created in."""

    EU_WEST_1 = "eu-west-1"
    US_WEST_2 = "us-west-2"
    AP_NORTHEAST_1 = "ap-northeast-1"

    @property
    def api_value(self) -> str:
        """Enum name used by the system API (e.g. EU_WEST_1)."""
        return self.name


@dataclass(frozen=True)
class SchemaInfo:
    """Schema text plus where it came from (URL, path, or discovered file)."""

    schema: str
    source: str


@dataclass
class ProjectInfo:
    """A project as returned by the system API after create or clone."""

    project_id: str
    name: str
    schema: str = ""
    alias: str | None = None
    region: str | None = None
    version: str | None = None

    @classmethod
    def from_api(cls, project: dict[str, Any]) -> ProjectInfo:
        """Build from the `project` object of an addProject/cloneProject payload."""
        version = project.get("version")
        return cls(
            project_id=project["id"],
            name=project.get("name", ""),
            schema=project.get("schema") or "",
            alias=project.get("alias"),
            region=project.get("region"),
            version=str(version) if version is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

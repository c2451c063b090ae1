"""User configuration model for the Graphcool CLI.

Captures ~/.graphcoolrc fields with sensible defaults for the system
API endpoint, auth token, and HTTP timeout. Environment variables
override the file.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

CONFIG_FILE_NAME = ".graphcoolrc"
DEFAULT_SYSTEM_API_ENDPOINT = "https://api.graph.cool/system"

# Environment variable -> config field
_ENV_OVERRIDES: dict[str, str] = {
    "GRAPHCOOL_TOKEN": "token",
    "GRAPHCOOL_SYSTEM_API": "system_api_endpoint",
}


class GraphcoolConfig(BaseModel):
    """CLI configuration loaded from ~/.graphcoolrc."""

    model_config = {"extra": "forbid"}

    token: str | None = None
    system_api_endpoint: str = DEFAULT_SYSTEM_API_ENDPOINT
    timeout_seconds: float = Field(default=30.0, gt=0)


def config_file_path(home: Path | None = None) -> Path:
    """Return the path of the user config file (default: ~/.graphcoolrc)."""
    return (home or Path.home()) / CONFIG_FILE_NAME


def load_config(
    path: Path | None = None,
    environ: dict[str, str] | None = None,
) -> GraphcoolConfig:
    """Load GraphcoolConfig from YAML, then apply environment overrides.

    Args:
        path: Config file to read. Defaults to ~/.graphcoolrc.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Validated GraphcoolConfig instance. Defaults if the file is
        missing or empty.
    """
    path = path or config_file_path()
    environ = os.environ if environ is None else environ

    raw: dict = {}
    if path.exists():
        import yaml

        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(raw, dict):
            raise ValueError(
                f"{path} must contain a YAML mapping, got {type(raw).__name__}"
            )

    for env_name, field_name in _ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            raw[field_name] = value

    return GraphcoolConfig.model_validate(raw)

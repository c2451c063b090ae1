"""System API errors and their user-facing formatting.

The system API reports validation problems as a GraphQL `errors` array
(message, code, requestId). ApiError carries that array so callers can
tell a structured API rejection apart from transport failures, which
surface as plain httpx exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Known system API error codes -> short description
ERROR_DESCRIPTIONS: dict[str, str] = {
    "3001": "invalid schema",
    "3008": "insufficient permissions",
    "3014": "type already exists",
    "3016": "project not found",
    "3028": "project alias already in use",
    "3031": "invalid project name",
}


class GraphcoolError(Exception):
    """Base class for errors raised by Graphcool commands."""


class ApiError(GraphcoolError):
    """Raised when the system API answers with a GraphQL `errors` array."""

    def __init__(self, errors: list[dict[str, Any]], request_id: str | None = None) -> None:
        self.errors = errors
        self.request_id = request_id
        messages = "; ".join(str(e.get("message", "")) for e in errors)
        super().__init__(f"System API returned errors: {messages}")


@dataclass
class ApiErrorDetail:
    """A single API error, normalised from the raw `errors` entry.

    Attributes:
        message: Human-readable error description from the API.
        code: API error code as a string, or None if absent.
        request_id: Request id for support, or None if absent.
    """

    message: str
    code: str | None = None
    request_id: str | None = None


def parse_errors(error: ApiError) -> list[ApiErrorDetail]:
    """Normalise the raw `errors` array carried by an ApiError."""
    details: list[ApiErrorDetail] = []
    for raw in error.errors:
        code = raw.get("code")
        details.append(
            ApiErrorDetail(
                message=str(raw.get("message", "Unknown error")),
                code=str(code) if code is not None else None,
                request_id=raw.get("requestId") or error.request_id,
            )
        )
    return details


def generate_error_output(errors: list[ApiErrorDetail]) -> str:
    """Format parsed API errors for display, one block per error.

    Produces output like:
        error[3001]: invalid schema
          The field 'name' is duplicated on type 'User'
          request id: eu-west-1:system:cj0f...
    """
    blocks: list[str] = []
    for error in errors:
        if error.code is not None:
            description = ERROR_DESCRIPTIONS.get(error.code, "request failed")
            lines = [f"error[{error.code}]: {description}"]
        else:
            lines = ["error: request failed"]
        lines.append(f"  {error.message}")
        if error.request_id:
            lines.append(f"  request id: {error.request_id}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)

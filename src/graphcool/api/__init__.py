"""Graphcool system API - async client and error formatting."""

from graphcool.api.client import SystemApiClient
from graphcool.api.errors import (
    ApiError,
    ApiErrorDetail,
    GraphcoolError,
    generate_error_output,
    parse_errors,
)

__all__ = [
    "ApiError",
    "ApiErrorDetail",
    "GraphcoolError",
    "SystemApiClient",
    "generate_error_output",
    "parse_errors",
]

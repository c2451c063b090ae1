"""Per-invocation environment handed to every command.

Bundles the capabilities a command may use (file resolver, terminal
output, logger, HTTP client, system API client) so commands never
reach for globals and tests can substitute any of them.
"""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

import httpx
from rich.console import Console
from rich.logging import RichHandler

from graphcool.api.client import SystemApiClient
from graphcool.cli.output import Output
from graphcool.models.config import GraphcoolConfig
from graphcool.resolver import FileSystemResolver, Resolver

LOGGER_NAME = "graphcool"


@dataclass
class SystemEnvironment:
    """Capabilities available to a single command invocation."""

    resolver: Resolver
    out: Output
    log: logging.Logger
    http: httpx.AsyncClient
    api: SystemApiClient


def debug_enabled(flag: bool = False, environ: dict[str, str] | None = None) -> bool:
    """True if --debug was passed or DEBUG names the graphcool namespace."""
    if flag:
        return True
    environ = os.environ if environ is None else environ
    namespaces = [n.strip() for n in environ.get("DEBUG", "").split(",")]
    return any(n in ("*", LOGGER_NAME, f"{LOGGER_NAME}*", f"{LOGGER_NAME}:*") for n in namespaces)


def command_logger(command: str, debug: bool = False) -> logging.Logger:
    """Return the logger for one command invocation.

    With debug on, a RichHandler writing to stderr is attached at DEBUG
    level; otherwise the logger only passes WARNING and above through
    to whatever the root logger does.
    """
    log = logging.getLogger(f"{LOGGER_NAME}.{command}")
    log.handlers.clear()
    if debug:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(handler)
        log.setLevel(logging.DEBUG)
        log.propagate = False
    else:
        log.setLevel(logging.WARNING)
        log.propagate = True
    return log


@asynccontextmanager
async def open_environment(
    command: str,
    config: GraphcoolConfig,
    *,
    root: Path | None = None,
    out: Output | None = None,
    debug: bool = False,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[SystemEnvironment]:
    """Open an environment for one command; the HTTP client closes on exit."""
    log = command_logger(command, debug=debug)
    async with httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=True,
    ) as http:
        yield SystemEnvironment(
            resolver=FileSystemResolver(root),
            out=out or Output(),
            log=log,
            http=http,
            api=SystemApiClient(http, config, log=log),
        )

"""Graphcool command-line tool: project scaffolding against the system API."""

__version__ = "0.1.0"

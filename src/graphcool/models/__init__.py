"""Graphcool data models - re-exports all public model classes."""

from graphcool.models.config import GraphcoolConfig
from graphcool.models.project import ProjectInfo, Region, SchemaInfo
from graphcool.models.request import CloneRequest, CreateRequest, InitRequest

__all__ = [
    "CloneRequest",
    "CreateRequest",
    "GraphcoolConfig",
    "InitRequest",
    "ProjectInfo",
    "Region",
    "SchemaInfo",
]

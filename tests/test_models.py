"""Tests for project and request models."""

from __future__ import annotations

import dataclasses

import pytest
from pydantic import ValidationError

from graphcool.models.project import ProjectInfo, Region, SchemaInfo
from graphcool.models.request import CloneRequest, CreateRequest


class TestRegion:
    def test_api_value(self) -> None:
        assert Region.AP_NORTHEAST_1.api_value == "AP_NORTHEAST_1"

    def test_cli_value(self) -> None:
        assert Region("us-west-2") is Region.US_WEST_2


class TestSchemaInfo:
    def test_is_frozen(self) -> None:
        info = SchemaInfo(schema="type A { id: ID! }", source="a.graphql")
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.schema = "changed"  # type: ignore[misc]


class TestProjectInfo:
    def test_from_api(self) -> None:
        info = ProjectInfo.from_api(
            {"id": "abc", "name": "demo", "schema": None, "region": "EU_WEST_1", "version": 3}
        )
        assert info.project_id == "abc"
        assert info.schema == ""
        assert info.version == "3"
        assert info.alias is None

    def test_schema_is_mutable(self) -> None:
        info = ProjectInfo(project_id="abc", name="demo", schema="a")
        info.schema += "b"
        assert info.to_dict()["schema"] == "ab"


class TestRequests:
    def test_clone_requires_project_id(self) -> None:
        with pytest.raises(ValidationError):
            CloneRequest(copy_project_id="")

    def test_clone_defaults(self) -> None:
        request = CloneRequest(copy_project_id="abc")
        assert request.kind == "clone"
        assert request.copy_options == "all"

    def test_create_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            CreateRequest(copy_project_id="abc")  # type: ignore[call-arg]

    def test_create_blank_strings_become_none(self) -> None:
        request = CreateRequest(name="  ", output_path="")
        assert request.name is None
        assert request.output_path is None

    def test_create_schema_url_is_stripped(self) -> None:
        request = CreateRequest(schema_url="  https://example.com/schema.graphql\n")
        assert request.schema_url == "https://example.com/schema.graphql"

    def test_create_region_from_string(self) -> None:
        assert CreateRequest(region="eu-west-1").region is Region.EU_WEST_1

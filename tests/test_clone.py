"""Tests for the clone command."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from graphcool.api.errors import ApiError
from graphcool.cli.output import Output
from graphcool.commands.clone import CloneProps, clone, clone_output_path
from graphcool.environment import SystemEnvironment
from graphcool.models.project import ProjectInfo
from graphcool.project_file import read_project_file
from graphcool.resolver import FileSystemResolver


def _make_env(tmp_path: Path) -> SystemEnvironment:
    api = MagicMock()
    api.clone_project = AsyncMock(
        return_value=ProjectInfo(project_id="clone1", name="copy", schema="type A { id: ID! }")
    )
    return SystemEnvironment(
        resolver=FileSystemResolver(tmp_path),
        out=MagicMock(spec=Output),
        log=logging.getLogger("graphcool.test"),
        http=MagicMock(),
        api=api,
    )


class TestCloneOutputPath:
    def test_default(self) -> None:
        assert clone_output_path(CloneProps(source_project_id="abc")) == "clone-project.graphcool"

    def test_next_to_project_file(self) -> None:
        props = CloneProps(source_project_id="abc", project_file="service/prod.graphcool")
        assert clone_output_path(props) == "service/clone-prod.graphcool"

    def test_output_path_wins(self) -> None:
        props = CloneProps(source_project_id="abc", project_file="x.graphcool", output_path="y.graphcool")
        assert clone_output_path(props) == "y.graphcool"


class TestClone:
    @pytest.mark.asyncio
    async def test_clones_and_writes_project_file(self, tmp_path: Path) -> None:
        env = _make_env(tmp_path)
        props = CloneProps(source_project_id="abc", include_data=False, include_mutation_callbacks=True)

        await clone(props, env)

        env.api.clone_project.assert_awaited_once_with(
            "abc", "Clone of abc", include_data=False, include_mutation_callbacks=True
        )
        written = (tmp_path / "clone-project.graphcool").read_text(encoding="utf-8")
        assert read_project_file(written).project_id == "clone1"
        env.out.stop_spinner.assert_called_once()
        assert "clone1" in env.out.write.call_args.args[0]

    @pytest.mark.asyncio
    async def test_api_error_propagates_and_stops_spinner(self, tmp_path: Path) -> None:
        env = _make_env(tmp_path)
        env.api.clone_project.side_effect = ApiError([{"message": "Project not found", "code": 3016}])

        with pytest.raises(ApiError):
            await clone(CloneProps(source_project_id="missing", name="copy"), env)

        env.out.stop_spinner.assert_called_once()
        env.out.write.assert_not_called()
        assert not (tmp_path / "clone-project.graphcool").exists()

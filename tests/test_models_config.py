"""Tests for GraphcoolConfig loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from graphcool.models.config import (
    DEFAULT_SYSTEM_API_ENDPOINT,
    GraphcoolConfig,
    config_file_path,
    load_config,
)


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / ".graphcoolrc", environ={})
        assert config == GraphcoolConfig()
        assert config.system_api_endpoint == DEFAULT_SYSTEM_API_ENDPOINT
        assert config.token is None

    def test_reads_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / ".graphcoolrc"
        path.write_text("token: abc\ntimeout_seconds: 5\n", encoding="utf-8")
        config = load_config(path, environ={})
        assert config.token == "abc"
        assert config.timeout_seconds == 5.0

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / ".graphcoolrc"
        path.write_text("", encoding="utf-8")
        assert load_config(path, environ={}) == GraphcoolConfig()

    def test_environment_overrides_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".graphcoolrc"
        path.write_text("token: from-file\n", encoding="utf-8")
        config = load_config(
            path,
            environ={"GRAPHCOOL_TOKEN": "from-env", "GRAPHCOOL_SYSTEM_API": "http://localhost:60000/system"},
        )
        assert config.token == "from-env"
        assert config.system_api_endpoint == "http://localhost:60000/system"

    def test_unknown_field_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / ".graphcoolrc"
        path.write_text("tokn: abc\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(path, environ={})

    @pytest.mark.parametrize("contents", ["- token\n- abc\n", "just-a-token\n"])
    def test_non_mapping_file_raises_naming_the_file(self, tmp_path: Path, contents: str) -> None:
        path = tmp_path / ".graphcoolrc"
        path.write_text(contents, encoding="utf-8")
        with pytest.raises(ValueError, match="must contain a YAML mapping") as excinfo:
            load_config(path, environ={"GRAPHCOOL_TOKEN": "from-env"})
        assert str(path) in str(excinfo.value)
        assert not isinstance(excinfo.value, ValidationError)

    def test_config_file_path(self, tmp_path: Path) -> None:
        assert config_file_path(tmp_path) == tmp_path / ".graphcoolrc"

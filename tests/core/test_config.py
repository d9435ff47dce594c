# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for YAML configuration loading and typed binding."""

from pathlib import Path

import pytest

from toolsmanagement.core.config import Config
from toolsmanagement.data.engine import DataSourceProperties
from toolsmanagement.data.settings import QuerySettings
from toolsmanagement.integration.file_storage import FileStorageProperties
from toolsmanagement.web.app import WebProperties


class TestDefaults:
    def test_packaged_defaults(self):
        config = Config(Config.load_defaults())
        settings = config.bind(QuerySettings)
        assert settings == QuerySettings(min_search_length=3, max_page_size=50, filter_separator=",")

    def test_web_defaults(self):
        props = Config(Config.load_defaults()).bind(WebProperties)
        assert props.port == 8080
        assert props.cors_allowed_origins == ("*",)

    def test_placeholder_default(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        props = Config(Config.load_defaults()).bind(DataSourceProperties)
        assert props.url == "sqlite+aiosqlite:///./toolsmanagement.db"

    def test_placeholder_from_environment(self, monkeypatch):
        monkeypatch.setenv("FILE_STORAGE_URL", "http://files:9000")
        props = Config(Config.load_defaults()).bind(FileStorageProperties)
        assert props.url == "http://files:9000"
        assert props.buffer_megabytes == 5


class TestSources:
    def test_project_file_overrides_defaults(self, tmp_path: Path):
        (tmp_path / "toolsmanagement.yaml").write_text("toolsmanagement:\n  query:\n    max-page-size: 20\n")
        config = Config.from_sources(tmp_path)
        assert config.bind(QuerySettings).max_page_size == 20
        assert config.bind(QuerySettings).min_search_length == 3

    def test_profile_overlay(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("TOOLS_PROFILES_ACTIVE", raising=False)
        (tmp_path / "toolsmanagement.yaml").write_text(
            "toolsmanagement:\n  profiles:\n    active: dev\n  web:\n    port: 9000\n"
        )
        (tmp_path / "toolsmanagement-dev.yaml").write_text("toolsmanagement:\n  web:\n    port: 9100\n")
        config = Config.from_sources(tmp_path)
        assert config.bind(WebProperties).port == 9100
        assert any("profile: dev" in source for source in config.loaded_sources)

    def test_from_file(self, tmp_path: Path):
        path = tmp_path / "custom.yaml"
        path.write_text("toolsmanagement:\n  datasource:\n    create-schema: true\n")
        assert Config.from_file(path).bind(DataSourceProperties).create_schema is True


class TestEnvironmentOverride:
    def test_env_key(self):
        assert Config.env_key("toolsmanagement.query.max-page-size") == "TOOLS_QUERY_MAX_PAGE_SIZE"

    def test_env_wins_and_is_coerced(self, monkeypatch):
        monkeypatch.setenv("TOOLS_QUERY_MAX_PAGE_SIZE", "25")
        monkeypatch.setenv("TOOLS_DATASOURCE_ECHO", "true")
        config = Config(Config.load_defaults())
        assert config.bind(QuerySettings).max_page_size == 25
        assert config.bind(DataSourceProperties).echo is True

    def test_env_list(self, monkeypatch):
        monkeypatch.setenv("TOOLS_WEB_CORS_ALLOWED_ORIGINS", "http://a.example, http://b.example")
        props = Config(Config.load_defaults()).bind(WebProperties)
        assert props.cors_allowed_origins == ("http://a.example", "http://b.example")


class TestBinding:
    def test_undecorated_class_rejected(self):
        class Plain:
            pass

        with pytest.raises(ValueError):
            Config({}).bind(Plain)

    def test_invalid_settings_rejected(self):
        with pytest.raises(ValueError):
            Config({"toolsmanagement": {"query": {"max-page-size": 0}}}).bind(QuerySettings)

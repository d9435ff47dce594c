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
"""Tests for the command line interface."""

from click.testing import CliRunner

from toolsmanagement.cli.main import cli


def write_config(tmp_path, db_path) -> str:
    config = tmp_path / "toolsmanagement.yaml"
    config.write_text(
        "toolsmanagement:\n"
        "  datasource:\n"
        f"    url: sqlite+aiosqlite:///{db_path}\n"
    )
    return str(config)


class TestCli:
    def test_help_lists_commands(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "serve" in result.output
        assert "db" in result.output

    def test_db_create_then_drop(self, tmp_path):
        db_path = tmp_path / "registry.db"
        config = write_config(tmp_path, db_path)

        created = CliRunner().invoke(cli, ["db", "create", "--config", config])
        assert created.exit_code == 0, created.output
        assert "Schema created" in created.output
        assert db_path.exists()

        dropped = CliRunner().invoke(cli, ["db", "drop", "--config", config, "--yes"])
        assert dropped.exit_code == 0, dropped.output
        assert "Schema dropped" in dropped.output

    def test_db_drop_requires_confirmation(self, tmp_path):
        config = write_config(tmp_path, tmp_path / "registry.db")
        result = CliRunner().invoke(cli, ["db", "drop", "--config", config])
        assert result.exit_code == 1
        assert "--yes" in result.output

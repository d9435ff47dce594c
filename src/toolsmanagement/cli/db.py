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
"""'toolsmanagement db' commands: create and drop the schema."""

from __future__ import annotations

import asyncio

import click

from toolsmanagement.cli.console import console


def _engine(config_path: str | None):  # noqa: ANN202
    from toolsmanagement.core.application import load_config
    from toolsmanagement.data.engine import DataSourceProperties, create_engine

    props = load_config(config_path).bind(DataSourceProperties)
    return create_engine(props.url, echo=props.echo)


async def _run(config_path: str | None, action: str) -> str:
    # Model modules register their tables on the shared metadata.
    import toolsmanagement.modules.persons.models  # noqa: F401
    import toolsmanagement.modules.stocks.models  # noqa: F401
    import toolsmanagement.modules.tools.models  # noqa: F401
    from toolsmanagement.data.engine import create_schema, drop_schema

    engine = _engine(config_path)
    try:
        if action == "create":
            await create_schema(engine)
        else:
            await drop_schema(engine)
        return engine.url.render_as_string(hide_password=True)
    finally:
        await engine.dispose()


@click.group()
def db_group() -> None:
    """Database schema commands."""


@db_group.command("create")
@click.option("--config", "config_path", default=None, help="YAML file or directory with toolsmanagement.yaml.")
def create_cmd(config_path: str | None) -> None:
    """Create every table of the registry."""
    url = asyncio.run(_run(config_path, "create"))
    console.print(f"[success]✓[/success] Schema created at {url}.")


@db_group.command("drop")
@click.option("--config", "config_path", default=None, help="YAML file or directory with toolsmanagement.yaml.")
@click.option("--yes", is_flag=True, help="Confirm dropping all tables.")
def drop_cmd(config_path: str | None, yes: bool) -> None:
    """Drop every table of the registry."""
    if not yes:
        console.print("[error]✗[/error] Refusing to drop the schema without --yes.")
        raise SystemExit(1)
    url = asyncio.run(_run(config_path, "drop"))
    console.print(f"[success]✓[/success] Schema dropped at {url}.")

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
"""'toolsmanagement serve': run the registry under uvicorn."""

from __future__ import annotations

import click

from toolsmanagement.cli.console import console


@click.command()
@click.option("--host", default=None, help="Bind address (default: toolsmanagement.web.host).")
@click.option("--port", default=None, type=int, help="Port number (default: toolsmanagement.web.port).")
@click.option("--config", "config_path", default=None, help="YAML file or directory with toolsmanagement.yaml.")
def serve_command(host: str | None, port: int | None, config_path: str | None) -> None:
    """Start the HTTP server."""
    import uvicorn

    from toolsmanagement.core.application import ToolsManagementApplication, load_config

    application = ToolsManagementApplication(load_config(config_path))
    props = application.web_properties
    host = host or props.host
    port = port or props.port

    console.print(f"[info]Serving on[/info] http://{host}:{port}")
    uvicorn.run(application.create_app(), host=host, port=port, log_config=None)

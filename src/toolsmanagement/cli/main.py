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
"""toolsmanagement CLI: run the server and manage the schema."""

from __future__ import annotations

import click

from toolsmanagement.cli.console import console, print_banner


class ToolsManagementCLI(click.Group):
    """Click group that shows the banner on help."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)


@click.group(cls=ToolsManagementCLI)
@click.version_option(package_name="toolsmanagement")
def cli() -> None:
    """toolsmanagement: business registry service."""


from toolsmanagement.cli.db import db_group  # noqa: E402
from toolsmanagement.cli.serve import serve_command  # noqa: E402

cli.add_command(serve_command, name="serve")
cli.add_command(db_group, name="db")

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
"""Application bootstrap: configuration, logging, persistence and web wiring.

Startup sequence:
1. Load configuration (packaged defaults, project files, profiles, env)
2. Configure logging
3. Register entity auditing
4. Create the engine and session factory
5. Build repositories, services and controllers
6. On ASGI startup, create the schema when configured to
"""

from __future__ import annotations

import os
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.applications import Starlette

from toolsmanagement import __version__
from toolsmanagement.core.config import Config
from toolsmanagement.data.auditing import AuditingEntityListener
from toolsmanagement.data.engine import (
    DataSourceProperties,
    create_engine,
    create_schema,
    create_session_factory,
)
from toolsmanagement.data.settings import QuerySettings
from toolsmanagement.integration.file_storage import FileStorage, FileStorageClient, FileStorageProperties
from toolsmanagement.logging.structlog_adapter import StructlogAdapter
from toolsmanagement.modules.persons.controllers import PersonController, PersonLabelController, RoleController
from toolsmanagement.modules.persons.services import (
    PersonLabelRepository,
    PersonLabelService,
    PersonRepository,
    PersonService,
    RoleRepository,
    RoleService,
)
from toolsmanagement.modules.stocks.controllers import StockController
from toolsmanagement.modules.stocks.services import StockRepository, StockService
from toolsmanagement.modules.tools.controllers import (
    BrandController,
    CategoryController,
    CommentController,
    ToolController,
    ToolLabelController,
)
from toolsmanagement.modules.tools.services import (
    BrandRepository,
    BrandService,
    CategoryRepository,
    CategoryService,
    CommentRepository,
    CommentService,
    ToolLabelRepository,
    ToolLabelService,
    ToolRepository,
    ToolService,
)
from toolsmanagement.web.app import WebProperties, create_app

CONFIG_PATH_ENV = "TOOLS_CONFIG"


def load_config(config_path: str | Path | None = None) -> Config:
    """Configuration from *config_path*, a YAML file or a directory.

    Without a path, ``TOOLS_CONFIG`` is used, then the working directory.
    """
    raw = config_path or os.environ.get(CONFIG_PATH_ENV)
    path = Path(raw) if raw else Path.cwd()
    if path.is_file():
        return Config.from_file(path)
    return Config.from_sources(path)


class ToolsManagementApplication:
    """Wires the registry together from one :class:`Config`.

    *engine* and *file_storage* replace the configured ones, which is how
    tests run the application against an in-memory database and a stubbed
    storage service.
    """

    def __init__(
        self,
        config: Config,
        engine: AsyncEngine | None = None,
        file_storage: FileStorage | None = None,
    ) -> None:
        self.config = config
        self._logging = StructlogAdapter()
        self._logging.configure(config)
        self._logger = self._logging.get_logger("toolsmanagement.core")

        AuditingEntityListener().register()

        self.datasource = config.bind(DataSourceProperties)
        self.query_settings = config.bind(QuerySettings)
        self.web_properties = config.bind(WebProperties)

        self.engine = engine or create_engine(self.datasource.url, echo=self.datasource.echo)
        self.session_factory = create_session_factory(self.engine)
        self.file_storage: Any = file_storage or FileStorageClient.from_properties(
            config.bind(FileStorageProperties)
        )
        self.controllers = self._build_controllers()

    def _build_controllers(self) -> list[object]:
        # Repositories take their session from the running transaction, so
        # each service gets its own instances.
        sf = self.session_factory
        settings = self.query_settings

        tool_service = ToolService(
            ToolRepository(), BrandRepository(), CategoryRepository(), ToolLabelRepository(), sf, self.file_storage
        )
        person_service = PersonService(
            PersonRepository(), PersonLabelRepository(), RoleRepository(), sf, self.file_storage
        )

        return [
            BrandController(BrandService(BrandRepository(), sf), settings),
            CategoryController(CategoryService(CategoryRepository(), sf), settings),
            ToolLabelController(ToolLabelService(ToolLabelRepository(), sf), settings),
            ToolController(tool_service, settings),
            CommentController(CommentService(CommentRepository(), sf), settings),
            PersonLabelController(PersonLabelService(PersonLabelRepository(), sf), settings),
            RoleController(RoleService(RoleRepository(), sf), settings),
            PersonController(person_service, settings),
            StockController(StockService(StockRepository(), sf), settings),
        ]

    async def startup(self) -> None:
        start = time.perf_counter()
        self._logger.info("starting_application", app="toolsmanagement", version=__version__, pid=os.getpid())
        for source in self.config.loaded_sources:
            self._logger.info("loaded_config", source=source)
        if self.datasource.create_schema:
            await create_schema(self.engine)
            self._logger.info("schema_created", url=self.engine.url.render_as_string(hide_password=True))
        self._logger.info(
            "started_application",
            app="toolsmanagement",
            startup_seconds=round(time.perf_counter() - start, 3),
            controllers=len(self.controllers),
        )

    async def shutdown(self) -> None:
        close = getattr(self.file_storage, "close", None)
        if close is not None:
            await close()
        await self.engine.dispose()
        self._logger.info("stopped_application", app="toolsmanagement")

    @asynccontextmanager
    async def lifespan(self, app: Starlette) -> AsyncIterator[None]:
        await self.startup()
        try:
            yield
        finally:
            await self.shutdown()

    def create_app(self, debug: bool = False) -> Starlette:
        return create_app(
            self.controllers,
            cors_allowed_origins=self.web_properties.cors_allowed_origins,
            debug=debug,
            lifespan=self.lifespan,
        )


def create_asgi_app() -> Starlette:
    """ASGI factory for ``uvicorn --factory``."""
    return ToolsManagementApplication(load_config()).create_app()

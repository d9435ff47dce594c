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
"""StructlogAdapter — configures structlog and stdlib logging from Config."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from toolsmanagement.core.config import Config


class StructlogAdapter:
    """Logging adapter backed by structlog.

    Reads ``toolsmanagement.logging.format`` (``console`` or ``json``) and
    ``toolsmanagement.logging.level`` where ``root`` sets the root level and
    every other key is a logger name with its own level.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        """Configure structlog from the logging section of config."""
        level_section = dict(config.get_section("toolsmanagement.logging.level"))
        self._root_level = str(level_section.pop("root", "INFO")).upper()
        self._module_levels = self._flatten(level_section)
        self._format = str(config.get("toolsmanagement.logging.format", "console")).lower()

        self._setup_structlog()
        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str) -> Any:
        """Get a structlog BoundLogger by name."""
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the log level for a specific stdlib logger."""
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    @staticmethod
    def _flatten(section: dict[str, Any], prefix: str = "") -> dict[str, str]:
        # YAML turns "sqlalchemy.engine: WARNING" into a flat key, but nested
        # mappings are accepted too.
        levels: dict[str, str] = {}
        for key, value in section.items():
            name = f"{prefix}.{key}" if prefix else str(key)
            if isinstance(value, dict):
                levels.update(StructlogAdapter._flatten(value, name))
            else:
                levels[name] = str(value).upper()
        return levels

    def _setup_structlog(self) -> None:
        log_level = getattr(logging, self._root_level, logging.INFO)

        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]

        if self._format == "json":
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=log_level,
            force=True,
        )

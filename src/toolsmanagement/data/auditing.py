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
"""Entity auditing — keeps audit timestamps current via SQLAlchemy ORM events.

``before_update`` fires for every instance the unit of work considers dirty,
including ones whose only change is a replaced association collection, so
``updated_at`` moves on every mutation.
"""

from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy import event

from toolsmanagement.data.entity import BaseEntity, utcnow

logger = structlog.get_logger(__name__)


class AuditingEntityListener:
    """Registers ``before_insert`` / ``before_update`` listeners on BaseEntity."""

    _registered = False

    def register(self) -> None:
        """Attach the listeners once per process."""
        if AuditingEntityListener._registered:
            return
        event.listen(BaseEntity, "before_insert", self._on_insert, propagate=True)
        event.listen(BaseEntity, "before_update", self._on_update, propagate=True)
        AuditingEntityListener._registered = True
        logger.info("entity_auditing_registered")

    @staticmethod
    def _on_insert(mapper: Any, connection: Any, target: Any) -> None:
        now = utcnow()
        if target.created_at is None:
            target.created_at = now
        target.updated_at = now

    @staticmethod
    def _on_update(mapper: Any, connection: Any, target: Any) -> None:
        target.updated_at = utcnow()

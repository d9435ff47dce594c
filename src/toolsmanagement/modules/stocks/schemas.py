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
"""Request and response bodies of the stocks module."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from toolsmanagement.web.schemas import ApiModel, NotBlankStr


class StockRequest(ApiModel):
    id: int | None = None
    name: NotBlankStr
    address: NotBlankStr
    company_uuid: UUID | None = None
    responsible_company_uuid: UUID | None = None
    responsible_person_uuid: UUID | None = None
    is_archived: bool


class StockInfo(ApiModel):
    id: int
    uuid: UUID
    name: str
    address: str
    company_uuid: UUID | None = None
    responsible_company_uuid: UUID | None = None
    responsible_person_uuid: UUID | None = None
    is_archived: bool
    created_at: datetime
    updated_at: datetime

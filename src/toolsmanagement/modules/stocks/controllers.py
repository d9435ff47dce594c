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
"""HTTP endpoints of the stocks module."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from toolsmanagement.modules.controllers import EntityController
from toolsmanagement.modules.stocks.schemas import StockRequest
from toolsmanagement.web.mappings import post_mapping, put_mapping, request_mapping
from toolsmanagement.web.params import Body, Valid


@request_mapping("/v1/stocks/stock")
class StockController(EntityController):
    @post_mapping("", status_code=201)
    async def create(self, request: Request, rq: Valid[Body[StockRequest]]) -> Response:
        return await self._create(request, rq)

    @put_mapping("", status_code=204)
    async def update(self, rq: Valid[Body[StockRequest]]) -> Response:
        return await self._update(rq)

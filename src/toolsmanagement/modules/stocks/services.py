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
"""Services of the stocks module."""

from __future__ import annotations

from toolsmanagement.data.repository import Repository
from toolsmanagement.modules.base import CrudService
from toolsmanagement.modules.stocks.models import Stock
from toolsmanagement.modules.stocks.schemas import StockInfo, StockRequest


class StockRepository(Repository[Stock, int]):
    pass


def apply_stock(stock: Stock, rq: StockRequest) -> Stock:
    if stock.id is None:
        stock.assign_business_key()
    stock.name = rq.name
    stock.address = rq.address
    stock.company_uuid = rq.company_uuid
    stock.responsible_company_uuid = rq.responsible_company_uuid
    stock.responsible_person_uuid = rq.responsible_person_uuid
    stock.is_archived = rq.is_archived
    return stock


class StockService(CrudService[Stock, StockRequest, StockInfo, StockInfo]):
    entity_name = "Stock"
    entity_type = Stock

    def apply(self, entity: Stock, rq: StockRequest) -> None:
        apply_stock(entity, rq)

    def to_info(self, entity: Stock) -> StockInfo:
        return StockInfo.model_validate(entity)

    to_item = to_info

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
"""Spring-like Pageable and Sort types, plus the UI page-request adapter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from toolsmanagement.data.settings import DEFAULT_QUERY_SETTINGS, QuerySettings
from toolsmanagement.kernel.exceptions import ValidationException


@dataclass(frozen=True)
class Order:
    """A single sort order: property name + direction."""

    property: str
    direction: Literal["asc", "desc"] = "asc"

    @staticmethod
    def asc(property: str) -> Order:
        return Order(property=property, direction="asc")

    @staticmethod
    def desc(property: str) -> Order:
        return Order(property=property, direction="desc")

    @property
    def is_descending(self) -> bool:
        return self.direction == "desc"


@dataclass(frozen=True)
class Sort:
    """Collection of sort orders."""

    orders: tuple[Order, ...] = ()

    @staticmethod
    def by(*orders: Order) -> Sort:
        return Sort(orders=tuple(orders))

    @staticmethod
    def unsorted() -> Sort:
        return Sort()


@dataclass(frozen=True)
class Pageable:
    """Pagination request: 1-based page number, size, and sort criteria."""

    page: int = 1
    size: int = 20
    sort: Sort = field(default_factory=Sort)

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.size < 1:
            raise ValueError(f"size must be >= 1, got {self.size}")

    @staticmethod
    def of(page: int, size: int, sort: Sort | None = None) -> Pageable:
        return Pageable(page=page, size=size, sort=sort or Sort())

    @property
    def page_index(self) -> int:
        """Zero-based page number."""
        return self.page - 1

    @property
    def offset(self) -> int:
        """Number of rows to skip before this page."""
        return self.page_index * self.size


def page_request(
    page: int,
    size: int,
    sort: Sort | None = None,
    settings: QuerySettings = DEFAULT_QUERY_SETTINGS,
) -> Pageable:
    """Turn a UI page request (page starts at 1) into a :class:`Pageable`.

    Out-of-range values are rejected, never clamped.

    Raises:
        ValidationException: ``page < 1``, ``size < 1`` or
            ``size > settings.max_page_size``.
    """
    if page < 1:
        raise ValidationException(
            f"page must be greater than or equal to 1, got {page}",
            context={"field": "page", "value": page},
        )
    if size < 1 or size > settings.max_page_size:
        raise ValidationException(
            f"size must be between 1 and {settings.max_page_size}, got {size}",
            context={"field": "size", "value": size},
        )
    return Pageable.of(page, size, sort)

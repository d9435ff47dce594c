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
"""Result of a paginated list query."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from toolsmanagement.data.pageable import Pageable

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Page(Generic[T]):
    """Rows of one requested page plus the count of all matching rows.

    ``total`` ignores pagination, so a page past the end has no items but the
    same total as the first one.
    """

    items: list[T]
    total: int
    page: int = 1
    size: int = 20

    @classmethod
    def of(cls, items: list[T], total: int, pageable: Pageable) -> Page[T]:
        return cls(items=items, total=total, page=pageable.page, size=pageable.size)

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.size)

    def map(self, func: Callable[[T], U]) -> Page[U]:
        mapped: Any = replace(self, items=[func(item) for item in self.items])
        return mapped

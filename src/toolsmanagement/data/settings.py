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
"""Query constants shared by every entity family."""

from __future__ import annotations

from dataclasses import dataclass

from toolsmanagement.core.config import config_properties


@config_properties(prefix="toolsmanagement.query")
@dataclass(frozen=True)
class QuerySettings:
    """Search threshold, page bound and sort-directive separator.

    Passed explicitly to the filter factories, the sort resolver and the
    pagination adapter.
    """

    min_search_length: int = 3
    max_page_size: int = 50
    filter_separator: str = ","

    def __post_init__(self) -> None:
        if self.min_search_length < 1:
            raise ValueError(f"min_search_length must be >= 1, got {self.min_search_length}")
        if self.max_page_size < 1:
            raise ValueError(f"max_page_size must be >= 1, got {self.max_page_size}")
        if not self.filter_separator:
            raise ValueError("filter_separator must not be empty")


DEFAULT_QUERY_SETTINGS = QuerySettings()

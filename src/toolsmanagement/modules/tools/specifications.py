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
"""List filters and sortable fields of the tools module."""

from __future__ import annotations

from toolsmanagement.data.filters import equals_spec, is_parent_spec
from toolsmanagement.data.settings import DEFAULT_QUERY_SETTINGS, QuerySettings
from toolsmanagement.data.sort import STANDARD_SORT_FIELDS, TIMESTAMP_SORT_FIELDS
from toolsmanagement.data.specification import Specification, and_all
from toolsmanagement.modules.specifications import name_filter

BRAND_SORT_FIELDS = STANDARD_SORT_FIELDS
LABEL_SORT_FIELDS = STANDARD_SORT_FIELDS
CATEGORY_SORT_FIELDS = STANDARD_SORT_FIELDS
TOOL_SORT_FIELDS = STANDARD_SORT_FIELDS
COMMENT_SORT_FIELDS = TIMESTAMP_SORT_FIELDS


def category_filter(
    name: str | None,
    is_archived: bool,
    settings: QuerySettings = DEFAULT_QUERY_SETTINGS,
) -> Specification:
    """Root categories only; subcategories are listed inside their parent."""
    return and_all(is_parent_spec(True), name_filter(name, is_archived, settings))


def comment_filter(tool_id: int) -> Specification:
    return and_all(equals_spec("tool_id", tool_id))

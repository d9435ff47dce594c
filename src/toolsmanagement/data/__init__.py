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
"""Data — query composition (filter, sort, paginate) and SQLAlchemy persistence."""

from toolsmanagement.data.filters import equals_spec, is_archived_spec, is_parent_spec, like_spec
from toolsmanagement.data.page import Page
from toolsmanagement.data.pageable import Order, Pageable, Sort, page_request
from toolsmanagement.data.reference import Reference, get_reference, get_references, reference_id
from toolsmanagement.data.settings import DEFAULT_QUERY_SETTINGS, QuerySettings
from toolsmanagement.data.sort import (
    DEFAULT_ORDER,
    DEFAULT_SORT,
    STANDARD_SORT_FIELDS,
    TIMESTAMP_SORT_FIELDS,
    SortResolver,
    resolve_sort,
)
from toolsmanagement.data.specification import (
    NO_OP,
    And,
    Equals,
    IsNotNull,
    IsNull,
    Like,
    NoOp,
    Specification,
    and_all,
)

__all__ = [
    "DEFAULT_ORDER",
    "DEFAULT_QUERY_SETTINGS",
    "DEFAULT_SORT",
    "NO_OP",
    "STANDARD_SORT_FIELDS",
    "TIMESTAMP_SORT_FIELDS",
    "And",
    "Equals",
    "IsNotNull",
    "IsNull",
    "Like",
    "NoOp",
    "Order",
    "Page",
    "Pageable",
    "QuerySettings",
    "Reference",
    "Sort",
    "SortResolver",
    "Specification",
    "and_all",
    "equals_spec",
    "get_reference",
    "get_references",
    "is_archived_spec",
    "is_parent_spec",
    "like_spec",
    "page_request",
    "reference_id",
    "resolve_sort",
]

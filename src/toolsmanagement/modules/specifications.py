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
"""List filters shared by the entity families."""

from __future__ import annotations

from toolsmanagement.data.filters import is_archived_spec, like_spec
from toolsmanagement.data.settings import DEFAULT_QUERY_SETTINGS, QuerySettings
from toolsmanagement.data.specification import Specification, and_all


def name_filter(
    name: str | None,
    is_archived: bool,
    settings: QuerySettings = DEFAULT_QUERY_SETTINGS,
) -> Specification:
    """Rows in the requested archival state whose name contains *name*."""
    return and_all(is_archived_spec(is_archived), like_spec(name, settings=settings))

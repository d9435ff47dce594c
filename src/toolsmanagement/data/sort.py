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
"""Sort-directive resolution.

A sort directive is the ``sort`` query parameter of every list endpoint:
``field,direction`` or a bare ``field``. Resolution never fails; anything it
does not recognise yields the default ordering, newest first.

Examples (standard whitelist)::

    None            -> created_at desc
    "name"          -> name asc
    "name,DESC"     -> name desc
    "updatedat,asc" -> updated_at asc
    "price,desc"    -> created_at desc
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

import structlog

from toolsmanagement.data.pageable import Order, Sort
from toolsmanagement.data.settings import DEFAULT_QUERY_SETTINGS, QuerySettings

logger = structlog.get_logger(__name__)

CREATED_AT = "created_at"
UPDATED_AT = "updated_at"

DEFAULT_ORDER = Order.desc(CREATED_AT)
DEFAULT_SORT = Sort.by(DEFAULT_ORDER)

STANDARD_SORT_FIELDS: Mapping[str, str] = MappingProxyType(
    {"name": "name", "createdat": CREATED_AT, "updatedat": UPDATED_AT}
)
TIMESTAMP_SORT_FIELDS: Mapping[str, str] = MappingProxyType({"createdat": CREATED_AT, "updatedat": UPDATED_AT})


class SortResolver:
    """Resolves sort directives against a whitelist of sortable fields.

    Args:
        fields: Lower-case directive token -> entity attribute name.
        settings: Supplies the field/direction separator.
    """

    def __init__(
        self,
        fields: Mapping[str, str] = STANDARD_SORT_FIELDS,
        settings: QuerySettings = DEFAULT_QUERY_SETTINGS,
    ) -> None:
        self._fields = dict(fields)
        self._separator = settings.filter_separator

    @property
    def fields(self) -> Mapping[str, str]:
        return MappingProxyType(self._fields)

    def resolve(self, directive: str | None) -> Sort:
        """Return the single-key ordering requested by *directive*."""
        if directive is None:
            return DEFAULT_SORT

        token, separator, rest = directive.partition(self._separator)
        descending = bool(separator) and rest.split(self._separator, 1)[0].lower() == "desc"

        prop = self._fields.get(token.lower())
        if prop is None:
            logger.debug("sort_directive_ignored", directive=directive)
            return DEFAULT_SORT
        if prop == CREATED_AT and descending:
            return DEFAULT_SORT
        return Sort.by(Order.desc(prop) if descending else Order.asc(prop))


def resolve_sort(
    directive: str | None,
    fields: Mapping[str, str] = STANDARD_SORT_FIELDS,
    settings: QuerySettings = DEFAULT_QUERY_SETTINGS,
) -> Sort:
    """Shortcut for ``SortResolver(fields, settings).resolve(directive)``."""
    return SortResolver(fields, settings).resolve(directive)

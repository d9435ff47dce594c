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
"""Tests for identifier-only references and link replacement."""

from dataclasses import dataclass

import pytest

from toolsmanagement.data.reference import get_reference, get_references, reference_id, replace_links
from toolsmanagement.modules.tools.models import Brand, ToolLabel


@dataclass
class Link:
    member_id: int


class TestReference:
    def test_equal_by_type_and_id(self):
        assert get_reference(Brand, 1) == get_reference(Brand, 1)
        assert get_reference(Brand, 1) != get_reference(ToolLabel, 1)

    def test_none_id_rejected(self):
        with pytest.raises(ValueError):
            get_reference(Brand, None)

    def test_duplicates_collapse(self):
        refs = get_references(ToolLabel, [1, 2, 2, 3])
        assert {ref.id for ref in refs} == {1, 2, 3}
        assert len(refs) == 3

    def test_no_ids(self):
        assert get_references(ToolLabel, None) == frozenset()

    def test_reference_id(self):
        assert reference_id(None) is None
        assert reference_id(get_reference(Brand, 9)) == 9

    def test_repr(self):
        assert repr(get_reference(Brand, 4)) == "Reference(Brand, id=4)"


class TestReplaceLinks:
    def test_result_matches_references(self):
        current = [Link(1), Link(2)]
        result = replace_links(
            current,
            get_references(ToolLabel, [2, 3]),
            key=lambda link: link.member_id,
            factory=Link,
        )
        assert sorted(link.member_id for link in result) == [2, 3]

    def test_surviving_links_are_kept(self):
        kept = Link(2)
        result = replace_links([Link(1), kept], get_references(ToolLabel, [2]), lambda link: link.member_id, Link)
        assert result == [kept]
        assert result[0] is kept

    def test_empty_references_clear(self):
        assert replace_links([Link(1)], frozenset(), lambda link: link.member_id, Link) == []

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
"""Tests for cache key normalization."""

import hashlib
from dataclasses import dataclass

import pytest

from cachelist.cache.keys import MAX_PLAIN_KEY_LENGTH, build_storage_key, canonicalize
from cachelist.testing import InMemoryCache


def md5(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


@dataclass
class UserKey:
    id: int
    tenant: str


class TestShortStrings:
    def test_short_string_passes_through(self):
        assert build_storage_key("user:42", "app:") == "app:user:42"

    def test_exactly_max_length_is_not_hashed(self):
        key = "k" * MAX_PLAIN_KEY_LENGTH
        assert build_storage_key(key) == key

    def test_empty_string_key(self):
        assert build_storage_key("", "p:") == "p:"

    def test_build_key_uses_instance_prefix(self):
        assert InMemoryCache(key_prefix="myapp").build_key("user:42") == "myappuser:42"


class TestHashedKeys:
    def test_long_string_is_md5_of_the_string(self):
        key = "k" * (MAX_PLAIN_KEY_LENGTH + 1)
        assert build_storage_key(key, "p:") == "p:" + md5(key)

    def test_number_is_hashed(self):
        assert build_storage_key(42) == md5("42")

    def test_structured_key_is_fixed_length_hex(self):
        storage_key = build_storage_key({"id": 1, "tag": "x"}, "app:")
        digest = storage_key.removeprefix("app:")
        assert len(digest) == 32
        int(digest, 16)

    def test_dict_member_order_does_not_matter(self):
        assert build_storage_key({"id": 1, "tag": "x"}) == build_storage_key({"tag": "x", "id": 1})

    def test_different_structures_differ(self):
        assert build_storage_key({"id": 1, "tag": "x"}) != build_storage_key({"id": 2, "tag": "x"})

    def test_number_and_numeric_string_differ(self):
        assert build_storage_key(1) != build_storage_key("1")

    def test_deterministic(self):
        key = ["orders", {"status": "open", "page": 3}]
        assert build_storage_key(key) == build_storage_key(key)

    def test_stable_across_processes(self):
        assert build_storage_key({"id": 1, "tag": "x"}) == md5('{"id":1,"tag":"x"}')

    def test_tuple_and_list_share_canonical_form(self):
        assert build_storage_key(("a", 1)) == build_storage_key(["a", 1])


class TestCanonicalize:
    def test_compact_sorted_json(self):
        assert canonicalize({"b": [1, 2], "a": None}) == '{"a":null,"b":[1,2]}'

    def test_set_is_sorted(self):
        assert canonicalize({"c", "a", "b"}) == '["a","b","c"]'

    def test_dataclass_instance(self):
        assert canonicalize(UserKey(id=1, tenant="t")) == '{"id":1,"tenant":"t"}'

    def test_non_ascii_kept(self):
        assert canonicalize(["ключ"]) == '["ключ"]'

    def test_non_string_dict_keys_do_not_collide_with_string_keys(self):
        assert build_storage_key({1: "x"}) != build_storage_key({"1": "x"})

    def test_mixed_dict_key_types_are_ordered(self):
        assert canonicalize({1: "a", "b": 2}) == '{"__map__":[["b",2],[1,"a"]]}'
        assert build_storage_key({1: "a", "b": 2}) == build_storage_key({"b": 2, 1: "a"})

    def test_nested_non_string_dict_keys(self):
        assert canonicalize([{(1, 2): None}]) == '[{"__map__":[[[1,2],null]]}]'

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError):
            canonicalize(object())

# Copyright 2025 CrownOps Engineering
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

"""Unit tests for the mapping helpers."""

from __future__ import annotations

from collections import OrderedDict
from types import MappingProxyType

import pytest

from seqfn.mappings import (
    contains_key,
    entries,
    filter_keys,
    flat_map,
    for_each_entry,
    get_or_default,
    keys,
    values,
)
from seqfn.pair import Pair

pytestmark = pytest.mark.unit


def test_entries_returns_one_pair_per_association(greetings: dict[int, str]) -> None:
    assert entries(greetings) == [Pair(1, "Hello"), Pair(2, "World")]
    assert entries({}) == []
    assert entries(None) == []


def test_keys_and_values_are_aligned(greetings: dict[int, str]) -> None:
    assert sorted(keys(greetings)) == [1, 2]
    assert sorted(values(greetings)) == ["Hello", "World"]
    assert [Pair(k, v) for k, v in zip(keys(greetings), values(greetings))] == entries(greetings)
    assert keys(None) == []
    assert values(None) == []


def test_projections_return_new_lists(greetings: dict[int, str]) -> None:
    projected = keys(greetings)
    projected.append(99)
    assert 99 not in greetings


def test_contains_key(greetings: dict[int, str]) -> None:
    assert contains_key(greetings, 1) is True
    assert contains_key(greetings, 3) is False
    assert contains_key(None, 1) is False


def test_get_or_default(greetings: dict[int, str]) -> None:
    assert get_or_default(greetings, 1, "bruh") == "Hello"
    assert get_or_default(greetings, 3, "bruh") == "bruh"
    assert get_or_default(None, 3, "bruh") == "bruh"


def test_get_or_default_returns_stored_none() -> None:
    assert get_or_default({"a": None}, "a", "fallback") is None


def test_filter_keys(greetings: dict[int, str]) -> None:
    assert filter_keys(greetings, lambda key: key % 2 == 0) == {2: "World"}
    assert filter_keys(None, lambda key: key % 2 == 0) == {}
    assert filter_keys(greetings, None) == {}


def test_filter_keys_returns_new_dict_for_read_only_mapping(greetings: dict[int, str]) -> None:
    proxy = MappingProxyType(greetings)
    result = filter_keys(proxy, lambda _key: True)
    assert result == greetings
    assert isinstance(result, dict)
    result[3] = "!"
    assert 3 not in greetings


def test_flat_map(greetings: dict[int, str]) -> None:
    assert flat_map(greetings, lambda _k, _v: False) == [False, False]
    assert flat_map(greetings, lambda k, v: f"{k}:{v}") == ["1:Hello", "2:World"]
    assert flat_map(None, lambda _k, _v: False) == []
    assert flat_map(greetings, None) == []


def test_for_each_entry(greetings: dict[int, str]) -> None:
    total = 0
    text = ""

    def collect(key: int, value: str) -> None:
        nonlocal total, text
        total += key
        text += value

    for_each_entry(greetings, None)
    assert (total, text) == (0, "")
    for_each_entry(OrderedDict(greetings), collect)
    assert total == 3
    assert text == "HelloWorld"
    for_each_entry(None, collect)
    assert total == 3


def test_mapping_helpers_do_not_mutate_input(greetings: dict[int, str]) -> None:
    snapshot = dict(greetings)
    _ = entries(greetings)
    _ = filter_keys(greetings, lambda _key: False)
    _ = flat_map(greetings, lambda k, _v: k)
    assert greetings == snapshot

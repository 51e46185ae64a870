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

"""Unit tests for single-element lookups and index-based slicing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from seqfn.exceptions import (
    ElementNotFoundError,
    EmptySequenceError,
    MissingCallableError,
    NoMatchError,
)
from seqfn.sequences import (
    drop,
    first,
    first_or_default,
    max_of,
    max_of_by,
    min_of,
    min_of_by,
    sub_list,
)

if TYPE_CHECKING:
    from collections.abc import Callable

pytestmark = pytest.mark.unit


def _by_length(left: str, right: str) -> int:
    return len(left) - len(right)


def test_first_returns_lowest_index_match(numbers: list[int]) -> None:
    assert first(numbers, lambda x: x % 2 == 0) == 2


def test_first_reports_no_match(numbers: list[int]) -> None:
    with pytest.raises(NoMatchError) as excinfo:
        _ = first(numbers, lambda x: x < 0)
    assert excinfo.value.operation == "first"
    with pytest.raises(NoMatchError):
        _ = first([], lambda _x: True)


def test_first_reports_missing_predicate(numbers: list[int]) -> None:
    with pytest.raises(MissingCallableError) as excinfo:
        _ = first(numbers, None)
    assert excinfo.value.argument == "predicate"
    assert isinstance(excinfo.value, ElementNotFoundError)
    assert isinstance(excinfo.value, LookupError)


def test_first_or_default(numbers: list[int]) -> None:
    assert first_or_default(numbers, -1, lambda x: x % 2 == 0) == 2
    assert first_or_default(numbers, -1, lambda x: x < 0) == -1
    assert first_or_default(numbers, -1, None) == -1
    assert first_or_default([], -1, lambda _x: True) == -1


def test_max_of_and_min_of(numbers: list[int]) -> None:
    assert max_of(numbers) == 5
    assert min_of(numbers) == 1
    assert max_of(["pear", "apple", "zucchini"]) == "zucchini"
    assert min_of((3.5, -1.0, 2.0)) == -1.0


def test_max_of_and_min_of_keep_last_of_equal_elements() -> None:
    assert type(max_of([1, 1.0])) is float
    assert type(min_of([1, 1.0])) is float
    assert type(max_of([0, 2, 2.0, 1])) is float
    assert type(min_of([3, 0.0, 0, 5])) is int


@pytest.mark.parametrize("operation", [max_of, min_of])
def test_extremum_of_empty_sequence_fails(operation: Callable[..., object]) -> None:
    with pytest.raises(EmptySequenceError):
        _ = operation([])


def test_max_of_by_and_min_of_by() -> None:
    words = ["a", "abc", "ab"]
    assert max_of_by(words, _by_length) == "abc"
    assert min_of_by(words, _by_length) == "a"


def test_max_of_by_keeps_first_of_equal_maxima() -> None:
    assert max_of_by(["ab", "cd", "e"], _by_length) == "ab"


def test_min_of_by_keeps_last_of_equal_minima() -> None:
    assert min_of_by(["a", "b", "cc"], _by_length) == "b"
    assert min_of_by(["x", "yy", "z"], _by_length) == "z"


@pytest.mark.parametrize("operation", [max_of_by, min_of_by])
def test_extremum_by_failures_are_categorised(operation: Callable[..., object]) -> None:
    with pytest.raises(EmptySequenceError):
        _ = operation([], _by_length)
    with pytest.raises(EmptySequenceError):
        _ = operation([], None)
    with pytest.raises(MissingCallableError) as excinfo:
        _ = operation(["a"], None)
    assert excinfo.value.argument == "comparator"


def test_drop_removes_element_at_index(numbers: list[int]) -> None:
    assert drop(numbers, 1) == [1, 3, 4, 5]
    assert drop(numbers, 0) == [2, 3, 4, 5]
    assert drop(numbers, 4) == [1, 2, 3, 4]
    assert numbers == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("index", [-1, 5, 6])
def test_drop_out_of_range_returns_unchanged_copy(numbers: list[int], index: int) -> None:
    result = drop(numbers, index)
    assert result == numbers
    assert result is not numbers


def test_drop_out_of_range_logs_debug_record(numbers: list[int], caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="seqfn.sequences")
    _ = drop(numbers, 7)
    records = [record for record in caplog.records if record.name == "seqfn.sequences"]
    assert records
    assert getattr(records[-1], "operation", None) == "drop"
    assert getattr(records[-1], "index", None) == 7
    assert getattr(records[-1], "size", None) == 5


def test_sub_list_is_inclusive(numbers: list[int]) -> None:
    assert sub_list(numbers, 1, 3) == [2, 3, 4]
    assert sub_list(numbers, 0, 4) == numbers
    assert sub_list(numbers, 2, 2) == [3]


@pytest.mark.parametrize(
    ("start", "end"),
    [(-1, 3), (1, 5), (5, 5), (0, -1), (3, 1)],
)
def test_sub_list_invalid_range_returns_empty_list(numbers: list[int], start: int, end: int) -> None:
    assert sub_list(numbers, start, end) == []


def test_sub_list_of_empty_sequence_is_empty() -> None:
    assert sub_list([], 0, 0) == []

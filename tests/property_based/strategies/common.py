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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "indices",
    "int_lists",
    "int_mappings",
    "nested_int_lists",
]


def int_lists(max_size: int = 20) -> st.SearchStrategy[list[int]]:
    """Return a strategy that yields short lists of small integers."""
    return st.lists(st.integers(min_value=-100, max_value=100), max_size=max_size)


def nested_int_lists(max_size: int = 6) -> st.SearchStrategy[list[list[int]]]:
    """Return a strategy that yields lists of integer lists, inner lists may be empty."""
    return st.lists(int_lists(max_size=max_size), max_size=max_size)


def int_mappings(max_size: int = 10) -> st.SearchStrategy[dict[str, int]]:
    """Strategy that emits small ``str -> int`` dictionaries.

    Args:
        max_size: Maximum number of entries in the emitted mappings.

    Returns:
        Hypothesis strategy producing dictionaries with short text keys.
    """
    return st.dictionaries(st.text(max_size=5), st.integers(), max_size=max_size)


def indices(bound: int = 25) -> st.SearchStrategy[int]:
    """Indices that may fall on either side of a short list's bounds.

    Returns:
        Hypothesis strategy emitting integers between ``-bound`` and ``bound``.
    """
    return st.integers(min_value=-bound, max_value=bound)

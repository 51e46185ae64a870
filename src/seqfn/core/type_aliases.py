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

"""Callable and type-variable aliases shared by the sequence and mapping helpers.

Every alias is generic; parametrise it at the use site, e.g.
``Predicate[int]`` or ``IndexedTransform[str, bytes]``.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, Protocol, TypeAlias, TypeVar


class SupportsOrdering(Protocol):
    """Values with an intrinsic ordering usable by `max` and `min`."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
O = TypeVar("O", bound=SupportsOrdering)

Predicate: TypeAlias = Callable[[T], bool]
IndexedPredicate: TypeAlias = Callable[[int, T], bool]
Transform: TypeAlias = Callable[[T], R]
IndexedTransform: TypeAlias = Callable[[int, T], R]
Operation: TypeAlias = Callable[[T], None]
IndexedOperation: TypeAlias = Callable[[int, T], None]
Accumulator: TypeAlias = Callable[[T, R], R]
IndexedAccumulator: TypeAlias = Callable[[int, T, R], R]
# Positive when the first argument ranks above the second.
Comparator: TypeAlias = Callable[[T, T], int]
EntryTransform: TypeAlias = Callable[[K, V], R]
EntryOperation: TypeAlias = Callable[[K, V], None]

__all__ = [
    "Accumulator",
    "Comparator",
    "EntryOperation",
    "EntryTransform",
    "IndexedAccumulator",
    "IndexedOperation",
    "IndexedPredicate",
    "IndexedTransform",
    "K",
    "O",
    "Operation",
    "Predicate",
    "R",
    "SupportsOrdering",
    "T",
    "Transform",
    "V",
]

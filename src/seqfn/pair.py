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

"""Immutable two-slot value used for map entries and zipped sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

A = TypeVar("A")
B = TypeVar("B")


@dataclass(slots=True, frozen=True)
class Pair(Generic[A, B]):
    """A generic ``(first, second)`` value.

    Pairs compare and hash by value and unpack like a two-tuple::

        key, value = Pair("a", 1)

    Attributes:
        first: Left slot (a key, or the element of the first zipped sequence).
        second: Right slot (a value, or the element of the second sequence).
    """

    first: A
    second: B

    def __iter__(self) -> Iterator[A | B]:
        yield self.first
        yield self.second

    def as_tuple(self) -> tuple[A, B]:
        """Return the pair as a plain tuple."""
        return (self.first, self.second)


__all__ = ["Pair"]

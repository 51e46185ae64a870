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

"""Precedence chain used when resolving seqfn settings.

Explicit argument > environment variable > config file > default.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def resolve_with_precedence(
    *,
    explicit_value: T | None = None,
    env_value: T | None = None,
    config_value: T | None = None,
    default: T,
) -> T:
    """Return the highest-precedence value that is not ``None``.

    Empty containers and empty strings count as values; only ``None`` falls
    through to the next source.

    Example:
        >>> resolve_with_precedence(explicit_value=None, env_value="json", default="text")
        'json'
    """
    for candidate in (explicit_value, env_value, config_value):
        if candidate is not None:
            return candidate
    return default


__all__ = ["resolve_with_precedence"]

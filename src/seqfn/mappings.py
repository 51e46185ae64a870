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

"""Functional helpers over key/value mappings.

Each helper accepts ``None`` in place of the mapping and treats it as empty.
Results never alias the input: projections are new lists, filtered mappings
are new dicts. Iteration follows the mapping's own order, so `entries`,
`keys` and `values` taken from the same mapping line up index by index.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from seqfn._internal.logging_utils import structured_extra
from seqfn.core.model_types import LogComponent
from seqfn.core.type_aliases import K, R, V
from seqfn.pair import Pair

if TYPE_CHECKING:
    from collections.abc import Mapping

    from seqfn.core.type_aliases import EntryOperation, EntryTransform, Predicate

logger: logging.Logger = logging.getLogger("seqfn.mappings")


def _log_missing_callable(operation: str, argument: str, mapping: Mapping[K, V] | None) -> None:
    logger.debug(
        "%s called without %s",
        operation,
        argument,
        extra=structured_extra(
            component=LogComponent.MAPPINGS,
            operation=operation,
            size=len(mapping) if mapping is not None else 0,
        ),
    )


def entries(mapping: Mapping[K, V] | None) -> list[Pair[K, V]]:
    """Return one `Pair` per association."""
    if mapping is None:
        return []
    return [Pair(key, value) for key, value in mapping.items()]


def keys(mapping: Mapping[K, V] | None) -> list[K]:
    """Return the keys of ``mapping`` as a new list."""
    if mapping is None:
        return []
    return list(mapping.keys())


def values(mapping: Mapping[K, V] | None) -> list[V]:
    """Return the values of ``mapping`` as a new list, aligned with `keys`."""
    if mapping is None:
        return []
    return list(mapping.values())


def contains_key(mapping: Mapping[K, V] | None, key: K) -> bool:
    if mapping is None:
        return False
    return key in mapping


def get_or_default(mapping: Mapping[K, V] | None, key: K, default: V) -> V:
    """Return the value stored under ``key``, or ``default`` when it is absent.

    A stored value of ``None`` is returned as-is; only a missing key falls
    back to ``default``.
    """
    if mapping is None or key not in mapping:
        return default
    return mapping[key]


def filter_keys(mapping: Mapping[K, V] | None, predicate: Predicate[K] | None) -> dict[K, V]:
    """Keep the associations whose key satisfies ``predicate``.

    Args:
        mapping: Source mapping; ``None`` behaves as empty.
        predicate: Key test; ``None`` keeps nothing.

    Returns:
        New dict holding the retained associations.
    """
    if predicate is None:
        _log_missing_callable("filter_keys", "predicate", mapping)
        return {}
    if mapping is None:
        return {}
    return {key: value for key, value in mapping.items() if predicate(key)}


def flat_map(mapping: Mapping[K, V] | None, transform: EntryTransform[K, V, R] | None) -> list[R]:
    """Turn every association into one list element via ``transform(key, value)``.

    Args:
        mapping: Source mapping; ``None`` behaves as empty.
        transform: Entry transform; ``None`` yields an empty list.

    Returns:
        List with one element per association.
    """
    if transform is None:
        _log_missing_callable("flat_map", "transform", mapping)
        return []
    if mapping is None:
        return []
    return [transform(key, value) for key, value in mapping.items()]


def for_each_entry(mapping: Mapping[K, V] | None, operation: EntryOperation[K, V] | None) -> None:
    """Call ``operation(key, value)`` for every association."""
    if operation is None:
        _log_missing_callable("for_each_entry", "operation", mapping)
        return
    if mapping is None:
        return
    for key, value in mapping.items():
        operation(key, value)


__all__ = [
    "contains_key",
    "entries",
    "filter_keys",
    "flat_map",
    "for_each_entry",
    "get_or_default",
    "keys",
    "values",
]

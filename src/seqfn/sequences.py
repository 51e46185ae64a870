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

"""Functional helpers over ordered, in-memory sequences.

Every helper makes a single left-to-right pass (right-to-left for the
``fold_right*`` and ``reversed_items`` helpers) and returns a freshly
allocated ``list``, ``dict`` or scalar; the input is never mutated.

Callable arguments are optional. Passing ``None`` is a supported case:

- filtering, mapping and grouping helpers return an empty result,
- ``all_match``/``any_match`` return ``False`` and ``count`` returns ``0``,
- folds return ``initial`` and ``for_each*`` do nothing,
- ``first``, ``max_of_by`` and ``min_of_by`` raise `MissingCallableError`,
  since they have no element to report.

``first``, ``max_of``, ``min_of``, ``max_of_by`` and ``min_of_by`` raise
subclasses of `ElementNotFoundError` when no element can be produced. Every
other helper is total: invalid indices and ranges degrade to a copy of the
input or an empty list.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from seqfn._internal.exceptions import (
    ElementNotFoundError,
    EmptySequenceError,
    MissingCallableError,
    NoMatchError,
)
from seqfn._internal.logging_utils import structured_extra
from seqfn.core.model_types import LogComponent
from seqfn.core.type_aliases import K, O, R, T, V
from seqfn.pair import Pair

if TYPE_CHECKING:
    from collections.abc import Sequence, Sized

    from seqfn.core.type_aliases import (
        Accumulator,
        Comparator,
        IndexedAccumulator,
        IndexedOperation,
        IndexedPredicate,
        IndexedTransform,
        Operation,
        Predicate,
        Transform,
    )

logger: logging.Logger = logging.getLogger("seqfn.sequences")


def _log_missing_callable(operation: str, argument: str, values: Sized) -> None:
    logger.debug(
        "%s called without %s",
        operation,
        argument,
        extra=structured_extra(component=LogComponent.SEQUENCES, operation=operation, size=len(values)),
    )


def _lookup_failure(error: ElementNotFoundError, values: Sized) -> ElementNotFoundError:
    logger.debug(
        "%s",
        error,
        extra=structured_extra(
            component=LogComponent.SEQUENCES,
            operation=error.operation,
            size=len(values),
        ),
    )
    return error


def filter_items(values: Sequence[T], predicate: Predicate[T] | None) -> list[T]:
    """Return the elements satisfying ``predicate``, in their original order.

    Args:
        values: Input sequence.
        predicate: Test applied to each element; ``None`` selects nothing.

    Returns:
        New list of matching elements (empty when nothing matches).
    """
    if predicate is None:
        _log_missing_callable("filter_items", "predicate", values)
        return []
    return [value for value in values if predicate(value)]


def filter_indexed(values: Sequence[T], predicate: IndexedPredicate[T] | None) -> list[T]:
    """Like `filter_items`, but ``predicate`` receives ``(index, element)``."""
    if predicate is None:
        _log_missing_callable("filter_indexed", "predicate", values)
        return []
    return [value for index, value in enumerate(values) if predicate(index, value)]


def map_items(values: Sequence[T], transform: Transform[T, R] | None) -> list[R]:
    """Apply ``transform`` to every element.

    Args:
        values: Input sequence.
        transform: Function producing one output per element.

    Returns:
        List of the same length as ``values``, or an empty list when
        ``transform`` is ``None``.
    """
    if transform is None:
        _log_missing_callable("map_items", "transform", values)
        return []
    return [transform(value) for value in values]


def map_indexed(values: Sequence[T], transform: IndexedTransform[T, R] | None) -> list[R]:
    """Like `map_items`, but ``transform`` receives ``(index, element)``."""
    if transform is None:
        _log_missing_callable("map_indexed", "transform", values)
        return []
    return [transform(index, value) for index, value in enumerate(values)]


def all_match(values: Sequence[T], predicate: Predicate[T] | None) -> bool:
    """Return whether every element satisfies ``predicate``.

    An empty sequence is vacuously ``True``. A missing predicate is not:
    with ``predicate=None`` the answer is always ``False``.
    """
    if predicate is None:
        _log_missing_callable("all_match", "predicate", values)
        return False
    return all(predicate(value) for value in values)


def any_match(values: Sequence[T], predicate: Predicate[T] | None) -> bool:
    """Return whether at least one element satisfies ``predicate``."""
    if predicate is None:
        _log_missing_callable("any_match", "predicate", values)
        return False
    return any(predicate(value) for value in values)


def associate(values: Sequence[T], transform: Transform[T, tuple[K, V]] | None) -> dict[K, V]:
    """Build a dict from ``(key, value)`` pairs produced by ``transform``.

    ``transform`` may return a two-tuple or a `Pair`. When two elements
    produce the same key the later one wins.

    Args:
        values: Input sequence.
        transform: Function returning the entry for each element.

    Returns:
        New dict; empty when ``transform`` is ``None``.
    """
    result: dict[K, V] = {}
    if transform is None:
        _log_missing_callable("associate", "transform", values)
        return result
    for value in values:
        key, item = transform(value)
        result[key] = item
    return result


def contains(values: Sequence[T], target: T) -> bool:
    """Return whether some element compares equal to ``target``."""
    return any(value == target for value in values)


def count(values: Sequence[T], predicate: Predicate[T] | None) -> int:
    """Return how many elements satisfy ``predicate`` (``0`` when it is ``None``)."""
    if predicate is None:
        _log_missing_callable("count", "predicate", values)
        return 0
    return sum(1 for value in values if predicate(value))


def drop(values: Sequence[T], index: int) -> list[T]:
    """Return a copy of ``values`` without the element at ``index``.

    Negative indices are not interpreted from the end. An index outside
    ``[0, len(values))`` is not an error; the result is then an unchanged
    copy of the input.
    """
    if index < 0 or index >= len(values):
        logger.debug(
            "drop index out of range; returning input unchanged",
            extra=structured_extra(
                component=LogComponent.SEQUENCES,
                operation="drop",
                size=len(values),
                index=index,
            ),
        )
        return list(values)
    return filter_indexed(values, lambda position, _value: position != index)


def first(values: Sequence[T], predicate: Predicate[T] | None) -> T:
    """Return the lowest-index element satisfying ``predicate``.

    Args:
        values: Input sequence.
        predicate: Test applied left to right.

    Returns:
        The first matching element.

    Raises:
        MissingCallableError: If ``predicate`` is ``None``.
        NoMatchError: If no element matches, including when ``values`` is empty.
    """
    if predicate is None:
        raise _lookup_failure(MissingCallableError("first", "predicate"), values)
    for value in values:
        if predicate(value):
            return value
    raise _lookup_failure(NoMatchError("first"), values)


def first_or_default(values: Sequence[T], default: T, predicate: Predicate[T] | None) -> T:
    """Return `first` of ``values``, or ``default`` when it cannot produce one."""
    try:
        return first(values, predicate)
    except ElementNotFoundError:
        return default


def flatten(nested: Sequence[Sequence[T] | None] | None) -> list[T] | None:
    """Concatenate the inner sequences of ``nested``, preserving order.

    ``None`` is kept distinct from an empty outer sequence: ``flatten(None)``
    is ``None`` while ``flatten([])`` is ``[]``. A ``None`` inner entry
    contributes nothing.
    """
    if nested is None:
        return None
    return [value for inner in nested if inner is not None for value in inner]


def fold(values: Sequence[T], initial: R, operation: Accumulator[T, R] | None) -> R:
    """Reduce ``values`` left to right.

    Each step computes ``accumulator = operation(element, accumulator)``
    starting from ``initial``.

    Args:
        values: Input sequence.
        initial: Starting accumulator, returned as-is for empty input.
        operation: Step function; ``None`` returns ``initial`` unchanged.

    Returns:
        The final accumulator.
    """
    if operation is None:
        _log_missing_callable("fold", "operation", values)
        return initial
    accumulator = initial
    for value in values:
        accumulator = operation(value, accumulator)
    return accumulator


def fold_indexed(values: Sequence[T], initial: R, operation: IndexedAccumulator[T, R] | None) -> R:
    """Like `fold`, but ``operation`` receives ``(index, element, accumulator)``."""
    if operation is None:
        _log_missing_callable("fold_indexed", "operation", values)
        return initial
    accumulator = initial
    for index, value in enumerate(values):
        accumulator = operation(index, value, accumulator)
    return accumulator


def fold_right(values: Sequence[T], initial: R, operation: Accumulator[T, R] | None) -> R:
    """Like `fold`, but visits elements from the last index down to ``0``."""
    if operation is None:
        _log_missing_callable("fold_right", "operation", values)
        return initial
    accumulator = initial
    for value in reversed(values):
        accumulator = operation(value, accumulator)
    return accumulator


def fold_right_indexed(
    values: Sequence[T],
    initial: R,
    operation: IndexedAccumulator[T, R] | None,
) -> R:
    """Right-to-left `fold_indexed`; indices still refer to the original positions."""
    if operation is None:
        _log_missing_callable("fold_right_indexed", "operation", values)
        return initial
    accumulator = initial
    for index in range(len(values) - 1, -1, -1):
        accumulator = operation(index, values[index], accumulator)
    return accumulator


def for_each(values: Sequence[T], operation: Operation[T] | None) -> None:
    """Call ``operation`` on each element in ascending index order."""
    if operation is None:
        _log_missing_callable("for_each", "operation", values)
        return
    for value in values:
        operation(value)


def for_each_indexed(values: Sequence[T], operation: IndexedOperation[T] | None) -> None:
    if operation is None:
        _log_missing_callable("for_each_indexed", "operation", values)
        return
    for index, value in enumerate(values):
        operation(index, value)


def group_by(values: Sequence[T], selector: Transform[T, K] | None) -> dict[K, list[T]]:
    """Bucket elements by ``selector(element)``.

    Buckets appear in the order their key is first produced and each keeps
    its elements in input order.

    Args:
        values: Input sequence.
        selector: Key function; ``None`` produces an empty dict.

    Returns:
        Mapping of key to the list of elements producing it.
    """
    groups: dict[K, list[T]] = {}
    if selector is None:
        _log_missing_callable("group_by", "selector", values)
        return groups
    for value in values:
        groups.setdefault(selector(value), []).append(value)
    return groups


def index_of(values: Sequence[T], target: T) -> int:
    """Return the lowest index whose element equals ``target``, or ``-1``."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return -1


def max_of(values: Sequence[O]) -> O:
    """Return the largest element by natural ordering.

    Among elements that compare equal the last one wins, unlike builtin
    `max`: ``max_of([1, 1.0])`` is ``1.0``.

    Raises:
        EmptySequenceError: If ``values`` is empty.
    """
    if not values:
        raise _lookup_failure(EmptySequenceError("max_of"), values)
    best = values[0]
    for value in values:
        if not best > value:
            best = value
    return best


def min_of(values: Sequence[O]) -> O:
    """Return the smallest element by natural ordering.

    As with `max_of`, the last of several equal elements is returned.

    Raises:
        EmptySequenceError: If ``values`` is empty.
    """
    if not values:
        raise _lookup_failure(EmptySequenceError("min_of"), values)
    best = values[0]
    for value in values:
        if not best < value:
            best = value
    return best


def max_of_by(values: Sequence[T], comparator: Comparator[T] | None) -> T:
    """Return the highest-ranked element according to ``comparator``.

    ``comparator(a, b)`` is positive when ``a`` ranks above ``b``. The
    running maximum is only replaced by a strictly greater element, so the
    earliest of several equal-ranked maxima is returned.

    Args:
        values: Input sequence.
        comparator: Three-way comparison function.

    Returns:
        The maximum element.

    Raises:
        EmptySequenceError: If ``values`` is empty.
        MissingCallableError: If ``comparator`` is ``None``.
    """
    if not values:
        raise _lookup_failure(EmptySequenceError("max_of_by"), values)
    if comparator is None:
        raise _lookup_failure(MissingCallableError("max_of_by", "comparator"), values)
    best = values[0]
    for value in values:
        if comparator(value, best) > 0:
            best = value
    return best


def min_of_by(values: Sequence[T], comparator: Comparator[T] | None) -> T:
    """Return the lowest-ranked element according to ``comparator``.

    Unlike `max_of_by`, an element ranking equal to the running minimum
    replaces it (``comparator(candidate, best) <= 0``), so the latest of
    several equal-ranked minima is returned.

    Raises:
        EmptySequenceError: If ``values`` is empty.
        MissingCallableError: If ``comparator`` is ``None``.
    """
    if not values:
        raise _lookup_failure(EmptySequenceError("min_of_by"), values)
    if comparator is None:
        raise _lookup_failure(MissingCallableError("min_of_by", "comparator"), values)
    best = values[0]
    for value in values:
        if comparator(value, best) <= 0:
            best = value
    return best


def partition(values: Sequence[T], predicate: Predicate[T] | None) -> tuple[list[T], list[T]]:
    """Split ``values`` into ``(matching, non_matching)`` lists.

    Both lists keep input order. With ``predicate=None`` both are empty.
    """
    matching: list[T] = []
    rest: list[T] = []
    if predicate is None:
        _log_missing_callable("partition", "predicate", values)
        return matching, rest
    for value in values:
        if predicate(value):
            matching.append(value)
        else:
            rest.append(value)
    return matching, rest


def reversed_items(values: Sequence[T]) -> list[T]:
    """Return a new list with the elements in descending index order."""
    return list(reversed(values))


def sub_list(values: Sequence[T], start: int, end: int) -> list[T]:
    """Return the elements from ``start`` to ``end``, both inclusive.

    Bounds are not clamped: if either one is negative or not less than
    ``len(values)`` the whole call yields an empty list. ``start > end``
    also yields an empty list.

    Args:
        values: Input sequence.
        start: Index of the first element to include.
        end: Index of the last element to include.

    Returns:
        New list holding the requested range.
    """
    size = len(values)
    if start < 0 or start >= size or end < 0 or end >= size:
        logger.debug(
            "sub_list range out of bounds",
            extra=structured_extra(
                component=LogComponent.SEQUENCES,
                operation="sub_list",
                size=size,
                details={"start": start, "end": end},
            ),
        )
        return []
    return [values[index] for index in range(start, end + 1)]


def zip_pairs(left: Sequence[T], right: Sequence[R]) -> list[Pair[T, R]]:
    """Pair up elements by position, stopping at the shorter input.

    >>> zip_pairs([1, 2, 3], ["a", "b"])
    [Pair(first=1, second='a'), Pair(first=2, second='b')]
    """
    return [Pair(first_value, second_value) for first_value, second_value in zip(left, right)]


__all__ = [
    "all_match",
    "any_match",
    "associate",
    "contains",
    "count",
    "drop",
    "filter_indexed",
    "filter_items",
    "first",
    "first_or_default",
    "flatten",
    "fold",
    "fold_indexed",
    "fold_right",
    "fold_right_indexed",
    "for_each",
    "for_each_indexed",
    "group_by",
    "index_of",
    "map_indexed",
    "map_items",
    "max_of",
    "max_of_by",
    "min_of",
    "min_of_by",
    "partition",
    "reversed_items",
    "sub_list",
    "zip_pairs",
]

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

"""seqfn - functional helpers for Python sequences and mappings.

Provides filter/map/fold style free functions over lists and dicts, a
generic `Pair` type, and a small exception hierarchy for the helpers that
must return a single element.
"""

from __future__ import annotations

from seqfn.exceptions import (
    ElementNotFoundError,
    EmptySequenceError,
    MissingCallableError,
    NoMatchError,
    SeqfnError,
    SeqfnValidationError,
)

from ._internal.logging_utils import LogConfig, configure_logging
from .config import Settings, load_settings
from .mappings import (
    contains_key,
    entries,
    filter_keys,
    flat_map,
    for_each_entry,
    get_or_default,
    keys,
    values,
)
from .pair import Pair
from .sequences import (
    all_match,
    any_match,
    associate,
    contains,
    count,
    drop,
    filter_indexed,
    filter_items,
    first,
    first_or_default,
    flatten,
    fold,
    fold_indexed,
    fold_right,
    fold_right_indexed,
    for_each,
    for_each_indexed,
    group_by,
    index_of,
    map_indexed,
    map_items,
    max_of,
    max_of_by,
    min_of,
    min_of_by,
    partition,
    reversed_items,
    sub_list,
    zip_pairs,
)

__all__ = [
    "ElementNotFoundError",
    "EmptySequenceError",
    "LogConfig",
    "MissingCallableError",
    "NoMatchError",
    "Pair",
    "SeqfnError",
    "SeqfnValidationError",
    "Settings",
    "__version__",
    "all_match",
    "any_match",
    "associate",
    "configure_logging",
    "contains",
    "contains_key",
    "count",
    "drop",
    "entries",
    "filter_indexed",
    "filter_items",
    "filter_keys",
    "first",
    "first_or_default",
    "flat_map",
    "flatten",
    "fold",
    "fold_indexed",
    "fold_right",
    "fold_right_indexed",
    "for_each",
    "for_each_entry",
    "for_each_indexed",
    "get_or_default",
    "group_by",
    "index_of",
    "keys",
    "load_settings",
    "map_indexed",
    "map_items",
    "max_of",
    "max_of_by",
    "min_of",
    "min_of_by",
    "partition",
    "reversed_items",
    "sub_list",
    "values",
    "zip_pairs",
]

__version__ = "0.1.0"

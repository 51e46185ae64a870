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

"""TOML reading for settings files.

Python 3.11 ships `tomllib`; 3.10 uses the `tomli` backport, which has the
same API.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - exercised on 3.10 only
    import tomli as tomllib

if TYPE_CHECKING:
    from pathlib import Path

TOMLDecodeError = tomllib.TOMLDecodeError


def read_toml(path: Path) -> dict[str, object]:
    """Parse ``path`` as a UTF-8 TOML document.

    Raises:
        OSError: If the file cannot be opened.
        TOMLDecodeError: If the content is not valid TOML.
    """
    with path.open("rb") as handle:
        return tomllib.load(handle)


__all__ = ["TOMLDecodeError", "read_toml", "tomllib"]

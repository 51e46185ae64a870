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

"""File names searched when discovering seqfn settings."""

from __future__ import annotations

from typing import Final

STANDALONE_CONFIG_FILENAMES: Final[tuple[str, ...]] = ("seqfn.toml", ".seqfn.toml")
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
TOOL_TABLE_NAME: Final[str] = "seqfn"

__all__ = ["PYPROJECT_FILENAME", "STANDALONE_CONFIG_FILENAMES", "TOOL_TABLE_NAME"]

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

"""Discovery and loading of seqfn settings files.

Settings live either in a standalone ``seqfn.toml`` / ``.seqfn.toml`` file
(top-level keys) or under ``[tool.seqfn]`` in ``pyproject.toml``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from pydantic import ValidationError

from seqfn._internal.logging_utils import structured_extra
from seqfn.compat import TOMLDecodeError, read_toml
from seqfn.core.model_types import LogComponent

from .constants import PYPROJECT_FILENAME, STANDALONE_CONFIG_FILENAMES, TOOL_TABLE_NAME
from .models import (
    ConfigReadError,
    InvalidConfigFileError,
    Settings,
    SettingsModel,
    settings_from_model,
)

logger: logging.Logger = logging.getLogger("seqfn.config")


@dataclass(slots=True, frozen=True)
class LoadedSettings:
    """Container for loaded settings and their source path.

    Attributes:
        settings: The resolved settings.
        path: File the settings came from, or ``None`` for defaults.
    """

    settings: Settings
    path: Path | None


def load_settings(explicit_path: Path | None = None) -> Settings:
    """Load seqfn settings from a TOML file or fall back to defaults.

    Args:
        explicit_path: Optional file to read instead of searching.

    Returns:
        The resolved `Settings`.
    """
    return load_settings_with_metadata(explicit_path).settings


def load_settings_with_metadata(explicit_path: Path | None = None) -> LoadedSettings:
    """Load seqfn settings along with the file they were read from.

    Without ``explicit_path`` the working directory is searched for
    ``seqfn.toml``, ``.seqfn.toml`` and ``pyproject.toml`` in that order;
    the first file carrying seqfn settings wins. A ``pyproject.toml``
    without a ``[tool.seqfn]`` table is skipped.

    Args:
        explicit_path: Optional file to read. It must exist and must define
            seqfn settings.

    Returns:
        LoadedSettings: Parsed settings and their origin.

    Raises:
        ConfigReadError: If a candidate cannot be read or is not valid TOML,
            or the explicit path does not exist.
        InvalidConfigFileError: If a candidate has malformed or invalid settings.
    """
    if explicit_path is not None:
        candidate = _resolve_candidate_path(explicit_path)
        if not candidate.exists():
            raise ConfigReadError(candidate, FileNotFoundError(str(candidate)))
        loaded = _load_candidate(candidate, explicit=True)
        if loaded is not None:
            return loaded

    for candidate in _search_order(Path.cwd()):
        loaded = _load_candidate(candidate, explicit=False)
        if loaded is not None:
            return loaded

    logger.debug(
        "No seqfn settings found; using defaults",
        extra=structured_extra(component=LogComponent.CONFIG, path=Path.cwd()),
    )
    return LoadedSettings(settings=Settings(), path=None)


def _search_order(base_dir: Path) -> list[Path]:
    return [
        *(base_dir / name for name in STANDALONE_CONFIG_FILENAMES),
        base_dir / PYPROJECT_FILENAME,
    ]


def _resolve_candidate_path(candidate: Path) -> Path:
    return candidate if candidate.is_absolute() else (Path.cwd() / candidate).resolve()


def _load_candidate(candidate: Path, *, explicit: bool) -> LoadedSettings | None:
    if not candidate.exists():
        return None
    try:
        raw_map = read_toml(candidate)
    except (OSError, TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = f"{candidate.name} does not define a [tool.{TOOL_TABLE_NAME}] table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None

    try:
        model = SettingsModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc

    resolved = candidate.resolve()
    logger.debug(
        "Loaded seqfn settings",
        extra=structured_extra(component=LogComponent.CONFIG, path=resolved),
    )
    return LoadedSettings(settings=settings_from_model(model), path=resolved)


def _extract_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    """Return the mapping to validate, or ``None`` when pyproject has no seqfn table.

    Raises:
        InvalidConfigFileError: If ``[tool]`` or ``[tool.seqfn]`` is not a table.
    """
    is_pyproject = candidate.name == PYPROJECT_FILENAME
    tool_section = raw_map.get("tool")
    if not is_pyproject:
        # standalone files may carry unrelated tool tables
        return {key: value for key, value in raw_map.items() if key != "tool"}
    if tool_section is None:
        return None
    if not isinstance(tool_section, dict):
        message = f"[tool] in {PYPROJECT_FILENAME} must be a TOML table"
        raise InvalidConfigFileError(candidate, ValueError(message))
    section = cast("dict[str, object]", tool_section).get(TOOL_TABLE_NAME)
    if section is None:
        return None
    if not isinstance(section, dict):
        message = f"[tool.{TOOL_TABLE_NAME}] must be a TOML table"
        raise InvalidConfigFileError(candidate, ValueError(message))
    return cast("dict[str, object]", section)


__all__ = ["LoadedSettings", "load_settings", "load_settings_with_metadata"]

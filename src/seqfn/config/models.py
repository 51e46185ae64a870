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

"""Settings models and configuration errors for seqfn."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from seqfn._internal.exceptions import SeqfnValidationError
from seqfn.core.model_types import LogFormat, LogLevel

if TYPE_CHECKING:
    from pathlib import Path


class ConfigValidationError(SeqfnValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The configuration file that could not be read.
            error: The underlying exception that caused the failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid seqfn configuration in {path}: {error}")


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved seqfn settings.

    ``None`` means the value was not configured, letting environment
    variables and built-in defaults decide.

    Attributes:
        log_format: Output format for the ``seqfn`` logger.
        log_level: Verbosity for the ``seqfn`` logger.
    """

    log_format: LogFormat | None = None
    log_level: LogLevel | None = None


class SettingsModel(BaseModel):
    """Pydantic model validating the ``[tool.seqfn]`` table or a standalone file."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    log_format: LogFormat | None = None
    log_level: LogLevel | None = None

    @field_validator("log_format", mode="before")
    @classmethod
    def _coerce_log_format(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, LogFormat):
            return LogFormat.from_str(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_log_level(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, LogLevel):
            return LogLevel.from_str(value)
        return value


def settings_from_model(model: SettingsModel) -> Settings:
    """Convert a validated model into the runtime `Settings` dataclass."""
    return Settings(log_format=model.log_format, log_level=model.log_level)


__all__ = [
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "Settings",
    "SettingsModel",
    "settings_from_model",
]

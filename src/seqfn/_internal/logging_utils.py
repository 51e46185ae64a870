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

"""Structured logging utilities shared across seqfn components."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Final, SupportsInt, cast

from seqfn.compat import TypedDict, Unpack, assert_never, override
from seqfn.core.model_types import LogComponent, LogFormat, LogLevel
from seqfn.json import normalize_enums_for_json

from .precedence import resolve_with_precedence

if TYPE_CHECKING:
    from seqfn.config import Settings

ROOT_LOGGER_NAME: Final[str] = "seqfn"
LOG_FORMAT_ENV: Final[str] = "SEQFN_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "SEQFN_LOG_LEVEL"

LOG_FORMATS: Final[tuple[str, ...]] = tuple(format_.value for format_ in LogFormat)
LOG_LEVELS: Final[tuple[str, ...]] = tuple(level.value for level in LogLevel)
STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "operation",
    "size",
    "index",
    "path",
    "details",
)
CHILD_LOGGERS: Final[tuple[str, ...]] = (
    "seqfn.sequences",
    "seqfn.mappings",
    "seqfn.config",
)
_NUMERIC_LEVELS: Final[dict[LogLevel, int]] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Resolved logging configuration for diagnostics and debugging."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """Render log records as structured JSON objects."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON string.

        Args:
            record: Log record to serialise.

        Returns:
            JSON-formatted string containing standard and structured fields.
        """
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }
        for field in STRUCTURED_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(normalize_enums_for_json(payload), ensure_ascii=False)


class TextLogFormatter(logging.Formatter):
    """Readable, single-line formatter."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _coerce_log_format(log_format: LogFormat | str) -> LogFormat:
    if isinstance(log_format, LogFormat):
        return log_format
    return LogFormat.from_str(log_format)


def _coerce_log_level(level: LogLevel | str | int) -> tuple[int, str]:
    if isinstance(level, int):
        return level, logging.getLevelName(level).lower()
    try:
        resolved = level if isinstance(level, LogLevel) else LogLevel.from_str(str(level))
    except ValueError:
        resolved = LogLevel.INFO
    return _NUMERIC_LEVELS[resolved], resolved.value


def _env(name: str) -> str | None:
    return os.getenv(name) or None


def _configure_handler(log_format: LogFormat) -> logging.Handler:
    handler = logging.StreamHandler()
    match log_format:
        case LogFormat.JSON:
            handler.setFormatter(JSONLogFormatter())
        case LogFormat.TEXT:
            handler.setFormatter(TextLogFormatter())
        case _:  # pragma: no cover
            assert_never(log_format)
    return handler


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: LogLevel | str | int | None = None,
    settings: Settings | None = None,
) -> LogConfig:
    """Configure seqfn logging according to the requested format and level.

    Each value is resolved as: explicit argument, then the
    ``SEQFN_LOG_FORMAT`` / ``SEQFN_LOG_LEVEL`` environment variables, then
    ``settings`` (typically from `seqfn.config.load_settings`), then the
    defaults ``text`` and ``info``. Unknown level names fall back to ``info``.

    Args:
        log_format: Desired log output format.
        log_level: Preferred verbosity (string, `LogLevel` or numeric).
        settings: Loaded settings supplying config-file values.

    Returns:
        A ``LogConfig`` describing the selected formatter and numeric level,
        which is also applied to the root and child loggers.

    Raises:
        ValueError: If the resolved format name is not supported.
    """
    selected_format = _coerce_log_format(
        resolve_with_precedence(
            explicit_value=log_format,
            env_value=_env(LOG_FORMAT_ENV),
            config_value=settings.log_format if settings is not None else None,
            default=LogFormat.TEXT,
        ),
    )
    level_value, level_name = _coerce_log_level(
        resolve_with_precedence(
            explicit_value=log_level,
            env_value=_env(LOG_LEVEL_ENV),
            config_value=settings.log_level if settings is not None else None,
            default=LogLevel.INFO,
        ),
    )

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(_configure_handler(selected_format))
    root_logger.setLevel(level_value)
    root_logger.propagate = False

    for child in CHILD_LOGGERS:
        logging.getLogger(child).setLevel(level_value)
    return LogConfig(format=selected_format, level=level_value, level_name=level_name)


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """Structured logging extras accepted by seqfn log records."""

    operation: str
    size: int
    index: int
    path: str
    details: Mapping[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    operation: str
    size: int
    index: int
    path: str | os.PathLike[str]
    details: Mapping[str, object]


def _normalise_path(value: object) -> str | None:
    if value is None:
        return None
    return os.fspath(cast("str | os.PathLike[str]", value))


def _to_int(value: object) -> int:
    return int(cast("SupportsInt | str | int", value))


def _maybe_assign(
    extra: StructuredLogExtra,
    *,
    key: str,
    kwargs: dict[str, object],
    transform: Callable[[object], object | None] | None = None,
) -> None:
    if key not in kwargs:
        return
    value = kwargs[key]
    if value is None:
        return
    if transform is not None:
        value = transform(value)
        if value is None:
            return
    cast("dict[str, object]", extra)[key] = value


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Return a consistently typed ``logging.extra`` payload.

    Args:
        component: Logical logging component for the record.
        **kwargs: Optional structured fields (operation, size, index, path, details).

    Returns:
        Mapping suitable for the ``extra`` parameter when emitting log records.
    """
    extra: StructuredLogExtra = {"component": component}
    payload_kwargs = cast("dict[str, object]", kwargs)
    _maybe_assign(extra, key="operation", kwargs=payload_kwargs, transform=str)
    _maybe_assign(extra, key="size", kwargs=payload_kwargs, transform=_to_int)
    _maybe_assign(extra, key="index", kwargs=payload_kwargs, transform=_to_int)
    _maybe_assign(extra, key="path", kwargs=payload_kwargs, transform=_normalise_path)
    details = payload_kwargs.get("details")
    if isinstance(details, Mapping) and details:
        extra["details"] = dict(cast("Mapping[str, object]", details))
    return extra


__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "structured_extra",
]

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

"""Stable error code registry used across seqfn."""

from __future__ import annotations

from typing import TYPE_CHECKING, NewType

from seqfn.config import ConfigReadError, ConfigValidationError, InvalidConfigFileError

from .exceptions import (
    ElementNotFoundError,
    EmptySequenceError,
    MissingCallableError,
    NoMatchError,
    SeqfnError,
    SeqfnValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    SeqfnError: ErrorCode("SF000"),
    SeqfnValidationError: ErrorCode("SF100"),
    ConfigValidationError: ErrorCode("SF110"),
    ConfigReadError: ErrorCode("SF111"),
    InvalidConfigFileError: ErrorCode("SF112"),
    ElementNotFoundError: ErrorCode("SF200"),
    MissingCallableError: ErrorCode("SF201"),
    NoMatchError: ErrorCode("SF202"),
    EmptySequenceError: ErrorCode("SF203"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a seqfn exception.

    Args:
        exc: Exception instance raised by seqfn code paths.

    Returns:
        Error code of the most specific registered class in the exception's
        MRO, or ``SF000`` for foreign exceptions.
    """
    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("SF000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a mapping of fully-qualified exception names to error codes.

    Returns:
        Mapping of ``<module>.<ExceptionName>`` strings to error codes.
    """
    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]

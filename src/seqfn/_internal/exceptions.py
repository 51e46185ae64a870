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

"""Common exception hierarchy for seqfn."""

from __future__ import annotations

__all__ = [
    "ElementNotFoundError",
    "EmptySequenceError",
    "MissingCallableError",
    "NoMatchError",
    "SeqfnError",
    "SeqfnValidationError",
]


class SeqfnError(Exception):
    """Base error for all seqfn exceptions."""


class SeqfnValidationError(SeqfnError, ValueError):
    """Raised when input data fails validation checks."""


class ElementNotFoundError(SeqfnError, LookupError):
    """Raised when an operation that must return a single element cannot.

    Catch this class to treat every "no result" outcome alike; the
    subclasses say why no element could be produced.
    """

    def __init__(self, operation: str, message: str) -> None:
        """Initialize the error with the operation that failed.

        Args:
            operation: Name of the seqfn function that raised.
            message: Human-readable reason.
        """
        self.operation = operation
        super().__init__(f"{operation}: {message}")


class MissingCallableError(ElementNotFoundError):
    """Raised when the predicate or comparator argument is ``None``."""

    def __init__(self, operation: str, argument: str) -> None:
        self.argument = argument
        super().__init__(operation, f"{argument} must not be None")


class NoMatchError(ElementNotFoundError):
    """Raised when no element satisfies the predicate."""

    def __init__(self, operation: str) -> None:
        super().__init__(operation, "no element satisfies the predicate")


class EmptySequenceError(ElementNotFoundError):
    """Raised when an extremum is requested from an empty sequence."""

    def __init__(self, operation: str) -> None:
        super().__init__(operation, "sequence is empty")

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

"""Check error-code registry consistency against documentation.

Works whether or not seqfn is installed: the repo's `src/` directory is
prepended to `sys.path` before importing the registry.
"""

from __future__ import annotations

import importlib
import re
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

CODE_PATTERN = re.compile(r"SF\d{3}")


def _emit(message: str, *, error: bool = False) -> None:
    stream = sys.stderr if error else sys.stdout
    _ = stream.write(f"{message}\n")


def _load_error_codes(src_path: Path) -> Iterable[str]:
    src_str = str(src_path)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)
    module = importlib.import_module("seqfn._internal.error_codes")
    return [str(code) for code in module.error_code_catalog().values()]


def _load_documented_codes(doc_path: Path) -> set[str]:
    """Return the error codes mentioned in ``docs/EXCEPTIONS.md``.

    Raises:
        FileNotFoundError: If the documentation file is missing.
    """
    if not doc_path.exists():
        msg = f"documentation missing: {doc_path}"
        raise FileNotFoundError(msg)
    return set(CODE_PATTERN.findall(doc_path.read_text(encoding="utf-8")))


def _discover_duplicates(codes: Iterable[str]) -> set[str]:
    seen: set[str] = set()
    duplicates: set[str] = set()
    for code in codes:
        if code in seen:
            duplicates.add(code)
        else:
            seen.add(code)
    return duplicates


def main(argv: Sequence[str] | None = None) -> int:
    """Validate that the error-code registry matches the public docs.

    Args:
        argv: Ignored; accepted for parity with console entrypoints.

    Returns:
        ``0`` when registry and docs list the same codes, ``1`` on duplicate,
        missing or orphaned codes.
    """
    if argv:
        _emit("[seqfn] check_error_codes does not accept CLI arguments; ignoring argv")

    repo_root = Path(__file__).resolve().parents[1]

    try:
        codes = list(_load_error_codes(repo_root / "src"))
    except RuntimeError as exc:
        _emit(f"[seqfn] {exc}", error=True)
        return 1

    try:
        documented_codes = _load_documented_codes(repo_root / "docs" / "EXCEPTIONS.md")
    except FileNotFoundError as exc:
        _emit(f"[seqfn] {exc}", error=True)
        return 1

    duplicates = _discover_duplicates(codes)
    registry_codes = set(codes)
    missing_in_docs = registry_codes - documented_codes
    orphaned_codes = documented_codes - registry_codes

    status_lines: list[str] = []
    if duplicates:
        status_lines.append("duplicate codes in registry: " + ", ".join(sorted(duplicates)))
    if missing_in_docs:
        status_lines.append("missing codes in docs: " + ", ".join(sorted(missing_in_docs)))
    if orphaned_codes:
        status_lines.append("unknown codes in docs: " + ", ".join(sorted(orphaned_codes)))

    if status_lines:
        for line in status_lines:
            _emit(f"[seqfn] {line}", error=True)
        return 1

    _emit("[seqfn] error code registry and documentation are in sync")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())

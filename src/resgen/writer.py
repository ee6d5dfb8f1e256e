# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Persist generated modules.

Content is written to a temporary sibling first and moved into place with
``os.replace``, so a failed run never leaves a truncated module behind.
Unchanged content is not rewritten, which keeps build tools from
recompiling dependents.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from .errors import E_OUTPUT_DIR, E_WRITE_IO, generation_error

logger = logging.getLogger(__name__)

TMP_SUFFIX = ".tmp"
PACKAGE_MARKER = "__init__.py"


def package_dir(base: Path, package_name: str) -> Path:
    """Return ``base/a/b`` for package ``a.b``."""
    parts = [p for p in package_name.split(".") if p]
    return base.joinpath(*parts)


def ensure_package_dirs(base: Path, package_name: str) -> List[Path]:
    """Create the package directories below ``base``.

    Every directory created here also receives an empty ``__init__.py`` so
    the generated module is importable. Existing directories are left as is.

    Returns:
        The directories that were created.
    """
    created: List[Path] = []
    current = base
    try:
        base.mkdir(parents=True, exist_ok=True)
        for part in [p for p in package_name.split(".") if p]:
            current = current / part
            if current.is_dir():
                continue
            current.mkdir()
            (current / PACKAGE_MARKER).write_text("", encoding="utf-8")
            created.append(current)
    except OSError as e:
        raise generation_error(
            E_OUTPUT_DIR,
            f"Failed to create output directory: {current}",
            {"error": str(e)},
        ) from e
    return created


def atomic_write(path: Path, content: str) -> bool:
    """Write ``content`` to ``path`` atomically.

    Returns:
        True if the file was created or its content changed.

    Raises:
        GenerationError: when the file cannot be written; the temporary file
            is removed and ``path`` keeps its previous content.
    """
    path = Path(path)
    if path.is_file():
        try:
            if path.read_text(encoding="utf-8") == content:
                logger.debug("Unchanged: %s", path)
                return False
        except (OSError, UnicodeDecodeError):
            # Unreadable previous output is simply replaced.
            pass

    tmp = path.with_name(path.name + TMP_SUFFIX)
    try:
        with open(tmp, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp, path)
    except OSError as e:
        try:
            tmp.unlink()
        except OSError:
            pass
        raise generation_error(
            E_WRITE_IO, f"Failed to write {path}", {"error": str(e)}
        ) from e
    logger.debug("Wrote: %s", path)
    return True


def write_module(
    base: Path, package_name: str, module_name: str, content: str
) -> tuple[Path, bool]:
    """Write ``content`` as ``<base>/<package path>/<module_name>.py``.

    Returns:
        The module path and whether it changed.
    """
    ensure_package_dirs(base, package_name)
    target = package_dir(base, package_name) / f"{module_name}.py"
    return target, atomic_write(target, content)


__all__ = [
    "package_dir",
    "ensure_package_dirs",
    "atomic_write",
    "write_module",
]

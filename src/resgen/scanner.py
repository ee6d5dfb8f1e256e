# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Resource tree scanner.

Walks the resources root depth first and mirrors it as a
:class:`~resgen.model.ResourceNode` tree. A missing root yields an empty tree.
Entries that cannot be represented (symbolic links, sockets, unreadable
folders) are skipped and reported as :class:`~resgen.model.ScanWarning`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .errors import W_SPECIAL_FILE, W_SYMLINK, W_UNREADABLE
from .model import ResourceNode, ScanWarning

logger = logging.getLogger(__name__)

ORDERING_NAME = "name"
ORDERING_FILESYSTEM = "filesystem"
ORDERINGS = (ORDERING_NAME, ORDERING_FILESYSTEM)


@dataclass(slots=True)
class ScanResult:
    tree: ResourceNode
    warnings: List[ScanWarning] = field(default_factory=list)


def build_tree(
    root: str | os.PathLike, *, ordering: str = ORDERING_NAME
) -> ScanResult:
    """Scan ``root`` and return its resource tree.

    Args:
        root: Resources directory. Need not exist.
        ordering: ``"name"`` sorts the entries of each folder by raw name;
            ``"filesystem"`` keeps the order ``os.scandir`` yields.

    Returns:
        The tree plus the warnings collected while scanning.
    """
    if ordering not in ORDERINGS:
        raise ValueError(
            f"unknown ordering {ordering!r} (expected one of {ORDERINGS})"
        )
    result = ScanResult(tree=ResourceNode())
    root_path = Path(root)
    if not root_path.is_dir():
        logger.info(
            "Resources root %s is not a directory; generating an empty tree",
            root_path,
        )
        return result

    # An unreadable root leaves the tree empty, like a missing one.
    _scan_dir(root_path, result.tree, ordering, result.warnings)
    logger.debug(
        "Scanned %s: %d files, %d folders, %d warnings",
        root_path,
        sum(1 for _ in result.tree.iter_files()),
        sum(1 for _ in result.tree.iter_folders()),
        len(result.warnings),
    )
    return result


def _warn(
    warnings: List[ScanWarning], code: str, path: str, message: str
) -> None:
    w = ScanWarning(code=code, path=path, message=message)
    warnings.append(w)
    logger.warning("Skipping %s (%s)", path or ".", message)


def _scan_dir(
    directory: Path,
    node: ResourceNode,
    ordering: str,
    warnings: List[ScanWarning],
) -> bool:
    """Populate ``node`` from ``directory``; False when it cannot be listed."""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        _warn(warnings, W_UNREADABLE, node.relative_path, str(e))
        return False

    if ordering == ORDERING_NAME:
        entries.sort(key=lambda e: e.name)

    for entry in entries:
        rel = node.child_path(entry.name)
        try:
            if entry.is_symlink():
                _warn(warnings, W_SYMLINK, rel, "symbolic link")
            elif entry.is_file(follow_symlinks=False):
                node.add_file(entry.name)
            elif entry.is_dir(follow_symlinks=False):
                child = ResourceNode(entry.name, rel)
                if _scan_dir(Path(entry.path), child, ordering, warnings):
                    node.children[entry.name] = child
            else:
                _warn(warnings, W_SPECIAL_FILE, rel, "not a regular file")
        except OSError as e:
            _warn(warnings, W_UNREADABLE, rel, str(e))
    return True


__all__ = [
    "ORDERING_NAME",
    "ORDERING_FILESYSTEM",
    "ORDERINGS",
    "ScanResult",
    "build_tree",
]

# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Generator orchestration: scan, resolve identifiers, render, write."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ._version import __version__ as TOOL_VERSION
from .config import GeneratorConfig
from .emitter import emit, resolve_tree
from .model import ScanWarning, TypeDecl
from .reporting import get_reporter
from .scanner import ORDERING_NAME, build_tree
from .writer import write_module

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GenerationResult:
    output_file: Path
    changed: bool
    source: str
    tree: TypeDecl
    warnings: List[ScanWarning] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return sum(1 for _ in self.tree.iter_fields())

    @property
    def folder_count(self) -> int:
        return sum(1 for _ in self.tree.iter_types())


def render_source(
    resources_root: str | os.PathLike,
    package_name: str,
    *,
    resource_package: Optional[str] = None,
    ordering: str = ORDERING_NAME,
) -> str:
    """Scan ``resources_root`` and return the accessor module source.

    No file is written; this is the pure core of :func:`generate`.
    """
    scan = build_tree(resources_root, ordering=ordering)
    return emit(
        resolve_tree(scan.tree),
        package_name,
        resource_package=resource_package,
        source=str(resources_root),
    )


def generate(
    config: GeneratorConfig, *, dry_run: bool = False, reporter=None
) -> GenerationResult:
    """Run one generation for ``config``.

    Args:
        config: Validated generator configuration.
        dry_run: Render everything but write nothing.
        reporter: Reporter to use instead of the active one.

    Returns:
        What was generated and whether the output file changed.

    Raises:
        ConfigError: invalid settings, or no resource package can be
            derived for runtime lookup.
        GenerationError: the output could not be written. The previous
            output, if any, is left untouched.
    """
    rep = reporter or get_reporter()
    config.validate()
    anchor = config.anchor_package
    rep.section(f"resgen {TOOL_VERSION}")

    root = Path(config.resources_root)
    rep.verbose(f"Scanning resources: {root}")
    scan = build_tree(root, ordering=config.ordering)
    if not root.is_dir():
        rep.warning(f"Resources root not found, generating empty R: {root}")

    rep.verbose("Resolving identifiers")
    decl = resolve_tree(scan.tree)
    rep.verbose("Rendering accessor module")
    source = emit(
        decl,
        config.package_name,
        resource_package=anchor,
        source=str(config.resources_root),
    )

    target = config.output_file()
    result = GenerationResult(
        output_file=target,
        changed=False,
        source=source,
        tree=decl,
        warnings=list(scan.warnings),
    )
    summary = (
        f"files={result.file_count} folders={result.folder_count} "
        f"warnings={len(result.warnings)}"
    )

    if dry_run:
        rep.status("[DRY RUN] Planned output:")
        rep.status(f"    Accessor module: {target}")
        rep.status(f"Tree summary: {summary}")
        return result

    _, result.changed = write_module(
        config.output_base(),
        config.package_name,
        config.module_name,
        source,
    )
    logger.debug("Generated %s (%s)", target, summary)
    rep.status(f"Tree summary: {summary}")
    if result.changed:
        rep.status(f"Generated {target}")
    else:
        rep.status(f"No changes (up to date): {target}")
    return result


__all__ = ["GenerationResult", "render_source", "generate"]

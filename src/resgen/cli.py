# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Command-line entry point for resgen.

Typically invoked from a build step before packaging::

    resgen generate --resources src/myapp/resources --package myapp.generated

Settings may also come from a YAML file (``--config``); flags win over it.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ._version import __version__
from .config import GeneratorConfig, load_config
from .emitter import describe_tree, resolve_tree
from .errors import ResgenError
from .generator import generate
from .logging import configure_logging
from .reporting import (
    PlainReporter,
    RichReporter,
    SilentReporter,
    get_reporter,
    set_reporter,
    set_verbosity,
)
from .scanner import ORDERINGS, build_tree


def _load(args: argparse.Namespace) -> GeneratorConfig:
    cfg = load_config(args.config) if args.config else GeneratorConfig()
    cfg = cfg.with_overrides(
        resources_root=args.resources,
        package_name=getattr(args, "package", None),
        resource_package=getattr(args, "resource_package", None),
        output_directory=getattr(args, "output", None),
        ordering=args.ordering,
    )
    if getattr(args, "target", False):
        cfg = cfg.with_overrides(keep_in_project=False)
    cfg.validate()
    return cfg


def _generate_cmd(args: argparse.Namespace) -> int:
    generate(_load(args), dry_run=args.dry_run)
    return 0


def _tree_cmd(args: argparse.Namespace) -> int:
    cfg = _load(args)
    scan = build_tree(cfg.resources_root, ordering=cfg.ordering)
    rep = get_reporter()
    rep.flush()
    for line in describe_tree(resolve_tree(scan.tree)):
        print(line)
    return 0


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config",
        type=Path,
        help="YAML or JSON configuration file",
    )
    p.add_argument(
        "--resources",
        type=Path,
        help="Resources directory to scan (default: resources)",
    )
    p.add_argument(
        "--ordering",
        choices=ORDERINGS,
        help="Sibling order: sorted by name (default) or as listed by the OS",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="resgen",
        description="Generate typed accessors for bundled resource files",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=["plain", "rich", "silent"],
        default="plain",
        help="Select reporter backend: plain (default), rich, silent",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"resgen {__version__}",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate the accessor module")
    _add_source_args(g)
    g.add_argument("--package", help="Package of the generated module")
    g.add_argument(
        "--resource-package",
        dest="resource_package",
        help=(
            "Package holding the resources at runtime "
            "(default: derived from --resources below the source tree)"
        ),
    )
    g.add_argument(
        "--output",
        type=Path,
        help="Output base directory (overrides the configured location)",
    )
    g.add_argument(
        "--target",
        action="store_true",
        help="Write below the build directory instead of the source tree",
    )
    g.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan and render without writing the module",
    )
    g.set_defaults(func=_generate_cmd)

    t = sub.add_parser("tree", help="Print the resolved identifier tree")
    _add_source_args(t)
    t.set_defaults(func=_tree_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.reporter == "silent":
        set_reporter(SilentReporter())
    elif args.reporter == "rich" and sys.stderr.isatty():
        set_reporter(RichReporter())
    else:
        # rich falls back to plain when stderr is not a terminal
        set_reporter(PlainReporter())
    set_verbosity(args.verbose)
    configure_logging(args.verbose)
    try:
        return args.func(args)
    except ResgenError as e:
        get_reporter().error(str(e))
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

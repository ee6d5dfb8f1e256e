# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""resgen package

Build-time generator that scans a directory of bundled resource files and
emits a Python module of typed accessors mirroring the folder structure, so
code refers to ``R.Config.databaseProperties`` instead of a hand-typed path.

Prefer the CLI entry point in :mod:`resgen.cli` for build integration, or
:func:`resgen.generator.generate` for programmatic use.
"""

from ._version import __version__  # noqa: F401

__all__ = ["__version__"]

# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""String templates used by the resource accessor generator.

``TEMPLATE_HEADER`` and ``TEMPLATE_ROOT_CLASS`` are ``str.format`` templates.
``TEMPLATE_RUNTIME`` is copied verbatim into every generated module and must
therefore not be passed through ``format``.
"""

TEMPLATE_HEADER = '''# Generated file - do not edit.
# Package: {package}
# Source: {source}
# Tool: resgen {tool_ver}

"""Typed accessors for bundled resource files.

Reference resources through :class:`R` (``R.Config.databaseProperties``)
instead of hand-typed path strings. Folder metadata is available through the
``_self`` attribute of each nested class.
"""

from __future__ import annotations

import atexit
import io
import mimetypes
from contextlib import ExitStack
from importlib import resources as _resources
from pathlib import Path
from typing import BinaryIO, TextIO

__all__ = [
    "PACKAGE",
    "RESOURCE_PACKAGE",
    "R",
    "RFile",
    "RFolder",
    "ResourceNotFoundError",
]

PACKAGE = {package!r}
RESOURCE_PACKAGE = {resource_package!r}
'''

TEMPLATE_RUNTIME = '''
# Temporary copies of archived resources, removed at interpreter exit.
_TEMP_FILES = ExitStack()
atexit.register(_TEMP_FILES.close)


class ResourceNotFoundError(FileNotFoundError):
    """A generated accessor points at a resource that is not bundled."""


class RFolder:
    """Name and relative path of one resource folder."""

    __slots__ = ("_name", "_path")

    def __init__(self, name: str, path: str) -> None:
        self._name = name
        self._path = path

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    def file(self, name: str) -> RFile:
        """Accessor for the file ``name`` directly inside this folder."""
        return RFile(f"{self._path}/{name}" if self._path else name)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"RFolder({self._name!r}, {self._path!r})"


class RFile:
    """Accessor for one bundled resource file.

    Resources are looked up with :mod:`importlib.resources` relative to
    ``RESOURCE_PACKAGE``, so both plain directories and zip archives work.
    Content operations raise :class:`ResourceNotFoundError` when the resource
    is missing. :meth:`to_path` copies archived resources to a temporary file
    that lives until interpreter exit.
    """

    __slots__ = ("_path", "_file_name", "_materialized")

    def __init__(self, resource_path: str) -> None:
        if resource_path.startswith("/"):
            resource_path = resource_path[1:]
        self._path = resource_path
        self._file_name = resource_path.rsplit("/", 1)[-1]
        self._materialized: Path | None = None

    # Metadata ---------------------------------------------------------------
    @property
    def path(self) -> str:
        return self._path

    @property
    def resource_path(self) -> str:
        return self._path

    @property
    def resource_path_with_slash(self) -> str:
        return "/" + self._path

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def base_name(self) -> str:
        stem, dot, _ = self._file_name.rpartition(".")
        return stem if dot else self._file_name

    @property
    def extension(self) -> str:
        _, dot, ext = self._file_name.rpartition(".")
        return ext if dot else ""

    @property
    def parent_path(self) -> str:
        parent, _, _ = self._path.rpartition("/")
        return parent

    def mime_type(self) -> str | None:
        return mimetypes.guess_type(self._file_name)[0]

    # Lookup -----------------------------------------------------------------
    def _locate(self):
        try:
            node = _resources.files(RESOURCE_PACKAGE)
        except (ModuleNotFoundError, TypeError) as e:
            # TypeError: the anchor is a plain module, not a package.
            raise ResourceNotFoundError(
                f"Resource not found: {self._path}"
            ) from e
        for part in self._path.split("/"):
            node = node.joinpath(part)
        return node

    def traversable(self):
        """Return the :class:`importlib.resources.abc.Traversable` handle."""
        node = self._locate()
        if not node.is_file():
            raise ResourceNotFoundError(f"Resource not found: {self._path}")
        return node

    def exists(self) -> bool:
        try:
            return self._locate().is_file()
        except ResourceNotFoundError:
            return False

    # Content ----------------------------------------------------------------
    def open_stream(self) -> BinaryIO:
        return self.traversable().open("rb")

    def open(self) -> BinaryIO:
        return self.open_stream()

    def open_reader(self, encoding: str = "utf-8") -> TextIO:
        return io.TextIOWrapper(self.open_stream(), encoding=encoding)

    def read_bytes(self) -> bytes:
        return self.traversable().read_bytes()

    def read_content(self, encoding: str = "utf-8") -> str:
        return self.read_bytes().decode(encoding)

    def size(self) -> int:
        """Size in bytes, or -1 when the resource is missing."""
        if not self.exists():
            return -1
        node = self._locate()
        if isinstance(node, Path):
            return node.stat().st_size
        total = 0
        with node.open("rb") as stream:
            for chunk in iter(lambda: stream.read(8192), b""):
                total += len(chunk)
        return total

    # Filesystem -------------------------------------------------------------
    def to_path(self) -> Path:
        """Filesystem path of the resource, extracted once when archived."""
        if self._materialized is None:
            node = self.traversable()
            if isinstance(node, Path):
                self._materialized = node
            else:
                self._materialized = _TEMP_FILES.enter_context(
                    _resources.as_file(node)
                )
        return self._materialized

    def to_file(self) -> Path:
        return self.to_path()

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"RFile({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RFile):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)
'''

TEMPLATE_ROOT_CLASS = '''

class {name}:
    """Root of the resource tree."""
'''

TEMPLATE_NESTED_CLASS = "\n{indent}class {name}:\n"
TEMPLATE_SELF = "{indent}_self = RFolder({raw_name!r}, {path!r})\n"
TEMPLATE_FIELD = "{indent}{name} = RFile({path!r})\n"

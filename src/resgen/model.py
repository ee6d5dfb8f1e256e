# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Typed data model for the resgen pipeline.

Two layers:

* the raw resource tree (:class:`ResourceNode` / :class:`ResourceFile`) built
  by the scanner, one object per filesystem entry;
* the resolved declaration tree (:class:`TypeDecl` / :class:`FieldDecl`) that
  carries the final, collision-free identifiers consumed by the emitter.

Relative paths always use ``/`` as separator, whatever the host OS.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

PATH_SEPARATOR = "/"


@dataclass(slots=True)
class ResourceFile:
    raw_name: str
    relative_path: str


@dataclass(slots=True)
class ResourceNode:
    raw_name: str = ""
    relative_path: str = ""
    children: Dict[str, ResourceNode] = field(default_factory=dict)
    files: List[ResourceFile] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.raw_name == ""

    def child_path(self, name: str) -> str:
        """Relative path of a direct entry ``name`` of this folder."""
        if not self.relative_path:
            return name
        return f"{self.relative_path}{PATH_SEPARATOR}{name}"

    def add_file(self, name: str) -> ResourceFile:
        f = ResourceFile(name, self.child_path(name))
        self.files.append(f)
        return f

    def iter_files(self) -> Iterator[ResourceFile]:
        """Yield every file of the subtree, depth first."""
        yield from self.files
        for child in self.children.values():
            yield from child.iter_files()

    def iter_folders(self) -> Iterator[ResourceNode]:
        """Yield every folder below this one (self excluded), depth first."""
        for child in self.children.values():
            yield child
            yield from child.iter_folders()


@dataclass(slots=True)
class ScanWarning:
    code: str
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.path}: {self.message}"


@dataclass(slots=True)
class FieldDecl:
    identifier: str
    raw_name: str
    relative_path: str


@dataclass(slots=True)
class TypeDecl:
    identifier: str
    raw_name: str
    relative_path: str
    fields: List[FieldDecl] = field(default_factory=list)
    types: List[TypeDecl] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.raw_name == ""

    def iter_fields(self) -> Iterator[FieldDecl]:
        yield from self.fields
        for t in self.types:
            yield from t.iter_fields()

    def iter_types(self) -> Iterator[TypeDecl]:
        for t in self.types:
            yield t
            yield from t.iter_types()


__all__ = [
    "PATH_SEPARATOR",
    "ResourceFile",
    "ResourceNode",
    "ScanWarning",
    "FieldDecl",
    "TypeDecl",
]

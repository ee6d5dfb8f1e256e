# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Render a resource tree as a Python accessor module.

Rendering is split in two passes:

* :func:`resolve_tree` assigns identifiers (sanitize + collision resolution
  per sibling scope) and returns a :class:`~resgen.model.TypeDecl` tree;
* :func:`emit` turns that tree into source text: one ``RFile`` class
  attribute per file and one nested class per folder.

A folder class is a plain class holding an ``RFolder`` in ``_self``; no
inheritance is involved. Python shares a single namespace between the
attributes and nested classes of a class body, so folder identifiers are
resolved with the file identifiers of the same folder reserved.
"""

from __future__ import annotations

from typing import List, Optional

from ._version import __version__ as TOOL_VERSION
from .model import FieldDecl, ResourceNode, TypeDecl
from .naming import IdentifierStyle, resolve_collisions, sanitize
from .templates import (
    TEMPLATE_FIELD,
    TEMPLATE_HEADER,
    TEMPLATE_NESTED_CLASS,
    TEMPLATE_ROOT_CLASS,
    TEMPLATE_RUNTIME,
    TEMPLATE_SELF,
)

ROOT_IDENTIFIER = "R"
SELF_ATTRIBUTE = "_self"
INDENT = "    "


def resolve_tree(
    node: ResourceNode, identifier: str = ROOT_IDENTIFIER
) -> TypeDecl:
    """Assign unique identifiers to every file and folder below ``node``."""
    reserved = () if node.is_root else (SELF_ATTRIBUTE,)

    file_pairs = resolve_collisions(
        [
            (f.raw_name, sanitize(f.raw_name, IdentifierStyle.FIELD))
            for f in node.files
        ],
        reserved,
    )
    fields = [
        FieldDecl(ident, f.raw_name, f.relative_path)
        for (_, ident), f in zip(file_pairs, node.files)
    ]

    children = list(node.children.values())
    type_pairs = resolve_collisions(
        [
            (c.raw_name, sanitize(c.raw_name, IdentifierStyle.TYPE))
            for c in children
        ],
        {*reserved, *(f.identifier for f in fields)},
    )
    types = [
        resolve_tree(child, ident)
        for (_, ident), child in zip(type_pairs, children)
    ]
    return TypeDecl(
        identifier=identifier,
        raw_name=node.raw_name,
        relative_path=node.relative_path,
        fields=fields,
        types=types,
    )


def _emit_body(decl: TypeDecl, out: List[str], depth: int) -> None:
    indent = INDENT * depth
    if not decl.is_root:
        out.append(
            TEMPLATE_SELF.format(
                indent=indent, raw_name=decl.raw_name, path=decl.relative_path
            )
        )
    if decl.fields and not decl.is_root:
        out.append("\n")
    for f in decl.fields:
        out.append(
            TEMPLATE_FIELD.format(
                indent=indent, name=f.identifier, path=f.relative_path
            )
        )
    for t in decl.types:
        out.append(
            TEMPLATE_NESTED_CLASS.format(indent=indent, name=t.identifier)
        )
        _emit_body(t, out, depth + 1)


def _one_line(text: str) -> str:
    # Header values land in comments and must not start a new line.
    return " ".join(str(text).splitlines())


def emit(
    tree: ResourceNode | TypeDecl,
    package_name: str,
    *,
    resource_package: Optional[str] = None,
    source: str = "",
) -> str:
    """Render the complete accessor module.

    Args:
        tree: Raw tree (resolved on the fly) or an already resolved tree.
        package_name: Package the module belongs to.
        resource_package: Package whose data files hold the resources at
            runtime. Defaults to ``package_name``.
        source: Resources root as given by the caller, for the header.

    Returns:
        The module source text.
    """
    decl = tree if isinstance(tree, TypeDecl) else resolve_tree(tree)
    header = TEMPLATE_HEADER.format(
        package=_one_line(package_name),
        resource_package=resource_package or package_name,
        source=_one_line(source) or "-",
        tool_ver=TOOL_VERSION,
    )
    body: List[str] = []
    _emit_body(decl, body, depth=1)
    root = TEMPLATE_ROOT_CLASS.format(name=decl.identifier)
    if body:
        root += "\n"
    return header + TEMPLATE_RUNTIME + root + "".join(body)


def describe_tree(decl: TypeDecl) -> List[str]:
    """Human readable outline of a resolved tree, one line per declaration."""
    lines = [decl.identifier]

    def _walk(d: TypeDecl, prefix: str) -> None:
        for f in d.fields:
            lines.append(f"{prefix}{f.identifier} -> {f.relative_path}")
        for t in d.types:
            lines.append(f"{prefix}{t.identifier}/ -> {t.relative_path}")
            _walk(t, prefix + "  ")

    _walk(decl, "  ")
    return lines


__all__ = [
    "ROOT_IDENTIFIER",
    "SELF_ATTRIBUTE",
    "resolve_tree",
    "emit",
    "describe_tree",
]

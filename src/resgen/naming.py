# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Identifier derivation for generated accessors.

Filesystem names are turned into Python identifiers in two steps:

1. :func:`sanitize` maps one raw name to a readable identifier. It is pure:
   the result depends only on the name and the requested style.
2. :func:`resolve_collisions` makes the identifiers of one sibling scope
   unique, because sanitizing is lossy (``report.v1`` and ``report-v1`` both
   become ``reportV1``).

Field identifiers use camel case (``appSettingsYml``), type identifiers use
Pascal case (``AppSettings``).
"""

from __future__ import annotations

import keyword
import re
import string
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

_SEPARATORS_RE = re.compile(r"[^A-Za-z0-9]+")


class IdentifierStyle(str, Enum):
    FIELD = "field"
    TYPE = "type"


# Used when a name holds no letter or digit at all (e.g. "...", "---").
PLACEHOLDERS = {
    IdentifierStyle.FIELD: "unnamed",
    IdentifierStyle.TYPE: "Unnamed",
}


def split_words(raw_name: str) -> List[str]:
    """Split on every run of characters outside ``[A-Za-z0-9]``.

    Digits stay attached to their neighbouring letters: ``v2beta`` is one word.
    """
    return [w for w in _SEPARATORS_RE.split(raw_name) if w]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def sanitize(raw_name: str, style: IdentifierStyle) -> str:
    """Return a valid Python identifier derived from ``raw_name``.

    Args:
        raw_name: Filesystem name of a file or folder (extension included).
        style: ``IdentifierStyle.FIELD`` for camel case, ``TYPE`` for Pascal.

    Returns:
        A non-empty identifier that is never a digit-led token nor a keyword.
    """
    style = IdentifierStyle(style)
    words = split_words(raw_name)
    if not words:
        return PLACEHOLDERS[style]

    parts = [_capitalize(w) for w in words]
    if style is IdentifierStyle.FIELD:
        parts[0] = parts[0][:1].lower() + parts[0][1:]
    ident = "".join(parts)

    if ident[0] in string.digits:
        ident = "_" + ident
    # None/True/False survive Pascal casing, the rest survive camel casing.
    if keyword.iskeyword(ident):
        ident += "_"
    return ident


def resolve_collisions(
    pairs: Sequence[Tuple[str, str]], reserved: Iterable[str] = ()
) -> List[Tuple[str, str]]:
    """Make identifiers unique within one sibling scope.

    Pairs are ``(raw_name, identifier)`` and are processed in order. A taken
    identifier gets the smallest free numeric suffix starting at ``2``, so
    ``["a.b", "a-b", "a_b"]`` yields ``aB``, ``aB2``, ``aB3``.

    Args:
        pairs: Sanitized names of one scope, in declaration order.
        reserved: Identifiers already taken in the enclosing namespace.

    Returns:
        A new list of pairs, same order and length as ``pairs``.
    """
    taken = set(reserved)
    resolved: List[Tuple[str, str]] = []
    for raw_name, ident in pairs:
        candidate = ident
        n = 2
        while candidate in taken:
            candidate = f"{ident}{n}"
            n += 1
        taken.add(candidate)
        resolved.append((raw_name, candidate))
    return resolved


def sanitize_scope(
    raw_names: Sequence[str],
    style: IdentifierStyle,
    reserved: Iterable[str] = (),
) -> List[str]:
    """Sanitize and de-duplicate the names of one scope in a single call."""
    pairs = [(name, sanitize(name, style)) for name in raw_names]
    return [ident for _, ident in resolve_collisions(pairs, reserved)]


def is_valid_identifier(name: str) -> bool:
    return bool(name) and name.isidentifier() and not keyword.iskeyword(name)


__all__ = [
    "IdentifierStyle",
    "PLACEHOLDERS",
    "split_words",
    "sanitize",
    "resolve_collisions",
    "sanitize_scope",
    "is_valid_identifier",
]

# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Error definitions for resgen.

Fatal problems abort a generation run with a single :class:`ResgenError`.
Problems found while scanning the resources tree are not errors; they are
recorded as :class:`resgen.model.ScanWarning` entries and the scan goes on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

E_CONFIG = "E_CONFIG"
E_OUTPUT_DIR = "E_OUTPUT_DIR"
E_WRITE_IO = "E_WRITE_IO"

W_SYMLINK = "W_SYMLINK"
W_SPECIAL_FILE = "W_SPECIAL_FILE"
W_UNREADABLE = "W_UNREADABLE"


@dataclass
class ResgenError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class ConfigError(ResgenError):
    pass


class GenerationError(ResgenError):
    pass


def config_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> ConfigError:
    return ConfigError(code=E_CONFIG, message=message, context=context)


def generation_error(
    code: str, message: str, context: Optional[Dict[str, Any]] = None
) -> GenerationError:
    return GenerationError(code=code, message=message, context=context)


__all__ = [
    "ResgenError",
    "ConfigError",
    "GenerationError",
    "config_error",
    "generation_error",
    "E_CONFIG",
    "E_OUTPUT_DIR",
    "E_WRITE_IO",
    "W_SYMLINK",
    "W_SPECIAL_FILE",
    "W_UNREADABLE",
]

# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

from __future__ import annotations

import os
import sys
from typing import Any

from .base import Reporter, get_verbosity


class PlainReporter(Reporter):
    """Line-oriented reporter; ANSI colors only on a TTY."""

    def __init__(self, stream=None, use_color: bool | None = None):
        # None follows sys.stderr at write time (it may be swapped later).
        self._stream = stream
        self._use_color = use_color

    @property
    def stream(self):
        return self._stream or sys.stderr

    @property
    def use_color(self) -> bool:
        if self._use_color is not None:
            return self._use_color
        if os.environ.get("NO_COLOR") is not None:
            return False
        return getattr(self.stream, "isatty", lambda: False)()

    def _c(self, code: str, text: str) -> str:
        if not self.use_color:
            return text
        return f"\x1b[{code}m{text}\x1b[0m"

    def status(self, message: str, **fields: Any) -> None:
        self.stream.write(f"{self._c('32', 'INFO')}: {message}\n")

    def verbose(self, message: str, *, level: int = 1, **fields: Any) -> None:
        if get_verbosity() < level:
            return
        self.stream.write(f"{self._c('36', f'VERB{level}')}: {message}\n")

    def warning(self, message: str, **fields: Any) -> None:
        self.stream.write(f"{self._c('33', 'WARN')}: {message}\n")

    def error(self, message: str, **fields: Any) -> None:
        self.stream.write(f"{self._c('31', 'ERROR')}: {message}\n")

    def section(self, title: str) -> None:
        self.stream.write(f"\n[{title}]\n")

    def flush(self) -> None:
        try:
            self.stream.flush()
        except (AttributeError, ValueError):
            pass

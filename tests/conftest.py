# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

from pathlib import Path

import pytest

from resgen.reporting import PlainReporter, set_reporter, set_verbosity

NESTED_FILES = {
    "config/database.properties": "url=jdbc:h2:mem\n",
    "config/app-settings.yml": "debug: true\n",
    "templates/email.html": "<p>Hello</p>\n",
    "templates/reports/invoice.pdf": "%PDF-1.4\n",
    "logo.png": "\x89PNG",
}


def write_tree(root: Path, files: dict) -> Path:
    """Create ``files`` (relative path -> text) below ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, text in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _reset_reporter():
    set_reporter(PlainReporter(use_color=False))
    set_verbosity(0)
    yield
    set_reporter(PlainReporter(use_color=False))
    set_verbosity(0)


@pytest.fixture
def nested_resources(tmp_path) -> Path:
    return write_tree(tmp_path / "resources", NESTED_FILES)

# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

import pytest

from resgen import cli
from resgen._version import __version__


def _generate_args(tmp_path, resources, *extra):
    return [
        "generate",
        "--resources",
        str(resources),
        "--package",
        "app.generated",
        "--resource-package",
        "app.resources",
        "--output",
        str(tmp_path / "out"),
        *extra,
    ]


def test_cli_dry_run(tmp_path, nested_resources, capsys):
    rc = cli.main(_generate_args(tmp_path, nested_resources, "--dry-run"))
    assert rc == 0
    assert "[DRY RUN]" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_cli_generate(tmp_path, nested_resources, capsys):
    rc = cli.main(_generate_args(tmp_path, nested_resources))
    assert rc == 0
    target = tmp_path / "out" / "app" / "generated" / "r.py"
    text = target.read_text(encoding="utf-8")
    assert "class Config:" in text
    assert "PACKAGE = 'app.generated'" in text
    assert f"Generated {target}" in capsys.readouterr().err


def test_cli_config_file_with_flag_override(tmp_path, nested_resources):
    cfg = tmp_path / "resgen.yaml"
    cfg.write_text(
        f"resources_root: {nested_resources}\n"
        "package_name: from_file\n"
        "output_directory: out\n"
        "module_name: res\n"
        "resource_package: app.resources\n",
        encoding="utf-8",
    )
    rc = cli.main(["generate", "--config", str(cfg), "--package", "cli_pkg"])
    assert rc == 0
    assert (tmp_path / "out" / "cli_pkg" / "res.py").is_file()
    assert not (tmp_path / "out" / "from_file").exists()


def test_cli_tree(nested_resources, capsys):
    rc = cli.main(["tree", "--resources", str(nested_resources)])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "R"
    assert "  logoPng -> logo.png" in out
    assert "  Templates/ -> templates" in out
    assert "    Reports/ -> templates/reports" in out
    assert "      invoicePdf -> templates/reports/invoice.pdf" in out


def test_cli_bad_config_exits_2(tmp_path, capsys):
    cfg = tmp_path / "resgen.yaml"
    cfg.write_text("ordering: random\n", encoding="utf-8")
    rc = cli.main(["generate", "--config", str(cfg)])
    assert rc == 2
    assert "ERROR: E_CONFIG" in capsys.readouterr().err


def test_cli_silent_reporter(tmp_path, nested_resources, capsys):
    rc = cli.main(
        ["-r", "silent", *_generate_args(tmp_path, nested_resources)]
    )
    assert rc == 0
    assert capsys.readouterr().err == ""


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out.strip() == f"resgen {__version__}"


def test_cli_requires_resource_package_outside_source_tree(
    tmp_path, nested_resources, capsys
):
    rc = cli.main(
        [
            "generate",
            "--resources",
            str(nested_resources),
            "--output",
            str(tmp_path / "out"),
        ]
    )
    assert rc == 2
    err = capsys.readouterr().err
    assert "ERROR: E_CONFIG" in err
    assert "--resource-package" in err

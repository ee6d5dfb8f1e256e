# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

import ast

from resgen.emitter import describe_tree, emit, resolve_tree
from resgen.model import ResourceNode
from resgen.naming import is_valid_identifier
from resgen.scanner import build_tree

from conftest import NESTED_FILES, write_tree


def _load(source: str) -> dict:
    ns: dict = {"__name__": "generated_under_test"}
    exec(compile(source, "r.py", "exec"), ns)
    return ns


def _members(cls, ns):
    files = {}
    folders = {}
    for name, value in vars(cls).items():
        if isinstance(value, ns["RFile"]):
            files[name] = value
        elif isinstance(value, type):
            folders[name] = value
    return files, folders


def _collect(cls, ns, files, folders):
    fs, ds = _members(cls, ns)
    files.extend(f.path for f in fs.values())
    for sub in ds.values():
        folders.append(sub._self.path)
        _collect(sub, ns, files, folders)


def test_resolved_tree_for_nested_scenario(nested_resources):
    decl = resolve_tree(build_tree(nested_resources).tree)
    assert decl.identifier == "R"
    assert [f.identifier for f in decl.fields] == ["logoPng"]
    assert [t.identifier for t in decl.types] == ["Config", "Templates"]

    config, templates = decl.types
    assert config.relative_path == "config"
    assert sorted(f.identifier for f in config.fields) == [
        "appSettingsYml",
        "databaseProperties",
    ]
    assert [f.identifier for f in templates.fields] == ["emailHtml"]
    assert templates.relative_path == "templates"
    (reports,) = templates.types
    assert reports.identifier == "Reports"
    assert reports.relative_path == "templates/reports"
    assert [f.identifier for f in reports.fields] == ["invoicePdf"]


def test_emitted_module_reproduces_hierarchy(nested_resources):
    source = emit(build_tree(nested_resources).tree, "com.example.res")
    ast.parse(source)
    ns = _load(source)
    R = ns["R"]

    assert R.logoPng.path == "logo.png"
    assert R.Config._self.path == "config"
    assert R.Config._self.name == "config"
    assert R.Config.databaseProperties.path == "config/database.properties"
    assert R.Config.appSettingsYml.path == "config/app-settings.yml"
    assert R.Templates.emailHtml.path == "templates/email.html"
    assert R.Templates.Reports._self.path == "templates/reports"
    assert R.Templates.Reports.invoicePdf.path == (
        "templates/reports/invoice.pdf"
    )
    assert ns["PACKAGE"] == "com.example.res"
    assert ns["RESOURCE_PACKAGE"] == "com.example.res"


def test_round_trip_every_file_and_folder(tmp_path):
    files = dict(NESTED_FILES)
    files.update(
        {
            "a.b": "",
            "a-b": "",
            "a_b": "",
            "2fa.png": "",
            "2fa/inner.txt": "",
            "class/def.txt": "",
            "none/x": "",
            "deep/er/and/deeper/leaf.bin": "",
            "it's \"quoted\".txt": "",
        }
    )
    root = write_tree(tmp_path / "res", files)
    (root / "empty").mkdir()
    tree = build_tree(root).tree
    ns = _load(emit(tree, "pkg"))

    found_files, found_folders = [], []
    _collect(ns["R"], ns, found_files, found_folders)
    assert sorted(found_files) == sorted(files)
    assert sorted(found_folders) == sorted(
        n.relative_path for n in tree.iter_folders()
    )
    assert "empty" in found_folders


def test_identifiers_are_valid_and_unique_per_scope(tmp_path):
    root = write_tree(
        tmp_path / "res",
        {
            "a.b": "",
            "a-b": "",
            "a_b": "",
            "...": "",
            "---/x": "",
            "___/y": "",
            "9lives.txt": "",
        },
    )
    decl = resolve_tree(build_tree(root).tree)
    for t in [decl, *decl.iter_types()]:
        field_ids = [f.identifier for f in t.fields]
        type_ids = [c.identifier for c in t.types]
        assert len(set(field_ids)) == len(field_ids)
        assert len(set(type_ids)) == len(type_ids)
        for ident in field_ids + type_ids:
            assert is_valid_identifier(ident)
    assert sorted(f.identifier for f in decl.fields) == [
        "_9livesTxt",
        "aB",
        "aB2",
        "aB3",
        "unnamed",
    ]
    assert sorted(t.identifier for t in decl.types) == [
        "Unnamed",
        "Unnamed2",
    ]


def test_collisions_follow_listing_order():
    root = ResourceNode()
    for name in ["a.b", "a-b", "a_b"]:
        root.add_file(name)
    decl = resolve_tree(root)
    assert [(f.raw_name, f.identifier) for f in decl.fields] == [
        ("a.b", "aB"),
        ("a-b", "aB2"),
        ("a_b", "aB3"),
    ]


def test_folder_and_file_sharing_an_identifier_do_not_clash():
    root = ResourceNode()
    root.add_file("2fa")
    root.children["2fa"] = ResourceNode("2fa", "2fa")
    decl = resolve_tree(root)
    assert decl.fields[0].identifier == "_2fa"
    assert decl.types[0].identifier == "_2fa2"

    ns = _load(emit(decl, "pkg"))
    assert ns["R"]._2fa.path == "2fa"
    assert ns["R"]._2fa2._self.path == "2fa"


def test_empty_tree_emits_valid_empty_aggregate():
    source = emit(ResourceNode(), "pkg")
    ast.parse(source)
    ns = _load(source)
    files, folders = _members(ns["R"], ns)
    assert files == {}
    assert folders == {}


def test_resource_package_and_source_in_header(nested_resources):
    source = emit(
        build_tree(nested_resources).tree,
        "myapp.generated",
        resource_package="myapp.resources",
        source="src/myapp/resources",
    )
    assert source.startswith("# Generated file - do not edit.\n")
    assert "# Package: myapp.generated\n" in source
    assert "# Source: src/myapp/resources\n" in source
    assert "RESOURCE_PACKAGE = 'myapp.resources'" in source


def test_header_values_stay_on_one_line():
    source = emit(
        ResourceNode(),
        "pkg\nimport os",
        source="res\r\nraise SystemExit",
    )
    ast.parse(source)
    assert "# Package: pkg import os\n" in source
    assert "# Source: res raise SystemExit\n" in source
    assert "\nimport os\n" not in source
    assert _load(source)["PACKAGE"] == "pkg\nimport os"


def test_emission_is_deterministic(nested_resources):
    tree = build_tree(nested_resources).tree
    assert emit(tree, "pkg") == emit(tree, "pkg")


def test_describe_tree_lists_declarations(nested_resources):
    lines = describe_tree(resolve_tree(build_tree(nested_resources).tree))
    assert lines[0] == "R"
    assert "  logoPng -> logo.png" in lines
    assert "  Templates/ -> templates" in lines
    assert "    Reports/ -> templates/reports" in lines
    assert "      invoicePdf -> templates/reports/invoice.pdf" in lines

# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Generator configuration.

A configuration is a YAML (or JSON) mapping whose keys match the fields of
:class:`GeneratorConfig`::

    resources_root: src/myapp/resources
    package_name: myapp.generated
    resource_package: myapp.resources  # derived when omitted
    keep_in_project: true

Relative paths are resolved against the directory of the configuration file.
Command-line flags override values read from the file.
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .errors import config_error
from .naming import is_valid_identifier as _is_identifier
from .scanner import ORDERING_NAME, ORDERINGS
from .writer import package_dir

_PATH_FIELDS = (
    "resources_root",
    "output_directory",
    "output_src_directory",
    "output_target_directory",
)
_BOOL_FIELDS = ("keep_in_project",)
_STR_FIELDS = ("package_name", "resource_package", "module_name", "ordering")


@dataclass(slots=True)
class GeneratorConfig:
    resources_root: Path = field(default_factory=lambda: Path("resources"))
    package_name: str = "generated"
    # Package whose data files hold the resources at runtime.
    resource_package: Optional[str] = None
    # Explicit output base; overrides the keep_in_project selection.
    output_directory: Optional[Path] = None
    keep_in_project: bool = True
    output_src_directory: Path = field(default_factory=lambda: Path("src"))
    output_target_directory: Path = field(
        default_factory=lambda: Path("build/generated")
    )
    module_name: str = "r"
    ordering: str = ORDERING_NAME

    @property
    def anchor_package(self) -> str:
        """Package that holds the resources at runtime.

        Without an explicit ``resource_package`` the package is derived from
        the location of ``resources_root`` below ``output_directory`` or
        ``output_src_directory`` (``src/myapp/resources`` gives
        ``myapp.resources``).

        Raises:
            ConfigError: the resources root is not inside a package directory.
        """
        if self.resource_package:
            return self.resource_package
        root = Path(self.resources_root).resolve()
        for base in (self.output_directory, self.output_src_directory):
            if base is None:
                continue
            try:
                parts = root.relative_to(Path(base).resolve()).parts
            except ValueError:
                continue
            if parts and all(_is_identifier(p) for p in parts):
                return ".".join(parts)
        raise config_error(
            "Cannot derive the resource package from the resources root; "
            "set resource_package (--resource-package)",
            {"resources_root": str(self.resources_root)},
        )

    def output_base(self) -> Path:
        if self.output_directory is not None:
            return self.output_directory
        if self.keep_in_project:
            return self.output_src_directory
        return self.output_target_directory

    def output_file(self) -> Path:
        return (
            package_dir(self.output_base(), self.package_name)
            / f"{self.module_name}.py"
        )

    def validate(self) -> None:
        if self.ordering not in ORDERINGS:
            raise config_error(
                f"ordering must be one of {', '.join(ORDERINGS)}",
                {"ordering": self.ordering},
            )
        if not _is_identifier(self.module_name):
            raise config_error(
                "module_name must be a valid Python identifier",
                {"module_name": self.module_name},
            )
        for key in ("package_name", "resource_package"):
            value = getattr(self, key)
            if value is None:
                continue
            if not value or not all(
                _is_identifier(p) for p in value.split(".")
            ):
                raise config_error(
                    f"{key} must be a dotted Python package name",
                    {key: value},
                )

    def with_overrides(self, **overrides: Any) -> GeneratorConfig:
        """Copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        for key in _PATH_FIELDS:
            if key in values:
                values[key] = Path(values[key])
        return dataclasses.replace(self, **values)


def config_from_mapping(
    data: Mapping[str, Any], base_dir: Optional[Path] = None
) -> GeneratorConfig:
    """Build a validated config from a parsed mapping."""
    known = {f.name for f in dataclasses.fields(GeneratorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise config_error(
            "Unknown configuration keys", {"keys": ", ".join(unknown)}
        )
    values: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        if key in _BOOL_FIELDS:
            if not isinstance(value, bool):
                raise config_error(f"{key} must be a boolean", {key: value})
            values[key] = value
        elif key in _STR_FIELDS:
            if not isinstance(value, str):
                raise config_error(f"{key} must be a string", {key: value})
            values[key] = value
        else:
            if not isinstance(value, str):
                raise config_error(f"{key} must be a path", {key: value})
            p = Path(value)
            if base_dir is not None and not p.is_absolute():
                p = base_dir / p
            values[key] = p
    cfg = GeneratorConfig(**values)
    cfg.validate()
    return cfg


def load_config(path: str | Path) -> GeneratorConfig:
    """Load a configuration file (``.yaml``/``.yml`` or ``.json``)."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise config_error(
            f"Cannot read configuration file: {p}", {"error": str(e)}
        ) from e
    try:
        if p.suffix.lower() == ".json":
            data: Any = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as e:
        raise config_error(
            f"Malformed configuration file: {p}", {"error": str(e)}
        ) from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise config_error("Root of configuration must be a mapping")
    return config_from_mapping(data, p.resolve().parent)


__all__ = ["GeneratorConfig", "config_from_mapping", "load_config"]

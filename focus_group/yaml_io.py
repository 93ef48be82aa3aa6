# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""YAML I/O helpers for versioned work files."""

import os
from pathlib import Path
from typing import Any

import yaml

from focus_group.config import ConfigError


def read_yaml_mapping(path: Path, *, schema_version: int | None = None) -> dict[str, Any]:
    """
    Load a work file written by `write_yaml_mapping`.

    Args:
        path:
            YAML file path.
        schema_version:
            If given, the file's `schema_version` must not be newer.

    Raises:
        ConfigError:
            If the file cannot be loaded, is not a mapping or was written by a
            newer version of the tool.
    """

    try:
        with path.open(encoding="utf-8") as handle:
            payload = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read work file '{path}': {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigError(f"Work file must contain a mapping: {path}")

    if schema_version is not None:
        found = payload.get("schema_version", schema_version)
        if not isinstance(found, int) or found > schema_version:
            raise ConfigError(f"Unsupported schema_version {found!r} in {path} (expected <= {schema_version})")

    return payload


def write_yaml_mapping(path: Path, payload: dict[str, Any]) -> None:
    """Write a mapping as UTF-8 YAML, keeping key order and CJK text readable."""

    path.parent.mkdir(parents=True, exist_ok=True)

    # Readers never see a half-written file, even if the run is interrupted.
    partial = path.with_name(path.name + ".part")
    with partial.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle, sort_keys=False, allow_unicode=True)
    os.replace(partial, path)

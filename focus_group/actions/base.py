from __future__ import annotations

"""
Shared action interface.

Actions implement a small protocol so the CLI can dynamically register arguments
and dispatch execution based on the selected subcommand.
"""

import argparse
import time
from pathlib import Path
from typing import Protocol

from focus_group.config import SessionConfig
from focus_group.work_files import StoredTurns, read_turns


# Shown instead of writing an empty export.
EMPTY_TRANSCRIPT_NOTICE = "目前沒有對話紀錄可供匯出"


class Action(Protocol):
    """
    Interface for a CLI action (subcommand).

    Implementations are expected to:
    - Provide a `name` used as the subcommand.
    - Provide a short `help` string for `--help`.
    - Declare whether they require a valid YAML config.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register action-specific CLI arguments.

        Args:
            parser:
                The subparser dedicated to this action.
        """

    def run(self, args: argparse.Namespace, config: SessionConfig | None) -> None:
        """
        Execute the action.

        Args:
            args:
                Parsed arguments for this subcommand.
            config:
                Loaded configuration, if `requires_config` is True.
        """


def default_output_path(config: SessionConfig, prefix: str, suffix: str) -> Path:
    """Return `<workdir>/<prefix>-<unix ms><suffix>`."""

    return config.workdir / f"{prefix}-{int(time.time() * 1000)}{suffix}"


def load_export_turns(config: SessionConfig) -> StoredTurns | None:
    """
    Load the parsed turns for an export.

    Returns:
        The stored turns, or None (after printing a notice) if there are none.

    Raises:
        ConfigError:
            If no turns file exists yet.
    """

    stored = read_turns(config)
    if not stored.turns:
        print(EMPTY_TRANSCRIPT_NOTICE)
        return None
    return stored

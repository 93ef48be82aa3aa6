# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Spreadsheet export action.

The workbook contains the transcript sheet and the participant roster.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from focus_group.actions.base import default_output_path, load_export_turns
from focus_group.cli_io import may_write
from focus_group.config import SessionConfig
from focus_group.export.ods_export import write_turns_workbook


@dataclass(frozen=True)
class ExportOdsAction:
    """`export-ods` subcommand."""

    name: str = "export-ods"
    help: str = "Export the parsed turns as an ODS spreadsheet"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-o",
            "--output",
            help="Output file (default: <workdir>/chat-<timestamp>.ods)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite an existing output file",
        )

    def run(self, args: argparse.Namespace, config: SessionConfig | None) -> None:
        """
        Execute the spreadsheet export.

        Raises:
            ConfigError:
                If no parsed turns exist or the output exists without `--force`
                in a non-interactive session.
        """

        if config is None:
            raise RuntimeError("ExportOdsAction requires a config, but none was provided")

        stored = load_export_turns(config)
        if stored is None:
            return

        outfile = Path(args.output) if args.output else default_output_path(config, "chat", ".ods")
        if not may_write(outfile, force=bool(args.force)):
            return

        print(f"Building ODS report: {outfile}")
        write_turns_workbook(outfile, stored.turns, config.participants)
        print(f"Wrote ODS report: {outfile}")

# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""CSV export action."""

import argparse
from dataclasses import dataclass
from pathlib import Path

from focus_group.actions.base import default_output_path, load_export_turns
from focus_group.cli_io import may_write
from focus_group.config import SessionConfig
from focus_group.export.csv_export import format_csv


@dataclass(frozen=True)
class ExportCsvAction:
    """
    `export-csv` subcommand.

    Writes the parsed turns as CSV (round, speaker, content).
    """

    name: str = "export-csv"
    help: str = "Export the parsed turns as CSV"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-o",
            "--output",
            help="Output file (default: <workdir>/chat-<timestamp>.csv)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite an existing output file",
        )

    def run(self, args: argparse.Namespace, config: SessionConfig | None) -> None:
        if config is None:
            raise RuntimeError("ExportCsvAction requires a config, but none was provided")

        stored = load_export_turns(config)
        if stored is None:
            return

        outfile = Path(args.output) if args.output else default_output_path(config, "chat", ".csv")
        if not may_write(outfile, force=bool(args.force)):
            return

        outfile.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the row separators exactly as formatted.
        with outfile.open("w", encoding="utf-8", newline="") as handle:
            handle.write(format_csv(stored.turns))

        print(f"Wrote CSV ({len(stored.turns)} turn(s)): {outfile}")

# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Printable transcript action.

Writes the transcript document (settings summary and dialogue) as HTML. With
`--open` a temporary copy is handed to the browser, which opens the print
dialog once avatars have loaded; the copy is removed again after the
configured delay.
"""

import argparse
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from focus_group.actions.base import default_output_path, load_export_turns
from focus_group.cli_io import may_write
from focus_group.config import SessionConfig
from focus_group.export.printing import print_document
from focus_group.export.transcript_html import render_transcript_document


@dataclass(frozen=True)
class ExportPrintAction:
    """
    `export-print` subcommand.

    Renders the print document for PDF output.
    """

    name: str = "export-print"
    help: str = "Render the transcript as a printable HTML document"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `export-print` subcommand.

        Args:
            parser:
                Subparser for this command.
        """

        parser.add_argument(
            "-o",
            "--output",
            help="Output file (default: <workdir>/transcript-<timestamp>.html)",
        )
        parser.add_argument(
            "--screen",
            action="store_true",
            help="Render the screen view instead of the print layout",
        )
        parser.add_argument(
            "--open",
            action="store_true",
            help="Open the document in the browser for printing instead of writing a file",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite an existing output file",
        )

    def run(self, args: argparse.Namespace, config: SessionConfig | None) -> None:
        """
        Execute the document export.

        Raises:
            ConfigError:
                If no parsed turns exist or the output exists without `--force`
                in a non-interactive session.
        """

        if config is None:
            raise RuntimeError("ExportPrintAction requires a config, but none was provided")

        stored = load_export_turns(config)
        if stored is None:
            return

        for_print = not bool(args.screen)
        document = render_transcript_document(
            stored.turns,
            config.participants,
            config.sub_topics,
            config.topic,
            config.rounds,
            datetime.now(),
            for_print=for_print,
            print_delay_ms=config.printing.delay_ms,
            complete=stored.complete,
        )

        if args.open:
            print("Opening transcript for printing ...")
            opened = print_document(document, cleanup_delay=config.printing.cleanup_ms / 1000.0)
            if not opened:
                print("WARNING: No browser could be opened. Use --output to write the document instead.")
            return

        outfile = Path(args.output) if args.output else default_output_path(config, "transcript", ".html")
        if not may_write(outfile, force=bool(args.force)):
            return

        outfile.parent.mkdir(parents=True, exist_ok=True)
        outfile.write_text(document, encoding="utf-8")
        print(f"Wrote transcript document: {outfile}")

# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Transcript reparse action.

Parses a raw dialogue transcript offline, e.g. after editing `raw.txt` by hand
or after changing the participant roster. Parsing is skipped when neither the
raw text nor the roster changed since `turns.yaml` was written.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from focus_group.config import ConfigError, SessionConfig
from focus_group.transcripts.parser import parse_transcript, read_transcript_text
from focus_group.work_files import (
    StoredTurns,
    is_up_to_date,
    raw_path,
    read_turns,
    same_raw_text,
    turns_path,
    write_turns,
)


@dataclass(frozen=True)
class ParseAction:
    """
    `parse` subcommand.

    Rebuilds `turns.yaml` from a raw transcript.
    """

    name: str = "parse"
    help: str = "Parse a raw dialogue transcript into turns"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `parse` subcommand.

        Args:
            parser:
                Subparser for this command.
        """

        parser.add_argument(
            "--input",
            "-i",
            help="Raw transcript file (default: <workdir>/raw.txt)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Parse even if the stored turns are up to date",
        )
        parser.add_argument(
            "--show-skipped",
            action="store_true",
            help="List lines that are not in the [Label]: content format",
        )

    def run(self, args: argparse.Namespace, config: SessionConfig | None) -> None:
        """
        Execute the reparse.

        Raises:
            ConfigError:
                If the transcript file is missing, unreadable or not UTF-8.
        """

        if config is None:
            raise RuntimeError("ParseAction requires a config, but none was provided")

        input_path = Path(args.input) if args.input else raw_path(config)
        if not input_path.exists():
            raise ConfigError(f"Raw transcript not found: {input_path}")

        raw_text = read_transcript_text(input_path)
        stored = self._stored_turns(config)

        if not args.force and stored is not None and is_up_to_date(stored, raw_text, config.participants):
            print(f"Skipping unchanged transcript: {input_path}")
            return

        # The text of an aborted simulation stays incomplete when reparsed.
        complete = stored.complete if stored is not None and same_raw_text(stored, raw_text) else True

        result = parse_transcript(raw_text, config.participants)
        turns_file = write_turns(
            config,
            result,
            raw_text=raw_text,
            raw_file=input_path,
            complete=complete,
        )

        print(
            f"Parsed {len(result.turns)} turn(s) in {result.current_round} round(s); "
            f"skipped {len(result.skipped_lines)} line(s)."
        )
        if args.show_skipped:
            for line in result.skipped_lines:
                print(f"  - {line}")
        print(f"Wrote turns: {turns_file}")

    def _stored_turns(self, config: SessionConfig) -> StoredTurns | None:
        if not turns_path(config).exists():
            return None
        try:
            return read_turns(config)
        except ConfigError:
            return None

# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Discussion simulation action.

This action streams a simulated focus group discussion from the LLM. Every
received chunk is appended to the session buffer and the whole buffer is
reparsed, so the progress output always reflects complete turns.

Results are written to the workdir even when the stream fails, as long as at
least one chunk arrived; turns received before the failure are kept. Existing
work files stay untouched when nothing was received.
"""

import argparse
import asyncio
from dataclasses import dataclass

from focus_group.ai_llm import ai_stream
from focus_group.config import SessionConfig
from focus_group.prompts import build_discussion_messages
from focus_group.session import FocusGroupSession
from focus_group.transcripts.base import ParseResult
from focus_group.work_files import write_raw_text, write_turns


@dataclass
class _ProgressPrinter:
    """Print turns once their line is complete."""

    rounds: int
    printed: int = 0
    round_seen: int = 0

    def __call__(self, result: ParseResult) -> None:
        # The last turn may still grow while its line is streaming in.
        self._print_until(result, len(result.turns) - 1)

    def flush(self, result: ParseResult) -> None:
        self._print_until(result, len(result.turns))

    def _print_until(self, result: ParseResult, end: int) -> None:
        for turn in result.turns[self.printed:end]:
            if turn.round != self.round_seen:
                self.round_seen = turn.round
                print(f"--- Round {turn.round}/{self.rounds} ---")
            print(f"[{turn.participant_code}] {turn.content}")
        self.printed = max(self.printed, end)


@dataclass(frozen=True)
class SimulateAction:
    """
    `simulate` subcommand.

    Generates the discussion and stores `raw.txt` and `turns.yaml`.
    """

    name: str = "simulate"
    help: str = "Simulate the focus group discussion"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `simulate` subcommand.

        Args:
            parser:
                Subparser for this command.
        """

        parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Do not print turns while they arrive",
        )
        parser.add_argument(
            "--temperature",
            type=float,
            default=None,
            help="Sampling temperature passed to the model",
        )

    def run(self, args: argparse.Namespace, config: SessionConfig | None) -> None:
        """
        Execute the simulation.

        Raises:
            ConfigError:
                If the LLM endpoint is not configured. No files are written.
            StreamError:
                If the dialogue stream fails. Partial results are written
                before the error propagates.
        """

        if config is None:
            raise RuntimeError("SimulateAction requires a config, but none was provided")

        chunks = ai_stream(build_discussion_messages(config), temperature=args.temperature)

        printer = None if args.quiet else _ProgressPrinter(rounds=config.rounds)
        session = FocusGroupSession(config.participants, on_update=printer)

        print(f"Simulating focus group: {config.topic} ({config.rounds} round(s), {len(config.participants)} participant(s))")

        try:
            asyncio.run(session.consume(chunks))
        finally:
            if printer is not None:
                printer.flush(session.result)
            if session.started or session.complete:
                self._write_results(config, session)
            else:
                print("No dialogue received; existing work files were left unchanged.")

    def _write_results(self, config: SessionConfig, session: FocusGroupSession) -> None:
        result = session.result

        raw_file = write_raw_text(config, session.raw_text)
        turns_file = write_turns(
            config,
            result,
            raw_text=session.raw_text,
            raw_file=raw_file,
            complete=session.complete,
        )

        status = "complete" if session.complete else "incomplete"
        print(
            f"Parsed {len(result.turns)} turn(s) up to round {result.current_round}/{config.rounds} ({status}); "
            f"skipped {len(result.skipped_lines)} line(s)."
        )
        print(f"Wrote raw transcript: {raw_file}")
        print(f"Wrote turns: {turns_file}")

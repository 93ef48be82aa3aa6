# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Work files of a session.

The workdir holds two files:

- `raw.txt`: the raw dialogue text exactly as received.
- `turns.yaml`: the parsed turns plus the digests of the inputs they were
  parsed from, so unchanged inputs need not be parsed again.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from focus_group.config import ConfigError, Participant, SessionConfig
from focus_group.hash_utils import md5_text, roster_md5
from focus_group.transcripts.base import ParseResult, Turn
from focus_group.yaml_io import read_yaml_mapping, write_yaml_mapping


SCHEMA_VERSION = 1

RAW_FILE_NAME = "raw.txt"
TURNS_FILE_NAME = "turns.yaml"


@dataclass(frozen=True)
class StoredTurns:
    """Contents of `turns.yaml`."""

    turns: list[Turn]
    skipped_lines: list[str]
    complete: bool
    raw_md5: str
    roster_md5: str


def raw_path(config: SessionConfig) -> Path:
    return config.workdir / RAW_FILE_NAME


def turns_path(config: SessionConfig) -> Path:
    return config.workdir / TURNS_FILE_NAME


def write_raw_text(config: SessionConfig, text: str) -> Path:
    """Store the raw dialogue text."""

    path = raw_path(config)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_turns(
    config: SessionConfig,
    result: ParseResult,
    *,
    raw_text: str,
    raw_file: Path,
    complete: bool,
) -> Path:
    """
    Store a parse result in `turns.yaml`.

    Args:
        config:
            Session configuration.
        result:
            Parse result to store.
        raw_text:
            Raw text the result was parsed from (for the digest).
        raw_file:
            Where the raw text lives.
        complete:
            Whether the dialogue stream ended normally.

    Returns:
        Path of the written file.
    """

    try:
        raw_ref = raw_file.resolve().relative_to(config.base_dir).as_posix()
    except ValueError:
        raw_ref = raw_file.resolve().as_posix()

    payload: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "complete": complete,
        "input": {
            "raw_file": raw_ref,
            "raw_md5": md5_text(raw_text),
            "roster_md5": roster_md5(config.participants),
        },
        "current_round": result.current_round,
        "skipped_lines": list(result.skipped_lines),
        "turns": [t.to_record() for t in result.turns],
    }

    path = turns_path(config)
    write_yaml_mapping(path, payload)
    return path


def read_turns(config: SessionConfig) -> StoredTurns:
    """
    Load `turns.yaml`.

    Raises:
        ConfigError:
            If the file does not exist or is malformed.
    """

    path = turns_path(config)
    if not path.exists():
        raise ConfigError(
            f"No parsed turns found. Run the 'simulate' or 'parse' command first: {path}"
        )

    raw = read_yaml_mapping(path, schema_version=SCHEMA_VERSION)
    records = raw.get("turns")
    if not isinstance(records, list):
        raise ConfigError(f"Turns file has no 'turns' list: {path}")

    try:
        turns = [Turn.from_record(r) for r in records]
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid turn record in {path}: {exc}") from exc

    inp = raw.get("input")
    if not isinstance(inp, dict):
        inp = {}

    skipped = raw.get("skipped_lines")
    return StoredTurns(
        turns=turns,
        skipped_lines=[str(s) for s in skipped] if isinstance(skipped, list) else [],
        complete=bool(raw.get("complete")),
        raw_md5=str(inp.get("raw_md5") or ""),
        roster_md5=str(inp.get("roster_md5") or ""),
    )


def same_raw_text(stored: StoredTurns, raw_text: str) -> bool:
    """Return True if stored turns were parsed from this raw text."""

    return stored.raw_md5 == md5_text(raw_text)


def is_up_to_date(stored: StoredTurns, raw_text: str, participants: Sequence[Participant]) -> bool:
    """Return True if stored turns were parsed from this text and roster."""

    return same_raw_text(stored, raw_text) and stored.roster_md5 == roster_md5(participants)

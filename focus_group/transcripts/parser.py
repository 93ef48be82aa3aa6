# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Full transcript reparse.

The whole buffer is parsed on every call. Given the same text, roster and
timestamps the result is identical, and a buffer extended by further complete
lines yields the previous turns as an unchanged prefix.
"""

from datetime import datetime
from pathlib import Path
from typing import Sequence

from focus_group.config import ConfigError, Participant
from focus_group.transcripts.base import ParseResult
from focus_group.transcripts.lines import parse_lines
from focus_group.transcripts.rounds import assign_rounds


def parse_transcript(
    text: str,
    participants: Sequence[Participant],
    *,
    first_seen: Sequence[datetime] | None = None,
    now: datetime | None = None,
) -> ParseResult:
    """
    Turn a raw dialogue buffer into round-numbered turns.

    Args:
        text:
            Complete buffer as received so far.
        participants:
            Participant roster.
        first_seen:
            Timestamps of turns already known from earlier passes.
        now:
            Timestamp for turns seen for the first time.

    Returns:
        The turns and the lines that did not match the grammar.
    """

    pairs, skipped = parse_lines(text)
    turns = assign_rounds(pairs, participants, first_seen=first_seen, now=now)
    return ParseResult(turns=turns, skipped_lines=skipped)


def read_transcript_text(path: Path) -> str:
    """
    Read a raw transcript file with normalized line endings.

    Raises:
        ConfigError:
            If the file cannot be read or is not valid UTF-8.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read transcript file '{path}': {exc}") from exc

    return text.replace("\r\n", "\n")

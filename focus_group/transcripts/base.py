# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript records shared by the parser, the session and the exporters."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


# Reserved speaker label of the discussion moderator. It gets a fixed avatar
# and visual treatment independent of the participant roster.
MODERATOR_CODE = "主持人"

# Participant id assigned to turns whose speaker label matches nobody.
UNKNOWN_PARTICIPANT_ID = "unknown"


@dataclass(frozen=True)
class Turn:
    """
    One parsed utterance.

    Attributes:
        id:
            `msg-<index>`, index in parse order starting at 0.
        participant_id:
            Resolved participant id or `UNKNOWN_PARTICIPANT_ID`.
        participant_code:
            The speaker label exactly as it appeared in the text.
        content:
            Utterance text with annotations removed.
        timestamp:
            Time the turn was first seen.
        round:
            1-based discussion round.
    """

    id: str
    participant_id: str
    participant_code: str
    content: str
    timestamp: datetime
    round: int

    @property
    def is_moderator(self) -> bool:
        return self.participant_code == MODERATOR_CODE

    def to_record(self) -> dict[str, Any]:
        """Return a YAML-friendly mapping."""

        return {
            "id": self.id,
            "participant_id": self.participant_id,
            "participant_code": self.participant_code,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
            "round": self.round,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Turn":
        """Rebuild a turn from `to_record()` output."""

        return cls(
            id=str(record["id"]),
            participant_id=str(record["participant_id"]),
            participant_code=str(record["participant_code"]),
            content=str(record["content"]),
            timestamp=datetime.fromisoformat(str(record["timestamp"])),
            round=int(record["round"]),
        )


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one full reparse of the raw buffer."""

    turns: list[Turn] = field(default_factory=list)
    skipped_lines: list[str] = field(default_factory=list)

    @property
    def current_round(self) -> int:
        """Round of the most recent turn, `0` before the first turn."""

        if not self.turns:
            return 0
        return self.turns[-1].round

# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Turn construction and round numbering.

A round is a block of `max(1, participant_count)` consecutive turns, counted in
order of appearance. The moderator's turns count like everybody else's.
"""

from datetime import datetime, timezone
from typing import Sequence

from focus_group.config import Participant
from focus_group.transcripts.base import Turn
from focus_group.transcripts.participants import participant_id_for


def round_for_index(index: int, participant_count: int) -> int:
    """Return the 1-based round of the turn at `index`."""

    return index // max(1, participant_count) + 1


def assign_rounds(
    pairs: Sequence[tuple[str, str]],
    participants: Sequence[Participant],
    *,
    first_seen: Sequence[datetime] | None = None,
    now: datetime | None = None,
) -> list[Turn]:
    """
    Build the full turn sequence from parsed lines.

    Args:
        pairs:
            `(label, content)` pairs in line order.
        participants:
            Participant roster used for resolution and round size.
        first_seen:
            Optional timestamps by turn index. Turns beyond its length use
            `now`.
        now:
            Fallback timestamp (defaults to the current UTC time).

    Returns:
        Turns with ids `msg-0`, `msg-1`, ... and their rounds.
    """

    fallback = now or datetime.now(timezone.utc)
    known_times = first_seen or ()
    participant_count = len(participants)

    turns: list[Turn] = []
    for index, (label, content) in enumerate(pairs):
        turns.append(
            Turn(
                id=f"msg-{index}",
                participant_id=participant_id_for(label, participants),
                participant_code=label,
                content=content,
                timestamp=known_times[index] if index < len(known_times) else fallback,
                round=round_for_index(index, participant_count),
            )
        )

    return turns

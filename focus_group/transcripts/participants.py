# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Speaker label resolution."""

from typing import Sequence

from focus_group.config import Participant
from focus_group.transcripts.base import UNKNOWN_PARTICIPANT_ID


def resolve_participant(label: str, participants: Sequence[Participant]) -> Participant | None:
    """
    Find the participant a speaker label refers to.

    Names are matched before roles, both exactly (no case folding). Within each
    pass the first participant in roster order wins.
    """

    for participant in participants:
        if participant.name == label:
            return participant

    for participant in participants:
        if participant.role == label:
            return participant

    return None


def participant_id_for(label: str, participants: Sequence[Participant]) -> str:
    """Return the resolved participant id or the unknown sentinel."""

    participant = resolve_participant(label, participants)
    if participant is None:
        return UNKNOWN_PARTICIPANT_ID
    return participant.id

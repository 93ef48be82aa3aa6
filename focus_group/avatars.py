# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Avatar references.

Avatars are DiceBear image URLs derived only from the speaker label and the
resolved participant record, so the same speaker always gets the same image.
Resolving a URL to an image is left to whatever displays the document.
"""

from typing import Sequence
from urllib.parse import quote

from focus_group.config import Participant
from focus_group.transcripts.base import MODERATOR_CODE


DICEBEAR_BASE_URL = "https://api.dicebear.com/9.x"

AVATAR_STYLE = "notionists"

MODERATOR_AVATAR_URL = f"{DICEBEAR_BASE_URL}/bottts-neutral/svg?seed=Host&backgroundColor=facc15"

# Skin tone parameter used for the female variant.
FEMALE_BASE_COLOR = "f9c9b6"

FEMALE_MARKER = "女"

SCREEN_BACKGROUND = "f1f5f9"
PRINT_BACKGROUND = "transparent"


def infer_gender(tags: Sequence[str]) -> str:
    """Return `"female"` if any tag marks the participant as female."""

    if FEMALE_MARKER in ",".join(tags):
        return "female"
    return "male"


def avatar_url(label: str, participant: Participant | None = None, *, for_print: bool = False) -> str:
    """
    Derive the avatar reference for a speaker.

    Args:
        label:
            Speaker label as written in the transcript.
        participant:
            Resolved participant, if any. Its id replaces the label as seed so
            renaming the participant keeps the avatar.
        for_print:
            Use a transparent background (print) instead of an opaque one
            (screen).

    Returns:
        The avatar URL.
    """

    if label == MODERATOR_CODE:
        return MODERATOR_AVATAR_URL

    seed = label
    gender = "male"
    if participant is not None:
        seed = participant.id
        gender = infer_gender(participant.tags)

    url = f"{DICEBEAR_BASE_URL}/{AVATAR_STYLE}/svg?seed={quote(seed + gender, safe='')}"
    if gender == "female":
        url += f"&baseColor={FEMALE_BASE_COLOR}"

    background = PRINT_BACKGROUND if for_print else SCREEN_BACKGROUND
    return url + f"&backgroundColor={background}"

# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Digests for change detection of work files.

MD5 is only used to notice that a raw transcript or the participant roster
changed since `turns.yaml` was written. It is not used for security.
"""

import hashlib
from typing import Sequence

from focus_group.config import Participant


def md5_text(text: str) -> str:
    """Return the lowercase hex MD5 digest of UTF-8 encoded text."""

    # FIPS builds reject MD5 unless it is flagged as non-security use.
    try:
        hasher = hashlib.md5(usedforsecurity=False)  # type: ignore[call-arg]
    except TypeError:
        hasher = hashlib.md5()

    hasher.update(text.encode("utf-8"))
    return hasher.hexdigest()


def roster_md5(participants: Sequence[Participant]) -> str:
    """
    Digest of everything in the roster that affects parsing.

    Resolution uses names and roles, rounds use the roster size, and turns
    carry the participant ids. Tags and prompts do not change parsed turns.
    """

    lines = [f"{p.id}\t{p.name}\t{p.role}" for p in participants]
    return md5_text("\n".join(lines))

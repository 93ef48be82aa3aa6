# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""CSV export of the turn sequence.

The text starts with a byte-order mark so spreadsheet applications detect
UTF-8 and show the Chinese header and content correctly.
"""

from typing import Sequence

from focus_group.transcripts.base import Turn


CSV_BOM = "\ufeff"
CSV_HEADER = "輪次,參與者,內容"


def _quoted(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def format_csv(turns: Sequence[Turn]) -> str:
    """
    Render turns as CSV text.

    Each row holds the round number, the speaker label as written and the
    content. Text fields are double-quoted with embedded quotes doubled.
    """

    rows = [CSV_HEADER]
    for turn in turns:
        rows.append(f"{turn.round},{_quoted(turn.participant_code)},{_quoted(turn.content)}")

    return CSV_BOM + "\n".join(rows)

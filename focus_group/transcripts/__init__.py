"""Transcript parsing.

The generated dialogue arrives as a growing raw text buffer. The parser turns
the complete buffer into an ordered list of turn records:

- `id`: `msg-<index>` in parse order
- `participant_code`: the speaker label as written
- `participant_id`: resolved roster id or `"unknown"`
- `round`: block of turns the size of the roster

Lines that do not follow the `[Label]: content` grammar are not turns; they are
reported as skipped lines.
"""

from focus_group.transcripts.base import MODERATOR_CODE, UNKNOWN_PARTICIPANT_ID, ParseResult, Turn
from focus_group.transcripts.parser import parse_transcript, read_transcript_text
from focus_group.transcripts.stream import StreamAccumulator

__all__ = [
    "MODERATOR_CODE",
    "UNKNOWN_PARTICIPANT_ID",
    "ParseResult",
    "StreamAccumulator",
    "Turn",
    "parse_transcript",
    "read_transcript_text",
]

# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Session controller.

A session owns the raw buffer of one simulated discussion. Every received
chunk is appended and the whole buffer is reparsed before the next chunk is
awaited, so observers always see a complete, consistent turn sequence.

There is no retry and no cancellation: a stream is consumed until it ends or
fails. On failure the turns parsed so far remain available.
"""

from datetime import datetime, timezone
from typing import AsyncIterable, Callable, Sequence

from focus_group.config import Participant
from focus_group.transcripts.base import ParseResult, Turn
from focus_group.transcripts.parser import parse_transcript
from focus_group.transcripts.stream import StreamAccumulator


class StreamError(RuntimeError):
    """Raised when the dialogue stream fails before it is complete."""

    pass


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FocusGroupSession:
    """
    Accumulate a dialogue stream and keep its parsed turns up to date.

    Args:
        participants:
            Roster used to resolve speaker labels and size rounds.
        clock:
            Returns the current time; used to stamp newly seen turns.
        on_update:
            Called with the new ParseResult after every chunk.
    """

    def __init__(
        self,
        participants: Sequence[Participant],
        *,
        clock: Callable[[], datetime] | None = None,
        on_update: Callable[[ParseResult], None] | None = None,
    ) -> None:
        self._participants = list(participants)
        self._clock = clock or _utc_now
        self._on_update = on_update
        self._buffer = StreamAccumulator()
        self._first_seen: list[datetime] = []
        self._result = ParseResult()
        self._started = False
        self._complete = False

    @property
    def raw_text(self) -> str:
        return self._buffer.text

    @property
    def result(self) -> ParseResult:
        return self._result

    @property
    def turns(self) -> list[Turn]:
        return self._result.turns

    @property
    def current_round(self) -> int:
        return self._result.current_round

    @property
    def started(self) -> bool:
        """True once the first chunk has been received."""

        return self._started

    @property
    def complete(self) -> bool:
        return self._complete

    def start(self) -> None:
        """Reset all state for a new session."""

        self._buffer.reset()
        self._first_seen = []
        self._result = ParseResult()
        self._started = False
        self._complete = False

    def feed(self, chunk: str | bytes) -> ParseResult:
        """Append one chunk and reparse the whole buffer."""

        self._append(chunk)
        return self._reparse()

    def _append(self, chunk: str | bytes) -> None:
        self._buffer.append(chunk)
        self._started = True

    def _reparse(self) -> ParseResult:
        result = parse_transcript(
            self._buffer.text,
            self._participants,
            first_seen=self._first_seen,
            now=self._clock(),
        )

        # Remember when each turn index appeared so later passes reuse it.
        for turn in result.turns[len(self._first_seen):]:
            self._first_seen.append(turn.timestamp)

        self._result = result
        if self._on_update is not None:
            self._on_update(result)
        return result

    async def consume(self, chunks: AsyncIterable[str | bytes]) -> ParseResult:
        """
        Consume a whole chunk stream.

        Args:
            chunks:
                Async iterable of text or UTF-8 byte chunks.

        Returns:
            The final ParseResult.

        Raises:
            StreamError:
                If reading or decoding the stream fails. Turns parsed before
                the failure stay available via `result`. Errors raised by
                `on_update` propagate unchanged.
        """

        self.start()

        iterator = chunks.__aiter__()
        while True:
            try:
                chunk = await iterator.__anext__()
                self._append(chunk)
            except StopAsyncIteration:
                break
            except Exception as exc:  # noqa: BLE001
                raise StreamError(f"Dialogue stream failed: {exc}") from exc
            self._reparse()

        try:
            self._buffer.finish()
        except UnicodeDecodeError as exc:
            raise StreamError(f"Dialogue stream failed: {exc}") from exc

        result = self._reparse()
        self._complete = True
        return result

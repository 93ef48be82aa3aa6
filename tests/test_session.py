from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from focus_group.session import FocusGroupSession, StreamError
from focus_group.transcripts import UNKNOWN_PARTICIPANT_ID


class _Clock:
    def __init__(self) -> None:
        self.now = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


async def _chunks(*parts):
    for part in parts:
        yield part


def test_consume_reparses_after_every_chunk(participants):
    updates = []
    session = FocusGroupSession(participants, on_update=lambda r: updates.append(len(r.turns)))

    result = asyncio.run(
        session.consume(_chunks("[主持人]: 歡迎", "大家\n[王小", "明]: 你好\n", "[陌生人]: 嗨\n"))
    )

    assert [t.participant_code for t in result.turns] == ["主持人", "王小明", "陌生人"]
    assert result.turns[0].content == "歡迎大家"
    assert result.turns[0].participant_id == UNKNOWN_PARTICIPANT_ID
    assert result.turns[1].participant_id == "p1"
    assert updates[:4] == [1, 1, 2, 3]
    assert session.complete
    assert session.current_round == 1


def test_consume_accepts_split_utf8_bytes(participants):
    data = "[林雅婷]: 我同意\n".encode("utf-8")
    session = FocusGroupSession(participants)

    asyncio.run(session.consume(_chunks(data[:4], data[4:7], data[7:])))

    assert session.turns[0].participant_id == "p2"
    assert session.turns[0].content == "我同意"


def test_timestamps_are_stable_across_reparses(participants):
    session = FocusGroupSession(participants, clock=_Clock())

    first = session.feed("[王小明]: 第一句")
    second = session.feed("還沒結束\n[林雅婷]: 第二句\n")

    assert second.turns[0].timestamp == first.turns[0].timestamp
    assert second.turns[1].timestamp > second.turns[0].timestamp


def test_stream_failure_keeps_partial_turns(participants):
    async def broken():
        yield "[主持人]: 歡迎\n[王小明]: 大家好\n"
        raise ConnectionError("connection reset")

    session = FocusGroupSession(participants)

    with pytest.raises(StreamError) as info:
        asyncio.run(session.consume(broken()))

    assert isinstance(info.value.__cause__, ConnectionError)
    assert [t.participant_code for t in session.turns] == ["主持人", "王小明"]
    assert not session.complete
    assert "[王小明]: 大家好" in session.raw_text


def test_start_resets_previous_session(participants):
    session = FocusGroupSession(participants)
    session.feed("[王小明]: 舊的\nnoise\n")

    session.start()

    assert session.raw_text == ""
    assert session.turns == []
    assert session.result.skipped_lines == []
    assert session.current_round == 0


def test_observer_errors_are_not_stream_failures(participants):
    def observer(result):
        raise ValueError("observer broke")

    session = FocusGroupSession(participants, on_update=observer)

    with pytest.raises(ValueError):
        asyncio.run(session.consume(_chunks("[主持人]: 歡迎\n")))

    assert session.started


def test_failure_before_first_chunk_leaves_session_unstarted(participants):
    async def refused():
        raise ConnectionError("connection refused")
        yield ""

    session = FocusGroupSession(participants)

    with pytest.raises(StreamError):
        asyncio.run(session.consume(refused()))

    assert not session.started
    assert not session.complete
    assert session.raw_text == ""


def test_invalid_utf8_at_stream_end_is_a_stream_failure(participants):
    session = FocusGroupSession(participants)

    with pytest.raises(StreamError):
        asyncio.run(session.consume(_chunks("[王小明]: 好\n".encode("utf-8") + b"\xe7")))

    assert session.turns[0].content == "好"

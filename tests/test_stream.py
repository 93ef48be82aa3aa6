from __future__ import annotations

import pytest

from focus_group.transcripts.stream import StreamAccumulator


def test_appends_text_chunks():
    buffer = StreamAccumulator()

    buffer.append("[主持人]: 歡")
    assert buffer.append("迎\n") == "[主持人]: 歡迎\n"
    assert buffer.text == "[主持人]: 歡迎\n"


def test_reassembles_multibyte_characters_split_across_chunks():
    data = "[林雅婷]: 我同意\n".encode("utf-8")
    buffer = StreamAccumulator()

    # Split inside the three-byte sequence of the first CJK character.
    buffer.append(data[:2])
    buffer.append(data[2:5])
    buffer.append(data[5:])

    assert buffer.finish() == "[林雅婷]: 我同意\n"


def test_finish_rejects_truncated_sequence():
    buffer = StreamAccumulator()
    buffer.append("好".encode("utf-8")[:2])

    with pytest.raises(UnicodeDecodeError):
        buffer.finish()


def test_reset_empties_buffer():
    buffer = StreamAccumulator()
    buffer.append("舊的內容")
    buffer.append("新".encode("utf-8")[:1])

    buffer.reset()

    assert buffer.text == ""
    assert buffer.finish() == ""

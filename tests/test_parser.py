from __future__ import annotations

from focus_group.config import Participant
from focus_group.transcripts import UNKNOWN_PARTICIPANT_ID, parse_transcript
from focus_group.transcripts.participants import participant_id_for, resolve_participant
from focus_group.transcripts.rounds import round_for_index


def _lines(count: int) -> str:
    speakers = ["王小明", "林雅婷", "陳大同"]
    return "".join(f"[{speakers[i % 3]}]: 第 {i} 句\n" for i in range(count))


def test_round_formula_for_three_participants(participants, fixed_now):
    result = parse_transcript(_lines(9), participants, now=fixed_now)

    assert [t.round for t in result.turns] == [1, 1, 1, 2, 2, 2, 3, 3, 3]
    assert result.current_round == 3


def test_round_formula_without_participants():
    assert [round_for_index(i, 0) for i in range(3)] == [1, 2, 3]


def test_turn_ids_follow_parse_order(participants, fixed_now):
    result = parse_transcript(_lines(4), participants, now=fixed_now)

    assert [t.id for t in result.turns] == ["msg-0", "msg-1", "msg-2", "msg-3"]


def test_reparse_is_idempotent(participants, fixed_now):
    text = "[主持人]: 歡迎\n" + _lines(5)

    first = parse_transcript(text, participants, now=fixed_now)
    second = parse_transcript(text, participants, now=fixed_now)

    assert first == second


def test_extended_buffer_keeps_previous_turns_as_prefix(participants, fixed_now):
    base = _lines(4)
    extended = base + "[主持人]: 進入下一個議題\n[王小明]: 好的\n"

    before = parse_transcript(base, participants, now=fixed_now)
    after = parse_transcript(extended, participants, now=fixed_now)

    assert after.turns[: len(before.turns)] == before.turns
    assert len(after.turns) == len(before.turns) + 2


def test_unknown_speaker_gets_sentinel_id(participants, fixed_now):
    result = parse_transcript("[陌生人]: 你好", participants, now=fixed_now)

    turn = result.turns[0]
    assert turn.participant_id == UNKNOWN_PARTICIPANT_ID
    assert turn.participant_code == "陌生人"
    assert turn.content == "你好"


def test_malformed_line_does_not_shift_rounds(participants, fixed_now):
    clean = parse_transcript(_lines(6), participants, now=fixed_now)
    lines = _lines(6).splitlines(keepends=True)
    noisy_text = "".join(lines[:2]) + "random text without brackets\n" + "".join(lines[2:])

    noisy = parse_transcript(noisy_text, participants, now=fixed_now)

    assert noisy.turns == clean.turns
    assert noisy.skipped_lines == ["random text without brackets"]


def test_first_seen_timestamps_are_reused(participants, fixed_now):
    earlier = fixed_now.replace(hour=8)

    result = parse_transcript(_lines(2), participants, first_seen=[earlier], now=fixed_now)

    assert [t.timestamp for t in result.turns] == [earlier, fixed_now]


def test_resolution_prefers_name_over_role():
    roster = [
        Participant(id="a", name="Alice", role="工程師"),
        Participant(id="b", name="工程師", role="主管"),
    ]

    assert resolve_participant("工程師", roster).id == "b"
    assert participant_id_for("主管", roster) == "b"


def test_resolution_falls_back_to_role(participants):
    assert participant_id_for("上班族", participants) == "p2"


def test_resolution_is_exact(participants):
    assert resolve_participant("王小明 ", participants) is None
    assert resolve_participant("王", participants) is None

from __future__ import annotations

from focus_group.export.ods_export import ROSTER_SHEET, TRANSCRIPT_SHEET, build_turns_workbook, write_turns_workbook
from focus_group.transcripts import parse_transcript


def test_workbook_sheets(participants, fixed_now):
    result = parse_transcript("[主持人]: 歡迎\n[王小明]: 你好\n", participants, now=fixed_now)

    doc = build_turns_workbook(result.turns, participants)

    tables = list(doc.body.tables)
    assert [t.name for t in tables] == [TRANSCRIPT_SHEET, ROSTER_SHEET]
    assert tables[0].height == 3
    assert tables[1].height == 1 + len(participants)


def test_write_workbook(tmp_path, participants, fixed_now):
    result = parse_transcript("[王小明]: 你好\n", participants, now=fixed_now)
    outfile = tmp_path / "out" / "chat.ods"

    write_turns_workbook(outfile, result.turns, participants)

    assert outfile.exists()
    assert outfile.stat().st_size > 0

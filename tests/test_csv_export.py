from __future__ import annotations

from focus_group.export.csv_export import CSV_HEADER, format_csv
from focus_group.transcripts import parse_transcript


def test_csv_has_bom_and_header(participants, fixed_now):
    result = parse_transcript("[主持人]: 歡迎\n", participants, now=fixed_now)

    text = format_csv(result.turns)

    assert text.startswith("\ufeff" + CSV_HEADER + "\n")
    assert CSV_HEADER == "輪次,參與者,內容"


def test_csv_rows_in_order(participants, fixed_now):
    text = "[主持人]: 歡迎\n[王小明]: 你好\n[林雅婷]: 嗨\n[陳大同]: 大家好\n"
    result = parse_transcript(text, participants, now=fixed_now)

    rows = format_csv(result.turns).lstrip("\ufeff").split("\n")

    assert rows[1:] == [
        '1,"主持人","歡迎"',
        '1,"王小明","你好"',
        '1,"林雅婷","嗨"',
        '2,"陳大同","大家好"',
    ]


def test_csv_doubles_embedded_quotes(participants, fixed_now):
    result = parse_transcript('[王小明]: 他說"好"\n', participants, now=fixed_now)

    row = format_csv(result.turns).split("\n")[1]

    assert row == '1,"王小明","他說""好"""'


def test_csv_without_turns_is_header_only():
    assert format_csv([]) == "\ufeff" + CSV_HEADER

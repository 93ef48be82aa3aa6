from __future__ import annotations

from focus_group.transcripts.lines import parse_line, parse_lines, split_lines


def test_split_lines_drops_blank_lines():
    assert split_lines("a\n\n   \nb\n") == ["a", "b"]


def test_parse_line_extracts_label_and_content():
    assert parse_line("[王小明]: 我覺得還不錯") == ("王小明", "我覺得還不錯")


def test_parse_line_trims_label_and_content():
    assert parse_line("[ 王小明 ]:    價格有點高   ") == ("王小明", "價格有點高")


def test_parse_line_discards_annotation():
    assert parse_line("[林雅婷]: (笑) 我同意") == ("林雅婷", "我同意")


def test_parse_line_requires_match_from_start():
    assert parse_line("前言 [王小明]: 你好") is None
    assert parse_line("random text without brackets") is None
    assert parse_line("王小明: 沒有方括號") is None


def test_parse_lines_reports_skipped_lines():
    text = "# 標題\n[主持人]: 歡迎大家\nrandom text without brackets\n[王小明]: 你好\n"

    pairs, skipped = parse_lines(text)

    assert pairs == [("主持人", "歡迎大家"), ("王小明", "你好")]
    assert skipped == ["# 標題", "random text without brackets"]


def test_parse_lines_tolerates_crlf():
    pairs, skipped = parse_lines("[主持人]: 開始\r\n[王小明]: 好\r\n")

    assert pairs == [("主持人", "開始"), ("王小明", "好")]
    assert skipped == []

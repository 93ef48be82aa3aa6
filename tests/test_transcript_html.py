from __future__ import annotations

from datetime import datetime

from focus_group.avatars import MODERATOR_AVATAR_URL
from focus_group.export.transcript_html import (
    FREE_DISCUSSION_PLACEHOLDER,
    NO_TAGS_PLACEHOLDER,
    render_transcript_document,
)
from focus_group.transcripts import parse_transcript


RENDERED_AT = datetime(2026, 10, 19, 14, 5, 9)


def _render(participants, sub_topics, text, **kwargs):
    result = parse_transcript(text, participants)
    return render_transcript_document(
        result.turns,
        participants,
        sub_topics,
        "新產品使用體驗",
        3,
        RENDERED_AT,
        **kwargs,
    )


def test_settings_summary(participants, sub_topics):
    html = _render(participants, sub_topics, "[王小明]: 你好\n")

    assert "@page { size: A4; margin: 1.5cm; }" in html
    assert "新產品使用體驗" in html
    assert "3 輪" in html
    assert "2026/10/19 14:05:09" in html
    assert '<span class="role-badge">工程師</span>王小明' in html
    assert "(男, 35歲, 技術)" in html
    assert f"({NO_TAGS_PLACEHOLDER})" in html
    assert html.index("第一印象") < html.index("價格看法")
    assert FREE_DISCUSSION_PLACEHOLDER not in html


def test_free_discussion_placeholder_without_sub_topics(participants):
    html = _render(participants, [], "[王小明]: 你好\n")

    assert f"<li>{FREE_DISCUSSION_PLACEHOLDER}</li>" in html


def test_transcript_follows_settings(participants, sub_topics):
    html = _render(participants, sub_topics, "[主持人]: 歡迎\n[林雅婷]: 謝謝\n")

    assert html.index("會議設定摘要") < html.index("對話逐字稿")
    assert html.index("歡迎") < html.index("謝謝")


def test_moderator_turn_gets_host_treatment(participants, sub_topics):
    html = _render(participants, sub_topics, "[主持人]: 歡迎\n[林雅婷]: 謝謝\n")

    assert html.count('<div class="message-block host">') == 1
    assert html.count('<div class="message-block">') == 1
    assert MODERATOR_AVATAR_URL.replace("&", "&amp;") in html


def test_print_mode_uses_transparent_avatars_and_print_script(participants, sub_topics):
    html = _render(participants, sub_topics, "[林雅婷]: 謝謝\n", print_delay_ms=1200)

    assert "seed=p2female&amp;baseColor=f9c9b6&amp;backgroundColor=transparent" in html
    assert "window.print()" in html
    assert "1200" in html
    assert "進度" not in html


def test_screen_mode(participants, sub_topics):
    html = _render(participants, sub_topics, "[主持人]: 歡迎\n[林雅婷]: 謝謝\n", for_print=False, complete=True)

    assert "backgroundColor=f1f5f9" in html
    assert "window.print()" not in html
    assert '<span class="roster-number">2</span>' in html
    assert "進度：第 1 / 3 輪" in html
    assert "(已完成)" in html


def test_content_is_escaped(participants, sub_topics):
    html = _render(participants, sub_topics, "[王小明]: <b>粗體</b> & 更多\n")

    assert "&lt;b&gt;粗體&lt;/b&gt; &amp; 更多" in html
    assert "<b>粗體</b>" not in html

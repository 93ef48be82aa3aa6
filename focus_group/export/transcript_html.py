# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Printable transcript document.

The document is a single self-contained HTML page with inline styles:

        - A settings summary (topic, target rounds, render time, participant
            roster and sub-topics).
        - The transcript, one block per turn with avatar, speaker label, round
            badge and content. Moderator turns are centered with an amber accent.

Print mode fixes the page size (A4) and margins and opens the print dialog
shortly after the page has loaded, so that avatar images are not missing from
the printout. Screen mode renders the same transcript for viewing, with
opaque avatar backgrounds, roster numbers, turn times and a progress line.
"""

from datetime import datetime
from html import escape
from typing import Sequence

from focus_group.avatars import avatar_url
from focus_group.config import Participant, SubTopic
from focus_group.transcripts.base import Turn
from focus_group.transcripts.participants import resolve_participant


DOCUMENT_TITLE = "焦點座談模擬報告"
FREE_DISCUSSION_PLACEHOLDER = "自由討論 (無特定子議題)"
NO_TAGS_PLACEHOLDER = "無標籤"


_STYLE = """
@page { size: A4; margin: 1.5cm; }
body {
  font-family: "Microsoft JhengHei", "Heiti TC", sans-serif;
  color: #333;
  max-width: 800px;
  margin: 0 auto;
  -webkit-print-color-adjust: exact;
  print-color-adjust: exact;
}
.settings-box {
  background-color: #f8fafc;
  border: 1px solid #e2e8f0;
  border-radius: 8px;
  padding: 20px;
  margin-bottom: 30px;
  font-size: 13px;
}
.settings-box h2 { margin-top: 0; border-bottom: 2px solid #333; padding-bottom: 8px; }
.grid-info { display: grid; grid-template-columns: 1fr 1fr; gap: 10px; margin-bottom: 15px; }
.section-title { font-weight: bold; margin-top: 10px; color: #475569; border-bottom: 1px dashed #cbd5e1; padding-bottom: 4px; margin-bottom: 6px; }
.tag-list, .subtopic-list { margin: 5px 0; padding-left: 20px; }
.role-badge { background: #e2e8f0; padding: 2px 6px; border-radius: 4px; font-size: 11px; font-weight: bold; margin-right: 5px; }
.tags { color: #64748b; font-size: 12px; }
.progress { color: #64748b; font-size: 13px; margin-bottom: 10px; }
.progress .done { color: #16a34a; font-weight: bold; margin-left: 6px; }
.transcript-title { text-align: center; margin-bottom: 20px; font-size: 18px; font-weight: bold; }
.message-block { margin-bottom: 20px; page-break-inside: avoid; display: flex; gap: 15px; justify-content: flex-start; }
.message-block.host { justify-content: center; text-align: center; }
.avatar-box { width: 50px; display: flex; flex-direction: column; align-items: center; flex-shrink: 0; }
.avatar-img { width: 45px; height: 45px; border-radius: 50%; border: 2px solid #e2e8f0; background-color: #fff; object-fit: cover; }
.host .avatar-img { border-color: #facc15; }
.roster-number { font-size: 10px; color: #94a3b8; margin-top: 4px; }
.content-box { flex: 1; max-width: 75%; }
.speaker-header { font-size: 14px; font-weight: bold; margin-bottom: 4px; color: #1e293b; display: flex; align-items: center; gap: 8px; }
.host .speaker-header { justify-content: center; }
.round-badge { background: #f1f5f9; color: #64748b; font-size: 10px; padding: 1px 6px; border-radius: 10px; font-weight: normal; }
.turn-time { color: #94a3b8; font-size: 11px; font-weight: normal; }
.text-content {
  text-align: justify;
  white-space: pre-wrap;
  font-size: 14px;
  line-height: 1.6;
  padding: 10px 15px;
  background-color: #fff;
  border: 1px solid #e2e8f0;
  border-radius: 0 12px 12px 12px;
}
.host .text-content { text-align: center; background-color: #fffbeb; border-color: #fde68a; border-radius: 12px; }
"""


def format_render_time(value: datetime) -> str:
    """Format the render timestamp like `2026/10/19 14:05:09`."""

    return value.strftime("%Y/%m/%d %H:%M:%S")


def _render_settings(
    participants: Sequence[Participant],
    sub_topics: Sequence[SubTopic],
    topic: str,
    rounds: int,
    rendered_at: datetime,
) -> str:
    roster_items = []
    for participant in participants:
        tags = ", ".join(participant.tags) or NO_TAGS_PLACEHOLDER
        roster_items.append(
            f'<li><span class="role-badge">{escape(participant.role)}</span>'
            f'{escape(participant.name)} <span class="tags">({escape(tags)})</span></li>'
        )

    if sub_topics:
        agenda_items = [f"<li>{escape(sub.content)}</li>" for sub in sub_topics]
    else:
        agenda_items = [f"<li>{FREE_DISCUSSION_PLACEHOLDER}</li>"]

    return "\n".join(
        [
            '<div class="settings-box">',
            "<h2>會議設定摘要</h2>",
            '<div class="grid-info">',
            f'<div class="info-item"><strong>討論主題：</strong>{escape(topic)}</div>',
            f'<div class="info-item"><strong>預計輪數：</strong>{rounds} 輪</div>',
            f'<div class="info-item"><strong>列印時間：</strong>{format_render_time(rendered_at)}</div>',
            "</div>",
            '<div class="section-title">參與者名單</div>',
            '<ul class="tag-list">',
            *roster_items,
            "</ul>",
            '<div class="section-title">待討論子議題</div>',
            '<ol class="subtopic-list">',
            *agenda_items,
            "</ol>",
            "</div>",
        ]
    )


def _render_turn(turn: Turn, participants: Sequence[Participant], *, for_print: bool) -> str:
    participant = resolve_participant(turn.participant_code, participants)
    url = avatar_url(turn.participant_code, participant, for_print=for_print)
    label = escape(turn.participant_code)

    block_class = "message-block host" if turn.is_moderator else "message-block"

    avatar_parts = [f'<img src="{escape(url)}" alt="{label}" class="avatar-img" />']
    header_parts = [label, f'<span class="round-badge">第 {turn.round} 輪</span>']

    if not for_print:
        if participant is not None and not turn.is_moderator:
            number = list(participants).index(participant) + 1
            avatar_parts.append(f'<span class="roster-number">{number}</span>')
        header_parts.append(f'<span class="turn-time">{turn.timestamp.astimezone().strftime("%H:%M")}</span>')

    return "\n".join(
        [
            f'<div class="{block_class}">',
            '<div class="avatar-box">',
            *avatar_parts,
            "</div>",
            '<div class="content-box">',
            '<div class="speaker-header">' + " ".join(header_parts) + "</div>",
            f'<div class="text-content">{escape(turn.content)}</div>',
            "</div>",
            "</div>",
        ]
    )


def _print_script(delay_ms: int) -> str:
    # Give avatar images time to load before the dialog freezes the page.
    return (
        "<script>"
        "window.addEventListener('load', function () {"
        f" setTimeout(function () {{ window.focus(); window.print(); }}, {int(delay_ms)});"
        " });"
        "</script>"
    )


def render_transcript_document(
    turns: Sequence[Turn],
    participants: Sequence[Participant],
    sub_topics: Sequence[SubTopic],
    topic: str,
    rounds: int,
    rendered_at: datetime,
    *,
    for_print: bool = True,
    print_delay_ms: int = 800,
    complete: bool = False,
) -> str:
    """
    Render turns and session settings as one HTML document.

    Args:
        turns:
            Parsed turn sequence in order.
        participants:
            Participant roster (settings summary and avatar lookup).
        sub_topics:
            Agenda items; an empty list renders the free discussion placeholder.
        topic:
            Discussion topic.
        rounds:
            Target number of rounds.
        rendered_at:
            Timestamp shown as print time.
        for_print:
            Print mode (transparent avatars, automatic print dialog) or screen
            mode (opaque avatars, roster numbers, turn times, progress line).
        print_delay_ms:
            Delay between page load and the print dialog.
        complete:
            Screen mode only: mark the discussion as finished.

    Returns:
        The HTML document.
    """

    body: list[str] = [
        f"<h1>{DOCUMENT_TITLE}</h1>",
        _render_settings(participants, sub_topics, topic, rounds, rendered_at),
    ]

    if not for_print:
        current_round = turns[-1].round if turns else 0
        done = '<span class="done">(已完成)</span>' if complete else ""
        body.append(f'<div class="progress">進度：第 {current_round} / {rounds} 輪{done}</div>')

    body.append('<div class="transcript-title">--- 對話逐字稿 ---</div>')
    body.append('<div class="transcript">')
    body.extend(_render_turn(turn, participants, for_print=for_print) for turn in turns)
    body.append("</div>")

    head = [
        '<meta charset="utf-8" />',
        f"<title>焦點座談逐字稿 - {escape(topic)}</title>",
        f"<style>{_STYLE}</style>",
    ]
    if for_print:
        head.append(_print_script(print_delay_ms))

    return "\n".join(
        [
            "<!DOCTYPE html>",
            '<html lang="zh-Hant">',
            "<head>",
            *head,
            "</head>",
            "<body>",
            *body,
            "</body>",
            "</html>",
            "",
        ]
    )

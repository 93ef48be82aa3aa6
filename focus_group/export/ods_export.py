# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Spreadsheet export.

Writes the parsed transcript as an `.ods` workbook:

        - `逐字稿`: one row per turn (round, speaker, content, time).
        - `參與者`: the participant roster.
"""

import re
from pathlib import Path
from typing import Any, Sequence, cast

from odfdo import Document
from odfdo.cell import Cell
from odfdo.column import Column
from odfdo.row import Row
from odfdo.style import Style
from odfdo.table import Table

from focus_group.config import Participant
from focus_group.hash_utils import md5_text
from focus_group.transcripts.base import Turn


TRANSCRIPT_SHEET = "逐字稿"
ROSTER_SHEET = "參與者"


_XML_ILLEGAL_CHARS_RE = re.compile(
    # XML 1.0 disallows most C0 control chars except TAB, LF, CR.
    r"[\x00-\x08\x0B\x0C\x0E-\x1F]"
    r"|[\uD800-\uDFFF]"
    r"|[\uFFFE\uFFFF]"
)


def _xml_safe_text(value: Any) -> str:
    """Return a string that odfdo/lxml accepts as cell text."""

    if value is None:
        return ""
    return _XML_ILLEGAL_CHARS_RE.sub("", str(value))


def _style_name(prefix: str, scope: str, suffix: str = "") -> str:
    # Sheet names are Chinese; keep style names ASCII and deterministic.
    parts = [prefix, md5_text(scope)[:8]]
    if suffix:
        parts.append(suffix)
    return "_".join(parts)


def _insert_style(doc: Document, style: Style) -> Style | None:
    try:
        doc.insert_style(style, automatic=True)
        return style
    except Exception:
        return None


def _append_sheet(doc: Document, name: str, headers: list[str], rows: list[list[Any]]) -> None:
    """Append one sheet with a bold header row and content-based column widths."""

    table = Table(name)

    header_style = _insert_style(
        doc,
        cast(Style, Style("table-cell", name=_style_name("hdr", name), area="text", bold=True)),
    )

    widths = [len(h) for h in headers]
    for row_values in rows:
        for c_idx, value in enumerate(row_values):
            widths[c_idx] = max(widths[c_idx], len(_xml_safe_text(value)))

    for c_idx, chars in enumerate(widths, start=1):
        # 0.35 cm per character (CJK glyphs are wide), clamp to [2cm, 20cm]
        width_cm = max(2.0, min(chars * 0.35, 20.0))
        col_style = _insert_style(
            doc,
            cast(
                Style,
                Style(
                    "table-column",
                    name=_style_name("col", name, str(c_idx)),
                    area="table-column",
                    width=f"{width_cm:.2f}cm",
                ),
            ),
        )
        if col_style is not None:
            table.append(Column(style=col_style.name))

    header = Row()
    for title in headers:
        cell = Cell(text=title)
        if header_style is not None:
            cell.style = header_style.name
        header.append_cell(cell)
    table.append_row(header)

    for row_values in rows:
        row = Row()
        for value in row_values:
            if isinstance(value, int):
                row.append_cell(Cell(value=value))
            else:
                row.append_cell(Cell(text=_xml_safe_text(value)))
        table.append_row(row)

    doc.body.append(table)


def build_turns_workbook(turns: Sequence[Turn], participants: Sequence[Participant]) -> Document:
    """
    Build the workbook in memory.

    Args:
        turns:
            Parsed turns in order.
        participants:
            Participant roster.

    Returns:
        The odfdo spreadsheet document.
    """

    doc = Document("spreadsheet")

    # odfdo creates a default empty sheet; only our sheets should remain.
    for table in list(doc.body.tables):
        doc.body.delete(table)

    _append_sheet(
        doc,
        TRANSCRIPT_SHEET,
        ["輪次", "參與者", "內容", "時間"],
        [
            [t.round, t.participant_code, t.content, t.timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")]
            for t in turns
        ],
    )
    _append_sheet(
        doc,
        ROSTER_SHEET,
        ["編號", "姓名", "角色", "標籤"],
        [[p.id, p.name, p.role, ", ".join(p.tags)] for p in participants],
    )

    return doc


def write_turns_workbook(path: Path, turns: Sequence[Turn], participants: Sequence[Participant]) -> None:
    """Build the workbook and save it to `path`."""

    doc = build_turns_workbook(turns, participants)
    path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(path)

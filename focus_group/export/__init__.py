"""Exporters for parsed transcripts (CSV, printable HTML, ODS)."""

from focus_group.export.csv_export import format_csv
from focus_group.export.ods_export import build_turns_workbook, write_turns_workbook
from focus_group.export.printing import print_document, print_surface
from focus_group.export.transcript_html import render_transcript_document

__all__ = [
    "build_turns_workbook",
    "format_csv",
    "print_document",
    "print_surface",
    "render_transcript_document",
    "write_turns_workbook",
]

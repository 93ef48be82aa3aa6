"""
Focus group simulator package.

This package contains a small CLI tool that:
- streams a simulated focus group discussion from an LLM,
- reconstructs round-numbered speaker turns from the growing raw text,
- exports the turns as CSV, ODS spreadsheet or a printable HTML document.
"""

from __future__ import annotations

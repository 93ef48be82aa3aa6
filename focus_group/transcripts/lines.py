# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Line grammar of the generated dialogue.

Every utterance is one line:

    [Label]: (optional annotation) content

The annotation (stage directions like `(點頭)`) is discarded. Lines that do not
match from the start are not turns; they are returned separately so callers can
report them.
"""

import re


_TURN_RE = re.compile(r"^\[(?P<label>[^\]]+)\]:\s*(?:\([^)]+\)\s*)?(?P<content>.+)$")


def split_lines(text: str) -> list[str]:
    """Split a buffer into lines and drop whitespace-only ones."""

    return [line for line in text.split("\n") if line.strip()]


def parse_line(line: str) -> tuple[str, str] | None:
    """
    Extract `(label, content)` from a single line.

    Args:
        line:
            One line without its newline.

    Returns:
        Trimmed label and content, or None if the line is not a turn.
    """

    match = _TURN_RE.match(line)
    if not match:
        return None

    return match.group("label").strip(), match.group("content").strip()


def parse_lines(text: str) -> tuple[list[tuple[str, str]], list[str]]:
    """
    Parse every line of a buffer.

    Returns:
        A tuple of the `(label, content)` pairs in line order and the lines
        that did not match the grammar.
    """

    pairs: list[tuple[str, str]] = []
    skipped: list[str] = []

    for line in split_lines(text):
        parsed = parse_line(line)
        if parsed is None:
            skipped.append(line.strip())
            continue
        pairs.append(parsed)

    return pairs, skipped

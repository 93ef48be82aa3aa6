# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Small CLI interaction helpers.

Export actions never silently replace an existing file:
- In interactive terminals, the user is asked for confirmation.
- In non-interactive contexts (CI, pipes), an explicit `--force` is required.
"""

import sys
from pathlib import Path

from focus_group.config import ConfigError


def is_interactive_tty() -> bool:
    """
    Determine whether we can safely prompt the user.

    Returns:
        True if both stdin and stdout are connected to a TTY.
    """

    try:
        return sys.stdin.isatty() and sys.stdout.isatty()
    except Exception:  # noqa: BLE001
        return False


def prompt_yes_no(question: str, *, default_no: bool = True) -> bool:
    """
    Ask the user a yes/no question.

    Raises:
        RuntimeError:
            If the prompt cannot be shown in a non-interactive session.
    """

    if not is_interactive_tty():
        raise RuntimeError("Cannot prompt in non-interactive mode")

    suffix = "[y/N]" if default_no else "[Y/n]"
    while True:
        answer = input(f"{question} {suffix} ").strip().lower()
        if not answer:
            return not default_no
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no"}:
            return False


def may_write(path: Path, *, force: bool) -> bool:
    """
    Decide whether an output file may be (over)written.

    Args:
        path:
            Output path.
        force:
            Overwrite without asking.

    Returns:
        True if writing may proceed, False if the user declined.

    Raises:
        ConfigError:
            If the file exists, `force` is not set and no prompt is possible.
    """

    if not path.exists() or force:
        return True

    if not is_interactive_tty():
        raise ConfigError(
            f"Output file already exists: {path}. Refusing to overwrite in non-interactive mode. "
            "Use --force to overwrite."
        )

    if prompt_yes_no(f"Output file already exists: {path}. Overwrite?", default_no=True):
        return True

    print(f"Keeping existing file: {path}")
    return False

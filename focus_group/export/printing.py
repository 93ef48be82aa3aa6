# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Print surface.

Printing hands a temporary copy of the document to the system browser, which
opens the print dialog itself once the page (and its avatar images) has
loaded. The temporary file must outlive the browser's initial load, so it is
removed only after a bounded wait, and it is removed on every exit path.
"""

import tempfile
import time
import webbrowser
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator


@contextmanager
def print_surface(document: str, *, directory: Path | None = None) -> Iterator[Path]:
    """
    Write a document to a temporary HTML file for the duration of the block.

    Args:
        document:
            HTML document.
        directory:
            Optional directory for the temporary file.

    Yields:
        Path of the temporary file. The file is deleted when the block exits.
    """

    handle = tempfile.NamedTemporaryFile(
        "w",
        suffix=".html",
        prefix="focus-group-",
        encoding="utf-8",
        delete=False,
        dir=directory,
    )
    path = Path(handle.name)
    try:
        with handle:
            handle.write(document)
        yield path
    finally:
        path.unlink(missing_ok=True)


def print_document(
    document: str,
    *,
    cleanup_delay: float = 5.0,
    opener: Callable[[str], bool] | None = None,
    sleep: Callable[[float], None] = time.sleep,
    directory: Path | None = None,
) -> bool:
    """
    Open a document for printing and clean up afterwards.

    Args:
        document:
            HTML document, normally rendered in print mode so that it triggers
            the print dialog on load.
        cleanup_delay:
            Seconds to keep the temporary file after handing it over.
        opener:
            Opens a URI (defaults to `webbrowser.open`).
        sleep:
            Wait function.
        directory:
            Optional directory for the temporary file.

    Returns:
        True if the opener reported success.
    """

    open_uri = opener or webbrowser.open

    with print_surface(document, directory=directory) as path:
        try:
            return bool(open_uri(path.as_uri()))
        finally:
            sleep(cleanup_delay)

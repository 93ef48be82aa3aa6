# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Append-only buffer for the raw dialogue stream.

Chunks arrive with arbitrary boundaries. Byte chunks are decoded with an
incremental UTF-8 decoder that keeps incomplete multi-byte sequences until the
next chunk completes them. The decoder is only finalized by `finish()`.
"""

import codecs


class StreamAccumulator:
    """Accumulate text chunks of one session into a single buffer."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding
        self._decoder = codecs.getincrementaldecoder(encoding)()
        self._text = ""

    @property
    def text(self) -> str:
        """The buffer as decoded so far."""

        return self._text

    def append(self, chunk: str | bytes) -> str:
        """
        Append one chunk to the buffer.

        Args:
            chunk:
                Text, or raw bytes in the accumulator's encoding.

        Returns:
            The updated buffer.
        """

        if isinstance(chunk, (bytes, bytearray)):
            self._text += self._decoder.decode(bytes(chunk), final=False)
        else:
            self._text += chunk

        return self._text

    def finish(self) -> str:
        """
        Flush the decoder at the end of the stream.

        Raises:
            UnicodeDecodeError:
                If the stream ended in the middle of a multi-byte sequence.
        """

        self._text += self._decoder.decode(b"", final=True)
        return self._text

    def reset(self) -> None:
        """Empty the buffer for a new session."""

        self._decoder = codecs.getincrementaldecoder(self._encoding)()
        self._text = ""

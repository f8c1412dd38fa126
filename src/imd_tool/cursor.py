"""Forward-only byte reader used by every stage of the decoder."""

from __future__ import annotations

from typing import BinaryIO

from .errors import StreamError


class ByteCursor:
    """Wrap a readable binary stream and keep track of the read offset.

    Reads never seek; short reads from the underlying stream are retried
    until the requested length arrives or the stream reports end of data.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self.offset = 0

    def _read_up_to(self, count: int, what: str) -> bytes:
        chunks: list[bytes] = []
        remaining = count
        while remaining > 0:
            try:
                chunk = self._stream.read(remaining)
            except OSError as exc:
                got = count - remaining
                raise StreamError(what, self.offset + got, count, got) from exc
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        data = b"".join(chunks)
        self.offset += len(data)
        return data

    def read_exact(self, count: int, what: str) -> bytes:
        start = self.offset
        data = self._read_up_to(count, what)
        if len(data) != count:
            raise StreamError(what, start, count, len(data))
        return data

    def read_byte(self, what: str) -> int:
        return self.read_exact(1, what)[0]

    def try_read_byte(self, what: str) -> int | None:
        """Return the next byte, or ``None`` if the stream is exhausted."""
        data = self._read_up_to(1, what)
        if not data:
            return None
        return data[0]


__all__ = ["ByteCursor"]

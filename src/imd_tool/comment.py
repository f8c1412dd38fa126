"""Reader for the free-form comment that follows the IMD header."""

from __future__ import annotations

import logging

from .cursor import ByteCursor
from .errors import CommentError

logger = logging.getLogger(__name__)

COMMENT_TERMINATOR = 0x1A


def read_comment(cursor: ByteCursor, max_length: int | None = None) -> str:
    """
    Read comment bytes up to (and consuming) the 0x1A terminator.

    The terminator is not part of the returned text. Running out of input
    first, or collecting more than ``max_length`` bytes, raises
    :class:`CommentError` with the text gathered so far.
    """
    buf = bytearray()
    while True:
        value = cursor.try_read_byte("comment")
        if value is None:
            raise CommentError(
                "incomplete comment: stream ended before 0x1A terminator",
                text=buf.decode("latin-1"),
            )
        if value == COMMENT_TERMINATOR:
            break
        if max_length is not None and len(buf) >= max_length:
            raise CommentError(
                f"comment exceeds {max_length} bytes without a 0x1A terminator",
                text=buf.decode("latin-1"),
            )
        buf.append(value)

    logger.debug("comment: %d bytes", len(buf))
    return buf.decode("latin-1")


__all__ = ["COMMENT_TERMINATOR", "read_comment"]

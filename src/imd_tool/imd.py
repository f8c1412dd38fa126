"""
ImageDisk (.IMD) image decoding.

An image is a 29 byte signature line, a comment terminated by 0x1A, and then
track records until the end of the file. :func:`decode` walks the stream once
and returns an :class:`ImdFile`; on failure the raised
:class:`~imd_tool.errors.ImdError` carries the partially decoded image in its
``partial`` attribute.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Tuple

from .comment import read_comment
from .cursor import ByteCursor
from .errors import CommentError, ImdError
from .header import Header, read_header
from .options import DEFAULT_OPTIONS, DecodeOptions
from .track import Track, read_track

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImdFile:
    header: Header
    comment: str
    tracks: Tuple[Track, ...] = ()

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    @property
    def cylinders(self) -> Tuple[int, ...]:
        return tuple(sorted({t.cylinder for t in self.tracks}))

    @property
    def heads(self) -> Tuple[int, ...]:
        return tuple(sorted({t.head_number for t in self.tracks}))

    def find_track(self, cylinder: int, head: int) -> Optional[Track]:
        for track in self.tracks:
            if track.cylinder == cylinder and track.head_number == head:
                return track
        return None

    @classmethod
    def decode(
        cls, stream: BinaryIO, options: Optional[DecodeOptions] = None
    ) -> "ImdFile":
        return decode(stream, options)

    @classmethod
    def from_bytes(
        cls, data: bytes, options: Optional[DecodeOptions] = None
    ) -> "ImdFile":
        return decode(io.BytesIO(data), options)

    @classmethod
    def from_file(
        cls, path: Path | str, options: Optional[DecodeOptions] = None
    ) -> "ImdFile":
        with Path(path).open("rb") as fh:
            return decode(fh, options)


def decode(stream: BinaryIO, options: Optional[DecodeOptions] = None) -> ImdFile:
    options = options or DEFAULT_OPTIONS
    cursor = ByteCursor(stream)

    header = read_header(cursor)

    comment = ""
    tracks: list[Track] = []
    try:
        comment = read_comment(cursor, options.max_comment_length)
        while True:
            track = read_track(cursor, index=len(tracks), options=options)
            if track is None:
                break
            tracks.append(track)
    except ImdError as exc:
        if isinstance(exc, CommentError):
            comment = exc.text
        exc.partial = ImdFile(header=header, comment=comment, tracks=tuple(tracks))
        raise

    logger.debug("end of image after %d tracks at offset %d", len(tracks), cursor.offset)
    return ImdFile(header=header, comment=comment, tracks=tuple(tracks))


__all__ = ["ImdFile", "decode"]

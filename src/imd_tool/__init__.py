"""
Top-level package for ImageDisk (.IMD) floppy image decoding.

The decoder turns an IMD byte stream into immutable :class:`ImdFile`,
:class:`Track` and :class:`Sector` values so tools can inspect track
geometry and sector contents without re-parsing the file.
"""

from .comment import COMMENT_TERMINATOR, read_comment
from .cursor import ByteCursor
from .errors import (
    CommentError,
    HeaderError,
    HeaderErrorReason,
    ImdError,
    InvalidSectorSizeError,
    StreamError,
    UnrecognizedDiscriminantError,
)
from .header import HEADER_LENGTH, Header, parse_header, read_header, validate_header
from .imd import ImdFile, decode
from .options import DecodeOptions, SectorSizeEncoding
from .sector import Sector, SectorRecordType, SectorStatus, read_sector
from .track import MODE_NAMES, Track, read_track

__all__ = [
    "__version__",
    "ImdFile",
    "decode",
    "Header",
    "HEADER_LENGTH",
    "parse_header",
    "read_header",
    "validate_header",
    "COMMENT_TERMINATOR",
    "read_comment",
    "Track",
    "MODE_NAMES",
    "read_track",
    "Sector",
    "SectorRecordType",
    "SectorStatus",
    "read_sector",
    "ByteCursor",
    "DecodeOptions",
    "SectorSizeEncoding",
    "ImdError",
    "HeaderError",
    "HeaderErrorReason",
    "CommentError",
    "StreamError",
    "UnrecognizedDiscriminantError",
    "InvalidSectorSizeError",
]

__version__ = "0.0.1"

"""Exceptions raised while decoding ImageDisk images."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .imd import ImdFile


class ImdError(ValueError):
    """Base exception for every decode failure.

    ``partial`` is filled in by :func:`imd_tool.imd.decode` with whatever
    was assembled before the failure, or left as ``None`` when not even the
    header was accepted.
    """

    def __init__(self, message: str):
        self.message = message
        self.partial: ImdFile | None = None
        super().__init__(message)


class HeaderErrorReason(Enum):
    BAD_SIGNATURE = "does not start with 'IMD '"
    MISSING_SEPARATOR = "missing ': ' separator"
    BAD_VERSION_FORMAT = "invalid version format"
    BAD_MAJOR_VERSION = "invalid major version number"
    BAD_MINOR_VERSION = "invalid minor version number"
    BAD_DATETIME_LENGTH = "invalid datetime length"
    BAD_DATE_FORMAT = "invalid date format"
    BAD_DATE_VALUES = "invalid date values"
    BAD_TIME_FORMAT = "invalid time format"
    BAD_TIME_VALUES = "invalid time values"


class HeaderError(ImdError):
    def __init__(self, reason: HeaderErrorReason, text: str | None = None):
        self.reason = reason
        self.text = text
        message = f"bad IMD header: {reason.value}"
        if text is not None:
            message = f"{message} [{text!r}]"
        super().__init__(message)


class CommentError(ImdError):
    """The comment block ended badly; ``text`` holds what was read."""

    def __init__(self, message: str, text: str = ""):
        self.text = text
        super().__init__(message)


class StreamError(ImdError):
    """The stream ran dry (or failed) in the middle of a structure."""

    def __init__(self, what: str, offset: int, expected: int, received: int):
        self.what = what
        self.offset = offset
        self.expected = expected
        self.received = received
        super().__init__(
            f"unexpected end of stream reading {what} at offset {offset} "
            f"[Expected: {expected}, Actual: {received}]"
        )


class UnrecognizedDiscriminantError(ImdError):
    def __init__(self, value: int, track_index: int, slot: int, offset: int):
        self.value = value
        self.track_index = track_index
        self.slot = slot
        self.offset = offset
        super().__init__(
            f"unrecognized sector record type 0x{value:02X} in track "
            f"{track_index}, slot {slot} (offset {offset})"
        )


class InvalidSectorSizeError(ImdError):
    def __init__(self, code: int, track_index: int):
        self.code = code
        self.track_index = track_index
        super().__init__(
            f"unknown sector size code {code} in track {track_index}"
        )


__all__ = [
    "ImdError",
    "HeaderError",
    "HeaderErrorReason",
    "CommentError",
    "StreamError",
    "UnrecognizedDiscriminantError",
    "InvalidSectorSizeError",
]

"""
ImageDisk signature line parsing.

An IMD image opens with a fixed 29 byte ASCII line of the form
``IMD v.vv: dd/mm/yyyy hh:mm:ss``. The line is validated field by field and
each failure is reported with its own :class:`HeaderErrorReason`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time

from .cursor import ByteCursor
from .errors import HeaderError, HeaderErrorReason

logger = logging.getLogger(__name__)

HEADER_LENGTH = 29
SIGNATURE = "IMD "
VERSION_OFFSET = 4
DATETIME_OFFSET = 10
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Header:
    text: str

    @property
    def version(self) -> str:
        return self.text[VERSION_OFFSET : VERSION_OFFSET + 4]

    def time(self) -> datetime:
        """
        Parse the creation timestamp embedded in the header.

        Raises ``ValueError`` when the header text was never validated and
        does not carry a well-formed timestamp.
        """
        return datetime.strptime(self.text[DATETIME_OFFSET:], TIMESTAMP_FORMAT)

    def __str__(self) -> str:
        return self.text


def _is_decimal(text: str) -> bool:
    return bool(text) and all(ch in _DIGITS for ch in text)


def _check_version(version: str) -> None:
    if len(version) < 4 or len(version) > 6 or version[1] != ".":
        raise HeaderError(HeaderErrorReason.BAD_VERSION_FORMAT, version)
    if not _is_decimal(version[:1]):
        raise HeaderError(HeaderErrorReason.BAD_MAJOR_VERSION, version)
    if not _is_decimal(version[2:]):
        raise HeaderError(HeaderErrorReason.BAD_MINOR_VERSION, version)


def _check_date(text: str) -> None:
    if len(text) != 10 or text[2] != "/" or text[5] != "/":
        raise HeaderError(HeaderErrorReason.BAD_DATE_FORMAT, text)
    day, month, year = text[0:2], text[3:5], text[6:10]
    if not all(_is_decimal(part) for part in (day, month, year)):
        raise HeaderError(HeaderErrorReason.BAD_DATE_VALUES, text)
    try:
        date(int(year), int(month), int(day))
    except ValueError:
        raise HeaderError(HeaderErrorReason.BAD_DATE_VALUES, text) from None


def _check_time(text: str) -> None:
    if len(text) != 8 or text[2] != ":" or text[5] != ":":
        raise HeaderError(HeaderErrorReason.BAD_TIME_FORMAT, text)
    hour, minute, second = text[0:2], text[3:5], text[6:8]
    if not all(_is_decimal(part) for part in (hour, minute, second)):
        raise HeaderError(HeaderErrorReason.BAD_TIME_VALUES, text)
    try:
        time(int(hour), int(minute), int(second))
    except ValueError:
        raise HeaderError(HeaderErrorReason.BAD_TIME_VALUES, text) from None


def validate_header(text: str) -> None:
    """Raise :class:`HeaderError` for the first rule ``text`` breaks."""
    if not text.startswith(SIGNATURE):
        raise HeaderError(HeaderErrorReason.BAD_SIGNATURE, text)

    version, sep, stamp = text[len(SIGNATURE) :].partition(": ")
    if not sep:
        raise HeaderError(HeaderErrorReason.MISSING_SEPARATOR, text)

    _check_version(version)

    # date, one space, time
    if len(stamp) != 19 or stamp[10] != " ":
        raise HeaderError(HeaderErrorReason.BAD_DATETIME_LENGTH, stamp)
    _check_date(stamp[:10])
    _check_time(stamp[11:])


def parse_header(data: bytes) -> Header:
    text = data.decode("latin-1")
    validate_header(text)
    return Header(text)


def read_header(cursor: ByteCursor) -> Header:
    header = parse_header(cursor.read_exact(HEADER_LENGTH, "header"))
    logger.debug("IMD header accepted: version %s", header.version)
    return header


__all__ = [
    "HEADER_LENGTH",
    "Header",
    "parse_header",
    "read_header",
    "validate_header",
]

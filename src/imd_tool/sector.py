"""
Sector data records.

Every sector slot in a track starts with a one byte record type. Types
1/3/5/7 carry the sector verbatim, 2/4/6/8 carry a single fill byte that
stands for a sector of identical bytes, and 0 marks a sector that could not
be read at all. The odd/even pairs differ only in the deleted-data and
read-error flags the imaging tool saw on the original medium.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .cursor import ByteCursor
from .errors import UnrecognizedDiscriminantError


class SectorStatus(Enum):
    UNAVAILABLE = "unavailable"
    NORMAL = "normal"
    DELETED = "deleted"
    ERROR = "error"
    DELETED_ERROR = "deleted+error"


class SectorRecordType(IntEnum):
    UNAVAILABLE = 0
    NORMAL = 1
    COMPRESSED = 2
    DELETED = 3
    COMPRESSED_DELETED = 4
    ERROR = 5
    COMPRESSED_ERROR = 6
    DELETED_ERROR = 7
    COMPRESSED_DELETED_ERROR = 8

    @property
    def has_data(self) -> bool:
        return self is not SectorRecordType.UNAVAILABLE

    @property
    def is_compressed(self) -> bool:
        return self.has_data and self % 2 == 0

    @property
    def deleted(self) -> bool:
        return self.has_data and (self - 1) & 0x02 != 0

    @property
    def read_error(self) -> bool:
        return self.has_data and (self - 1) & 0x04 != 0

    @property
    def status(self) -> SectorStatus:
        if not self.has_data:
            return SectorStatus.UNAVAILABLE
        if self.deleted and self.read_error:
            return SectorStatus.DELETED_ERROR
        if self.deleted:
            return SectorStatus.DELETED
        if self.read_error:
            return SectorStatus.ERROR
        return SectorStatus.NORMAL


@dataclass(frozen=True)
class Sector:
    record_type: SectorRecordType
    data: bytes | None = None

    def __post_init__(self) -> None:
        if self.record_type.has_data != (self.data is not None):
            raise ValueError(
                f"{self.record_type.name} sector "
                f"{'requires' if self.record_type.has_data else 'cannot carry'} data"
            )

    @property
    def available(self) -> bool:
        return self.data is not None

    @property
    def status(self) -> SectorStatus:
        return self.record_type.status


UNAVAILABLE_SECTOR = Sector(SectorRecordType.UNAVAILABLE)


def read_sector(
    cursor: ByteCursor, sector_length: int, track_index: int = 0, slot: int = 0
) -> Sector:
    """Decode one record-type byte and its payload into a :class:`Sector`."""
    offset = cursor.offset
    value = cursor.read_byte(f"record type of track {track_index} slot {slot}")
    try:
        record_type = SectorRecordType(value)
    except ValueError:
        raise UnrecognizedDiscriminantError(value, track_index, slot, offset) from None

    if not record_type.has_data:
        return UNAVAILABLE_SECTOR
    what = f"data of track {track_index} slot {slot}"
    if record_type.is_compressed:
        fill = cursor.read_byte(what)
        return Sector(record_type, bytes([fill]) * sector_length)
    return Sector(record_type, cursor.read_exact(sector_length, what))


__all__ = [
    "Sector",
    "SectorRecordType",
    "SectorStatus",
    "UNAVAILABLE_SECTOR",
    "read_sector",
]

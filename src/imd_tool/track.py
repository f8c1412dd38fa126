"""Track records: geometry, sector maps and sector contents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .cursor import ByteCursor
from .errors import InvalidSectorSizeError
from .options import DEFAULT_OPTIONS, DecodeOptions
from .sector import Sector, read_sector

logger = logging.getLogger(__name__)

CYLINDER_MAP_FLAG = 0x40
HEAD_MAP_FLAG = 0x80
HEAD_NUMBER_MASK = 0x3F

MODE_NAMES = (
    "500 kbps FM",
    "300 kbps FM",
    "250 kbps FM",
    "500 kbps MFM",
    "300 kbps MFM",
    "250 kbps MFM",
)


@dataclass(frozen=True)
class Track:
    mode: int
    cylinder: int
    head: int
    sector_count: int
    sector_size: int
    sector_numbering_map: bytes
    sector_cylinder_map: Optional[bytes]
    sector_head_map: Optional[bytes]
    sectors: Tuple[Sector, ...]
    sector_length: Optional[int] = None

    def __post_init__(self) -> None:
        if self.sector_length is None:
            object.__setattr__(self, "sector_length", self.sector_size)
        for name in ("mode", "cylinder", "head", "sector_count", "sector_size"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} {value} does not fit in a byte")
        n = self.sector_count
        maps = {
            "sector numbering map": self.sector_numbering_map,
            "sector cylinder map": self.sector_cylinder_map,
            "sector head map": self.sector_head_map,
        }
        for name, values in maps.items():
            if values is not None and len(values) != n:
                raise ValueError(f"{name} has {len(values)} entries, expected {n}")
        if len(self.sectors) != n:
            raise ValueError(f"track holds {len(self.sectors)} sectors, expected {n}")
        for slot, sector in enumerate(self.sectors):
            if sector.data is not None and len(sector.data) != self.sector_length:
                raise ValueError(
                    f"sector slot {slot} holds {len(sector.data)} bytes, "
                    f"expected {self.sector_length}"
                )

    @property
    def head_number(self) -> int:
        return self.head & HEAD_NUMBER_MASK

    @property
    def has_cylinder_map(self) -> bool:
        return bool(self.head & CYLINDER_MAP_FLAG)

    @property
    def has_head_map(self) -> bool:
        return bool(self.head & HEAD_MAP_FLAG)

    @property
    def mode_name(self) -> Optional[str]:
        if self.mode < len(MODE_NAMES):
            return MODE_NAMES[self.mode]
        return None

    @property
    def sector_data_records(self) -> Tuple[Optional[bytes], ...]:
        return tuple(sector.data for sector in self.sectors)

    def sector(self, number: int) -> Optional[Sector]:
        """Look up a sector by its logical number from the numbering map."""
        for slot, logical in enumerate(self.sector_numbering_map):
            if logical == number:
                return self.sectors[slot]
        return None


def read_track(
    cursor: ByteCursor,
    index: int = 0,
    options: DecodeOptions = DEFAULT_OPTIONS,
) -> Optional[Track]:
    """
    Decode the next track record.

    Returns ``None`` when the stream is exhausted right where the next
    track's mode byte would start; any shortfall after that point raises
    :class:`~imd_tool.errors.StreamError`.
    """
    mode = cursor.try_read_byte(f"mode of track {index}")
    if mode is None:
        return None

    cylinder = cursor.read_byte(f"cylinder of track {index}")
    head = cursor.read_byte(f"head of track {index}")
    sector_count = cursor.read_byte(f"sector count of track {index}")
    sector_size = cursor.read_byte(f"sector size of track {index}")

    sector_length = options.sector_length(sector_size)
    if sector_length is None:
        raise InvalidSectorSizeError(sector_size, index)

    numbering = cursor.read_exact(sector_count, f"sector numbering map of track {index}")
    cylinder_map = None
    head_map = None
    if head & CYLINDER_MAP_FLAG:
        cylinder_map = cursor.read_exact(
            sector_count, f"sector cylinder map of track {index}"
        )
    if head & HEAD_MAP_FLAG:
        head_map = cursor.read_exact(sector_count, f"sector head map of track {index}")

    sectors = tuple(
        read_sector(cursor, sector_length, track_index=index, slot=slot)
        for slot in range(sector_count)
    )

    track = Track(
        mode=mode,
        cylinder=cylinder,
        head=head,
        sector_count=sector_count,
        sector_size=sector_size,
        sector_numbering_map=numbering,
        sector_cylinder_map=cylinder_map,
        sector_head_map=head_map,
        sectors=sectors,
        sector_length=sector_length,
    )
    logger.debug(
        "track %d: mode=%d cyl=%d head=%d sectors=%d size=%d",
        index,
        mode,
        cylinder,
        track.head_number,
        sector_count,
        sector_length,
    )
    return track


__all__ = [
    "CYLINDER_MAP_FLAG",
    "HEAD_MAP_FLAG",
    "HEAD_NUMBER_MASK",
    "MODE_NAMES",
    "Track",
    "read_track",
]

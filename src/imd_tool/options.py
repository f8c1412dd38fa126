"""Decoder configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ImageDisk size codes 0..6 -> 128..8192 bytes
SECTOR_SIZE_CODES = (128, 256, 512, 1024, 2048, 4096, 8192)


class SectorSizeEncoding(Enum):
    LITERAL = "literal"  # size byte is the byte count
    CODED = "coded"  # size byte is a code, 128 << code


@dataclass(frozen=True)
class DecodeOptions:
    max_comment_length: int | None = None
    sector_size_encoding: SectorSizeEncoding = SectorSizeEncoding.LITERAL

    def sector_length(self, size_byte: int) -> int | None:
        """Bytes per sector for ``size_byte``, or ``None`` for an unknown code."""
        if self.sector_size_encoding is SectorSizeEncoding.LITERAL:
            return size_byte
        if size_byte < len(SECTOR_SIZE_CODES):
            return SECTOR_SIZE_CODES[size_byte]
        return None


DEFAULT_OPTIONS = DecodeOptions()

__all__ = [
    "DEFAULT_OPTIONS",
    "DecodeOptions",
    "SECTOR_SIZE_CODES",
    "SectorSizeEncoding",
]

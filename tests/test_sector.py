import io

import pytest

from imd_tool import (
    ByteCursor,
    Sector,
    SectorRecordType,
    SectorStatus,
    StreamError,
    UnrecognizedDiscriminantError,
    read_sector,
)


def _read(data: bytes, size: int = 4) -> tuple[Sector, ByteCursor]:
    cursor = ByteCursor(io.BytesIO(data))
    return read_sector(cursor, size), cursor


@pytest.mark.parametrize("record", [1, 3, 5, 7])
def test_verbatim_records_copy_payload(record: int) -> None:
    sector, cursor = _read(bytes([record]) + b"\x01\x02\x03\x04tail")
    assert sector.data == b"\x01\x02\x03\x04"
    assert not sector.record_type.is_compressed
    assert cursor.offset == 5


@pytest.mark.parametrize("record", [2, 4, 6, 8])
def test_compressed_records_expand_fill_byte(record: int) -> None:
    sector, cursor = _read(bytes([record, 0xE5]), size=128)
    assert sector.data == b"\xe5" * 128
    assert sector.record_type.is_compressed
    assert cursor.offset == 2


def test_unavailable_record_has_no_payload() -> None:
    sector, cursor = _read(b"\x00\x01")
    assert sector.data is None
    assert not sector.available
    assert sector.status is SectorStatus.UNAVAILABLE
    assert cursor.offset == 1


@pytest.mark.parametrize(
    "record,status",
    [
        (1, SectorStatus.NORMAL),
        (2, SectorStatus.NORMAL),
        (3, SectorStatus.DELETED),
        (4, SectorStatus.DELETED),
        (5, SectorStatus.ERROR),
        (6, SectorStatus.ERROR),
        (7, SectorStatus.DELETED_ERROR),
        (8, SectorStatus.DELETED_ERROR),
    ],
)
def test_status_flags_are_kept(record: int, status: SectorStatus) -> None:
    record_type = SectorRecordType(record)
    assert record_type.status is status
    assert record_type.deleted == (status in (SectorStatus.DELETED, SectorStatus.DELETED_ERROR))
    assert record_type.read_error == (status in (SectorStatus.ERROR, SectorStatus.DELETED_ERROR))


@pytest.mark.parametrize("record", [9, 0x41, 0xFF])
def test_unknown_record_type(record: int) -> None:
    with pytest.raises(UnrecognizedDiscriminantError) as excinfo:
        _read(bytes([record]) + b"\x00" * 4)
    assert excinfo.value.value == record
    assert excinfo.value.offset == 0


def test_truncated_payload_is_a_stream_error() -> None:
    with pytest.raises(StreamError) as excinfo:
        _read(b"\x01\xaa\xbb")
    assert excinfo.value.expected == 4
    assert excinfo.value.received == 2

    with pytest.raises(StreamError):
        _read(b"\x02")


def test_sector_payload_must_match_record_type() -> None:
    with pytest.raises(ValueError):
        Sector(SectorRecordType.UNAVAILABLE, b"\x00")
    with pytest.raises(ValueError):
        Sector(SectorRecordType.NORMAL)

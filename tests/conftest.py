from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from typing import Iterable, Sequence


def repo_src_path() -> Path:
    """Return the repository's ``src`` directory."""

    return Path(__file__).resolve().parents[1] / "src"


def _ensure_repo_on_path() -> None:
    if importlib.util.find_spec("imd_tool") is None:
        sys.path.insert(0, str(repo_src_path()))


_ensure_repo_on_path()


HEADER = b"IMD 1.18: 15/03/2021 10:30:00"


def make_image(comment: bytes = b"", tracks: Iterable[bytes] = ()) -> bytes:
    return HEADER + comment + b"\x1a" + b"".join(tracks)


def make_track(
    records: Sequence[bytes],
    *,
    mode: int = 5,
    cylinder: int = 0,
    head: int = 0,
    sector_size: int = 4,
    numbering: Sequence[int] | None = None,
    cylinder_map: Sequence[int] | None = None,
    head_map: Sequence[int] | None = None,
) -> bytes:
    """Build one track record from already-encoded sector records."""
    count = len(records)
    if numbering is None:
        numbering = range(1, count + 1)
    out = bytes([mode, cylinder, head, count, sector_size]) + bytes(numbering)
    if cylinder_map is not None:
        out += bytes(cylinder_map)
    if head_map is not None:
        out += bytes(head_map)
    return out + b"".join(records)

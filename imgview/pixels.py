"""Counting of distinct texel values in raw image buffers."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def count_unique_values(
    buffer: Buffer,
    width: int,
    height: int,
    row_pitch: Optional[int] = None,
    bits_per_texel: int = 32,
) -> int:
    """Number of distinct texel values in a row-major image buffer.

    ``row_pitch`` is the distance between rows in bytes and defaults to a
    tightly packed row. Padding bytes at the end of rows are ignored.
    Returns -1 for a zero bit width.
    """
    if bits_per_texel % 8 != 0:
        raise ValueError(
            "unsupported bit width, currently only 8 bit and higher image are supported"
        )
    if bits_per_texel == 0:
        return -1
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")

    texel_size = bits_per_texel // 8
    row_bytes = width * texel_size
    pitch = row_bytes if row_pitch is None else row_pitch
    if pitch < row_bytes:
        raise ValueError("row pitch is smaller than a row of texels")

    data = memoryview(buffer).cast("B")
    if height and len(data) < pitch * (height - 1) + row_bytes:
        raise ValueError("buffer is too small for the image dimensions")

    values = set()
    for row_start in range(0, pitch * height, pitch) if pitch else [0] * height:
        row = data[row_start:row_start + row_bytes]
        values.update(
            bytes(row[offset:offset + texel_size])
            for offset in range(0, row_bytes, texel_size)
        )
    return len(values)
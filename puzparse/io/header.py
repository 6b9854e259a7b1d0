"""Fixed-offset header extraction."""

from __future__ import annotations

import struct

from ..core import constants as C
from ..core.exceptions import InvalidDimensionsError, TruncatedFileError
from ..core.models import PuzHeader
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")


def read_bytes(data: bytes, offset: int, length: int) -> bytes:
    """Slice ``length`` bytes at ``offset``, raising if the data is too short."""

    end = offset + length
    if offset < 0 or end > len(data):
        raise TruncatedFileError(
            f"Need {length} bytes at offset 0x{offset:02X}, file has {len(data)} bytes"
        )
    return data[offset:end]


def read_u8(data: bytes, offset: int) -> int:
    return _U8.unpack(read_bytes(data, offset, _U8.size))[0]


def read_u16(data: bytes, offset: int) -> int:
    return _U16.unpack(read_bytes(data, offset, _U16.size))[0]


def read_header(data: bytes) -> PuzHeader:
    """Read the scalar header fields stored in the first 0x34 bytes."""

    if len(data) < C.HEADER_SIZE:
        raise TruncatedFileError(
            f"Header needs {C.HEADER_SIZE} bytes, file has {len(data)} bytes"
        )

    header = PuzHeader(
        checksum=read_u16(data, C.CHECKSUM_OFFSET),
        magic=read_bytes(data, C.MAGIC_OFFSET, C.MAGIC_LENGTH),
        cib_checksum=read_u16(data, C.CIB_CHECKSUM_OFFSET),
        masked_low_checksums=read_bytes(data, C.MASKED_LOW_OFFSET, C.MASKED_LENGTH),
        masked_high_checksums=read_bytes(data, C.MASKED_HIGH_OFFSET, C.MASKED_LENGTH),
        version_string=read_bytes(data, C.VERSION_OFFSET, C.VERSION_LENGTH),
        reserved_1c=read_bytes(data, C.RESERVED_1C_OFFSET, C.RESERVED_1C_LENGTH),
        scrambled_checksum=read_u16(data, C.SCRAMBLED_CHECKSUM_OFFSET),
        reserved_20=read_bytes(data, C.RESERVED_20_OFFSET, C.RESERVED_20_LENGTH),
        width=read_u8(data, C.WIDTH_OFFSET),
        height=read_u8(data, C.HEIGHT_OFFSET),
        num_clues=read_u16(data, C.NUM_CLUES_OFFSET),
        unknown_bitmask=read_u16(data, C.UNKNOWN_BITMASK_OFFSET),
        scrambled_tag=read_u16(data, C.SCRAMBLED_TAG_OFFSET),
    )

    if header.width == 0 or header.height == 0:
        raise InvalidDimensionsError(
            f"Invalid grid dimensions {header.width}x{header.height}"
        )
    if not header.has_expected_magic:
        LOGGER.debug("Unexpected magic %r", header.magic)
    if header.is_scrambled:
        LOGGER.warning(
            "Puzzle is scrambled (tag 0x%04X); solution is not descrambled",
            header.scrambled_tag,
        )
    LOGGER.debug(
        "Header: %sx%s grid, %s clues, version %s",
        header.width,
        header.height,
        header.num_clues,
        header.version,
    )
    return header

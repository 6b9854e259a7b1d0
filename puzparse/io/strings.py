"""String section parsing and text transcoding.

The string section is a run of NUL-terminated strings stored after the two
boards, in a fixed order::

    title, author, copyright, clue[0] ... clue[num_clues - 1], notes

Title, author and copyright are trimmed and decoded straight away. Clue texts
stay as raw bytes until the numbering step has prefixed them with their
number; notes are decoded but not trimmed.
"""

from __future__ import annotations

from typing import List, Tuple

from ..core.constants import DEFAULT_ENCODING, SECTIONS_AFTER_CLUES, SECTIONS_BEFORE_CLUES
from ..core.exceptions import MalformedStringSectionError, PuzEncodingError, TruncatedFileError
from ..core.models import PuzHeader, StringSections
from ..utils.logger import get_logger
from .board import strings_offset


LOGGER = get_logger(__name__)

NUL = b"\x00"


def decode_text(raw: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Transcode ``raw`` from the puzzle's single-byte charset to text."""

    try:
        return raw.decode(encoding)
    except LookupError as exc:
        raise PuzEncodingError(f"Unknown text encoding {encoding!r}") from exc
    except UnicodeDecodeError as exc:
        raise PuzEncodingError(f"Cannot decode {raw!r} as {encoding}: {exc.reason}") from exc


def section_count(num_clues: int) -> int:
    return len(SECTIONS_BEFORE_CLUES) + num_clues + len(SECTIONS_AFTER_CLUES)


def split_strings(blob: bytes, count: int) -> Tuple[List[bytes], int]:
    """Split ``count`` NUL-terminated strings off the front of ``blob``.

    Returns the strings (terminators removed) and the number of bytes left
    after the last terminator.
    """

    segments: List[bytes] = []
    position = 0
    while len(segments) < count:
        end = blob.find(NUL, position)
        if end < 0:
            raise MalformedStringSectionError(
                f"Expected {count} NUL-terminated strings, found {len(segments)}"
            )
        segments.append(blob[position:end])
        position = end + 1
    return segments, len(blob) - position


def read_string_sections(
    data: bytes,
    header: PuzHeader,
    encoding: str = DEFAULT_ENCODING,
) -> StringSections:
    offset = strings_offset(header.width, header.height)
    if offset > len(data):
        raise TruncatedFileError(
            f"String section starts at 0x{offset:X}, file has {len(data)} bytes"
        )

    segments, trailing = split_strings(data[offset:], section_count(header.num_clues))
    before = len(SECTIONS_BEFORE_CLUES)
    title, author, copyright_ = (
        decode_text(segment.strip(), encoding) for segment in segments[:before]
    )
    clues = tuple(segments[before:before + header.num_clues])
    notes = decode_text(segments[-1], encoding)

    if trailing:
        LOGGER.debug("Ignoring %s bytes of extension data after the notes", trailing)

    return StringSections(
        title=title,
        author=author,
        copyright=copyright_,
        clues=clues,
        notes=notes,
        trailing=trailing,
    )

"""Decompression of the header/command based format used by several SNES titles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

END_MARKER = 0xFF

CMD_COPY = 0
CMD_BYTE_REPEAT = 1
CMD_WORD_REPEAT = 2
CMD_BYTE_INC = 3
CMD_COPY_EXISTING = 4


class CompressionMode(IntEnum):
    """Variant of the format; they differ in the byte order of copy offsets."""

    MODE1 = 0  # offsets stored high byte first (overworld data)
    MODE2 = 1  # offsets stored low byte first (graphics)


class DecompressionError(ValueError):
    """Raised when compressed data is malformed or exceeds its limits."""


@dataclass(frozen=True)
class DecompressionResult:
    """Decompressed bytes and the span of input that produced them.

    ``end`` is the index in the input just past the 0xFF end marker.
    """

    data: bytes
    start: int
    end: int

    @property
    def compressed_length(self) -> int:
        """Number of input bytes consumed, end marker included."""
        return self.end - self.start


def _read_offset(data: bytes, pos: int, mode: CompressionMode) -> int:
    first, second = data[pos + 1], data[pos + 2]
    if mode == CompressionMode.MODE2:
        return first | (second << 8)
    return second | (first << 8)


def decompress(
    data: bytes,
    start: int = 0,
    max_length: int = 0,
    mode: CompressionMode = CompressionMode.MODE2,
) -> DecompressionResult:
    """Decompress ``data`` from ``start`` up to the 0xFF end marker.

    A ``max_length`` of 0 means no limit; otherwise reading past
    ``start + max_length`` raises :class:`DecompressionError`.
    """
    mode = CompressionMode(mode)
    max_offset = start + max_length if max_length else 0
    output = bytearray()
    pos = start
    try:
        header = data[pos]
        while header != END_MARKER:
            command = header >> 5
            length = header & 0x1F
            if command == 7:
                command = (header >> 2) & 7
                length = ((header & 3) << 8) + data[pos + 1]
                pos += 1
            length += 1

            if max_offset and pos >= max_offset:
                raise DecompressionError("Compression string exceed the max_length specified")

            if command == CMD_COPY:
                if max_offset and pos + 1 + length > max_offset:
                    raise DecompressionError(
                        f"A copy command exceed the available data "
                        f"{pos + 1 + length} > {max_offset} (max_length specified)"
                    )
                chunk = data[pos + 1 : pos + 1 + length]
                if len(chunk) != length:
                    raise IndexError("copy runs past the end of the data")
                output += chunk
                pos += length + 1
            elif command == CMD_BYTE_REPEAT:
                output += bytes([data[pos + 1]]) * length
                pos += 2
            elif command == CMD_WORD_REPEAT:
                pair = bytes([data[pos + 1], data[pos + 2]])
                output += (pair * ((length + 1) // 2))[:length]
                pos += 3
            elif command == CMD_BYTE_INC:
                base = data[pos + 1]
                output += bytes((base + i) & 0xFF for i in range(length))
                pos += 2
            elif command == CMD_COPY_EXISTING:
                offset = _read_offset(data, pos, mode)
                if offset > len(output):
                    raise DecompressionError(
                        f"Offset for command copy existing is larger than the current "
                        f"position (Offset : 0x{offset:04X} | Pos : 0x{len(output):06X})"
                    )
                for i in range(length):
                    output.append(output[offset + i])
                pos += 3
            else:
                raise DecompressionError("Invalid command in the header for decompression")
            header = data[pos]
    except IndexError as exc:
        raise DecompressionError(f"compressed data is truncated at offset {pos}") from exc
    return DecompressionResult(bytes(output), start, pos + 1)
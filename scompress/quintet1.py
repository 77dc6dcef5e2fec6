"""LZ-style compression with a 256 byte sliding window and bit-level flags."""

from __future__ import annotations

from .bitreader import BitstreamReader
from .bitwriter import BitstreamWriter

_WINDOW_SIZE = 256
_WINDOW_START = 0xEF
_FILL_BYTE = 0x20
_MAX_MATCH = 15
_MIN_MATCH = 2


def decompress(data: bytes) -> bytes:
    """Decompress a stream whose first two bytes hold the output size (little endian)."""
    reader = BitstreamReader(data)
    try:
        size = reader.read_u8() | (reader.read_u8() << 8)
        window = bytearray([_FILL_BYTE]) * _WINDOW_SIZE
        window_pos = _WINDOW_START
        output = bytearray()
        while len(output) < size:
            if reader.read_bit() == 0:
                source_pos = reader.read_u8()
                length = reader.read_u64_bits(4) + _MIN_MATCH
                length = min(length, size - len(output))
                for _ in range(length):
                    byte = window[source_pos]
                    output.append(byte)
                    window[window_pos] = byte
                    window_pos = (window_pos + 1) % _WINDOW_SIZE
                    source_pos = (source_pos + 1) % _WINDOW_SIZE
            else:
                byte = reader.read_u8()
                output.append(byte)
                window[window_pos] = byte
                window_pos = (window_pos + 1) % _WINDOW_SIZE
    except EOFError as exc:
        raise ValueError(f"compressed stream is truncated: {exc}") from exc
    return bytes(output)


def compress(data: bytes) -> bytes:
    """Compress ``data`` (at most 65535 bytes) into the windowed format."""
    if len(data) > 0xFFFF:
        raise ValueError(f"data too large to compress: {len(data)} bytes, at most 65535")
    buffer = bytes([_FILL_BYTE]) * _WINDOW_SIZE + bytes(data)
    total = len(buffer)

    writer = BitstreamWriter()
    writer.write_u8(len(data) & 0xFF)
    writer.write_u8(len(data) >> 8)

    current = _WINDOW_SIZE
    while current < total:
        best_index = 0
        best_length = 0
        limit = min(_MAX_MATCH, total - current)
        for candidate in range(current - _WINDOW_SIZE, current):
            length = 0
            while length < limit and buffer[candidate + length] == buffer[current + length]:
                length += 1
            if length > best_length:
                best_index = candidate
                best_length = length
        if best_length >= _MIN_MATCH:
            writer.write_bit(0)
            writer.write_u64_bits((best_index + _WINDOW_START) & 0xFF, 8)
            writer.write_u64_bits(best_length - _MIN_MATCH, 4)
            current += best_length
        else:
            writer.write_bit(1)
            writer.write_u8(buffer[current])
            current += 1
    return writer.getvalue()
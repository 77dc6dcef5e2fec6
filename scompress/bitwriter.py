"""Most-significant-bit-first bit stream writer backed by a growable buffer."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator


def _check_uint(value: int, bits: int) -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"value {value!r} does not fit in {bits} unsigned bits")
    return value


class BitstreamWriter:
    """Writes bits, bytes and big-endian integers, most significant bit first.

    ``write_*`` methods clear each byte before bits are written into it;
    ``insert_*`` methods leave every bit outside the written range untouched.
    """

    def __init__(self) -> None:
        self._buf = bytearray()
        self._byte_offset = 0
        self._bit_offset = 0

    def _ensure(self, size: int) -> None:
        if len(self._buf) < size:
            self._buf.extend(bytes(size - len(self._buf)))

    def size_in_bits(self) -> int:
        """Number of bits written up to the current position."""
        return 8 * self._byte_offset + self._bit_offset

    def size_in_bytes(self) -> int:
        """Number of bytes touched up to the current position."""
        return self._byte_offset + (self._bit_offset + 7) // 8

    def getvalue(self) -> bytes:
        """Return the written bytes up to the current position."""
        self._ensure(self.size_in_bytes())
        return bytes(self._buf[: self.size_in_bytes()])

    def write_bit(self, value: int) -> None:
        bit = 1 if value else 0
        self._ensure(self._byte_offset + 1)
        if self._bit_offset == 0:
            self._buf[self._byte_offset] = bit << 7
            self._bit_offset = 1
        else:
            self._buf[self._byte_offset] |= bit << (7 - self._bit_offset)
            if self._bit_offset == 7:
                self._bit_offset = 0
                self._byte_offset += 1
            else:
                self._bit_offset += 1

    def write_bytes(self, data: bytes) -> None:
        length = len(data)
        shift = self._bit_offset
        start = self._byte_offset
        if shift == 0:
            self._ensure(start + length)
            self._buf[start : start + length] = data
        else:
            self._ensure(start + length + 1)
            for pos, byte in enumerate(data, start):
                self._buf[pos] |= byte >> shift
                self._buf[pos + 1] = (byte << (8 - shift)) & 0xFF
        self._byte_offset += length

    def write_u8(self, value: int) -> None:
        _check_uint(value, 8)
        shift = self._bit_offset
        pos = self._byte_offset
        if shift == 0:
            self._ensure(pos + 1)
            self._buf[pos] = value
        else:
            self._ensure(pos + 2)
            self._buf[pos] |= value >> shift
            self._buf[pos + 1] = (value << (8 - shift)) & 0xFF
        self._byte_offset += 1

    def _write_uint(self, value: int, nbytes: int) -> None:
        _check_uint(value, 8 * nbytes)
        shift = self._bit_offset
        pos = self._byte_offset
        top = 8 * (nbytes - 1)
        if shift == 0:
            self._ensure(pos + nbytes)
            self._buf[pos] = value >> top
        else:
            self._ensure(pos + nbytes + 1)
            self._buf[pos] |= (value >> (top + shift)) & 0xFF
            self._buf[pos + nbytes] = (value << (8 - shift)) & 0xFF
            value >>= shift
        for i in range(nbytes - 1, 0, -1):
            self._buf[pos + i] = value & 0xFF
            value >>= 8
        self._byte_offset += nbytes

    def write_u16(self, value: int) -> None:
        self._write_uint(value, 2)

    def write_u32(self, value: int) -> None:
        self._write_uint(value, 4)

    def write_u64(self, value: int) -> None:
        self._write_uint(value, 8)

    def write_u64_bits(self, value: int, number_of_bits: int) -> None:
        """Write the low ``number_of_bits`` bits of ``value`` (0 to 64 bits)."""
        if not 0 <= number_of_bits <= 64:
            raise ValueError(f"number of bits must be between 0 and 64, got {number_of_bits}")
        _check_uint(value, number_of_bits)
        if number_of_bits == 0:
            return
        self._ensure(self._byte_offset + (self._bit_offset + number_of_bits + 7) // 8 + 1)

        first_byte_bits = 8 - self._bit_offset
        if first_byte_bits != 8:
            if number_of_bits < first_byte_bits:
                self._buf[self._byte_offset] |= (value << (first_byte_bits - number_of_bits)) & 0xFF
                self._bit_offset += number_of_bits
            else:
                self._buf[self._byte_offset] |= (value >> (number_of_bits - first_byte_bits)) & 0xFF
                self._byte_offset += 1
                self._bit_offset = 0
            number_of_bits -= first_byte_bits
            if number_of_bits <= 0:
                return

        last_byte_bits = number_of_bits % 8
        full_bytes = number_of_bits // 8
        if last_byte_bits:
            self._buf[self._byte_offset + full_bytes] = (value << (8 - last_byte_bits)) & 0xFF
            value >>= last_byte_bits
            self._bit_offset = last_byte_bits
        for i in range(full_bytes, 0, -1):
            self._buf[self._byte_offset + i - 1] = value & 0xFF
            value >>= 8
        self._byte_offset += full_bytes

    def write_repeated_bit(self, value: int, length: int) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        byte = 0xFF if value else 0
        rest = length % 8
        self.write_u64_bits(byte & ((1 << rest) - 1), rest)
        self.write_repeated_u8(byte, length // 8)

    def write_repeated_u8(self, value: int, length: int) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        for _ in range(length):
            self.write_u8(value)

    @contextmanager
    def _preserve_bounds(self, length: int) -> Iterator[None]:
        """Keep the bits around the next ``length`` bits as they are."""
        start = self.size_in_bits()
        end = start + length
        self._ensure(end // 8 + 2)

        first = None
        head_bits = start % 8
        if head_bits:
            index = start // 8
            first = (index, self._buf[index] & (0xFF00 >> head_bits) & 0xFF)

        last = None
        tail_bits = end % 8
        if tail_bits:
            index = end // 8
            last = (index, self._buf[index] & ~(0xFF00 >> tail_bits) & 0xFF)
            self._buf[index] = 0

        if first is not None:
            self._buf[first[0]] = 0

        yield

        if first is not None:
            self._buf[first[0]] |= first[1]
        if last is not None:
            self._buf[last[0]] |= last[1]

    def insert_bit(self, value: int) -> None:
        with self._preserve_bounds(1):
            self.write_bit(value)

    def insert_bytes(self, data: bytes) -> None:
        with self._preserve_bounds(8 * len(data)):
            self.write_bytes(data)

    def insert_u8(self, value: int) -> None:
        _check_uint(value, 8)
        with self._preserve_bounds(8):
            self.write_u8(value)

    def insert_u16(self, value: int) -> None:
        _check_uint(value, 16)
        with self._preserve_bounds(16):
            self.write_u16(value)

    def insert_u32(self, value: int) -> None:
        _check_uint(value, 32)
        with self._preserve_bounds(32):
            self.write_u32(value)

    def insert_u64(self, value: int) -> None:
        _check_uint(value, 64)
        with self._preserve_bounds(64):
            self.write_u64(value)

    def insert_u64_bits(self, value: int, number_of_bits: int) -> None:
        if not 0 <= number_of_bits <= 64:
            raise ValueError(f"number of bits must be between 0 and 64, got {number_of_bits}")
        _check_uint(value, number_of_bits)
        with self._preserve_bounds(number_of_bits):
            self.write_u64_bits(value, number_of_bits)

    def seek(self, offset: int) -> None:
        """Move the write position by ``offset`` bits; bytes are not cleared."""
        position = self.size_in_bits() + offset
        if position < 0:
            raise ValueError("cannot seek before the start of the stream")
        self._byte_offset, self._bit_offset = divmod(position, 8)
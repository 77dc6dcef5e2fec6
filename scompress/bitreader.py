"""Most-significant-bit-first bit stream reader."""

from __future__ import annotations


class BitstreamReader:
    """Reads bits, bytes and big-endian integers, most significant bit first.

    Reading beyond the end of the data raises :class:`EOFError`.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    def _take(self, number_of_bits: int) -> int:
        if number_of_bits < 0:
            raise ValueError("number of bits must not be negative")
        if number_of_bits == 0:
            return 0
        end = self._position + number_of_bits
        if end > 8 * len(self._data):
            raise EOFError(
                f"cannot read {number_of_bits} bits at bit {self._position}: "
                f"stream holds {8 * len(self._data)} bits"
            )
        first_byte = self._position // 8
        last_byte = (end + 7) // 8
        chunk = int.from_bytes(self._data[first_byte:last_byte], "big")
        trailing = 8 * last_byte - end
        self._position = end
        return (chunk >> trailing) & ((1 << number_of_bits) - 1)

    def read_bit(self) -> int:
        return self._take(1)

    def read_bytes(self, length: int) -> bytes:
        if length < 0:
            raise ValueError("length must not be negative")
        return self._take(8 * length).to_bytes(length, "big")

    def read_u8(self) -> int:
        return self._take(8)

    def read_u16(self) -> int:
        return self._take(16)

    def read_u32(self) -> int:
        return self._take(32)

    def read_u64(self) -> int:
        return self._take(64)

    def read_u64_bits(self, number_of_bits: int) -> int:
        """Read ``number_of_bits`` bits (0 to 64) as an unsigned integer."""
        if not 0 <= number_of_bits <= 64:
            raise ValueError(f"number of bits must be between 0 and 64, got {number_of_bits}")
        return self._take(number_of_bits)

    def seek(self, offset: int) -> None:
        """Move the read position by ``offset`` bits."""
        position = self._position + offset
        if position < 0:
            raise ValueError("cannot seek before the start of the stream")
        self._position = position

    def tell(self) -> int:
        """Current read position in bits."""
        return self._position
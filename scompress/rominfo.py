"""Parsing of the SNES internal cartridge header."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

HEADER_SIZE = 32
TITLE_SIZE = 21


class RomType(Enum):
    """Memory mapping of a cartridge."""

    LOROM = "LoROM"
    HIROM = "HiROM"
    EXHIROM = "ExHiROM"


@dataclass(frozen=True)
class RomInfo:
    """Fields of the internal header found at $xFC0 in the ROM."""

    title: bytes
    type: RomType
    fastrom: bool
    size: int
    sram_size: int
    creator_id: int
    version: int
    checksum_comp: int
    checksum: int

    @property
    def make_sense(self) -> bool:
        """True when the checksum and its complement agree."""
        return (self.checksum ^ self.checksum_comp) == 0xFFFF


def parse_rom_info(data: bytes) -> RomInfo:
    """Parse the 32-byte internal header starting at the title."""
    if len(data) < HEADER_SIZE:
        raise ValueError(f"header needs {HEADER_SIZE} bytes, got {len(data)}")
    makeup = data[21]
    rom_type = RomType.LOROM
    if makeup & 1:
        rom_type = RomType.HIROM
    if makeup & 0b111 == 0b111:
        rom_type = RomType.EXHIROM
    return RomInfo(
        title=bytes(data[:TITLE_SIZE]),
        type=rom_type,
        fastrom=(makeup & 0b00110000) == 0b00110000,
        size=0x400 << data[23],
        sram_size=0x400 << data[24],
        creator_id=int.from_bytes(data[25:27], "little"),
        version=data[27],
        checksum_comp=int.from_bytes(data[28:30], "little"),
        checksum=int.from_bytes(data[30:32], "little"),
    )
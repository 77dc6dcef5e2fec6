"""Address conversion between SNES bus addresses and ROM file offsets."""

from __future__ import annotations

from enum import Enum


class RomLocation(Enum):
    """Regions of the SNES address space that hold no ROM data."""

    SNES_RESERVED = "SNES Reserved"
    SRAM = "SRAM"
    WRAM = "WRAM section"


class MappingError(ValueError):
    """Raised when an address has no counterpart in the other address space."""

    def __init__(self, message: str, location: RomLocation | None = None) -> None:
        super().__init__(message)
        self.location = location


def _split(address: int) -> tuple[int, int]:
    if address < 0:
        raise ValueError(f"address must not be negative: {address}")
    return (address >> 16) & 0xFF, address & 0xFFFF


def _not_rom(snes_addr: int, location: RomLocation) -> MappingError:
    return MappingError(f"${snes_addr:06X} is in {location.value}, not ROM", location)


def lorom_snes_to_pc(snes_addr: int) -> int:
    """Map a LoROM SNES address to a file offset."""
    bank, offset = _split(snes_addr)
    if 0x80 <= bank <= 0xFD:
        bank -= 0x80
    if bank <= 0x3F and 0x2000 <= offset < 0x8000:
        raise _not_rom(snes_addr, RomLocation.SNES_RESERVED)
    if (0x70 <= bank <= 0x7D or bank in (0xFE, 0xFF)) and offset < 0x8000:
        raise _not_rom(snes_addr, RomLocation.SRAM)
    if bank in (0x7E, 0x7F) or (bank <= 0x3F and offset < 0x2000):
        raise _not_rom(snes_addr, RomLocation.WRAM)
    if 0x40 <= bank <= 0x6F and offset < 0x8000:
        return bank * 0x8000 + offset
    if bank in (0xFE, 0xFF):
        bank -= 0xFE - 0x7E
    return bank * 0x8000 + (offset - 0x8000)


def lorom_pc_to_snes(pc_addr: int) -> int:
    """Map a file offset to its LoROM SNES address."""
    if pc_addr < 0:
        raise ValueError(f"address must not be negative: {pc_addr}")
    bank, rest = divmod(pc_addr, 0x8000)
    return (bank << 16) + rest + 0x8000


def lorom_sram_pc_to_snes(pc_addr: int) -> int:
    """Map an SRAM offset to its LoROM SNES address."""
    if pc_addr < 0:
        raise ValueError(f"address must not be negative: {pc_addr}")
    chunk, rest = divmod(pc_addr, 0x8000)
    if chunk <= 0xD:
        return ((0x70 + chunk) << 16) + rest
    if chunk in (0xE, 0xF):
        return ((0xF0 + chunk) << 16) + rest
    raise MappingError(f"SRAM offset {pc_addr:#x} is beyond LoROM SRAM space")


def lorom_sram_snes_to_pc(snes_addr: int) -> int:
    """Map a LoROM SRAM SNES address to an SRAM offset."""
    bank, offset = _split(snes_addr)
    if 0xF0 <= bank <= 0xFD:
        bank -= 0x80
    if 0x70 <= bank <= 0x7D and offset < 0x8000:
        return (bank - 0x70) * 0x8000 + offset
    if bank in (0xFE, 0xFF) and offset < 0x8000:
        return ((bank - 0xFE) + 0xE) * 0x8000 + offset
    raise MappingError(f"${snes_addr:06X} is not a LoROM SRAM address")


def hirom_snes_to_pc(snes_addr: int) -> int:
    """Map a HiROM SNES address to a file offset."""
    bank, offset = _split(snes_addr)
    if 0x80 <= bank <= 0xFD:
        bank -= 0x80
    if (bank <= 0x1F and 0x2000 <= offset < 0x8000) or (
        0x20 <= bank <= 0x3F and 0x2000 <= offset < 0x6000
    ):
        raise _not_rom(snes_addr, RomLocation.SNES_RESERVED)
    if 0x20 <= bank <= 0x3F and 0x6000 <= offset < 0x8000:
        raise _not_rom(snes_addr, RomLocation.SRAM)
    if bank in (0x7E, 0x7F) or (bank <= 0x3F and offset < 0x2000):
        raise _not_rom(snes_addr, RomLocation.WRAM)
    if bank >= 0xFE:
        bank -= 0xFE - 0x3E
    if 0x40 <= bank <= 0x7D:
        bank -= 0x40
    return (bank << 16) + offset


def hirom_pc_to_snes(pc_addr: int) -> int:
    """Map a file offset to its HiROM SNES address."""
    if pc_addr < 0:
        raise ValueError(f"address must not be negative: {pc_addr}")
    bank = pc_addr >> 16
    offset = pc_addr & 0xFFFF
    if bank <= 0x3F and offset >= 0x8000:
        return pc_addr
    if bank <= 0x3D:
        return pc_addr + 0x400000
    return pc_addr + 0xFE0000


def hirom_sram_snes_to_pc(snes_addr: int) -> int:
    """Map a HiROM SRAM SNES address to an SRAM offset."""
    if snes_addr < 0:
        raise ValueError(f"address must not be negative: {snes_addr}")
    bank = snes_addr >> 16
    offset = snes_addr & 0xFFFF
    if 0x20 <= bank <= 0x3F and 0x6000 <= offset < 0x8000:
        return (bank - 0x20) * 0x2000 + (offset - 0x6000)
    raise MappingError(f"${snes_addr:06X} is not a HiROM SRAM address")


def hirom_sram_pc_to_snes(pc_addr: int) -> int:
    """Map an SRAM offset to its HiROM SNES address."""
    if pc_addr < 0:
        raise ValueError(f"address must not be negative: {pc_addr}")
    chunk, rest = divmod(pc_addr, 0x2000)
    return ((0x20 + chunk) << 16) + 0x6000 + rest
"""Conversion between SNES 15-bit BGR colours and 24-bit RGB colours."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} component must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Color:
    """A 24-bit RGB colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_channel("red", self.red)
        _check_channel("green", self.green)
        _check_channel("blue", self.blue)

    def to_snes(self) -> int:
        """The 15-bit SNES value of this colour."""
        return rgb_to_snes(self.red, self.green, self.blue)


@dataclass
class Palette:
    """An ordered list of colours with an identifier."""

    colors: list[Color] = field(default_factory=list)
    id: int = 0

    def __len__(self) -> int:
        return len(self.colors)

    def to_bytes(self) -> bytes:
        """Encode the colours as little-endian 16-bit SNES words."""
        return b"".join(color.to_snes().to_bytes(2, "little") for color in self.colors)


def snes_to_rgb(snes_color: int) -> Color:
    """Expand a SNES colour word to RGB, spreading 5-bit channels over 0..255."""
    if not 0 <= snes_color <= 0xFFFF:
        raise ValueError(f"SNES colour must fit in 16 bits, got {snes_color}")

    def expand(channel: int) -> int:
        value = (channel % 32) * 8
        return value + value // 32

    return Color(
        expand(snes_color),
        expand(snes_color // 32),
        expand(snes_color // 1024),
    )


def rgb_to_snes(red: int, green: int, blue: int) -> int:
    """Pack an RGB colour into a 15-bit SNES colour word."""
    _check_channel("red", red)
    _check_channel("green", green)
    _check_channel("blue", blue)
    return (blue // 8) * 1024 + (green // 8) * 32 + red // 8


def extract_palette(data: bytes, offset: int, size: int) -> Palette:
    """Read ``size`` little-endian SNES colours from ``data`` at ``offset``."""
    if offset < 0 or size < 0:
        raise ValueError("offset and size must not be negative")
    raw = data[offset : offset + 2 * size]
    if len(raw) != 2 * size:
        raise ValueError(
            f"need {2 * size} bytes at offset {offset}, only {len(raw)} available"
        )
    colors = [
        snes_to_rgb(int.from_bytes(raw[i : i + 2], "little")) for i in range(0, len(raw), 2)
    ]
    return Palette(colors)
# scompress

A small library of building blocks for working with SNES ROM images:
compression formats, address mapping, palettes and the internal cartridge
header. It has no dependencies outside the standard library.

## Modules

- `scompress.nintendo_decode`: decompression of the header/command format
  that many Nintendo titles use. It has two variants, chosen with
  `CompressionMode.MODE1` (copy offsets stored high byte first) and
  `CompressionMode.MODE2` (low byte first, used for graphics).
- `scompress.quintet1`: an LZ-style format with a 256-byte sliding window. It
  provides both `compress` and `decompress`.
- `scompress.mapping`: conversion between SNES bus addresses and file offsets
  for LoROM and HiROM, including their SRAM areas.
- `scompress.palette`: conversion between 15-bit SNES colours and 24-bit RGB.
- `scompress.rominfo`: parsing of the 32-byte internal ROM header.
- `scompress.bitreader` and `scompress.bitwriter`: bit streams that read and
  write most significant bit first.

## Installation

```
pip install .
```

## Usage

### Nintendo format decompression

```python
from scompress.nintendo_decode import CompressionMode, decompress

result = decompress(b"\x23\xAA\xFF", start=0, max_length=0, mode=CompressionMode.MODE2)
assert result.data == b"\xAA\xAA\xAA\xAA"
assert result.compressed_length == 3
```

A `max_length` of 0 means no limit. With any other value, reading past
`start + max_length` raises `DecompressionError`. The same error is raised for
malformed or truncated data.

### Quintet LZ compression

```python
from scompress import quintet1

packed = quintet1.compress(b"hello hello hello")
assert quintet1.decompress(packed) == b"hello hello hello"
```

`compress` accepts at most 65535 bytes. `decompress` raises `ValueError` on a
truncated stream.

### Address mapping

```python
from scompress.mapping import MappingError, lorom_pc_to_snes, lorom_snes_to_pc

assert lorom_snes_to_pc(0x0C8000) == 0x60000
assert lorom_pc_to_snes(0x60000) == 0x0C8000

try:
    lorom_snes_to_pc(0x7E0000)
except MappingError as error:
    print(error.location)  # RomLocation.WRAM
```

The HiROM functions are `hirom_snes_to_pc`, `hirom_pc_to_snes`,
`hirom_sram_snes_to_pc` and `hirom_sram_pc_to_snes`. The LoROM SRAM functions
are `lorom_sram_snes_to_pc` and `lorom_sram_pc_to_snes`.

### Palettes

```python
from scompress.palette import Color, extract_palette, rgb_to_snes, snes_to_rgb

assert snes_to_rgb(0x7FFF) == Color(255, 255, 255)
assert rgb_to_snes(255, 255, 255) == 0x7FFF

palette = extract_palette(b"\xff\x7f\x00\x00", 0, 2)
assert palette.to_bytes() == b"\xff\x7f\x00\x00"
```

### ROM header

```python
from scompress.rominfo import parse_rom_info

info = parse_rom_info(header_bytes)  # 32 bytes starting at the title
print(info.title, info.type, info.size, info.make_sense)
```

`info.type` is a `RomType` (`LOROM`, `HIROM` or `EXHIROM`). `make_sense` is
true when the checksum and its complement agree.

### Bit streams

```python
from scompress.bitreader import BitstreamReader
from scompress.bitwriter import BitstreamWriter

writer = BitstreamWriter()
writer.write_bit(1)
writer.write_u64_bits(5, 3)
writer.write_u8(0xAB)
data = writer.getvalue()

reader = BitstreamReader(data)
assert reader.read_bit() == 1
assert reader.read_u64_bits(3) == 5
assert reader.read_u8() == 0xAB
```

## What this package does not do

- There is no command-line program. Everything is used from Python.
- The Nintendo header/command format can only be decompressed. There is no
  compressor for it.
- The package does not read, extract or reinsert the graphics sets of a
  particular game's ROM. Nor does it rewrite a ROM's graphics pointer table.

## Running the tests

```
pip install .[test]
pytest
```
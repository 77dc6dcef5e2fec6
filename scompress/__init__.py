"""Compression formats, address mapping, palettes and header parsing for SNES ROM images."""

__version__ = "0.1.0"
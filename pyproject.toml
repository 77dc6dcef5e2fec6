[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scompress"
version = "0.1.0"
description = "Compression formats, address mapping and header parsing for SNES ROM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["snes", "rom", "compression", "decompression", "lorom", "hirom", "palette", "bitstream"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["scompress"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

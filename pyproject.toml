[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yumenes"
version = "0.1.0"
description = "Building blocks of a NES emulator: the 6502 opcode table, iNES cartridge loading and the NROM mapper"
requires-python = ">=3.10"
dependencies = []
keywords = ["nes", "emulator", "6502", "ines", "cartridge", "nrom"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yumenes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

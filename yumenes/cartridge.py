"""Loading iNES cartridge images."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field

from .mapper import CHR_ROM_BANK_SIZE, PRG_ROM_BANK_SIZE, MapperNROM

__all__ = [
    "HEADER_SIZE",
    "TRAINER_SIZE",
    "NES_MAGIC",
    "CartridgeError",
    "MirroringType",
    "Cartridge",
    "load_cartridge",
]

HEADER_SIZE = 16
TRAINER_SIZE = 512
NES_MAGIC = b"NES\x1a"

_PRG_ROM_SIZE_BYTE = 4
_CHR_ROM_SIZE_BYTE = 5
_FLAGS6_BYTE = 6
_FLAGS7_BYTE = 7
_PRG_RAM_SIZE_BYTE = 8

_MIRRORING_MASK = 0b0000_0001
_PRG_RAM_MASK = 0b0000_0010
_TRAINER_MASK = 0b0000_0100
_IGNORE_MIRRORING_MASK = 0b0000_1000
_MAPPER_MASK = 0b1111_0000


class CartridgeError(Exception):
    """Raised when a cartridge image cannot be loaded."""


class MirroringType(enum.Enum):
    """Nametable mirroring arrangement."""

    HORIZONTAL = enum.auto()
    VERTICAL = enum.auto()
    SINGLE_SCREEN = enum.auto()
    FOUR_SCREEN = enum.auto()


@dataclass
class Cartridge:
    """A decoded cartridge: its mapper, mirroring mode and mapper number."""

    mapper: MapperNROM = field(default_factory=MapperNROM)
    mirroring: MirroringType = MirroringType.HORIZONTAL
    mapper_id: int = -1

    @classmethod
    def from_bytes(cls, data: bytes) -> Cartridge:
        """Decode an iNES image held in memory."""
        data = bytes(data)
        if len(data) < HEADER_SIZE:
            raise CartridgeError(
                f"image is {len(data)} bytes, shorter than the {HEADER_SIZE}-byte header"
            )
        header = data[:HEADER_SIZE]
        if header[: len(NES_MAGIC)] != NES_MAGIC:
            raise CartridgeError("NES logo in header is not correct")

        flags6 = header[_FLAGS6_BYTE]
        mapper = MapperNROM(
            prg_rom_banks=header[_PRG_ROM_SIZE_BYTE],
            chr_rom_banks=header[_CHR_ROM_SIZE_BYTE],
            trainer_present=bool(flags6 & _TRAINER_MASK),
        )
        if flags6 & _PRG_RAM_MASK:
            mapper.prg_ram_present = True
            mapper.prg_ram_banks = header[_PRG_RAM_SIZE_BYTE]

        if flags6 & _IGNORE_MIRRORING_MASK:
            mirroring = MirroringType.FOUR_SCREEN
        elif flags6 & _MIRRORING_MASK:
            mirroring = MirroringType.VERTICAL
        else:
            mirroring = MirroringType.HORIZONTAL

        mapper_id = (header[_FLAGS7_BYTE] & _MAPPER_MASK) | (
            (flags6 & _MAPPER_MASK) >> 4
        )

        prg_size = PRG_ROM_BANK_SIZE * mapper.prg_rom_banks
        chr_size = CHR_ROM_BANK_SIZE * mapper.chr_rom_banks
        prg_start = HEADER_SIZE + (TRAINER_SIZE if mapper.trainer_present else 0)
        chr_start = prg_start + prg_size
        end = chr_start + chr_size
        if len(data) < end:
            raise CartridgeError(
                f"image is truncated: {len(data)} bytes, header requires {end}"
            )
        mapper.prg_rom = bytearray(data[prg_start:chr_start])
        mapper.chr_rom = bytearray(data[chr_start:end])

        return cls(mapper=mapper, mirroring=mirroring, mapper_id=mapper_id)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Cartridge:
        """Read and decode an iNES image from a file."""
        try:
            with open(path, "rb") as image:
                data = image.read()
        except FileNotFoundError:
            raise CartridgeError(
                f"cartridge file not found in given path: {os.fspath(path)}"
            ) from None
        return cls.from_bytes(data)


def load_cartridge(path: str | os.PathLike[str]) -> Cartridge:
    """Load the cartridge image at ``path``."""
    return Cartridge.from_file(path)
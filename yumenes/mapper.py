"""NROM (iNES mapper 0) memory mapping for PRG RAM, PRG ROM and CHR ROM."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "CHR_ROM_BANK_SIZE",
    "PRG_RAM_BANK_SIZE",
    "PRG_ROM_BANK_SIZE",
    "PRG_RAM_START",
    "PRG_ROM_START",
    "MapperNROM",
]

CHR_ROM_BANK_SIZE = 8192
PRG_RAM_BANK_SIZE = 8192
PRG_ROM_BANK_SIZE = 16384

PRG_RAM_START = 0x6000
PRG_ROM_START = 0x8000


def _checked(memory: bytearray, offset: int, what: str) -> int:
    if not 0 <= offset < len(memory):
        raise IndexError(f"{what} offset {offset:#06x} outside {len(memory)} bytes")
    return offset


@dataclass
class MapperNROM:
    """Mapper 0: fixed PRG ROM (16 KiB mirrored or 32 KiB), CHR ROM and PRG RAM."""

    prg_ram_banks: int = 0
    prg_rom_banks: int = 0
    chr_rom_banks: int = 0
    prg_ram_present: bool = True
    trainer_present: bool = False
    prg_ram: bytearray = field(default_factory=lambda: bytearray(PRG_RAM_BANK_SIZE))
    prg_rom: bytearray = field(default_factory=lambda: bytearray(PRG_ROM_BANK_SIZE))
    chr_rom: bytearray = field(default_factory=lambda: bytearray(CHR_ROM_BANK_SIZE))

    def prg_ram_write(self, address: int, data: int) -> None:
        """Store a byte in PRG RAM; ignored when the cartridge has none."""
        if not self.prg_ram_present:
            return
        offset = _checked(self.prg_ram, address - PRG_RAM_START, "PRG RAM")
        self.prg_ram[offset] = data

    def prg_ram_read(self, address: int) -> int:
        """Read a byte from PRG RAM; 0 when the cartridge has none."""
        if not self.prg_ram_present:
            return 0x00
        return self.prg_ram[_checked(self.prg_ram, address - PRG_RAM_START, "PRG RAM")]

    def prg_rom_read(self, address: int) -> int:
        """Read a byte from PRG ROM, mirroring a single 16 KiB bank."""
        mapped = (address - PRG_ROM_START) & 0xFFFF
        if self.prg_rom_banks == 1:
            mapped %= PRG_ROM_BANK_SIZE
        return self.prg_rom[_checked(self.prg_rom, mapped, "PRG ROM")]

    def chr_rom_read(self, address: int) -> int:
        """Read a byte from CHR ROM."""
        return self.chr_rom[_checked(self.chr_rom, address, "CHR ROM")]
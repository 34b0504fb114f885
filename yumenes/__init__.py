"""NES emulator building blocks: the 6502 opcode table, iNES cartridges and the NROM mapper."""

__version__ = "0.1.0"
__all__ = ["cartridge", "instruction", "mapper"]
"""The 6502 instruction set as used by the NES CPU, and opcode decoding."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

__all__ = ["Mnemonic", "AddressingMode", "Instruction", "INSTRUCTIONS", "decode"]


class Mnemonic(enum.Enum):
    """Instruction mnemonics, official ones first, then the undocumented ones."""

    ADC = enum.auto()
    AND = enum.auto()
    ASL = enum.auto()
    BCC = enum.auto()
    BCS = enum.auto()
    BEQ = enum.auto()
    BIT = enum.auto()
    BMI = enum.auto()
    BNE = enum.auto()
    BPL = enum.auto()
    BRK = enum.auto()
    BVC = enum.auto()
    BVS = enum.auto()
    CLC = enum.auto()
    CLD = enum.auto()
    CLI = enum.auto()
    CLV = enum.auto()
    CMP = enum.auto()
    CPX = enum.auto()
    CPY = enum.auto()
    DEC = enum.auto()
    DEX = enum.auto()
    DEY = enum.auto()
    EOR = enum.auto()
    INC = enum.auto()
    INX = enum.auto()
    INY = enum.auto()
    JMP = enum.auto()
    JSR = enum.auto()
    LDA = enum.auto()
    LDX = enum.auto()
    LDY = enum.auto()
    LSR = enum.auto()
    NOP = enum.auto()
    ORA = enum.auto()
    PHA = enum.auto()
    PHP = enum.auto()
    PLA = enum.auto()
    PLP = enum.auto()
    ROL = enum.auto()
    ROR = enum.auto()
    RTI = enum.auto()
    RTS = enum.auto()
    SBC = enum.auto()
    SEC = enum.auto()
    SED = enum.auto()
    SEI = enum.auto()
    STA = enum.auto()
    STX = enum.auto()
    STY = enum.auto()
    TAX = enum.auto()
    TAY = enum.auto()
    TSX = enum.auto()
    TXA = enum.auto()
    TXS = enum.auto()
    TYA = enum.auto()
    # Undocumented opcodes.
    AAC = enum.auto()
    AAX = enum.auto()
    ARR = enum.auto()
    ASR = enum.auto()
    ATX = enum.auto()
    AXA = enum.auto()
    AXS = enum.auto()
    DCP = enum.auto()
    DOP = enum.auto()
    ISC = enum.auto()
    KIL = enum.auto()
    LAR = enum.auto()
    LAX = enum.auto()
    RLA = enum.auto()
    RRA = enum.auto()
    SLO = enum.auto()
    SRE = enum.auto()
    SXA = enum.auto()
    SYA = enum.auto()
    TOP = enum.auto()
    XAA = enum.auto()
    XAS = enum.auto()

    @property
    def is_official(self) -> bool:
        """True for documented 6502 mnemonics."""
        return self.value <= Mnemonic.TYA.value


class AddressingMode(enum.Enum):
    """Operand addressing modes."""

    IMPLIED = enum.auto()
    ACCUMULATOR = enum.auto()
    IMMEDIATE = enum.auto()
    ZERO_PAGE = enum.auto()
    ZERO_PAGE_X = enum.auto()
    ZERO_PAGE_Y = enum.auto()
    RELATIVE = enum.auto()
    ABSOLUTE = enum.auto()
    ABSOLUTE_X = enum.auto()
    ABSOLUTE_Y = enum.auto()
    INDIRECT = enum.auto()
    INDIRECT_X = enum.auto()
    INDIRECT_Y = enum.auto()


@dataclass(frozen=True)
class Instruction:
    """One opcode: its mnemonic, addressing mode, length in bytes and base cycles."""

    mnemonic: Mnemonic = Mnemonic.KIL
    addressing_mode: AddressingMode = AddressingMode.IMPLIED
    opcode: int = 0x02
    bytes: int = 1
    cycles: int = 1


_M = Mnemonic
_A = AddressingMode

_TABLE = (
    (_M.AAC, _A.IMMEDIATE, 0x0B, 2, 2), (_M.AAC, _A.IMMEDIATE, 0x2B, 2, 3),
    (_M.AAX, _A.ZERO_PAGE, 0x87, 2, 3), (_M.AAX, _A.ZERO_PAGE_Y, 0x97, 2, 4),
    (_M.AAX, _A.ABSOLUTE, 0x8F, 3, 4), (_M.AAX, _A.INDIRECT_X, 0x83, 2, 6),
    (_M.ADC, _A.IMMEDIATE, 0x69, 2, 2), (_M.ADC, _A.ZERO_PAGE, 0x65, 2, 3),
    (_M.ADC, _A.ZERO_PAGE_X, 0x75, 2, 4), (_M.ADC, _A.ABSOLUTE, 0x6D, 3, 4),
    (_M.ADC, _A.ABSOLUTE_X, 0x7D, 3, 4), (_M.ADC, _A.ABSOLUTE_Y, 0x79, 3, 4),
    (_M.ADC, _A.INDIRECT_X, 0x61, 2, 6), (_M.ADC, _A.INDIRECT_Y, 0x71, 2, 5),
    (_M.AND, _A.IMMEDIATE, 0x29, 2, 2), (_M.AND, _A.ZERO_PAGE, 0x25, 2, 3),
    (_M.AND, _A.ZERO_PAGE_X, 0x35, 2, 4), (_M.AND, _A.ABSOLUTE, 0x2D, 3, 4),
    (_M.AND, _A.ABSOLUTE_X, 0x3D, 3, 4), (_M.AND, _A.ABSOLUTE_Y, 0x39, 3, 4),
    (_M.AND, _A.INDIRECT_X, 0x21, 2, 6), (_M.AND, _A.INDIRECT_Y, 0x31, 2, 5),
    (_M.ARR, _A.IMMEDIATE, 0x6B, 2, 2), (_M.ASL, _A.ACCUMULATOR, 0x0A, 1, 2),
    (_M.ASL, _A.ZERO_PAGE, 0x06, 2, 5), (_M.ASL, _A.ZERO_PAGE_X, 0x16, 2, 6),
    (_M.ASL, _A.ABSOLUTE, 0x0E, 3, 6), (_M.ASL, _A.ABSOLUTE_X, 0x1E, 3, 7),
    (_M.ASR, _A.IMMEDIATE, 0x4B, 2, 2), (_M.ATX, _A.IMMEDIATE, 0xAB, 2, 2),
    (_M.AXA, _A.ABSOLUTE_Y, 0x9F, 3, 5), (_M.AXA, _A.INDIRECT_Y, 0x93, 2, 6),
    (_M.AXS, _A.IMMEDIATE, 0xCB, 2, 2), (_M.BCC, _A.RELATIVE, 0x90, 2, 2),
    (_M.BCS, _A.RELATIVE, 0xB0, 2, 2), (_M.BEQ, _A.RELATIVE, 0xF0, 2, 2),
    (_M.BIT, _A.ZERO_PAGE, 0x24, 2, 3), (_M.BIT, _A.ABSOLUTE, 0x2C, 3, 4),
    (_M.BMI, _A.RELATIVE, 0x30, 2, 2), (_M.BNE, _A.RELATIVE, 0xD0, 2, 2),
    (_M.BPL, _A.RELATIVE, 0x10, 2, 2), (_M.BRK, _A.IMPLIED, 0x00, 1, 7),
    (_M.BVC, _A.RELATIVE, 0x50, 2, 2), (_M.BVS, _A.RELATIVE, 0x70, 2, 2),
    (_M.CLC, _A.IMPLIED, 0x18, 1, 2), (_M.CLD, _A.IMPLIED, 0xD8, 1, 2),
    (_M.CLI, _A.IMPLIED, 0x58, 1, 2), (_M.CLV, _A.IMPLIED, 0xB8, 1, 2),
    (_M.CMP, _A.IMMEDIATE, 0xC9, 2, 2), (_M.CMP, _A.ZERO_PAGE, 0xC5, 2, 3),
    (_M.CMP, _A.ZERO_PAGE_X, 0xD5, 2, 4), (_M.CMP, _A.ABSOLUTE, 0xCD, 3, 4),
    (_M.CMP, _A.ABSOLUTE_X, 0xDD, 3, 4), (_M.CMP, _A.ABSOLUTE_Y, 0xD9, 3, 4),
    (_M.CMP, _A.INDIRECT_X, 0xC1, 2, 6), (_M.CMP, _A.INDIRECT_Y, 0xD1, 2, 5),
    (_M.CPX, _A.IMMEDIATE, 0xE0, 2, 2), (_M.CPX, _A.ZERO_PAGE, 0xE4, 2, 3),
    (_M.CPX, _A.ABSOLUTE, 0xEC, 3, 4), (_M.CPY, _A.IMMEDIATE, 0xC0, 2, 2),
    (_M.CPY, _A.ZERO_PAGE, 0xC4, 2, 3), (_M.CPY, _A.ABSOLUTE, 0xCC, 3, 4),
    (_M.DCP, _A.ZERO_PAGE, 0xC7, 2, 5), (_M.DCP, _A.ZERO_PAGE_X, 0xD7, 2, 6),
    (_M.DCP, _A.ABSOLUTE, 0xCF, 3, 6), (_M.DCP, _A.ABSOLUTE_X, 0xDF, 3, 7),
    (_M.DCP, _A.ABSOLUTE_Y, 0xDB, 3, 7), (_M.DCP, _A.INDIRECT_X, 0xC3, 2, 8),
    (_M.DCP, _A.INDIRECT_Y, 0xD3, 2, 8), (_M.DEC, _A.ZERO_PAGE, 0xC6, 2, 5),
    (_M.DEC, _A.ZERO_PAGE_X, 0xD6, 2, 6), (_M.DEC, _A.ABSOLUTE, 0xCE, 3, 6),
    (_M.DEC, _A.ABSOLUTE_X, 0xDE, 3, 7), (_M.DEX, _A.IMPLIED, 0xCA, 1, 2),
    (_M.DEY, _A.IMPLIED, 0x88, 1, 2), (_M.DOP, _A.IMMEDIATE, 0x80, 2, 2),
    (_M.DOP, _A.IMMEDIATE, 0x82, 2, 2), (_M.DOP, _A.IMMEDIATE, 0x89, 2, 2),
    (_M.DOP, _A.IMMEDIATE, 0xC2, 2, 2), (_M.DOP, _A.IMMEDIATE, 0xE2, 2, 2),
    (_M.DOP, _A.ZERO_PAGE, 0x04, 2, 3), (_M.DOP, _A.ZERO_PAGE, 0x44, 2, 3),
    (_M.DOP, _A.ZERO_PAGE, 0x64, 2, 3), (_M.DOP, _A.ZERO_PAGE_X, 0x14, 2, 4),
    (_M.DOP, _A.ZERO_PAGE_X, 0x34, 2, 4), (_M.DOP, _A.ZERO_PAGE_X, 0x54, 2, 4),
    (_M.DOP, _A.ZERO_PAGE_X, 0x74, 2, 4), (_M.DOP, _A.ZERO_PAGE_X, 0xD4, 2, 4),
    (_M.DOP, _A.ZERO_PAGE_X, 0xF4, 2, 4), (_M.EOR, _A.IMMEDIATE, 0x49, 2, 2),
    (_M.EOR, _A.ZERO_PAGE, 0x45, 2, 3), (_M.EOR, _A.ZERO_PAGE_X, 0x55, 2, 4),
    (_M.EOR, _A.ABSOLUTE, 0x4D, 3, 4), (_M.EOR, _A.ABSOLUTE_X, 0x5D, 3, 4),
    (_M.EOR, _A.ABSOLUTE_Y, 0x59, 3, 4), (_M.EOR, _A.INDIRECT_X, 0x41, 2, 6),
    (_M.EOR, _A.INDIRECT_Y, 0x51, 2, 5), (_M.INC, _A.ZERO_PAGE, 0xE6, 2, 5),
    (_M.INC, _A.ZERO_PAGE_X, 0xF6, 2, 6), (_M.INC, _A.ABSOLUTE, 0xEE, 3, 6),
    (_M.INC, _A.ABSOLUTE_X, 0xFE, 3, 7), (_M.INX, _A.IMPLIED, 0xE8, 1, 2),
    (_M.INY, _A.IMPLIED, 0xC8, 1, 2), (_M.ISC, _A.ZERO_PAGE, 0xE7, 2, 5),
    (_M.ISC, _A.ZERO_PAGE_X, 0xF7, 2, 6), (_M.ISC, _A.ABSOLUTE, 0xEF, 3, 6),
    (_M.ISC, _A.ABSOLUTE_X, 0xFF, 3, 7), (_M.ISC, _A.ABSOLUTE_Y, 0xFB, 3, 7),
    (_M.ISC, _A.INDIRECT_X, 0xE3, 2, 8), (_M.ISC, _A.INDIRECT_Y, 0xF3, 2, 8),
    (_M.JMP, _A.ABSOLUTE, 0x4C, 3, 3), (_M.JMP, _A.INDIRECT, 0x6C, 3, 5),
    (_M.JSR, _A.ABSOLUTE, 0x20, 3, 6), (_M.KIL, _A.IMPLIED, 0x02, 1, 1),
    (_M.KIL, _A.IMPLIED, 0x12, 1, 1), (_M.KIL, _A.IMPLIED, 0x22, 1, 1),
    (_M.KIL, _A.IMPLIED, 0x32, 1, 1), (_M.KIL, _A.IMPLIED, 0x42, 1, 1),
    (_M.KIL, _A.IMPLIED, 0x52, 1, 1), (_M.KIL, _A.IMPLIED, 0x62, 1, 1),
    (_M.KIL, _A.IMPLIED, 0x72, 1, 1), (_M.KIL, _A.IMPLIED, 0x92, 1, 1),
    (_M.KIL, _A.IMPLIED, 0xB2, 1, 1), (_M.KIL, _A.IMPLIED, 0xD2, 1, 1),
    (_M.KIL, _A.IMPLIED, 0xF2, 1, 1), (_M.LAR, _A.ABSOLUTE_Y, 0xBB, 3, 4),
    (_M.LAX, _A.ZERO_PAGE, 0xA7, 2, 3), (_M.LAX, _A.ZERO_PAGE_Y, 0xB7, 2, 4),
    (_M.LAX, _A.ABSOLUTE, 0xAF, 3, 4), (_M.LAX, _A.ABSOLUTE_Y, 0xBF, 3, 4),
    (_M.LAX, _A.INDIRECT_X, 0xA3, 2, 6), (_M.LAX, _A.INDIRECT_Y, 0xB3, 2, 5),
    (_M.LDA, _A.IMMEDIATE, 0xA9, 2, 2), (_M.LDA, _A.ZERO_PAGE, 0xA5, 2, 3),
    (_M.LDA, _A.ZERO_PAGE_X, 0xB5, 2, 4), (_M.LDA, _A.ABSOLUTE, 0xAD, 3, 4),
    (_M.LDA, _A.ABSOLUTE_X, 0xBD, 3, 4), (_M.LDA, _A.ABSOLUTE_Y, 0xB9, 3, 4),
    (_M.LDA, _A.INDIRECT_X, 0xA1, 2, 6), (_M.LDA, _A.INDIRECT_Y, 0xB1, 2, 5),
    (_M.LDX, _A.IMMEDIATE, 0xA2, 2, 2), (_M.LDX, _A.ZERO_PAGE, 0xA6, 2, 3),
    (_M.LDX, _A.ZERO_PAGE_Y, 0xB6, 2, 4), (_M.LDX, _A.ABSOLUTE, 0xAE, 3, 4),
    (_M.LDX, _A.ABSOLUTE_Y, 0xBE, 3, 4), (_M.LDY, _A.IMMEDIATE, 0xA0, 2, 2),
    (_M.LDY, _A.ZERO_PAGE, 0xA4, 2, 3), (_M.LDY, _A.ZERO_PAGE_X, 0xB4, 2, 4),
    (_M.LDY, _A.ABSOLUTE, 0xAC, 3, 4), (_M.LDY, _A.ABSOLUTE_X, 0xBC, 3, 4),
    (_M.LSR, _A.ACCUMULATOR, 0x4A, 1, 2), (_M.LSR, _A.ZERO_PAGE, 0x46, 2, 5),
    (_M.LSR, _A.ZERO_PAGE_X, 0x56, 2, 6), (_M.LSR, _A.ABSOLUTE, 0x4E, 3, 6),
    (_M.LSR, _A.ABSOLUTE_X, 0x5E, 3, 7), (_M.NOP, _A.IMPLIED, 0x1A, 1, 2),
    (_M.NOP, _A.IMPLIED, 0x3A, 1, 2), (_M.NOP, _A.IMPLIED, 0x5A, 1, 2),
    (_M.NOP, _A.IMPLIED, 0x7A, 1, 2), (_M.NOP, _A.IMPLIED, 0xDA, 1, 2),
    (_M.NOP, _A.IMPLIED, 0xEA, 1, 2), (_M.NOP, _A.IMPLIED, 0xFA, 1, 2),
    (_M.ORA, _A.IMMEDIATE, 0x09, 2, 2), (_M.ORA, _A.ZERO_PAGE, 0x05, 2, 3),
    (_M.ORA, _A.ZERO_PAGE_X, 0x15, 2, 4), (_M.ORA, _A.ABSOLUTE, 0x0D, 3, 4),
    (_M.ORA, _A.ABSOLUTE_X, 0x1D, 3, 4), (_M.ORA, _A.ABSOLUTE_Y, 0x19, 3, 4),
    (_M.ORA, _A.INDIRECT_X, 0x01, 2, 6), (_M.ORA, _A.INDIRECT_Y, 0x11, 2, 5),
    (_M.PHA, _A.IMPLIED, 0x48, 1, 3), (_M.PHP, _A.IMPLIED, 0x08, 1, 3),
    (_M.PLA, _A.IMPLIED, 0x68, 1, 4), (_M.PLP, _A.IMPLIED, 0x28, 1, 4),
    (_M.RLA, _A.ZERO_PAGE, 0x27, 2, 5), (_M.RLA, _A.ZERO_PAGE_X, 0x37, 2, 6),
    (_M.RLA, _A.ABSOLUTE, 0x2F, 3, 6), (_M.RLA, _A.ABSOLUTE_X, 0x3F, 3, 7),
    (_M.RLA, _A.ABSOLUTE_Y, 0x3B, 3, 7), (_M.RLA, _A.INDIRECT_X, 0x23, 2, 8),
    (_M.RLA, _A.INDIRECT_Y, 0x33, 2, 8), (_M.ROL, _A.ACCUMULATOR, 0x2A, 1, 2),
    (_M.ROL, _A.ZERO_PAGE, 0x26, 2, 5), (_M.ROL, _A.ZERO_PAGE_X, 0x36, 2, 6),
    (_M.ROL, _A.ABSOLUTE, 0x2E, 3, 6), (_M.ROL, _A.ABSOLUTE_X, 0x3E, 3, 7),
    (_M.ROR, _A.ACCUMULATOR, 0x6A, 1, 2), (_M.ROR, _A.ZERO_PAGE, 0x66, 2, 5),
    (_M.ROR, _A.ZERO_PAGE_X, 0x76, 2, 6), (_M.ROR, _A.ABSOLUTE, 0x6E, 3, 6),
    (_M.ROR, _A.ABSOLUTE_X, 0x7E, 3, 7), (_M.RRA, _A.ZERO_PAGE, 0x67, 2, 5),
    (_M.RRA, _A.ZERO_PAGE_X, 0x77, 2, 6), (_M.RRA, _A.ABSOLUTE, 0x6F, 3, 6),
    (_M.RRA, _A.ABSOLUTE_X, 0x7F, 3, 7), (_M.RRA, _A.ABSOLUTE_Y, 0x7B, 3, 7),
    (_M.RRA, _A.INDIRECT_X, 0x63, 2, 8), (_M.RRA, _A.INDIRECT_Y, 0x73, 2, 8),
    (_M.RTI, _A.IMPLIED, 0x40, 1, 6), (_M.RTS, _A.IMPLIED, 0x60, 1, 6),
    (_M.SBC, _A.IMMEDIATE, 0xE9, 2, 2), (_M.SBC, _A.IMMEDIATE, 0xEB, 2, 2),
    (_M.SBC, _A.ZERO_PAGE, 0xE5, 2, 3), (_M.SBC, _A.ZERO_PAGE_X, 0xF5, 2, 4),
    (_M.SBC, _A.ABSOLUTE, 0xED, 3, 4), (_M.SBC, _A.ABSOLUTE_X, 0xFD, 3, 4),
    (_M.SBC, _A.ABSOLUTE_Y, 0xF9, 3, 4), (_M.SBC, _A.INDIRECT_X, 0xE1, 2, 6),
    (_M.SBC, _A.INDIRECT_Y, 0xF1, 2, 5), (_M.SEC, _A.IMPLIED, 0x38, 1, 2),
    (_M.SED, _A.IMPLIED, 0xF8, 1, 2), (_M.SEI, _A.IMPLIED, 0x78, 1, 2),
    (_M.SLO, _A.ZERO_PAGE, 0x07, 2, 5), (_M.SLO, _A.ZERO_PAGE_X, 0x17, 2, 6),
    (_M.SLO, _A.ABSOLUTE, 0x0F, 3, 6), (_M.SLO, _A.ABSOLUTE_X, 0x1F, 3, 7),
    (_M.SLO, _A.ABSOLUTE_Y, 0x1B, 3, 7), (_M.SLO, _A.INDIRECT_X, 0x03, 2, 8),
    (_M.SLO, _A.INDIRECT_Y, 0x13, 2, 8), (_M.SRE, _A.ZERO_PAGE, 0x47, 2, 5),
    (_M.SRE, _A.ZERO_PAGE_X, 0x57, 2, 6), (_M.SRE, _A.ABSOLUTE, 0x4F, 3, 6),
    (_M.SRE, _A.ABSOLUTE_X, 0x5F, 3, 7), (_M.SRE, _A.ABSOLUTE_Y, 0x5B, 3, 7),
    (_M.SRE, _A.INDIRECT_X, 0x43, 2, 8), (_M.SRE, _A.INDIRECT_Y, 0x53, 2, 8),
    (_M.STA, _A.ZERO_PAGE, 0x85, 2, 3), (_M.STA, _A.ZERO_PAGE_X, 0x95, 2, 4),
    (_M.STA, _A.ABSOLUTE, 0x8D, 3, 4), (_M.STA, _A.ABSOLUTE_X, 0x9D, 3, 5),
    (_M.STA, _A.ABSOLUTE_Y, 0x99, 3, 5), (_M.STA, _A.INDIRECT_X, 0x81, 2, 6),
    (_M.STA, _A.INDIRECT_Y, 0x91, 2, 6), (_M.STX, _A.ZERO_PAGE, 0x86, 2, 3),
    (_M.STX, _A.ZERO_PAGE_Y, 0x96, 2, 4), (_M.STX, _A.ABSOLUTE, 0x8E, 3, 4),
    (_M.STY, _A.ZERO_PAGE, 0x84, 2, 3), (_M.STY, _A.ZERO_PAGE_X, 0x94, 2, 4),
    (_M.STY, _A.ABSOLUTE, 0x8C, 3, 4), (_M.SXA, _A.ABSOLUTE_Y, 0x9E, 3, 5),
    (_M.SYA, _A.ABSOLUTE_X, 0x9C, 3, 5), (_M.TAX, _A.IMPLIED, 0xAA, 1, 2),
    (_M.TAY, _A.IMPLIED, 0xA8, 1, 2), (_M.TOP, _A.ABSOLUTE, 0x0C, 3, 4),
    (_M.TOP, _A.ABSOLUTE_X, 0x1C, 3, 4), (_M.TOP, _A.ABSOLUTE_X, 0x3C, 3, 4),
    (_M.TOP, _A.ABSOLUTE_X, 0x5C, 3, 4), (_M.TOP, _A.ABSOLUTE_X, 0x7C, 3, 4),
    (_M.TOP, _A.ABSOLUTE_X, 0xDC, 3, 4), (_M.TOP, _A.ABSOLUTE_X, 0xFC, 3, 4),
    (_M.TSX, _A.IMPLIED, 0xBA, 1, 2), (_M.TXA, _A.IMPLIED, 0x8A, 1, 2),
    (_M.TXS, _A.IMPLIED, 0x9A, 1, 2), (_M.TYA, _A.IMPLIED, 0x98, 1, 2),
    (_M.XAA, _A.IMMEDIATE, 0x8B, 2, 2), (_M.XAS, _A.ABSOLUTE_Y, 0x9B, 3, 5),
)

INSTRUCTIONS: tuple[Instruction, ...] = tuple(Instruction(*row) for row in _TABLE)

_BY_OPCODE: Mapping[int, Instruction] = MappingProxyType(
    {instruction.opcode: instruction for instruction in INSTRUCTIONS}
)


def decode(opcode: int) -> Instruction:
    """Return the instruction for an opcode byte.

    Raises ValueError if the opcode is not a byte value and LookupError if no
    instruction is defined for it.
    """
    if not 0 <= opcode <= 0xFF:
        raise ValueError(f"opcode out of range: {opcode!r}")
    try:
        return _BY_OPCODE[opcode]
    except KeyError:
        raise LookupError(f"no instruction for opcode {opcode:#04x}") from None
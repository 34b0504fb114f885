import pytest

from yumenes.instruction import (
    INSTRUCTIONS,
    AddressingMode,
    Instruction,
    Mnemonic,
    decode,
)

M = Mnemonic
A = AddressingMode

LOOKUP_CASES = [
    (M.ADC, A.IMMEDIATE, 0x69, 2, 2),
    (M.ADC, A.ZERO_PAGE, 0x65, 2, 3),
    (M.ADC, A.ZERO_PAGE_X, 0x75, 2, 4),
    (M.ADC, A.ABSOLUTE, 0x6D, 3, 4),
    (M.ADC, A.ABSOLUTE_X, 0x7D, 3, 4),
    (M.ADC, A.ABSOLUTE_Y, 0x79, 3, 4),
    (M.ADC, A.INDIRECT_X, 0x61, 2, 6),
    (M.ADC, A.INDIRECT_Y, 0x71, 2, 5),
    (M.AND, A.IMMEDIATE, 0x29, 2, 2),
    (M.AND, A.ZERO_PAGE, 0x25, 2, 3),
    (M.AND, A.ZERO_PAGE_X, 0x35, 2, 4),
    (M.AND, A.ABSOLUTE, 0x2D, 3, 4),
    (M.AND, A.ABSOLUTE_X, 0x3D, 3, 4),
    (M.AND, A.ABSOLUTE_Y, 0x39, 3, 4),
    (M.AND, A.INDIRECT_X, 0x21, 2, 6),
    (M.AND, A.INDIRECT_Y, 0x31, 2, 5),
    (M.ASL, A.ACCUMULATOR, 0x0A, 1, 2),
    (M.ASL, A.ZERO_PAGE, 0x06, 2, 5),
    (M.ASL, A.ZERO_PAGE_X, 0x16, 2, 6),
    (M.ASL, A.ABSOLUTE, 0x0E, 3, 6),
    (M.ASL, A.ABSOLUTE_X, 0x1E, 3, 7),
    (M.BCC, A.RELATIVE, 0x90, 2, 2),
    (M.BCS, A.RELATIVE, 0xB0, 2, 2),
    (M.BEQ, A.RELATIVE, 0xF0, 2, 2),
    (M.BIT, A.ZERO_PAGE, 0x24, 2, 3),
    (M.BIT, A.ABSOLUTE, 0x2C, 3, 4),
    (M.BMI, A.RELATIVE, 0x30, 2, 2),
    (M.BNE, A.RELATIVE, 0xD0, 2, 2),
    (M.BPL, A.RELATIVE, 0x10, 2, 2),
    (M.BRK, A.IMPLIED, 0x00, 1, 7),
    (M.BVC, A.RELATIVE, 0x50, 2, 2),
    (M.BVS, A.RELATIVE, 0x70, 2, 2),
    (M.CLC, A.IMPLIED, 0x18, 1, 2),
    (M.CLD, A.IMPLIED, 0xD8, 1, 2),
    (M.CLI, A.IMPLIED, 0x58, 1, 2),
    (M.CLV, A.IMPLIED, 0xB8, 1, 2),
    (M.CMP, A.IMMEDIATE, 0xC9, 2, 2),
    (M.CMP, A.ZERO_PAGE, 0xC5, 2, 3),
    (M.CMP, A.ZERO_PAGE_X, 0xD5, 2, 4),
    (M.CMP, A.ABSOLUTE, 0xCD, 3, 4),
    (M.CMP, A.ABSOLUTE_X, 0xDD, 3, 4),
    (M.CMP, A.ABSOLUTE_Y, 0xD9, 3, 4),
    (M.CMP, A.INDIRECT_X, 0xC1, 2, 6),
    (M.CMP, A.INDIRECT_Y, 0xD1, 2, 5),
    (M.CPX, A.IMMEDIATE, 0xE0, 2, 2),
    (M.CPX, A.ZERO_PAGE, 0xE4, 2, 3),
    (M.CPX, A.ABSOLUTE, 0xEC, 3, 4),
    (M.CPY, A.IMMEDIATE, 0xC0, 2, 2),
    (M.CPY, A.ZERO_PAGE, 0xC4, 2, 3),
    (M.CPY, A.ABSOLUTE, 0xCC, 3, 4),
    (M.DEC, A.ZERO_PAGE, 0xC6, 2, 5),
    (M.DEC, A.ZERO_PAGE_X, 0xD6, 2, 6),
    (M.DEC, A.ABSOLUTE, 0xCE, 3, 6),
    (M.DEC, A.ABSOLUTE_X, 0xDE, 3, 7),
    (M.DEX, A.IMPLIED, 0xCA, 1, 2),
    (M.DEY, A.IMPLIED, 0x88, 1, 2),
    (M.EOR, A.IMMEDIATE, 0x49, 2, 2),
    (M.EOR, A.ZERO_PAGE, 0x45, 2, 3),
    (M.EOR, A.ZERO_PAGE_X, 0x55, 2, 4),
    (M.EOR, A.ABSOLUTE, 0x4D, 3, 4),
    (M.EOR, A.ABSOLUTE_X, 0x5D, 3, 4),
    (M.EOR, A.ABSOLUTE_Y, 0x59, 3, 4),
    (M.EOR, A.INDIRECT_X, 0x41, 2, 6),
    (M.EOR, A.INDIRECT_Y, 0x51, 2, 5),
    (M.INC, A.ZERO_PAGE, 0xE6, 2, 5),
    (M.INC, A.ZERO_PAGE_X, 0xF6, 2, 6),
    (M.INC, A.ABSOLUTE, 0xEE, 3, 6),
    (M.INC, A.ABSOLUTE_X, 0xFE, 3, 7),
    (M.INX, A.IMPLIED, 0xE8, 1, 2),
    (M.INY, A.IMPLIED, 0xC8, 1, 2),
    (M.JMP, A.ABSOLUTE, 0x4C, 3, 3),
    (M.JMP, A.INDIRECT, 0x6C, 3, 5),
    (M.JSR, A.ABSOLUTE, 0x20, 3, 6),
    (M.LDA, A.IMMEDIATE, 0xA9, 2, 2),
    (M.LDA, A.ZERO_PAGE, 0xA5, 2, 3),
    (M.LDA, A.ZERO_PAGE_X, 0xB5, 2, 4),
    (M.LDA, A.ABSOLUTE, 0xAD, 3, 4),
    (M.LDA, A.ABSOLUTE_X, 0xBD, 3, 4),
    (M.LDA, A.ABSOLUTE_Y, 0xB9, 3, 4),
    (M.LDA, A.INDIRECT_X, 0xA1, 2, 6),
    (M.LDA, A.INDIRECT_Y, 0xB1, 2, 5),
    (M.LDX, A.IMMEDIATE, 0xA2, 2, 2),
    (M.LDX, A.ZERO_PAGE, 0xA6, 2, 3),
    (M.LDX, A.ZERO_PAGE_Y, 0xB6, 2, 4),
    (M.LDX, A.ABSOLUTE, 0xAE, 3, 4),
    (M.LDX, A.ABSOLUTE_Y, 0xBE, 3, 4),
    (M.LDY, A.IMMEDIATE, 0xA0, 2, 2),
    (M.LDY, A.ZERO_PAGE, 0xA4, 2, 3),
    (M.LDY, A.ZERO_PAGE_X, 0xB4, 2, 4),
    (M.LDY, A.ABSOLUTE, 0xAC, 3, 4),
    (M.LDY, A.ABSOLUTE_X, 0xBC, 3, 4),
    (M.LSR, A.ACCUMULATOR, 0x4A, 1, 2),
    (M.LSR, A.ZERO_PAGE, 0x46, 2, 5),
    (M.LSR, A.ZERO_PAGE_X, 0x56, 2, 6),
    (M.LSR, A.ABSOLUTE, 0x4E, 3, 6),
    (M.LSR, A.ABSOLUTE_X, 0x5E, 3, 7),
    (M.NOP, A.IMPLIED, 0xEA, 1, 2),
    (M.ORA, A.IMMEDIATE, 0x09, 2, 2),
    (M.ORA, A.ZERO_PAGE, 0x05, 2, 3),
    (M.ORA, A.ZERO_PAGE_X, 0x15, 2, 4),
    (M.ORA, A.ABSOLUTE, 0x0D, 3, 4),
    (M.ORA, A.ABSOLUTE_X, 0x1D, 3, 4),
    (M.ORA, A.ABSOLUTE_Y, 0x19, 3, 4),
    (M.ORA, A.INDIRECT_X, 0x01, 2, 6),
    (M.ORA, A.INDIRECT_Y, 0x11, 2, 5),
    (M.PHA, A.IMPLIED, 0x48, 1, 3),
    (M.PHP, A.IMPLIED, 0x08, 1, 3),
    (M.PLA, A.IMPLIED, 0x68, 1, 4),
    (M.PLP, A.IMPLIED, 0x28, 1, 4),
    (M.ROL, A.ACCUMULATOR, 0x2A, 1, 2),
    (M.ROL, A.ZERO_PAGE, 0x26, 2, 5),
    (M.ROL, A.ZERO_PAGE_X, 0x36, 2, 6),
    (M.ROL, A.ABSOLUTE, 0x2E, 3, 6),
    (M.ROL, A.ABSOLUTE_X, 0x3E, 3, 7),
    (M.ROR, A.ACCUMULATOR, 0x6A, 1, 2),
    (M.ROR, A.ZERO_PAGE, 0x66, 2, 5),
    (M.ROR, A.ZERO_PAGE_X, 0x76, 2, 6),
    (M.ROR, A.ABSOLUTE, 0x6E, 3, 6),
    (M.ROR, A.ABSOLUTE_X, 0x7E, 3, 7),
    (M.RTI, A.IMPLIED, 0x40, 1, 6),
    (M.RTS, A.IMPLIED, 0x60, 1, 6),
    (M.SBC, A.IMMEDIATE, 0xE9, 2, 2),
    (M.SBC, A.ZERO_PAGE, 0xE5, 2, 3),
    (M.SBC, A.ZERO_PAGE_X, 0xF5, 2, 4),
    (M.SBC, A.ABSOLUTE, 0xED, 3, 4),
    (M.SBC, A.ABSOLUTE_X, 0xFD, 3, 4),
    (M.SBC, A.ABSOLUTE_Y, 0xF9, 3, 4),
    (M.SBC, A.INDIRECT_X, 0xE1, 2, 6),
    (M.SBC, A.INDIRECT_Y, 0xF1, 2, 5),
    (M.SEC, A.IMPLIED, 0x38, 1, 2),
    (M.SED, A.IMPLIED, 0xF8, 1, 2),
    (M.SEI, A.IMPLIED, 0x78, 1, 2),
    (M.STA, A.ZERO_PAGE, 0x85, 2, 3),
    (M.STA, A.ZERO_PAGE_X, 0x95, 2, 4),
    (M.STA, A.ABSOLUTE, 0x8D, 3, 4),
    (M.STA, A.ABSOLUTE_X, 0x9D, 3, 5),
    (M.STA, A.ABSOLUTE_Y, 0x99, 3, 5),
    (M.STA, A.INDIRECT_X, 0x81, 2, 6),
    (M.STA, A.INDIRECT_Y, 0x91, 2, 6),
    (M.STX, A.ZERO_PAGE, 0x86, 2, 3),
    (M.STX, A.ZERO_PAGE_Y, 0x96, 2, 4),
    (M.STX, A.ABSOLUTE, 0x8E, 3, 4),
    (M.STY, A.ZERO_PAGE, 0x84, 2, 3),
    (M.STY, A.ZERO_PAGE_X, 0x94, 2, 4),
    (M.STY, A.ABSOLUTE, 0x8C, 3, 4),
    (M.TAX, A.IMPLIED, 0xAA, 1, 2),
    (M.TAY, A.IMPLIED, 0xA8, 1, 2),
    (M.TSX, A.IMPLIED, 0xBA, 1, 2),
    (M.TXA, A.IMPLIED, 0x8A, 1, 2),
    (M.TXS, A.IMPLIED, 0x9A, 1, 2),
    (M.TYA, A.IMPLIED, 0x98, 1, 2),
]


@pytest.mark.parametrize(
    "mnemonic, mode, opcode, size, cycles",
    LOOKUP_CASES,
    ids=[f"{c[0].name}-{c[1].name}".lower() for c in LOOKUP_CASES],
)
def test_lookup_table_correctness(mnemonic, mode, opcode, size, cycles):
    expected = Instruction(mnemonic, mode, opcode, size, cycles)
    assert decode(opcode) == expected


def test_every_byte_decodes_to_its_own_opcode():
    decoded = [decode(opcode) for opcode in range(256)]
    assert [instruction.opcode for instruction in decoded] == list(range(256))


def test_table_holds_each_opcode_once():
    opcodes = [instruction.opcode for instruction in INSTRUCTIONS]
    assert len(opcodes) == 256
    assert sorted(opcodes) == list(range(256))
    for instruction in INSTRUCTIONS:
        assert decode(instruction.opcode) == instruction


def test_default_instruction_is_kil():
    instruction = Instruction()
    assert instruction == Instruction(M.KIL, A.IMPLIED, 0x02, 1, 1)
    assert decode(0x02) == instruction


def test_undocumented_sbc_matches_official_sbc_except_opcode():
    assert decode(0xEB) == Instruction(M.SBC, A.IMMEDIATE, 0xEB, 2, 2)
    assert decode(0xEB).mnemonic is decode(0xE9).mnemonic


def test_official_mnemonic_flag():
    assert decode(0x69).mnemonic.is_official is True
    assert decode(0x98).mnemonic.is_official is True
    assert decode(0x0B).mnemonic.is_official is False


def test_instruction_length_matches_mode():
    one_byte = {A.IMPLIED, A.ACCUMULATOR}
    three_bytes = {A.ABSOLUTE, A.ABSOLUTE_X, A.ABSOLUTE_Y, A.INDIRECT}
    for opcode in range(256):
        instruction = decode(opcode)
        if instruction.addressing_mode in one_byte:
            assert instruction.bytes == 1
        elif instruction.addressing_mode in three_bytes:
            assert instruction.bytes == 3
        else:
            assert instruction.bytes == 2


@pytest.mark.parametrize("opcode", [-1, 256, 0x1000])
def test_decode_rejects_out_of_range(opcode):
    with pytest.raises(ValueError):
        decode(opcode)


def test_instructions_are_immutable():
    instruction = decode(0xA9)
    with pytest.raises(AttributeError):
        instruction.cycles = 9
    assert decode(0xA9).cycles == 2
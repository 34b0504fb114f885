# yumenes

Core pieces of a NES emulator, in plain Python with no dependencies:

- `yumenes.instruction` holds the 6502 opcode table, `INSTRUCTIONS`, illegal opcodes
  included. Each `Instruction` has a `mnemonic` (`Mnemonic`), an `addressing_mode`
  (`AddressingMode`), an `opcode`, a length in `bytes` and a base `cycles` count.
  `decode(opcode)` looks an opcode byte up in the table.
- `yumenes.cartridge` reads iNES (`.nes`) images into a `Cartridge`. It checks the
  header and finds the mirroring mode (`MirroringType`) and the mapper number
  (`mapper_id`). It also skips an optional 512-byte trainer.
- `yumenes.mapper` provides `MapperNROM` (mapper 0). It maps CPU addresses to PRG RAM
  (from `0x6000`) and PRG ROM (from `0x8000`), and PPU addresses to CHR ROM. A
  cartridge with a single 16 KiB PRG bank is mirrored across the whole
  `0x8000`–`0xFFFF` range.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Decoding opcodes

```python
from yumenes.instruction import AddressingMode, Mnemonic, decode

instr = decode(0x69)
assert instr.mnemonic is Mnemonic.ADC
assert instr.addressing_mode is AddressingMode.IMMEDIATE
assert (instr.bytes, instr.cycles) == (2, 2)
```

`decode` raises `ValueError` for a value outside `0x00`–`0xFF` and `LookupError` for
a byte that has no entry in the table. `Mnemonic.is_official` tells documented
mnemonics from undocumented ones.

## Loading a cartridge

```python
from yumenes.cartridge import CartridgeError, MirroringType, load_cartridge

try:
    cart = load_cartridge("game.nes")
except CartridgeError as exc:
    print(f"cannot load: {exc}")
else:
    print(cart.mirroring is MirroringType.VERTICAL, cart.mapper_id)
    reset_low = cart.mapper.prg_rom_read(0xFFFC)
    reset_high = cart.mapper.prg_rom_read(0xFFFD)
    print(hex(reset_high << 8 | reset_low))
```

`Cartridge.from_bytes` builds a cartridge from an image that is already in memory.
`Cartridge.from_file` and `load_cartridge` read the image from a path. They raise
`CartridgeError` when the file does not exist, when the image is shorter than the
16-byte header, when the header does not start with `NES\x1A`, and when the image is
too short for the PRG and CHR ROM sizes its header gives.

## The mapper

`MapperNROM.prg_ram_write` and `prg_ram_read` ignore writes and read `0` when the
cartridge has no PRG RAM. All reads and writes raise `IndexError` for an address that
falls outside the memory behind it.

## What this package does not do

It does not run games. There is no CPU that executes instructions, no PPU, no
controller input, no display and no command-line program; the package only describes
the instruction set and gives access to the contents of an NROM cartridge.
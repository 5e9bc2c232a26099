# volesim

volesim is a small console simulator for an 8-bit teaching machine. The
machine has 16 general-purpose registers, named `0` to `F`, and 256 memory
cells. Values are held as upper-case hexadecimal strings. An instruction is
four hexadecimal digits. The first digit is the opcode and the other three
are its operands.

## Installation

```
pip install .
```

## Running

```
volesim
```

The command takes no options apart from `--help`. It first asks for a memory
start location between 1 and 255. It then shows a menu:

- **A**: load instructions from a text file, one per line. Lines that are not
  exactly four hex digits are reported and skipped. Reading stops after
  `C000`.
- **B**: type instructions by hand, separated by whitespace. Entry ends at
  `C000`, or when the list no longer fits after the start location.
- **C**: show the registers, the instruction register (IR) or the program
  counter (PC).
- **D**: execute the loaded instructions in order. Each one is first stored
  in two memory cells and the memory table is printed. It is then executed
  and its messages are printed. The list is cleared afterwards.
- **E**: exit.

The simulator also stops when standard input ends.

## Instruction set

| Opcode | Form   | Effect                                                              |
|--------|--------|---------------------------------------------------------------------|
| 1      | `1RXY` | Load register R from memory cell XY                                 |
| 2      | `2RXY` | Load register R with the literal XY                                 |
| 3      | `3RXY` | Store register R in memory cell XY (`3R00` also prints the value)   |
| 4      | `40RS` | Copy register R into register S                                     |
| 5      | `5RST` | R = S + T as 8-bit two's complement integers                        |
| 6      | `6RST` | R = S + T as 8-bit floating point values                            |
| 7      | `7RST` | R = S OR T                                                          |
| 8      | `8RST` | R = S AND T                                                         |
| 9      | `9RST` | R = S XOR T                                                         |
| A      | `ARST` | R = S XOR T                                                         |
| B      | `BRXY` | Set the PC to XY if register R equals register 0                    |
| C      | `C000` | Halt                                                                |
| D      | `DRXY` | Set the PC to XY if the value in register R sorts after the text `Invalid Index` |

Memory addresses are relative to the start location and wrap around at 256.
Writes that land on cell 0 are ignored.

The 8-bit floating point format has one sign bit, a 3-bit exponent with a
bias of 4, and a 4-bit mantissa read as a fraction of 16.

## Using it as a library

The parts of the machine can be used on their own:

```python
from volesim import alu
from volesim.registers import RegisterFile
from volesim.memory import Memory
from volesim.control_unit import execute

regs = RegisterFile()
mem = Memory()
step = execute("2105", regs, mem, 0)
step = execute("2203", regs, mem, step.pc)
step = execute("5312", regs, mem, step.pc)
print(regs["3"])                  # 08
print(step.messages)              # ('Added two registers',)
print(alu.add_binary("7F", "01", 8))  # 80
```

- `volesim.alu`: conversions between hex, decimal, two's complement and the
  8-bit float format, plus the arithmetic and bitwise operations.
- `volesim.registers.RegisterFile`: the 16 registers, indexed by a hex digit.
  Any other name raises `InvalidRegisterError`.
- `volesim.memory.Memory`: the 256 cells. `set_start_location`, indexing and
  `dump` produce a 16 by 16 table.
- `volesim.control_unit.execute`: runs one instruction and returns a
  `StepResult` with the new `pc`, the `messages` it produced and a `halted`
  flag.
- `volesim.cpu.CPU`: stores instructions into memory with
  `load_next_instruction` and advances its program counter by two.
- `volesim.cli.Simulator`: the interactive menu over any pair of text
  streams, so scripts and tests can drive it.

## What it does not do

Executing runs the loaded list from first to last. It does not fetch
instructions back from memory. A jump changes the reported program counter,
but the instructions still run in list order. A halt instruction only ends
the run because loading stops at `C000`.
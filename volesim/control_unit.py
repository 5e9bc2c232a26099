"""Decoding and execution of single machine instructions.

An instruction is four upper-case hex digits ``OXYZ``.  The first digit
selects the operation; the others name registers or give a memory address
or value.  Every instruction produces a :class:`StepResult` with the program
counter after it ran and the lines of commentary it reported.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import alu
from .memory import Memory
from .registers import RegisterFile

HALT = "C000"

# Register 0 is addressed for the ``D`` comparison by a name that is not a hex
# digit, which reads as this marker rather than as a register value.
_INVALID_INDEX_READ = "Invalid Index"


@dataclass(frozen=True)
class StepResult:
    """Outcome of executing one instruction."""

    pc: int
    messages: tuple[str, ...] = ()
    halted: bool = False


def _address(instruction: str) -> int:
    return int(alu.hex_to_dec(instruction[2:]))


def load(instruction: str, registers: RegisterFile, memory: Memory) -> str:
    """``1RXY``: copy memory cell XY into register R and return the value."""
    if len(instruction) != 4:
        raise ValueError("Invalid instruction length!")
    value = memory[_address(instruction)]
    registers[instruction[1]] = value
    return value


def store(instruction: str, registers: RegisterFile, memory: Memory) -> None:
    """``3RXY``: copy register R into memory cell XY."""
    memory[_address(instruction)] = registers[instruction[1]]


def load_address(instruction: str, registers: RegisterFile) -> None:
    """``2RXY``: put the literal XY into register R."""
    registers[instruction[1]] = instruction[2:]


def copy(instruction: str, registers: RegisterFile) -> None:
    """``40RS``: copy register R into register S."""
    registers[instruction[3]] = registers[instruction[2]]


def add_content(instruction: str, registers: RegisterFile) -> None:
    """``5RST``: two's complement sum of registers S and T into register R."""
    registers[instruction[1]] = alu.add_binary(registers[instruction[2]], registers[instruction[3]])


def float_add_content(instruction: str, registers: RegisterFile) -> None:
    """``6RST``: floating-point sum of registers S and T into register R."""
    registers[instruction[1]] = alu.hex_addition_custom_float(
        registers[instruction[2]], registers[instruction[3]]
    )


def or_content(instruction: str, registers: RegisterFile) -> None:
    """``7RST``: bitwise OR of registers S and T into register R."""
    registers[instruction[1]] = alu.or_two_nums(registers[instruction[2]], registers[instruction[3]])


def and_content(instruction: str, registers: RegisterFile) -> None:
    """``8RST``: bitwise AND of registers S and T into register R."""
    registers[instruction[1]] = alu.and_two_nums(registers[instruction[2]], registers[instruction[3]])


def xor_content(instruction: str, registers: RegisterFile) -> None:
    """``9RST``: bitwise XOR of registers S and T into register R."""
    registers[instruction[1]] = alu.xor_two_nums(registers[instruction[2]], registers[instruction[3]])


def rotate_content(instruction: str, registers: RegisterFile) -> None:
    """``ARST``: store the XOR of registers S and T in register R."""
    registers[instruction[1]] = alu.xor_two_nums(registers[instruction[2]], registers[instruction[3]])


def jump(instruction: str, registers: RegisterFile, pc: int) -> int:
    """``BRXY``: return XY if register R equals register 0, else ``pc``."""
    if registers[instruction[1]] == registers["0"]:
        return _address(instruction)
    return pc


def _greater_condition(instruction: str, registers: RegisterFile) -> bool:
    return registers[instruction[1]] > _INVALID_INDEX_READ


def jump_if_greater(instruction: str, registers: RegisterFile, pc: int) -> int:
    """``DRXY``: return XY if the comparison on register R holds, else ``pc``."""
    if _greater_condition(instruction, registers):
        return _address(instruction)
    return pc


def execute(instruction: str, registers: RegisterFile, memory: Memory, pc: int) -> StepResult:
    """Execute one instruction and report the resulting program counter."""
    messages: list[str] = []
    opcode = instruction[:1]

    if opcode == "3" and instruction[2:] == "00":
        messages.append(f"----Screen Display(3R00)---- => {registers[instruction[1]]}")

    match opcode:
        case "1":
            messages.append("loaded from memory to register")
            value = load(instruction, registers, memory)
            messages.append(
                f"Loaded value: {value} from memory address: {instruction[2:4]} "
                f"into register: {instruction[1]}"
            )
        case "3":
            messages.append("loaded from register to memory")
            store(instruction, registers, memory)
        case "2":
            messages.append("loaded memory address to register")
            load_address(instruction, registers)
        case "4":
            messages.append("Copied from register to another one")
            copy(instruction, registers)
        case "5":
            messages.append("Added two registers")
            add_content(instruction, registers)
        case "6":
            messages.append("Added two float registers")
            float_add_content(instruction, registers)
        case "7":
            messages.append("OR-ed two registers")
            or_content(instruction, registers)
        case "8":
            messages.append("AND-ed two registers")
            and_content(instruction, registers)
        case "9":
            messages.append("XOR-ed two registers")
            xor_content(instruction, registers)
        case "A":
            messages.append("-ROTATED-")
            rotate_content(instruction, registers)
        case "B":
            messages.append("-JUMPED-")
            pc = jump(instruction, registers, pc)
        case "C":
            if instruction == HALT:
                messages.append("Program halted due to C000 instruction.")
                return StepResult(pc, tuple(messages), halted=True)
        case "D":
            if _greater_condition(instruction, registers):
                pc = _address(instruction)
                messages.append(f"Jumping to RAM cell : {instruction[2:]}")
        case _:
            messages.append("Invalid opcode!")

    return StepResult(pc, tuple(messages))
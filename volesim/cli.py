"""Interactive menu for loading, running and inspecting machine programs."""

from __future__ import annotations

import argparse
import re
import string
import sys
from collections.abc import Iterable
from typing import TextIO

from . import alu, control_unit
from .cpu import CPU
from .memory import Memory
from .registers import RegisterFile

MAX_MEMORY_LOCATION = 255
_RULE = "=" * 75
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_HEX_DIGITS = frozenset(string.hexdigits)
_INTEGER = re.compile(r"[+-]?\d+")

_MENU = (
    "Enter your choice: \n"
    "(A) Load Instructions from File\n"
    "(B) Enter Instructions Manually\n"
    "(C) Display State\n"
    "(D) Execute Instructions\n"
    "(E) Exit"
)


def _to_upper(text: str) -> str:
    return text.translate(_UPPER)


def is_valid_instruction(instruction: str) -> bool:
    """Return True if ``instruction`` is exactly four hex digits."""
    return len(instruction) == 4 and all(c in _HEX_DIGITS for c in instruction)


def read_instructions(lines: Iterable[str]) -> tuple[list[str], list[str]]:
    """Collect valid instructions from ``lines``, stopping after a halt.

    Returns the upper-cased valid instructions and the upper-cased lines
    that were rejected.
    """
    instructions: list[str] = []
    rejected: list[str] = []
    for raw in lines:
        line = _to_upper(raw.rstrip("\n"))
        if not is_valid_instruction(line):
            rejected.append(line)
            continue
        instructions.append(line)
        if line == control_unit.HALT:
            break
    return instructions, rejected


class _Tokens:
    """Whitespace-separated reading from a text stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._rest = ""

    def _fill(self) -> None:
        while True:
            self._rest = self._rest.lstrip()
            if self._rest:
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._rest = line

    def token(self) -> str:
        self._fill()
        parts = self._rest.split(maxsplit=1)
        self._rest = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def char(self) -> str:
        self._fill()
        first, self._rest = self._rest[0], self._rest[1:]
        return first

    def integer(self) -> int:
        self._fill()
        match = _INTEGER.match(self._rest)
        if match is None:
            raise ValueError("not an integer")
        self._rest = self._rest[match.end():]
        return int(match.group())

    def discard_line(self) -> None:
        self._rest = ""


class Simulator:
    """The menu-driven front end of the machine."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdout = stdout
        self._input = _Tokens(stdin)
        self.memory = Memory()
        self.registers = RegisterFile()
        self.cpu = CPU()
        self.pc = 0
        self.instructions: list[str] = []
        self._location = 1

    def _say(self, text: str = "", end: str = "\n") -> None:
        self.stdout.write(text + end)

    def execute_instructions(self, instructions: Iterable[str]) -> None:
        """Load each instruction into the CPU and execute it in turn."""
        for instruction in instructions:
            if self.pc > MAX_MEMORY_LOCATION - 1:
                self._say("Memory overflow! Not enough space to load more instructions.")
                break
            self._say(self.cpu.load_next_instruction(instruction), end="")
            result = control_unit.execute(instruction, self.registers, self.memory, self.pc)
            for message in result.messages:
                self._say(message)
            self.pc = result.pc

    def output_state(self) -> None:
        """Ask which part of the state to show and show it."""
        while True:
            self._say("What would you like to view? \n(A) register\n(B) IR\n(C) PC")
            choice = _to_upper(self._input.token())
            if choice == "A":
                self._say(self.registers.dump(), end="")
                return
            if choice == "B":
                self._say(f"Instruction Register (IR): {self.cpu.instruction_register}")
                return
            if choice == "C":
                self._say(f"Program Counter (PC): {self.pc}")
                return
            self._say("Invalid choice, please enter A, B, C, or D.")
            self._input.discard_line()

    def _ask_start_location(self) -> int:
        while True:
            self._say("Enter the memory start location (1 to 255): ", end="")
            try:
                location = self._input.integer()
            except ValueError:
                location = 0
            if 1 <= location <= MAX_MEMORY_LOCATION:
                return location
            self._say("Invalid location! Please enter a number between 1 and 255.")
            self._input.discard_line()

    def _load_file(self) -> None:
        self._say("Enter the file name (e.g., instructions.txt): ", end="")
        filename = self._input.token()
        try:
            with open(filename, encoding="utf-8") as handle:
                instructions, rejected = read_instructions(handle)
        except OSError:
            self._say("File does not exist. Please try again.")
            return
        for line in rejected:
            self._say(f"Invalid instruction in file: {line} (must be 4 hex characters).")
        self.instructions = instructions

    def _enter_manually(self) -> None:
        self._say("Enter instructions (4 hexadecimal characters each). Type 'C000' to end.")
        while True:
            entry = _to_upper(self._input.token())
            if not is_valid_instruction(entry):
                self._say("Invalid instruction! Must be exactly 4 hexadecimal characters.")
                continue
            if MAX_MEMORY_LOCATION - self._location < len(self.instructions):
                self._say("Number of instructions exceeds available cells in memory!")
                return
            self.instructions.append(entry)
            if entry == control_unit.HALT:
                return

    def run(self) -> None:
        """Run the menu until the user exits or the input ends."""
        try:
            self._menu()
        except EOFError:
            pass

    def _menu(self) -> None:
        self._say(_RULE)
        self._location = self._ask_start_location()
        self.memory.set_start_location(self._location)
        self._say(
            "Starting location set to hexadecimal address : "
            f"{alu.dec_to_hex(str(self._location))}."
        )
        self.cpu.pc = self._location
        self._say(_RULE)

        while True:
            self._say(_MENU)
            choice = _to_upper(self._input.char())
            if choice == "A":
                self._load_file()
            elif choice == "B":
                self._enter_manually()
            elif choice == "C":
                self.output_state()
            elif choice == "D":
                if self.instructions:
                    self.execute_instructions(self.instructions)
                    self.instructions = []
                else:
                    self._say("No instructions loaded. Please load or enter instructions first.")
            elif choice == "E":
                self._say("Program stopped.")
                return
            else:
                self._say("Invalid choice, please try again.")
                self._input.discard_line()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive simulator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="volesim", description="Interactive simulator for a small register machine."
    )
    parser.parse_args(argv)
    Simulator(sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""The processor: instruction loading into memory and the program counter."""

from __future__ import annotations

from .memory import Memory
from .registers import RegisterFile


class CPU:
    """Holds registers, memory, the instruction register and program counter."""

    def __init__(self) -> None:
        self.registers = RegisterFile()
        self.memory = Memory()
        self.instruction_register = ""
        self.pc = 0

    def load_next_instruction(self, instruction: str) -> str:
        """Store ``instruction`` in two cells at the program counter.

        The instruction register takes the instruction and a report with the
        memory table is returned.  The program counter advances by two even
        when the instruction is not four characters long, in which case
        ValueError is raised.
        """
        try:
            if len(instruction) != 4:
                raise ValueError(
                    "Invalid instruction format. Please enter a 4 hex digit instruction."
                )
            self.memory[self.pc] = instruction[:2]
            self.memory[self.pc + 1] = instruction[2:]
            self.instruction_register = instruction
            return f"Instruction [{instruction}] Stored \n" + self.memory.dump()
        finally:
            self.pc += 2
"""The machine's sixteen general-purpose registers."""

from __future__ import annotations

REGISTER_NAMES = "0123456789ABCDEF"


class InvalidRegisterError(IndexError):
    """Raised for a register name outside 0-9 and A-F."""


def register_index(index: str) -> int:
    """Return the number of the register named by the hex digit ``index``."""
    if isinstance(index, str) and len(index) == 1:
        position = REGISTER_NAMES.find(index)
        if position >= 0:
            return position
    raise InvalidRegisterError(f"Invalid Index: {index!r}")


class RegisterFile:
    """Sixteen registers addressed by an upper-case hex digit."""

    def __init__(self) -> None:
        self._values = ["00"] * len(REGISTER_NAMES)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: str) -> str:
        return self._values[register_index(index)]

    def __setitem__(self, index: str, value: str) -> None:
        self._values[register_index(index)] = value

    def dump(self) -> str:
        """Return one line per register in the form ``Register#N : value``."""
        return "".join(f"Register#{number} : {value}\n" for number, value in enumerate(self._values))
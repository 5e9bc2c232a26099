"""The machine's 256-cell main memory."""

from __future__ import annotations

MEMORY_SIZE = 256


class Memory:
    """Memory cells holding hex strings, addressed relative to a start location.

    An index is offset by the start location and wrapped around the memory
    size.  Cell 0 cannot be written through an index; such writes are ignored,
    and a read whose address falls below zero yields an empty string.
    """

    def __init__(self) -> None:
        self.size = MEMORY_SIZE
        self._cells = ["00"] * MEMORY_SIZE
        self._start_location = 1

    @property
    def start_location(self) -> int:
        return self._start_location

    def set_start_location(self, location: int) -> None:
        """Move the start location; it must lie between 1 and size - 1."""
        if not 0 < location < self.size:
            raise ValueError(
                "Invalid starting location. Please enter a valid index between 0 and "
                f"{self.size - 1}."
            )
        self._start_location = location

    def _address(self, index: int) -> int:
        # Remainder truncated toward zero, so addresses below zero stay negative.
        offset = self._start_location + index
        remainder = abs(offset) % self.size
        return -remainder if offset < 0 else remainder

    def __getitem__(self, index: int) -> str:
        address = self._address(index)
        if 0 <= address < self.size:
            return self._cells[address]
        return ""

    def __setitem__(self, index: int, value: str) -> None:
        address = self._address(index)
        if 1 <= address < self.size:
            self._cells[address] = value

    def dump(self) -> str:
        """Return the memory as a 16 by 16 table starting at the start location."""
        header = "   " + "".join(f"{column:>2X} " for column in range(16))
        lines = ["", "Memory Display (16x16 Matrix)", header]
        for row in range(16):
            base = (self._start_location + row * 16) % self.size
            cells = "".join(f"{self._cells[(base + column) % self.size]:0>2} " for column in range(16))
            lines.append(f"{base:X}: {cells}")
        return "\n".join(lines) + "\n"
"""Simulator for a small 8-bit machine with 16 registers and 256 memory cells."""

__version__ = "0.1.0"
__all__ = ["alu", "registers", "memory", "control_unit", "cpu", "cli"]
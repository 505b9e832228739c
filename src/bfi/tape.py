from __future__ import annotations

from typing import List, Optional

import numpy as np


MEMORY_SIZE = 30_000


def _wrap_byte(value: int) -> int:
    # Signed 8-bit modular arithmetic: 127 + 1 -> -128, -128 - 1 -> 127.
    return ((int(value) + 128) & 0xFF) - 128


class Tape:
    """
    Fixed-size memory of signed 8-bit cells with a wrap-around pointer.

    Moving past either end wraps to the other end; cell values wrap modulo 256.
    No operation on the tape can fail once it has been constructed.
    """

    def __init__(self, size: int = MEMORY_SIZE):
        if int(size) <= 0:
            raise ValueError(f"Tape size must be positive, got {size}")
        self.cells = np.zeros(int(size), dtype=np.int8)
        self.pointer = 0

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"Tape(size={len(self)}, pointer={self.pointer})"

    # ===== Pointer movement =====

    def move_right(self) -> None:
        if self.pointer == len(self.cells) - 1:
            self.pointer = 0
        else:
            self.pointer += 1

    def move_left(self) -> None:
        if self.pointer == 0:
            self.pointer = len(self.cells) - 1
        else:
            self.pointer -= 1

    # ===== Cell access =====

    def increment(self) -> None:
        self.write(self.read() + 1)

    def decrement(self) -> None:
        self.write(self.read() - 1)

    def read(self) -> int:
        return int(self.cells[self.pointer])

    def write(self, value: int) -> None:
        self.cells[self.pointer] = _wrap_byte(value)

    def clear(self) -> None:
        self.cells.fill(0)
        self.pointer = 0

    # ===== Inspection =====

    def snapshot(self, start: int = 0, count: Optional[int] = None) -> List[int]:
        end = len(self.cells) if count is None else min(len(self.cells), start + count)
        return [int(v) for v in self.cells[start:end]]

    def used_cells(self) -> List[int]:
        """Cells up to and including the highest nonzero one."""
        nonzero = np.flatnonzero(self.cells)
        if nonzero.size == 0:
            return []
        return self.snapshot(0, int(nonzero[-1]) + 1)

    def dump(self, count: int = 100, width: int = 8) -> str:
        values = self.snapshot(0, count)
        rows = []
        for i in range(0, len(values), width):
            row = " ".join(f"{v:4d}" for v in values[i:i + width])
            marker = '>' if i <= self.pointer < i + width else ' '
            rows.append(f"{marker} {i:5d} | {row}")
        return "\n".join(rows)

from __future__ import annotations

from typing import List

from sudokugen.exceptions import InvalidInput
from sudokugen.game_matrix import SIZE, UNSET, GameMatrix, block_index


class ConstraintIndex:
    """
    Presence sets for the 27 units of one grid.

    Each row, column and block keeps an int bit mask where bit d is set
    iff digit d occupies a cell of that unit. The index must see every
    placement and removal done on the grid it shadows.
    """

    def __init__(self) -> None:
        self.rows: List[int] = [0] * SIZE
        self.cols: List[int] = [0] * SIZE
        self.blocks: List[int] = [0] * SIZE

    @classmethod
    def from_matrix(cls, matrix: GameMatrix) -> "ConstraintIndex":
        """
        Build the index for the set cells of matrix. Raises InvalidInput
        if two set cells of one unit share a digit.
        """
        index = cls()
        for r in range(SIZE):
            for c in range(SIZE):
                d = matrix.get(r, c)
                if d == UNSET:
                    continue
                if not index.can_place(r, c, d):
                    raise InvalidInput(
                        f"Digit {d} at ({r}, {c}) conflicts with its row, "
                        "column or block"
                    )
                index.place(r, c, d)
        return index

    def used(self, r: int, c: int) -> int:
        """Mask of the digits already present in the units of (r, c)."""
        return self.rows[r] | self.cols[c] | self.blocks[block_index(r, c)]

    def can_place(self, r: int, c: int, d: int) -> bool:
        return not self.used(r, c) & (1 << d)

    def place(self, r: int, c: int, d: int) -> None:
        bit = 1 << d
        self.rows[r] |= bit
        self.cols[c] |= bit
        self.blocks[block_index(r, c)] |= bit

    def remove(self, r: int, c: int, d: int) -> None:
        bit = ~(1 << d)
        self.rows[r] &= bit
        self.cols[c] &= bit
        self.blocks[block_index(r, c)] &= bit

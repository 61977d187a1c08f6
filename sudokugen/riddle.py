from __future__ import annotations

from typing import List, Optional, Sequence

from sudokugen.game_matrix import SIZE, UNSET, GameMatrix


class Riddle(GameMatrix):
    """
    A partially filled grid with exactly one completion.

    Besides the cells, a riddle remembers which cells the player may
    write to. Cells that were set when the riddle was built are givens
    and are not writeable.
    """

    def __init__(self, board: Optional[Sequence[Sequence[int]]] = None) -> None:
        super().__init__(board)
        self.writeable: List[List[bool]] = [
            [v == UNSET for v in row] for row in self.board
        ]

    def is_writeable(self, r: int, c: int) -> bool:
        return self.writeable[r][c]

    def set_writeable(self, r: int, c: int, writeable: bool) -> None:
        self.writeable[r][c] = writeable

    def given_count(self) -> int:
        return sum(
            1 for r in range(SIZE) for c in range(SIZE) if not self.writeable[r][c]
        )

    def copy(self) -> "Riddle":
        other = Riddle(self.board)
        other.writeable = [row[:] for row in self.writeable]
        return other

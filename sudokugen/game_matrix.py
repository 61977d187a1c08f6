from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from sudokugen.exceptions import InvalidInput

log = logging.getLogger(__name__)

SIZE = 9
BLOCK_SIZE = 3
UNSET = 0
DIGITS = range(1, SIZE + 1)

Cell = int
Board = List[List[Cell]]
Pos = Tuple[int, int]

# characters accepted as "unset" in free-form text input
_UNSET_ALIASES = re.compile(r"[_?.]")


def block_index(r: int, c: int) -> int:
    """Index 0..8 of the 3x3 block containing (r, c), row-major."""
    return (r // BLOCK_SIZE) * BLOCK_SIZE + (c // BLOCK_SIZE)


def block_cells(b: int) -> List[Pos]:
    br = (b // BLOCK_SIZE) * BLOCK_SIZE
    bc = (b % BLOCK_SIZE) * BLOCK_SIZE
    return [
        (br + dr, bc + dc)
        for dr in range(BLOCK_SIZE)
        for dc in range(BLOCK_SIZE)
    ]


def empty_board() -> Board:
    return [[UNSET] * SIZE for _ in range(SIZE)]


# --------------------------
# Game matrix
# --------------------------


class GameMatrix:
    """
    A 9x9 Sudoku grid. Each cell holds UNSET (0) or a digit 1..9.

    The matrix never checks Sudoku rules on assignment; use is_valid()
    for that. It only guarantees that every cell holds a legal value.
    """

    def __init__(self, board: Optional[Sequence[Sequence[int]]] = None) -> None:
        self.board: Board = empty_board()
        if board is not None:
            self.set_all(board)

    @classmethod
    def from_rows(cls, *rows: str) -> "GameMatrix":
        return cls(GameMatrix.parse(*rows))

    @staticmethod
    def parse(*rows: str) -> Board:
        """
        Parse 9 strings of 9 characters '0'..'9' into a board.
        '0' denotes an unset cell.
        """
        if len(rows) != SIZE:
            raise InvalidInput(f"Expected {SIZE} rows, got {len(rows)}")
        return [_parse_row(line, f"row {r}") for r, line in enumerate(rows)]

    # --------------------------
    # Cell access
    # --------------------------

    def get(self, r: int, c: int) -> Cell:
        _check_pos(r, c)
        return self.board[r][c]

    def set(self, r: int, c: int, value: int) -> None:
        _check_pos(r, c)
        _check_value(value, r, c)
        self.board[r][c] = value

    def set_all(self, board: Sequence[Sequence[int]]) -> None:
        """Replace all cells. The board must be 9x9 with values 0..9."""
        if len(board) != SIZE:
            raise InvalidInput(f"Expected {SIZE} rows, got {len(board)}")
        for r, row in enumerate(board):
            if len(row) != SIZE:
                raise InvalidInput(
                    f"Row {r} has {len(row)} cells, expected {SIZE}"
                )
            for c, v in enumerate(row):
                _check_value(v, r, c)
        self.board = [list(row) for row in board]

    def clear(self) -> None:
        self.board = empty_board()

    def copy(self) -> "GameMatrix":
        return GameMatrix(self.board)

    def board_copy(self) -> Board:
        return [row[:] for row in self.board]

    def row(self, r: int) -> List[Cell]:
        return self.board[r][:]

    def column(self, c: int) -> List[Cell]:
        return [self.board[r][c] for r in range(SIZE)]

    def block(self, b: int) -> List[Cell]:
        return [self.board[r][c] for r, c in block_cells(b)]

    # --------------------------
    # Queries
    # --------------------------

    def set_count(self) -> int:
        return sum(1 for row in self.board for v in row if v != UNSET)

    def is_full(self) -> bool:
        return self.set_count() == SIZE * SIZE

    def is_valid(self) -> bool:
        """
        Checks for rule violations in rows, columns and blocks.
        Unset cells are allowed.
        """
        units: List[Iterable[Cell]] = []
        for i in range(SIZE):
            units.append(self.row(i))
            units.append(self.column(i))
            units.append(self.block(i))
        for unit in units:
            seen = set()
            for v in unit:
                if v == UNSET:
                    continue
                if v in seen:
                    return False
                seen.add(v)
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameMatrix):
            return NotImplemented
        return self.board == other.board

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.board!r})"

    def __str__(self) -> str:
        return "\n".join(
            "".join(str(v) if v != UNSET else "_" for v in row)
            for row in self.board
        )


def parse_text(text: str) -> GameMatrix:
    """
    Read a grid from free-form text: one row per line, blank lines and
    surrounding whitespace ignored, '_', '?' and '.' accepted for unset.
    Errors name the 1-based line of the text they were found on.
    """
    numbered = [
        (lineno, _UNSET_ALIASES.sub("0", line.strip()))
        for lineno, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    log.debug("Parsing %d non-empty lines", len(numbered))
    if len(numbered) != SIZE:
        raise InvalidInput(f"Expected {SIZE} rows, got {len(numbered)}")
    return GameMatrix(
        [_parse_row(line, f"line {lineno}") for lineno, line in numbered]
    )


def _parse_row(line: str, where: str) -> List[Cell]:
    if not isinstance(line, str):
        raise InvalidInput(
            f"{where.capitalize()} must be a string, got {line!r}"
        )
    if len(line) != SIZE:
        raise InvalidInput(
            f"{where.capitalize()} has length {len(line)}, "
            f"expected {SIZE}: {line!r}"
        )
    row_out: List[Cell] = []
    for c, ch in enumerate(line):
        if not ("0" <= ch <= "9"):
            raise InvalidInput(
                f"Illegal character {ch!r} in {where}, column {c}"
            )
        row_out.append(ord(ch) - ord("0"))
    return row_out


def _check_pos(r: int, c: int) -> None:
    if not (0 <= r < SIZE and 0 <= c < SIZE):
        raise InvalidInput(f"Cell ({r}, {c}) is outside the {SIZE}x{SIZE} grid")


def _check_value(value: int, r: int, c: int) -> None:
    # bool is an int subclass but never a cell value
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"Cell ({r}, {c}) holds non-integer {value!r}")
    if not (UNSET <= value <= SIZE):
        raise InvalidInput(f"Cell ({r}, {c}) holds out-of-range value {value}")

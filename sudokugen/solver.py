from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence

from sudokugen.constraints import ConstraintIndex
from sudokugen.exceptions import InvalidInput, PreconditionViolation
from sudokugen.game_matrix import DIGITS, SIZE, UNSET, GameMatrix, Pos

log = logging.getLogger(__name__)

# Given the cell being filled, returns the digits to try in order.
CandidateOrder = Callable[[int, int], Sequence[int]]

# Given the index, the free cells and the search depth, returns the
# index (at least depth) in free of the cell to fill next.
CellChoice = Callable[[ConstraintIndex, Sequence[Pos], int], int]

_ASCENDING = tuple(DIGITS)


def ascending_order(r: int, c: int) -> Sequence[int]:
    return _ASCENDING


class RandomOrder:
    """Candidate order that draws a fresh permutation of 1..9 per cell."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def __call__(self, r: int, c: int) -> Sequence[int]:
        return self.rng.sample(_ASCENDING, len(_ASCENDING))


def row_major(index: ConstraintIndex, free: Sequence[Pos], depth: int) -> int:
    return depth


def most_constrained(
    index: ConstraintIndex, free: Sequence[Pos], depth: int
) -> int:
    """
    Minimum Remaining Values heuristic: the free cell whose units already
    hold the most digits, ties broken row-major.
    """
    return min(
        range(depth, len(free)),
        key=lambda i: (-bin(index.used(*free[i])).count("1"), free[i]),
    )


# --------------------------
# Backtracking solver
# --------------------------


class Solver:
    """
    Depth-first backtracking solver.

    Unset cells are visited in the order picked by the cell choice,
    row-major by default. At each cell the digits given by the candidate
    order are tried; every digit that is legal according to the
    constraint index is placed, the search recurses into the next cell,
    and the placement is undone on return.
    The search stops as soon as max_solutions solutions were collected.
    """

    def __init__(
        self,
        max_solutions: int = 1,
        order: CandidateOrder = ascending_order,
        cells: CellChoice = row_major,
    ) -> None:
        if isinstance(max_solutions, bool) or not isinstance(max_solutions, int):
            raise PreconditionViolation(
                f"max_solutions must be an int, got {max_solutions!r}"
            )
        if max_solutions <= 0:
            raise PreconditionViolation(
                f"max_solutions must be positive, got {max_solutions}"
            )
        self.max_solutions = max_solutions
        self.order = order
        self.cells = cells

        # per-run state, reset by solve()
        self.board: List[List[int]] = []
        self.index = ConstraintIndex()
        self.free: List[Pos] = []
        self.solutions: List[GameMatrix] = []
        self.visited = 0

    @property
    def solutions_found(self) -> int:
        return len(self.solutions)

    def solve(self, matrix: GameMatrix) -> List[GameMatrix]:
        """
        Returns up to max_solutions completions of matrix, in the order
        they were found. An unsolvable grid, including one whose set
        cells already break a rule, gives an empty list. The input
        matrix is left untouched.
        """
        self.board = matrix.board_copy()
        self.solutions = []
        self.visited = 0
        try:
            self.index = ConstraintIndex.from_matrix(matrix)
        except InvalidInput as e:
            log.debug("Treating grid as unsolvable: %s", e)
            return []

        self.free = [
            (r, c)
            for r in range(SIZE)
            for c in range(SIZE)
            if self.board[r][c] == UNSET
        ]
        self._dfs(0)
        log.debug(
            "Found %d solution(s) for %d free cells after %d placements",
            len(self.solutions),
            len(self.free),
            self.visited,
        )
        return self.solutions

    def _dfs(self, depth: int) -> bool:
        """Returns True when the search must stop."""
        if depth == len(self.free):
            self.solutions.append(GameMatrix(self.board))
            return len(self.solutions) >= self.max_solutions

        # move the chosen cell to the front of the unfilled part
        pick = self.cells(self.index, self.free, depth)
        free = self.free
        free[depth], free[pick] = free[pick], free[depth]
        r, c = free[depth]
        done = False
        for d in self.order(r, c):
            if not self.index.can_place(r, c, d):
                continue
            self.place(r, c, d)
            done = self._dfs(depth + 1)
            self.unplace(r, c, d)
            if done:
                break
        free[depth], free[pick] = free[pick], free[depth]
        return done

    def place(self, r: int, c: int, d: int) -> None:
        self.board[r][c] = d
        self.index.place(r, c, d)
        self.visited += 1

    def unplace(self, r: int, c: int, d: int) -> None:
        self.board[r][c] = UNSET
        self.index.remove(r, c, d)


def solve(matrix: GameMatrix, max_solutions: int = 1) -> List[GameMatrix]:
    """Deterministic solve with ascending candidate order."""
    return Solver(max_solutions).solve(matrix)

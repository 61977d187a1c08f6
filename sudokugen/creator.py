from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from random import randrange
from typing import Optional

from sudokugen.exceptions import PreconditionViolation
from sudokugen.game_matrix import SIZE, UNSET, GameMatrix
from sudokugen.riddle import Riddle
from sudokugen.solver import RandomOrder, Solver, most_constrained

log = logging.getLogger(__name__)


@dataclass
class Creator:
    """
    Creates full Sudoku grids and riddles derived from them.

    Each Creator owns its random source. Pass a seed for reproducible
    output, or an rng to share a caller-managed random.Random. With an
    rng the seed stays None, since the rng alone decides the output.
    Without either a random seed is drawn. Separate Creators never share
    random state.
    """

    seed: Optional[int] = None
    rng: Optional[random.Random] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.rng is not None:
            if self.seed is not None:
                raise PreconditionViolation("Pass either a seed or an rng")
            return
        if self.seed is None:
            self.seed = randrange(2**31 - 1)
        self.rng = random.Random(self.seed)

    def create_full(self) -> GameMatrix:
        """
        Returns a completely filled valid grid. The empty grid is solved
        with a fresh random digit order at every cell and the first
        solution is taken.
        """
        solver = Solver(max_solutions=1, order=RandomOrder(self.rng))
        solutions = solver.solve(GameMatrix())
        # an empty grid always has a completion
        full = solutions[0]
        log.debug("Created full grid after %d placements", solver.visited)
        return full

    def create_riddle(self, full: GameMatrix) -> Riddle:
        """
        Derive a riddle from a full grid by clearing cells in random order.

        A cleared cell stays cleared only if the remaining grid still has
        exactly one solution, otherwise its digit is put back. Every cell
        is tried once, so the result is not guaranteed to have the fewest
        possible clues.
        """
        if not full.is_full():
            raise PreconditionViolation(
                f"Riddles need a full grid, got {full.set_count()} set cells"
            )
        if not full.is_valid():
            raise PreconditionViolation("Riddles need a valid grid")

        puzzle = full.copy()
        cells = [(r, c) for r in range(SIZE) for c in range(SIZE)]
        self.rng.shuffle(cells)

        removed = 0
        for r, c in cells:
            saved = puzzle.get(r, c)
            if saved == UNSET:
                continue
            puzzle.set(r, c, UNSET)

            # uniqueness only, so visit the most constrained cells first
            checker = Solver(max_solutions=2, cells=most_constrained)
            if len(checker.solve(puzzle)) == 1:
                removed += 1
            else:
                # not unique, revert removal
                puzzle.set(r, c, saved)

        log.debug(
            "Riddle keeps %d givens, %d cells cleared",
            SIZE * SIZE - removed,
            removed,
        )
        return Riddle(puzzle.board)


def create_full(rng: Optional[random.Random] = None) -> GameMatrix:
    return Creator(rng=rng).create_full()


def create_riddle(full: GameMatrix, rng: Optional[random.Random] = None) -> Riddle:
    return Creator(rng=rng).create_riddle(full)

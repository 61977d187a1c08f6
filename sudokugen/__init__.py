from sudokugen.constraints import ConstraintIndex
from sudokugen.creator import Creator, create_full, create_riddle
from sudokugen.exceptions import InvalidInput, PreconditionViolation, SudokuError
from sudokugen.game_matrix import GameMatrix, parse_text
from sudokugen.riddle import Riddle
from sudokugen.solver import (
    RandomOrder,
    Solver,
    ascending_order,
    most_constrained,
    row_major,
    solve,
)

__all__ = [
    "ConstraintIndex",
    "Creator",
    "GameMatrix",
    "InvalidInput",
    "PreconditionViolation",
    "RandomOrder",
    "Riddle",
    "Solver",
    "SudokuError",
    "ascending_order",
    "create_full",
    "create_riddle",
    "most_constrained",
    "parse_text",
    "row_major",
    "solve",
]

# json_array.py

import json

from sudokugen.game_matrix import GameMatrix
from .base_formatter import GameMatrixFormatter


class JsonArrayFormatter(GameMatrixFormatter):
    """
    A JSON array of grids. Each grid is a 9x9 array of ints with 0 for
    unset cells.
    """

    def document_start(self) -> str:
        return "[\n"

    def document_end(self) -> str:
        return "\n]\n"

    def separator(self) -> str:
        return ",\n"

    def format(self, matrix: GameMatrix) -> str:
        return json.dumps(matrix.board)

# plain_text.py

from sudokugen.game_matrix import GameMatrix
from .base_formatter import GameMatrixFormatter


class PlainTextFormatter(GameMatrixFormatter):
    """
    One line of digits per row, '_' for unset cells and a blank line
    after every grid. The output can be read back with parse_text().
    """

    def format(self, matrix: GameMatrix) -> str:
        return str(matrix) + "\n\n"

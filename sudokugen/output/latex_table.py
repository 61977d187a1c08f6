# latex_table.py

from sudokugen.game_matrix import BLOCK_SIZE, UNSET, GameMatrix
from .base_formatter import GameMatrixFormatter


class LatexTableFormatter(GameMatrixFormatter):
    """
    A LaTeX tabular per grid with rules around the 3x3 blocks,
    wrapped in a minimal standalone document.
    """

    def document_start(self) -> str:
        return (
            "\\documentclass{article}\n"
            "\\begin{document}\n"
        )

    def document_end(self) -> str:
        return "\\end{document}\n"

    def format(self, matrix: GameMatrix) -> str:
        column_spec = "|" + "|".join(["c" * BLOCK_SIZE] * BLOCK_SIZE) + "|"
        lines = [
            "\\begin{tabular}{" + column_spec + "}",
            "\\hline",
        ]
        for r, row in enumerate(matrix.board):
            cells = [str(v) if v != UNSET else " " for v in row]
            lines.append(" & ".join(cells) + " \\\\")
            if r % BLOCK_SIZE == BLOCK_SIZE - 1:
                lines.append("\\hline")
        lines.append("\\end{tabular}")
        return "\n".join(lines) + "\n\n"

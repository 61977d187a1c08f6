# markdown_table.py

from sudokugen.game_matrix import SIZE, UNSET, GameMatrix
from .base_formatter import GameMatrixFormatter


class MarkdownTableFormatter(GameMatrixFormatter):
    """A Markdown table per grid. Unset cells are left empty."""

    def format(self, matrix: GameMatrix) -> str:
        lines = [
            "|" + "|".join("   " for _ in range(SIZE)) + "|",
            "|" + "|".join("---" for _ in range(SIZE)) + "|",
        ]
        for row in matrix.board:
            cells = [f" {v} " if v != UNSET else "   " for v in row]
            lines.append("|" + "|".join(cells) + "|")
        return "\n".join(lines) + "\n\n"

# base_formatter.py

from abc import ABC, abstractmethod
from typing import Iterable

from sudokugen.game_matrix import GameMatrix


class GameMatrixFormatter(ABC):
    """
    Abstract base for all output formats.
    A document is document_start(), then each formatted grid with
    separator() between grids, then document_end().
    """

    def document_start(self) -> str:
        return ""

    def document_end(self) -> str:
        return ""

    def separator(self) -> str:
        return ""

    @abstractmethod
    def format(self, matrix: GameMatrix) -> str:
        """Render one grid. The grid is only read."""
        ...

    def format_all(self, matrices: Iterable[GameMatrix]) -> str:
        """Render a whole document holding the given grids."""
        body = self.separator().join(self.format(m) for m in matrices)
        return self.document_start() + body + self.document_end()

# exceptions.py


class SudokuError(Exception):
    """Base class for all errors raised by sudokugen."""


class InvalidInput(SudokuError, ValueError):
    """Malformed grid text, wrong dimensions or an out-of-range cell value."""


class PreconditionViolation(SudokuError):
    """An operation was called with arguments it does not accept."""

from .base_formatter import GameMatrixFormatter
from .json_array import JsonArrayFormatter
from .latex_table import LatexTableFormatter
from .markdown_table import MarkdownTableFormatter
from .plain_text import PlainTextFormatter

FORMATTERS = {
    "plain": PlainTextFormatter,
    "markdown": MarkdownTableFormatter,
    "latex": LatexTableFormatter,
    "json": JsonArrayFormatter,
}

__all__ = [
    "FORMATTERS",
    "GameMatrixFormatter",
    "JsonArrayFormatter",
    "LatexTableFormatter",
    "MarkdownTableFormatter",
    "PlainTextFormatter",
]

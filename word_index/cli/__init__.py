from .cli import WordIndexShell, build_parser, main
from .report import statistics_lines, statistics_panel, word_lines, words_table

__all__ = [
    "WordIndexShell",
    "build_parser",
    "main",
    "statistics_lines",
    "statistics_panel",
    "word_lines",
    "words_table",
]

# report.py - turns the index aggregates into text lines and rich renderables

from __future__ import annotations

from itertools import islice
from typing import List, Optional

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from word_index.core.avl_tree import EmptyWordlistError, Wordlist

NO_DATA = "(none)"

# labels right-aligned so the colons line up
_LABELS = (
    "Number of different words",
    "Total number of words",
    "Most frequent word",
    "Number of singletons",
)
_WIDTH = max(len(label) for label in _LABELS)


def _most_frequent_text(wl: Wordlist) -> str:
    try:
        word, count = wl.most_frequent()
    except EmptyWordlistError:
        return NO_DATA
    return f"{word} {count}"


def _singletons_text(wl: Wordlist, show_percent: bool = True) -> str:
    n = wl.singletons()
    if not show_percent:
        return str(n)
    different = wl.different_words()
    pct = 100.0 * n / different if different else 0.0
    return f"{n} ({pct:.0f}%)"


def statistics_rows(wl: Wordlist, show_percent: bool = True) -> List[tuple]:
    """(label, value) pairs in report order."""
    values = (
        str(wl.different_words()),
        str(wl.total_words()),
        _most_frequent_text(wl),
        _singletons_text(wl, show_percent),
    )
    return list(zip(_LABELS, values))


def statistics_lines(wl: Wordlist, show_percent: bool = True) -> List[str]:
    """
    Plain-text statistics report:
        Number of different words: 5
            Total number of words: 7
               Most frequent word: the 3
             Number of singletons: 4 (80%)
    """
    return [f"{label:>{_WIDTH}}: {value}" for label, value in statistics_rows(wl, show_percent)]


def word_lines(wl: Wordlist, limit: Optional[int] = None) -> List[str]:
    """'<rank>. <word> <count>' for each word in sorted order."""
    entries = wl.enumerate_sorted()
    if limit:
        entries = islice(entries, limit)
    return [f"{rank}. {word} {count}" for rank, word, count in entries]


def statistics_panel(wl: Wordlist, show_percent: bool = True) -> Panel:
    table = Table.grid(padding=(0, 1, 0, 0))
    table.add_column(justify="right", style="cyan")
    table.add_column(style="bold")
    for label, value in statistics_rows(wl, show_percent):
        table.add_row(f"{label}:", Text(value))
    return Panel(table, title="Word statistics", border_style="magenta", expand=False)


def words_table(wl: Wordlist, limit: Optional[int] = None) -> Table:
    """Ranked table of words; singletons dimmed, the most frequent highlighted."""
    top = None
    if wl.different_words():
        top = wl.most_frequent()[0]

    table = Table(title="Words", box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Word", style="bold")
    table.add_column("Count", justify="right", style="magenta")

    entries = wl.enumerate_sorted()
    if limit:
        entries = islice(entries, limit)
    for rank, word, count in entries:
        if word == top:
            style = "green"
        elif count == 1:
            style = "dim"
        else:
            style = ""
        table.add_row(str(rank), Text(word, style=style), str(count))
    return table

# word_index/context/tokenizer.py
# whitespace tokenizer + file ingestion feeding the word index

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List, Union

if TYPE_CHECKING:
    from word_index.core.avl_tree import Wordlist

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def tokenize_line(line: str) -> List[str]:
    """
    Split one line of text into tokens on any whitespace.
    Tokens are kept verbatim: no case folding, punctuation stays attached.
    """
    if not line:
        return []
    return line.split()


def iter_file_tokens(path: PathLike, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield every token of a text file in the order encountered.
    Blank lines are skipped. Raises FileNotFoundError/OSError if the file
    can't be opened.
    """
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            if not line.strip():
                continue
            yield from tokenize_line(line)


def ingest_file(wordlist: "Wordlist", path: PathLike, encoding: str = "utf-8") -> int:
    """Insert every token of `path` into `wordlist`. Returns how many tokens were read."""
    n = 0
    for token in iter_file_tokens(path, encoding=encoding):
        wordlist.insert(token)
        n += 1
    logger.info("ingested %d tokens from %s (%d unique)", n, path, wordlist.different_words())
    return n

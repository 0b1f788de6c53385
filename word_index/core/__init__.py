"""
word_index.core

The balanced-tree engine behind the word index.
Contains:
 - AVLNode: one unique word with its occurrence counter
 - Wordlist: AVL-balanced index (insert/remove/lookup + aggregate queries)
 - EmptyWordlistError: raised by aggregates that need at least one word
"""

from .avl_tree import AVLNode, EmptyWordlistError, Wordlist

__all__ = [
    "AVLNode",
    "Wordlist",
    "EmptyWordlistError",
]

"""
word_index - word-frequency index on top of a self-balancing binary search tree.
"""

from .core import AVLNode, EmptyWordlistError, Wordlist

__all__ = ["AVLNode", "Wordlist", "EmptyWordlistError"]

__version__ = "0.1.0"

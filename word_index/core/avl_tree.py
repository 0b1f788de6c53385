# avl_tree.py
# Word-frequency index backed by an AVL tree (height-balanced BST).
# Each node holds one unique word and how many times it was inserted.
# Insert/remove rebalance on the way back up, so lookups stay O(log n).

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

Word = str
Count = int
Entry = Tuple[Word, Count]
RankedEntry = Tuple[int, Word, Count]


class EmptyWordlistError(ValueError):
    """Raised when an aggregate needs at least one word and the index is empty."""


class AVLNode:
    """
    A single node in the tree.
    word: the key (lexicographic order)
    count: occurrences of the word, always >= 1
    height: height of the subtree rooted here (leaf = 0)
    parent: back-reference used while re-linking rotations, never ownership
    """

    __slots__ = ("word", "count", "height", "left", "right", "parent")

    def __init__(self, word: Word) -> None:
        self.word = word
        self.count = 1
        self.height = 0
        self.left: Optional[AVLNode] = None
        self.right: Optional[AVLNode] = None
        self.parent: Optional[AVLNode] = None

    def __repr__(self) -> str:
        return f"AVLNode({self.word!r}, count={self.count}, height={self.height})"


def _height(node: Optional[AVLNode]) -> int:
    # absent subtree counts as -1 so a childless leaf ends up at 0
    return node.height if node is not None else -1


def _balance(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


class Wordlist:
    """
    Balanced word index.

    Used by the ingestion layer (one insert per token) and by the report
    layer (aggregate queries). Not thread-safe; wrap calls in a lock if an
    instance must be shared.
    """

    def __init__(self, words: Optional[Iterable[Word]] = None) -> None:
        self._root: Optional[AVLNode] = None
        self._size = 0
        if words is not None:
            self.insert_many(words)

    @classmethod
    def from_file(cls, path, encoding: str = "utf-8") -> "Wordlist":
        """Build an index from every whitespace-separated token of a text file."""
        from word_index.context.tokenizer import ingest_file

        wl = cls()
        ingest_file(wl, path, encoding=encoding)
        return wl

    @property
    def root(self) -> Optional[AVLNode]:
        """Root node, for inspection only. Mutating it breaks the invariants."""
        return self._root

    def height(self) -> int:
        """Height of the whole tree (-1 when empty)."""
        return _height(self._root)

    # insertion -----------------------------------------------------------------
    def insert(self, word: Word) -> None:
        """
        Add one occurrence of `word`.
        A repeated word only bumps its counter; a new word gets a node and the
        path back to the root is rebalanced.
        """
        self._root = self._insert(self._root, word)
        self._root.parent = None

    def insert_many(self, words: Iterable[Word]) -> None:
        for w in words:
            self.insert(w)

    def _insert(self, node: Optional[AVLNode], word: Word) -> AVLNode:
        if node is None:
            self._size += 1
            logger.debug("new word %r (unique=%d)", word, self._size)
            return AVLNode(word)

        if word < node.word:
            child = self._insert(node.left, word)
            node.left = child
            child.parent = node
        elif word > node.word:
            child = self._insert(node.right, word)
            node.right = child
            child.parent = node
        else:
            node.count += 1
            return node

        _update_height(node)
        balance = _balance(node)

        # which side the new word fell is decided against the child's word
        if balance > 1 and word < node.left.word:
            return self._rotate_right(node)
        if balance < -1 and word > node.right.word:
            return self._rotate_left(node)
        if balance > 1 and word > node.left.word:
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        if balance < -1 and word < node.right.word:
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        return node

    # removal -------------------------------------------------------------------
    def remove(self, word: Word) -> bool:
        """Delete `word` with all its occurrences. Returns False if it was absent."""
        self._root, found = self._remove(self._root, word)
        if self._root is not None:
            self._root.parent = None
        if found:
            logger.debug("removed %r (unique=%d)", word, self._size)
        return found

    def _remove(self, node: Optional[AVLNode], word: Word) -> Tuple[Optional[AVLNode], bool]:
        """Remove `word` below `node`. Returns (new subtree root, whether it was there)."""
        if node is None:
            return None, False

        if word < node.word:
            node.left, found = self._remove(node.left, word)
        elif word > node.word:
            node.right, found = self._remove(node.right, word)
        else:
            if node.left is None or node.right is None:
                child = node.left if node.left is not None else node.right
                if child is not None:
                    child.parent = node.parent
                node.left = node.right = node.parent = None
                self._size -= 1
                return child, True

            # two children: take over the in-order successor's content
            succ = self._successor(node.right)
            node.word = succ.word
            node.count = succ.count
            node.right, _ = self._remove(node.right, succ.word)
            found = True

        if not found:
            return node, False
        return self._rebalance_after_remove(node), True

    def _rebalance_after_remove(self, node: AVLNode) -> AVLNode:
        _update_height(node)
        balance = _balance(node)

        # after a deletion the heavy side is read off the child's balance
        if balance > 1 and _balance(node.left) >= 0:
            return self._rotate_right(node)
        if balance > 1 and _balance(node.left) < 0:
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        if balance < -1 and _balance(node.right) <= 0:
            return self._rotate_left(node)
        if balance < -1 and _balance(node.right) > 0:
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        return node

    @staticmethod
    def _successor(node: AVLNode) -> AVLNode:
        """Leftmost node of the subtree rooted at `node`."""
        while node.left is not None:
            node = node.left
        return node

    # rotations -----------------------------------------------------------------
    def _rotate_left(self, node: AVLNode) -> AVLNode:
        new_root = node.right
        subtree = new_root.left

        new_root.left = node
        node.right = subtree

        if subtree is not None:
            subtree.parent = node
        new_root.parent = node.parent
        node.parent = new_root
        self._relink(new_root, node)

        _update_height(node)
        _update_height(new_root)
        logger.debug("rotate left at %r -> %r", node.word, new_root.word)
        return new_root

    def _rotate_right(self, node: AVLNode) -> AVLNode:
        new_root = node.left
        subtree = new_root.right

        new_root.right = node
        node.left = subtree

        if subtree is not None:
            subtree.parent = node
        new_root.parent = node.parent
        node.parent = new_root
        self._relink(new_root, node)

        _update_height(node)
        _update_height(new_root)
        logger.debug("rotate right at %r -> %r", node.word, new_root.word)
        return new_root

    def _relink(self, new_root: AVLNode, old_root: AVLNode) -> None:
        """Hang `new_root` where `old_root` used to be under its former parent."""
        parent = new_root.parent
        if parent is None:
            self._root = new_root
        elif parent.left is old_root:
            parent.left = new_root
        else:
            parent.right = new_root

    # lookup --------------------------------------------------------------------
    def _find(self, word: Word) -> Optional[AVLNode]:
        node = self._root
        while node is not None:
            if word == node.word:
                return node
            node = node.left if word < node.word else node.right
        return None

    def contains(self, word: Word) -> bool:
        return self._find(word) is not None

    def get_count(self, word: Word) -> Count:
        """Occurrences of `word`, 0 when it was never inserted."""
        node = self._find(word)
        return node.count if node is not None else 0

    # aggregates ----------------------------------------------------------------
    def _nodes(self) -> Iterator[AVLNode]:
        """Pre-order walk with an explicit stack."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def different_words(self) -> int:
        return self._size

    def total_words(self) -> int:
        return sum(n.count for n in self._nodes())

    def singletons(self) -> int:
        """Number of words seen exactly once."""
        return sum(1 for n in self._nodes() if n.count == 1)

    def most_frequent(self) -> Entry:
        """
        Return (word, count) of the most frequent word.
        Ties go to the lexicographically smallest word.
        Raises EmptyWordlistError when nothing was inserted.
        """
        if self._root is None:
            raise EmptyWordlistError("The word list is empty.")
        best = min(self._nodes(), key=lambda n: (-n.count, n.word))
        return best.word, best.count

    def enumerate_sorted(self) -> Iterator[RankedEntry]:
        """
        Yield (rank, word, count) in ascending word order, rank starting at 1.
        Each call starts a fresh in-order walk.
        """
        rank = 1
        stack: List[AVLNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield rank, node.word, node.count
            rank += 1
            node = node.right

    # copy / assignment / teardown ----------------------------------------------
    def copy(self) -> "Wordlist":
        """Deep copy with the same shape, heights and counts."""
        other = Wordlist()
        other._root = self._copy_subtree(self._root, None)
        other._size = self._size
        return other

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Wordlist":
        return self.copy()

    def assign(self, other: "Wordlist") -> "Wordlist":
        """Replace this index's contents with a deep copy of `other`."""
        if other is self:
            return self
        self.clear()
        self._root = self._copy_subtree(other._root, None)
        self._size = other._size
        return self

    @classmethod
    def _copy_subtree(cls, node: Optional[AVLNode], parent: Optional[AVLNode]) -> Optional[AVLNode]:
        if node is None:
            return None
        dup = AVLNode(node.word)
        dup.count = node.count
        dup.height = node.height
        dup.parent = parent
        dup.left = cls._copy_subtree(node.left, dup)
        dup.right = cls._copy_subtree(node.right, dup)
        return dup

    def clear(self) -> None:
        """Release every node, breaking child and parent links one node at a time."""
        released = 0
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.left = node.right = node.parent = None
            released += 1
        if released:
            logger.debug("released %d nodes", released)
        self._root = None
        self._size = 0

    # python protocol -----------------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[Entry]:
        for _rank, word, count in self.enumerate_sorted():
            yield word, count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wordlist):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Wordlist(unique={self._size}, height={self.height()})"

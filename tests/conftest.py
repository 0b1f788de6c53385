# tests/conftest.py - shared fixtures for the word index tests

import pytest

from word_index.core.avl_tree import Wordlist


def _walk(node, lo, hi, parent):
    """Check one subtree, return (height, node_count)."""
    if node is None:
        return -1, 0
    assert node.parent is parent, f"bad parent link at {node.word!r}"
    assert node.count >= 1
    if lo is not None:
        assert node.word > lo, f"{node.word!r} out of order (must be > {lo!r})"
    if hi is not None:
        assert node.word < hi, f"{node.word!r} out of order (must be < {hi!r})"
    lh, lc = _walk(node.left, lo, node.word, node)
    rh, rc = _walk(node.right, node.word, hi, node)
    assert abs(lh - rh) <= 1, f"unbalanced at {node.word!r}: {lh} vs {rh}"
    assert node.height == 1 + max(lh, rh), f"stale height at {node.word!r}"
    return node.height, 1 + lc + rc


def _check(wl: Wordlist):
    _height, n = _walk(wl.root, None, None, None)
    assert n == wl.different_words() == len(wl)
    words = [w for w, _c in wl]
    assert words == sorted(set(words))


@pytest.fixture
def check_avl():
    """Assert BST order, balance, heights, parent links and the cached size."""
    return _check


@pytest.fixture
def sample_words():
    return ["the", "quick", "brown", "fox", "the", "lazy", "the"]


@pytest.fixture
def sample_file(tmp_path):
    p = tmp_path / "sample.txt"
    p.write_text(
        "the quick brown fox\n"
        "\n"
        "jumps over the lazy dog\n"
        "   the   end\n",
        encoding="utf-8",
    )
    return p

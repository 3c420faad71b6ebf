"""Shared fixtures for Word Scramble tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from wordscramble.dictionary import Dictionary
from wordscramble.game import Round
from wordscramble.words import RootWordSource


@pytest.fixture
def small_dictionary() -> Dictionary:
    """Hand-picked English words inserted directly via _insert(). No file I/O."""
    d = Dictionary("en")
    words = [
        # from "silkworm"
        "silk", "milk", "worm", "worms", "work", "works", "kiln", "slow",
        "mows", "lows", "rows", "owls", "swirl", "works",
        # from "listen"
        "tinsel", "silent", "enlist", "inlet", "lens", "tile", "tiles",
        "line", "lines", "nest", "list", "lint",
        # from "apple"
        "leap", "pale", "plea", "peal", "apple",
        # from "book"
        "book", "boo", "kobo",
    ]
    for w in words:
        d._insert(w)
    return d


@pytest.fixture
def word_list(tmp_path: Path) -> Path:
    path = tmp_path / "start.txt"
    path.write_text("silkworm\n", encoding="utf-8")
    return path


@pytest.fixture
def game(word_list: Path, small_dictionary: Dictionary) -> Round:
    """A started round whose root word is always "silkworm"."""
    g = Round(RootWordSource(word_list, seed=0), small_dictionary)
    g.start_round()
    return g

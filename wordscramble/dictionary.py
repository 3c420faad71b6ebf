"""Real-word checkers: a trie-backed word list and a wordfreq lookup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from wordfreq import zipf_frequency

from wordscramble.constants import DEFAULT_LANGUAGE, MIN_ZIPF_FREQUENCY

logger = logging.getLogger(__name__)


class DictionaryChecker(Protocol):
    """Anything that can tell whether a word is real in a given language.

    Implementations answer False instead of raising when they cannot decide.
    """

    def is_real_word(self, word: str, language: str) -> bool: ...


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Dictionary:
    """Trie-backed word list for a single language."""

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self.root = TrieNode()
        self.language = language
        self._word_count = 0

    def load(self, path: str | Path) -> None:
        """Load words from a file (one word per line)."""
        with open(path, encoding="utf-8") as f:
            for line in f:
                word = line.strip().lower()
                if word:
                    self._insert(word)

    def _insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def is_valid_word(self, word: str) -> bool:
        if not word:
            return False
        node = self.root
        for ch in word.lower():
            if ch not in node.children:
                return False
            node = node.children[ch]
        return node.is_word

    def is_real_word(self, word: str, language: str) -> bool:
        if language != self.language:
            logger.warning("dictionary holds %r words, asked about %r", self.language, language)
            return False
        return self.is_valid_word(word)

    @property
    def word_count(self) -> int:
        return self._word_count


class WordfreqChecker:
    """Treat a word as real when wordfreq has seen it often enough.

    ``min_zipf`` is on wordfreq's Zipf scale (log10 of occurrences per
    billion words). Languages wordfreq doesn't cover are never real.
    """

    def __init__(self, min_zipf: float = MIN_ZIPF_FREQUENCY) -> None:
        self.min_zipf = min_zipf

    def is_real_word(self, word: str, language: str) -> bool:
        if not word or not word.isalpha():
            return False
        try:
            freq = zipf_frequency(word, language)
        except LookupError:
            logger.warning("wordfreq has no word list for language %r", language)
            return False
        return freq >= self.min_zipf


def load_dictionary(path: str | Path, language: str = DEFAULT_LANGUAGE) -> Dictionary:
    """Build a Dictionary from a word list file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Dictionary not found at {path}. "
            "Point --dictionary at a newline-delimited word list"
        )
    d = Dictionary(language)
    d.load(path)
    logger.info("loaded %d %s words from %s", d.word_count, language, path)
    return d

"""Root word source: reads the start word list and picks one per round."""

from __future__ import annotations

import logging
import random
from pathlib import Path

from wordscramble.constants import DEFAULT_WORDS_PATH, FALLBACK_ROOT_WORD

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """The game can't start a round: the word list is missing or unusable."""


class RootWordSource:
    """Uniform random picks from a newline-delimited word list.

    A missing or unreadable file always raises ConfigurationError. A file
    that reads fine but holds no words falls back to *fallback*, or raises
    when *fallback* is None.
    """

    def __init__(self, path: str | Path = DEFAULT_WORDS_PATH,
                 fallback: str | None = FALLBACK_ROOT_WORD,
                 seed: int | None = None) -> None:
        self.path = Path(path)
        self.fallback = fallback.strip().lower() if fallback else None
        self._rng = random.Random(seed)
        self._words: list[str] | None = None

    def _read(self) -> list[str]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Could not read word list {self.path}: {e}") from e
        words = [line.strip().lower() for line in text.splitlines()]
        words = [w for w in words if w]
        logger.info("loaded %d root words from %s", len(words), self.path)
        return words

    @property
    def words(self) -> list[str]:
        """Cached word list, read on first access."""
        if self._words is None:
            self._words = self._read()
        return self._words

    def reload(self) -> None:
        """Drop the cached list so the next pick re-reads the file."""
        self._words = None

    def pick_root_word(self) -> str:
        words = self.words
        if words:
            return self._rng.choice(words)
        if self.fallback is None:
            raise ConfigurationError(f"Word list {self.path} has no words")
        logger.warning("word list %s has no words, using fallback %r",
                       self.path, self.fallback)
        return self.fallback

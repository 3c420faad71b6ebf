"""Round state: the root word plus the words accepted against it."""

from __future__ import annotations

import logging

from wordscramble.constants import DEFAULT_LANGUAGE
from wordscramble.dictionary import DictionaryChecker
from wordscramble.engine import ValidationOutcome, evaluate, normalize
from wordscramble.words import RootWordSource

logger = logging.getLogger(__name__)


class Round:
    """One play session scoped to a single root word."""

    def __init__(self, source: RootWordSource, checker: DictionaryChecker,
                 language: str = DEFAULT_LANGUAGE) -> None:
        self.source = source
        self.checker = checker
        self.language = language
        self._root_word: str | None = None
        self._used_words: list[str] = []

    @property
    def root_word(self) -> str | None:
        return self._root_word

    @property
    def used_words(self) -> tuple[str, ...]:
        """Accepted words, most recent first."""
        return tuple(self._used_words)

    @property
    def is_started(self) -> bool:
        return self._root_word is not None

    def start_round(self) -> str:
        """Pick a new root word and clear the history.

        Raises ConfigurationError if no root word can be obtained; the
        current round is left as it was.
        """
        root = self.source.pick_root_word()
        self._root_word = root
        self._used_words = []
        logger.info("new round with root word %r", root)
        return root

    def submit(self, candidate: str) -> ValidationOutcome:
        """Normalize and evaluate *candidate*, recording it if accepted."""
        if self._root_word is None:
            raise RuntimeError("Round not started, call start_round() first")
        answer = normalize(candidate)
        outcome = evaluate(self._root_word, self._used_words, answer,
                           self.checker, self.language)
        if outcome.accepted:
            self._used_words.insert(0, answer)
        return outcome

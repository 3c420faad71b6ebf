"""Word validation engine: decides whether a candidate may join the round.

Rules are checked in a fixed order and the first one that fails is the
reported reason:

  1. SAME_AS_ROOT  : candidate is the root word itself
  2. TOO_SHORT     : fewer than MIN_WORD_LENGTH letters (empty input lands here)
  3. NOT_ORIGINAL  : candidate was already accepted this round
  4. NOT_POSSIBLE  : candidate needs letters the root doesn't have
  5. NOT_REAL      : the dictionary checker doesn't know the word

The engine never mutates the history it is given; the caller prepends the
candidate only after an accepted outcome.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Sequence

from wordscramble.constants import DEFAULT_LANGUAGE, MIN_WORD_LENGTH

if TYPE_CHECKING:
    from wordscramble.dictionary import DictionaryChecker

logger = logging.getLogger(__name__)


class Rejection(Enum):
    SAME_AS_ROOT = ("Word is the root word", "You can't just submit the root word.")
    TOO_SHORT = ("Word too short", f"Words need at least {MIN_WORD_LENGTH} letters.")
    NOT_ORIGINAL = ("Word used already", "Be more original.")
    NOT_POSSIBLE = ("Word not possible", "You can't spell that word from the root word.")
    NOT_REAL = ("Word not recognized", "You can't just make them up, you know.")

    @property
    def title(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class ValidationOutcome:
    """Accepted when ``reason`` is None, otherwise rejected for that reason."""
    reason: Rejection | None = None

    @classmethod
    def accept(cls) -> ValidationOutcome:
        return cls(None)

    @classmethod
    def reject(cls, reason: Rejection) -> ValidationOutcome:
        return cls(reason)

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def title(self) -> str:
        return "Accepted" if self.reason is None else self.reason.title

    @property
    def message(self) -> str:
        return "" if self.reason is None else self.reason.message


def normalize(raw: str) -> str:
    """Trim surrounding whitespace and lowercase raw input."""
    return raw.strip().lower()


def is_possible(word: str, root: str) -> bool:
    """Can *word* be spelled using each letter of *root* at most once?

    Every letter of the word consumes one occurrence from a working copy of
    the root's letter counts, so "oo" fits in "book" but "ooo" does not.
    """
    remaining = Counter(root)
    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1
    return True


def evaluate(root: str, used: Sequence[str], candidate: str,
             checker: DictionaryChecker,
             language: str = DEFAULT_LANGUAGE) -> ValidationOutcome:
    """Decide whether an already-normalized *candidate* is accepted.

    Args:
      root      : the round's root word
      used      : words accepted so far this round (any order)
      candidate : normalized submission (see ``normalize``)
      checker   : real-word lookup capability
      language  : language code passed through to the checker
    """
    if candidate == root:
        outcome = ValidationOutcome.reject(Rejection.SAME_AS_ROOT)
    elif len(candidate) < MIN_WORD_LENGTH:
        outcome = ValidationOutcome.reject(Rejection.TOO_SHORT)
    elif candidate in used:
        outcome = ValidationOutcome.reject(Rejection.NOT_ORIGINAL)
    elif not is_possible(candidate, root):
        outcome = ValidationOutcome.reject(Rejection.NOT_POSSIBLE)
    elif not checker.is_real_word(candidate, language):
        outcome = ValidationOutcome.reject(Rejection.NOT_REAL)
    else:
        outcome = ValidationOutcome.accept()

    logger.debug("evaluate root=%r candidate=%r -> %s", root, candidate,
                 "accepted" if outcome.accepted else outcome.reason.name)
    return outcome

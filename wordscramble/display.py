"""Terminal rendering of the round and submission outcomes."""

from __future__ import annotations

from wordscramble.engine import ValidationOutcome
from wordscramble.game import Round


def render_used_words(used_words: tuple[str, ...] | list[str]) -> str:
    """One line per word, prefixed with its letter count."""
    if not used_words:
        return "  (no words yet)"
    return "\n".join(f"  ({len(w):2d}) {w}" for w in used_words)


def render_round(game: Round) -> str:
    root = game.root_word or "?"
    lines = [
        f"Root word: {root.upper()}",
        "-" * (11 + len(root)),
        render_used_words(game.used_words),
    ]
    return "\n".join(lines)


def render_outcome(word: str, outcome: ValidationOutcome) -> str:
    if outcome.accepted:
        return f"+ {word}"
    return f"! {outcome.title}: {outcome.message}"


def print_round(game: Round) -> None:
    print("\n" + render_round(game))


def print_outcome(word: str, outcome: ValidationOutcome) -> None:
    print(render_outcome(word, outcome))

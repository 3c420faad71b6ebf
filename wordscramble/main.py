"""CLI entry point for Word Scramble."""

from __future__ import annotations

import argparse
import logging
import sys

from wordscramble.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_WORDS_PATH,
    FALLBACK_ROOT_WORD,
    MIN_ZIPF_FREQUENCY,
)
from wordscramble.dictionary import DictionaryChecker, WordfreqChecker, load_dictionary
from wordscramble.display import print_outcome, print_round
from wordscramble.engine import normalize
from wordscramble.game import Round
from wordscramble.words import ConfigurationError, RootWordSource

NEW_ROUND = ":new"
QUIT = ":quit"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Word Scramble: spell as many words as you can from the root word",
    )
    parser.add_argument(
        "--words", "-w",
        default=str(DEFAULT_WORDS_PATH),
        help="Root word list, one word per line (default: the bundled start.txt)",
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Word list used for the real-word check instead of wordfreq",
    )
    parser.add_argument(
        "--language", "-l",
        default=DEFAULT_LANGUAGE,
        help=f"Dictionary language code (default: {DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--min-zipf",
        type=float,
        default=MIN_ZIPF_FREQUENCY,
        help=f"Minimum wordfreq Zipf frequency for a real word (default: {MIN_ZIPF_FREQUENCY})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for root word selection",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of falling back to a fixed root word when the list is empty",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every evaluation",
    )
    return parser.parse_args(argv)


def build_checker(args: argparse.Namespace) -> DictionaryChecker:
    if args.dictionary:
        return load_dictionary(args.dictionary, args.language)
    return WordfreqChecker(min_zipf=args.min_zipf)


def play_loop(game: Round) -> None:
    """Interactive loop: submit words until the player quits."""
    print_round(game)
    print(f"\nType a word, {NEW_ROUND} for a new root word, {QUIT} to exit.")

    while True:
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        command = normalize(raw)
        if command == QUIT:
            break
        if command == NEW_ROUND:
            game.start_round()
            print_round(game)
            continue

        outcome = game.submit(raw)
        print_outcome(command, outcome)
        if outcome.accepted:
            print_round(game)

    print(f"\nFound {len(game.used_words)} words from {game.root_word}.")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    fallback = None if args.strict else FALLBACK_ROOT_WORD
    source = RootWordSource(args.words, fallback=fallback, seed=args.seed)
    try:
        checker = build_checker(args)
        game = Round(source, checker, language=args.language)
        game.start_round()
        play_loop(game)
    except (ConfigurationError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

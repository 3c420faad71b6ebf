"""Word Scramble game constants: word rules, dictionary defaults, asset paths."""

from pathlib import Path

# Candidates need at least this many letters
MIN_WORD_LENGTH = 4

# Language code handed to the dictionary checker
DEFAULT_LANGUAGE = "en"

# Root word used when the word list is readable but holds no usable words
FALLBACK_ROOT_WORD = "silkworm"

# wordfreq Zipf scale: 3 is roughly once per million words, 2.6 keeps
# uncommon words like "tinsel" (2.65) and rejects fragments like "appl" (2.5)
MIN_ZIPF_FREQUENCY = 2.6

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORDS_PATH = DATA_DIR / "start.txt"

"""Word Scramble web application: Flask backend."""
from __future__ import annotations

import logging
import sys
import uuid
from pathlib import Path

# Ensure project root is on sys.path so `wordscramble.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, render_template, request

from wordscramble.constants import DEFAULT_LANGUAGE, DEFAULT_WORDS_PATH, FALLBACK_ROOT_WORD
from wordscramble.dictionary import DictionaryChecker, WordfreqChecker, load_dictionary
from wordscramble.game import Round
from wordscramble.words import ConfigurationError, RootWordSource

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.update(
    WORDS_PATH=str(DEFAULT_WORDS_PATH),
    DICTIONARY_PATH=None,
    LANGUAGE=DEFAULT_LANGUAGE,
    FALLBACK_ROOT_WORD=FALLBACK_ROOT_WORD,
)

# Rounds keyed by session UUID, oldest evicted past MAX_ROUNDS
MAX_ROUNDS = 1000
ROUNDS: dict[str, Round] = {}

_checker: DictionaryChecker | None = None


def get_checker() -> DictionaryChecker:
    """Build the real-word checker once, from app.config."""
    global _checker
    if _checker is None:
        path = app.config["DICTIONARY_PATH"]
        if path:
            _checker = load_dictionary(path, app.config["LANGUAGE"])
        else:
            _checker = WordfreqChecker()
    return _checker


def new_round() -> Round:
    source = RootWordSource(
        app.config["WORDS_PATH"],
        fallback=app.config["FALLBACK_ROOT_WORD"],
    )
    return Round(source, get_checker(), language=app.config["LANGUAGE"])


def round_to_json(game: Round) -> dict:
    """Serialize a Round to the JSON format expected by the frontend."""
    return {
        "root_word": game.root_word,
        "used_words": [
            {"word": w, "length": len(w)} for w in game.used_words
        ],
    }


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@app.route("/")
def index():
    return render_template("index.html")


@app.route("/start", methods=["POST"])
def start():
    data = _json_body()
    session_id = data.get("session_id")
    game = ROUNDS.get(session_id) if isinstance(session_id, str) else None

    try:
        if game is None:
            session_id = str(uuid.uuid4())
            game = new_round()
        game.start_round()
    except (ConfigurationError, FileNotFoundError) as e:
        logger.error("could not start round: %s", e)
        return jsonify({"error": str(e)}), 500

    ROUNDS[session_id] = game
    while len(ROUNDS) > MAX_ROUNDS:
        # dicts keep insertion order, so this drops the oldest session
        del ROUNDS[next(iter(ROUNDS))]

    result = round_to_json(game)
    result["session_id"] = session_id
    return jsonify(result)


@app.route("/submit", methods=["POST"])
def submit():
    data = _json_body()
    session_id = data.get("session_id")
    game = ROUNDS.get(session_id) if isinstance(session_id, str) else None
    if game is None:
        return jsonify({"error": "Session not found"}), 404

    word = data.get("word")
    if not isinstance(word, str):
        return jsonify({"error": "No word provided"}), 400

    outcome = game.submit(word)
    result = round_to_json(game)
    result.update({
        "session_id": session_id,
        "accepted": outcome.accepted,
        "reason": outcome.reason.name if outcome.reason else None,
        "title": outcome.title,
        "message": outcome.message,
    })
    return jsonify(result)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, host="0.0.0.0", port=8080)

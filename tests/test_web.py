"""Tests for the Flask front end."""

from __future__ import annotations

from pathlib import Path

import pytest

import web.app as web_app
from wordscramble.dictionary import Dictionary, WordfreqChecker


@pytest.fixture
def client(word_list: Path, small_dictionary: Dictionary, monkeypatch):
    monkeypatch.setitem(web_app.app.config, "WORDS_PATH", str(word_list))
    monkeypatch.setattr(web_app, "_checker", small_dictionary)
    monkeypatch.setattr(web_app, "ROUNDS", {})
    monkeypatch.setitem(web_app.app.config, "TESTING", True)
    with web_app.app.test_client() as c:
        yield c


def _start(client) -> dict:
    resp = client.post("/start", json={})
    assert resp.status_code == 200
    return resp.get_json()


class TestStart:
    def test_new_session(self, client) -> None:
        data = _start(client)
        assert data["root_word"] == "silkworm"
        assert data["used_words"] == []
        assert data["session_id"] in web_app.ROUNDS

    def test_restart_keeps_session_and_clears_words(self, client) -> None:
        session_id = _start(client)["session_id"]
        client.post("/submit", json={"session_id": session_id, "word": "silk"})
        data = client.post("/start", json={"session_id": session_id}).get_json()
        assert data["session_id"] == session_id
        assert data["used_words"] == []

    def test_missing_word_list(self, client, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setitem(web_app.app.config, "WORDS_PATH", str(tmp_path / "missing.txt"))
        resp = client.post("/start", json={})
        assert resp.status_code == 500
        assert "Could not read word list" in resp.get_json()["error"]
        assert web_app.ROUNDS == {}

    def test_missing_dictionary_is_json_error(self, client, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setattr(web_app, "_checker", None)
        monkeypatch.setitem(web_app.app.config, "DICTIONARY_PATH", str(tmp_path / "nope.txt"))
        resp = client.post("/start", json={})
        assert resp.status_code == 500
        assert resp.is_json
        assert "Dictionary not found" in resp.get_json()["error"]
        assert web_app.ROUNDS == {}

    @pytest.mark.parametrize("session_id", [["x"], {"a": 1}, 7, "made-up"])
    def test_unknown_or_bad_session_gets_fresh_id(self, client, session_id) -> None:
        resp = client.post("/start", json={"session_id": session_id})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["session_id"] != session_id
        assert list(web_app.ROUNDS) == [data["session_id"]]

    def test_non_object_body(self, client) -> None:
        resp = client.post("/start", json=["x"])
        assert resp.status_code == 200

    def test_oldest_sessions_evicted(self, client, monkeypatch) -> None:
        monkeypatch.setattr(web_app, "MAX_ROUNDS", 2)
        first = _start(client)["session_id"]
        second = _start(client)["session_id"]
        third = _start(client)["session_id"]
        assert list(web_app.ROUNDS) == [second, third]
        resp = client.post("/submit", json={"session_id": first, "word": "silk"})
        assert resp.status_code == 404


class TestSubmit:
    def test_accepted(self, client) -> None:
        session_id = _start(client)["session_id"]
        data = client.post("/submit", json={"session_id": session_id, "word": " Silk "}).get_json()
        assert data["accepted"] is True
        assert data["reason"] is None
        assert data["used_words"] == [{"word": "silk", "length": 4}]

    def test_most_recent_first(self, client) -> None:
        session_id = _start(client)["session_id"]
        client.post("/submit", json={"session_id": session_id, "word": "silk"})
        data = client.post("/submit", json={"session_id": session_id, "word": "worms"}).get_json()
        assert [w["word"] for w in data["used_words"]] == ["worms", "silk"]

    @pytest.mark.parametrize("word,reason", [
        ("silkworm", "SAME_AS_ROOT"),
        ("owl", "TOO_SHORT"),
        ("wrist", "NOT_POSSIBLE"),
        ("sklm", "NOT_REAL"),
    ])
    def test_rejected(self, client, word: str, reason: str) -> None:
        session_id = _start(client)["session_id"]
        data = client.post("/submit", json={"session_id": session_id, "word": word}).get_json()
        assert data["accepted"] is False
        assert data["reason"] == reason
        assert data["title"] and data["message"]
        assert data["used_words"] == []

    def test_resubmit(self, client) -> None:
        session_id = _start(client)["session_id"]
        client.post("/submit", json={"session_id": session_id, "word": "milk"})
        data = client.post("/submit", json={"session_id": session_id, "word": "milk"}).get_json()
        assert data["reason"] == "NOT_ORIGINAL"

    def test_unknown_session(self, client) -> None:
        resp = client.post("/submit", json={"session_id": "nope", "word": "silk"})
        assert resp.status_code == 404

    @pytest.mark.parametrize("session_id", [["x"], {"a": 1}, None, 3])
    def test_non_string_session(self, client, session_id) -> None:
        _start(client)
        resp = client.post("/submit", json={"session_id": session_id, "word": "silk"})
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "Session not found"

    def test_missing_word(self, client) -> None:
        session_id = _start(client)["session_id"]
        resp = client.post("/submit", json={"session_id": session_id})
        assert resp.status_code == 400


class TestChecker:
    def test_defaults_to_wordfreq(self, monkeypatch) -> None:
        monkeypatch.setattr(web_app, "_checker", None)
        monkeypatch.setitem(web_app.app.config, "DICTIONARY_PATH", None)
        assert isinstance(web_app.get_checker(), WordfreqChecker)

    def test_word_list_from_config(self, tmp_path: Path, monkeypatch) -> None:
        path = tmp_path / "words.txt"
        path.write_text("silk\n", encoding="utf-8")
        monkeypatch.setattr(web_app, "_checker", None)
        monkeypatch.setitem(web_app.app.config, "DICTIONARY_PATH", str(path))
        checker = web_app.get_checker()
        assert isinstance(checker, Dictionary)
        assert checker.is_real_word("silk", "en")


def test_index(client) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Start New Game" in resp.data

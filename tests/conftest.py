"""
Shared pytest fixtures for the impostor test suite.

Strategy:
- Domain tests: pure in-memory, zero I/O. Word memory and repository are
  replaced by small in-memory doubles.
- API tests: FastAPI TestClient with JSON files in a tmp directory.
  DATABASE_URL is cleared so the app always uses the JSON ledger.
"""
import json
import os
import random

import pytest

os.environ.pop("DATABASE_URL", None)

from impostor.domain.game import Game
from impostor.domain.game_player import GamePlayer
from impostor.domain.player import Player
from impostor.domain.word import Word


# ---------------------------------------------------------------------------
# Domain helpers (reusable across many test modules)
# ---------------------------------------------------------------------------

def make_players(n: int, named: bool = True) -> list:
    return [Player.create(f"p{i}", f"Player {i}" if named else "") for i in range(1, n + 1)]


def make_word(word_id="w1", categories=("animals",), difficulty=1) -> Word:
    return Word.create(word_id, f"word.{word_id}", f"hint.{word_id}", list(categories), difficulty)


def make_game_players(n: int = 3, impostors: int = 1) -> list:
    return [
        GamePlayer.create_impostor(p) if i < impostors else GamePlayer.create_normal(p)
        for i, p in enumerate(make_players(n))
    ]


def make_game(n: int = 3, impostors: int = 1) -> Game:
    return Game.start(make_game_players(n, impostors), make_word(), impostors)


class InMemoryWordMemory:
    """Word memory double with the same reset policy as the real ledgers."""

    def __init__(self, used=(), reset_threshold: float = 0.8):
        self.used = set(used)
        self.reset_threshold = reset_threshold
        self.reset_calls = 0

    def has_been_used(self, word_id: str) -> bool:
        return word_id in self.used

    def mark_as_used(self, word_id: str) -> None:
        self.used.add(word_id)

    def used_ids(self, word_ids=None) -> set:
        if word_ids is None:
            return set(self.used)
        return self.used & set(word_ids)

    def should_reset(self, total_words: int, catalog_ids=None) -> bool:
        used = len(self.used_ids(catalog_ids))
        return total_words > 0 and used / total_words >= self.reset_threshold

    def reset(self) -> None:
        self.reset_calls += 1
        self.used.clear()


class InMemoryWordRepository:
    def __init__(self, words):
        self.words = list(words)

    def get_all_words(self):
        return list(self.words)

    def get_words_by_categories_and_difficulty(self, category_ids, used_ids, difficulty=None):
        wanted = list(category_ids)
        return [
            w for w in self.words
            if w.id not in used_ids
            and (not wanted or w.belongs_to_any_category(wanted))
            and (difficulty is None or w.has_difficulty(difficulty))
        ]


class SequentialIdGenerator:
    def __init__(self):
        self.count = 0

    def generate(self, prefix: str = "id") -> str:
        self.count += 1
        return f"{prefix}-{self.count}"


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def word():
    return make_word()


@pytest.fixture
def catalog_words():
    return [
        make_word("lion", ("animals",), 1),
        make_word("penguin", ("animals",), 2),
        make_word("pizza", ("food",), 1),
        make_word("sushi", ("food",), 3),
        make_word("octopus", ("animals", "nature"), 2),
    ]


@pytest.fixture
def catalog_path(tmp_path):
    """Minimal catalog.json in a temp directory."""
    catalog = {
        "categories": [
            {"id": "animals", "name_key": "category.animals", "emoji": "A"},
            {"id": "food", "name_key": "category.food", "emoji": "F"},
            {"id": "empty", "name_key": "category.empty", "emoji": "E"},
        ],
        "words": [
            {"id": "lion", "word_key": "word.lion", "hint_key": "hint.lion",
             "category_ids": ["animals"], "difficulty": 1},
            {"id": "penguin", "word_key": "word.penguin", "hint_key": "hint.penguin",
             "category_ids": ["animals"], "difficulty": 2},
            {"id": "pizza", "word_key": "word.pizza", "hint_key": "hint.pizza",
             "category_ids": ["food"], "difficulty": 1},
            {"id": "sushi", "word_key": "word.sushi", "hint_key": "hint.sushi",
             "category_ids": ["food", "animals"], "difficulty": 3},
        ],
    }
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog), encoding="utf-8")
    return str(path)


@pytest.fixture
def services(catalog_path, tmp_path):
    from impostor.container import build_services
    return build_services(
        catalog_path=catalog_path,
        word_memory_path=str(tmp_path / "used_words.json"),
    )


@pytest.fixture
def client(services):
    """FastAPI app wired with JSON files in the tmp directory."""
    from fastapi.testclient import TestClient
    from impostor.main import create_app
    return TestClient(create_app(services))


@pytest.fixture
def table(client):
    """A table with two named players, ready to start."""
    data = client.post("/api/tables", json={}).json()
    for i, p in enumerate(data["players"]):
        data = client.patch(
            f"/api/tables/{data['id']}/players/{p['id']}", json={"name": f"Player {i}"}
        ).json()
    return data

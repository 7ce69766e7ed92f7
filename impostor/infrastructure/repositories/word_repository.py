"""Loads the word catalog from JSON into domain entities."""
import json
import logging
import os
from typing import Iterable, List, Set

from impostor.domain.word import Category, Word

log = logging.getLogger("impostor.words")


class JsonWordRepository:
    """
    JSON-backed word catalog. Expected shape:
    {"categories": [{"id", "name_key", "emoji"}],
     "words": [{"id", "word_key", "hint_key", "category_ids", "difficulty"}]}
    """

    def __init__(self, data_path: str):
        self._data_path = data_path
        self._categories: List[Category] = []
        self._words: List[Word] = []
        self._load()

    def _load(self) -> None:
        if not os.path.exists(self._data_path):
            log.warning("Word catalog not found at %s", self._data_path)
            return

        with open(self._data_path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        self._categories = [
            Category(
                category_id=item["id"],
                name_key=item["name_key"],
                emoji=item.get("emoji", ""),
            )
            for item in raw.get("categories", [])
        ]
        self._words = [
            Word.create(
                item["id"],
                item["word_key"],
                item["hint_key"],
                item["category_ids"],
                item["difficulty"],
            )
            for item in raw.get("words", [])
        ]
        log.info(
            "Loaded %d words in %d categories", len(self._words), len(self._categories)
        )

    def get_categories(self) -> List[Category]:
        return list(self._categories)

    def get_all_words(self) -> List[Word]:
        return list(self._words)

    def get_by_id(self, word_id: str) -> Word | None:
        for w in self._words:
            if w.id == word_id:
                return w
        return None

    def get_available_words(self, used_ids: Set[str]) -> List[Word]:
        return [w for w in self._words if w.id not in used_ids]

    def get_words_by_categories(self, category_ids: Iterable[str], used_ids: Set[str]) -> List[Word]:
        return self.get_words_by_categories_and_difficulty(category_ids, used_ids, None)

    def get_words_by_categories_and_difficulty(
        self,
        category_ids: Iterable[str],
        used_ids: Set[str],
        difficulty: int | None = None,
    ) -> List[Word]:
        wanted = list(category_ids)
        return [
            w
            for w in self._words
            if w.id not in used_ids
            and (not wanted or w.belongs_to_any_category(wanted))
            and (difficulty is None or w.has_difficulty(difficulty))
        ]

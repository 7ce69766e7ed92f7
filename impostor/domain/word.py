"""Word catalog entities -- secret words and the categories they belong to."""
from typing import Iterable, Tuple

from impostor.domain.enums import Difficulty
from impostor.domain.errors import ValidationError


class Category:
    """A word category as shown on the setup screen."""

    def __init__(self, category_id: str, name_key: str, emoji: str = ""):
        if not category_id or not name_key:
            raise ValidationError("Category must have id and name_key")
        self._id = category_id
        self._name_key = name_key
        self._emoji = emoji

    @property
    def id(self) -> str:
        return self._id

    @property
    def name_key(self) -> str:
        return self._name_key

    @property
    def emoji(self) -> str:
        return self._emoji

    def to_dict(self) -> dict:
        return {"id": self._id, "name_key": self._name_key, "emoji": self._emoji}


class Word:
    """
    A secret word. Normals are shown `word_key`, impostors `hint_key`
    (when hints are on). Immutable after creation.
    """

    def __init__(
        self,
        word_id: str,
        word_key: str,
        hint_key: str,
        category_ids: Iterable[str],
        difficulty: int,
    ):
        if not word_id or not word_key or not hint_key:
            raise ValidationError("Word must have id, word_key, and hint_key")
        if isinstance(category_ids, str):
            raise ValidationError("category_ids must be a collection, not a single string")
        categories = tuple(dict.fromkeys(c for c in category_ids if c))
        if not categories:
            raise ValidationError("Word must belong to at least one category")
        try:
            level = Difficulty(difficulty)
        except ValueError:
            raise ValidationError(f"Invalid difficulty: {difficulty!r}") from None

        self._id = word_id
        self._word_key = word_key
        self._hint_key = hint_key
        self._category_ids = categories
        self._difficulty = level

    @classmethod
    def create(
        cls,
        word_id: str,
        word_key: str,
        hint_key: str,
        category_ids: Iterable[str],
        difficulty: int,
    ) -> "Word":
        return cls(word_id, word_key, hint_key, category_ids, difficulty)

    @property
    def id(self) -> str:
        return self._id

    @property
    def word_key(self) -> str:
        return self._word_key

    @property
    def hint_key(self) -> str:
        return self._hint_key

    @property
    def category_ids(self) -> Tuple[str, ...]:
        return self._category_ids

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def belongs_to_category(self, category_id: str) -> bool:
        return category_id in self._category_ids

    def belongs_to_any_category(self, category_ids: Iterable[str]) -> bool:
        if isinstance(category_ids, str):
            raise TypeError("belongs_to_any_category expects a collection of ids; use belongs_to_category")
        return any(c in self._category_ids for c in category_ids)

    def has_difficulty(self, difficulty: int) -> bool:
        return self._difficulty == difficulty

    def __eq__(self, other) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Word(id={self._id!r}, difficulty={int(self._difficulty)})"

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "word_key": self._word_key,
            "hint_key": self._hint_key,
            "category_ids": list(self._category_ids),
            "difficulty": int(self._difficulty),
        }

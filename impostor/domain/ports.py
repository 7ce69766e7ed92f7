"""Capabilities the domain consumes. Implementations live in infrastructure."""
from typing import Iterable, List, Optional, Protocol, Set

from impostor.domain.word import Word


class IdGenerator(Protocol):
    def generate(self, prefix: str = "id") -> str:
        """Unique for the lifetime of the process."""
        ...


class WordRepository(Protocol):
    def get_all_words(self) -> List[Word]:
        ...

    def get_words_by_categories_and_difficulty(
        self,
        category_ids: Iterable[str],
        used_ids: Set[str],
        difficulty: int | None = None,
    ) -> List[Word]:
        """Words in any of `category_ids` (empty = all), at `difficulty`
        (None = any), excluding `used_ids`."""
        ...


class WordMemory(Protocol):
    def has_been_used(self, word_id: str) -> bool:
        ...

    def mark_as_used(self, word_id: str) -> None:
        ...

    def used_ids(self, word_ids: Optional[Iterable[str]] = None) -> Set[str]:
        """Ledger ids, restricted to `word_ids` when given. One lookup, not one per id."""
        ...

    def should_reset(self, total_words: int, catalog_ids: Optional[Iterable[str]] = None) -> bool:
        """True once the used share of the catalog reaches the reset threshold.
        With `catalog_ids`, ledger entries for words no longer in the catalog are ignored."""
        ...

    def reset(self) -> None:
        ...

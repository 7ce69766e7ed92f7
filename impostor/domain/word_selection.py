"""Domain service: pick a fresh word that matches the game filters."""
import logging
import random
from typing import Iterable, List

from impostor.domain.errors import NoWordsAvailable
from impostor.domain.ports import WordMemory, WordRepository
from impostor.domain.word import Word

log = logging.getLogger("impostor.words")


class WordSelectionService:
    """
    Coordinates the catalog and the used-word ledger.

    Rules:
    - Only words matching the category / difficulty filter are candidates.
    - Words already in the ledger are skipped.
    - When nothing is left, the ledger is reset once (if the memory policy
      allows it) and selection is retried; otherwise NoWordsAvailable.
    """

    def __init__(
        self,
        word_repository: WordRepository,
        word_memory: WordMemory,
        rng: random.Random | None = None,
    ):
        self._repository = word_repository
        self._memory = word_memory
        self._rng = rng or random.Random()

    def select_word(
        self,
        selected_category_ids: Iterable[str] = (),
        difficulty: int | None = None,
    ) -> Word:
        category_ids = list(selected_category_ids)
        catalog_ids = [w.id for w in self._repository.get_all_words()]
        candidates = self._repository.get_words_by_categories_and_difficulty(
            category_ids, self._memory.used_ids(catalog_ids), difficulty
        )

        if not candidates:
            total = len(catalog_ids)
            if not self._memory.should_reset(total, catalog_ids):
                raise NoWordsAvailable(self._describe(category_ids, difficulty))
            log.info("Word memory exhausted (%d words in catalog); resetting", total)
            self._memory.reset()
            candidates = self._repository.get_words_by_categories_and_difficulty(
                category_ids, set(), difficulty
            )
            if not candidates:
                raise NoWordsAvailable(self._describe(category_ids, difficulty))

        word = self._rng.choice(candidates)
        self._memory.mark_as_used(word.id)
        log.debug("Selected word %s from %d candidates", word.id, len(candidates))
        return word

    @staticmethod
    def _describe(category_ids: List[str], difficulty: int | None) -> str:
        scope = ", ".join(category_ids) if category_ids else "all categories"
        if difficulty is not None:
            scope += f", difficulty {difficulty}"
        return f"No words available in selected categories ({scope})"

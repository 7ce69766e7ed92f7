"""Use case: inspect and clear the used-word ledger."""
import logging

from impostor.domain.ports import WordMemory, WordRepository

log = logging.getLogger("impostor.words")


class WordHistoryService:
    def __init__(self, word_repository: WordRepository, word_memory: WordMemory):
        self._repository = word_repository
        self._memory = word_memory

    def stats(self) -> dict:
        catalog_ids = [w.id for w in self._repository.get_all_words()]
        total = len(catalog_ids)
        used = len(self._memory.used_ids(catalog_ids))
        return {
            "used_count": used,
            "total_count": total,
            "remaining_count": total - used,
            "usage_ratio": round(used / total, 3) if total else 0.0,
            "should_reset": self._memory.should_reset(total, catalog_ids),
        }

    def reset(self) -> None:
        self._memory.reset()
        log.info("Word history cleared on request")

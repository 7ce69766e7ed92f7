"""SQL-backed used-word ledger (any SQLAlchemy URL: PostgreSQL, SQLite)."""
import logging
import threading
from typing import Iterable, Optional, Set

from sqlalchemy import func, select

from impostor.infrastructure.database.models import UsedWordModel
from impostor.infrastructure.persistence.word_memory import (
    DEFAULT_RESET_THRESHOLD,
    usage_reaches_threshold,
)

log = logging.getLogger("impostor.words")


class SqlWordMemory:
    """Word memory stored in the `used_words` table."""

    def __init__(self, session_factory, reset_threshold: float = DEFAULT_RESET_THRESHOLD):
        self._sf = session_factory
        self._reset_threshold = reset_threshold
        self._lock = threading.Lock()

    def has_been_used(self, word_id: str) -> bool:
        with self._sf() as session:
            return session.get(UsedWordModel, word_id) is not None

    def mark_as_used(self, word_id: str) -> None:
        with self._lock, self._sf() as session:
            if session.get(UsedWordModel, word_id) is None:
                session.add(UsedWordModel(word_id=word_id))
                session.commit()

    def used_ids(self, word_ids: Optional[Iterable[str]] = None) -> Set[str]:
        stmt = select(UsedWordModel.word_id)
        if word_ids is not None:
            wanted = list(word_ids)
            if not wanted:
                return set()
            stmt = stmt.where(UsedWordModel.word_id.in_(wanted))
        with self._sf() as session:
            return set(session.scalars(stmt))

    def used_count(self, catalog_ids: Optional[Iterable[str]] = None) -> int:
        if catalog_ids is not None:
            return len(self.used_ids(catalog_ids))
        with self._sf() as session:
            return session.query(func.count(UsedWordModel.word_id)).scalar() or 0

    def should_reset(self, total_words: int, catalog_ids: Optional[Iterable[str]] = None) -> bool:
        return usage_reaches_threshold(
            self.used_count(catalog_ids), total_words, self._reset_threshold
        )

    def reset(self) -> None:
        with self._lock, self._sf() as session:
            deleted = session.query(UsedWordModel).delete()
            session.commit()
        log.debug("Cleared %d used word(s)", deleted)

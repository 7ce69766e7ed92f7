"""Used-word ledger persisted as a JSON list of word ids (JSON file + in-memory cache).

Read-modify-write is serialized by an instance lock, since FastAPI runs sync
endpoints in a worker thread pool.
"""
import json
import logging
import os
import threading
from typing import Iterable, Optional, Set

log = logging.getLogger("impostor.words")

DEFAULT_RESET_THRESHOLD = 0.8


def usage_reaches_threshold(used_count: int, total_words: int, threshold: float) -> bool:
    """True once `used_count / total_words` reaches `threshold`. Empty catalog never resets."""
    if total_words <= 0:
        return False
    return used_count / total_words >= threshold


class JsonWordMemory:
    """File-based word memory. An unreadable file counts as an empty ledger."""

    def __init__(self, data_path: str = "data/used_words.json",
                 reset_threshold: float = DEFAULT_RESET_THRESHOLD):
        self._data_path = data_path
        self._reset_threshold = reset_threshold
        self._lock = threading.Lock()
        self._used: Set[str] | None = None

    def has_been_used(self, word_id: str) -> bool:
        return word_id in self._cached()

    def mark_as_used(self, word_id: str) -> None:
        with self._lock:
            used = self._cached()
            if word_id in used:
                return
            self._used = used | {word_id}
            self._persist()

    def used_ids(self, word_ids: Optional[Iterable[str]] = None) -> Set[str]:
        used = self._cached()
        if word_ids is None:
            return set(used)
        return used & set(word_ids)

    def should_reset(self, total_words: int, catalog_ids: Optional[Iterable[str]] = None) -> bool:
        used_count = len(self.used_ids(catalog_ids))
        return usage_reaches_threshold(used_count, total_words, self._reset_threshold)

    def reset(self) -> None:
        with self._lock:
            self._used = set()
            self._persist()

    def _cached(self) -> Set[str]:
        if self._used is None:
            self._used = self._load()
        return self._used

    def _load(self) -> Set[str]:
        """Read the ledger from disk."""
        if not os.path.exists(self._data_path):
            return set()
        try:
            with open(self._data_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as exc:
            log.warning("Ignoring unreadable word memory %s: %s", self._data_path, exc)
            return set()
        if not isinstance(data, list):
            log.warning("Ignoring malformed word memory %s", self._data_path)
            return set()
        return {str(i) for i in data}

    def _persist(self) -> None:
        """Write the ledger to disk."""
        directory = os.path.dirname(self._data_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        # Write atomically: write to tempfile then replace
        tmp_path = f"{self._data_path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(sorted(self._used), f, indent=2)
        os.replace(tmp_path, self._data_path)

"""In-memory table session storage. Lives as long as the process."""
import threading
from typing import Callable, Dict

from impostor.application.table_session import TableSession


class TableRepository:
    def __init__(self):
        self._tables: Dict[str, TableSession] = {}
        self._lock = threading.Lock()

    def save(self, table: TableSession) -> None:
        with self._lock:
            self._tables[table.id] = table

    def get(self, table_id: str) -> TableSession | None:
        return self._tables.get(table_id)

    def update(self, table_id: str, change: Callable[[TableSession], TableSession]) -> TableSession | None:
        """Apply `change` atomically. None if the table does not exist.
        Exceptions raised by `change` leave the stored table untouched."""
        with self._lock:
            current = self._tables.get(table_id)
            if current is None:
                return None
            updated = change(current)
            self._tables[table_id] = updated
            return updated

    def delete(self, table_id: str) -> bool:
        with self._lock:
            return self._tables.pop(table_id, None) is not None

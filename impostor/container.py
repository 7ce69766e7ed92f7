"""Composition root: builds every service once and hands out references."""
import random

from impostor.application.game_management import GameManagementService
from impostor.application.player_management import PlayerManagementService
from impostor.application.word_history import WordHistoryService
from impostor.domain.ports import IdGenerator, WordMemory
from impostor.domain.role_assignment import RoleAssignmentService
from impostor.domain.word_selection import WordSelectionService
from impostor.infrastructure.id_generator import UuidIdGenerator
from impostor.infrastructure.repositories.table_repository import TableRepository
from impostor.infrastructure.repositories.word_repository import JsonWordRepository


class Services:
    """Explicitly wired dependencies for one process."""

    def __init__(
        self,
        word_repository: JsonWordRepository,
        word_memory: WordMemory,
        id_generator: IdGenerator,
        min_players: int,
        rng: random.Random | None = None,
    ):
        rng = rng or random.Random()
        self.word_repository = word_repository
        self.word_memory = word_memory
        self.id_generator = id_generator
        self.tables = TableRepository()
        self.players = PlayerManagementService(id_generator, min_players)
        self.games = GameManagementService(
            RoleAssignmentService(min_players, rng),
            WordSelectionService(word_repository, word_memory, rng),
            rng,
        )
        self.word_history = WordHistoryService(word_repository, word_memory)


def build_services(
    catalog_path: str,
    word_memory_path: str,
    database_url: str = "",
    min_players: int = 2,
    reset_threshold: float = 0.8,
) -> Services:
    """
    Wire repositories and services.
      - database_url set  -> used-word ledger in SQL (SQLAlchemy).
      - otherwise         -> JSON file ledger.
    """
    if database_url:
        from impostor.infrastructure.database.connection import build_session_factory
        from impostor.infrastructure.persistence.sql_word_memory import SqlWordMemory

        word_memory = SqlWordMemory(build_session_factory(database_url), reset_threshold)
    else:
        from impostor.infrastructure.persistence.word_memory import JsonWordMemory

        word_memory = JsonWordMemory(word_memory_path, reset_threshold)

    return Services(
        word_repository=JsonWordRepository(catalog_path),
        word_memory=word_memory,
        id_generator=UuidIdGenerator(),
        min_players=min_players,
    )

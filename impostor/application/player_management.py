"""Use cases for the setup screen roster."""
from typing import List, Sequence

from impostor.domain.player import Player
from impostor.domain.player_collection import PlayerCollection
from impostor.domain.ports import IdGenerator
from impostor.domain.rules import GameRules


class PlayerManagementService:
    """Creates players with generated ids and applies roster rules."""

    def __init__(self, id_generator: IdGenerator, min_players: int = GameRules.MIN_PLAYERS):
        self._ids = id_generator
        self._min_players = min_players

    @property
    def min_players(self) -> int:
        return self._min_players

    def create_player(self, name: str = "") -> Player:
        return Player.create(self._ids.generate("player"), name)

    def create_roster(self, size: int | None = None) -> List[Player]:
        """A fresh roster of unnamed players, never smaller than the minimum."""
        count = max(size or GameRules.INITIAL_PLAYERS_COUNT, self._min_players)
        return [self.create_player() for _ in range(count)]

    def add_player(self, players: Sequence[Player], name: str = "") -> List[Player]:
        return [*players, self.create_player(name)]

    def remove_player(self, players: Sequence[Player], player_id: str) -> List[Player]:
        return PlayerCollection.remove_player(players, player_id, self._min_players)

    def update_player_name(self, players: Sequence[Player], player_id: str, new_name: str) -> List[Player]:
        return PlayerCollection.update_name(players, player_id, new_name)

    def ready_count(self, players: Sequence[Player]) -> int:
        return PlayerCollection.ready_count(players)

    def validate_players(self, players: Sequence[Player]) -> List[str]:
        return PlayerCollection.validate(players, self._min_players)

    def are_players_ready(self, players: Sequence[Player]) -> bool:
        return PlayerCollection.is_ready(players, self._min_players)

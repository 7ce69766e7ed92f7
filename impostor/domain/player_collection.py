"""Rules for a roster of players: minimum size, named and unique."""
from typing import List, Sequence

from impostor.domain.errors import InvariantViolation
from impostor.domain.player import Player
from impostor.domain.rules import GameRules


class PlayerCollection:
    """
    Stateless rules over a sequence of players. Every "change" returns a
    new list; the input is never mutated.
    """

    @staticmethod
    def has_minimum_players(players: Sequence[Player], min_players: int = GameRules.MIN_PLAYERS) -> bool:
        return len(players) >= min_players

    @staticmethod
    def can_remove(players: Sequence[Player], min_players: int = GameRules.MIN_PLAYERS) -> bool:
        return len(players) > min_players

    @staticmethod
    def remove_player(
        players: Sequence[Player],
        player_id: str,
        min_players: int = GameRules.MIN_PLAYERS,
    ) -> List[Player]:
        if not PlayerCollection.can_remove(players, min_players):
            raise InvariantViolation(
                f"Cannot remove player. Minimum {min_players} players required."
            )
        return [p for p in players if p.id != player_id]

    @staticmethod
    def update_name(players: Sequence[Player], player_id: str, new_name: str) -> List[Player]:
        """Renames the matching player. Raises ValidationError on a bad name."""
        return [p.change_name(new_name) if p.id == player_id else p for p in players]

    @staticmethod
    def all_have_valid_names(players: Sequence[Player]) -> bool:
        return all(p.has_valid_name() for p in players)

    @staticmethod
    def all_names_unique(players: Sequence[Player]) -> bool:
        names = [p.player_name for p in players if p.has_valid_name()]
        return len(set(names)) == len(names)

    @staticmethod
    def ready_count(players: Sequence[Player]) -> int:
        return sum(1 for p in players if p.has_valid_name())

    @staticmethod
    def validate(players: Sequence[Player], min_players: int = GameRules.MIN_PLAYERS) -> List[str]:
        """Broken invariants as messages. Empty list means the roster can start."""
        errors = []
        if not PlayerCollection.has_minimum_players(players, min_players):
            errors.append(f"At least {min_players} players are required")
        if not PlayerCollection.all_have_valid_names(players):
            errors.append("All players must have valid names")
        if not PlayerCollection.all_names_unique(players):
            errors.append("All player names must be unique")
        return errors

    @staticmethod
    def is_ready(players: Sequence[Player], min_players: int = GameRules.MIN_PLAYERS) -> bool:
        return not PlayerCollection.validate(players, min_players)

"""Domain service: secret role assignment."""
import logging
import random
from typing import List, Sequence

from impostor.domain.errors import InsufficientPlayers, InvalidImpostorCount
from impostor.domain.game_player import GamePlayer
from impostor.domain.player import Player
from impostor.domain.rules import GameRules

log = logging.getLogger("impostor.roles")


class RoleAssignmentService:
    """
    Picks exactly `impostor_count` impostors uniformly at random.
    Calls are independent; the only side effect is consuming randomness.
    """

    def __init__(self, min_players: int = GameRules.MIN_PLAYERS, rng: random.Random | None = None):
        self._min_players = min_players
        self._rng = rng or random.Random()

    @property
    def min_players(self) -> int:
        return self._min_players

    def assign_roles(self, players: Sequence[Player], impostor_count: int) -> List[GamePlayer]:
        """
        Returns every input player exactly once, in input order, tagged
        with a role.
        """
        if len(players) < self._min_players:
            raise InsufficientPlayers(len(players), self._min_players)
        if not GameRules.is_valid_impostor_count(impostor_count, len(players)):
            raise InvalidImpostorCount(
                impostor_count, len(players), GameRules.max_impostors(len(players))
            )

        impostor_positions = set(self._rng.sample(range(len(players)), impostor_count))
        game_players = [
            GamePlayer.create_impostor(p) if i in impostor_positions else GamePlayer.create_normal(p)
            for i, p in enumerate(players)
        ]
        log.debug(
            "Assigned %d impostor(s) among %d players", impostor_count, len(players)
        )
        return game_players

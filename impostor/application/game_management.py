"""Use case: start a new game from a ready roster."""
import logging
import random
from typing import Iterable, Sequence

from impostor.domain.game import Game
from impostor.domain.player import Player
from impostor.domain.role_assignment import RoleAssignmentService
from impostor.domain.word_selection import WordSelectionService

log = logging.getLogger("impostor.game")


class GameManagementService:
    """Single entry point that sequences role assignment and word selection."""

    def __init__(
        self,
        role_assignment: RoleAssignmentService,
        word_selection: WordSelectionService,
        rng: random.Random | None = None,
    ):
        self._roles = role_assignment
        self._words = word_selection
        self._rng = rng or random.Random()

    def start_game(
        self,
        players: Sequence[Player],
        impostor_count: int,
        selected_category_ids: Iterable[str] = (),
        difficulty: int | None = None,
    ) -> Game:
        """
        Assigns roles, draws a word and builds the Game. Failures from any
        step propagate untouched.
        """
        game_players = self._roles.assign_roles(players, impostor_count)
        word = self._words.select_word(selected_category_ids, difficulty)
        starter = self._rng.choice(game_players).id
        game = Game.start(
            game_players,
            word,
            impostor_count,
            min_players=self._roles.min_players,
            starting_player_id=starter,
        )
        log.info(
            "Game started: %d players, %d impostor(s)", len(game_players), impostor_count
        )
        return game

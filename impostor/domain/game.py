"""
Game aggregate root.

Owns the role-tagged roster, the secret word, the turn pointer and the
completion flag. Every operation returns a new Game; roster, roles and word
are fixed at start.
"""
from typing import List, Sequence, Tuple

from impostor.domain.enums import PlayerRole
from impostor.domain.errors import GameAlreadyComplete, InvalidGameSetup, InvariantViolation
from impostor.domain.game_player import GamePlayer
from impostor.domain.rules import GameRules
from impostor.domain.word import Word


class Game:
    """
    States: in progress (0 <= current_player_index < N) -> complete.
    Completion is absorbing.
    """

    def __init__(
        self,
        players: Tuple[GamePlayer, ...],
        word: Word,
        current_player_index: int = 0,
        is_complete: bool = False,
        starting_player_id: str | None = None,
    ):
        self._players = players
        self._word = word
        self._current_player_index = current_player_index
        self._is_complete = is_complete
        self._starting_player_id = starting_player_id

    @classmethod
    def start(
        cls,
        players: Sequence[GamePlayer],
        word: Word,
        expected_impostor_count: int,
        min_players: int = GameRules.MIN_PLAYERS,
        starting_player_id: str | None = None,
    ) -> "Game":
        """
        Validates the roster and returns a game at turn 0.
        Raises InvalidGameSetup naming the broken invariant.
        """
        roster = tuple(players)
        if len(roster) < min_players:
            raise InvalidGameSetup(
                "min_players", f"Game requires at least {min_players} players"
            )
        if any(not isinstance(p.role, PlayerRole) for p in roster):
            raise InvalidGameSetup("valid_roles", "All players must have valid roles")
        ids = [p.id for p in roster]
        if len(set(ids)) != len(ids):
            raise InvalidGameSetup("unique_players", "Each player can only take one seat")
        impostor_count = sum(1 for p in roster if p.is_impostor())
        if impostor_count != expected_impostor_count:
            raise InvalidGameSetup(
                "impostor_count",
                f"Game must have exactly {expected_impostor_count} impostor(s), "
                f"but found {impostor_count}",
            )
        if starting_player_id is None:
            starting_player_id = roster[0].id
        elif starting_player_id not in ids:
            raise InvalidGameSetup(
                "starting_player", f"Starting player {starting_player_id} is not in the game"
            )
        return cls(roster, word, 0, False, starting_player_id)

    # --- Properties (Read-Only) ---

    @property
    def players(self) -> List[GamePlayer]:
        return list(self._players)

    @property
    def word(self) -> Word:
        return self._word

    @property
    def current_player_index(self) -> int:
        return self._current_player_index

    @property
    def is_complete(self) -> bool:
        return self._is_complete

    @property
    def starting_player_id(self) -> str | None:
        return self._starting_player_id

    # --- Queries ---

    def current_player(self) -> GamePlayer | None:
        """The player whose turn it is to reveal, or None once complete."""
        if self._is_complete:
            return None
        return self._players[self._current_player_index]

    def get_player(self, player_id: str) -> GamePlayer | None:
        for p in self._players:
            if p.id == player_id:
                return p
        return None

    def all_players_have_seen_roles(self) -> bool:
        return all(p.has_seen_role for p in self._players)

    def get_impostors(self) -> List[GamePlayer]:
        return [p for p in self._players if p.is_impostor()]

    def get_normal_players(self) -> List[GamePlayer]:
        return [p for p in self._players if p.is_normal()]

    def role_card(self, player_id: str, show_hint: bool = False) -> dict:
        """What `player_id` sees on reveal: the word, the hint, or nothing."""
        player = self._require_player(player_id)
        card = {"player_id": player.id, "name": player.name, "role": player.role.value}
        if player.is_normal():
            card["word_key"] = self._word.word_key
        elif show_hint:
            card["hint_key"] = self._word.hint_key
        return card

    # --- Transitions ---

    def mark_player_as_seen_role(self, player_id: str) -> "Game":
        """Flags one player as revealed. Re-marking is a no-op."""
        self._require_player(player_id)
        players = tuple(
            p.mark_role_as_seen() if p.id == player_id else p for p in self._players
        )
        return self._evolve(players=players)

    def mark_current_player_as_seen_role(self) -> "Game":
        current = self.current_player()
        if current is None:
            raise GameAlreadyComplete("Game is already complete")
        return self.mark_player_as_seen_role(current.id)

    def move_to_next_player(self) -> "Game":
        if self._is_complete:
            raise GameAlreadyComplete("Game is already complete")
        next_index = self._current_player_index + 1
        return self._evolve(
            current_player_index=next_index,
            is_complete=next_index >= len(self._players),
        )

    def _require_player(self, player_id: str) -> GamePlayer:
        player = self.get_player(player_id)
        if player is None:
            raise InvariantViolation(f"Player {player_id} is not part of this game")
        return player

    def _evolve(self, **changes) -> "Game":
        fields = {
            "players": self._players,
            "word": self._word,
            "current_player_index": self._current_player_index,
            "is_complete": self._is_complete,
            "starting_player_id": self._starting_player_id,
        }
        fields.update(changes)
        return Game(**fields)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return (
            self._players == other._players
            and self._word == other._word
            and self._current_player_index == other._current_player_index
            and self._is_complete == other._is_complete
            and self._starting_player_id == other._starting_player_id
        )

    __hash__ = None

    # --- Serialization ---

    def to_dict(self, reveal: bool = False) -> dict:
        """UI view of the game. Roles and the word only when `reveal` is set."""
        current = self.current_player()
        data = {
            "players": [p.to_dict(include_role=reveal) for p in self._players],
            "current_player_index": self._current_player_index,
            "current_player_id": current.id if current else None,
            "is_complete": self._is_complete,
            "all_players_have_seen_roles": self.all_players_have_seen_roles(),
            "starting_player_id": self._starting_player_id,
            "impostor_count": len(self.get_impostors()),
        }
        if reveal:
            data["word"] = self._word.to_dict()
        return data

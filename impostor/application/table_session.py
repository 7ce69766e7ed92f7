"""A table: the roster being set up plus the game currently being played."""
from typing import Sequence, Tuple

from impostor.domain.game import Game
from impostor.domain.player import Player


class TableSession:
    """Immutable snapshot of one device's setup screen and current game."""

    def __init__(
        self,
        session_id: str,
        players: Sequence[Player],
        game: Game | None = None,
        show_hint: bool = False,
    ):
        self._id = session_id
        self._players: Tuple[Player, ...] = tuple(players)
        self._game = game
        self._show_hint = show_hint

    @property
    def id(self) -> str:
        return self._id

    @property
    def players(self) -> list:
        return list(self._players)

    @property
    def game(self) -> Game | None:
        return self._game

    @property
    def show_hint(self) -> bool:
        return self._show_hint

    def with_players(self, players: Sequence[Player]) -> "TableSession":
        return TableSession(self._id, players, self._game, self._show_hint)

    def with_game(self, game: Game | None, show_hint: bool | None = None) -> "TableSession":
        hint = self._show_hint if show_hint is None else show_hint
        return TableSession(self._id, self._players, game, hint)

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "players": [p.to_dict() for p in self._players],
            "show_hint": self._show_hint,
            "game": self._game.to_dict() if self._game else None,
        }

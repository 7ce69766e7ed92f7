"""GamePlayer -- a Player with a role for the duration of one game."""
from impostor.domain.enums import PlayerRole
from impostor.domain.player import Player


class GamePlayer:
    """Role-tagged player. The reveal flag only ever goes from False to True."""

    def __init__(self, player: Player, role: PlayerRole, has_seen_role: bool = False):
        self._player = player
        self._role = role
        self._has_seen_role = has_seen_role

    @classmethod
    def create_normal(cls, player: Player) -> "GamePlayer":
        return cls(player, PlayerRole.NORMAL)

    @classmethod
    def create_impostor(cls, player: Player) -> "GamePlayer":
        return cls(player, PlayerRole.IMPOSTOR)

    @property
    def player(self) -> Player:
        return self._player

    @property
    def id(self) -> str:
        return self._player.id

    @property
    def name(self) -> str:
        return self._player.name

    @property
    def role(self) -> PlayerRole:
        return self._role

    @property
    def has_seen_role(self) -> bool:
        return self._has_seen_role

    def is_impostor(self) -> bool:
        return self._role == PlayerRole.IMPOSTOR

    def is_normal(self) -> bool:
        return self._role == PlayerRole.NORMAL

    def mark_role_as_seen(self) -> "GamePlayer":
        if self._has_seen_role:
            return self
        return GamePlayer(self._player, self._role, True)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GamePlayer):
            return NotImplemented
        return (
            self._player == other._player
            and self._role == other._role
            and self._has_seen_role == other._has_seen_role
        )

    def __hash__(self) -> int:
        return hash((self._player, self._role, self._has_seen_role))

    def __repr__(self) -> str:
        return f"GamePlayer(id={self.id!r}, role={self._role.value}, seen={self._has_seen_role})"

    def to_dict(self, include_role: bool = False) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "has_seen_role": self._has_seen_role,
        }
        if include_role:
            data["role"] = self._role.value
        return data

"""Player identity -- validated name value object and the Player entity."""
from impostor.domain.errors import ValidationError


class PlayerName:
    """Trimmed, non-empty player name. Immutable; compares case-insensitively."""

    MIN_LENGTH = 1
    MAX_LENGTH = 50

    __slots__ = ("_value",)

    def __init__(self, value: str):
        trimmed = (value or "").strip()
        if len(trimmed) < self.MIN_LENGTH:
            raise ValidationError("Player name cannot be empty")
        if len(trimmed) > self.MAX_LENGTH:
            raise ValidationError(
                f"Player name cannot exceed {self.MAX_LENGTH} characters"
            )
        self._value = trimmed

    @classmethod
    def create(cls, raw: str) -> "PlayerName":
        return cls(raw)

    @classmethod
    def create_optional(cls, raw: str | None) -> "PlayerName | None":
        """None for a blank name (not entered yet); still raises when too long."""
        if raw is None or not raw.strip():
            return None
        return cls(raw)

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other) -> bool:
        if not isinstance(other, PlayerName):
            return NotImplemented
        return self._value.lower() == other._value.lower()

    def __hash__(self) -> int:
        return hash(self._value.lower())

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"PlayerName({self._value!r})"


class Player:
    """
    A seat at the table. The id never changes; the name may be absent
    while the roster is being filled in.
    """

    def __init__(self, player_id: str, name: PlayerName | None = None):
        if not player_id or not player_id.strip():
            raise ValidationError("Player ID cannot be empty")
        self._id = player_id
        self._name = name

    @classmethod
    def create(cls, player_id: str, name: str = "") -> "Player":
        return cls(player_id, PlayerName.create_optional(name))

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        """Name as text, or an empty string if not set."""
        return self._name.value if self._name else ""

    @property
    def player_name(self) -> PlayerName | None:
        return self._name

    def change_name(self, new_name: str) -> "Player":
        """Returns a renamed copy. A blank name clears it."""
        return Player(self._id, PlayerName.create_optional(new_name))

    def has_valid_name(self) -> bool:
        return self._name is not None

    def has_same_name_as(self, other: "Player") -> bool:
        if self._name is None or other._name is None:
            return False
        return self._name == other._name

    def __eq__(self, other) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._id == other._id and self.name == other.name

    def __hash__(self) -> int:
        return hash((self._id, self.name))

    def __repr__(self) -> str:
        return f"Player(id={self._id!r}, name={self.name!r})"

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self.name,
            "has_valid_name": self.has_valid_name(),
        }

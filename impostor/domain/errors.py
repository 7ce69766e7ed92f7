"""Domain error taxonomy. Every failure is local and synchronous."""


class DomainError(Exception):
    """Base class for all game domain failures."""


class ValidationError(DomainError, ValueError):
    """Invalid value for a name, player or word."""


class InvariantViolation(DomainError, ValueError):
    """An operation would break a collection invariant."""


class InsufficientPlayers(DomainError, ValueError):
    def __init__(self, player_count: int, min_players: int):
        self.player_count = player_count
        self.min_players = min_players
        super().__init__(
            f"Cannot assign roles to less than {min_players} players (got {player_count})"
        )


class InvalidImpostorCount(DomainError, ValueError):
    def __init__(self, requested: int, player_count: int, max_allowed: int):
        self.requested = requested
        self.player_count = player_count
        self.max_allowed = max_allowed
        super().__init__(
            f"Invalid impostor count: {requested}. "
            f"Maximum allowed for {player_count} players is {max_allowed}"
        )


class InvalidGameSetup(DomainError, ValueError):
    """Game.start rejected its inputs. `invariant` names the broken rule."""

    def __init__(self, invariant: str, message: str):
        self.invariant = invariant
        super().__init__(message)


class NoWordsAvailable(DomainError, RuntimeError):
    """No word matches the requested filters, even after a memory reset."""


class GameAlreadyComplete(DomainError, RuntimeError):
    """Turn advance requested on a finished game."""

"""Game rules: player minimum and impostor quota."""


class GameRules:
    """Quota constants and the player-count dependent impostor cap."""

    MIN_PLAYERS = 2
    MIN_IMPOSTORS = 1
    MAX_IMPOSTORS = 3
    MAX_IMPOSTOR_RATIO = 0.5
    INITIAL_PLAYERS_COUNT = 2

    @staticmethod
    def max_impostors(player_count: int) -> int:
        """
        Impostors never exceed half the table (rounded down), never go above
        MAX_IMPOSTORS and never drop below MIN_IMPOSTORS.
        5 players -> 2, 6 players -> 3, 10 players -> 3.
        """
        by_ratio = int(player_count * GameRules.MAX_IMPOSTOR_RATIO)
        capped = min(by_ratio, GameRules.MAX_IMPOSTORS)
        return max(capped, GameRules.MIN_IMPOSTORS)

    @staticmethod
    def is_valid_impostor_count(impostor_count: int, player_count: int) -> bool:
        if impostor_count < GameRules.MIN_IMPOSTORS:
            return False
        if impostor_count > GameRules.MAX_IMPOSTORS:
            return False
        return impostor_count <= GameRules.max_impostors(player_count)

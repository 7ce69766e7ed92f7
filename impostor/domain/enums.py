"""Enums used across the domain."""
from enum import Enum, IntEnum


class PlayerRole(str, Enum):
    IMPOSTOR = "impostor"
    NORMAL = "normal"


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

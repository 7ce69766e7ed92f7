"""Unit tests for the start_game use case."""
import random

import pytest

from impostor.application.game_management import GameManagementService
from impostor.domain.errors import InsufficientPlayers, InvalidImpostorCount, NoWordsAvailable
from impostor.domain.role_assignment import RoleAssignmentService
from impostor.domain.word_selection import WordSelectionService
from tests.conftest import InMemoryWordMemory, InMemoryWordRepository, make_players


@pytest.fixture
def memory():
    return InMemoryWordMemory()


@pytest.fixture
def service(catalog_words, memory):
    rng = random.Random(99)
    return GameManagementService(
        RoleAssignmentService(rng=rng),
        WordSelectionService(InMemoryWordRepository(catalog_words), memory, rng),
        rng,
    )


class TestStartGame:
    def test_returns_fresh_game(self, service):
        game = service.start_game(make_players(4), 2)
        assert game.current_player_index == 0
        assert game.is_complete is False
        assert len(game.get_impostors()) == 2

    def test_roster_order_is_kept(self, service):
        game = service.start_game(make_players(4), 1)
        assert [p.id for p in game.players] == ["p1", "p2", "p3", "p4"]

    def test_word_respects_filters(self, service):
        game = service.start_game(make_players(3), 1, ["food"], 3)
        assert game.word.id == "sushi"

    def test_word_marked_used(self, service, memory):
        game = service.start_game(make_players(3), 1)
        assert memory.has_been_used(game.word.id)

    def test_starting_player_is_in_roster(self, service):
        game = service.start_game(make_players(5), 1)
        assert game.starting_player_id in {"p1", "p2", "p3", "p4", "p5"}

    def test_starting_player_varies_between_games(self, catalog_words):
        rng = random.Random(5)
        service = GameManagementService(
            RoleAssignmentService(rng=rng),
            WordSelectionService(InMemoryWordRepository(catalog_words), InMemoryWordMemory(reset_threshold=0.2), rng),
            rng,
        )
        starters = {service.start_game(make_players(4), 1).starting_player_id for _ in range(30)}
        assert len(starters) > 1


class TestStartGameErrorsPropagate:
    def test_insufficient_players(self, service):
        with pytest.raises(InsufficientPlayers):
            service.start_game(make_players(1), 1)

    def test_invalid_impostor_count(self, service):
        with pytest.raises(InvalidImpostorCount):
            service.start_game(make_players(3), 2)

    def test_no_words(self, service):
        with pytest.raises(NoWordsAvailable):
            service.start_game(make_players(3), 1, ["sports"])

    def test_role_failure_does_not_consume_word(self, service, memory):
        with pytest.raises(InvalidImpostorCount):
            service.start_game(make_players(3), 3)
        assert memory.used == set()

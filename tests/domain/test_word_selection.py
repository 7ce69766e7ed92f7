"""Unit tests for WordSelectionService."""
import random

import pytest

from impostor.domain.errors import NoWordsAvailable
from impostor.domain.word_selection import WordSelectionService
from tests.conftest import InMemoryWordMemory, InMemoryWordRepository


@pytest.fixture
def repo(catalog_words):
    return InMemoryWordRepository(catalog_words)


def make_service(repo, memory, seed=1):
    return WordSelectionService(repo, memory, random.Random(seed))


class TestSelectWord:
    def test_marks_selected_word_as_used(self, repo):
        memory = InMemoryWordMemory()
        word = make_service(repo, memory).select_word()
        assert memory.has_been_used(word.id)

    def test_empty_categories_use_full_catalog(self, repo, catalog_words):
        memory = InMemoryWordMemory()
        service = make_service(repo, memory)
        seen = {service.select_word([]).id for _ in range(4)}
        assert len(seen) == 4
        assert seen <= {w.id for w in catalog_words}

    def test_respects_category_filter(self, repo):
        memory = InMemoryWordMemory(reset_threshold=1.0)
        service = make_service(repo, memory)
        for _ in range(2):
            assert service.select_word(["food"]).belongs_to_any_category(["food"])

    def test_respects_difficulty_filter(self, repo):
        word = make_service(repo, InMemoryWordMemory()).select_word([], 3)
        assert word.id == "sushi"

    def test_category_and_difficulty_combined(self, repo):
        word = make_service(repo, InMemoryWordMemory()).select_word(["animals"], 2)
        assert word.id in {"penguin", "octopus"}

    def test_never_returns_used_word(self, repo):
        for seed in range(20):
            memory = InMemoryWordMemory(used={"lion", "penguin"})
            word = make_service(repo, memory, seed).select_word(["animals"])
            assert word.id == "octopus"
            assert memory.reset_calls == 0

    def test_no_match_at_all_raises(self, repo):
        with pytest.raises(NoWordsAvailable):
            make_service(repo, InMemoryWordMemory()).select_word(["sports"])


class TestSelectWordReset:
    def test_exhausted_filter_below_threshold_raises_without_reset(self, repo):
        memory = InMemoryWordMemory(used={"pizza", "sushi"})
        with pytest.raises(NoWordsAvailable, match="food"):
            make_service(repo, memory).select_word(["food"])
        assert memory.reset_calls == 0
        assert memory.used == {"pizza", "sushi"}

    def test_reset_at_threshold_then_retry(self, repo):
        memory = InMemoryWordMemory(used={"lion", "penguin", "pizza", "sushi"})
        word = make_service(repo, memory).select_word(["food"])
        assert memory.reset_calls == 1
        assert word.id in {"pizza", "sushi"}
        assert memory.used == {word.id}

    def test_reset_then_still_nothing_raises(self, repo):
        memory = InMemoryWordMemory(used={"lion", "penguin", "pizza", "sushi", "octopus"})
        with pytest.raises(NoWordsAvailable):
            make_service(repo, memory).select_word(["sports"])
        assert memory.reset_calls == 1

    def test_full_usage_with_all_used_threshold(self, repo, catalog_words):
        memory = InMemoryWordMemory(used={w.id for w in catalog_words}, reset_threshold=1.0)
        word = make_service(repo, memory).select_word()
        assert memory.reset_calls == 1
        assert memory.used == {word.id}

    def test_stale_ledger_entries_do_not_trigger_reset(self, repo):
        memory = InMemoryWordMemory(used={"pizza", "sushi", "gone-1", "gone-2", "gone-3"})
        with pytest.raises(NoWordsAvailable):
            make_service(repo, memory).select_word(["food"])
        assert memory.reset_calls == 0


class TestSelectWordLedgerLookups:
    def test_reads_used_ids_in_one_lookup(self, repo):
        class BulkOnlyMemory(InMemoryWordMemory):
            def has_been_used(self, word_id):
                raise AssertionError("per-word lookup")

        memory = BulkOnlyMemory(used={"lion", "penguin"})
        word = make_service(repo, memory).select_word(["animals"])
        assert word.id == "octopus"

"""Integration tests for word catalog routes and /health."""


class TestCategories:
    def test_lists_categories_with_counts(self, client):
        data = client.get("/api/categories").json()
        counts = {c["id"]: c["word_count"] for c in data}
        assert counts == {"animals": 3, "food": 2, "empty": 0}


class TestWordHistory:
    def test_stats_start_empty(self, client):
        stats = client.get("/api/words/stats").json()
        assert stats["used_count"] == 0
        assert stats["total_count"] == 4

    def test_game_start_uses_a_word(self, client, table):
        client.post(f"/api/tables/{table['id']}/game", json={"impostor_count": 1})
        assert client.get("/api/words/stats").json()["used_count"] == 1

    def test_reset(self, client, table):
        client.post(f"/api/tables/{table['id']}/game", json={"impostor_count": 1})
        stats = client.post("/api/words/reset").json()
        assert stats["used_count"] == 0


class TestHealth:
    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "online"
        assert data["persistence"] == "json"
        assert data["words_loaded"] == 4

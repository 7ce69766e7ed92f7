"""Word catalog API routes -- categories and the used-word history."""
from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["words"])

_services = None


def init_word_routes(services):
    global _services
    _services = services


@router.get("/categories")
def api_get_categories():
    """Categories with the number of words in each."""
    words = _services.word_repository.get_all_words()
    return [
        {**c.to_dict(), "word_count": sum(1 for w in words if w.belongs_to_category(c.id))}
        for c in _services.word_repository.get_categories()
    ]


@router.get("/words/stats")
def api_word_stats():
    return _services.word_history.stats()


@router.post("/words/reset")
def api_reset_word_history():
    _services.word_history.reset()
    return _services.word_history.stats()

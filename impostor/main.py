"""Entry point. Wires services into routes and serves the local API.

Persistence strategy for the used-word ledger:
  - If DATABASE_URL is set  -> SQL table via SQLAlchemy.
  - Otherwise               -> JSON file in the data directory.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from impostor import config
from impostor.api.routes.table_routes import router as table_router, init_routes
from impostor.api.routes.word_routes import router as word_router, init_word_routes
from impostor.container import Services, build_services

log = logging.getLogger("impostor.startup")


def create_app(services: Services) -> FastAPI:
    app = FastAPI(
        title="Impostor",
        description="Local party game: find the impostor.",
        version="1.0.0",
    )
    # The UI is served from another local origin during development.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    init_routes(services)
    init_word_routes(services)
    app.include_router(table_router)
    app.include_router(word_router)

    @app.get("/health")
    def health():
        return {
            "status": "online",
            "persistence": "sql" if config.DATABASE_URL else "json",
            "words_loaded": len(services.word_repository.get_all_words()),
            "min_players": services.players.min_players,
        }

    return app


logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

services = build_services(
    catalog_path=config.CATALOG_PATH,
    word_memory_path=config.WORD_MEMORY_PATH,
    database_url=config.DATABASE_URL,
    min_players=config.MIN_PLAYERS,
    reset_threshold=config.WORD_RESET_THRESHOLD,
)
app = create_app(services)
log.info("Impostor API ready (min players: %d)", config.MIN_PLAYERS)


def run():
    import uvicorn

    uvicorn.run("impostor.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()

"""Engine and session factory for the SQL word ledger."""
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from impostor.infrastructure.database.models import Base

log = logging.getLogger("impostor.startup")


def resolve_database_url(raw: str) -> str:
    """Clean a pasted URL: whitespace, surrounding quotes, `postgres://` scheme."""
    url = (raw or "").strip()
    if len(url) >= 2 and url[0] == url[-1] and url[0] in ('"', "'"):
        url = url[1:-1].strip()
    # Heroku / Neon sometimes expose postgres:// instead of postgresql://
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def build_session_factory(raw_url: str) -> sessionmaker:
    """Create the engine, make sure tables exist, return a sessionmaker."""
    url = resolve_database_url(raw_url)
    if not url:
        raise ValueError("Database URL is empty")

    masked = url.split("@")[-1].split("?")[0] if "@" in url else url.split("://")[0]
    log.info("Initialising word memory database -> %s", masked)

    if url == "sqlite://" or (url.startswith("sqlite") and ":memory:" in url):
        # One shared connection, otherwise each session sees an empty database
        engine = create_engine(
            url, connect_args={"check_same_thread": False}, poolclass=StaticPool
        )
    else:
        engine = create_engine(url, pool_pre_ping=True, echo=False)

    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)

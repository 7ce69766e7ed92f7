"""Runtime settings, read from the environment (and a local .env file)."""
import os

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_DIR = os.path.dirname(BASE_DIR)
load_dotenv(os.path.join(PROJECT_DIR, ".env"))

DATA_DIR = os.environ.get("IMPOSTOR_DATA_DIR", os.path.join(BASE_DIR, "data"))
CATALOG_PATH = os.environ.get("IMPOSTOR_CATALOG_PATH", os.path.join(DATA_DIR, "catalog.json"))
WORD_MEMORY_PATH = os.environ.get(
    "IMPOSTOR_WORD_MEMORY_PATH", os.path.join(DATA_DIR, "used_words.json")
)

# When set, the used-word ledger lives in SQL instead of the JSON file.
DATABASE_URL = os.environ.get("DATABASE_URL", "")

# One canonical minimum for the roster, role assignment and game start.
MIN_PLAYERS = max(int(os.environ.get("IMPOSTOR_MIN_PLAYERS", "2")), 2)
WORD_RESET_THRESHOLD = float(os.environ.get("IMPOSTOR_WORD_RESET_THRESHOLD", "0.8"))

LOG_LEVEL = os.environ.get("IMPOSTOR_LOG_LEVEL", "INFO").upper()
HOST = os.environ.get("IMPOSTOR_HOST", "127.0.0.1")
PORT = int(os.environ.get("IMPOSTOR_PORT", "8000"))

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


ITUNES_SEARCH_URL = os.getenv("ITUNES_SEARCH_URL", "https://itunes.apple.com/search")
ITUNES_SEARCH_LIMIT = int(os.getenv("ITUNES_SEARCH_LIMIT", 50))
ITUNES_TIMEOUT = float(os.getenv("ITUNES_TIMEOUT", 10))

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_BASE_URL = os.getenv(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/models"
)
GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", 15))

# Queries longer than this many words are treated as a "vibe" and rewritten.
REWRITE_MIN_WORDS = int(os.getenv("REWRITE_MIN_WORDS", 3))

MAX_RESULTS = int(os.getenv("MAX_RESULTS", 6))
MIN_QUALITY_SCORE = float(os.getenv("MIN_QUALITY_SCORE", 0.3))
PRIORITIZE_POPULARITY = _env_flag("PRIORITIZE_POPULARITY", True)
ENSURE_GENRE_DIVERSITY = _env_flag("ENSURE_GENRE_DIVERSITY", True)
PREFER_RECENT_RELEASES = _env_flag("PREFER_RECENT_RELEASES", False)

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", 8000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

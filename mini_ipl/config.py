"""
Tournament configuration
"""
import logging
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _get_env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %d", name, raw, default)
        return default


def _get_env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; ignoring it", name, raw)
        return None


class Settings:
    """Tournament settings from environment variables"""

    TOURNAMENT_NAME: str = os.getenv("TOURNAMENT_NAME", "IPL Mini Tournament")

    # Innings limits
    OVERS_PER_INNINGS: int = _get_env_int("OVERS_PER_INNINGS", 2)
    WICKETS_PER_INNINGS: int = _get_env_int("WICKETS_PER_INNINGS", 2)
    BALLS_PER_OVER: int = _get_env_int("BALLS_PER_OVER", 6)

    # Points
    POINTS_FOR_WIN: int = _get_env_int("POINTS_FOR_WIN", 2)
    POINTS_FOR_TIE: int = _get_env_int("POINTS_FOR_TIE", 1)

    SQUAD_SIZE: int = _get_env_int("SQUAD_SIZE", 5)

    # Unset means a fresh seed per run
    RANDOM_SEED: Optional[int] = _get_env_optional_int("RANDOM_SEED")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma-separated extra origins for the API
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")


settings = Settings()

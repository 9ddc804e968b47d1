import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer.")
        return default


class Settings:
    PROJECT_NAME: str = "wordmonster"
    DEBUG: bool = os.environ.get("WORDMONSTER_DEBUG", "") == "1"
    LOG_DIR: str = os.environ.get("WORDMONSTER_LOG_DIR", "log")
    LOG_FILE: str = "wordmonster.log"
    LOG_TO_DB: bool = os.environ.get("WORDMONSTER_LOG_TO_DB", "") == "1"
    DB_DIR: str = os.environ.get("WORDMONSTER_DB_DIR", "db")
    DB_FILE: str = "wordmonster.db"
    WORDS_FILE: str = os.environ.get("WORDMONSTER_WORDS_FILE", "vocabulary/words.json")
    MIN_POOL_SIZE: int = 4
    MAX_HEARTS: int = 3
    OPTION_COUNT: int = 4
    WRONG_LIST_LIMIT: int = 80
    RANDOM_SEED: Optional[int] = _env_int("WORDMONSTER_RANDOM_SEED", None)
    MASTERY_KEY: str = "wordMonsterMastery"
    WRONG_COUNTS_KEY: str = "wordMonsterWrongCounts"
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")

    @property
    def db_path(self) -> str:
        return os.path.join(self.DB_DIR, self.DB_FILE)


settings = Settings()

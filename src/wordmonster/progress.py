import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Dict, Optional, Set, Tuple

from .database import read_record, write_record
from .models import WordPair, normalize_key

logger = logging.getLogger(__name__)

MasterySet = Set[str]
WrongCounts = Dict[str, int]

DEFAULT_MASTERY_KEY = "wordMonsterMastery"
DEFAULT_WRONG_COUNTS_KEY = "wordMonsterWrongCounts"


def parse_mastery(raw: Optional[str]) -> MasterySet:
    """Decode a persisted mastery list; anything malformed yields an empty set."""
    if raw is None:
        return set()
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        logger.warning("Mastery record is not valid JSON. Using empty set.")
        return set()
    if not isinstance(data, list):
        logger.warning("Mastery record is not a list. Using empty set.")
        return set()
    return {normalize_key(item) for item in data if isinstance(item, str)}


def parse_wrong_counts(raw: Optional[str]) -> WrongCounts:
    """Decode a persisted wrong-count map; anything malformed yields an empty map."""
    if raw is None:
        return {}
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        logger.warning("Wrong-count record is not valid JSON. Using empty map.")
        return {}
    if not isinstance(data, dict):
        logger.warning("Wrong-count record is not an object. Using empty map.")
        return {}

    counts: WrongCounts = {}
    for key, value in data.items():
        # bool is an int subclass; reject it along with negatives
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            continue
        norm = normalize_key(key)
        counts[norm] = counts.get(norm, 0) + value
    return counts


class ProgressStore(ABC):
    """
    Mastery set and wrong-answer counts, persisted as two independently
    keyed records. Every mutation writes through to the backend.

    Wrong counts only ever grow; resetting mastery never touches them.
    """

    def __init__(
        self,
        mastery_key: str = DEFAULT_MASTERY_KEY,
        wrong_counts_key: str = DEFAULT_WRONG_COUNTS_KEY,
    ):
        self.mastery_key = mastery_key
        self.wrong_counts_key = wrong_counts_key
        self.mastery: MasterySet = set()
        self.wrong_counts: WrongCounts = {}

    # --- Backend hooks ---

    @abstractmethod
    def _read(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def _write(self, key: str, payload: str) -> None:
        pass

    # --- Lifecycle ---

    def load(self) -> Tuple[MasterySet, WrongCounts]:
        try:
            raw_mastery = self._read(self.mastery_key)
            raw_counts = self._read(self.wrong_counts_key)
        except sqlite3.Error as e:
            logger.error(f"Could not read progress: {e}. Starting empty.")
            raw_mastery = raw_counts = None

        self.mastery = parse_mastery(raw_mastery)
        self.wrong_counts = parse_wrong_counts(raw_counts)
        logger.info(
            f"Progress loaded: {len(self.mastery)} mastered, "
            f"{len(self.wrong_counts)} words with wrong answers"
        )
        return set(self.mastery), dict(self.wrong_counts)

    def save_mastery(self, mastery: Optional[MasterySet] = None) -> None:
        if mastery is not None:
            self.mastery = {normalize_key(k) for k in mastery}
        self._persist(self.mastery_key, sorted(self.mastery))

    def save_wrong_counts(self, wrong_counts: Optional[WrongCounts] = None) -> None:
        if wrong_counts is not None:
            self.wrong_counts = {normalize_key(k): v for k, v in wrong_counts.items()}
        self._persist(self.wrong_counts_key, self.wrong_counts)

    def _persist(self, key: str, data) -> None:
        try:
            self._write(key, json.dumps(data, ensure_ascii=False))
        except sqlite3.Error:
            logger.exception(f"Failed to persist progress record {key}")

    # --- Mutations ---

    def mark_mastered(self, word: WordPair) -> None:
        key = word.key
        if key in self.mastery:
            return
        self.mastery.add(key)
        self.save_mastery()

    def increment_wrong(self, word: WordPair) -> int:
        key = word.key
        self.wrong_counts[key] = self.wrong_counts.get(key, 0) + 1
        self.save_wrong_counts()
        return self.wrong_counts[key]

    def reset_mastery(self) -> None:
        self.mastery = set()
        self.save_mastery()
        logger.info("Mastery progress reset")

    # --- Queries ---

    def is_mastered(self, word: WordPair) -> bool:
        return word.key in self.mastery

    def wrong_count(self, word: WordPair) -> int:
        return self.wrong_counts.get(word.key, 0)


class InMemoryProgressStore(ProgressStore):
    """Keeps records in a dict; `records` holds the serialized payloads."""

    def __init__(self, records: Optional[Dict[str, str]] = None, **kwargs):
        super().__init__(**kwargs)
        self.records: Dict[str, str] = dict(records or {})
        self.writes = 0

    def _read(self, key: str) -> Optional[str]:
        return self.records.get(key)

    def _write(self, key: str, payload: str) -> None:
        self.records[key] = payload
        self.writes += 1


class SQLiteProgressStore(ProgressStore):
    """Stores both records in the `progress` table of the game database."""

    def __init__(self, db_path: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.db_path = db_path

    def _read(self, key: str) -> Optional[str]:
        return read_record(key, self.db_path)

    def _write(self, key: str, payload: str) -> None:
        write_record(key, payload, self.db_path)

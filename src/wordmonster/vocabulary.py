import logging
import os
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from .models import WordPair

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("en", "zh")


class WordStore:
    """Holds the immutable list of word pairs for the process."""

    def __init__(self, path: Optional[str] = None, words: Iterable[WordPair] = ()):
        self.path = path
        self._words: Tuple[WordPair, ...] = tuple(words)

    @property
    def words(self) -> Tuple[WordPair, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def load_all(self) -> Tuple[WordPair, ...]:
        """(Re)loads the word list; any failure leaves the store empty."""
        self._words = ()
        if not self.path:
            return self._words
        if not os.path.exists(self.path):
            logger.warning(f"Word list {self.path} not found. Starting empty.")
            return self._words

        try:
            df = self._read_frame(self.path)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load {self.path}: {e}")
            return self._words

        if df.empty:
            logger.warning(f"Word list {self.path} is empty.")
            return self._words

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            logger.error(f"Skipping {self.path}: Missing columns {missing}.")
            return self._words

        self._words = tuple(self._to_pairs(df))
        logger.info(f"Loaded {len(self._words)} words from {self.path}")
        return self._words

    @staticmethod
    def _read_frame(path: str) -> pd.DataFrame:
        if path.lower().endswith(".csv"):
            return pd.read_csv(path, encoding="utf-8", dtype=str)
        return pd.read_json(path, orient="records", dtype=False, convert_dates=False)

    @staticmethod
    def _to_pairs(df: pd.DataFrame) -> List[WordPair]:
        df = df[list(REQUIRED_COLUMNS)].dropna()
        is_text = pd.Series(True, index=df.index, dtype=bool)
        for column in REQUIRED_COLUMNS:
            is_text &= df[column].map(lambda v: isinstance(v, str)).astype(bool)
        df = df[is_text].copy()
        for column in REQUIRED_COLUMNS:
            df[column] = df[column].astype(str).str.strip()
        df = df[(df["en"] != "") & (df["zh"] != "")]
        return [
            WordPair(en=record["en"], zh=record["zh"])
            for record in df.to_dict("records")
        ]

"""Word Monster: an English/Chinese vocabulary drilling game."""

from .engine import SessionEngine
from .game import VocabularyGame
from .models import Mode, QuestionType, WordPair
from .pool import PoolBuilder
from .progress import InMemoryProgressStore, ProgressStore, SQLiteProgressStore
from .questions import QuestionGenerator
from .vocabulary import WordStore

__all__ = [
    "InMemoryProgressStore",
    "Mode",
    "PoolBuilder",
    "ProgressStore",
    "QuestionGenerator",
    "QuestionType",
    "SQLiteProgressStore",
    "SessionEngine",
    "VocabularyGame",
    "WordPair",
    "WordStore",
]

import random

from .config import settings
from .engine import SessionEngine
from .game import VocabularyGame
from .pool import PoolBuilder
from .progress import SQLiteProgressStore
from .questions import QuestionGenerator
from .vocabulary import WordStore

rng = random.Random(settings.RANDOM_SEED)

word_store = WordStore(settings.WORDS_FILE)
progress_store = SQLiteProgressStore(
    settings.db_path,
    mastery_key=settings.MASTERY_KEY,
    wrong_counts_key=settings.WRONG_COUNTS_KEY,
)
game = VocabularyGame(
    word_store,
    progress_store,
    SessionEngine(
        progress_store,
        questions=QuestionGenerator(rng, option_count=settings.OPTION_COUNT),
        pool_builder=PoolBuilder(rng),
        min_pool_size=settings.MIN_POOL_SIZE,
        max_hearts=settings.MAX_HEARTS,
    ),
    wrong_list_limit=settings.WRONG_LIST_LIMIT,
)

import random
from typing import Iterable, List

import pytest

from wordmonster.engine import SessionEngine
from wordmonster.models import Mode, QuestionType, WordPair
from wordmonster.pool import PoolBuilder, membership
from wordmonster.progress import InMemoryProgressStore
from wordmonster.questions import QuestionGenerator

ANIMALS = [
    WordPair(en="cat", zh="猫"),
    WordPair(en="dog", zh="狗"),
    WordPair(en="bird", zh="鸟"),
    WordPair(en="fish", zh="鱼"),
]

FIVE_WORDS = ANIMALS + [WordPair(en="apple", zh="苹果")]


class OrderedPoolBuilder(PoolBuilder):
    """Keeps word-list order so tests know which word comes up."""

    def build_pool(self, mode, words, mastery, wrong_counts):
        eligible = membership(mode, mastery, wrong_counts)
        return [w for w in words if eligible(w)]


class ScriptedQuestions(QuestionGenerator):
    """Hands out question types from a script, repeating the last one."""

    def __init__(self, types: Iterable[QuestionType], rng=None):
        super().__init__(rng or random.Random(1))
        self.types: List[QuestionType] = list(types)

    def choose_type(self) -> QuestionType:
        if len(self.types) > 1:
            return self.types.pop(0)
        return self.types[0]


@pytest.fixture
def progress():
    return InMemoryProgressStore()


@pytest.fixture
def make_engine(progress):
    def _make(*types, max_hearts=3, min_pool_size=4):
        return SessionEngine(
            progress,
            questions=ScriptedQuestions(types or [QuestionType.EN_TO_ZH]),
            pool_builder=OrderedPoolBuilder(),
            min_pool_size=min_pool_size,
            max_hearts=max_hearts,
        )

    return _make


@pytest.fixture
def started(make_engine):
    """Engine with an active normal-mode run over ANIMALS."""

    def _start(*types, words=ANIMALS, **kwargs):
        engine = make_engine(*types, **kwargs)
        assert engine.start(Mode.NORMAL, words) is not None
        return engine

    return _start

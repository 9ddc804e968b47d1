from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


def normalize_key(text: str) -> str:
    """Canonical identifier for an English headword."""
    return text.strip().lower()


class WordPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    en: str
    zh: str

    @property
    def key(self) -> str:
        return normalize_key(self.en)


class Mode(str, Enum):
    NORMAL = "normal"
    REVIEW = "review"
    WRONG = "wrong"


class QuestionType(str, Enum):
    EN_TO_ZH = "enToZh"
    ZH_TO_EN = "zhToEn"
    SPELL = "spell"


class FeedbackStage(str, Enum):
    AWAITING = "awaiting"
    HINTED = "hint"
    CORRECT = "correct"
    WRONG = "wrong"

    @property
    def revealed(self) -> bool:
        return self in (FeedbackStage.CORRECT, FeedbackStage.WRONG)


class RunPhase(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    ENDED = "ended"


class SessionState(BaseModel):
    """The live run. Only SessionEngine mutates it."""

    mode: Mode
    pool: List[WordPair]
    index: int = 0
    hearts: int = 3
    score: int = 0
    question_type: QuestionType = QuestionType.EN_TO_ZH
    options: List[WordPair] = []
    spell_input: str = ""
    stage: FeedbackStage = FeedbackStage.AWAITING
    hint: Optional[str] = None
    wrong_attempts: int = 0
    game_over: bool = False
    answered: int = 0

    @property
    def current_word(self) -> WordPair:
        return self.pool[self.index]


class AnswerResult(BaseModel):
    word: WordPair
    submitted: str
    is_correct: bool
    stage: FeedbackStage
    hint: Optional[str] = None
    hearts: int
    score: int
    game_over: bool


class RunSummary(BaseModel):
    mode: Mode
    score: int
    total_questions: int
    answered: int
    game_over: bool
    mastered_count: int
    total_words: int


class QuestionView(BaseModel):
    mode: Mode
    current_index: int
    total_questions: int
    question_type: QuestionType
    prompt: str
    options: List[str]
    spell_input: str
    stage: FeedbackStage
    hint: Optional[str] = None
    hearts: int
    max_hearts: int
    score: int
    game_over: bool
    answer: Optional[WordPair] = None


class Counters(BaseModel):
    total_words: int
    mastered: int
    unmastered: int
    wrong_words: int


class WrongEntry(BaseModel):
    key: str
    en: str
    zh: str
    count: int

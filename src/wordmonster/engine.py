import logging
from typing import Iterable, Optional, Tuple

from .models import (
    AnswerResult,
    FeedbackStage,
    Mode,
    QuestionType,
    RunPhase,
    RunSummary,
    SessionState,
    WordPair,
    normalize_key,
)
from .pool import PoolBuilder
from .progress import ProgressStore
from .questions import QuestionGenerator

logger = logging.getLogger(__name__)


class SessionEngine:
    """
    Runs one quiz at a time: Idle -> Active -> Ended.

    Each question moves through awaiting -> hint -> correct | wrong. The first
    miss earns a hint, the second reveals the answer and costs a heart. Every
    miss is recorded in the progress store; a correct answer marks the word
    mastered. Calls that do not fit the current state are ignored and return
    None/False.
    """

    def __init__(
        self,
        progress: ProgressStore,
        questions: Optional[QuestionGenerator] = None,
        pool_builder: Optional[PoolBuilder] = None,
        min_pool_size: int = 4,
        max_hearts: int = 3,
    ):
        self.progress = progress
        self.questions = questions or QuestionGenerator()
        self.pool_builder = pool_builder or PoolBuilder()
        self.min_pool_size = min_pool_size
        self.max_hearts = max_hearts

        self.phase = RunPhase.IDLE
        self.state: Optional[SessionState] = None
        self.summary: Optional[RunSummary] = None
        self._words: Tuple[WordPair, ...] = ()

    # --- Run lifecycle ---

    def start(self, mode: Mode, words: Iterable[WordPair]) -> Optional[SessionState]:
        """Starts a new run, or returns None (changing nothing) when fewer
        than `min_pool_size` words are eligible for the mode."""
        words = tuple(words)
        pool = self.pool_builder.build_pool(
            mode, words, self.progress.mastery, self.progress.wrong_counts
        )
        if len(pool) < self.min_pool_size:
            logger.info(
                f"Refused to start {mode.value} run: {len(pool)} eligible words"
            )
            return None

        state = SessionState(mode=mode, pool=pool, hearts=self.max_hearts)
        self._roll_question(state)

        self._words = words
        self.state = state
        self.summary = None
        self.phase = RunPhase.ACTIVE
        logger.info(f"Started {mode.value} run with {len(pool)} words")
        return state

    def abandon(self) -> None:
        if self.phase == RunPhase.ACTIVE:
            logger.info("Run abandoned")
        self.state = None
        self.summary = None
        self.phase = RunPhase.IDLE

    def end_run(self) -> Optional[RunSummary]:
        """Explicit end-of-run request; honoured only once the hearts are gone."""
        if self.phase != RunPhase.ACTIVE or not self.state.game_over:
            return None
        return self._end()

    def _end(self) -> RunSummary:
        state = self.state
        mastered = sum(1 for w in self._words if w.key in self.progress.mastery)
        self.summary = RunSummary(
            mode=state.mode,
            score=state.score,
            total_questions=len(state.pool),
            answered=state.answered,
            game_over=state.game_over,
            mastered_count=mastered,
            total_words=len(self._words),
        )
        self.phase = RunPhase.ENDED
        logger.info(
            f"Run ended: score {state.score}/{len(state.pool)}, "
            f"game over: {state.game_over}"
        )
        return self.summary

    # --- Questions ---

    def _roll_question(self, state: SessionState) -> None:
        state.question_type = self.questions.choose_type()
        state.options = self.questions.options_for(
            state.question_type, state.current_word, state.pool
        )
        state.spell_input = ""
        state.stage = FeedbackStage.AWAITING
        state.hint = None
        state.wrong_attempts = 0

    def advance(self) -> bool:
        state = self.state
        if (
            self.phase != RunPhase.ACTIVE
            or not state.stage.revealed
            or state.game_over
        ):
            return False
        if state.index + 1 >= len(state.pool):
            self._end()
            return True
        state.index += 1
        self._roll_question(state)
        return True

    # --- Grading ---

    def _accepting(self, spelling: bool) -> bool:
        state = self.state
        if self.phase != RunPhase.ACTIVE or state.stage.revealed:
            return False
        return (state.question_type == QuestionType.SPELL) == spelling

    def submit_choice(self, value: str) -> Optional[AnswerResult]:
        if not self._accepting(spelling=False):
            return None
        word = self.state.current_word
        if self.state.question_type == QuestionType.EN_TO_ZH:
            expected = word.zh
        else:
            expected = word.en
        return self._grade(value, value == expected)

    def update_spelling(self, text: str) -> bool:
        if not self._accepting(spelling=True):
            return False
        self.state.spell_input = text
        return True

    def submit_spelling(self, text: Optional[str] = None) -> Optional[AnswerResult]:
        if not self._accepting(spelling=True):
            return None
        if text is not None:
            self.state.spell_input = text
        answer = normalize_key(self.state.spell_input)
        if not answer:
            return None
        is_correct = answer == self.state.current_word.key
        return self._grade(self.state.spell_input, is_correct)

    def _grade(self, submitted: str, is_correct: bool) -> AnswerResult:
        state = self.state
        word = state.current_word

        if is_correct:
            self.progress.mark_mastered(word)
            state.stage = FeedbackStage.CORRECT
            state.hint = None
            state.score += 1
            state.answered += 1
        elif state.wrong_attempts == 0:
            self.progress.increment_wrong(word)
            state.stage = FeedbackStage.HINTED
            state.hint = self.questions.hint_for(state.question_type, word)
            state.wrong_attempts = 1
            state.spell_input = ""
        else:
            self.progress.increment_wrong(word)
            state.stage = FeedbackStage.WRONG
            state.hint = None
            state.wrong_attempts = 2
            state.hearts = max(state.hearts - 1, 0)
            state.game_over = state.hearts <= 0
            state.answered += 1
            state.spell_input = ""

        logger.debug(
            f"Graded '{word.en}' ({state.question_type.value}): {state.stage.value}"
        )
        return AnswerResult(
            word=word,
            submitted=submitted,
            is_correct=is_correct,
            stage=state.stage,
            hint=state.hint,
            hearts=state.hearts,
            score=state.score,
            game_over=state.game_over,
        )

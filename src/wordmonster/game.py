from typing import List, Optional

from .engine import SessionEngine
from .models import (
    AnswerResult,
    Counters,
    Mode,
    QuestionType,
    QuestionView,
    RunPhase,
    RunSummary,
    WrongEntry,
)
from .progress import ProgressStore
from .vocabulary import WordStore


class VocabularyGame:
    """The controls a learner has: start, answer, advance, go home, reset."""

    def __init__(
        self,
        word_store: WordStore,
        progress: ProgressStore,
        engine: Optional[SessionEngine] = None,
        wrong_list_limit: Optional[int] = None,
    ):
        self.word_store = word_store
        self.progress = progress
        self.engine = engine or SessionEngine(progress)
        self.wrong_list_limit = wrong_list_limit
        self.mode = Mode.NORMAL

    @property
    def phase(self) -> RunPhase:
        return self.engine.phase

    @property
    def summary(self) -> Optional[RunSummary]:
        return self.engine.summary

    # --- Home screen ---

    def counters(self) -> Counters:
        words = self.word_store.words
        mastered = sum(1 for w in words if w.key in self.progress.mastery)
        wrong = sum(1 for w in words if self.progress.wrong_counts.get(w.key, 0) >= 1)
        return Counters(
            total_words=len(words),
            mastered=mastered,
            unmastered=len(words) - mastered,
            wrong_words=wrong,
        )

    def wrong_list(self, limit: Optional[int] = None) -> List[WrongEntry]:
        """Words with at least one wrong attempt, most-missed first."""
        entries = [
            WrongEntry(key=w.key, en=w.en, zh=w.zh, count=self.progress.wrong_count(w))
            for w in self.word_store.words
            if self.progress.wrong_count(w) >= 1
        ]
        entries.sort(key=lambda e: e.count, reverse=True)
        limit = self.wrong_list_limit if limit is None else limit
        return entries[:limit] if limit else entries

    def reset_mastery(self, confirm: bool = False) -> bool:
        if not confirm:
            return False
        self.progress.reset_mastery()
        return True

    # --- Run controls ---

    def start_session(self, mode: Mode) -> Optional[QuestionView]:
        state = self.engine.start(mode, self.word_store.words)
        if state is None:
            return None
        self.mode = mode
        return self.current_view()

    def play_again(self) -> Optional[QuestionView]:
        return self.start_session(self.mode)

    def submit_choice(self, value: str) -> Optional[AnswerResult]:
        return self.engine.submit_choice(value)

    def update_spelling(self, text: str) -> bool:
        return self.engine.update_spelling(text)

    def submit_spelling(self, text: Optional[str] = None) -> Optional[AnswerResult]:
        return self.engine.submit_spelling(text)

    def advance(self) -> bool:
        return self.engine.advance()

    def end_run(self) -> Optional[RunSummary]:
        return self.engine.end_run()

    def return_home(self) -> None:
        self.engine.abandon()

    # --- Presentation ---

    def current_view(self) -> Optional[QuestionView]:
        """The active question, without the answer until it is revealed."""
        if self.engine.phase != RunPhase.ACTIVE:
            return None
        state = self.engine.state
        word = state.current_word
        if state.question_type == QuestionType.EN_TO_ZH:
            prompt = word.en
            options = [o.zh for o in state.options]
        else:
            prompt = word.zh
            options = [o.en for o in state.options]
        return QuestionView(
            mode=state.mode,
            current_index=state.index,
            total_questions=len(state.pool),
            question_type=state.question_type,
            prompt=prompt,
            options=options,
            spell_input=state.spell_input,
            stage=state.stage,
            hint=state.hint,
            hearts=state.hearts,
            max_hearts=self.engine.max_hearts,
            score=state.score,
            game_over=state.game_over,
            answer=word if state.stage.revealed else None,
        )

import random
from typing import List, Optional, Sequence

from .models import QuestionType, WordPair
from .pool import shuffled

QUESTION_TYPES = (QuestionType.EN_TO_ZH, QuestionType.ZH_TO_EN, QuestionType.SPELL)

STRATEGY_HINT = "提示：再想一想，可以先排除明显不相关的选项"


class QuestionGenerator:
    """Picks question types, distractor options and first-miss hints."""

    def __init__(self, rng: Optional[random.Random] = None, option_count: int = 4):
        self.rng = rng or random.Random()
        self.option_count = option_count

    def choose_type(self) -> QuestionType:
        return self.rng.choice(QUESTION_TYPES)

    def build_options(
        self,
        correct: WordPair,
        pool: Sequence[WordPair],
        count: Optional[int] = None,
    ) -> List[WordPair]:
        """
        Returns up to `count` options with `correct` exactly once at a uniformly
        random position. Distractors must differ from `correct` in both `en`
        and `zh`; a short pool gives a short list, never padding.
        """
        count = self.option_count if count is None else count
        candidates = [w for w in pool if w.en != correct.en and w.zh != correct.zh]
        distractors: List[WordPair] = []
        seen_en, seen_zh = set(), set()
        for word in shuffled(candidates, self.rng):
            if len(distractors) >= count - 1:
                break
            if word.en in seen_en or word.zh in seen_zh:
                continue
            seen_en.add(word.en)
            seen_zh.add(word.zh)
            distractors.append(word)
        return shuffled(distractors + [correct], self.rng)

    def options_for(
        self, question_type: QuestionType, correct: WordPair, pool: Sequence[WordPair]
    ) -> List[WordPair]:
        if question_type == QuestionType.SPELL:
            return []
        return self.build_options(correct, pool)

    @staticmethod
    def hint_for(question_type: QuestionType, word: WordPair) -> str:
        en = word.en.strip()
        if not en:
            return STRATEGY_HINT
        if question_type == QuestionType.SPELL:
            masked = en[0] + " " + "_ " * max(len(en) - 1, 0)
            return f"提示：{masked.strip()}"
        if question_type == QuestionType.ZH_TO_EN:
            return f"提示：首字母 {en[0].upper()}，共 {len(en)} 个字母"
        return STRATEGY_HINT

import random
from typing import (
    Callable,
    Dict,
    Iterable,
    List,
    MutableSequence,
    Optional,
    Set,
    TypeVar,
)

from .models import Mode, WordPair

T = TypeVar("T")


def shuffle(
    items: MutableSequence[T], rng: Optional[random.Random] = None
) -> MutableSequence[T]:
    """In-place Fisher-Yates: swap from the last index down to 1 with a
    partner drawn uniformly from [0, i]."""
    rng = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def shuffled(items: Iterable[T], rng: Optional[random.Random] = None) -> List[T]:
    return list(shuffle(list(items), rng))


def membership(
    mode: Mode, mastery: Set[str], wrong_counts: Dict[str, int]
) -> Callable[[WordPair], bool]:
    if mode == Mode.NORMAL:
        return lambda w: w.key not in mastery
    if mode == Mode.REVIEW:
        return lambda w: w.key in mastery
    if mode == Mode.WRONG:
        return lambda w: wrong_counts.get(w.key, 0) >= 1
    raise ValueError(f"Unknown mode: {mode}")


class PoolBuilder:
    """Derives the playable, freshly shuffled subset of the word list for a mode."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def build_pool(
        self,
        mode: Mode,
        words: Iterable[WordPair],
        mastery: Set[str],
        wrong_counts: Dict[str, int],
    ) -> List[WordPair]:
        eligible = membership(mode, mastery, wrong_counts)
        return shuffled((w for w in words if eligible(w)), self.rng)

"""Card pattern classification.

Every submitted selection is split into the sorted strengths of its real
cards and a joker count. Each category is tried in priority order by a
``try_*`` function returning the pattern strength, or None when the cards do
not form that category. The first match wins, so a selection that could be
read two ways always gets the higher priority reading.
"""

from collections import Counter
from collections.abc import Callable, Iterable

from gandengyan_server.models.card import JOKER_STRENGTH, Card, Rank
from gandengyan_server.models.game_state import CardPattern, PatternType

MAX_PATTERN_SIZE = 6

BOMB_SIZE = 3
ABOMB_SIZE = 4
SEQUENCE_SIZE = 3
STRAIGHT_PAIRS = 2

# Straights only use the contiguous part of the ladder (2 and Joker excluded)
STRAIGHT_TOP_RANK = int(Rank.ACE)
# Sequences may run up to 2 (K-A-2); jokers never extend past it
SEQUENCE_TOP_RANK = int(Rank.TWO)

CategoryCheck = Callable[[list[int], int], int | None]


def try_joker_bomb(reals: list[int], jokers: int) -> int | None:
    """Two jokers played together are a Bomb, not a Pair."""
    if not reals and jokers == 2:
        return JOKER_STRENGTH
    return None


def _try_of_a_kind(reals: list[int], jokers: int, size: int) -> int | None:
    if len(reals) + jokers != size:
        return None
    if len(set(reals)) > 1:
        return None
    return reals[0] if reals else JOKER_STRENGTH


def try_abomb(reals: list[int], jokers: int) -> int | None:
    """Four of a kind, jokers standing in for missing duplicates."""
    return _try_of_a_kind(reals, jokers, ABOMB_SIZE)


def try_bomb(reals: list[int], jokers: int) -> int | None:
    """Three of a kind, jokers standing in for missing duplicates."""
    return _try_of_a_kind(reals, jokers, BOMB_SIZE)


def try_straight(reals: list[int], jokers: int) -> int | None:
    """Two pairs of consecutive ranks.

    Jokers first complete lone cards into pairs, one joker each. Jokers left
    over form whole pairs two at a time and take whichever ranks are missing
    from the run.
    """
    if len(reals) + jokers != STRAIGHT_PAIRS * 2:
        return None
    if any(r > STRAIGHT_TOP_RANK for r in reals):
        return None

    counts = Counter(reals)
    if any(n > 2 for n in counts.values()):
        return None

    singles = sum(1 for n in counts.values() if n == 1)
    spare = jokers - singles
    if spare < 0:
        return None
    joker_pairs, leftover = divmod(spare, 2)
    if leftover or len(counts) + joker_pairs != STRAIGHT_PAIRS:
        return None

    if not counts:
        return JOKER_STRENGTH

    ranks = sorted(counts)
    if ranks[-1] - ranks[0] + 1 > STRAIGHT_PAIRS:
        return None

    # Joker pairs go above the run when there is room, else below it
    return min(ranks[0] + STRAIGHT_PAIRS - 1, STRAIGHT_TOP_RANK)


def try_sequence(reals: list[int], jokers: int) -> int | None:
    """Three distinct consecutive ranks, jokers filling the gaps."""
    if len(reals) + jokers != SEQUENCE_SIZE:
        return None
    if len(set(reals)) != len(reals):
        return None

    if reals:
        span = reals[-1] - reals[0] + 1
        missing = span - len(reals)
        if span > SEQUENCE_SIZE or missing > jokers:
            return None
        if reals[-1] > SEQUENCE_TOP_RANK:
            return None

    # With two or more jokers the top slot of the window is a joker
    if jokers >= 2:
        return JOKER_STRENGTH
    return reals[-1]


def try_pair(reals: list[int], jokers: int) -> int | None:
    """Two cards of one rank, or one card and a joker."""
    if len(reals) + jokers != 2 or not reals:
        return None
    if len(reals) == 2 and reals[0] != reals[1]:
        return None
    return reals[-1]


def try_single(reals: list[int], jokers: int) -> int | None:
    """Any single card except a lone joker."""
    if len(reals) == 1 and jokers == 0:
        return reals[0]
    return None


# Priority order used to resolve ambiguity
CATEGORIES: list[tuple[PatternType, CategoryCheck]] = [
    (PatternType.BOMB, try_joker_bomb),
    (PatternType.ABOMB, try_abomb),
    (PatternType.BOMB, try_bomb),
    (PatternType.STRAIGHT, try_straight),
    (PatternType.SEQUENCE, try_sequence),
    (PatternType.PAIR, try_pair),
    (PatternType.SINGLE, try_single),
]


def split_jokers(cards: Iterable[Card]) -> tuple[list[int], int]:
    """Split cards into sorted real-card strengths and a joker count."""
    reals: list[int] = []
    jokers = 0
    for card in cards:
        if card.is_joker:
            jokers += 1
        else:
            reals.append(card.strength())
    reals.sort()
    return reals, jokers


class PatternClassifier:
    """Classifies submitted card selections."""

    def __init__(self, categories: list[tuple[PatternType, CategoryCheck]] | None = None):
        """Initialize classifier.

        Args:
            categories: Ordered (kind, check) pairs. Uses CATEGORIES if not provided.
        """
        self.categories = categories or CATEGORIES

    def classify(self, cards: Iterable[Card]) -> CardPattern:
        """Classify a selection of cards.

        Args:
            cards: Cards to classify, in any order.

        Returns:
            CardPattern holding the cards as supplied. Kind is INVALID when
            no category matches (including empty or oversized selections).
        """
        cards = tuple(cards)
        if not cards or len(cards) > MAX_PATTERN_SIZE:
            return CardPattern.invalid(cards)

        reals, jokers = split_jokers(cards)
        for kind, check in self.categories:
            strength = check(reals, jokers)
            if strength is not None:
                return CardPattern(kind=kind, cards=cards, strength=strength)

        return CardPattern.invalid(cards)


_default_classifier = PatternClassifier()


def classify(cards: Iterable[Card]) -> CardPattern:
    """Classify cards with the default category order."""
    return _default_classifier.classify(cards)

"""Hand classification, comparison, and best-hand selection.

Hand categories (weakest to strongest):
- High card, one pair, two pair, three of a kind
- Straight, flush, full house, four of a kind
- Straight flush, five of a kind (extended deck only)

Classification rules:
- Categories overlap (a full house also "has a pair"), so the category is
  the last match of a fixed weak-to-strong predicate table
- A-2-3-4-5 (the wheel) is a straight and ranks below every other straight

Comparison rules:
- Higher category wins
- Same category: tie-break keys compared element by element
"""

from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Callable, Iterable, List, NamedTuple, Sequence, Tuple

from .ranks import ACE_HIGH, Card, sort_cards

# Cards in an evaluated hand
HAND_SIZE = 5
# Hole cards plus community cards
SEVEN_CARDS = 7


class HandCategory(IntEnum):
    """Hand categories. The value is the strength rank."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    FIVE_OF_A_KIND = 9  # Needs the extended deck


# Human-readable category names, for display only
CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FIVE_OF_A_KIND: "Five of a Kind",
}

# Singular and plural rank names keyed by poker rank
RANK_NAMES = {
    2: ("deuce", "deuces"),
    3: ("three", "threes"),
    4: ("four", "fours"),
    5: ("five", "fives"),
    6: ("six", "sixes"),
    7: ("seven", "sevens"),
    8: ("eight", "eights"),
    9: ("nine", "nines"),
    10: ("ten", "tens"),
    11: ("jack", "jacks"),
    12: ("queen", "queens"),
    13: ("king", "kings"),
    14: ("ace", "aces"),
}


class HandEvaluationError(ValueError):
    """Raised when cards passed to the evaluator break its preconditions."""

    pass


class InvalidInputSize(HandEvaluationError):
    """Wrong number of cards for the requested evaluation."""

    pass


class DuplicateCard(HandEvaluationError):
    """The same card appears more than once."""

    pass


class _Shape(NamedTuple):
    group_counts: Tuple[int, ...]
    is_straight: bool
    is_flush: bool


# Evaluated in order; the last true predicate decides the category
HAND_CONDITIONS: Tuple[Tuple[HandCategory, Callable[[_Shape], bool]], ...] = (
    (HandCategory.HIGH_CARD, lambda s: True),
    (HandCategory.ONE_PAIR, lambda s: s.group_counts[2] == 1),
    (HandCategory.TWO_PAIR, lambda s: s.group_counts[2] == 2),
    (HandCategory.THREE_OF_A_KIND, lambda s: s.group_counts[3] == 1),
    (HandCategory.STRAIGHT, lambda s: s.is_straight),
    (HandCategory.FLUSH, lambda s: s.is_flush),
    (HandCategory.FULL_HOUSE, lambda s: s.group_counts[3] == 1 and s.group_counts[2] == 1),
    (HandCategory.FOUR_OF_A_KIND, lambda s: s.group_counts[4] == 1),
    (HandCategory.STRAIGHT_FLUSH, lambda s: s.is_straight and s.is_flush),
    (HandCategory.FIVE_OF_A_KIND, lambda s: s.group_counts[5] == 1),
)

_STRAIGHT_CATEGORIES = frozenset([HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH])
_WHEEL_RANKS = [1, 2, 3, 4, 5]


@dataclass(frozen=True)
class ClassifiedHand:
    """A classified 5-card hand.

    Attributes:
        cards: The five cards, poker rank ascending (ace first for the wheel)
        rank_counts: Cards per poker rank, indexed 0..14 (ace in bucket 14)
        groups: For each count 0..5, the ranks held that many times, strongest first
        is_flush: All five cards share a suit
        is_straight: Five consecutive ranks, including the wheel
        is_wheel: The straight is A-2-3-4-5
        category: Strongest matching category
        tie_break_key: Five rank values compared element by element within a category
    """

    cards: Tuple[Card, ...]
    rank_counts: Tuple[int, ...]
    groups: Tuple[Tuple[int, ...], ...]
    is_flush: bool
    is_straight: bool
    is_wheel: bool
    category: HandCategory
    tie_break_key: Tuple[int, ...]

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.name}({cards_str})"

    @property
    def name(self) -> str:
        """Display name of the category."""
        return CATEGORY_NAMES[self.category]

    @property
    def group_counts(self) -> Tuple[int, ...]:
        """Number of distinct ranks held exactly n times, for n in 0..5."""
        return tuple(len(group) for group in self.groups)

    @property
    def kickers(self) -> Tuple[int, ...]:
        """Tie-break key with each rank listed once."""
        folded: List[int] = []
        for rank in self.tie_break_key:
            if rank not in folded:
                folded.append(rank)
        return tuple(folded)


def _check_cards(cards: Sequence[Card], expected: int) -> None:
    if len(cards) != expected:
        raise InvalidInputSize(f"Expected {expected} cards, got {len(cards)}")
    seen = set()
    for card in cards:
        if card in seen:
            raise DuplicateCard(f"Duplicate card: {card}")
        seen.add(card)


def classify(cards: Iterable[Card], validate: bool = True) -> ClassifiedHand:
    """Classify exactly five cards.

    Args:
        cards: Five distinct cards, in any order
        validate: Check card count and duplicates before classifying

    Returns:
        ClassifiedHand for the five cards

    Raises:
        InvalidInputSize: If validate and not exactly five cards
        DuplicateCard: If validate and a card repeats
    """
    cards = list(cards)
    if validate:
        _check_cards(cards, HAND_SIZE)

    ordered = sort_cards(cards)

    rank_counts = [0] * (ACE_HIGH + 1)
    for card in ordered:
        rank_counts[card.poker_rank] += 1

    groups: List[List[int]] = [[] for _ in range(HAND_SIZE + 1)]
    for rank in range(ACE_HIGH, 0, -1):
        if rank_counts[rank]:
            groups[rank_counts[rank]].append(rank)
    group_counts = tuple(len(group) for group in groups)

    is_straight = False
    is_wheel = False
    if group_counts[1] == HAND_SIZE:
        if ordered[-1].poker_rank - ordered[0].poker_rank == HAND_SIZE - 1:
            is_straight = True
        elif sorted(int(c.rank) for c in ordered) == _WHEEL_RANKS:
            is_straight = True
            is_wheel = True
            ordered = sort_cards(ordered, ace_low=True)

    is_flush = all(card.suit == ordered[0].suit for card in ordered)

    shape = _Shape(group_counts, is_straight, is_flush)
    category = HandCategory.HIGH_CARD
    for candidate, check in HAND_CONDITIONS:
        if check(shape):
            category = candidate

    if category in _STRAIGHT_CATEGORIES:
        if is_wheel:
            key = tuple(int(c.rank) for c in reversed(ordered))
        else:
            key = tuple(c.poker_rank for c in reversed(ordered))
    else:
        key = tuple(
            rank
            for count in range(HAND_SIZE, 0, -1)
            for rank in groups[count]
            for _ in range(count)
        )

    return ClassifiedHand(
        cards=tuple(ordered),
        rank_counts=tuple(rank_counts),
        groups=tuple(tuple(group) for group in groups),
        is_flush=is_flush,
        is_straight=is_straight,
        is_wheel=is_wheel,
        category=category,
        tie_break_key=key,
    )


def compare_hands(hand1: ClassifiedHand, hand2: ClassifiedHand) -> int:
    """Compare two classified hands.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        1 if hand1 is stronger, -1 if weaker, 0 for a genuine tie
    """
    if hand1.category != hand2.category:
        return 1 if hand1.category > hand2.category else -1

    for rank1, rank2 in zip(hand1.tie_break_key, hand2.tie_break_key):
        if rank1 != rank2:
            return 1 if rank1 > rank2 else -1
    return 0


def hand_sort_key(hand: ClassifiedHand) -> Tuple[int, Tuple[int, ...]]:
    """Key ordering hands the same way as compare_hands (for max/sorted)."""
    return (int(hand.category), hand.tie_break_key)


def select_best(cards: Iterable[Card], validate: bool = True) -> ClassifiedHand:
    """Pick the strongest 5-card hand out of seven cards.

    All 21 five-card combinations are classified. When several tie for the
    best, the first one in combination order is returned.

    Args:
        cards: Seven distinct cards
        validate: Check card count and duplicates first

    Returns:
        The maximal ClassifiedHand

    Raises:
        InvalidInputSize: If validate and not exactly seven cards
        DuplicateCard: If validate and a card repeats
    """
    cards = list(cards)
    if validate:
        _check_cards(cards, SEVEN_CARDS)

    best = None
    for subset in combinations(cards, HAND_SIZE):
        hand = classify(subset, validate=False)
        if best is None or compare_hands(hand, best) > 0:
            best = hand

    if best is None:
        raise InvalidInputSize(f"Need at least {HAND_SIZE} cards, got {len(cards)}")
    return best


def best_possible_hand(community: Sequence[Card], hole: Sequence[Card]) -> ClassifiedHand:
    """Best hand from five community cards and two hole cards."""
    return select_best(list(community) + list(hole))


def describe_hand(hand: ClassifiedHand) -> str:
    """Describe a hand in words, e.g. "full house, kings over aces"."""
    key = hand.tie_break_key
    category = hand.category

    def name(rank: int) -> str:
        return RANK_NAMES[rank][0]

    def plural(rank: int) -> str:
        return RANK_NAMES[rank][1]

    if category == HandCategory.HIGH_CARD:
        return f"{name(key[0])} high"
    if category == HandCategory.ONE_PAIR:
        return f"pair of {plural(key[0])}"
    if category == HandCategory.TWO_PAIR:
        return f"two pair, {plural(key[0])} and {plural(key[2])}"
    if category == HandCategory.THREE_OF_A_KIND:
        return f"three of a kind, {plural(key[0])}"
    if category == HandCategory.STRAIGHT:
        return f"{name(key[0])}-high straight"
    if category == HandCategory.FLUSH:
        return f"{name(key[0])}-high flush"
    if category == HandCategory.FULL_HOUSE:
        return f"full house, {plural(key[0])} over {plural(key[3])}"
    if category == HandCategory.FOUR_OF_A_KIND:
        return f"four of a kind, {plural(key[0])}"
    if category == HandCategory.STRAIGHT_FLUSH:
        if key[0] == ACE_HIGH:
            return "royal flush"
        return f"{name(key[0])}-high straight flush"
    return f"five of a kind, {plural(key[0])}"


# Helper functions for creating hands for testing


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "AS KS QS JS 10S".

    Args:
        s: Space-separated card strings

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.split()]

"""Vectorised hand classification with NumPy.

This module provides:
- Fixed card encoding (card_idx = suit * 13 + natural_rank - 1)
- Batched classification of many 5-card hands at once
- Batched best-of-seven selection over all 21 combinations

Every step of classify() is a fixed-size reduction over five cards, so a
batch of N hands becomes a handful of array operations on an (N, 5) integer
matrix. Results match rules.hands.classify exactly. Scores pack
(category, tie_break_key) into one integer so argmax picks the best hand.
"""

from itertools import combinations
from typing import Iterable, Sequence, Tuple

import numpy as np

from .hands import HAND_SIZE, SEVEN_CARDS, HandCategory, InvalidInputSize
from .ranks import ACE_HIGH, Card, Rank, Suit

RANKS_PER_SUIT = 13

# Each key element fits in 4 bits
_KEY_BASE = 16
_KEY_WEIGHTS = _KEY_BASE ** np.arange(HAND_SIZE - 1, -1, -1, dtype=np.int64)
_CATEGORY_WEIGHT = _KEY_BASE**HAND_SIZE

# All 21 ways to pick 5 of 7 positions
COMBINATIONS_7_5 = np.array(list(combinations(range(SEVEN_CARDS), HAND_SIZE)), dtype=np.int64)

_WHEEL_KEY = np.array([5, 4, 3, 2, 1], dtype=np.int64)


def card_to_idx(card: Card) -> int:
    """Convert Card to index (0-51, or 0-64 with the extended deck)."""
    return int(card.suit) * RANKS_PER_SUIT + int(card.rank) - 1


def idx_to_card(idx: int) -> Card:
    """Convert index back to Card."""
    return Card(suit=Suit(idx // RANKS_PER_SUIT), rank=Rank(idx % RANKS_PER_SUIT + 1))


def encode_hands(hands: Iterable[Sequence[Card]]) -> np.ndarray:
    """Encode equal-length card lists as an (N, k) int64 matrix."""
    return np.array([[card_to_idx(c) for c in hand] for hand in hands], dtype=np.int64)


def classify_batch(hands: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Classify a batch of 5-card hands.

    Args:
        hands: (N, 5) array of card indices

    Returns:
        Tuple of (categories (N,), tie_break_keys (N, 5), scores (N,)).
        Comparing scores orders hands the same way as compare_hands.

    Raises:
        InvalidInputSize: If hands is not shaped (N, 5)
    """
    hands = np.asarray(hands, dtype=np.int64)
    if hands.ndim != 2 or hands.shape[1] != HAND_SIZE:
        raise InvalidInputSize(f"Expected an (N, {HAND_SIZE}) array, got shape {hands.shape}")

    natural = hands % RANKS_PER_SUIT + 1
    poker = np.where(natural == 1, ACE_HIGH, natural)
    suits = hands // RANKS_PER_SUIT

    # Cards per poker rank, then how many ranks appear exactly c times
    counts = (poker[:, :, None] == np.arange(ACE_HIGH + 1)).sum(axis=1)
    group_counts = np.stack([(counts == c).sum(axis=1) for c in range(HAND_SIZE + 1)], axis=1)

    distinct = group_counts[:, 1] == HAND_SIZE
    poker_sorted = np.sort(poker, axis=1)
    natural_sorted = np.sort(natural, axis=1)
    is_wheel = distinct & (natural_sorted == np.arange(1, HAND_SIZE + 1)).all(axis=1)
    is_straight = (distinct & (poker_sorted[:, -1] - poker_sorted[:, 0] == HAND_SIZE - 1)) | is_wheel
    is_flush = (suits == suits[:, :1]).all(axis=1)

    # Same weak-to-strong table as HAND_CONDITIONS; later matches overwrite
    conditions = [
        (HandCategory.ONE_PAIR, group_counts[:, 2] == 1),
        (HandCategory.TWO_PAIR, group_counts[:, 2] == 2),
        (HandCategory.THREE_OF_A_KIND, group_counts[:, 3] == 1),
        (HandCategory.STRAIGHT, is_straight),
        (HandCategory.FLUSH, is_flush),
        (HandCategory.FULL_HOUSE, (group_counts[:, 3] == 1) & (group_counts[:, 2] == 1)),
        (HandCategory.FOUR_OF_A_KIND, group_counts[:, 4] == 1),
        (HandCategory.STRAIGHT_FLUSH, is_straight & is_flush),
        (HandCategory.FIVE_OF_A_KIND, group_counts[:, 5] == 1),
    ]
    categories = np.full(len(hands), int(HandCategory.HIGH_CARD), dtype=np.int64)
    for category, mask in conditions:
        categories = np.where(mask, int(category), categories)

    # Ordering cards by (multiplicity, rank) descending lists each group
    # strongest first with every rank repeated once per card
    multiplicity = np.take_along_axis(counts, poker, axis=1)
    order = np.argsort(-(multiplicity * _KEY_BASE + poker), axis=1, kind="stable")
    keys = np.take_along_axis(poker, order, axis=1)

    straight_rows = (categories == HandCategory.STRAIGHT) | (categories == HandCategory.STRAIGHT_FLUSH)
    keys = np.where(straight_rows[:, None], poker_sorted[:, ::-1], keys)
    keys = np.where((straight_rows & is_wheel)[:, None], _WHEEL_KEY, keys)

    scores = categories * _CATEGORY_WEIGHT + keys @ _KEY_WEIGHTS
    return categories, keys, scores


def select_best_batch(hands: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Best 5-card hand for each row of a batch of 7-card hands.

    Args:
        hands: (N, 7) array of card indices

    Returns:
        Tuple of (best scores (N,), best 5-card index rows (N, 5))

    Raises:
        InvalidInputSize: If hands is not shaped (N, 7)
    """
    hands = np.asarray(hands, dtype=np.int64)
    if hands.ndim != 2 or hands.shape[1] != SEVEN_CARDS:
        raise InvalidInputSize(f"Expected an (N, {SEVEN_CARDS}) array, got shape {hands.shape}")

    n = len(hands)
    subsets = hands[:, COMBINATIONS_7_5]  # (N, 21, 5)
    _, _, scores = classify_batch(subsets.reshape(-1, HAND_SIZE))
    scores = scores.reshape(n, len(COMBINATIONS_7_5))

    # argmax keeps the first maximum, matching select_best
    best = scores.argmax(axis=1)
    rows = np.arange(n)
    return scores[rows, best], subsets[rows, best]

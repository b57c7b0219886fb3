"""Poker hand evaluation rules.

This module provides:
- Card and rank definitions (ranks.py)
- Hand classification, comparison and best-of-seven selection (hands.py)
- NumPy batch classification (batch.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    ACE_HIGH,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    STANDARD_SUITS,
    EXTENDED_SUITS,
    poker_rank,
    natural_rank,
    sort_cards,
    get_rank_counts,
    create_standard_deck,
)

from .hands import (
    HAND_SIZE,
    SEVEN_CARDS,
    HandCategory,
    ClassifiedHand,
    CATEGORY_NAMES,
    HAND_CONDITIONS,
    HandEvaluationError,
    InvalidInputSize,
    DuplicateCard,
    classify,
    compare_hands,
    hand_sort_key,
    select_best,
    best_possible_hand,
    describe_hand,
    make_cards_from_string,
)

from .batch import (
    card_to_idx,
    idx_to_card,
    encode_hands,
    classify_batch,
    select_best_batch,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "ACE_HIGH",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "STANDARD_SUITS",
    "EXTENDED_SUITS",
    "poker_rank",
    "natural_rank",
    "sort_cards",
    "get_rank_counts",
    "create_standard_deck",
    # Hands
    "HAND_SIZE",
    "SEVEN_CARDS",
    "HandCategory",
    "ClassifiedHand",
    "CATEGORY_NAMES",
    "HAND_CONDITIONS",
    "HandEvaluationError",
    "InvalidInputSize",
    "DuplicateCard",
    "classify",
    "compare_hands",
    "hand_sort_key",
    "select_best",
    "best_possible_hand",
    "describe_hand",
    "make_cards_from_string",
    # Batch
    "card_to_idx",
    "idx_to_card",
    "encode_hands",
    "classify_batch",
    "select_best_batch",
]

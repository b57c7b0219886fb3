"""Card rank definitions and utilities.

Ranks carry two orderings:
- natural: A=1, 2=2, ..., K=13 (used only to detect and order the wheel)
- poker: 2=2, ..., K=13, A=14 (used everywhere else)

This module provides:
- Rank and Suit enums
- Card representation
- Rank ordering helpers
- Deck constructors (standard 52-card and extended 65-card)
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List


class Rank(IntEnum):
    """Card ranks by natural value (ace low).

    Use ``poker_value`` for comparisons; the ace counts as 14 there.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def poker_value(self) -> int:
        """Rank value with the ace high (14)."""
        return ACE_HIGH if self is Rank.ACE else int(self)


class Suit(IntEnum):
    """Card suits. Only equality matters when evaluating hands.

    SARDINE is the fifth suit of the extended deck.
    """

    SPADE = 0
    HEART = 1
    DIAMOND = 2
    CLUB = 3
    SARDINE = 4


ACE_HIGH = 14

STANDARD_SUITS = (Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB)
EXTENDED_SUITS = STANDARD_SUITS + (Suit.SARDINE,)

# Rank symbols for display
RANK_SYMBOLS = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.SARDINE: "🐟",
}

# Symbol to rank mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["T"] = Rank.TEN

SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({"S": Suit.SPADE, "H": Suit.HEART, "D": Suit.DIAMOND, "C": Suit.CLUB, "F": Suit.SARDINE})
SYMBOL_TO_SUIT.update({"s": Suit.SPADE, "h": Suit.HEART, "d": Suit.DIAMOND, "c": Suit.CLUB, "f": Suit.SARDINE})


@dataclass(frozen=True)
class Card:
    """A playing card with suit and rank.

    Two cards are equal only when both suit and rank match.
    Immutable and hashable for use in sets.
    """

    suit: Suit
    rank: Rank

    @property
    def poker_rank(self) -> int:
        """Rank with the ace counted high."""
        return self.rank.poker_value

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a string like 'A♠', '10H' or 'Td'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            ValueError: If string cannot be parsed
        """
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        # Suit symbols may span more than one code point
        for symbol, suit in SYMBOL_TO_SUIT.items():
            if s.endswith(symbol) and len(s) > len(symbol):
                rank_str = s[: -len(symbol)]
                break
        else:
            raise ValueError(f"Invalid suit in card: {s!r}")

        rank_str = rank_str.upper()
        if rank_str not in SYMBOL_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_str}")

        return cls(suit=suit, rank=SYMBOL_TO_RANK[rank_str])


def poker_rank(rank: Rank) -> int:
    """Ace-high value of a rank."""
    return rank.poker_value


def natural_rank(rank: Rank) -> int:
    """Ace-low value of a rank."""
    return int(rank)


def sort_cards(cards: Iterable[Card], ace_low: bool = False) -> List[Card]:
    """Sort cards by rank ascending.

    Args:
        cards: Cards to sort
        ace_low: Order by natural rank (ace first) instead of poker rank

    Returns:
        New sorted list of cards
    """
    if ace_low:
        return sorted(cards, key=lambda c: int(c.rank))
    return sorted(cards, key=lambda c: c.poker_rank)


def get_rank_counts(cards: Iterable[Card]) -> Dict[int, int]:
    """Count occurrences of each poker rank in a list of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping poker rank (ace = 14) to count
    """
    counts: Dict[int, int] = {}
    for card in cards:
        counts[card.poker_rank] = counts.get(card.poker_rank, 0) + 1
    return counts


def create_standard_deck(extended: bool = False) -> List[Card]:
    """Create an unshuffled deck.

    Args:
        extended: Include the SARDINE suit (65 cards instead of 52)

    Returns:
        List of Card objects (13 ranks per suit)
    """
    suits = EXTENDED_SUITS if extended else STANDARD_SUITS
    return [Card(suit=suit, rank=rank) for suit in suits for rank in Rank]

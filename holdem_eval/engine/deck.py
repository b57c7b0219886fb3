"""Deck of cards owned by a single round.

Each Deck holds its own cards and its own random generator, so two decks
never share state and a seeded deck always deals the same sequence.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from holdem_eval.rules import Card, HandEvaluationError, create_standard_deck

logger = logging.getLogger(__name__)


class DeckExhausted(HandEvaluationError):
    """Raised when drawing more cards than the deck holds."""

    pass


@dataclass
class Deck:
    """A shuffled deck of cards.

    Attributes:
        cards: Remaining cards; draw() takes from the end
        extended: Whether the deck includes the SARDINE suit
        rng: Random number generator used for shuffling
    """

    cards: List[Card] = field(default_factory=list)
    extended: bool = False
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self):
        """Fill with a full deck if no cards were given."""
        if not self.cards:
            self.cards = create_standard_deck(extended=self.extended)

    @classmethod
    def new_shuffled(cls, seed: Optional[int] = None, extended: bool = False) -> "Deck":
        """Create a full deck and shuffle it.

        Args:
            seed: Random seed for reproducibility
            extended: Include the SARDINE suit (65 cards)

        Returns:
            Shuffled Deck
        """
        deck = cls(extended=extended, rng=random.Random(seed))
        deck.shuffle()
        return deck

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        self.rng.shuffle(self.cards)

    def draw(self) -> Card:
        """Take the top card.

        Raises:
            DeckExhausted: If the deck is empty
        """
        if not self.cards:
            raise DeckExhausted("Cannot draw from an empty deck")
        return self.cards.pop()

    def draw_many(self, count: int) -> List[Card]:
        """Take ``count`` cards from the top.

        Raises:
            DeckExhausted: If fewer than ``count`` cards remain
        """
        if count > len(self.cards):
            raise DeckExhausted(f"Cannot draw {count} cards, only {len(self.cards)} left")
        drawn = [self.cards.pop() for _ in range(count)]
        logger.debug("Drew %d cards, %d left", count, len(self.cards))
        return drawn

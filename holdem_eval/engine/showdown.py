"""Showdown: ranking players by their best hand.

This module provides:
- PlayerHand: a player's two hole cards
- ShowdownResult: each player's best hand and the winners
- find_winners: evaluate every player against the shared community cards
- find_winners_batch: the same, using the NumPy batch evaluator
- RoundConfig / deal_round: deal community and hole cards from a fresh deck

Every player not strictly beaten by another player wins; more than one
winner means a split pot.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from holdem_eval.rules import (
    HAND_SIZE,
    Card,
    ClassifiedHand,
    DuplicateCard,
    InvalidInputSize,
    compare_hands,
    encode_hands,
    hand_sort_key,
    select_best,
    select_best_batch,
)

from .deck import Deck

logger = logging.getLogger(__name__)

# Hole cards per player
HOLE_CARDS = 2
# Community cards shared by all players
COMMUNITY_CARDS = HAND_SIZE


@dataclass(frozen=True)
class PlayerHand:
    """A player's private cards.

    Attributes:
        player_id: Player identifier
        hole_cards: The two hole cards
    """

    player_id: int
    hole_cards: Tuple[Card, ...]


@dataclass
class ShowdownResult:
    """Outcome of a showdown.

    Attributes:
        best_hands: Best classified hand per player id
        winners: Ids of every player not strictly beaten, ascending
    """

    best_hands: Dict[int, ClassifiedHand] = field(default_factory=dict)
    winners: List[int] = field(default_factory=list)

    @property
    def is_split(self) -> bool:
        """More than one player shares the pot."""
        return len(self.winners) > 1

    def ranking(self) -> List[int]:
        """Player ids from strongest to weakest hand (ties keep id order)."""
        return sorted(
            self.best_hands,
            key=lambda pid: hand_sort_key(self.best_hands[pid]),
            reverse=True,
        )


def _check_table(players: Sequence[PlayerHand], community: Sequence[Card]) -> None:
    if not players:
        raise InvalidInputSize("Showdown needs at least one player")
    if len(community) != COMMUNITY_CARDS:
        raise InvalidInputSize(f"Expected {COMMUNITY_CARDS} community cards, got {len(community)}")

    seen = set(community)
    if len(seen) != len(community):
        raise DuplicateCard("Community cards contain a duplicate")
    for player in players:
        if len(player.hole_cards) != HOLE_CARDS:
            raise InvalidInputSize(
                f"Player {player.player_id} holds {len(player.hole_cards)} cards, expected {HOLE_CARDS}"
            )
        for card in player.hole_cards:
            if card in seen:
                raise DuplicateCard(f"Card {card} dealt twice (player {player.player_id})")
            seen.add(card)


def find_winners(players: Sequence[PlayerHand], community: Sequence[Card]) -> ShowdownResult:
    """Evaluate each player's best hand and find the winners.

    Args:
        players: Players still in the hand
        community: The five community cards

    Returns:
        ShowdownResult with every player's best hand and the winning ids

    Raises:
        InvalidInputSize: If there are no players or a card count is wrong
        DuplicateCard: If any card appears twice across the table
    """
    _check_table(players, community)

    result = ShowdownResult()
    best: Optional[ClassifiedHand] = None
    for player in players:
        hand = select_best(list(community) + list(player.hole_cards), validate=False)
        result.best_hands[player.player_id] = hand
        logger.debug("Player %d: %s", player.player_id, hand)

        if best is None or compare_hands(hand, best) > 0:
            best = hand
            result.winners = [player.player_id]
        elif compare_hands(hand, best) == 0:
            result.winners.append(player.player_id)

    result.winners.sort()
    logger.debug("Winners: %s (%s)", result.winners, best.name)
    return result


def find_winners_batch(players: Sequence[PlayerHand], community: Sequence[Card]) -> List[int]:
    """Winning player ids, computed with the NumPy batch evaluator.

    Same winners as find_winners, without building ClassifiedHand objects.
    """
    _check_table(players, community)

    hands = encode_hands(list(community) + list(p.hole_cards) for p in players)
    scores, _ = select_best_batch(hands)
    top = scores.max()
    return sorted(p.player_id for p, score in zip(players, scores) if score == top)


@dataclass
class RoundConfig:
    """Dealing configuration.

    Attributes:
        num_players: Players to deal hole cards to
        extended_deck: Use the 65-card deck with the SARDINE suit
        seed: Random seed for the deck (None = nondeterministic)
    """

    num_players: int = 30
    extended_deck: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        """Check the deck can supply the community and every player."""
        if self.num_players < 1:
            raise ValueError(f"num_players must be positive, got {self.num_players}")
        deck_size = len(Deck(extended=self.extended_deck))
        needed = COMMUNITY_CARDS + HOLE_CARDS * self.num_players
        if needed > deck_size:
            raise ValueError(
                f"{self.num_players} players need {needed} cards, deck holds {deck_size}"
            )


def deal_round(config: RoundConfig) -> Tuple[List[Card], List[PlayerHand]]:
    """Deal five community cards, then two hole cards to each player.

    Args:
        config: Dealing configuration

    Returns:
        Tuple of (community cards, players)
    """
    deck = Deck.new_shuffled(seed=config.seed, extended=config.extended_deck)
    community = deck.draw_many(COMMUNITY_CARDS)
    players = [
        PlayerHand(player_id=i, hole_cards=tuple(deck.draw_many(HOLE_CARDS)))
        for i in range(config.num_players)
    ]
    logger.debug(
        "Dealt %d players, community %s, %d cards left",
        config.num_players,
        " ".join(str(c) for c in community),
        len(deck),
    )
    return community, players

"""Dealing and showdown.

This module provides:
- Deck: a deck with its own random generator
- PlayerHand / ShowdownResult: players at showdown and the outcome
- find_winners / find_winners_batch: pick the winning players
- RoundConfig / deal_round: deal one round from a fresh deck
"""

from .deck import Deck, DeckExhausted
from .showdown import (
    PlayerHand,
    ShowdownResult,
    RoundConfig,
    HOLE_CARDS,
    COMMUNITY_CARDS,
    find_winners,
    find_winners_batch,
    deal_round,
)

__all__ = [
    "Deck",
    "DeckExhausted",
    "PlayerHand",
    "ShowdownResult",
    "RoundConfig",
    "HOLE_CARDS",
    "COMMUNITY_CARDS",
    "find_winners",
    "find_winners_batch",
    "deal_round",
]

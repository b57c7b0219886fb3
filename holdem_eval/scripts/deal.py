#!/usr/bin/env python
"""Deal one round and show every player's best hand.

Deals five community cards and two hole cards per player from a freshly
shuffled deck, evaluates each player's best five-card hand, and prints the
winners.

Usage:
    python -m holdem_eval.scripts.deal --players 6 --seed 42
    python -m holdem_eval.scripts.deal --players 30
    python -m holdem_eval.scripts.deal --players 9 --standard --vectorized
    python -m holdem_eval.scripts.deal --help
"""

import argparse
import logging
import sys

from holdem_eval import set_seed
from holdem_eval.engine import RoundConfig, deal_round, find_winners, find_winners_batch
from holdem_eval.rules import describe_hand


def run_round(config: RoundConfig, vectorized: bool = False) -> list[int]:
    """Deal and evaluate one round, printing the results.

    Args:
        config: Dealing configuration
        vectorized: Also compute winners with the NumPy batch evaluator

    Returns:
        Winning player ids
    """
    community, players = deal_round(config)
    print(f"Community: {' '.join(str(c) for c in community)}")

    result = find_winners(players, community)
    for player_id in result.ranking():
        hole = next(p.hole_cards for p in players if p.player_id == player_id)
        hand = result.best_hands[player_id]
        print(
            f"  Player {player_id:2d} [{' '.join(str(c) for c in hole)}]: "
            f"{hand.name:<15} {describe_hand(hand)}"
        )

    label = "Split pot" if result.is_split else "Winner"
    print(f"{label}: {', '.join(f'Player {pid}' for pid in result.winners)}")

    if vectorized:
        batch_winners = find_winners_batch(players, community)
        if batch_winners != result.winners:
            raise RuntimeError(f"Batch evaluator disagrees: {batch_winners} != {result.winners}")
        print("  OK: batch evaluator agrees")

    return result.winners


def main():
    """Main entry point for the dealing script."""
    parser = argparse.ArgumentParser(
        description="Deal a round of Texas Hold'em and rank the hands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m holdem_eval.scripts.deal --players 6 --seed 42
  python -m holdem_eval.scripts.deal --players 23 --standard
        """,
    )

    parser.add_argument(
        "--players",
        "-p",
        type=int,
        default=RoundConfig.num_players,
        help=f"Number of players to deal in (default: {RoundConfig.num_players})",
    )

    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for reproducibility"
    )

    parser.add_argument(
        "--standard",
        action="store_true",
        help="Use the standard 52-card deck instead of the 65-card extended deck",
    )

    parser.add_argument(
        "--vectorized",
        action="store_true",
        help="Cross-check winners with the NumPy batch evaluator",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Resolve a seed up front so every run can be replayed
    seed = set_seed(args.seed)
    print(f"Seed: {seed}")

    try:
        config = RoundConfig(
            num_players=args.players,
            extended_deck=not args.standard,
            seed=seed,
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    try:
        run_round(config, vectorized=args.vectorized)
    except Exception as e:
        print(f"Error during evaluation: {e}")
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()

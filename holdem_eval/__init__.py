"""Holdem Eval - Texas Hold'em hand evaluation.

Classifies 5-card poker hands, picks the best hand out of seven cards,
and ranks players at showdown.
"""

__version__ = "0.1.0"
__author__ = "Holdem Eval Team"

from holdem_eval.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]

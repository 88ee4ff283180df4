"""Poker Showdown - five-card hand ranking and winner resolution.

Parses player records such as "Joe, 3H, 4H, 5H, 6H, 8H", classifies each
hand (one pair, three of a kind, flush) and reports the winning player(s).
"""

__version__ = "0.1.0"
__author__ = "Poker Showdown Team"

from poker_showdown.engine import WinnerResolver, who_won

__all__ = ["__version__", "WinnerResolver", "who_won"]

"""Showdown engine.

This module provides:
- HandEvaluator: Assigns category ranks to hands
- WinnerResolver: Orders all hands and picks the winner(s)
- ShowdownConfig / ShowdownResult: Configuration and outcome types
- who_won: One-call convenience wrapper
"""

from .evaluator import HandEvaluator, NO_CATEGORY, NO_CATEGORY_LABEL
from .winner import (
    WinnerResolver,
    ShowdownConfig,
    ShowdownResult,
    DECIDED_BY_CATEGORY,
    DECIDED_BY_HIGH_CARD,
    who_won,
)

__all__ = [
    "HandEvaluator",
    "NO_CATEGORY",
    "NO_CATEGORY_LABEL",
    "WinnerResolver",
    "ShowdownConfig",
    "ShowdownResult",
    "DECIDED_BY_CATEGORY",
    "DECIDED_BY_HIGH_CARD",
    "who_won",
]

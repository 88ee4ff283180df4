"""Poker rules implementations.

This module provides:
- Card and rank definitions, card parsing (ranks.py)
- Hand category predicates (categories.py)
- Player hands built from raw records (hands.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    CardParseError,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    SUIT_NAMES,
    RANK_VALUES,
    parse_card,
    parse_cards,
    sort_cards,
)

from .categories import (
    HandStrategy,
    ONE_PAIR,
    THREE_OF_A_KIND,
    FLUSH,
    DEFAULT_STRATEGIES,
    STRATEGIES_BY_NAME,
    count_adjacent_equal_ranks,
    is_one_pair,
    is_three_of_a_kind,
    is_flush,
    build_strategies,
)

from .hands import (
    HAND_SIZE,
    PlayerHand,
    MalformedRecordError,
    split_record,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "CardParseError",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "SUIT_NAMES",
    "RANK_VALUES",
    "parse_card",
    "parse_cards",
    "sort_cards",
    # Categories
    "HandStrategy",
    "ONE_PAIR",
    "THREE_OF_A_KIND",
    "FLUSH",
    "DEFAULT_STRATEGIES",
    "STRATEGIES_BY_NAME",
    "count_adjacent_equal_ranks",
    "is_one_pair",
    "is_three_of_a_kind",
    "is_flush",
    "build_strategies",
    # Hands
    "HAND_SIZE",
    "PlayerHand",
    "MalformedRecordError",
    "split_record",
]

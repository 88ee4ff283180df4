"""Hand category predicates.

Each category is a pure predicate over a hand's cards, already sorted
ascending by rank value (see sort_cards). Categories supported:
- One pair: exactly one adjacent pair of equal ranks
- Three of a kind: exactly two adjacent pairs of equal ranks
- Flush: all cards share one suit

The pair and three-of-a-kind checks count adjacent equal-rank pairs in the
sorted hand rather than grouping by rank. A two-pair hand (e.g. 3 3 8 8 K)
also yields a count of 2 and is therefore reported as three of a kind, and
four of a kind yields 3 and matches neither. Only the suit is checked for a
flush; sequences are never considered.

Categories are evaluated as an ordered table (DEFAULT_STRATEGIES). The
position of a category in that table is its category rank; see
poker_showdown.engine.evaluator for how matches are combined.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Sequence, Tuple

from .ranks import Card

CardPredicate = Callable[[Sequence[Card]], bool]


def count_adjacent_equal_ranks(cards: Sequence[Card]) -> int:
    """Count neighbouring cards with the same rank value.

    Args:
        cards: Cards sorted ascending by rank value

    Returns:
        Number of indices i where cards[i] and cards[i - 1] share a rank
    """
    count = 0
    for i in range(1, len(cards)):
        if cards[i].rank_value - cards[i - 1].rank_value == 0:
            count += 1
    return count


def is_one_pair(cards: Sequence[Card]) -> bool:
    return count_adjacent_equal_ranks(cards) == 1


def is_three_of_a_kind(cards: Sequence[Card]) -> bool:
    return count_adjacent_equal_ranks(cards) == 2


def is_flush(cards: Sequence[Card]) -> bool:
    """True iff every card has the same suit."""
    if not cards:
        return False
    first_suit = cards[0].suit
    return all(c.suit == first_suit for c in cards)


@dataclass(frozen=True)
class HandStrategy:
    """A named hand category predicate.

    Attributes:
        name: Registry key, e.g. "one_pair"
        label: Display name, e.g. "One Pair"
        matches: Predicate over sorted cards
    """

    name: str
    label: str
    matches: CardPredicate

    def __call__(self, cards: Sequence[Card]) -> bool:
        return self.matches(cards)


ONE_PAIR = HandStrategy(name="one_pair", label="One Pair", matches=is_one_pair)
THREE_OF_A_KIND = HandStrategy(
    name="three_of_a_kind", label="Three of a Kind", matches=is_three_of_a_kind
)
FLUSH = HandStrategy(name="flush", label="Flush", matches=is_flush)

# Evaluation order; category rank = 1-based position in this tuple
DEFAULT_STRATEGIES: Tuple[HandStrategy, ...] = (ONE_PAIR, THREE_OF_A_KIND, FLUSH)

STRATEGIES_BY_NAME: Dict[str, HandStrategy] = {s.name: s for s in DEFAULT_STRATEGIES}

DEFAULT_STRATEGY_NAMES = ",".join(s.name for s in DEFAULT_STRATEGIES)


def build_strategies(names: str) -> Tuple[HandStrategy, ...]:
    """Build an ordered strategy table from comma-separated names.

    Args:
        names: e.g. "one_pair,three_of_a_kind,flush"

    Returns:
        Tuple of HandStrategy in the given order

    Raises:
        ValueError: If a name is unknown, repeated, or no names are given
    """
    parsed = [n.strip().lower() for n in names.split(",") if n.strip()]
    if not parsed:
        raise ValueError("At least one hand strategy must be configured")

    strategies = []
    for name in parsed:
        if name not in STRATEGIES_BY_NAME:
            valid = ", ".join(sorted(STRATEGIES_BY_NAME))
            raise ValueError(f"Unknown hand strategy '{name}'. Valid strategies: {valid}")
        if STRATEGIES_BY_NAME[name] in strategies:
            raise ValueError(f"Hand strategy '{name}' listed more than once")
        strategies.append(STRATEGIES_BY_NAME[name])

    return tuple(strategies)

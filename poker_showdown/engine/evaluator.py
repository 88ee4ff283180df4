"""Hand category evaluation.

The evaluator runs every strategy in its table against a hand and keeps the
position of the LAST one that matched. It is not first-match and not
strongest-match: the order of the table alone decides priority. With the
default table (one pair, three of a kind, flush) a paired flush is rated as a
flush (3) because flush is checked last.
"""

import logging
from typing import List, Sequence, Tuple

from poker_showdown.rules import Card, PlayerHand
from poker_showdown.rules.categories import DEFAULT_STRATEGIES, HandStrategy

logger = logging.getLogger(__name__)

# Category rank for hands that match no strategy
NO_CATEGORY = 0
NO_CATEGORY_LABEL = "High Card"


class HandEvaluator:
    """Assigns category ranks using an ordered, immutable strategy table."""

    def __init__(self, strategies: Sequence[HandStrategy] = DEFAULT_STRATEGIES):
        if not strategies:
            raise ValueError("HandEvaluator requires at least one strategy")
        self._strategies: Tuple[HandStrategy, ...] = tuple(strategies)

    @property
    def strategies(self) -> Tuple[HandStrategy, ...]:
        return self._strategies

    @property
    def max_rank(self) -> int:
        return len(self._strategies)

    def evaluate(self, cards: Sequence[Card]) -> int:
        """Category rank of sorted cards.

        Returns:
            1-based position of the last matching strategy, or 0 if none match
        """
        rank = NO_CATEGORY
        for position, strategy in enumerate(self._strategies, start=1):
            if strategy(cards):
                rank = position
        return rank

    def matching(self, cards: Sequence[Card]) -> List[str]:
        """Names of every strategy that matches, in table order."""
        return [s.name for s in self._strategies if s(cards)]

    def category_label(self, rank: int) -> str:
        """Display label for a category rank produced by this evaluator."""
        if rank == NO_CATEGORY:
            return NO_CATEGORY_LABEL
        if not 1 <= rank <= self.max_rank:
            raise ValueError(f"Category rank {rank} out of range 0-{self.max_rank}")
        return self._strategies[rank - 1].label

    def evaluate_hand(self, hand: PlayerHand) -> PlayerHand:
        """Return a copy of the hand with its category rank assigned."""
        rank = self.evaluate(hand.cards)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s -> rank %d (%s), matched %s",
                hand,
                rank,
                self.category_label(rank),
                self.matching(hand.cards),
            )
        return hand.with_category_rank(rank)

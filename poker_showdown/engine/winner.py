"""Winner resolution across all players at the table.

Resolution flow:
1. Build a PlayerHand from each raw record (fails fast on bad input)
2. Assign each hand its category rank with the HandEvaluator
3. Stable-sort hands ascending by category rank
4. If nobody matched a category, stable-sort by high card instead and the
   winners are every hand sharing the highest card
5. Otherwise the winners are every hand sharing the highest category rank

Winner names are returned in their order after the stable sort, which for
tied hands is their input order.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from poker_showdown.engine.evaluator import NO_CATEGORY, HandEvaluator
from poker_showdown.rules import PlayerHand
from poker_showdown.rules.categories import (
    DEFAULT_STRATEGIES,
    DEFAULT_STRATEGY_NAMES,
    HandStrategy,
    build_strategies,
)
from poker_showdown.rules.hands import HAND_SIZE

logger = logging.getLogger(__name__)

DECIDED_BY_CATEGORY = "category"
DECIDED_BY_HIGH_CARD = "high_card"


@dataclass
class ShowdownConfig:
    """Showdown configuration."""

    # Comma-separated strategy names; order defines category ranks
    strategies: str = DEFAULT_STRATEGY_NAMES
    hand_size: int = HAND_SIZE

    def build_evaluator(self) -> HandEvaluator:
        return HandEvaluator(build_strategies(self.strategies))


@dataclass(frozen=True)
class ShowdownResult:
    """Outcome of one resolution call.

    Attributes:
        hands: Evaluated hands in final sorted order (ascending)
        winners: Winning hands, in sorted order
        decided_by: DECIDED_BY_CATEGORY or DECIDED_BY_HIGH_CARD
        winning_value: Winning category rank, or winning high card value
    """

    hands: Tuple[PlayerHand, ...]
    winners: Tuple[PlayerHand, ...]
    decided_by: str
    winning_value: int

    @property
    def winner_names(self) -> List[str]:
        return [h.player_name for h in self.winners]

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1


class WinnerResolver:
    """Determines the winning player(s) from raw player records.

    Example:
        >>> resolver = WinnerResolver()
        >>> resolver.who_won(["Joe, 3H, 4H, 5H, 6H, 8H", "Bob, 3C, 3D, 3S, 8C, 10D"])
        ['Joe']
    """

    def __init__(
        self,
        evaluator: Optional[HandEvaluator] = None,
        hand_size: int = HAND_SIZE,
    ):
        if hand_size < 1:
            raise ValueError(f"hand_size must be at least 1, got {hand_size}")
        self.evaluator = evaluator if evaluator is not None else HandEvaluator()
        self.hand_size = hand_size

    @classmethod
    def from_config(cls, config: ShowdownConfig) -> "WinnerResolver":
        return cls(evaluator=config.build_evaluator(), hand_size=config.hand_size)

    def build_hands(self, records: Sequence[str]) -> List[PlayerHand]:
        """Parse and evaluate every record.

        Raises:
            MalformedRecordError: For the first record that cannot be parsed
        """
        hands = []
        for index, record in enumerate(records):
            hand = PlayerHand.from_record(record, index=index, hand_size=self.hand_size)
            hands.append(self.evaluator.evaluate_hand(hand))
        return hands

    def resolve(self, records: Sequence[str]) -> ShowdownResult:
        """Resolve a showdown.

        Args:
            records: Player records, e.g. ["Joe, 3H, 4H, 5H, 6H, 8H", ...]

        Returns:
            ShowdownResult; with no records, no winners

        Raises:
            MalformedRecordError: If any record is invalid
        """
        if isinstance(records, str):
            raise TypeError("records must be a sequence of record strings, not a single string")

        hands = sorted(self.build_hands(records), key=lambda h: h.category_rank)

        if not hands:
            return ShowdownResult(
                hands=(), winners=(), decided_by=DECIDED_BY_CATEGORY, winning_value=NO_CATEGORY
            )

        if all(h.category_rank == NO_CATEGORY for h in hands):
            # Nobody matched a category, fall back to the high card
            hands = sorted(hands, key=lambda h: h.high_card)
            decided_by = DECIDED_BY_HIGH_CARD
            top = hands[-1].high_card
            winners = [h for h in hands if h.high_card == top]
        else:
            decided_by = DECIDED_BY_CATEGORY
            top = hands[-1].category_rank
            winners = [h for h in hands if h.category_rank == top]

        logger.debug(
            "Showdown of %d hands decided by %s (%d): %s",
            len(hands),
            decided_by,
            top,
            [h.player_name for h in winners],
        )
        return ShowdownResult(
            hands=tuple(hands),
            winners=tuple(winners),
            decided_by=decided_by,
            winning_value=top,
        )

    def who_won(self, records: Sequence[str]) -> List[str]:
        """Names of the winning player(s), more than one on a tie."""
        return self.resolve(records).winner_names


def who_won(
    records: Sequence[str], strategies: Sequence[HandStrategy] = DEFAULT_STRATEGIES
) -> List[str]:
    """Convenience wrapper: winner names using the given strategy table."""
    return WinnerResolver(HandEvaluator(strategies)).who_won(records)

"""Player hands built from raw player records.

A player record is a single comma-separated string: the player's name
followed by exactly five card tokens, e.g. "Joe, 3H, 4H, 5H, 6H, 8H".
Whitespace around any field is ignored.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .ranks import Card, CardParseError, parse_card, sort_cards

# Cards per player
HAND_SIZE = 5


class MalformedRecordError(ValueError):
    """Raised when a player record cannot be turned into a hand.

    Attributes:
        record: The offending raw record
        index: Position of the record in the input sequence, if known
        reason: Human-readable description of the problem
    """

    def __init__(self, record, reason: str, index: Optional[int] = None):
        self.record = record
        self.reason = reason
        self.index = index
        where = f"record {index}" if index is not None else "record"
        super().__init__(f"Malformed {where} {record!r}: {reason}")


def split_record(record: str) -> Tuple[str, List[str]]:
    """Split a raw record into (player_name, card_tokens) without parsing cards."""
    fields = [f.strip() for f in record.split(",")]
    return fields[0], fields[1:]


@dataclass(frozen=True)
class PlayerHand:
    """A player's five cards, sorted ascending by rank value.

    Attributes:
        player_name: Name from the record
        cards: Sorted tuple of cards (stable for equal ranks)
        category_rank: 0 for no recognized category, otherwise the position of
            the matched category in the evaluator's strategy table
    """

    player_name: str
    cards: Tuple[Card, ...]
    category_rank: int = 0

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.player_name}({cards_str})"

    @property
    def high_card(self) -> int:
        """Highest rank value in the hand, used to break all-zero ties."""
        return self.cards[-1].rank_value

    def with_category_rank(self, category_rank: int) -> "PlayerHand":
        return replace(self, category_rank=category_rank)

    @classmethod
    def from_record(
        cls, record: str, index: Optional[int] = None, hand_size: int = HAND_SIZE
    ) -> "PlayerHand":
        """Build a hand from a raw player record.

        Args:
            record: e.g. "Bob, 3C, 3D, 3S, 8C, 10D"
            index: Position of the record in its input sequence (for errors)
            hand_size: Required number of card tokens

        Raises:
            ValueError: If hand_size is less than 1
            MalformedRecordError: If the name is blank, the number of card
                tokens is not hand_size, or a card token is invalid. Card
                failures chain the underlying CardParseError.
        """
        if hand_size < 1:
            raise ValueError(f"hand_size must be at least 1, got {hand_size}")
        if not isinstance(record, str):
            raise MalformedRecordError(record, "record must be a string", index)

        name, tokens = split_record(record)
        if not name:
            raise MalformedRecordError(record, "missing player name", index)
        if len(tokens) != hand_size:
            raise MalformedRecordError(
                record, f"expected {hand_size} cards, got {len(tokens)}", index
            )

        cards = []
        for token in tokens:
            try:
                cards.append(parse_card(token))
            except CardParseError as exc:
                raise MalformedRecordError(record, str(exc), index) from exc

        return cls(player_name=name, cards=tuple(sort_cards(cards)))

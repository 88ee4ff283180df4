"""Card rank definitions and parsing.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank and suit constants
- Card representation
- Card token parsing ("3H", "10D", "AC")
- Sorting utilities
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List


class Rank(IntEnum):
    """Card ranks. The value of each member is the card's rank value (Ace high)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest rank


class Suit(IntEnum):
    """Card suits. Suits carry no ordering weight when ranking hands."""

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3


# Rank symbols for display and parsing
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit letters used in player records
SUIT_SYMBOLS = {
    Suit.CLUB: "C",
    Suit.DIAMOND: "D",
    Suit.HEART: "H",
    Suit.SPADE: "S",
}

SUIT_NAMES = {
    Suit.CLUB: "Clubs",
    Suit.DIAMOND: "Diamonds",
    Suit.HEART: "Hearts",
    Suit.SPADE: "Spades",
}

SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# Symbol to rank value, e.g. "A" -> 14, "10" -> 10
RANK_VALUES = {symbol: int(rank) for symbol, rank in SYMBOL_TO_RANK.items()}

# A rank group (letters/digits) followed by a single suit letter
_CARD_PATTERN = re.compile(r"^([0-9A-Za-z]+)([A-Za-z])$")


class CardParseError(ValueError):
    """Raised when a card token cannot be parsed into a Card."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid card {token!r}: {reason}")


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit.

    Immutable and hashable. Cards deliberately have no natural ordering;
    use sort_cards() to order a hand by rank value.
    """

    rank: Rank
    suit: Suit

    @property
    def rank_value(self) -> int:
        """Numeric rank value, 2-14 with Ace highest."""
        return int(self.rank)

    @property
    def rank_symbol(self) -> str:
        return RANK_SYMBOLS[self.rank]

    @property
    def suit_symbol(self) -> str:
        return SUIT_SYMBOLS[self.suit]

    def __str__(self) -> str:
        return f"{self.rank_symbol}{self.suit_symbol}"

    def __repr__(self) -> str:
        return f"Card({self.rank_symbol}{self.suit_symbol})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a string like '3H' or '10S'.

        Args:
            s: Card string in format "RANK+SUIT", surrounding whitespace allowed

        Returns:
            Card object

        Raises:
            CardParseError: If string cannot be parsed
        """
        return parse_card(s)


def parse_card(token: str) -> Card:
    """Parse a single card token such as "3H", " 10D" or "AC".

    Raises:
        CardParseError: If the token is not a rank followed by a suit letter,
            or uses a rank outside 2-10/J/Q/K/A or a suit outside C/D/H/S.
    """
    if not isinstance(token, str):
        raise CardParseError(repr(token), "card token must be a string")

    text = token.strip()
    if not text:
        raise CardParseError(token, "empty card token")

    match = _CARD_PATTERN.match(text)
    if match is None:
        raise CardParseError(token, "expected a rank followed by a suit letter")

    rank_str, suit_char = match.groups()

    if rank_str not in SYMBOL_TO_RANK:
        raise CardParseError(token, f"unknown rank {rank_str!r}")
    if suit_char not in SYMBOL_TO_SUIT:
        raise CardParseError(token, f"unknown suit {suit_char!r}")

    return Card(rank=SYMBOL_TO_RANK[rank_str], suit=SYMBOL_TO_SUIT[suit_char])


def parse_cards(tokens: Iterable[str]) -> List[Card]:
    """Parse several card tokens, preserving their order."""
    return [parse_card(t) for t in tokens]


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards ascending by rank value.

    The sort is stable: cards of equal rank keep their input order,
    so sorting an already sorted list returns it unchanged.

    Returns:
        New sorted list of cards
    """
    return sorted(cards, key=lambda c: c.rank_value)


"""Tests for hand category predicates.

Test coverage:
- Adjacent equal-rank counting on sorted hands
- One pair: count == 1; three of a kind: count == 2
- Counting quirks: two pair reads as three of a kind, quads match neither
- Flush: same suit only, no sequence check, every suit detected
- Strategy registry and ordered table construction
"""

import pytest

from poker_showdown.rules import (
    Suit,
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
    parse_cards,
    sort_cards,
)


def sorted_hand(s: str):
    return sort_cards(parse_cards(s.split()))


class TestAdjacentPairCounting:
    """Pair predicates work on adjacent equal-rank counts."""

    def test_no_pairs(self):
        cards = sorted_hand("2C 5D 7H 9S KC")
        assert count_adjacent_equal_ranks(cards) == 0
        assert not is_one_pair(cards)
        assert not is_three_of_a_kind(cards)

    def test_one_adjacent_pair(self):
        cards = sorted_hand("2C 2D 7H 9S KC")
        assert count_adjacent_equal_ranks(cards) == 1
        assert is_one_pair(cards)
        assert not is_three_of_a_kind(cards)

    def test_two_adjacent_pairs(self):
        cards = sorted_hand("3C 3D 3S 8C 10D")
        assert count_adjacent_equal_ranks(cards) == 2
        assert not is_one_pair(cards)
        assert is_three_of_a_kind(cards)

    def test_two_pair_counts_as_three_of_a_kind(self):
        cards = sorted_hand("3C 3D 8S 8C KD")
        assert count_adjacent_equal_ranks(cards) == 2
        assert is_three_of_a_kind(cards)

    def test_four_of_a_kind_matches_neither(self):
        cards = sorted_hand("9C 9D 9S 9H 2D")
        assert count_adjacent_equal_ranks(cards) == 3
        assert not is_one_pair(cards)
        assert not is_three_of_a_kind(cards)

    def test_full_house_matches_neither(self):
        cards = sorted_hand("4C 4D 4S JH JD")
        assert count_adjacent_equal_ranks(cards) == 3
        assert not is_one_pair(cards)
        assert not is_three_of_a_kind(cards)

    def test_count_uses_order_given(self):
        # Unsorted input separates the pair
        cards = parse_cards("2C 7H 2D 9S KC".split())
        assert count_adjacent_equal_ranks(cards) == 0


class TestFlush:
    """Flush is same-suit only."""

    @pytest.mark.parametrize("suit", ["C", "D", "H", "S"])
    def test_every_suit(self, suit):
        cards = sorted_hand(" ".join(f"{r}{suit}" for r in ["2", "5", "9", "J", "A"]))
        assert is_flush(cards)

    def test_mixed_suits(self):
        assert not is_flush(sorted_hand("2H 3H 4H 5H 6S"))

    def test_no_sequence_required(self):
        assert is_flush(sorted_hand("2S 7S 9S QS AS"))

    def test_paired_flush_is_still_flush(self):
        cards = sorted_hand("5H 5H 8H 10H KH")
        assert is_flush(cards)
        assert is_one_pair(cards)

    def test_empty(self):
        assert not is_flush([])


class TestStrategyTable:
    """Named strategies and table construction."""

    def test_default_order(self):
        assert DEFAULT_STRATEGIES == (ONE_PAIR, THREE_OF_A_KIND, FLUSH)

    def test_strategy_is_callable(self):
        assert FLUSH(sorted_hand("2D 4D 6D 8D 10D"))
        assert isinstance(ONE_PAIR, HandStrategy)

    def test_registry(self):
        assert set(STRATEGIES_BY_NAME) == {"one_pair", "three_of_a_kind", "flush"}

    def test_build_strategies_keeps_order(self):
        assert build_strategies("flush, one_pair") == (FLUSH, ONE_PAIR)

    def test_build_strategies_case_insensitive(self):
        assert build_strategies("FLUSH") == (FLUSH,)

    def test_build_strategies_unknown(self):
        with pytest.raises(ValueError, match="Unknown hand strategy"):
            build_strategies("one_pair,straight")

    def test_build_strategies_duplicate(self):
        with pytest.raises(ValueError, match="more than once"):
            build_strategies("flush,flush")

    def test_build_strategies_empty(self):
        with pytest.raises(ValueError):
            build_strategies(" , ")

"""Tests for the hand evaluator.

Test coverage:
- Category ranks with the default table (one pair=1, three of a kind=2, flush=3)
- Last-match-wins: a paired flush rates as a flush
- Table order decides priority when reordered
- Category labels
"""

import pytest

from poker_showdown.engine import HandEvaluator, NO_CATEGORY
from poker_showdown.rules import (
    FLUSH,
    ONE_PAIR,
    THREE_OF_A_KIND,
    PlayerHand,
    parse_cards,
    sort_cards,
)


def sorted_hand(s: str):
    return sort_cards(parse_cards(s.split()))


@pytest.fixture
def evaluator():
    return HandEvaluator()


class TestDefaultTable:
    def test_nothing(self, evaluator):
        assert evaluator.evaluate(sorted_hand("2C 5D 7H 9S KC")) == NO_CATEGORY

    def test_one_pair(self, evaluator):
        assert evaluator.evaluate(sorted_hand("AC 10C 5C 2S 2C")) == 1

    def test_three_of_a_kind(self, evaluator):
        assert evaluator.evaluate(sorted_hand("3C 3D 3S 8C 10D")) == 2

    def test_flush(self, evaluator):
        assert evaluator.evaluate(sorted_hand("3H 4H 5H 6H 8H")) == 3

    def test_four_of_a_kind_is_unrated(self, evaluator):
        assert evaluator.evaluate(sorted_hand("9C 9D 9S 9H 2D")) == NO_CATEGORY


class TestLastMatchWins:
    """Every strategy is checked and the last match decides."""

    def test_pair_and_flush_rates_as_flush(self, evaluator):
        cards = sorted_hand("5H 5H 8H 10H KH")
        assert evaluator.matching(cards) == ["one_pair", "flush"]
        assert evaluator.evaluate(cards) == 3

    def test_reordered_table_changes_priority(self):
        evaluator = HandEvaluator([FLUSH, ONE_PAIR])
        cards = sorted_hand("5H 5H 8H 10H KH")
        # Pair is now checked last
        assert evaluator.evaluate(cards) == 2
        assert evaluator.category_label(2) == "One Pair"

    def test_last_not_strongest(self):
        evaluator = HandEvaluator([THREE_OF_A_KIND, FLUSH, ONE_PAIR])
        assert evaluator.evaluate(sorted_hand("7S 7S 9S JS AS")) == 3

    def test_empty_table_rejected(self):
        with pytest.raises(ValueError):
            HandEvaluator([])


class TestLabelsAndHands:
    def test_labels(self, evaluator):
        assert evaluator.category_label(0) == "High Card"
        assert evaluator.category_label(1) == "One Pair"
        assert evaluator.category_label(2) == "Three of a Kind"
        assert evaluator.category_label(3) == "Flush"

    def test_label_out_of_range(self, evaluator):
        with pytest.raises(ValueError):
            evaluator.category_label(4)

    def test_evaluate_hand(self, evaluator):
        hand = PlayerHand.from_record("Bob, 3C, 3D, 3S, 8C, 10D")
        rated = evaluator.evaluate_hand(hand)
        assert rated.category_rank == 2
        assert rated.player_name == "Bob"

    def test_strategies_are_immutable(self, evaluator):
        assert isinstance(evaluator.strategies, tuple)
        assert evaluator.max_rank == 3

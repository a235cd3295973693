"""Tests for the player."""

import pytest

from two_card_poker.engine.card import HandRank, pair_rank
from two_card_poker.engine.errors import RangeError, StateError
from two_card_poker.engine.player import Player


class TestPlayer:
    """Tests for Player."""

    def test_initial_state(self):
        player = Player(3)

        assert player.player_id == 3
        assert player.cards == ()
        assert player.last_round_score == 0
        assert player.overall_score == 0

    def test_hand_rank_before_deal(self):
        """Hand rank needs two cards."""
        with pytest.raises(StateError):
            Player(0).current_hand_rank()

    def test_hand_rank_after_deal(self, card):
        player = Player(0)
        player.receive_two_cards([card("10d"), card("2d")])

        assert player.current_hand_rank() == HandRank.FLUSH

    def test_hand_rank_matches_pair_rank(self, card):
        c1, c2 = card("Js"), card("4h")
        player = Player(1)
        player.receive_two_cards([c1, c2])

        assert player.current_hand_rank() == pair_rank(c1, c2)

    def test_receive_replaces_hand(self, card):
        player = Player(0)
        player.receive_two_cards([card("As"), card("Ah")])
        player.receive_two_cards([card("5c"), card("6h")])

        assert player.cards == (card("5c"), card("6h"))
        assert player.current_hand_rank() == HandRank.STRAIGHT

    def test_receive_on_invalid_player(self, card):
        with pytest.raises(StateError):
            Player(-1).receive_two_cards([card("As"), card("Ah")])

    @pytest.mark.parametrize("count", [0, 1, 3])
    def test_receive_wrong_card_count(self, card, count):
        """Partial hands are rejected and the old hand is kept."""
        cards = [card("2s"), card("3h"), card("9c")][:count]
        player = Player(0)
        player.receive_two_cards([card("Kd"), card("Kc")])

        with pytest.raises(RangeError):
            player.receive_two_cards(cards)
        assert player.current_hand_rank() == HandRank.PAIR

    def test_snapshot(self, card):
        player = Player(2)
        assert player.snapshot().hand_rank is None

        player.receive_two_cards([card("Qh"), card("Kh")])
        player.last_round_score = 1
        player.overall_score = 4
        state = player.snapshot()

        assert state.player_id == 2
        assert state.hand_rank == HandRank.STRAIGHT_FLUSH
        assert state.last_round_score == 1
        assert state.overall_score == 4
        assert state.format_cards() == "Q♥ K♥"

    def test_snapshot_is_frozen(self):
        state = Player(0).snapshot()
        with pytest.raises(AttributeError):
            state.overall_score = 10

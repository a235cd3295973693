"""Player state for a two-card poker game."""

from dataclasses import dataclass
from typing import Sequence

from two_card_poker.engine.card import Card, pair_rank
from two_card_poker.engine.errors import RangeError, StateError


@dataclass(frozen=True)
class PlayerState:
    """Read-only snapshot of a single player."""
    player_id: int
    cards: tuple[Card, ...]
    last_round_score: int
    overall_score: int
    hand_rank: int | None  # None if no cards dealt yet

    def format_cards(self) -> str:
        """e.g., "A♠ K♥" """
        return " ".join(str(card) for card in self.cards)


class Player:
    """A seat at the table: identity, hand and scores."""

    HAND_SIZE = 2

    def __init__(self, player_id: int):
        """
        Args:
            player_id: Identifier of the player. Uniqueness is up to the caller.
        """
        self._player_id = player_id
        self._cards: list[Card] = []

        # Written by the game engine only
        self.last_round_score = 0
        self.overall_score = 0

    @property
    def player_id(self) -> int:
        return self._player_id

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def receive_two_cards(self, cards: Sequence[Card]) -> None:
        """Replace the current hand with the given two cards."""
        if self._player_id < 0:
            raise StateError("Player is not initialized!")
        if len(cards) != self.HAND_SIZE:
            raise RangeError(f"A hand holds exactly {self.HAND_SIZE} cards, got {len(cards)}")

        self._cards = list(cards)

    def current_hand_rank(self) -> int:
        """Rank of the cards currently held (see pair_rank)."""
        if len(self._cards) < self.HAND_SIZE:
            raise StateError("Hand ranking requires 2 cards!")

        return pair_rank(self._cards[0], self._cards[1])

    def snapshot(self) -> PlayerState:
        return PlayerState(
            player_id=self._player_id,
            cards=tuple(self._cards),
            last_round_score=self.last_round_score,
            overall_score=self.overall_score,
            hand_rank=self.current_hand_rank() if self._cards else None,
        )

    def __repr__(self) -> str:
        return (
            f"Player(id={self._player_id}, cards={[str(c) for c in self._cards]}, "
            f"round_score={self.last_round_score}, overall_score={self.overall_score})"
        )

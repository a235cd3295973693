"""A standard 52-card deck."""

import random

from two_card_poker.engine.card import Card, Rank, Suit
from two_card_poker.engine.errors import RangeError


class Deck:
    """Ordered, shrinking collection of the 52 unique cards."""

    SIZE = 52

    def __init__(self, rng: random.Random | None = None):
        """
        Create a full deck and shuffle it once.

        Args:
            rng: Random source used for shuffling (default: a new unseeded one)
        """
        self._rng = rng or random.Random()
        self._cards: list[Card] = [Card(rank, suit) for rank in Rank for suit in Suit]
        self.shuffle()

    @property
    def size(self) -> int:
        """Number of cards left in the deck."""
        return len(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Current card order, top first."""
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def shuffle(self, times: int = 1) -> None:
        """
        Shuffle the remaining cards in place.

        Args:
            times: Number of shuffle passes (at least 1)
        """
        if times < 1:
            raise RangeError(f"Shuffle times should be at least 1, got {times}")

        for _ in range(times):
            # random.Random.shuffle is an in-place Fisher-Yates pass
            self._rng.shuffle(self._cards)

    def pop_from_top(self, count: int) -> list[Card]:
        """
        Remove and return cards from the top of the deck.

        Args:
            count: Number of cards to take (1..size)

        Returns:
            The removed cards, in deck order
        """
        if count <= 0 or count > len(self._cards):
            raise RangeError(
                f"Number of cards to pop should be between 1 and {len(self._cards)}, got {count}"
            )

        popped = self._cards[:count]
        del self._cards[:count]
        return popped

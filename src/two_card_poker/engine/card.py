"""Cards, their ordering values and two-card hand ranking."""

from dataclasses import dataclass
from enum import IntEnum

from two_card_poker.engine.errors import RangeError


class Suit(IntEnum):
    """Card suit. The value is the suit's tiebreak strength."""
    DIAMONDS = 1
    HEARTS = 2
    CLUBS = 3
    SPADES = 4

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


class Rank(IntEnum):
    """Card rank. The value is the rank's strength."""
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
    ACE = 14

    @property
    def label(self) -> str:
        if self <= Rank.TEN:
            return str(int(self))
        return self.name[0]


class HandRank(IntEnum):
    """
    Named two-card combinations.

    The weakest category must stay above the highest possible card value
    (ace of spades = 14 * 10 + 4 = 144), so any named combination beats
    any high card.
    """
    PAIR = 200
    STRAIGHT = 300
    FLUSH = 400
    STRAIGHT_FLUSH = 500


SUIT_SYMBOLS = {
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

# Accepted suit spellings for Card.parse
_SUIT_ALIASES = {
    "d": Suit.DIAMONDS, "♦": Suit.DIAMONDS,
    "h": Suit.HEARTS, "♥": Suit.HEARTS,
    "c": Suit.CLUBS, "♣": Suit.CLUBS,
    "s": Suit.SPADES, "♠": Suit.SPADES,
}

_RANK_ALIASES = {rank.label: rank for rank in Rank}
_RANK_ALIASES["T"] = Rank.TEN


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit."""
    rank: Rank
    suit: Suit

    def value(self) -> int:
        """
        Unique value of the card.

        Higher rank always wins; equal ranks are separated by suit.
        """
        return int(self.rank) * 10 + int(self.suit)

    @classmethod
    def parse(cls, text: str) -> "Card":
        """
        Parse a short card string.

        e.g., "As" -> ace of spades, "10d" / "Td" -> ten of diamonds, "Q♥"
        """
        text = text.strip()
        if len(text) < 2:
            raise RangeError(f"Not a card: {text!r}")

        rank = _RANK_ALIASES.get(text[:-1].upper())
        suit = _SUIT_ALIASES.get(text[-1].lower())
        if rank is None or suit is None:
            raise RangeError(f"Not a card: {text!r}")
        return cls(rank, suit)

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"


def pair_rank(c1: Card, c2: Card) -> int:
    """
    Rank a two-card combination.

    Returns one of the HandRank values, or for a high card the value of
    the higher card. The checks run in a fixed order:
    straight flush, flush, straight, pair, high card.
    """
    sequential_rank = abs(c1.rank - c2.rank) == 1
    same_suit = c1.suit == c2.suit

    if sequential_rank and same_suit:
        return int(HandRank.STRAIGHT_FLUSH)
    if same_suit:
        return int(HandRank.FLUSH)
    if sequential_rank:
        return int(HandRank.STRAIGHT)
    if c1.rank == c2.rank:
        return int(HandRank.PAIR)
    return max(c1.value(), c2.value())


def describe_hand_rank(hand_rank: int) -> str:
    """Human-readable name for a pair_rank() result."""
    try:
        return HandRank(hand_rank).name.replace("_", " ").title()
    except ValueError:
        return "High Card"

"""Two-card poker engine: cards, deck, players and the game engine."""

from two_card_poker.engine.card import Card, HandRank, Rank, Suit, pair_rank
from two_card_poker.engine.deck import Deck
from two_card_poker.engine.errors import PokerError, RangeError, StateError
from two_card_poker.engine.game_engine import GameEngine, GameStatus, RoundResult
from two_card_poker.engine.player import Player, PlayerState

__all__ = [
    "Card",
    "HandRank",
    "Rank",
    "Suit",
    "pair_rank",
    "Deck",
    "PokerError",
    "RangeError",
    "StateError",
    "GameEngine",
    "GameStatus",
    "RoundResult",
    "Player",
    "PlayerState",
]

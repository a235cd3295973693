"""Game engine: runs rounds of two-card poker and keeps the score."""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable
from uuid import uuid4

from two_card_poker.engine.deck import Deck
from two_card_poker.engine.errors import RangeError, StateError
from two_card_poker.engine.player import Player, PlayerState
from two_card_poker.observability import get_logger


class GameStatus(str, Enum):
    INITIALIZED = "initialized"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@dataclass(frozen=True)
class RoundResult:
    """Result of a completed round."""
    round_number: int
    shuffle_times: int
    standings: tuple[PlayerState, ...]  # weakest hand first


class GameEngine:
    """
    Main class of the poker game.

    Owns the players and the deck, validates rounds and assigns scores.
    At the end of each round players are ordered by hand rank and score
    0 (weakest) up to players_count - 1 (strongest).
    """

    MIN_ROUNDS = 2
    MAX_ROUNDS = 5
    MIN_PLAYERS = 2
    MAX_PLAYERS = 6

    def __init__(
        self,
        rounds_to_play: int,
        players_count: int,
        rng: random.Random | None = None,
        player_factory: Callable[[int], Player] | None = None,
    ):
        """
        Create a game engine.

        Args:
            rounds_to_play: Total number of rounds to play (2-5)
            players_count: Number of players (2-6)
            rng: Random source for every deck of this game
            player_factory: Callable creating a player from its id (default: Player)
        """
        if not self.MIN_ROUNDS <= rounds_to_play <= self.MAX_ROUNDS:
            raise RangeError(
                f"Only {self.MIN_ROUNDS}-{self.MAX_ROUNDS} rounds allowed, got {rounds_to_play}"
            )
        if not self.MIN_PLAYERS <= players_count <= self.MAX_PLAYERS:
            raise RangeError(
                f"Only {self.MIN_PLAYERS}-{self.MAX_PLAYERS} players allowed, got {players_count}"
            )

        self._rounds_to_play = rounds_to_play
        self._players_count = players_count
        self._rng = rng or random.Random()
        self._player_factory = player_factory or Player

        self.game_id = uuid4().hex[:8]
        self.logger = get_logger(__name__, game_id=self.game_id)

        self._rounds_played = 0
        self._players: list[Player] = []
        self._deck: Deck | None = None
        self._history: list[RoundResult] = []
        self._init_players()

        self.logger.info(
            f"Game created: {players_count} players, {rounds_to_play} rounds"
        )

    @property
    def rounds_to_play(self) -> int:
        return self._rounds_to_play

    @property
    def players_count(self) -> int:
        return self._players_count

    @property
    def rounds_played(self) -> int:
        return self._rounds_played

    @property
    def status(self) -> GameStatus:
        if self._rounds_played == 0:
            return GameStatus.INITIALIZED
        if self._rounds_played < self._rounds_to_play:
            return GameStatus.IN_PROGRESS
        return GameStatus.COMPLETE

    @property
    def history(self) -> tuple[RoundResult, ...]:
        """Rounds played since the game was created or last reset."""
        return tuple(self._history)

    @property
    def current_deck(self) -> Deck | None:
        """Deck of the most recent round, None before the first round."""
        return self._deck

    def _init_players(self) -> None:
        """Create all players with zero scores."""
        self._players = [self._player_factory(i) for i in range(self._players_count)]

    def play_new_round(self, deck_shuffle_times: int = 1) -> RoundResult:
        """
        Simulate one round.

        Args:
            deck_shuffle_times: Number of times to shuffle the fresh deck

        Returns:
            RoundResult with the scored standings
        """
        if self.status is GameStatus.COMPLETE:
            self.logger.warning("Rejected round: game is complete")
            raise StateError("No more rounds left to play! Please, reset the game engine.")
        if deck_shuffle_times < 1:
            self.logger.warning(f"Rejected round: shuffle times {deck_shuffle_times}")
            raise RangeError(
                f"Deck shuffle times should be greater than 0, got {deck_shuffle_times}"
            )

        # The dealer shuffles a new deck at the start of each round
        self._deck = Deck(self._rng)
        self._deck.shuffle(deck_shuffle_times)

        for player in self._players:
            player.receive_two_cards(self._deck.pop_from_top(Player.HAND_SIZE))
            self.logger.debug(
                f"Dealt {' '.join(str(c) for c in player.cards)} to player {player.player_id}"
            )

        # list.sort is stable: equal ranks keep their previous relative order
        self._players.sort(key=lambda p: p.current_hand_rank())
        for score, player in enumerate(self._players):
            player.last_round_score = score
            player.overall_score += score

        self._rounds_played += 1

        result = RoundResult(
            round_number=self._rounds_played,
            shuffle_times=deck_shuffle_times,
            standings=self.get_players_read_only(),
        )
        self._history.append(result)

        self.logger.info(
            f"Round {self._rounds_played}/{self._rounds_to_play} complete, "
            f"best hand: player {self._players[-1].player_id}"
        )
        return result

    def get_players_read_only(self) -> tuple[PlayerState, ...]:
        """Snapshots of all players in the engine's current order."""
        return tuple(player.snapshot() for player in self._players)

    def get_the_winner(self) -> PlayerState:
        """
        Get the player who currently leads the game.

        The roster is re-ordered by overall score, highest first.
        """
        if not self._players:
            raise StateError("There are no players in the game")

        self._players.sort(key=lambda p: p.overall_score, reverse=True)
        return self._players[0].snapshot()

    def reset_game(self) -> None:
        """Reset the players' scores, cards and counters."""
        self._rounds_played = 0
        self._deck = None
        self._history.clear()
        self._init_players()
        self.logger.info("Game reset")

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the engine state for logging.

        Returns:
            Dict with the game configuration, progress and players
        """
        return {
            "game_id": self.game_id,
            "rounds_to_play": self._rounds_to_play,
            "players_count": self._players_count,
            "rounds_played": self._rounds_played,
            "status": self.status.value,
            "deck_size": self._deck.size if self._deck else None,
            "players": [
                {
                    "player_id": p.player_id,
                    "cards": [str(c) for c in p.cards],
                    "last_round_score": p.last_round_score,
                    "overall_score": p.overall_score,
                }
                for p in self._players
            ],
        }

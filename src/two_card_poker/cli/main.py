"""CLI interface for the two-card poker simulator."""

import random
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from two_card_poker.config import settings
from two_card_poker.engine import GameEngine, HandRank, PokerError, RoundResult
from two_card_poker.engine.card import describe_hand_rank

app = typer.Typer(
    name="two-card-poker",
    help="Two-card poker simulator",
    add_completion=False,
)
console = Console()


def print_round(result: RoundResult) -> None:
    """Print the players of a round ordered by id."""
    table = Table(title=f"Round #{result.round_number} (deck shuffled {result.shuffle_times}x)")
    table.add_column("Player", justify="center")
    table.add_column("Cards", style="cyan")
    table.add_column("Round Score", justify="right")
    table.add_column("Hand Rank", justify="right")
    table.add_column("Hand")

    for state in sorted(result.standings, key=lambda s: s.player_id):
        table.add_row(
            str(state.player_id),
            state.format_cards(),
            str(state.last_round_score),
            str(state.hand_rank),
            describe_hand_rank(state.hand_rank),
        )

    console.print(table)


def print_standings(engine: GameEngine) -> None:
    """Print overall scores, highest first."""
    table = Table(title="Final Standings")
    table.add_column("Rank", justify="center")
    table.add_column("Player", justify="center")
    table.add_column("Overall Score", justify="right")

    standings = sorted(engine.get_players_read_only(), key=lambda s: s.overall_score, reverse=True)
    for i, state in enumerate(standings, 1):
        table.add_row(str(i), str(state.player_id), str(state.overall_score))

    console.print(table)


@app.command()
def play(
    rounds: int = typer.Option(
        settings.default_rounds,
        "--rounds", "-r",
        help="Number of rounds to play (2-5)",
    ),
    players: int = typer.Option(
        settings.default_players,
        "--players", "-p",
        help="Number of players (2-6)",
    ),
    seed: Optional[int] = typer.Option(
        settings.seed,
        "--seed", "-s",
        help="Seed for reproducible games",
    ),
    max_shuffles: int = typer.Option(
        settings.max_shuffle_times,
        "--max-shuffles",
        min=1,
        help="Each round shuffles the deck a random 1..N times",
    ),
):
    """Play a full game and print every round."""
    rng = random.Random(seed)

    try:
        engine = GameEngine(rounds_to_play=rounds, players_count=players, rng=rng)
    except PokerError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print("\n[bold]Game Started[/bold]")
    console.print(f"  Players: {engine.players_count}")
    console.print(f"  Rounds: {engine.rounds_to_play}")
    console.print()

    for _ in range(engine.rounds_to_play):
        result = engine.play_new_round(rng.randint(1, max_shuffles))
        print_round(result)

    console.print("\n[bold]Game Over[/bold]")
    winner = engine.get_the_winner()
    console.print(
        f"The winner is: [green]Player {winner.player_id}[/green] "
        f"with overall score: {winner.overall_score}"
    )
    print_standings(engine)


@app.command()
def rules():
    """Show the hand ranking."""
    table = Table(title="Hand Ranking (strongest first)")
    table.add_column("Hand", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Condition")

    conditions = {
        HandRank.STRAIGHT_FLUSH: "Sequential rank, same suit",
        HandRank.FLUSH: "Same suit",
        HandRank.STRAIGHT: "Sequential rank, different suit",
        HandRank.PAIR: "Same rank",
    }
    for hand_rank in sorted(HandRank, reverse=True):
        table.add_row(describe_hand_rank(hand_rank), str(int(hand_rank)), conditions[hand_rank])
    table.add_row("High Card", "21-144", "Value of the higher card (rank * 10 + suit)")

    console.print(table)


@app.command()
def config():
    """Show current configuration."""
    console.print("\n[bold]Current Configuration[/bold]")

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Default Rounds", str(settings.default_rounds))
    table.add_row("Default Players", str(settings.default_players))
    table.add_row("Max Shuffle Times", str(settings.max_shuffle_times))
    table.add_row("Seed", str(settings.seed) if settings.seed is not None else "random")
    table.add_row("Log Level", settings.log_level)
    table.add_row("Log Format", settings.log_format)

    console.print(table)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
CLI for the Mini IPL tournament simulation
"""
import logging
import random
from collections import Counter, defaultdict
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import track
from rich.table import Table

from mini_ipl.config import settings
from mini_ipl.errors import ConfigurationError
from mini_ipl.models.player import Player, PlayerRole
from mini_ipl.models.team import MatchResult
from mini_ipl.engine.innings import BallEvent, Innings
from mini_ipl.engine.match_engine import Match
from mini_ipl.engine.outcomes import BallOutcome, RandomOutcomeSource
from mini_ipl.engine.tournament_engine import Tournament
from mini_ipl.generators import PlayerGenerator, TeamGenerator
from mini_ipl.validators import LineupValidator

console = Console()
logger = logging.getLogger(__name__)

ROLE_CHOICES = {
    "1": PlayerRole.BATSMAN,
    "2": PlayerRole.BOWLER,
    "3": PlayerRole.ALL_ROUNDER,
}


@click.group()
@click.option("--log-level", default=settings.LOG_LEVEL, show_default=True, help="Logging level")
def cli(log_level: str):
    """Mini IPL - Round-robin Cricket Tournament Simulation"""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def describe_ball(event: BallEvent) -> str:
    """Commentary line for a single ball"""
    striker = event.striker
    if event.is_wicket:
        return f"[bold red]WICKET![/bold red] {striker} is out! Bowled by {event.bowler}"
    return {
        BallOutcome.DOT: f"Dot ball. {striker} defends",
        BallOutcome.SINGLE: f"Single. {striker} takes a quick run",
        BallOutcome.DOUBLE: f"Two runs. {striker} pushes for a couple",
        BallOutcome.TRIPLE: f"Three runs. {striker} runs hard for three",
        BallOutcome.FOUR: f"[bold green]FOUR![/bold green] {striker} hits a boundary!",
        BallOutcome.SIX: f"[bold magenta]SIX![/bold magenta] {striker} hits it out of the park!",
    }[event.outcome]


def print_ball(event: BallEvent) -> None:
    console.print(f"Ball {event.ball_number}: {describe_ball(event)}")
    console.print(f"  Score: {event.score_line}")


def _prompt_player(slot: int) -> Player:
    name = click.prompt(f"Player {slot} name").strip()
    age = click.prompt(f"Player {slot} age", type=click.IntRange(10, 60))
    choice = click.prompt(
        f"Player {slot} type (1-Batsman, 2-Bowler, 3-AllRounder)",
        type=click.Choice(list(ROLE_CHOICES)),
    )
    return Player(name=name, age=age, role=ROLE_CHOICES[choice])


def _prompt_squad(team_name: str, size: int) -> list[Player]:
    """Ask for a squad until it passes lineup validation"""
    while True:
        console.print(f"\n[bold]Creating players for {team_name}[/bold]")
        squad = []
        for slot in range(1, size + 1):
            player = _prompt_player(slot)
            while any(p.name == player.name for p in squad):
                console.print(f"[red]{team_name} already has a player named {player.name}[/red]")
                player = _prompt_player(slot)
            squad.append(player)

        result = LineupValidator.validate(squad)
        if result["valid"]:
            return squad
        for error in result["errors"]:
            console.print(f"[red]{error}[/red]")
        console.print("[yellow]Please enter the squad again.[/yellow]")


def build_tournament(name: Optional[str], seed: Optional[int], auto: bool, commentary: bool) -> Tournament:
    on_ball = print_ball if commentary else None
    if auto:
        return TeamGenerator.create_tournament(name=name, seed=seed, on_ball=on_ball)

    tournament = Tournament(name=name, outcome_source=RandomOutcomeSource(seed), on_ball=on_ball)
    for team in TeamGenerator.create_teams():
        tournament.add_team(team)
        for player in _prompt_squad(team.name, settings.SQUAD_SIZE):
            tournament.register_player(team, player)
    return tournament


def prompt_selection(match: Match, number: int, innings: Innings) -> None:
    """Ask for openers and the opening bowler, re-prompting on unknown names"""
    console.print(f"\n[bold]Setting up {innings.batting_team.name} innings[/bold]")
    console.print("Batters: " + ", ".join(p.name for p in innings.batting_order))
    console.print("Bowlers: " + ", ".join(p.name for p in innings.bowling_order))

    while True:
        striker = click.prompt("Enter striker name").strip()
        non_striker = click.prompt("Enter non-striker name").strip()
        try:
            innings.set_batters(striker, non_striker)
            break
        except ConfigurationError as e:
            console.print(f"[red]{e}[/red]")

    while True:
        bowler = click.prompt("Enter bowler name").strip()
        try:
            innings.set_bowler(bowler)
            break
        except ConfigurationError as e:
            console.print(f"[red]{e}[/red]")


def print_teams(tournament: Tournament) -> None:
    table = Table(title="Tournament Teams")
    table.add_column("Team", style="cyan")
    table.add_column("City")
    table.add_column("Players")
    for team in tournament.teams:
        table.add_row(
            team.name,
            team.city,
            ", ".join(f"{p.name} ({p.role.value})" for p in team.roster),
        )
    console.print(table)


def print_match_summary(match: Match) -> None:
    summary = match.summary()
    console.print(Panel(
        f"{summary.team1}: {summary.innings1_score}\n"
        f"{summary.team2}: {summary.innings2_score}\n"
        f"[bold green]Result: {match.result_text}[/bold green]\n"
        f"Player of the Match: [bold]{summary.player_of_match}[/bold]",
        title=f"Match {summary.match_number} Summary",
    ))


def print_player_stats(tournament: Tournament) -> None:
    table = Table(title="Final Player Statistics")
    table.add_column("Name", style="cyan")
    table.add_column("Team")
    table.add_column("Role", style="magenta")
    table.add_column("Runs", justify="right")
    table.add_column("Balls", justify="right")
    table.add_column("SR", justify="right")
    table.add_column("Wkts", justify="right")
    table.add_column("Econ", justify="right")
    table.add_column("Credits", justify="right", style="green")

    for row in tournament.player_stats():
        table.add_row(
            row.player.name,
            row.team,
            row.player.role.value,
            str(row.runs),
            str(row.balls_faced),
            f"{row.strike_rate:.1f}",
            str(row.wickets),
            f"{row.economy:.1f}",
            str(row.credits),
        )
    console.print(table)


def print_points_table(tournament: Tournament) -> None:
    table = Table(title="Final Points Table")
    table.add_column("#", justify="right")
    table.add_column("Team", style="cyan")
    table.add_column("P", justify="right")
    table.add_column("W", justify="right")
    table.add_column("L", justify="right")
    table.add_column("T", justify="right")
    table.add_column("Pts", justify="right", style="green")
    table.add_column("Win %", justify="right")

    for s in tournament.points_table():
        table.add_row(
            str(s.position),
            s.team.name,
            str(s.played),
            str(s.won),
            str(s.lost),
            str(s.tied),
            str(s.points),
            f"{s.win_percentage:.1f}",
        )
    console.print(table)


@cli.command()
@click.option("--name", default=None, help="Tournament name")
@click.option("--seed", type=int, default=settings.RANDOM_SEED, help="Seed for squads and ball outcomes")
@click.option("--auto", is_flag=True, help="Generate squads and use default openers and bowlers")
@click.option("--commentary/--no-commentary", default=True, help="Show ball-by-ball commentary")
def play(name: Optional[str], seed: Optional[int], auto: bool, commentary: bool):
    """Set up and play a full tournament"""
    console.print(Panel(
        f"[bold]IPL-like Tournament System[/bold]\n"
        f"{len(TeamGenerator.get_team_choices())} teams, {settings.SQUAD_SIZE} players each, "
        f"{settings.OVERS_PER_INNINGS} overs, {settings.WICKETS_PER_INNINGS} wickets"
    ))

    tournament = build_tournament(name, seed, auto, commentary)
    try:
        tournament.generate_fixtures()
    except ConfigurationError as e:
        raise click.ClickException(str(e))
    print_teams(tournament)

    selector = None if auto else prompt_selection
    console.print(f"\n[bold yellow]{tournament.name} begins[/bold yellow]")
    while tournament.get_next_match() is not None:
        match = tournament.get_next_match()
        console.print(Panel(
            f"[bold]{match.team1.name} vs {match.team2.name}[/bold]\n"
            f"Venue: {match.venue} | Date: {match.match_date.isoformat()}",
            title=f"Round {tournament.current_round + 1}",
        ))
        tournament.play_round(selector)
        print_match_summary(match)

    print_player_stats(tournament)
    print_points_table(tournament)

    champion = tournament.champion()
    mvp = tournament.tournament_mvp()
    console.print(Panel(
        f"Champion: [bold green]{champion.name}[/bold green]\n"
        f"Player of the Tournament: [bold]{mvp.name}[/bold] ({mvp.total_credits} credits)",
        title="Tournament Awards",
    ))


@cli.command()
def fixtures():
    """Show the round-robin schedule for the default franchises"""
    tournament = Tournament()
    generator = PlayerGenerator(seed=0)
    for team in TeamGenerator.create_teams():
        tournament.add_team(team)
        for player in generator.generate_squad():
            tournament.register_player(team, player)
    tournament.generate_fixtures()

    table = Table(title="Fixtures")
    table.add_column("Match", justify="right")
    table.add_column("Team 1", style="cyan")
    table.add_column("Team 2", style="magenta")
    table.add_column("Venue")
    table.add_column("Date")
    for match in tournament.matches:
        table.add_row(
            str(match.match_number),
            match.team1.name,
            match.team2.name,
            match.venue,
            match.match_date.isoformat(),
        )
    console.print(table)


@cli.command()
@click.option("--tournaments", default=100, help="Number of tournaments to simulate")
@click.option("--seed", type=int, default=None, help="Base seed; tournament i uses seed + i")
def benchmark(tournaments: int, seed: Optional[int]):
    """Run many automatic tournaments and report score and result distributions"""
    stats = defaultdict(list)
    results = Counter()
    champions = Counter()
    if seed is None:
        seed = random.randrange(1_000_000_000)
    logger.info("Benchmark base seed: %d", seed)

    for i in track(range(tournaments), description="Simulating..."):
        tournament = TeamGenerator.create_tournament(seed=seed + i)
        tournament.run_all()
        for match in tournament.matches:
            for innings in (match.innings1, match.innings2):
                stats["scores"].append(innings.total_runs)
                stats["wickets"].append(innings.wickets)
                stats["balls"].append(innings.total_balls)
            results[match.result] += 1
        champions[tournament.champion().name] += 1

    if not stats["scores"]:
        console.print("[red]No tournaments simulated.[/red]")
        return

    console.print(Panel("[bold]Simulation Statistics[/bold]"))
    scores = stats["scores"]
    console.print(f"[cyan]Average Score:[/cyan] {sum(scores) / len(scores):.1f}")
    console.print(f"[cyan]Min Score:[/cyan] {min(scores)}")
    console.print(f"[cyan]Max Score:[/cyan] {max(scores)}")
    wickets = stats["wickets"]
    console.print(f"[cyan]Average Wickets:[/cyan] {sum(wickets) / len(wickets):.2f}")
    balls = stats["balls"]
    console.print(f"[cyan]Average Innings Length:[/cyan] {sum(balls) / len(balls):.1f} balls")

    total_matches = sum(results.values())
    console.print("\n[bold]Results (team batting first):[/bold]")
    for result in (MatchResult.WIN, MatchResult.LOSS, MatchResult.TIE):
        pct = results[result] / total_matches * 100
        bar = "█" * int(pct / 2)
        console.print(f"  {result.value:>8}: {bar} {pct:.1f}%")

    console.print("\n[bold]Titles:[/bold]")
    for team_name, count in champions.most_common():
        console.print(f"  {team_name}: {count}")


if __name__ == "__main__":
    cli()

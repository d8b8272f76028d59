"""
Tournament Engine - Handles fixtures, points table and awards
"""
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

from mini_ipl.config import settings
from mini_ipl.errors import ConfigurationError, ResultNotAvailable
from mini_ipl.models.player import Player
from mini_ipl.models.team import Team
from mini_ipl.engine.innings import Innings, MatchRules, BallEvent
from mini_ipl.engine.match_engine import Match, MatchSummary, InningsSelection
from mini_ipl.engine.outcomes import OutcomeSource, RandomOutcomeSource

logger = logging.getLogger(__name__)

# Called before each innings; a None return leaves the current selections in place
InningsSelector = Callable[[Match, int, Innings], Optional[InningsSelection]]


@dataclass
class Standing:
    """Team standing in the points table"""
    position: int
    team: Team
    played: int
    won: int
    lost: int
    tied: int
    points: int
    win_percentage: float


@dataclass
class PlayerStatsRow:
    """Tournament totals for one player"""
    player: Player
    team: str
    runs: int
    balls_faced: int
    strike_rate: float
    wickets: int
    balls_bowled: int
    runs_conceded: int
    economy: float
    credits: int


class Tournament:
    """
    Round-robin tournament: every team plays every other team once.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        outcome_source: Optional[OutcomeSource] = None,
        rules: Optional[MatchRules] = None,
        start_date: Optional[date] = None,
        on_ball: Optional[Callable[[BallEvent], None]] = None,
    ):
        self.name = name or settings.TOURNAMENT_NAME
        self.outcome_source = outcome_source or RandomOutcomeSource(settings.RANDOM_SEED)
        self.rules = rules or MatchRules()
        self.start_date = start_date or date.today()
        self.on_ball = on_ball

        self.teams: list[Team] = []
        self.matches: list[Match] = []
        self.players: dict[int, Player] = {}
        self._player_teams: dict[int, Team] = {}
        self.current_round = 0
        self.is_completed = False

    # Setup

    def _ensure_setup_open(self) -> None:
        if self.matches:
            raise ConfigurationError("Fixtures already generated; teams and rosters are fixed")

    def add_team(self, team: Team) -> Team:
        self._ensure_setup_open()
        if any(t.name == team.name for t in self.teams):
            raise ConfigurationError(f"Team {team.name} is already in the tournament")
        self.teams.append(team)
        for player in team.roster:
            self._register(team, player)
        return team

    def register_player(self, team: Team, player: Player) -> Player:
        """Add a player to a team's roster and to the tournament registry"""
        self._ensure_setup_open()
        if team not in self.teams:
            raise ConfigurationError(f"Team {team.name} is not in the tournament")
        team.add_player(player)
        self._register(team, player)
        return player

    def _register(self, team: Team, player: Player) -> None:
        player.id = len(self.players) + 1
        self.players[player.id] = player
        self._player_teams[player.id] = team

    def team_of(self, player: Player) -> Team:
        return self._player_teams[player.id]

    def get_player(self, player_id: int) -> Optional[Player]:
        return self.players.get(player_id)

    def generate_fixtures(self) -> list[Match]:
        """
        Select every lineup, then create one match per pair of teams.
        For 4 teams: 4 * 3 / 2 = 6 matches.
        """
        self._ensure_setup_open()
        if len(self.teams) < 2:
            raise ConfigurationError(f"Need at least 2 teams, got {len(self.teams)}")

        for team in self.teams:
            team.select_lineup()

        match_number = 1
        for i, team1 in enumerate(self.teams):
            for team2 in self.teams[i + 1:]:
                match = Match(
                    team1,
                    team2,
                    match_number=match_number,
                    venue=team1.city,
                    match_date=self.start_date + timedelta(days=match_number - 1),
                    outcome_source=self.outcome_source,
                    rules=self.rules,
                    on_ball=self.on_ball,
                )
                self.matches.append(match)
                match_number += 1

        logger.info("%s: %d fixtures generated for %d teams", self.name, len(self.matches), len(self.teams))
        return self.matches

    # Progression

    def get_next_match(self) -> Optional[Match]:
        if self.current_round < len(self.matches):
            return self.matches[self.current_round]
        return None

    def play_round(self, selector: Optional[InningsSelector] = None) -> Optional[Match]:
        """Play the next fixture. Returns None when nothing is left to play."""
        match = self.get_next_match()
        if match is None:
            return None

        if selector is not None:
            try:
                for number in (1, 2):
                    selection = selector(match, number, match.innings(number))
                    if selection is not None:
                        match.setup_innings(number, selection.striker, selection.non_striker, selection.bowler)
            except ConfigurationError:
                # Both innings go back to their defaults
                match.innings1.reset_selections()
                match.innings2.reset_selections()
                raise

        match.execute()
        self.current_round += 1

        if self.current_round == len(self.matches):
            self.is_completed = True
            logger.info("%s complete; champion: %s", self.name, self.champion().name)
        return match

    def run_all(self, selector: Optional[InningsSelector] = None) -> list[Match]:
        if not self.matches:
            self.generate_fixtures()
        while self.get_next_match() is not None:
            self.play_round(selector)
        return self.matches

    # Views

    def points_table(self) -> list[Standing]:
        """Sorted by points; equal points keep the order teams were added"""
        ranked = sorted(self.teams, key=lambda t: t.points, reverse=True)
        return [
            Standing(
                position=pos,
                team=team,
                played=team.matches_played,
                won=team.wins,
                lost=team.losses,
                tied=team.ties,
                points=team.points,
                win_percentage=team.win_percentage,
            )
            for pos, team in enumerate(ranked, 1)
        ]

    def champion(self) -> Team:
        if not self.is_completed:
            raise ResultNotAvailable(f"{self.name} is not complete")
        return self.points_table()[0].team

    def tournament_mvp(self) -> Player:
        if not self.is_completed:
            raise ResultNotAvailable(f"{self.name} is not complete")
        best = None
        best_credits = -1
        for player in self.players.values():
            if player.total_credits > best_credits:
                best = player
                best_credits = player.total_credits
        if best is None:
            raise ResultNotAvailable(f"{self.name} has no players")
        return best

    def player_stats(self) -> list[PlayerStatsRow]:
        return [
            PlayerStatsRow(
                player=player,
                team=self.team_of(player).name,
                runs=player.total_runs,
                balls_faced=player.total_balls_faced,
                strike_rate=player.strike_rate,
                wickets=player.total_wickets,
                balls_bowled=player.total_balls_bowled,
                runs_conceded=player.total_runs_conceded,
                economy=player.economy,
                credits=player.total_credits,
            )
            for player in self.players.values()
        ]

    def match_summaries(self) -> list[MatchSummary]:
        return [m.summary() for m in self.matches if m.is_complete]

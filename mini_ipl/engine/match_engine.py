"""
Match Engine - two innings, a result and a player of the match
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from mini_ipl.errors import LeagueError, ResultNotAvailable
from mini_ipl.models.player import Player
from mini_ipl.models.team import Team, MatchResult
from mini_ipl.engine.innings import Innings, MatchRules, BallEvent
from mini_ipl.engine.outcomes import OutcomeSource

logger = logging.getLogger(__name__)


@dataclass
class InningsSelection:
    """Named openers and opening bowler for one innings"""
    striker: str
    non_striker: str
    bowler: str


@dataclass
class MatchSummary:
    """Read-only view of a played match"""
    match_number: int
    team1: str
    team2: str
    innings1_score: str
    innings2_score: str
    result: MatchResult
    winner: Optional[str]
    margin: str
    player_of_match: str
    venue: str
    match_date: date


class Match:
    """
    A fixture between two teams. Team 1 always bats first.
    """

    def __init__(
        self,
        team1: Team,
        team2: Team,
        match_number: int = 1,
        venue: str = "",
        match_date: Optional[date] = None,
        outcome_source: Optional[OutcomeSource] = None,
        rules: Optional[MatchRules] = None,
        on_ball: Optional[Callable[[BallEvent], None]] = None,
    ):
        self.team1 = team1
        self.team2 = team2
        self.match_number = match_number
        self.venue = venue or team1.city
        self.match_date = match_date or date.today()
        self.rules = rules or MatchRules()

        self.innings1 = Innings(team1, team2, outcome_source, self.rules, on_ball)
        self.innings2 = Innings(team2, team1, outcome_source, self.rules, on_ball)

        self.result: Optional[MatchResult] = None
        self.player_of_match: Optional[Player] = None
        self.innings1_standout: Optional[Player] = None
        self.innings2_standout: Optional[Player] = None

    @property
    def is_complete(self) -> bool:
        return self.result is not None

    def innings(self, number: int) -> Innings:
        if number == 1:
            return self.innings1
        if number == 2:
            return self.innings2
        raise ValueError(f"A match has two innings, got {number}")

    def setup_innings(self, number: int, striker: str, non_striker: str, bowler: str) -> None:
        innings = self.innings(number)
        innings.set_batters(striker, non_striker)
        innings.set_bowler(bowler)

    def execute(self) -> MatchResult:
        """Play both innings in order and record the result on both teams"""
        if self.is_complete:
            raise LeagueError(f"Match {self.match_number} has already been played")

        for player in self.team1.lineup + self.team2.lineup:
            player.reset_match_state()

        logger.info("Match %d: %s vs %s at %s", self.match_number, self.team1.name, self.team2.name, self.venue)
        self.innings1.play()
        self.innings2.play()

        self._determine_result()
        self.player_of_match = self._calculate_player_of_match()
        logger.info(
            "Match %d result: %s (player of the match: %s)",
            self.match_number, self.result_text, self.player_of_match.name,
        )
        return self.result

    def _determine_result(self) -> None:
        score1 = self.innings1.total_runs
        score2 = self.innings2.total_runs

        if score1 > score2:
            self.result = MatchResult.WIN
            self.team1.add_points(self.rules.points_for_win)
        elif score2 > score1:
            self.result = MatchResult.LOSS
            self.team2.add_points(self.rules.points_for_win)
        else:
            self.result = MatchResult.TIE
            self.team1.add_points(self.rules.points_for_tie)
            self.team2.add_points(self.rules.points_for_tie)

        self.team1.record_match_outcome(self.result)
        self.team2.record_match_outcome(self.result.inverse)

    def _calculate_player_of_match(self) -> Player:
        # Match credits cover both innings, so standouts are taken once the match ends
        first = self.innings1_standout = self.innings1.standout_player()
        second = self.innings2_standout = self.innings2.standout_player()
        if second.match_credits > first.match_credits:
            return second
        return first

    @property
    def winner(self) -> Optional[Team]:
        if self.result == MatchResult.WIN:
            return self.team1
        if self.result == MatchResult.LOSS:
            return self.team2
        return None

    @property
    def margin(self) -> str:
        if not self.is_complete:
            return ""
        if self.result == MatchResult.TIE:
            return "Match tied!"
        if self.result == MatchResult.NO_RESULT:
            return "No result"
        return f"{abs(self.innings1.total_runs - self.innings2.total_runs)} runs"

    @property
    def result_text(self) -> str:
        winner = self.winner
        if winner is not None:
            return f"{winner.name} won by {self.margin}"
        return self.margin

    def summary(self) -> MatchSummary:
        if not self.is_complete:
            raise ResultNotAvailable(f"Match {self.match_number} has not been played")
        winner = self.winner
        return MatchSummary(
            match_number=self.match_number,
            team1=self.team1.name,
            team2=self.team2.name,
            innings1_score=self.innings1.score_line,
            innings2_score=self.innings2.score_line,
            result=self.result,
            winner=winner.name if winner else None,
            margin=self.margin,
            player_of_match=self.player_of_match.name,
            venue=self.venue,
            match_date=self.match_date,
        )

    def __repr__(self):
        return f"<Match {self.match_number}: {self.team1.name} vs {self.team2.name}>"

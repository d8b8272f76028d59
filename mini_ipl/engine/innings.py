"""
Innings Engine - ball-by-ball state machine for one team's batting effort
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional
import enum

from mini_ipl.config import settings
from mini_ipl.errors import ConfigurationError, ResultNotAvailable
from mini_ipl.models.player import Player
from mini_ipl.models.team import Team
from mini_ipl.engine.outcomes import BallOutcome, OutcomeSource, RandomOutcomeSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchRules:
    """Limits shared by every innings of a tournament"""
    overs_per_innings: int = field(default_factory=lambda: settings.OVERS_PER_INNINGS)
    wickets_per_innings: int = field(default_factory=lambda: settings.WICKETS_PER_INNINGS)
    balls_per_over: int = field(default_factory=lambda: settings.BALLS_PER_OVER)
    points_for_win: int = field(default_factory=lambda: settings.POINTS_FOR_WIN)
    points_for_tie: int = field(default_factory=lambda: settings.POINTS_FOR_TIE)


class InningsStatus(enum.Enum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@dataclass
class BallEvent:
    """Commentary record for a single ball"""
    ball_number: int
    over: int
    ball_in_over: int
    outcome: BallOutcome
    runs: int
    striker: str
    bowler: str
    score_line: str

    @property
    def is_wicket(self) -> bool:
        return self.outcome.is_wicket


class Innings:
    """
    One team batting against another.

    Only batting-capable lineup players appear in the batting order and only
    bowling-capable ones in the bowling order, so every event is role legal.
    The two batter slots hold batting-order indices; slot 0 is on strike.
    """

    def __init__(
        self,
        batting_team: Team,
        bowling_team: Team,
        outcome_source: Optional[OutcomeSource] = None,
        rules: Optional[MatchRules] = None,
        on_ball: Optional[Callable[[BallEvent], None]] = None,
    ):
        self.batting_team = batting_team
        self.bowling_team = bowling_team
        self.outcome_source = outcome_source or RandomOutcomeSource()
        self.rules = rules or MatchRules()
        self.on_ball = on_ball

        self.batting_order: list[Player] = batting_team.batting_lineup
        self.bowling_order: list[Player] = bowling_team.bowling_lineup
        if len(self.batting_order) < 2:
            raise ConfigurationError(
                f"{batting_team.name} needs at least 2 batters in its lineup, got {len(self.batting_order)}"
            )
        if len(self.bowling_order) < 2:
            raise ConfigurationError(
                f"{bowling_team.name} needs at least 2 bowlers in its lineup, got {len(self.bowling_order)}"
            )

        # Rotation state
        self.striker_index = 0
        self.non_striker_index = 1
        self.bowler_index = 0
        self.previous_bowler_index: Optional[int] = None
        self.bowlers_by_over: list[int] = [0]

        # Counters
        self.total_runs = 0
        self.wickets = 0
        self.overs = 0
        self.balls = 0  # within the current over
        self.total_balls = 0

        self.events: list[BallEvent] = []

    # Setup

    def _ensure_not_started(self) -> None:
        if self.total_balls > 0:
            raise ConfigurationError("Innings already started; selections are fixed")

    @staticmethod
    def _index_of(order: list[Player], name: str, what: str) -> int:
        for i, player in enumerate(order):
            if player.name == name:
                return i
        raise ConfigurationError(f"{name!r} is not a valid {what}")

    def set_batters(self, striker: str, non_striker: str) -> None:
        self._ensure_not_started()
        if striker == non_striker:
            raise ConfigurationError("Striker and non-striker must be different players")
        striker_index = self._index_of(self.batting_order, striker, f"batter for {self.batting_team.name}")
        non_striker_index = self._index_of(self.batting_order, non_striker, f"batter for {self.batting_team.name}")
        self.striker_index = striker_index
        self.non_striker_index = non_striker_index

    def set_bowler(self, bowler: str) -> None:
        self._ensure_not_started()
        self.bowler_index = self._index_of(self.bowling_order, bowler, f"bowler for {self.bowling_team.name}")
        self.bowlers_by_over = [self.bowler_index]

    def reset_selections(self) -> None:
        """Back to the default openers and opening bowler"""
        self._ensure_not_started()
        self.striker_index = 0
        self.non_striker_index = 1
        self.bowler_index = 0
        self.previous_bowler_index = None
        self.bowlers_by_over = [0]

    # State

    @property
    def striker(self) -> Player:
        return self.batting_order[self.striker_index]

    @property
    def non_striker(self) -> Player:
        return self.batting_order[self.non_striker_index]

    @property
    def current_bowler(self) -> Player:
        return self.bowling_order[self.bowler_index]

    @property
    def is_complete(self) -> bool:
        if self.wickets >= self.rules.wickets_per_innings:
            return True
        if self.overs >= self.rules.overs_per_innings:
            return True
        return False

    @property
    def status(self) -> InningsStatus:
        return InningsStatus.COMPLETE if self.is_complete else InningsStatus.IN_PROGRESS

    @property
    def overs_display(self) -> str:
        return f"{self.overs}.{self.balls}"

    @property
    def score_line(self) -> str:
        return f"{self.total_runs}/{self.wickets} ({self.overs_display})"

    @property
    def run_rate(self) -> float:
        if self.total_balls == 0:
            return 0.0
        return (self.total_runs / self.total_balls) * 6

    # Transitions

    def advance_one_ball(self) -> Optional[BallEvent]:
        """Bowl one ball. Returns the commentary event, or None once the innings is over."""
        if self.is_complete:
            return None

        striker = self.striker
        bowler = self.current_bowler
        outcome = self.outcome_source()

        striker.apply_ball_faced()

        if outcome.is_wicket:
            self.wickets += 1
            bowler.apply_wicket_taken()
            self._bring_in_next_batter()
        else:
            runs = outcome.runs
            self.total_runs += runs
            striker.apply_runs(runs)
            bowler.apply_runs_conceded(runs)
            if runs % 2 == 1:
                self._change_strike()

        self.total_balls += 1
        self.balls += 1
        bowler.apply_ball_bowled()

        ball_in_over = self.balls
        over = self.overs
        if self.balls == self.rules.balls_per_over:
            self.overs += 1
            self.balls = 0
            self._change_bowler()

        event = BallEvent(
            ball_number=self.total_balls,
            over=over,
            ball_in_over=ball_in_over,
            outcome=outcome,
            runs=outcome.runs,
            striker=striker.name,
            bowler=bowler.name,
            score_line=self.score_line,
        )
        self.events.append(event)
        logger.debug("%s ball %d: %s (%s)", self.batting_team.name, event.ball_number, outcome.name, event.score_line)
        if self.on_ball is not None:
            self.on_ball(event)

        if self.is_complete:
            logger.info("%s innings complete: %s", self.batting_team.name, self.score_line)
        return event

    def play(self) -> "Innings":
        """Bowl until the innings is over"""
        while not self.is_complete:
            self.advance_one_ball()
        return self

    def _change_strike(self) -> None:
        self.striker_index, self.non_striker_index = self.non_striker_index, self.striker_index

    def _bring_in_next_batter(self) -> None:
        # The slot holding the higher index is replaced by the next one in order.
        # Nobody is tracked as out, so with no batters left the pair stays in.
        next_index = max(self.striker_index, self.non_striker_index) + 1
        if next_index >= len(self.batting_order):
            return
        if self.striker_index > self.non_striker_index:
            self.striker_index = next_index
        else:
            self.non_striker_index = next_index

    def _change_bowler(self) -> None:
        self.previous_bowler_index = self.bowler_index
        count = len(self.bowling_order)
        next_index = self.bowler_index
        for _ in range(count):
            next_index = (next_index + 1) % count
            if next_index != self.previous_bowler_index:
                break
        self.bowler_index = next_index
        self.bowlers_by_over.append(next_index)

    # Results

    def standout_player(self) -> Player:
        if not self.is_complete:
            raise ResultNotAvailable(f"{self.batting_team.name} innings is still in progress")
        best = None
        best_credits = -1
        for player in self.batting_order + self.bowling_order:
            if player.match_credits > best_credits:
                best = player
                best_credits = player.match_credits
        if best is None:
            raise ResultNotAvailable("Innings has no players")
        return best

    def __repr__(self):
        return f"<Innings {self.batting_team.name}: {self.score_line}>"

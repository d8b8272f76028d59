from dataclasses import dataclass, field
from typing import Optional
import enum

from mini_ipl.errors import RoleViolation

RUNS_PER_CREDIT = 20


class PlayerRole(enum.Enum):
    BATSMAN = "batsman"
    BOWLER = "bowler"
    ALL_ROUNDER = "all_rounder"

    @property
    def can_bat(self) -> bool:
        return self in (PlayerRole.BATSMAN, PlayerRole.ALL_ROUNDER)

    @property
    def can_bowl(self) -> bool:
        return self in (PlayerRole.BOWLER, PlayerRole.ALL_ROUNDER)


@dataclass
class BattingFigures:
    """Runs and balls faced for one scope (a match or the whole tournament)"""
    runs: int = 0
    balls: int = 0
    fours: int = 0
    sixes: int = 0

    @property
    def strike_rate(self) -> float:
        if self.balls == 0:
            return 0.0
        return (self.runs / self.balls) * 100


@dataclass
class BowlingFigures:
    """Wickets, balls and runs conceded for one scope"""
    wickets: int = 0
    balls: int = 0
    runs_conceded: int = 0

    @property
    def overs_display(self) -> str:
        return f"{self.balls // 6}.{self.balls % 6}"

    @property
    def economy(self) -> float:
        if self.balls == 0:
            return 0.0
        return (self.runs_conceded / self.balls) * 6

    @property
    def average(self) -> float:
        if self.wickets == 0:
            return 0.0
        return self.runs_conceded / self.wickets


@dataclass
class BattingState:
    """Batting sub-state owned by batting-capable players"""
    match: BattingFigures = field(default_factory=BattingFigures)
    total: BattingFigures = field(default_factory=BattingFigures)


@dataclass
class BowlingState:
    """Bowling sub-state owned by bowling-capable players"""
    match: BowlingFigures = field(default_factory=BowlingFigures)
    total: BowlingFigures = field(default_factory=BowlingFigures)


@dataclass(eq=False)
class Player:
    """
    A tournament player.

    The role decides which sub-states exist: batsmen own a batting state,
    bowlers own a bowling state and all-rounders own both. Events are only
    accepted through the entry point matching a sub-state the player has.
    Credits are derived from the accumulated figures and cannot be set.
    """
    name: str
    age: int
    role: PlayerRole
    id: Optional[int] = None
    batting: Optional[BattingState] = field(default=None, init=False)
    bowling: Optional[BowlingState] = field(default=None, init=False)

    def __post_init__(self):
        if self.role.can_bat:
            self.batting = BattingState()
        if self.role.can_bowl:
            self.bowling = BowlingState()

    @property
    def can_bat(self) -> bool:
        return self.batting is not None

    @property
    def can_bowl(self) -> bool:
        return self.bowling is not None

    def _batting_state(self) -> BattingState:
        if self.batting is None:
            raise RoleViolation(f"{self.name} ({self.role.value}) cannot bat")
        return self.batting

    def _bowling_state(self) -> BowlingState:
        if self.bowling is None:
            raise RoleViolation(f"{self.name} ({self.role.value}) cannot bowl")
        return self.bowling

    # Batting events

    def apply_runs(self, runs: int) -> None:
        state = self._batting_state()
        for figures in (state.match, state.total):
            figures.runs += runs
            if runs == 4:
                figures.fours += 1
            elif runs == 6:
                figures.sixes += 1

    def apply_ball_faced(self) -> None:
        state = self._batting_state()
        state.match.balls += 1
        state.total.balls += 1

    # Bowling events

    def apply_wicket_taken(self) -> None:
        state = self._bowling_state()
        state.match.wickets += 1
        state.total.wickets += 1

    def apply_runs_conceded(self, runs: int) -> None:
        state = self._bowling_state()
        state.match.runs_conceded += runs
        state.total.runs_conceded += runs

    def apply_ball_bowled(self) -> None:
        state = self._bowling_state()
        state.match.balls += 1
        state.total.balls += 1

    def reset_match_state(self) -> None:
        """Zero the match-scoped figures, leaving tournament totals alone"""
        if self.batting is not None:
            self.batting.match = BattingFigures()
        if self.bowling is not None:
            self.bowling.match = BowlingFigures()

    # Credits

    def _credits(self, batting: Optional[BattingFigures], bowling: Optional[BowlingFigures]) -> int:
        if self.role == PlayerRole.BATSMAN:
            return batting.runs // RUNS_PER_CREDIT
        if self.role == PlayerRole.BOWLER:
            return bowling.wickets
        return batting.runs // RUNS_PER_CREDIT + bowling.wickets

    @property
    def match_credits(self) -> int:
        return self._credits(
            self.batting.match if self.batting else None,
            self.bowling.match if self.bowling else None,
        )

    @property
    def total_credits(self) -> int:
        return self._credits(
            self.batting.total if self.batting else None,
            self.bowling.total if self.bowling else None,
        )

    # Read-only views over tournament totals (zero for the missing side)

    @property
    def total_runs(self) -> int:
        return self.batting.total.runs if self.batting else 0

    @property
    def total_balls_faced(self) -> int:
        return self.batting.total.balls if self.batting else 0

    @property
    def total_wickets(self) -> int:
        return self.bowling.total.wickets if self.bowling else 0

    @property
    def total_balls_bowled(self) -> int:
        return self.bowling.total.balls if self.bowling else 0

    @property
    def total_runs_conceded(self) -> int:
        return self.bowling.total.runs_conceded if self.bowling else 0

    @property
    def strike_rate(self) -> float:
        return self.batting.total.strike_rate if self.batting else 0.0

    @property
    def economy(self) -> float:
        return self.bowling.total.economy if self.bowling else 0.0

    @property
    def bowling_average(self) -> float:
        return self.bowling.total.average if self.bowling else 0.0

    def __repr__(self):
        return f"<Player {self.name} ({self.role.value}) - CR: {self.total_credits}>"

from dataclasses import dataclass, field
from typing import Optional
import enum

from mini_ipl.errors import ConfigurationError
from mini_ipl.models.player import Player
from mini_ipl.validators.lineup_validator import LineupValidator


class MatchResult(enum.Enum):
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"
    NO_RESULT = "no_result"

    @property
    def inverse(self) -> "MatchResult":
        if self == MatchResult.WIN:
            return MatchResult.LOSS
        if self == MatchResult.LOSS:
            return MatchResult.WIN
        return self


@dataclass(eq=False)
class Team:
    name: str
    city: str
    roster: list[Player] = field(default_factory=list)
    lineup: list[Player] = field(default_factory=list)

    # Tournament record
    points: int = 0
    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    no_results: int = 0

    def add_player(self, player: Player) -> None:
        if self.lineup:
            raise ConfigurationError(f"{self.name}: roster is fixed once the lineup is selected")
        if any(p.name == player.name for p in self.roster):
            raise ConfigurationError(f"{self.name} already has a player named {player.name}")
        self.roster.append(player)

    def select_lineup(self) -> list[Player]:
        """Every roster player plays; the lineup must have enough batting and bowling options"""
        result = LineupValidator.validate(self.roster)
        if not result["valid"]:
            raise ConfigurationError(f"{self.name}: " + "; ".join(result["errors"]))
        self.lineup = list(self.roster)
        return self.lineup

    @property
    def batting_lineup(self) -> list[Player]:
        return [p for p in self.lineup if p.can_bat]

    @property
    def bowling_lineup(self) -> list[Player]:
        return [p for p in self.lineup if p.can_bowl]

    def find_player(self, name: str) -> Optional[Player]:
        return next((p for p in self.lineup if p.name == name), None)

    def add_points(self, points: int) -> None:
        self.points += points

    def record_match_outcome(self, result: MatchResult) -> None:
        self.matches_played += 1
        if result == MatchResult.WIN:
            self.wins += 1
        elif result == MatchResult.LOSS:
            self.losses += 1
        elif result == MatchResult.TIE:
            self.ties += 1
        else:
            self.no_results += 1

    @property
    def win_percentage(self) -> float:
        if self.matches_played == 0:
            return 0.0
        return (self.wins / self.matches_played) * 100

    @property
    def squad_size(self) -> int:
        return len(self.roster)

    def __repr__(self):
        return f"<Team {self.name} ({self.city})>"

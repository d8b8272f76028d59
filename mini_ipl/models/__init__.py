from mini_ipl.models.player import Player, PlayerRole, BattingFigures, BowlingFigures
from mini_ipl.models.team import Team, MatchResult

__all__ = [
    "Player",
    "PlayerRole",
    "BattingFigures",
    "BowlingFigures",
    "Team",
    "MatchResult",
]

from mini_ipl.engine.outcomes import BallOutcome, RandomOutcomeSource, SequenceOutcomeSource
from mini_ipl.engine.innings import Innings, MatchRules, BallEvent
from mini_ipl.engine.match_engine import Match, MatchSummary, InningsSelection
from mini_ipl.engine.tournament_engine import Tournament, Standing, PlayerStatsRow

__all__ = [
    "BallOutcome",
    "RandomOutcomeSource",
    "SequenceOutcomeSource",
    "Innings",
    "MatchRules",
    "BallEvent",
    "Match",
    "MatchSummary",
    "InningsSelection",
    "Tournament",
    "Standing",
    "PlayerStatsRow",
]

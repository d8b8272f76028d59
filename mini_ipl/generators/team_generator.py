"""
Team Generator - Creates the franchise teams for a tournament
"""
from datetime import date
from typing import Callable, Optional

from mini_ipl.config import settings
from mini_ipl.models.team import Team
from mini_ipl.engine.innings import MatchRules, BallEvent
from mini_ipl.engine.outcomes import OutcomeSource, RandomOutcomeSource
from mini_ipl.engine.tournament_engine import Tournament
from mini_ipl.generators.player_generator import PlayerGenerator


FRANCHISE_TEAMS = [
    {"name": "Mumbai Indians", "city": "Mumbai"},
    {"name": "Chennai Super Kings", "city": "Chennai"},
    {"name": "Royal Challengers", "city": "Bangalore"},
    {"name": "Kolkata Knight Riders", "city": "Kolkata"},
]


class TeamGenerator:
    """Generates the franchise teams and, optionally, their squads"""

    @classmethod
    def create_teams(cls) -> list[Team]:
        """Create the franchise teams with empty rosters"""
        return [Team(name=t["name"], city=t["city"]) for t in FRANCHISE_TEAMS]

    @classmethod
    def get_team_choices(cls) -> list[dict]:
        return [
            {"index": i, "name": t["name"], "city": t["city"]}
            for i, t in enumerate(FRANCHISE_TEAMS)
        ]

    @classmethod
    def create_tournament(
        cls,
        name: Optional[str] = None,
        seed: Optional[int] = None,
        squad_size: Optional[int] = None,
        outcome_source: Optional[OutcomeSource] = None,
        rules: Optional[MatchRules] = None,
        start_date: Optional[date] = None,
        on_ball: Optional[Callable[[BallEvent], None]] = None,
    ) -> Tournament:
        """
        Create a tournament with generated squads for every franchise.
        The same seed gives the same squads and, without an explicit
        outcome source, the same ball-by-ball results.
        """
        if seed is None:
            seed = settings.RANDOM_SEED
        tournament = Tournament(
            name=name,
            outcome_source=outcome_source or RandomOutcomeSource(seed),
            rules=rules,
            start_date=start_date,
            on_ball=on_ball,
        )
        generator = PlayerGenerator(seed=seed)
        for team in cls.create_teams():
            tournament.add_team(team)
            for player in generator.generate_squad(squad_size or settings.SQUAD_SIZE):
                tournament.register_player(team, player)
        return tournament

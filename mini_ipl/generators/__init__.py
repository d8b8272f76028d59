from mini_ipl.generators.player_generator import PlayerGenerator
from mini_ipl.generators.team_generator import TeamGenerator, FRANCHISE_TEAMS

__all__ = ["PlayerGenerator", "TeamGenerator", "FRANCHISE_TEAMS"]

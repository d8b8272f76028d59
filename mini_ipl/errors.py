"""
Error types raised by the tournament core
"""


class LeagueError(Exception):
    """Base class for every error raised by the simulation core"""


class ConfigurationError(LeagueError, ValueError):
    """Setup input cannot be used: bad lineup, unknown player name, duplicate entries"""


class RoleViolation(LeagueError, TypeError):
    """A batting event was applied to a non-batter (or a bowling event to a non-bowler)"""


class ResultNotAvailable(LeagueError):
    """A result view was requested before the innings, match or tournament completed"""

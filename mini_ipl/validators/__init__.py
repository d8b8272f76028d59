from mini_ipl.validators.lineup_validator import LineupValidator

__all__ = ["LineupValidator"]

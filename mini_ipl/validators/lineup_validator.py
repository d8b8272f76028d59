MIN_BATTING_OPTIONS = 2
MIN_BOWLING_OPTIONS = 2


class LineupValidator:
    @staticmethod
    def validate(players: list) -> dict:
        """
        Validate a team lineup.

        Rules:
        1. At least 2 players who can bat (batsmen + all-rounders)
        2. At least 2 players who can bowl (bowlers + all-rounders)
        3. No two players share a name
        """
        errors = []

        batting_count = sum(1 for p in players if p.can_bat)
        bowling_count = sum(1 for p in players if p.can_bowl)

        if batting_count < MIN_BATTING_OPTIONS:
            errors.append(f"Need at least {MIN_BATTING_OPTIONS} players who can bat, got {batting_count}")
        if bowling_count < MIN_BOWLING_OPTIONS:
            errors.append(f"Need at least {MIN_BOWLING_OPTIONS} players who can bowl, got {bowling_count}")

        names = [p.name for p in players]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            errors.append(f"Duplicate player names: {', '.join(duplicates)}")

        return {
            "valid": len(errors) == 0,
            "errors": errors,
            "breakdown": {
                "batting_options": batting_count,
                "bowling_options": bowling_count,
                "players": len(players),
            }
        }

"""
Tests for the command line interface.
"""
from itertools import combinations

from click.testing import CliRunner

from cli import cli, describe_ball
from mini_ipl.engine.innings import BallEvent
from mini_ipl.config import settings
from mini_ipl.engine.outcomes import BallOutcome
from mini_ipl.generators import TeamGenerator


def interactive_input() -> str:
    """Answers for a full interactive tournament with squads T<t>P<i>"""
    lines = []
    roles = ["1", "1", "3", "2", "2"]
    for t in range(4):
        for i, role in enumerate(roles):
            lines += [f"T{t}P{i}", "25", role]

    for first, second in combinations(range(4), 2):
        for batting, bowling in ((first, second), (second, first)):
            lines += [f"T{batting}P1", f"T{batting}P0", f"T{bowling}P3"]

    # An unknown striker is re-prompted before the first valid answer
    first_selection = lines.index("T0P1", 60)
    lines[first_selection:first_selection] = ["Nobody", "T0P0"]
    return "\n".join(lines) + "\n"


class TestCommentary:
    def test_describe_wicket(self):
        event = BallEvent(1, 0, 1, BallOutcome.WICKET, 0, "Rohit", "Bumrah", "0/1 (0.1)")
        assert "WICKET!" in describe_ball(event)
        assert "Bumrah" in describe_ball(event)

    def test_describe_six(self):
        event = BallEvent(2, 0, 2, BallOutcome.SIX, 6, "Rohit", "Bumrah", "6/1 (0.2)")
        assert "SIX!" in describe_ball(event)


class TestPlayCommand:
    def test_auto_tournament(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--log-level", "WARNING", "play", "--auto", "--seed", "3"])
        assert result.exit_code == 0, result.output
        assert "Ball 1:" in result.output
        assert "Final Points Table" in result.output
        assert "Champion:" in result.output
        assert "Player of the Tournament" in result.output

    def test_interactive_tournament(self):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["--log-level", "WARNING", "play", "--seed", "4", "--no-commentary"],
            input=interactive_input(),
        )
        assert result.exit_code == 0, result.output
        assert "is not a valid batter" in result.output
        assert "Match 6 Summary" in result.output
        assert "Champion:" in result.output

    def test_invalid_squad_is_re_entered(self):
        lines = []
        # First attempt: five batsmen; second attempt: a valid squad
        lines += [x for i in range(5) for x in (f"Bad{i}", "25", "1")]
        roles = ["1", "1", "3", "2", "2"]
        for t in range(4):
            lines += [x for i, role in enumerate(roles) for x in (f"T{t}P{i}", "25", role)]
        for first, second in combinations(range(4), 2):
            for batting, bowling in ((first, second), (second, first)):
                lines += [f"T{batting}P0", f"T{batting}P1", f"T{bowling}P2"]

        result = CliRunner().invoke(
            cli,
            ["--log-level", "WARNING", "play", "--no-commentary"],
            input="\n".join(lines) + "\n",
        )
        assert result.exit_code == 0, result.output
        assert "Please enter the squad again." in result.output


class TestOtherCommands:
    def test_fixtures(self):
        result = CliRunner().invoke(cli, ["fixtures"])
        assert result.exit_code == 0, result.output
        assert "Mumbai" in result.output
        assert "Kolkata" in result.output

    def test_benchmark(self):
        result = CliRunner().invoke(cli, ["--log-level", "WARNING", "benchmark", "--tournaments", "3", "--seed", "1"])
        assert result.exit_code == 0, result.output
        assert "Average Score" in result.output
        assert "Titles" in result.output

    def test_benchmark_ignores_configured_seed(self, monkeypatch):
        seeds = []
        create_tournament = TeamGenerator.create_tournament

        def recording_create_tournament(seed=None, **kwargs):
            seeds.append(seed)
            return create_tournament(seed=seed, **kwargs)

        monkeypatch.setattr(settings, "RANDOM_SEED", 7)
        monkeypatch.setattr(TeamGenerator, "create_tournament", recording_create_tournament)
        result = CliRunner().invoke(cli, ["--log-level", "WARNING", "benchmark", "--tournaments", "3"])
        assert result.exit_code == 0, result.output
        assert len(seeds) == 3
        assert None not in seeds
        assert len(set(seeds)) == 3

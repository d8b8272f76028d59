"""
Tests for round-robin fixtures, progression, points table and awards.
"""
import pytest
from datetime import date
from itertools import combinations

from mini_ipl.errors import ConfigurationError, ResultNotAvailable
from mini_ipl.models.player import Player, PlayerRole
from mini_ipl.models.team import Team
from mini_ipl.engine.innings import MatchRules
from mini_ipl.engine.match_engine import InningsSelection
from mini_ipl.engine.outcomes import BallOutcome, SequenceOutcomeSource
from mini_ipl.engine.tournament_engine import Tournament
from mini_ipl.generators import TeamGenerator, PlayerGenerator
from mini_ipl.validators import LineupValidator

RULES = MatchRules(
    overs_per_innings=2,
    wickets_per_innings=2,
    balls_per_over=6,
    points_for_win=2,
    points_for_tie=1,
)

STANDARD_ROLES = [
    PlayerRole.BATSMAN,
    PlayerRole.BATSMAN,
    PlayerRole.ALL_ROUNDER,
    PlayerRole.BOWLER,
    PlayerRole.BOWLER,
]


def create_tournament(team_count: int = 4, outcome_source=None, roles=STANDARD_ROLES) -> Tournament:
    tournament = Tournament(
        name="Test Cup",
        outcome_source=outcome_source or SequenceOutcomeSource([], fallback=BallOutcome.FOUR),
        rules=RULES,
        start_date=date(2024, 4, 1),
    )
    for t in range(team_count):
        team = tournament.add_team(Team(name=f"Team{t}", city=f"City{t}"))
        for i, role in enumerate(roles):
            tournament.register_player(team, Player(name=f"T{t}P{i}", age=25, role=role))
    return tournament


class TestFixtures:
    def test_four_teams_give_six_matches(self):
        tournament = create_tournament()
        matches = tournament.generate_fixtures()
        assert len(matches) == 6
        pairs = [(m.team1.name, m.team2.name) for m in matches]
        expected = [(f"Team{i}", f"Team{j}") for i, j in combinations(range(4), 2)]
        assert pairs == expected

    def test_every_pair_exactly_once(self):
        tournament = create_tournament(team_count=5)
        tournament.generate_fixtures()
        pairs = [frozenset((m.team1.name, m.team2.name)) for m in tournament.matches]
        assert len(pairs) == 10
        assert len(set(pairs)) == 10

    def test_fixture_metadata(self):
        tournament = create_tournament()
        tournament.generate_fixtures()
        first, last = tournament.matches[0], tournament.matches[-1]
        assert [m.match_number for m in tournament.matches] == [1, 2, 3, 4, 5, 6]
        assert first.venue == "City0"
        assert first.match_date == date(2024, 4, 1)
        assert last.match_date == date(2024, 4, 6)

    def test_fixtures_generated_once(self):
        tournament = create_tournament()
        tournament.generate_fixtures()
        with pytest.raises(ConfigurationError):
            tournament.generate_fixtures()

    def test_needs_two_teams(self):
        with pytest.raises(ConfigurationError):
            create_tournament(team_count=1).generate_fixtures()

    def test_invalid_lineup_blocks_fixtures(self):
        roles = [PlayerRole.BATSMAN] * 4 + [PlayerRole.BOWLER]
        with pytest.raises(ConfigurationError):
            create_tournament(roles=roles).generate_fixtures()

    def test_rosters_fixed_after_fixtures(self):
        tournament = create_tournament()
        tournament.generate_fixtures()
        with pytest.raises(ConfigurationError):
            tournament.register_player(tournament.teams[0], Player(name="Late", age=30, role=PlayerRole.BOWLER))


class TestRegistry:
    def test_players_get_stable_ids(self):
        tournament = create_tournament()
        assert list(tournament.players) == list(range(1, 21))
        player = tournament.get_player(6)
        assert player.name == "T1P0"
        assert tournament.team_of(player).name == "Team1"

    def test_team_with_existing_roster_is_registered(self):
        tournament = Tournament(name="Cup", rules=RULES)
        team = Team(name="Ready", city="Here")
        team.add_player(Player(name="One", age=20, role=PlayerRole.ALL_ROUNDER))
        tournament.add_team(team)
        assert tournament.get_player(1).name == "One"

    def test_duplicate_team_rejected(self):
        tournament = create_tournament(team_count=1)
        with pytest.raises(ConfigurationError):
            tournament.add_team(Team(name="Team0", city="Elsewhere"))


class TestProgression:
    def test_play_round_advances_cursor(self):
        tournament = create_tournament()
        tournament.generate_fixtures()
        match = tournament.play_round()
        assert match is tournament.matches[0]
        assert match.is_complete
        assert tournament.current_round == 1
        assert not tournament.is_completed
        assert len(tournament.match_summaries()) == 1

    def test_run_all_completes(self):
        tournament = create_tournament()
        tournament.run_all()
        assert tournament.is_completed
        assert tournament.current_round == 6
        assert all(m.is_complete for m in tournament.matches)
        assert all(t.matches_played == 3 for t in tournament.teams)
        assert tournament.play_round() is None

    def test_selector_is_applied(self):
        tournament = create_tournament()
        tournament.generate_fixtures()

        def selector(match, number, innings):
            batters = innings.batting_order
            return InningsSelection(
                striker=batters[1].name,
                non_striker=batters[0].name,
                bowler=innings.bowling_order[-1].name,
            )

        match = tournament.play_round(selector)
        assert match.innings1.events[0].striker == "T0P1"
        assert match.innings1.events[0].bowler == "T1P4"
        assert match.innings2.events[0].striker == "T1P1"
        assert match.innings2.events[0].bowler == "T0P4"

    def test_rejected_selection_leaves_defaults(self):
        tournament = create_tournament()
        tournament.generate_fixtures()

        def bad_second_innings(match, number, innings):
            if number == 1:
                return InningsSelection(striker="T0P2", non_striker="T0P1", bowler="T1P4")
            return InningsSelection(striker="Nobody", non_striker="T1P0", bowler="T0P3")

        with pytest.raises(ConfigurationError):
            tournament.play_round(bad_second_innings)
        assert tournament.current_round == 0

        match = tournament.play_round()
        assert match.innings1.events[0].striker == "T0P0"
        assert match.innings1.events[0].bowler == "T1P2"

    def test_total_points_match_fixture_count(self):
        tournament = TeamGenerator.create_tournament(seed=11, rules=RULES)
        tournament.run_all()
        assert sum(t.points for t in tournament.teams) == 2 * len(tournament.matches)


class TestStandingsAndAwards:
    def test_results_unavailable_before_completion(self):
        tournament = create_tournament()
        tournament.generate_fixtures()
        with pytest.raises(ResultNotAvailable):
            tournament.champion()
        with pytest.raises(ResultNotAvailable):
            tournament.tournament_mvp()

    def test_points_table_ties_keep_insertion_order(self):
        tournament = create_tournament()
        tournament.run_all()
        table = tournament.points_table()
        assert [s.team.name for s in table] == ["Team0", "Team1", "Team2", "Team3"]
        assert all(s.points == 3 and s.tied == 3 for s in table)
        assert tournament.champion().name == "Team0"

    def test_points_table_sorted_by_points(self):
        # Every first innings is all fours, every second innings two quick wickets
        script = ([BallOutcome.FOUR] * 12 + [BallOutcome.WICKET] * 2) * 6
        tournament = create_tournament(outcome_source=SequenceOutcomeSource(script))
        tournament.run_all()
        table = tournament.points_table()
        assert [(s.team.name, s.points) for s in table] == [
            ("Team0", 6), ("Team1", 4), ("Team2", 2), ("Team3", 0),
        ]
        assert table[0].win_percentage == pytest.approx(100.0)
        assert tournament.champion().name == "Team0"

    def test_mvp_first_maximum_wins(self):
        tournament = create_tournament()
        tournament.run_all()
        mvp = tournament.tournament_mvp()
        assert mvp.name == "T0P0"
        assert mvp.total_runs == 144
        assert mvp.total_credits == 7

    def test_player_stats(self):
        tournament = create_tournament()
        tournament.run_all()
        rows = tournament.player_stats()
        assert len(rows) == 20
        opener = rows[0]
        assert opener.team == "Team0"
        assert opener.runs == 144
        assert opener.balls_faced == 36
        assert opener.strike_rate == pytest.approx(400.0)


class TestGenerators:
    def test_generated_squad_is_valid(self):
        squad = PlayerGenerator(seed=1).generate_squad()
        roles = [p.role for p in squad]
        assert roles.count(PlayerRole.BATSMAN) == 2
        assert roles.count(PlayerRole.BOWLER) == 2
        assert roles.count(PlayerRole.ALL_ROUNDER) == 1
        assert len({p.name for p in squad}) == 5

    @pytest.mark.parametrize("size", range(2, 9))
    def test_squad_of_any_size_is_valid(self, size):
        squad = PlayerGenerator(seed=size).generate_squad(size)
        assert len(squad) == size
        assert LineupValidator.validate(squad)["valid"]

    def test_single_player_squad_rejected(self):
        with pytest.raises(ConfigurationError):
            PlayerGenerator(seed=1).generate_squad(1)

    def test_small_squads_play_a_tournament(self):
        tournament = TeamGenerator.create_tournament(seed=3, squad_size=3, rules=RULES)
        tournament.run_all()
        assert tournament.is_completed

    def test_generated_tournament(self):
        tournament = TeamGenerator.create_tournament(seed=5)
        assert [t.name for t in tournament.teams] == [
            "Mumbai Indians", "Chennai Super Kings", "Royal Challengers", "Kolkata Knight Riders",
        ]
        assert len(tournament.players) == 20

    def test_same_seed_same_tournament(self):
        first = TeamGenerator.create_tournament(seed=9, rules=RULES)
        second = TeamGenerator.create_tournament(seed=9, rules=RULES)
        first.run_all()
        second.run_all()
        assert [p.name for p in first.players.values()] == [p.name for p in second.players.values()]
        assert [(s.innings1_score, s.innings2_score, s.player_of_match) for s in first.match_summaries()] == \
            [(s.innings1_score, s.innings2_score, s.player_of_match) for s in second.match_summaries()]

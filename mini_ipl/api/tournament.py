"""
Tournament API endpoints - setup, rounds, standings, awards
"""
import itertools
from fastapi import APIRouter, HTTPException
from typing import Dict, List, Optional

from mini_ipl.errors import ConfigurationError, ResultNotAvailable
from mini_ipl.models.player import Player, PlayerRole
from mini_ipl.models.team import Team
from mini_ipl.engine.innings import Innings
from mini_ipl.engine.match_engine import Match, MatchSummary, InningsSelection
from mini_ipl.engine.outcomes import RandomOutcomeSource
from mini_ipl.engine.tournament_engine import Tournament
from mini_ipl.generators.team_generator import TeamGenerator
from mini_ipl.api.schemas import (
    TournamentCreate, TournamentResponse, TeamResponse, PlayerResponse, FixtureResponse,
    PlayRoundRequest, MatchSummaryResponse, MatchDetailResponse, InningsResponse,
    BallEventResponse, StandingResponse, PlayerStatsResponse, AwardsResponse,
)

router = APIRouter(prefix="/tournaments", tags=["Tournament"])

# In-memory store; tournaments live for the lifetime of the process
active_tournaments: Dict[int, Tournament] = {}
_tournament_ids = itertools.count(1)


def _get_tournament(tournament_id: int) -> Tournament:
    tournament = active_tournaments.get(tournament_id)
    if tournament is None:
        raise HTTPException(status_code=404, detail="Tournament not found")
    return tournament


def _get_match(tournament: Tournament, match_number: int) -> Match:
    if not 1 <= match_number <= len(tournament.matches):
        raise HTTPException(status_code=404, detail="Match not found")
    return tournament.matches[match_number - 1]


def _player_response(tournament: Tournament, player: Player) -> PlayerResponse:
    return PlayerResponse(
        id=player.id,
        name=player.name,
        age=player.age,
        role=player.role.value,
        team=tournament.team_of(player).name,
    )


def _tournament_response(tournament_id: int, tournament: Tournament) -> TournamentResponse:
    return TournamentResponse(
        id=tournament_id,
        name=tournament.name,
        current_round=tournament.current_round,
        total_matches=len(tournament.matches),
        is_completed=tournament.is_completed,
        teams=[
            TeamResponse(
                name=team.name,
                city=team.city,
                players=[_player_response(tournament, p) for p in team.roster],
            )
            for team in tournament.teams
        ],
        fixtures=[
            FixtureResponse(
                match_number=m.match_number,
                team1=m.team1.name,
                team2=m.team2.name,
                venue=m.venue,
                match_date=m.match_date,
                is_completed=m.is_complete,
            )
            for m in tournament.matches
        ],
    )


def _summary_response(summary: MatchSummary) -> MatchSummaryResponse:
    return MatchSummaryResponse(
        match_number=summary.match_number,
        team1=summary.team1,
        team2=summary.team2,
        innings1_score=summary.innings1_score,
        innings2_score=summary.innings2_score,
        result=summary.result.value,
        winner=summary.winner,
        margin=summary.margin,
        player_of_match=summary.player_of_match,
        venue=summary.venue,
        match_date=summary.match_date,
    )


def _innings_response(innings: Innings, standout: Optional[Player], include_balls: bool) -> InningsResponse:
    return InningsResponse(
        batting_team=innings.batting_team.name,
        bowling_team=innings.bowling_team.name,
        runs=innings.total_runs,
        wickets=innings.wickets,
        overs=innings.overs_display,
        run_rate=round(innings.run_rate, 2),
        standout_player=standout.name if standout else None,
        balls=[
            BallEventResponse(
                ball_number=e.ball_number,
                over=e.over,
                ball_in_over=e.ball_in_over,
                outcome=e.outcome.name.lower(),
                runs=e.runs,
                is_wicket=e.is_wicket,
                striker=e.striker,
                bowler=e.bowler,
                score_line=e.score_line,
            )
            for e in innings.events
        ] if include_balls else [],
    )


def _build_tournament(request: TournamentCreate) -> Tournament:
    if request.teams is None:
        return TeamGenerator.create_tournament(
            name=request.name,
            seed=request.seed,
            start_date=request.start_date,
        )

    tournament = Tournament(
        name=request.name,
        outcome_source=RandomOutcomeSource(request.seed),
        start_date=request.start_date,
    )
    for team_data in request.teams:
        team = tournament.add_team(Team(name=team_data.name, city=team_data.city))
        for player_data in team_data.players:
            tournament.register_player(
                team,
                Player(name=player_data.name, age=player_data.age, role=PlayerRole(player_data.role.value)),
            )
    return tournament


@router.post("", response_model=TournamentResponse, status_code=201)
def create_tournament(request: TournamentCreate):
    """Create a tournament and generate its round-robin fixtures"""
    try:
        tournament = _build_tournament(request)
        tournament.generate_fixtures()
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    tournament_id = next(_tournament_ids)
    active_tournaments[tournament_id] = tournament
    return _tournament_response(tournament_id, tournament)


@router.get("/{tournament_id}", response_model=TournamentResponse)
def get_tournament(tournament_id: int):
    return _tournament_response(tournament_id, _get_tournament(tournament_id))


@router.post("/{tournament_id}/rounds", response_model=MatchSummaryResponse)
def play_round(tournament_id: int, request: Optional[PlayRoundRequest] = None):
    """Play the next fixture, optionally with named openers and opening bowlers"""
    tournament = _get_tournament(tournament_id)
    if tournament.get_next_match() is None:
        raise HTTPException(status_code=400, detail="All matches have been played")

    selections = {}
    if request is not None:
        for number, selection in ((1, request.innings1), (2, request.innings2)):
            if selection is not None:
                selections[number] = InningsSelection(
                    striker=selection.striker,
                    non_striker=selection.non_striker,
                    bowler=selection.bowler,
                )

    try:
        match = tournament.play_round(lambda m, number, innings: selections.get(number))
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _summary_response(match.summary())


@router.post("/{tournament_id}/run", response_model=List[MatchSummaryResponse])
def run_tournament(tournament_id: int):
    """Play every remaining fixture with default selections"""
    tournament = _get_tournament(tournament_id)
    tournament.run_all()
    return [_summary_response(s) for s in tournament.match_summaries()]


@router.get("/{tournament_id}/matches", response_model=List[MatchSummaryResponse])
def list_matches(tournament_id: int):
    tournament = _get_tournament(tournament_id)
    return [_summary_response(s) for s in tournament.match_summaries()]


@router.get("/{tournament_id}/matches/{match_number}", response_model=MatchDetailResponse)
def get_match(tournament_id: int, match_number: int, commentary: bool = True):
    """Scorecard and ball-by-ball commentary for a played match"""
    tournament = _get_tournament(tournament_id)
    match = _get_match(tournament, match_number)
    try:
        summary = match.summary()
    except ResultNotAvailable as e:
        raise HTTPException(status_code=409, detail=str(e))
    return MatchDetailResponse(
        summary=_summary_response(summary),
        innings1=_innings_response(match.innings1, match.innings1_standout, commentary),
        innings2=_innings_response(match.innings2, match.innings2_standout, commentary),
    )


@router.get("/{tournament_id}/points-table", response_model=List[StandingResponse])
def get_points_table(tournament_id: int):
    tournament = _get_tournament(tournament_id)
    return [
        StandingResponse(
            position=s.position,
            team=s.team.name,
            played=s.played,
            won=s.won,
            lost=s.lost,
            tied=s.tied,
            points=s.points,
            win_percentage=round(s.win_percentage, 2),
        )
        for s in tournament.points_table()
    ]


@router.get("/{tournament_id}/players", response_model=List[PlayerStatsResponse])
def get_player_stats(tournament_id: int):
    tournament = _get_tournament(tournament_id)
    return [
        PlayerStatsResponse(
            id=row.player.id,
            name=row.player.name,
            team=row.team,
            role=row.player.role.value,
            runs=row.runs,
            balls_faced=row.balls_faced,
            strike_rate=round(row.strike_rate, 2),
            wickets=row.wickets,
            balls_bowled=row.balls_bowled,
            runs_conceded=row.runs_conceded,
            economy=round(row.economy, 2),
            credits=row.credits,
        )
        for row in tournament.player_stats()
    ]


@router.get("/{tournament_id}/awards", response_model=AwardsResponse)
def get_awards(tournament_id: int):
    tournament = _get_tournament(tournament_id)
    try:
        champion = tournament.champion()
        mvp = tournament.tournament_mvp()
    except ResultNotAvailable as e:
        raise HTTPException(status_code=409, detail=str(e))
    return AwardsResponse(
        champion=champion.name,
        champion_points=champion.points,
        player_of_tournament=mvp.name,
        player_of_tournament_credits=mvp.total_credits,
    )

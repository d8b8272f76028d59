"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from enum import Enum


# Enums
class PlayerRoleEnum(str, Enum):
    BATSMAN = "batsman"
    BOWLER = "bowler"
    ALL_ROUNDER = "all_rounder"


class MatchResultEnum(str, Enum):
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"
    NO_RESULT = "no_result"


# Setup Schemas
class PlayerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    age: int = Field(ge=10, le=60)
    role: PlayerRoleEnum


class TeamCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    city: str = Field(min_length=1, max_length=50)
    players: list[PlayerCreate]


class TournamentCreate(BaseModel):
    name: Optional[str] = None
    seed: Optional[int] = None
    start_date: Optional[date] = None
    # Omit to use the default franchises with generated squads
    teams: Optional[list[TeamCreate]] = None


class InningsSelectionRequest(BaseModel):
    striker: str
    non_striker: str
    bowler: str


class PlayRoundRequest(BaseModel):
    innings1: Optional[InningsSelectionRequest] = None
    innings2: Optional[InningsSelectionRequest] = None


# Response Schemas
class PlayerResponse(BaseModel):
    id: int
    name: str
    age: int
    role: str
    team: str


class TeamResponse(BaseModel):
    name: str
    city: str
    players: list[PlayerResponse]


class FixtureResponse(BaseModel):
    match_number: int
    team1: str
    team2: str
    venue: str
    match_date: date
    is_completed: bool


class TournamentResponse(BaseModel):
    id: int
    name: str
    current_round: int
    total_matches: int
    is_completed: bool
    teams: list[TeamResponse]
    fixtures: list[FixtureResponse]


class BallEventResponse(BaseModel):
    ball_number: int
    over: int
    ball_in_over: int
    outcome: str
    runs: int
    is_wicket: bool
    striker: str
    bowler: str
    score_line: str


class InningsResponse(BaseModel):
    batting_team: str
    bowling_team: str
    runs: int
    wickets: int
    overs: str
    run_rate: float
    standout_player: Optional[str] = None
    balls: list[BallEventResponse] = []


class MatchSummaryResponse(BaseModel):
    match_number: int
    team1: str
    team2: str
    innings1_score: str
    innings2_score: str
    result: MatchResultEnum
    winner: Optional[str] = None
    margin: str
    player_of_match: str
    venue: str
    match_date: date


class MatchDetailResponse(BaseModel):
    summary: MatchSummaryResponse
    innings1: InningsResponse
    innings2: InningsResponse


class StandingResponse(BaseModel):
    position: int
    team: str
    played: int
    won: int
    lost: int
    tied: int
    points: int
    win_percentage: float


class PlayerStatsResponse(BaseModel):
    id: int
    name: str
    team: str
    role: str
    runs: int
    balls_faced: int
    strike_rate: float
    wickets: int
    balls_bowled: int
    runs_conceded: int
    economy: float
    credits: int


class AwardsResponse(BaseModel):
    champion: str
    champion_points: int
    player_of_tournament: str
    player_of_tournament_credits: int

"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import CourtStatus, Gender, Hall, MatchResult

PlayerId = str
CourtId = str

MIN_LEVEL = 1
MAX_LEVEL = 18
SLOT_COUNT = 4


def _validate_level(value: Optional[int]) -> Optional[int]:
    if value is None:
        return value
    if not MIN_LEVEL <= value <= MAX_LEVEL:
        raise InvalidRequestError(f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {value}.")
    return value


# --- REQUEST MODELS ---
class CreateSessionRequest(BaseModel):
    court_names: list[str] = []


class SessionRequest(BaseModel):
    """Any request that only needs to identify the session (get, allocate, shuffle, clear, delete)."""

    session_id: UUID


class AddPlayerRequest(BaseModel):
    session_id: UUID
    name: str
    level: int
    gender: Optional[Gender] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: int) -> int:
        return _validate_level(value)


class UpdatePlayerRequest(BaseModel):
    session_id: UUID
    player_id: PlayerId
    name: Optional[str] = None
    level: Optional[int] = None
    gender: Optional[Gender] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: Optional[int]) -> Optional[int]:
        return _validate_level(value)


class PlayerActiveRequest(BaseModel):
    session_id: UUID
    player_id: PlayerId
    is_active: bool


class PlayerRequest(BaseModel):
    """Delete a player / send a player back to the waiting list."""

    session_id: UUID
    player_id: PlayerId


class AssignPlayerRequest(BaseModel):
    session_id: UUID
    court_id: CourtId
    player_id: PlayerId
    slot: int

    @field_validator("slot")
    @classmethod
    def validate_slot(cls, value: int) -> int:
        if not 0 <= value < SLOT_COUNT:
            raise InvalidRequestError(f"Slot must be between 0 and {SLOT_COUNT - 1}, got {value}.")
        return value


class AddCourtRequest(BaseModel):
    session_id: UUID
    name: str
    hall: Hall = Hall.A


class RenameCourtRequest(BaseModel):
    session_id: UUID
    court_id: CourtId
    name: str


class CourtRequest(BaseModel):
    """Start a match on / delete a court."""

    session_id: UUID
    court_id: CourtId


class FinishMatchRequest(BaseModel):
    session_id: UUID
    court_id: CourtId
    winner: Optional[MatchResult] = None


# --- RESPONSE MODELS ---
class PlayerResponse(BaseModel):
    id: PlayerId
    name: str
    is_active: bool
    level: int
    gender: Optional[Gender]
    played_count: int


class CourtResponse(BaseModel):
    id: CourtId
    name: str
    status: CourtStatus
    hall: Hall
    player_ids: list[Optional[PlayerId]]


class MatchResponse(BaseModel):
    court_name: str
    player_names: list[str]
    started_at: str
    result: Optional[MatchResult]


class RoundResponse(BaseModel):
    id: str
    number: int
    started_at: str
    matches: list[MatchResponse]


class SessionResponse(BaseModel):
    session_id: UUID
    players: list[PlayerResponse]
    courts: list[CourtResponse]
    rounds: list[RoundResponse]

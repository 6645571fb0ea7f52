"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# Type aliases to make the models easier to read
PlayerId = str
CourtId = str
PlayerName = str


@dataclass
class PlayerModel:
    id: PlayerId
    name: PlayerName
    is_active: bool
    level: int
    gender: Optional[str] = None


@dataclass
class CourtModel:
    """NOTE: player_ids is expected to hold exactly 4 entries, but the domain layer repairs it when it does not."""

    id: CourtId
    name: str
    status: str
    player_ids: list[Optional[PlayerId]]
    hall: str = "A"


@dataclass
class MatchModel:
    court_name: str
    player_names: list[PlayerName]
    started_at: datetime
    result: Optional[str] = None


@dataclass
class RoundModel:
    id: str
    number: int
    started_at: datetime
    matches: list[MatchModel] = field(default_factory=list)


@dataclass
class SessionModel:
    """Transport-safe representation of a club session (roster, courts, and match history)."""

    players: list[PlayerModel] = field(default_factory=list)
    courts: list[CourtModel] = field(default_factory=list)
    rounds: list[RoundModel] = field(default_factory=list)

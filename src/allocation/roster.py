"""Players and courts as the allocation domain sees them."""

from dataclasses import dataclass, field, replace
from typing import Optional, Self

from src.allocation.slots import CourtSlots
from src.core.exceptions import SessionStateError
from src.core.models import CourtModel, PlayerModel
from src.core.shared_types import CourtStatus, Gender, Hall


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    is_active: bool
    level: int
    gender: Optional[Gender] = None

    @classmethod
    def from_model(cls, model: PlayerModel) -> Self:
        if model.gender and model.gender not in Gender.__members__.values():
            raise SessionStateError(
                f"Invalid gender: {model.gender!r}. \nPick one from {','.join(Gender)}"
            )

        return cls(
            id=model.id,
            name=model.name,
            is_active=model.is_active,
            level=model.level,
            gender=Gender(model.gender) if model.gender else None,
        )

    def to_model(self) -> PlayerModel:
        return PlayerModel(
            id=self.id,
            name=self.name,
            is_active=self.is_active,
            level=self.level,
            gender=self.gender.value if self.gender else None,
        )


@dataclass(frozen=True)
class Court:
    id: str
    name: str
    status: CourtStatus = CourtStatus.ALLOCATING
    slots: CourtSlots = field(default_factory=CourtSlots.empty)
    hall: Hall = Hall.A

    @classmethod
    def from_model(cls, model: CourtModel) -> Self:
        # Validation
        if model.status not in CourtStatus.__members__.values():
            raise SessionStateError(
                f"Invalid court status: {model.status!r}. \nPick one from {','.join(CourtStatus)}"
            )
        if model.hall not in Hall.__members__.values():
            raise SessionStateError(
                f"Invalid hall: {model.hall!r}. \nPick one from {','.join(Hall)}"
            )

        return cls(
            id=model.id,
            name=model.name,
            status=CourtStatus(model.status),
            slots=CourtSlots.from_list(model.player_ids),
            hall=Hall(model.hall),
        )

    def to_model(self) -> CourtModel:
        return CourtModel(
            id=self.id,
            name=self.name,
            status=self.status.value,
            player_ids=self.slots.to_list(),
            hall=self.hall.value,
        )

    @property
    def is_locked(self) -> bool:
        """A court with a match in progress is never touched by (re)allocation."""
        return self.status == CourtStatus.PLAYING

    def with_slots(self, slots: CourtSlots) -> Self:
        return replace(self, slots=slots)

    def reset(self) -> Self:
        return replace(self, status=CourtStatus.ALLOCATING, slots=CourtSlots.empty())


def locked_player_ids(courts: list[Court]) -> set[str]:
    """Ids of everyone seated on a court that is currently playing."""
    return {pid for court in courts if court.is_locked for pid in court.slots.player_ids()}


def eligible_players(roster: list[Player], courts: list[Court]) -> list[Player]:
    """Active players that are not in the middle of a match. Roster order is kept."""
    locked = locked_player_ids(courts)
    return [player for player in roster if player.is_active and player.id not in locked]

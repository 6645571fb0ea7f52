"""
The four player slots of a court.

Slot position carries meaning: slots 0 and 1 form Team A, slots 2 and 3 form Team B.
(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

SLOTS_PER_COURT = 4

PlayerId = str


@dataclass(frozen=True)
class CourtSlots:
    slot0: Optional[PlayerId] = None
    slot1: Optional[PlayerId] = None
    slot2: Optional[PlayerId] = None
    slot3: Optional[PlayerId] = None

    @classmethod
    def empty(cls) -> CourtSlots:
        return cls()

    @classmethod
    def from_list(cls, player_ids: Iterable[Optional[PlayerId]]) -> CourtSlots:
        """
        Build from a list of (up to) 4 player ids.

        A list that does not hold exactly 4 entries is a corrupt court: it is reset to 4 empty slots
        rather than failing the whole session.
        """
        ids = [pid or None for pid in player_ids]
        if len(ids) != SLOTS_PER_COURT:
            logger.warning(
                "Malformed court slots %r (expected %d entries). Resetting to empty.",
                ids,
                SLOTS_PER_COURT,
            )
            return cls.empty()
        return cls(*ids)

    @classmethod
    def filled_in_order(cls, player_ids: list[PlayerId]) -> CourtSlots:
        """Place the ids in the first N slots, the remaining slots stay empty."""
        padded: list[Optional[PlayerId]] = list(player_ids[:SLOTS_PER_COURT])
        padded.extend([None] * (SLOTS_PER_COURT - len(padded)))
        return cls(*padded)

    def to_list(self) -> list[Optional[PlayerId]]:
        return [self.slot0, self.slot1, self.slot2, self.slot3]

    @property
    def team_a(self) -> tuple[Optional[PlayerId], Optional[PlayerId]]:
        return (self.slot0, self.slot1)

    @property
    def team_b(self) -> tuple[Optional[PlayerId], Optional[PlayerId]]:
        return (self.slot2, self.slot3)

    def player_ids(self) -> list[PlayerId]:
        """Occupied slots only, in slot order."""
        return [pid for pid in self.to_list() if pid is not None]

    @property
    def occupied_count(self) -> int:
        return len(self.player_ids())

    @property
    def is_full(self) -> bool:
        return self.occupied_count == SLOTS_PER_COURT

    @property
    def is_empty(self) -> bool:
        return self.occupied_count == 0

    def contains(self, player_id: PlayerId) -> bool:
        return player_id in self.player_ids()

    def without(self, player_id: PlayerId) -> CourtSlots:
        """Same slots with the player (if seated here) taken off."""
        return CourtSlots(*[None if pid == player_id else pid for pid in self.to_list()])

    def with_player_at(self, index: int, player_id: Optional[PlayerId]) -> CourtSlots:
        if not 0 <= index < SLOTS_PER_COURT:
            raise IndexError(f"Slot index {index} out of range 0-{SLOTS_PER_COURT - 1}")
        return replace(self, **{f"slot{index}": player_id})

"""Split the four players of a court into two teams of similar strength."""

import logging
from typing import Sequence

from src.allocation.roster import Player
from src.allocation.slots import SLOTS_PER_COURT, CourtSlots

logger = logging.getLogger(__name__)


def by_level_descending(players: Sequence[Player]) -> list[Player]:
    # sorted() is stable: equal levels keep their incoming order
    return sorted(players, key=lambda p: p.level, reverse=True)


def balance_teams(players: Sequence[Player]) -> CourtSlots:
    """
    Best + Worst (Team A, slots 0/1) against the two middle players (Team B, slots 2/3).
    ----

    Sorting the four by level gives [best, second, third, worst] and the slots become
    [best, worst, second, third].

    Anything other than 4 players should not reach this function. If it does, the players are seated
    in the order given and the remaining slots stay empty.
    """
    if len(players) != SLOTS_PER_COURT:
        logger.warning(
            "Court received %d players instead of %d. Seating them without team balancing.",
            len(players),
            SLOTS_PER_COURT,
        )
        return CourtSlots.filled_in_order([p.id for p in players])

    best, second, third, worst = by_level_descending(players)
    return CourtSlots(slot0=best.id, slot1=worst.id, slot2=second.id, slot3=third.id)

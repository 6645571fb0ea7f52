"""Random assignment mode: no priorities, no balancing, just a uniform shuffle poured into the open courts."""

import random
from typing import Optional, Sequence, TypeVar

from src.allocation.roster import Court, Player, eligible_players
from src.allocation.slots import SLOTS_PER_COURT, CourtSlots

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """Uniform random permutation (Fisher-Yates) returned as a new list. The input is left as is."""
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def random_assignment(
    roster: Sequence[Player],
    courts: Sequence[Court],
    rng: Optional[random.Random] = None,
) -> list[Court]:
    """
    Seat the eligible players in random order, 4 per open court, courts in their listed order.

    Unlike `allocate`, the last court used may end up partially filled. Playing courts are returned unchanged.
    """
    courts = list(courts)
    shuffled = shuffle(eligible_players(list(roster), courts), rng)

    result: list[Court] = []
    position = 0
    for court in courts:
        if court.is_locked:
            result.append(court)
            continue
        batch = shuffled[position : position + SLOTS_PER_COURT]
        position += len(batch)
        result.append(court.reset().with_slots(CourtSlots.filled_in_order([p.id for p in batch])))
    return result

"""
Smart allocation: decide who goes on which open court, and in which team.

The entrypoint `allocate` is a pure function over a snapshot of the session. Courts with a match in
progress, and the players on them, are left alone; every other court is either filled with exactly
four players or emptied.
"""

import logging
from typing import Optional, Sequence

from src.allocation.balance import balance_teams, by_level_descending
from src.allocation.history import Round
from src.allocation.roster import Court, Player, eligible_players
from src.allocation.slots import SLOTS_PER_COURT, CourtSlots
from src.allocation.snake import snake_distribute
from src.allocation.stats import (
    RandomTieBreaker,
    TieBreaker,
    compute_player_stats,
    selection_queue,
)

logger = logging.getLogger(__name__)


def fillable_court_count(open_court_count: int, eligible_count: int) -> int:
    """Only full courts are created: no court gets 1-3 players."""
    return min(open_court_count, eligible_count // SLOTS_PER_COURT)


def allocate(
    roster: Sequence[Player],
    courts: Sequence[Court],
    history: Sequence[Round],
    tie_breaker: Optional[TieBreaker] = None,
) -> list[Court]:
    """
    Compute a new court assignment.
    ----

    1. Courts that are playing (and their players) are locked.
    2. Eligible players: active and not on a locked court.
    3. Stats per eligible player from history (played count, rounds rested, random tie-break).
    4. Priority: least played > longest rested > tie-break.
    5. Capacity: min(open courts, eligible // 4) courts, the top 4 * that many players are selected.
    6. Selected players sorted by level are snaked over the first `fillable` open courts (court order kept).
    7. Every filled court is split Best + Worst vs Second + Third.
    8. Output keeps the order of `courts`: playing courts unchanged, filled courts updated, other open courts emptied.

    ----
    The inputs are never mutated. Pass a tie_breaker to make step 4 reproducible.
    """
    tie_breaker = tie_breaker or RandomTieBreaker()
    courts = list(courts)

    available = eligible_players(list(roster), courts)
    queue = selection_queue(compute_player_stats(available, history, tie_breaker))

    open_courts = [court for court in courts if not court.is_locked]
    fillable = fillable_court_count(len(open_courts), len(available))
    selected = queue[: fillable * SLOTS_PER_COURT]

    logger.debug(
        "Allocating %d of %d eligible players over %d of %d open courts (%d sitting out)",
        len(selected),
        len(available),
        fillable,
        len(open_courts),
        len(available) - len(selected),
    )

    assignments: dict[str, CourtSlots] = {}
    if fillable > 0:
        buckets = snake_distribute(by_level_descending(selected), fillable)
        for court, players in zip(open_courts[:fillable], buckets):
            assignments[court.id] = balance_teams(players)

    return [_merge(court, assignments) for court in courts]


def _merge(court: Court, assignments: dict[str, CourtSlots]) -> Court:
    if court.is_locked:
        return court
    if court.id in assignments:
        return court.reset().with_slots(assignments[court.id])
    return court.reset()

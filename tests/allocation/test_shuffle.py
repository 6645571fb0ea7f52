"""Unit tests for /src/allocation/shuffle.py"""

import random

from src.allocation.roster import Court, Player
from src.allocation.shuffle import random_assignment, shuffle
from src.allocation.slots import CourtSlots
from src.core.shared_types import CourtStatus


def make_players(count: int) -> list[Player]:
    return [Player(id=f"p{i}", name=f"Player {i}", is_active=True, level=5) for i in range(count)]


def test_shuffle_keeps_all_items() -> None:
    items = [1, 2, 3, 4, 5]
    shuffled = shuffle(items, random.Random(3))
    assert len(shuffled) == len(items)
    assert sorted(shuffled) == items


def test_shuffle_does_not_change_input() -> None:
    items = [1, 2, 3, 4, 5]
    original = list(items)
    shuffle(items)
    assert items == original


def test_shuffle_is_reproducible_with_seeded_rng() -> None:
    items = list(range(20))
    assert shuffle(items, random.Random(42)) == shuffle(items, random.Random(42))


def test_shuffle_reaches_every_permutation() -> None:
    """3 items have 6 orderings, all of them should show up."""
    rng = random.Random(0)
    seen = {tuple(shuffle(["a", "b", "c"], rng)) for _ in range(300)}
    assert len(seen) == 6


def test_shuffle_empty_and_single() -> None:
    assert shuffle([]) == []
    assert shuffle(["only"]) == ["only"]


def test_random_assignment_fills_courts_in_order() -> None:
    players = make_players(6)
    courts = [Court(id=f"c{i}", name=f"Court {i}") for i in range(3)]

    result = random_assignment(players, courts, random.Random(1))

    assert result[0].slots.occupied_count == 4
    # leftover players end up on the next court, partially filled
    assert result[1].slots.occupied_count == 2
    assert result[1].slots.to_list()[2:] == [None, None]
    assert result[2].slots.is_empty
    seated = [pid for c in result for pid in c.slots.player_ids()]
    assert sorted(seated) == sorted(p.id for p in players)


def test_random_assignment_skips_playing_courts_and_their_players() -> None:
    players = make_players(8)
    players[7] = Player(id="p7", name="Player 7", is_active=False, level=5)
    playing = Court(
        id="c0",
        name="Court 1",
        status=CourtStatus.PLAYING,
        slots=CourtSlots.from_list(["p0", "p1", "p2", "p3"]),
    )
    open_court = Court(id="c1", name="Court 2", slots=CourtSlots.from_list(["p7", None, None, None]))

    result = random_assignment(players, [playing, open_court], random.Random(5))

    assert result[0] is playing
    assert sorted(result[1].slots.player_ids()) == ["p4", "p5", "p6"]

"""Unit tests for /src/allocation/balance.py"""

import logging

import pytest

from src.allocation.balance import balance_teams
from src.allocation.roster import Player


def make_player(level: int) -> Player:
    return Player(id=f"p{level}", name=f"Player {level}", is_active=True, level=level)


def test_best_and_worst_against_the_middle() -> None:
    players = [make_player(level) for level in (6, 10, 4, 8)]
    slots = balance_teams(players)
    assert slots.to_list() == ["p10", "p4", "p8", "p6"]


def test_balanced_teams_are_close_in_total_level() -> None:
    players = [make_player(level) for level in (18, 12, 9, 1)]
    slots = balance_teams(players)
    levels = {p.id: p.level for p in players}
    team_a = sum(levels[pid] for pid in slots.team_a if pid)
    team_b = sum(levels[pid] for pid in slots.team_b if pid)
    # pure rank split would be 30 vs 10
    assert abs(team_a - team_b) == 2


def test_equal_levels_keep_incoming_order() -> None:
    players = [
        Player(id=pid, name=pid, is_active=True, level=5) for pid in ("a", "b", "c", "d")
    ]
    assert balance_teams(players).to_list() == ["a", "d", "b", "c"]


def test_partial_court_is_seated_in_order(caplog: pytest.LogCaptureFixture) -> None:
    """Fallback: fewer than 4 players are seated in the first slots, no balancing, a warning is logged."""
    players = [make_player(level) for level in (3, 9, 5)]
    with caplog.at_level(logging.WARNING, logger="src.allocation.balance"):
        slots = balance_teams(players)
    assert slots.to_list() == ["p3", "p9", "p5", None]
    assert "instead of 4" in caplog.text

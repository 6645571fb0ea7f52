"""
Per-player statistics derived from match history, and the priority order built on top of them.
"""

import random
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from src.allocation.history import Round, plays_in
from src.allocation.roster import Player

# Rest value for a player who has never played: outranks any real number of rounds
REST_SENTINEL = 999

# matches played, keyed by player id
PlayedCounts = dict[str, int]


class TieBreaker(Protocol):
    """Source of the random draw used only to order players that are otherwise tied."""

    def draw(self) -> float:
        """A float in [0, 1)."""
        ...


class RandomTieBreaker:
    """TieBreaker backed by its own random.Random (seed it for reproducible allocations)."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def draw(self) -> float:
        return self._rng.random()


@dataclass(frozen=True)
class PlayerStats:
    player: Player
    played_count: int
    last_round_index: int
    rest_rounds: int
    tie_break: float


def player_history(player: Player, history: Sequence[Round]) -> tuple[int, int]:
    """
    Scan the full history for one player.

    Returns (played_count, last_round_index). last_round_index is -1 when the player never played.
    """
    played_count = 0
    last_round_index = -1
    for round_idx, this_round in enumerate(history):
        for match in this_round.matches:
            if plays_in(match, player.name):
                played_count += 1
                last_round_index = round_idx
    return played_count, last_round_index


def rest_rounds(last_round_index: int, round_count: int) -> int:
    """Rounds elapsed since the player last appeared (the round itself included)."""
    if last_round_index == -1:
        return REST_SENTINEL
    return round_count - last_round_index


def compute_player_stats(
    players: Sequence[Player], history: Sequence[Round], tie_breaker: TieBreaker
) -> list[PlayerStats]:
    """Statistics for every given player. One fresh tie-break draw per player, in roster order."""
    stats: list[PlayerStats] = []
    for player in players:
        played_count, last_round_index = player_history(player, history)
        stats.append(
            PlayerStats(
                player=player,
                played_count=played_count,
                last_round_index=last_round_index,
                rest_rounds=rest_rounds(last_round_index, len(history)),
                tie_break=tie_breaker.draw(),
            )
        )
    return stats


def priority_key(stats: PlayerStats) -> tuple[int, int, float]:
    """Least played first, then longest rested, then highest tie-break draw."""
    return (stats.played_count, -stats.rest_rounds, -stats.tie_break)


def selection_queue(stats: Sequence[PlayerStats]) -> list[Player]:
    """Players ordered from most to least deserving of a court slot."""
    return [s.player for s in sorted(stats, key=priority_key)]


def played_counts(players: Sequence[Player], history: Sequence[Round]) -> PlayedCounts:
    """Number of matches played, keyed by player id (shown next to each name in the roster)."""
    return {player.id: player_history(player, history)[0] for player in players}

"""
The Session class is the entrypoint into the domain layer for the service layer.
It holds one club evening's roster, courts and match history, and implements every change the organiser
can make to them (allocation, seating players by hand, starting/finishing matches, editing the roster) -->
the service layer converts it from/to a SessionModel to persist it.
"""

import random
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional, Self
from uuid import uuid4

from src.allocation.engine import allocate
from src.allocation.history import (
    Round,
    record_match_result,
    record_match_start,
)
from src.allocation.roster import Court, Player
from src.allocation.shuffle import random_assignment
from src.allocation.slots import SLOTS_PER_COURT
from src.allocation.stats import PlayedCounts, TieBreaker, played_counts
from src.core.exceptions import CourtStateError, InvalidRequestError, SessionStateError
from src.core.models import SessionModel
from src.core.shared_types import CourtStatus, Gender, Hall, MatchResult


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid4().hex


@dataclass
class Session:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    players: list[Player]
    courts: list[Court]
    rounds: tuple[Round, ...]

    @classmethod
    def from_model(cls, model: SessionModel) -> Self:
        return cls(
            players=[Player.from_model(p) for p in model.players],
            courts=[Court.from_model(c) for c in model.courts],
            rounds=tuple(Round.from_model(r) for r in model.rounds),
        )

    def to_model(self) -> SessionModel:
        return SessionModel(
            players=[p.to_model() for p in self.players],
            courts=[c.to_model() for c in self.courts],
            rounds=[r.to_model() for r in self.rounds],
        )

    @classmethod
    def new_session(cls, court_names: Optional[list[str]] = None) -> Self:
        """Empty roster and history, with one open court per given name."""
        courts = [Court(id=new_id(), name=_clean_name(name)) for name in court_names or []]
        return cls(players=[], courts=courts, rounds=())

    # --- ALLOCATION ---
    def smart_allocate(self, tie_breaker: Optional[TieBreaker] = None) -> None:
        self.courts = allocate(self.players, self.courts, self.rounds, tie_breaker)

    def random_allocate(self, rng: Optional[random.Random] = None) -> None:
        self.courts = random_assignment(self.players, self.courts, rng)

    def clear_courts(self) -> None:
        """Empty every court that is not playing."""
        self.courts = [court if court.is_locked else court.reset() for court in self.courts]

    # --- SEATING BY HAND ---
    def assign_player(self, court_id: str, player_id: str, slot: int) -> None:
        """
        Seat a player in a specific slot.

        The player is first taken off any other open court. Whoever sat in the target slot goes back to the waiting list.
        """
        if not 0 <= slot < SLOTS_PER_COURT:
            raise InvalidRequestError(f"Slot must be between 0 and {SLOTS_PER_COURT - 1}, got {slot}")
        target = self._get_court(court_id)
        self._assert_not_playing(target)
        self._get_player(player_id)
        self._assert_not_on_playing_court(player_id)

        self._unseat(player_id)
        self.courts = [
            court.with_slots(court.slots.with_player_at(slot, player_id)) if court.id == court_id else court
            for court in self.courts
        ]

    def remove_player(self, player_id: str) -> None:
        """Send a player back to the waiting list."""
        self._get_player(player_id)
        self._assert_not_on_playing_court(player_id)
        self._unseat(player_id)

    # --- MATCHES ---
    def start_match(self, court_id: str, now: Optional[datetime] = None) -> None:
        """Lock a full court and record the match in history."""
        court = self._get_court(court_id)
        self._assert_not_playing(court)
        if not court.slots.is_full:
            raise CourtStateError(
                f"Court {court.name!r} has {court.slots.occupied_count} players. A match needs {SLOTS_PER_COURT}."
            )
        started = replace(court, status=CourtStatus.PLAYING)
        self._replace_court(started)
        self.rounds = record_match_start(self.rounds, started, self.players, now or utc_now())

    def finish_match(self, court_id: str, result: Optional[MatchResult]) -> None:
        """Record the winner (None: no result) and open the court up again, empty."""
        court = self._get_court(court_id)
        if not court.is_locked:
            raise CourtStateError(f"Court {court.name!r} has no match in progress.")
        self.rounds = record_match_result(self.rounds, court.name, result)
        self._replace_court(court.reset())

    def team_players(self, court_id: str) -> dict[MatchResult, list[Player]]:
        """Players per team on a court (used to pick the winner when finishing a match)."""
        court = self._get_court(court_id)
        players_by_id = {p.id: p for p in self.players}

        def _team(ids: tuple[Optional[str], Optional[str]]) -> list[Player]:
            return [players_by_id[pid] for pid in ids if pid is not None and pid in players_by_id]

        return {
            MatchResult.TEAM_A: _team(court.slots.team_a),
            MatchResult.TEAM_B: _team(court.slots.team_b),
        }

    # --- COURTS ---
    def add_court(self, name: str, hall: Hall = Hall.A) -> Court:
        court = Court(id=new_id(), name=_clean_name(name), hall=hall)
        self.courts = self.courts + [court]
        return court

    def rename_court(self, court_id: str, name: str) -> None:
        # History refers to courts by name, renaming mid-match would orphan the match result
        court = self._get_court(court_id)
        self._assert_not_playing(court)
        self._replace_court(replace(court, name=_clean_name(name)))

    def delete_court(self, court_id: str) -> None:
        court = self._get_court(court_id)
        self._assert_not_playing(court)
        self.courts = [c for c in self.courts if c.id != court_id]

    # --- ROSTER ---
    def add_player(self, name: str, level: int, gender: Optional[Gender] = None) -> Player:
        player = Player(id=new_id(), name=_clean_name(name), is_active=True, level=level, gender=gender)
        self.players = self.players + [player]
        return player

    def update_player(
        self,
        player_id: str,
        name: Optional[str] = None,
        level: Optional[int] = None,
        gender: Optional[Gender] = None,
    ) -> Player:
        """
        Change name / level / gender.

        NOTE: history is keyed by name. After a rename the player's earlier matches no longer count towards their priority.
        """
        player = self._get_player(player_id)
        updated = replace(
            player,
            name=_clean_name(name) if name is not None else player.name,
            level=level if level is not None else player.level,
            gender=gender if gender is not None else player.gender,
        )
        self.players = [updated if p.id == player_id else p for p in self.players]
        return updated

    def set_player_active(self, player_id: str, is_active: bool) -> None:
        """Mark a player present/absent. An absent player is taken off the open courts."""
        player = self._get_player(player_id)
        if not is_active:
            self._assert_not_on_playing_court(player_id)
            self._unseat(player_id)
        self.players = [replace(player, is_active=is_active) if p.id == player_id else p for p in self.players]

    def delete_player(self, player_id: str) -> None:
        self._get_player(player_id)
        self._assert_not_on_playing_court(player_id)
        self._unseat(player_id)
        self.players = [p for p in self.players if p.id != player_id]

    def played_counts(self) -> PlayedCounts:
        return played_counts(self.players, self.rounds)

    # -- PRIVATE HELPERS ---
    def _get_court(self, court_id: str) -> Court:
        court = next((c for c in self.courts if c.id == court_id), None)
        if court is None:
            raise SessionStateError(f"Court with {court_id=} not found.")
        return court

    def _get_player(self, player_id: str) -> Player:
        player = next((p for p in self.players if p.id == player_id), None)
        if player is None:
            raise SessionStateError(f"Player with {player_id=} not found.")
        return player

    def _replace_court(self, updated: Court) -> None:
        self.courts = [updated if c.id == updated.id else c for c in self.courts]

    def _unseat(self, player_id: str) -> None:
        """Take the player off every open court (playing courts are never touched)."""
        self.courts = [
            court if court.is_locked else court.with_slots(court.slots.without(player_id))
            for court in self.courts
        ]

    def _assert_not_playing(self, court: Court) -> None:
        if court.is_locked:
            raise CourtStateError(f"Court {court.name!r} has a match in progress.")

    def _assert_not_on_playing_court(self, player_id: str) -> None:
        for court in self.courts:
            if court.is_locked and court.slots.contains(player_id):
                raise CourtStateError(f"Player {player_id!r} is playing on court {court.name!r}.")


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise InvalidRequestError("Name cannot be empty.")
    return cleaned

"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import random
from typing import Callable, Optional
from uuid import UUID

from src.allocation.session import Session
from src.allocation.stats import RandomTieBreaker, TieBreaker
from src.api.models import (
    AddCourtRequest,
    AddPlayerRequest,
    AssignPlayerRequest,
    CourtRequest,
    CourtResponse,
    CreateSessionRequest,
    FinishMatchRequest,
    MatchResponse,
    PlayerActiveRequest,
    PlayerRequest,
    PlayerResponse,
    RenameCourtRequest,
    RoundResponse,
    SessionRequest,
    SessionResponse,
    UpdatePlayerRequest,
)
from src.core.config import Settings, get_settings
from src.core.exceptions import RepositoryError
from src.core.models import SessionModel
from src.db.repository import SessionRepository

logger = logging.getLogger(__name__)


class RotationService:
    """Orchestration of layers for court rotation."""

    def __init__(
        self,
        repository: SessionRepository,
        tie_breaker: Optional[TieBreaker] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.repo = repository
        self.tie_breaker = tie_breaker
        self.rng = rng

    # -- API routes logic ---
    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Start a new club session with the given (empty) courts."""
        new_session = Session.new_session(request.court_names)
        stored_session, session_id = self.repo.create_session(new_session.to_model())
        logger.info("Created session %s with %d courts", session_id, len(request.court_names))
        return self._create_session_response(session_id, stored_session)

    def get_session(self, request: SessionRequest) -> SessionResponse:
        """Retrieve current state (polled by the frontend)."""
        session_model = self._fetch_session(request.session_id)
        return self._create_session_response(request.session_id, session_model)

    def smart_allocate(self, request: SessionRequest) -> SessionResponse:
        """Fill the open courts by priority, snake distribution and team balancing."""
        return self._apply(
            request.session_id,
            "smart allocation",
            lambda session: session.smart_allocate(self.tie_breaker),
        )

    def random_allocate(self, request: SessionRequest) -> SessionResponse:
        """Fill the open courts in random order."""
        return self._apply(
            request.session_id,
            "random allocation",
            lambda session: session.random_allocate(self.rng),
        )

    def clear_courts(self, request: SessionRequest) -> SessionResponse:
        return self._apply(request.session_id, "clear courts", lambda session: session.clear_courts())

    def assign_player(self, request: AssignPlayerRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "assign player",
            lambda session: session.assign_player(request.court_id, request.player_id, request.slot),
        )

    def remove_player(self, request: PlayerRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "remove player",
            lambda session: session.remove_player(request.player_id),
        )

    def start_match(self, request: CourtRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "start match",
            lambda session: session.start_match(request.court_id),
        )

    def finish_match(self, request: FinishMatchRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "finish match",
            lambda session: session.finish_match(request.court_id, request.winner),
        )

    def add_player(self, request: AddPlayerRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "add player",
            lambda session: session.add_player(request.name, request.level, request.gender),
        )

    def update_player(self, request: UpdatePlayerRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "update player",
            lambda session: session.update_player(
                request.player_id, name=request.name, level=request.level, gender=request.gender
            ),
        )

    def set_player_active(self, request: PlayerActiveRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "set player active",
            lambda session: session.set_player_active(request.player_id, request.is_active),
        )

    def delete_player(self, request: PlayerRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "delete player",
            lambda session: session.delete_player(request.player_id),
        )

    def add_court(self, request: AddCourtRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "add court",
            lambda session: session.add_court(request.name, request.hall),
        )

    def rename_court(self, request: RenameCourtRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "rename court",
            lambda session: session.rename_court(request.court_id, request.name),
        )

    def delete_court(self, request: CourtRequest) -> SessionResponse:
        return self._apply(
            request.session_id,
            "delete court",
            lambda session: session.delete_court(request.court_id),
        )

    def delete_session(self, request: SessionRequest) -> None:
        """Handle a request to delete a Session record."""
        self.repo.delete_session(request.session_id)
        logger.info("Deleted session %s", request.session_id)

    # -- Internal helpers --
    def _apply(
        self, session_id: UUID, action: str, operation: Callable[[Session], object]
    ) -> SessionResponse:
        """
        Load -> run domain operation -> persist -> respond.

        Domain errors propagate before anything is written.
        """
        stored_model = self._fetch_session(session_id)
        session = Session.from_model(stored_model)
        operation(session)
        updated = session.to_model()
        self.repo.update_session(session_id, updated)
        logger.info("Session %s: %s", session_id, action)
        return self._create_session_response(session_id, updated)

    def _create_session_response(self, session_id: UUID, model: SessionModel) -> SessionResponse:
        """Convert info in SessionModel to a SessionResponse (played counts included)."""
        session = Session.from_model(model)
        counts = session.played_counts()
        return SessionResponse(
            session_id=session_id,
            players=[
                PlayerResponse(
                    id=p.id,
                    name=p.name,
                    is_active=p.is_active,
                    level=p.level,
                    gender=p.gender,
                    played_count=counts[p.id],
                )
                for p in session.players
            ],
            courts=[
                CourtResponse(
                    id=c.id,
                    name=c.name,
                    status=c.status,
                    hall=c.hall,
                    player_ids=c.slots.to_list(),
                )
                for c in session.courts
            ],
            rounds=[
                RoundResponse(
                    id=r.id,
                    number=r.number,
                    started_at=r.started_at.isoformat(),
                    matches=[
                        MatchResponse(
                            court_name=m.court_name,
                            player_names=list(m.player_names),
                            started_at=m.started_at.isoformat(),
                            result=m.result,
                        )
                        for m in r.matches
                    ],
                )
                for r in session.rounds
            ],
        )

    def _fetch_session(self, session_id: UUID) -> SessionModel:
        """Attempt to find the session in the repository and raise error if it fails."""
        session_model = self.repo.get_session(session_id)
        if session_model is None:
            raise RepositoryError(f"Session with {session_id=} not found.")
        return session_model


def build_service(repository: SessionRepository, settings: Optional[Settings] = None) -> RotationService:
    """Service with tie-breaks / shuffles seeded from the settings (unseeded by default)."""
    settings = settings or get_settings()
    return RotationService(
        repository,
        tie_breaker=RandomTieBreaker(settings.seed),
        rng=random.Random(settings.seed),
    )

"""Implementation of (Session)Repository using SQLAlchemy"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import (
    CourtModel,
    MatchModel,
    PlayerModel,
    RoundModel,
    SessionModel,
)
from src.db.schema import DBCourt, DBPlayer, DBRound, DBSession


def as_utc(moment: datetime) -> datetime:
    """SQLite hands back naive datetimes. Everything stored is UTC, so re-attach the zone."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class SQLSessionRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_session(self, session_id: UUID) -> SessionModel | None:
        """Get session by ID, if record exists."""
        session_db = self._fetch_session(session_id)
        if session_db:
            return self._to_model(session_db)
        return None

    def create_session(self, session: SessionModel) -> tuple[SessionModel, UUID]:
        """Store new session and return the stored data + newly created session ID."""
        new_id = uuid4()
        session_db = DBSession(id=new_id)
        self._write_children(session_db, session)
        self.db.add(session_db)
        self.db.commit()
        self.db.refresh(session_db)
        return self._to_model(session_db), new_id

    def update_session(self, session_id: UUID, session: SessionModel) -> SessionModel | None:
        """Replace roster, courts and history of an existing record."""
        session_db = self._fetch_session(session_id)
        if not session_db:
            return None
        self._write_children(session_db, session)
        self.db.commit()
        self.db.refresh(session_db)
        return self._to_model(session_db)

    def delete_session(self, session_id: UUID) -> SessionModel | None:
        """Remove a session's record."""
        session_db = self._fetch_session(session_id)
        if not session_db:
            return None
        session_model = self._to_model(session_db)
        self.db.delete(session_db)
        self.db.commit()
        return session_model

    def _fetch_session(self, session_id: UUID) -> DBSession | None:
        query = select(DBSession).where(DBSession.id == session_id)
        return self.db.scalar(query)

    def _write_children(self, session_db: DBSession, session: SessionModel) -> None:
        """Rows are rewritten as a whole (delete-orphan cascade removes the old ones)."""
        session_db.players = [
            DBPlayer(
                position=idx,
                player_id=p.id,
                name=p.name,
                is_active=p.is_active,
                level=p.level,
                gender=p.gender,
            )
            for idx, p in enumerate(session.players)
        ]
        session_db.courts = [
            DBCourt(
                position=idx,
                court_id=c.id,
                name=c.name,
                status=c.status,
                hall=c.hall,
                player_ids=list(c.player_ids),
            )
            for idx, c in enumerate(session.courts)
        ]
        session_db.rounds = [
            DBRound(
                position=idx,
                round_id=r.id,
                number=r.number,
                started_at=r.started_at,
                matches=[self._match_to_json(m) for m in r.matches],
            )
            for idx, r in enumerate(session.rounds)
        ]

    def _to_model(self, session_db: DBSession) -> SessionModel:
        """Convert SQLAlchemy model to data transfer model."""
        return SessionModel(
            players=[
                PlayerModel(
                    id=p.player_id,
                    name=p.name,
                    is_active=p.is_active,
                    level=p.level,
                    gender=p.gender,
                )
                for p in session_db.players
            ],
            courts=[
                CourtModel(
                    id=c.court_id,
                    name=c.name,
                    status=c.status,
                    player_ids=list(c.player_ids),
                    hall=c.hall,
                )
                for c in session_db.courts
            ],
            rounds=[
                RoundModel(
                    id=r.round_id,
                    number=r.number,
                    started_at=as_utc(r.started_at),
                    matches=[self._match_from_json(m) for m in r.matches],
                )
                for r in session_db.rounds
            ],
        )

    @staticmethod
    def _match_to_json(match: MatchModel) -> dict[str, Any]:
        return {
            "court_name": match.court_name,
            "player_names": list(match.player_names),
            "started_at": match.started_at.isoformat(),
            "result": match.result,
        }

    @staticmethod
    def _match_from_json(data: dict[str, Any]) -> MatchModel:
        return MatchModel(
            court_name=data["court_name"],
            player_names=list(data["player_names"]),
            started_at=as_utc(datetime.fromisoformat(data["started_at"])),
            result=data.get("result"),
        )

"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import JSON, DateTime, ForeignKey
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBSession(Base):
    __tablename__ = "sessions"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    # position columns keep the order the organiser sees (courts order drives allocation)
    players: Mapped[list["DBPlayer"]] = relationship(
        cascade="all, delete-orphan", order_by="DBPlayer.position"
    )
    courts: Mapped[list["DBCourt"]] = relationship(
        cascade="all, delete-orphan", order_by="DBCourt.position"
    )
    rounds: Mapped[list["DBRound"]] = relationship(
        cascade="all, delete-orphan", order_by="DBRound.position"
    )


class DBPlayer(Base):
    __tablename__ = "players"
    pk: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    session_id: Mapped[UUID] = mapped_column(ForeignKey("sessions.id"))
    position: Mapped[int]
    player_id: Mapped[str]
    name: Mapped[str]
    is_active: Mapped[bool]
    level: Mapped[int]
    gender: Mapped[Optional[str]]


class DBCourt(Base):
    __tablename__ = "courts"
    pk: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    session_id: Mapped[UUID] = mapped_column(ForeignKey("sessions.id"))
    position: Mapped[int]
    court_id: Mapped[str]
    name: Mapped[str]
    status: Mapped[str]
    hall: Mapped[str]
    player_ids: Mapped[list[Optional[str]]] = mapped_column(JSON)


class DBRound(Base):
    __tablename__ = "rounds"
    pk: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    session_id: Mapped[UUID] = mapped_column(ForeignKey("sessions.id"))
    position: Mapped[int]
    round_id: Mapped[str]
    number: Mapped[int]
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    # list of {"court_name", "player_names", "started_at" (ISO 8601), "result"}
    matches: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)

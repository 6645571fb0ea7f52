"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Iterator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


class SequenceTieBreaker:
    """TieBreaker returning the given draws in order (then 0.0). Pins down the order of tied players."""

    def __init__(self, draws: list[float]) -> None:
        self._draws = iter(draws)

    def draw(self) -> float:
        return next(self._draws, 0.0)


@pytest.fixture
def fixed_tie_breaker() -> type[SequenceTieBreaker]:
    """Hand out the class so every test can pick its own draws."""
    return SequenceTieBreaker


@pytest.fixture
def db_session_repo() -> Iterator[Session]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)

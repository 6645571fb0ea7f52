"""Generate database session"""

from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine, inspect
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import get_settings
from src.db.schema import Base

settings = get_settings()
engine = create_engine(settings.database_url, echo=settings.db_echo)
SessionLocal = sessionmaker(bind=engine)


def init_db(bind: Optional[Engine] = None) -> list[str]:
    """Ensure all tables are created. Returns the table names present afterwards."""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    return inspect(bind).get_table_names()


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

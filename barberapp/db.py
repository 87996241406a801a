# barberapp/db.py

import logging

from sqlmodel import SQLModel, create_engine, Session

from .config import DATABASE_URL, DB_ECHO

logger = logging.getLogger(__name__)

# SQLite needs this to be shared across FastAPI's worker threads
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Engine = connection to the database
engine = create_engine(
    DATABASE_URL,
    echo=DB_ECHO,
    pool_pre_ping=True,
    connect_args=connect_args,
)


def create_db_and_tables():
    from . import models  # noqa: F401  registers the tables on SQLModel.metadata

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready")


# Dependency: one session per request
def get_session():
    with Session(engine) as session:
        yield session

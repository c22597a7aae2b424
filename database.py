import logging
import os
from typing import Iterator, Sequence

from sqlmodel import SQLModel, Session, create_engine, select
from sqlalchemy.engine import Engine
from dotenv import load_dotenv

from models import Room

logger = logging.getLogger(__name__)

# 1. Load environment variables from .env file
load_dotenv()

# 2. Get the URL. If it's not found, raise an error to fail fast.
DATABASE_URL = os.environ.get("DATABASE_URL")

if not DATABASE_URL:
    raise ValueError("DATABASE_URL is not set. Please check your .env file.")

DATABASE_ECHO = os.environ.get("DATABASE_ECHO", "false").lower() in ("1", "true", "yes")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

DEFAULT_ROOMS = ("Conference Room A", "Conference Room B", "Conference Room C")


def make_engine(url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


# 3. Create the Engine
engine = make_engine(DATABASE_URL, echo=DATABASE_ECHO)


def seed_rooms(session: Session, names: Sequence[str] = DEFAULT_ROOMS) -> None:
    """Insert the default rooms when the rooms table is empty."""
    if session.exec(select(Room)).first() is not None:
        return
    for name in names:
        session.add(Room(name=name))
    session.commit()
    logger.info("Seeded %d rooms", len(names))


def init_db(db_engine: Engine = engine) -> None:
    # This creates the tables if they don't exist
    SQLModel.metadata.create_all(db_engine)
    with Session(db_engine) as session:
        seed_rooms(session)


def get_session() -> Iterator[Session]:
    with Session(engine) as session:
        yield session

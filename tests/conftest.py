"""
Test configuration for pytest.
Points DATABASE_URL at an in-memory SQLite database before the app modules load.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlmodel import SQLModel, Session, create_engine
from sqlalchemy.pool import StaticPool

import models  # noqa: F401  registers the tables


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session

"""Shared pytest fixtures for contacts test suites."""

from collections.abc import Generator
import os
from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("CONTACTS_DATABASE_URL", "sqlite+pysqlite:///:memory:")


@pytest.fixture
def db_schema() -> Generator[None, None, None]:
    """Create the schema on the configured engine and drop it afterwards."""
    from app.db.base import engine
    from app.db.models import Base

    Base.metadata.create_all(engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(engine)


@pytest.fixture
def client(db_schema: None) -> Generator[TestClient, None, None]:
    """Provide an API test client backed by a fresh schema."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


class ToastRecorder:
    """Notifier double that keeps every toast it receives."""

    def __init__(self) -> None:
        self.events: list = []

    def __call__(self, event) -> None:
        self.events.append(event)


@pytest.fixture
def toasts() -> ToastRecorder:
    return ToastRecorder()

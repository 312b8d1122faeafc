from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from message_board_api.app.core.config import Settings
from message_board_api.app.main import create_app
from message_board_api.app.services.message_service import MessageStore


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1) -> datetime:
        self.now += timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 9, 1, 10, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock):
    return MessageStore(clock=clock)


@pytest.fixture
def static_dir(tmp_path):
    """A static root with an index page and one asset."""
    root = tmp_path / "static"
    root.mkdir()
    (root / "index.html").write_text("<h1>Message Board</h1>", encoding="utf-8")
    (root / "hello.txt").write_text("hello", encoding="utf-8")
    return root


@pytest.fixture
def client(store, static_dir):
    app = create_app(Settings(static_dir=str(static_dir)), store=store)
    with TestClient(app) as test_client:
        yield test_client

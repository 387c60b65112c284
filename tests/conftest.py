from datetime import datetime, timedelta, timezone

import pytest

from hanzi_srs.fsrs import database
from hanzi_srs.fsrs.constants import CardPhase
from hanzi_srs.fsrs.memory_state import CardState
from hanzi_srs.fsrs.scheduler import Scheduler


@pytest.fixture
def now():
    """Fixed review time; the scheduler never reads the clock."""
    return datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def review_card(now):
    """Review-state card: S=10, D=5, last reviewed 10 days ago."""
    return CardState(
        user_id="learner-1",
        character="学",
        state=CardPhase.REVIEW,
        stability=10.0,
        difficulty=5.0,
        reps=4,
        lapses=1,
        last_review=now - timedelta(days=10),
        next_review=now,
    )


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Fresh SQLite database behind DATABASE_URL."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'notebook.db'}")
    monkeypatch.delenv("TEST_MODE", raising=False)
    database.init_db()
    return database

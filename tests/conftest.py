from datetime import datetime, timezone

import pytest

from fitstreak.db.repository import TrackerRepository
from fitstreak.db.store import LocalJSONStore
from fitstreak.services.streak_tracker import StreakTracker

USER_ID = "user-1"
AS_OF = datetime(2024, 1, 3, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(tmp_path):
    return LocalJSONStore(str(tmp_path / "data"))


@pytest.fixture
def repository(store):
    return TrackerRepository(store)


@pytest.fixture
def tracker(repository):
    return StreakTracker(repository, clock=lambda: AS_OF, tz="UTC")

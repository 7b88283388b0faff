import json
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from github_activity.cache import CacheStore
from github_activity.models import Event

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_event(event_type: str, repo: str, created_at: str = "2024-05-01T10:00:00Z") -> Event:
    return Event(type=event_type, repo={"name": repo}, created_at=created_at)


def raw_event(event_type: str, repo: str, created_at: str = "2024-05-01T10:00:00Z") -> dict:
    return {
        "id": "1",
        "type": event_type,
        "actor": {"login": "alice"},
        "repo": {"id": 1, "name": repo, "url": f"https://api.github.com/repos/{repo}"},
        "payload": {},
        "public": True,
        "created_at": created_at,
    }


def fake_github(status: int = 200, body=None) -> MagicMock:
    """PyGithub stand-in whose requester answers every request with status/body"""
    github = MagicMock()
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    github.requester.requestJson.return_value = (status, {}, body)
    return github


@pytest.fixture
def store(tmp_path) -> CacheStore:
    return CacheStore(path=tmp_path / "cache.json", ttl=timedelta(hours=1))

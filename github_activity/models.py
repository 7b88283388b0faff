from datetime import datetime
from typing import Dict, List

from pydantic import AwareDatetime, BaseModel, ConfigDict, TypeAdapter


class EventRepo(BaseModel):
    """Repository reference embedded in a GitHub event"""

    model_config = ConfigDict(frozen=True)

    name: str


class Event(BaseModel):
    """Single public GitHub event, reduced to the fields we display"""

    model_config = ConfigDict(frozen=True)

    type: str
    repo: EventRepo
    # kept in wire format, parsed at display time
    created_at: str

    @property
    def repo_name(self) -> str:
        return self.repo.name


class CacheEntry(BaseModel):
    """Events snapshot for one user together with the moment it was fetched"""

    timestamp: AwareDatetime
    events: List[Event]

    def age_seconds(self, now: datetime) -> float:
        return (now - self.timestamp).total_seconds()


Cache = Dict[str, CacheEntry]

events_adapter = TypeAdapter(List[Event])
cache_adapter = TypeAdapter(Cache)

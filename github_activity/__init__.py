"""
GitHub User Activity

A command line tool that shows a GitHub user's recent public events, with a
time-boxed local cache.
"""

__version__ = "0.1.0"
__author__ = "GitHub Activity Contributors"

from github_activity.cache import CacheStore
from github_activity.client import ActivityFetcher
from github_activity.models import CacheEntry, Event

__all__ = [
    "ActivityFetcher",
    "CacheStore",
    "CacheEntry",
    "Event",
]

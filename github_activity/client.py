import os
from typing import List
from urllib.parse import quote

import requests
from github import Auth, Github
from loguru import logger
from pydantic import ValidationError

from github_activity.models import Event, events_adapter

USER_AGENT = "github-user-activity-app"


class ActivityError(Exception):
    """Base class for failures while fetching activity; str() is the user-facing message"""


class UserNotFoundError(ActivityError):
    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Error: Github user '{username}' not found.")


class FetchFailedError(ActivityError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Error: Failed to fetch data (HTTP {status_code}).")


class NetworkError(ActivityError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Error fetching data: {cause}")


class ResponseParseError(ActivityError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Error parsing JSON: {cause}")


class ActivityFetcher:
    def __init__(self, github: Github | None = None, token: str | None = None):
        if github is None:
            token = token or os.getenv("GITHUB_TOKEN")
            if not token:
                logger.warning("GITHUB_TOKEN not found, using unauthenticated requests (rate limited)")
                github = Github(user_agent=USER_AGENT, retry=None)
            else:
                github = Github(auth=Auth.Token(token), user_agent=USER_AGENT, retry=None)
        self.github = github

    def fetch(self, username: str) -> List[Event]:
        """Fetch the public events of a user in the order GitHub delivers them"""
        url = f"/users/{quote(username, safe='')}/events"
        logger.debug(f"GET {url}")

        try:
            status, _headers, body = self.github.requester.requestJson("GET", url)
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error fetching events for '{username}': {e}")
            raise NetworkError(e) from e

        if status == 404:
            raise UserNotFoundError(username)
        if status != 200:
            raise FetchFailedError(status)

        try:
            events = events_adapter.validate_json(body or "")
        except ValidationError as e:
            raise ResponseParseError(e) from e

        logger.debug(f"Fetched {len(events)} events for '{username}'")
        return events

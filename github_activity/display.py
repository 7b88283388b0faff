"""
Filtering and rendering of events for terminal output.
"""

from datetime import datetime
from typing import List, Sequence

from dateutil import parser
from loguru import logger

from github_activity.models import Event

MAX_EVENTS = 10
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp; date-only or offset-less values are rejected"""
    parsed = parser.isoparse(value)
    if parsed.tzinfo is None:
        raise ValueError(f"missing UTC offset in {value!r}")
    return parsed


def format_event(event: Event) -> str:
    """Render one event as a list line; raises ValueError or OverflowError on a bad timestamp"""
    created_at = parse_timestamp(event.created_at)
    return f"- {event.type} in {event.repo_name} on {created_at.strftime(TIME_FORMAT)}"


def render_activity(events: Sequence[Event], filter_type: str = "", limit: int = MAX_EVENTS) -> List[str]:
    """Build the output lines for up to `limit` events matching filter_type"""
    lines: List[str] = []
    matched = 0

    for event in events:
        if filter_type and event.type != filter_type:
            continue
        matched += 1

        try:
            lines.append(format_event(event))
        except (ValueError, OverflowError) as e:
            logger.warning(f"Skipping event with bad timestamp {event.created_at!r}: {e}")
            continue

        if len(lines) >= limit:
            break

    if matched == 0:
        if filter_type:
            return [f"No events found matching the filter '{filter_type}'."]
        return ["No events found."]

    return lines


def display_activity(events: Sequence[Event], filter_type: str = "") -> None:
    for line in render_activity(events, filter_type):
        print(line)
